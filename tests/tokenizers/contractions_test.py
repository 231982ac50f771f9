# pylint: disable=no-self-use,invalid-name
from en_tokenizer.tokenizers.contractions import (ARCHAIC_SPLIT, CLITIC, NEGATED_AUXILIARY,
                                                  PROTECTED_WORDS, ContractionMatch, match_contraction)


class TestMatchContraction:
    def test_protected_words_win_over_clitics(self):
        # "rec'd" also looks like "rec" + "'d".
        assert match_contraction("rec'd") == ContractionMatch(PROTECTED_WORDS, ("rec'd",))
        assert match_contraction("OK’d").rule_index == PROTECTED_WORDS
        assert match_contraction("Fo'c’sle").groups == ("Fo'c’sle",)

    def test_negated_auxiliaries(self):
        assert match_contraction("couldn't") == ContractionMatch(NEGATED_AUXILIARY, ("could", "n't"))
        assert match_contraction("WON’T").groups == ("WO", "N’T")
        assert match_contraction("can't").groups == ("ca", "n't")
        # Not an auxiliary, so it's just a word with an apostrophe.
        assert match_contraction("walkn't") is None

    def test_clitics(self):
        assert match_contraction("it's") == ContractionMatch(CLITIC, ("it", "'s", ""))
        assert match_contraction("we’ll").groups == ("we", "’ll", "")
        assert match_contraction("they've'").groups == ("they", "'ve", "'")
        assert match_contraction("he'd-").groups == ("he", "'d", "-")
        assert match_contraction("mother-in-law's").groups == ("mother-in-law", "'s", "")

    def test_archaic_split(self):
        assert match_contraction("'twas") == ContractionMatch(ARCHAIC_SPLIT, ("'t", "was"))
        assert match_contraction("’Twas").groups == ("’T", "was")

    def test_groups_always_cover_the_segment(self):
        for segment in ["rec'd", "shouldn't", "Bob's", "you're-", "'twas"]:
            assert "".join(match_contraction(segment).groups) == segment

    def test_no_match(self):
        for segment in ["", "word", "'s", "n't", "students'", "o'clock", "well-known"]:
            assert match_contraction(segment) is None

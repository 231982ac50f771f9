from collections import OrderedDict
from typing import List
import logging

from overrides import overrides

from . import apostrophe_guard
from .contractions import PROTECTED_WORDS, match_contraction
from .hyphen_resolver import HyphenApostropheResolver
from .url_joiner import join_emails_and_urls
from ..common.params import Params
from ..tagging.tagger import Tagger, WordListTagger

logger = logging.getLogger(__name__)  # pylint: disable=invalid-name

EN_DASH = "\u2013"

# Whitespace of every kind (including zero-width and bidi control characters), and the
# punctuation that is never part of a word.  The hyphen is deliberately missing.
DEFAULT_TOKENIZING_CHARACTERS = ("\u0020\u00A0\u115f\u1160\u1680"
                                 "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007"
                                 "\u2008\u2009\u200A\u200B\u200c\u200d\u200e\u200f"
                                 "\u2028\u2029\u202a\u202b\u202c\u202d\u202e\u202f"
                                 "\u205F\u2060\u2061\u2062\u2063\u206A\u206b\u206c\u206d"
                                 "\u206E\u206F\u3000\u3164\ufeff\uffa0\ufff9\ufffa\ufffb"
                                 ",.;()[]{}=*#\u2217+\u00d7\u00f7<>!?:~/\\\"'\u00ab\u00bb\u201e\u201d\u201c\u2018\u2019"
                                 "`\u00b4\u201b\u2032\u203a\u2039\u2026\u00bf\u00a1\u203c\u2047\u2048\u2049\u201a"
                                 "\t\n\r")


class WordSplitter:
    """
    A ``WordSplitter`` splits strings into words.  This is typically called a "tokenizer" in NLP,
    and the English implementation here is also available as ``tokenize``.
    """

    def split_words(self, sentence: str) -> List[str]:
        raise NotImplementedError

    def tokenize(self, text: str) -> List[str]:
        return self.split_words(text)

    @staticmethod
    def from_params(params: Params) -> 'WordSplitter':
        choice = params.pop_choice('type', list(word_splitters.keys()), default_to_first_choice=True)
        return word_splitters[choice].from_params(params)


class DelimiterWordSplitter(WordSplitter):
    """
    Splits text at every character in ``tokenizing_characters()``, keeping each of those
    characters as a token of its own, so that the tokens always concatenate back to the input.
    Email addresses and URLs that the splitting broke apart are joined back together at the end.

    This is language-agnostic; subclasses change the delimiter set by overriding
    ``tokenizing_characters``.

    Parameters
    ----------
    join_urls: bool, optional (default=True)
        Whether to re-join email addresses and URLs after splitting.
    """
    def __init__(self, join_urls: bool=True):
        self.join_urls = join_urls
        self._delimiters = frozenset(self.tokenizing_characters())

    def tokenizing_characters(self) -> str:
        return DEFAULT_TOKENIZING_CHARACTERS

    @staticmethod
    def split_on_delimiters(text: str, delimiters: str, retain_delimiters: bool=True) -> List[str]:
        """
        Splits ``text`` into maximal runs of non-delimiter characters.  If ``retain_delimiters``
        is ``True``, each delimiter character is also returned, as a single-character token, in
        its original position.
        """
        delimiters = frozenset(delimiters)
        tokens = []
        start = 0
        for index, character in enumerate(text):
            if character in delimiters:
                if index > start:
                    tokens.append(text[start:index])
                if retain_delimiters:
                    tokens.append(character)
                start = index + 1
        if start < len(text):
            tokens.append(text[start:])
        return tokens

    @overrides
    def split_words(self, sentence: str) -> List[str]:
        tokens = self.split_on_delimiters(sentence, self._delimiters)
        return self.join_emails_and_urls(tokens)

    def join_emails_and_urls(self, tokens: List[str]) -> List[str]:
        if not self.join_urls:
            return tokens
        return join_emails_and_urls(tokens)

    @classmethod
    def from_params(cls, params: Params) -> 'DelimiterWordSplitter':
        join_urls = params.pop_bool('join_emails_and_urls', True)
        params.assert_empty(cls.__name__)
        return cls(join_urls=join_urls)


class EnglishWordSplitter(DelimiterWordSplitter):
    """
    Splits English text into words, punctuation, hyphens and clitics, in a way that is lossless:
    joining the returned tokens gives back the input exactly.

    The English splitter differs from the plain ``DelimiterWordSplitter`` in a few ways:

    (1) Apostrophes are not delimiters.  Contractions are split where English grammar says they
        should be ("couldn't" -> "could" "n't", "it's" -> "it" "'s", "'twas" -> "'t" "was"),
        a few words are never split ("rec'd", "fo'c'sle"), and any other apostrophe is split off
        as punctuation unless the dictionary knows the word ("o'clock").
    (2) A hyphen at the start or end of a segment is its own token, but a hyphen inside a segment
        never splits it ("well-known", "SARS-CoV-2", and unknown compounds alike).
    (3) The en-dash is a delimiter, as it's used without surrounding spaces in English.

    Parameters
    ----------
    tagger: Tagger, optional (default=WordListTagger with only the bundled lexicon)
        Answers whether a hyphenated or apostrophed segment is a known word.
    join_urls: bool, optional (default=True)
        Whether to re-join email addresses and URLs after splitting.
    """
    def __init__(self, tagger: Tagger=None, join_urls: bool=True):
        if tagger is None:
            tagger = WordListTagger()
        self.resolver = HyphenApostropheResolver(tagger)
        super(EnglishWordSplitter, self).__init__(join_urls=join_urls)

    @overrides
    def tokenizing_characters(self) -> str:
        return super(EnglishWordSplitter, self).tokenizing_characters() + EN_DASH

    @overrides
    def split_words(self, sentence: str) -> List[str]:
        tokens = []
        guarded_text = apostrophe_guard.guard(sentence)
        for raw_segment in self.split_on_delimiters(guarded_text, self._delimiters):
            segment = apostrophe_guard.unguard(raw_segment)
            contraction = match_contraction(segment)
            if contraction is None:
                tokens.extend(self.resolver.resolve(segment))
            elif contraction.rule_index == PROTECTED_WORDS:
                # These stay whole whatever the dictionary thinks of them.
                tokens.extend(contraction.groups)
            else:
                logger.debug("Contraction rule %d matched %r", contraction.rule_index, segment)
                for group in contraction.groups:
                    tokens.extend(self.resolver.resolve(group))
        return self.join_emails_and_urls(tokens)

    @classmethod
    def from_params(cls, params: Params) -> 'EnglishWordSplitter':
        tagger = Tagger.from_params(params.pop('tagger', {}))
        join_urls = params.pop_bool('join_emails_and_urls', True)
        params.assert_empty(cls.__name__)
        return cls(tagger=tagger, join_urls=join_urls)


word_splitters = OrderedDict()  # pylint: disable=invalid-name
word_splitters['english'] = EnglishWordSplitter
word_splitters['delimiter'] = DelimiterWordSplitter

# pylint: disable=no-self-use,invalid-name,protected-access
from contextlib import nullcontext
import threading
import time

from overrides import overrides

from en_tokenizer.tagging.tagger import Tagger, TaggedWord, WordListTagger
from en_tokenizer.tokenizers.hyphen_resolver import HyphenApostropheResolver, SegmentKind


class RecordingTagger(Tagger):
    def __init__(self, known=()):
        self.known = set(known)
        self.queries = []

    @overrides
    def tag(self, word: str) -> TaggedWord:
        self.queries.append(word)
        return TaggedWord(word, ('X',) if word in self.known else ())


class ReentrantTagger(RecordingTagger):
    reentrant = True


class NonReentrantTagger(Tagger):
    """
    Notices if two threads are ever inside ``tag`` at the same time.
    """
    def __init__(self):
        self.inside = 0
        self.overlaps = 0

    @overrides
    def tag(self, word: str) -> TaggedWord:
        self.inside += 1
        if self.inside > 1:
            self.overlaps += 1
        time.sleep(0.001)
        self.inside -= 1
        return TaggedWord(word)


class TestHyphenApostropheResolver:
    def test_classify(self):
        resolver = HyphenApostropheResolver(RecordingTagger(known=['well-known']))
        assert resolver.classify("") == SegmentKind.EMPTY
        assert resolver.classify("-word") == SegmentKind.LEADING_HYPHEN
        assert resolver.classify("-word-") == SegmentKind.LEADING_HYPHEN
        assert resolver.classify("word-") == SegmentKind.TRAILING_HYPHEN
        assert resolver.classify("word") == SegmentKind.PLAIN
        assert resolver.classify("well-known") == SegmentKind.KNOWN_WORD
        assert resolver.classify("Al-Qaida") == SegmentKind.COMPOUND_EXCEPTION
        assert resolver.classify("foo'bar") == SegmentKind.UNKNOWN

    def test_edge_hyphens_are_split_off(self):
        resolver = HyphenApostropheResolver(RecordingTagger())
        assert resolver.resolve("-word") == ["-", "word"]
        assert resolver.resolve("word-") == ["word", "-"]
        assert resolver.resolve("--word-") == ["-", "-", "word", "-"]
        assert resolver.resolve("-") == ["-"]
        assert resolver.resolve("") == []

    def test_plain_segments_never_reach_the_tagger(self):
        tagger = RecordingTagger()
        resolver = HyphenApostropheResolver(tagger)
        assert resolver.resolve("word") == ["word"]
        assert tagger.queries == []

    def test_known_words_and_exceptions_stay_whole(self):
        resolver = HyphenApostropheResolver(RecordingTagger(known=['well-known', "o'clock"]))
        assert resolver.resolve("well-known") == ["well-known"]
        assert resolver.resolve("o’clock") == ["o’clock"]
        assert resolver.resolve("SARS-CoV-2") == ["SARS-CoV-2"]
        assert resolver.resolve("-McGraw-Hill-") == ["-", "McGraw-Hill", "-"]

    def test_tagger_sees_typewriter_apostrophes(self):
        tagger = RecordingTagger()
        HyphenApostropheResolver(tagger).resolve("rock’n’roll")
        assert tagger.queries == ["rock'n'roll"]

    def test_unknown_segments_split_at_apostrophes_only(self):
        resolver = HyphenApostropheResolver(RecordingTagger())
        assert resolver.resolve("foo-bar") == ["foo-bar"]
        assert resolver.resolve("foo'bar") == ["foo", "'", "bar"]
        assert resolver.resolve("foo-bar’s-baz") == ["foo-bar", "’", "s-baz"]
        assert resolver.resolve("''x") == ["'", "'", "x"]
        assert resolver.resolve("students'") == ["students", "'"]

    def test_lock_depends_on_tagger(self):
        assert isinstance(HyphenApostropheResolver(ReentrantTagger())._lock, nullcontext)
        assert not isinstance(HyphenApostropheResolver(WordListTagger())._lock, nullcontext)

    def test_concurrent_resolves_never_overlap_in_the_tagger(self):
        tagger = NonReentrantTagger()
        resolver = HyphenApostropheResolver(tagger)
        results = []

        def work():
            results.append([resolver.resolve("a-b'c") for _ in range(20)])

        threads = [threading.Thread(target=work) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert tagger.overlaps == 0
        assert all(result == ["a-b", "'", "c"] for thread_results in results for result in thread_results)

    def test_concurrent_classifies_never_overlap_in_the_tagger(self):
        tagger = NonReentrantTagger()
        resolver = HyphenApostropheResolver(tagger)

        def work():
            for _ in range(20):
                resolver.classify("a-b")

        threads = [threading.Thread(target=work) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert tagger.overlaps == 0

from contextlib import nullcontext
from enum import Enum
from typing import List
import logging
import re
import threading

from .apostrophe_guard import APOSTROPHES, normalize_apostrophes
from ..tagging.tagger import Tagger

logger = logging.getLogger(__name__)  # pylint: disable=invalid-name

HYPHEN = "-"

# Hyphenated words with odd capitalisation that the dictionary doesn't have.
COMPOUND_EXCEPTIONS = frozenset([
        "mers-cov",
        "mcgraw-hill",
        "sars-cov-2",
        "sars-cov",
        "ph-metre",
        "ph-metres",
        "anti-ivg",
        "anti-uv",
        "anti-vih",
        "al-qaida",
])

_APOSTROPHE_SPLIT = re.compile("([" + APOSTROPHES + "])")


class SegmentKind(Enum):
    EMPTY = 0
    LEADING_HYPHEN = 1
    TRAILING_HYPHEN = 2
    PLAIN = 3
    KNOWN_WORD = 4
    COMPOUND_EXCEPTION = 5
    UNKNOWN = 6


class HyphenApostropheResolver:
    """
    Decides whether a segment containing hyphens or apostrophes is one token or several.

    Hyphenation in English isn't regular enough to get right with rules, so we ask a dictionary:
    anything the ``Tagger`` knows (or that's in ``COMPOUND_EXCEPTIONS``) stays whole.  Anything
    else gets split at its apostrophes, which we then treat as punctuation.  Hyphens at the edges
    of a segment are always split off, but internal hyphens never are.

    The tagger may be stateful, so ``resolve`` holds a lock for its whole duration unless the
    tagger says it is reentrant.  Two threads tokenizing with the same resolver can interleave
    between segments, but never inside one.
    """
    def __init__(self, tagger: Tagger):
        self.tagger = tagger
        if tagger.reentrant:
            self._lock = nullcontext()
        else:
            self._lock = threading.RLock()

    def classify(self, segment: str) -> SegmentKind:
        with self._lock:
            return self._classify(segment)

    def _classify(self, segment: str) -> SegmentKind:
        if not segment:
            return SegmentKind.EMPTY
        if segment.startswith(HYPHEN):
            return SegmentKind.LEADING_HYPHEN
        if segment.endswith(HYPHEN):
            return SegmentKind.TRAILING_HYPHEN
        if HYPHEN not in segment and not any(apostrophe in segment for apostrophe in APOSTROPHES):
            return SegmentKind.PLAIN
        if self.tagger.tag(normalize_apostrophes(segment)).is_tagged:
            return SegmentKind.KNOWN_WORD
        if segment.lower() in COMPOUND_EXCEPTIONS:
            return SegmentKind.COMPOUND_EXCEPTION
        return SegmentKind.UNKNOWN

    def resolve(self, segment: str) -> List[str]:
        """
        Returns the tokens for ``segment``, in order.  Leading and trailing hyphens are peeled off
        one at a time (so "--word-" gives "-", "-", "word", "-"), and whatever is left in the
        middle is classified once.
        """
        with self._lock:
            leading = []
            trailing = []
            while True:
                kind = self._classify(segment)
                if kind == SegmentKind.LEADING_HYPHEN:
                    leading.append(HYPHEN)
                    segment = segment[1:]
                elif kind == SegmentKind.TRAILING_HYPHEN:
                    trailing.append(HYPHEN)
                    segment = segment[:-1]
                else:
                    break
            logger.debug("Segment %r classified as %s", segment, kind.name)
            if kind == SegmentKind.EMPTY:
                middle = []
            elif kind in (SegmentKind.PLAIN, SegmentKind.KNOWN_WORD, SegmentKind.COMPOUND_EXCEPTION):
                middle = [segment]
            elif kind == SegmentKind.UNKNOWN:
                middle = [piece for piece in _APOSTROPHE_SPLIT.split(segment) if piece]
            else:
                raise ValueError("Unhandled segment kind: %s" % kind)
            return leading + middle + trailing

from collections import OrderedDict
from typing import Dict, Iterable, List, Tuple
import codecs
import logging
import os

from overrides import overrides

from ..common.checks import ConfigurationError
from ..common.params import Params

logger = logging.getLogger(__name__)  # pylint: disable=invalid-name

CLOSED_CLASS_LEXICON = os.path.join(os.path.dirname(__file__), 'lexicon', 'closed_class.txt')


class TaggedWord:
    """
    The answer a ``Tagger`` gives for a single word form: the form that was looked up, and the
    (possibly empty) tags the dictionary has for it.  We don't interpret the tags anywhere in
    tokenization; all we care about is whether there are any.
    """
    def __init__(self, word: str, tags: Tuple[str, ...]=()):
        self.word = word
        self.tags = tuple(tags)

    @property
    def is_tagged(self) -> bool:
        return len(self.tags) > 0

    def __eq__(self, other):
        if not isinstance(other, TaggedWord):
            return NotImplemented
        return self.word == other.word and self.tags == other.tags

    def __hash__(self):
        return hash((self.word, self.tags))

    def __repr__(self):
        return 'TaggedWord(%r, %r)' % (self.word, self.tags)


class Tagger:
    """
    A ``Tagger`` answers the question "is this exact string a word form we know about?".  The
    tokenizer uses it to decide whether a hyphenated or apostrophed segment should be kept whole.

    Implementations are allowed to be stateful and non-reentrant (caches, lazily loaded corpora,
    and so on).  Callers that share one tagger between threads must serialize access to it,
    unless the implementation sets ``reentrant = True``.
    """
    reentrant = False

    def tag(self, word: str) -> TaggedWord:
        raise NotImplementedError

    @staticmethod
    def from_params(params: Params) -> 'Tagger':
        choice = params.pop_choice('type', list(taggers.keys()), default_to_first_choice=True)
        return taggers[choice].from_params(params)


class WordListTagger(Tagger):
    """
    A ``Tagger`` backed by plain-text word lists, one form per line.  A line may carry
    tab-separated tags after the form; lines without tags are given the tag ``WORD``.  Blank
    lines and lines starting with ``#`` are ignored.

    Lookups first try the exact form and then its lower-cased version, so "Well-known" is found
    if the list has "well-known".  We keep a bounded LRU cache of lookups, which means this
    tagger mutates internal state on every call and is not reentrant.

    Parameters
    ----------
    word_files: List[str], optional (default=[])
        Paths to UTF-8 word list files.
    include_closed_class: bool, optional (default=True)
        Whether to also load the bundled lexicon of clitics and apostrophe words (``n't``, ``'s``,
        ``o'clock``, ...).  Without it, re-tokenizing a clitic token would split it apart.
    cache_size: int, optional (default=10000)
        How many lookups to remember.  Set to 0 to disable the cache.
    words: Dict[str, Tuple[str, ...]], optional (default=None)
        Forms to add directly, mapped to their tags (an empty tuple gets the default tag).  These
        are added after the word files are read.
    """
    DEFAULT_TAG = 'WORD'

    def __init__(self,
                 word_files: List[str]=None,
                 include_closed_class: bool=True,
                 cache_size: int=10000,
                 words: Dict[str, Tuple[str, ...]]=None):
        self.forms = {}  # type: Dict[str, Tuple[str, ...]]
        self.cache_size = cache_size
        self._cache = OrderedDict()  # type: OrderedDict
        if include_closed_class:
            self._read_word_file(CLOSED_CLASS_LEXICON)
        for word_file in word_files or []:
            self._read_word_file(word_file)
        if words:
            for word, tags in words.items():
                self.add_word(word, tags)
        logger.info("Loaded %d word forms into %s", len(self.forms), self.__class__.__name__)

    def add_word(self, word: str, tags: Iterable[str]=()):
        tags = tuple(tags) or (self.DEFAULT_TAG,)
        self.forms[word] = tuple(sorted(set(self.forms.get(word, ()) + tags)))
        self._cache.clear()

    @overrides
    def tag(self, word: str) -> TaggedWord:
        if word in self._cache:
            self._cache.move_to_end(word)
            return self._cache[word]
        tags = self.forms.get(word)
        if tags is None:
            tags = self.forms.get(word.lower(), ())
        tagged_word = TaggedWord(word, tags)
        if self.cache_size > 0:
            self._cache[word] = tagged_word
            if len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)
        return tagged_word

    def _read_word_file(self, filename: str):
        if not os.path.isfile(filename):
            raise ConfigurationError("Word list file not found: %s" % filename)
        logger.info("Reading word forms from %s", filename)
        with codecs.open(filename, 'r', 'utf-8') as word_file:
            for line in word_file:
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                fields = line.split('\t')
                self.add_word(fields[0], fields[1:])

    @classmethod
    def from_params(cls, params: Params) -> 'WordListTagger':
        word_files = params.pop('word_files', [])
        if isinstance(word_files, str):
            word_files = [word_files]
        include_closed_class = params.pop_bool('include_closed_class', True)
        cache_size = params.pop_int('cache_size', 10000)
        params.assert_empty(cls.__name__)
        return cls(word_files=list(word_files),
                   include_closed_class=include_closed_class,
                   cache_size=cache_size)


class WordNetTagger(Tagger):
    """
    A ``Tagger`` that asks NLTK's WordNet whether a form exists.  WordNet knows a lot of
    hyphenated compounds ("well-known", "mother-in-law"), and ``synsets`` runs its own
    morphological analysis, so inflected forms are found too.  Tags are the WordNet part of speech
    letters of the matching synsets.

    You need the WordNet corpus installed (``nltk.download('wordnet')``); if it isn't, the first
    lookup raises NLTK's ``LookupError``.  The corpus reader is loaded lazily on first access,
    which is not thread-safe, so this tagger is not reentrant.
    """
    def __init__(self):
        # Import is here because it's slow, and by default unnecessary.
        from nltk.corpus import wordnet
        self._wordnet = wordnet

    @overrides
    def tag(self, word: str) -> TaggedWord:
        # WordNet joins multi-word lemmas with underscores, but keeps hyphens as they are.
        synsets = self._wordnet.synsets(word.replace(' ', '_'))
        return TaggedWord(word, tuple(sorted(set(synset.pos() for synset in synsets))))

    @classmethod
    def from_params(cls, params: Params) -> 'WordNetTagger':
        params.assert_empty(cls.__name__)
        return cls()


taggers = OrderedDict()  # pylint: disable=invalid-name
taggers['word_list'] = WordListTagger
taggers['wordnet'] = WordNetTagger

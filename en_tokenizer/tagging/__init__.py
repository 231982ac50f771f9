from .tagger import Tagger, TaggedWord, WordListTagger, WordNetTagger, taggers

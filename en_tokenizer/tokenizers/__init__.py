from .word_splitter import WordSplitter, DelimiterWordSplitter, EnglishWordSplitter, word_splitters

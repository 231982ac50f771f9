from .run import load_word_splitter, tokenize_lines, tokenize_file
from .tokenizers import EnglishWordSplitter

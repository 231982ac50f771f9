from typing import Any, Dict, Iterable, List
import codecs
import logging

import pyhocon
import tqdm

from .common.params import Params, replace_none
from .tokenizers.word_splitter import WordSplitter

logger = logging.getLogger(__name__)  # pylint: disable=invalid-name


def load_word_splitter(param_dict: Dict[str, Any]) -> WordSplitter:
    """
    Builds a ``WordSplitter`` from a parameter dictionary (e.g. the ``splitter`` section of a
    HOCON file).  An empty dictionary gives you the ``EnglishWordSplitter`` with its default
    dictionary.
    """
    params = Params(replace_none(param_dict))
    return WordSplitter.from_params(params)


def tokenize_lines(word_splitter: WordSplitter, lines: Iterable[str]) -> List[List[str]]:
    return [word_splitter.split_words(line) for line in tqdm.tqdm(lines)]


def tokenize_file(param_path: str, input_path: str, output_path: str):
    """
    Tokenizes ``input_path`` line by line and writes the result to ``output_path``, one line of
    output per line of input, with tokens joined by the ``separator`` parameter (a single space,
    by default).  Whitespace tokens are left out of the file, though ``split_words`` itself keeps
    them.

    Parameters
    ----------
    param_path: str, required.
        A HOCON (or JSON) parameter file.  Its ``splitter`` section configures the
        ``WordSplitter``; see ``WordSplitter.from_params``.
    input_path: str, required.
        UTF-8 text to tokenize.
    output_path: str, required.
        Where to write the tokens.
    """
    param_dict = pyhocon.ConfigFactory.parse_file(param_path)
    params = Params(replace_none(param_dict))
    word_splitter = WordSplitter.from_params(params.pop('splitter', {}))
    separator = params.pop('separator', ' ')
    params.assert_empty('tokenize_file')

    logger.info("Tokenizing %s", input_path)
    with codecs.open(input_path, 'r', 'utf-8') as input_file:
        # Only '\n' ends a line; form feeds, U+2028 and friends are part of the text.
        lines = input_file.read().split('\n')
    if lines[-1] == '':
        lines.pop()
    tokenized_lines = tokenize_lines(word_splitter, lines)
    with codecs.open(output_path, 'w', 'utf-8') as output_file:
        for tokens in tokenized_lines:
            output_file.write(separator.join(token for token in tokens if not token.isspace()) + '\n')
    logger.info("Wrote %d tokenized lines to %s", len(tokenized_lines), output_path)

import argparse
import logging
import os
import sys

# pylint: disable=wrong-import-position
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))
from en_tokenizer import tokenize_file

logger = logging.getLogger(__name__)  # pylint: disable=invalid-name


def main():
    parser = argparse.ArgumentParser(description=("Tokenize a UTF-8 text file line by line, writing "
                                                  "one line of space-separated tokens per input line."))
    parser.add_argument('param_file', help='HOCON parameter file (use an empty file for the defaults)')
    parser.add_argument('input_file', help='Text file to tokenize')
    parser.add_argument('--output_file',
                        help='Where to write tokens.  Defaults to <input_file>.tok')
    args = parser.parse_args()
    output_file = args.output_file or args.input_file + '.tok'
    tokenize_file(args.param_file, args.input_file, output_file)


if __name__ == "__main__":
    logging.basicConfig(format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
                        level=logging.INFO)
    main()

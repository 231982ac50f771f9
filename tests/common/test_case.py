# pylint: disable=invalid-name,protected-access
from unittest import TestCase
import codecs
import logging
import os
import shutil


class TokenizerTestCase(TestCase):
    TEST_DIR = './TMP_TEST/'
    WORD_FILE = TEST_DIR + 'word_file'
    PARAM_FILE = TEST_DIR + 'params.conf'
    INPUT_FILE = TEST_DIR + 'input_file'
    OUTPUT_FILE = TEST_DIR + 'output_file'

    def setUp(self):
        logging.basicConfig(format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
                            level=logging.INFO)
        os.makedirs(self.TEST_DIR, exist_ok=True)

    def tearDown(self):
        shutil.rmtree(self.TEST_DIR)

    def write_word_file(self):
        with codecs.open(self.WORD_FILE, 'w', 'utf-8') as word_file:
            word_file.write('# a few hyphenated words\n')
            word_file.write('well-known\tJJ\n')
            word_file.write('mother-in-law\tNN\n')
            word_file.write('\n')
            word_file.write('e-mail\tNN\tVB\n')
            word_file.write('rock-solid\n')

    def write_input_file(self):
        with codecs.open(self.INPUT_FILE, 'w', 'utf-8') as input_file:
            input_file.write("It's well-known.\n")
            input_file.write("I couldn't write to john@example.com – sorry!\n")
            input_file.write("\n")

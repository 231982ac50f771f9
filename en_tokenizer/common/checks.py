class ConfigurationError(Exception):
    """
    The exception raised by any ``en_tokenizer`` object when it's misconfigured (e.g. a missing
    word list file, an unknown splitter type, or parameters left over after construction).
    """
    def __init__(self, message):
        super(ConfigurationError, self).__init__()
        self.message = message

    def __str__(self):
        return repr(self.message)

from typing import Any, Dict, List
from collections.abc import MutableMapping

import logging
import pyhocon

from overrides import overrides
from .checks import ConfigurationError

logger = logging.getLogger(__name__)  # pylint: disable=invalid-name

PARAMETER = 60
logging.addLevelName(PARAMETER, "PARAM")


def __param(self, message, *args, **kws):
    """
    Add a method to logger which allows us to always log parameters unless you set the logging
    level to be higher than 60 (which is higher than the standard highest level of 50,
    corresponding to CRITICAL).
    """
    # Logger takes its '*args' as 'args'.
    if self.isEnabledFor(PARAMETER):
        self._log(PARAMETER, message, args, **kws)  # pylint: disable=protected-access
logging.Logger.param = __param


class Params(MutableMapping):
    """
    A class representing a parameter dictionary with a history.  Using this lets you reproduce
    exactly how a tokenizer was configured from its logs, even when default values are used.
    """

    # This allows us to check for the presence of "None" as a default argument, which we require
    # because we make a distinction between passing a value of "None" and passing no value to the
    # default parameter of "pop".
    DEFAULT = object()

    def __init__(self, params: Dict[str, Any], history: str=""):
        self.params = params
        self.history = history

    @overrides
    def pop(self, key: str, default: Any=DEFAULT):
        """
        Performs the functionality associated with dict.pop(key), along with checking for
        returned dictionaries, replacing them with Param objects with an updated history.
        """
        if default is self.DEFAULT:
            value = self.params.pop(key)
        else:
            value = self.params.pop(key, default)
        logger.param(self.history + "." + key + " = " + str(value))
        return self._check_is_dict(key, value)

    def pop_int(self, key: str, default: Any=DEFAULT) -> int:
        value = self.pop(key, default)
        if value is None:
            return None
        return int(value)

    def pop_bool(self, key: str, default: Any=DEFAULT) -> bool:
        """
        HOCON files give us real booleans, but parameters that came from the command line may be
        strings, so we accept both.
        """
        value = self.pop(key, default)
        if value is None:
            return None
        if isinstance(value, bool):
            return value
        if value == "true":
            return True
        if value == "false":
            return False
        raise ConfigurationError("Cannot convert %s to bool for %s.%s" % (value, self.history, key))

    def pop_choice(self, key: str, choices: List[Any], default_to_first_choice: bool=False) -> Any:
        """
        Gets the value of ``key`` in the ``params`` dictionary, ensuring that the value is one of
        the given choices.  Note that this `pops` the key from params, modifying the dictionary,
        consistent with how parameters are processed in this codebase.

        If ``default_to_first_choice`` is ``True`` and ``key`` is missing, we use ``choices[0]``.
        """
        default = choices[0] if default_to_first_choice else self.DEFAULT
        value = self.pop(key, default)
        if value not in choices:
            raise ConfigurationError(_get_choice_error_message(value, choices, self.history))
        return value

    def assert_empty(self, class_name: str):
        """
        Raises a ``ConfigurationError`` if ``self.params`` is not empty.  We take ``class_name`` as
        an argument so that the error message gives some idea of where an error happened, if there
        was one.  ``class_name`` should be the name of the `calling` class, the one that got extra
        parameters (if there are any).
        """
        if len(self.params) != 0:
            raise ConfigurationError("Extra parameters passed to {}: {}".format(class_name, self.params))

    def _check_is_dict(self, new_history, value):
        if isinstance(value, dict):
            new_history = self.history + "." + new_history
            return Params(value, new_history)
        return value

    def __getitem__(self, key):
        return self._check_is_dict(key, self.params[key])

    def __setitem__(self, key, value):
        self.params[key] = value

    def __delitem__(self, key):
        del self.params[key]

    def __iter__(self):
        return iter(self.params)

    def __len__(self):
        return len(self.params)


def _get_choice_error_message(value: Any, choices: List[Any], name: str=None) -> str:
    if name:
        return '%s not in acceptable choices for %s: %s' % (value, name, str(choices))
    else:
        return '%s not in acceptable choices: %s' % (value, str(choices))


def replace_none(dictionary: Dict[str, Any]) -> Dict[str, Any]:
    for key in dictionary.keys():
        if dictionary[key] == "None":
            dictionary[key] = None
        elif isinstance(dictionary[key], pyhocon.config_tree.ConfigTree):
            dictionary[key] = replace_none(dictionary[key])
    return dictionary

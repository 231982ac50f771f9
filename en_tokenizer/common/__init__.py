from .checks import ConfigurationError
from .params import Params

import logging

from .config import Config
from .exceptions import (
    ConfigError,
    ConfigIOError,
    DecodeError,
    EncodeError,
    UnsupportedFormatError,
)
from .format import ConfigFormat, JSONFormat, TOMLFormat, YAMLFormat
from .loader import (
    dumps_config,
    format_for_path,
    load_config,
    loads_config,
    save_config,
    supported_extensions,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "load_config",
    "save_config",
    "loads_config",
    "dumps_config",
    "format_for_path",
    "supported_extensions",
    "Config",
    "ConfigFormat",
    "TOMLFormat",
    "JSONFormat",
    "YAMLFormat",
    "ConfigError",
    "ConfigIOError",
    "DecodeError",
    "EncodeError",
    "UnsupportedFormatError",
]

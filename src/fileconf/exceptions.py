import os
from typing import TypeAlias

StrPath: TypeAlias = str | os.PathLike[str]


class ConfigError(Exception):
    """Base class for every error raised while loading or saving a config."""

    def __init__(self, message: str, *, path: StrPath | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigIOError(ConfigError, OSError):
    """The config file could not be read or written."""


class DecodeError(ConfigError, ValueError):
    """The content is malformed or does not fit the requested type."""


class EncodeError(ConfigError, ValueError):
    """The value cannot be represented in the target format."""


class UnsupportedFormatError(ConfigError, ValueError):
    """The path does not end with a recognized format extension."""

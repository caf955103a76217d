"""Load and save typed configuration files in TOML, JSON or YAML.

The format is chosen from the path suffix alone (see
`FormatRegistry.for_path`). Both operations check the suffix before touching
the file system, so an unsupported path is never read, created or truncated.
"""

import logging
from pathlib import Path
from typing import Any, TypeVar, overload

from .exceptions import (
    ConfigIOError,
    DecodeError,
    EncodeError,
    StrPath,
)
from .format.config_format import ConfigFormat
from .state import _registry
from .structure import from_data, to_data

logger = logging.getLogger(__name__)

T = TypeVar("T")


def format_for_path(path: StrPath) -> ConfigFormat:
    """Return the codec selected by the suffix of `path`."""
    return _registry.for_path(path)


def supported_extensions() -> tuple[str, ...]:
    return tuple(fmt.extension for fmt in _registry.get_all_registered())


@overload
def load_config(path: StrPath, config_type: type[T]) -> T: ...


@overload
def load_config(path: StrPath) -> Any: ...


def load_config(path: StrPath, config_type: Any = Any) -> Any:
    """
    Read the file at `path` and decode it into `config_type`.

    Args:
        path: config file; its suffix selects the format.
        config_type: type to build from the document. With the default
            `Any` the decoded document is returned as plain data.

    Raises:
        UnsupportedFormatError: the suffix is not `.toml`, `.json` or `.yaml`.
        ConfigIOError: the file is missing, unreadable or not UTF-8.
        DecodeError: the content is empty, malformed, or does not fit
            `config_type`.
    """

    fmt = format_for_path(path)

    try:
        with Path(path).open("r", encoding="utf-8") as file:
            text = file.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigIOError(
            f"Cannot read config file '{path}': {exc}", path=path
        ) from exc

    logger.debug("Read %d characters of %s from %s", len(text), fmt.name, path)
    return _decode(text, fmt, config_type, path)


def save_config(path: StrPath, config: Any, *, overwrite: bool = True) -> None:
    """
    Encode `config` in the format selected by `path` and write it there.

    Args:
        path: destination; its suffix selects the format.
        config: dataclass instance or plain data to store.
        overwrite: if False, an existing file is left alone and
            `ConfigIOError` is raised.

    Raises:
        UnsupportedFormatError: the suffix is not recognized; nothing is written.
        EncodeError: `config` cannot be represented; nothing is written.
        ConfigIOError: the file could not be written.
    """

    fmt = format_for_path(path)
    text = _encode(config, fmt, path)

    try:
        with Path(path).open("w" if overwrite else "x", encoding="utf-8") as file:
            file.write(text)
    except OSError as exc:
        raise ConfigIOError(
            f"Cannot write config file '{path}': {exc}", path=path
        ) from exc

    logger.debug("Wrote %d characters of %s to %s", len(text), fmt.name, path)


@overload
def loads_config(text: str, fmt: str | ConfigFormat, config_type: type[T]) -> T: ...


@overload
def loads_config(text: str, fmt: str | ConfigFormat) -> Any: ...


def loads_config(text: str, fmt: str | ConfigFormat, config_type: Any = Any) -> Any:
    """Decode `text` as `fmt` (".toml", "json", a codec instance, ...)."""
    return _decode(text, _registry.lookup(fmt), config_type)


def dumps_config(config: Any, fmt: str | ConfigFormat) -> str:
    """Encode `config` as `fmt` and return the document text."""
    return _encode(config, _registry.lookup(fmt))


def _decode(
    text: str,
    fmt: ConfigFormat,
    config_type: Any,
    path: StrPath | None = None,
) -> Any:
    source = f"'{path}'" if path is not None else f"{fmt.name} text"

    if not text.strip():
        raise DecodeError(f"Config {source} is empty", path=path)

    try:
        data = fmt.loads(text)
    except fmt.decode_errors as exc:
        raise DecodeError(f"Invalid {fmt.name} in {source}: {exc}", path=path) from exc

    try:
        return from_data(data, config_type)
    except (TypeError, ValueError) as exc:
        type_name = getattr(config_type, "__name__", repr(config_type))
        raise DecodeError(
            f"Config {source} does not match {type_name}: {exc}", path=path
        ) from exc


def _encode(config: Any, fmt: ConfigFormat, path: StrPath | None = None) -> str:
    try:
        return fmt.dumps(to_data(config))
    except (TypeError, *fmt.encode_errors) as exc:
        target = f"'{path}'" if path is not None else fmt.name
        raise EncodeError(
            f"Cannot encode {type(config).__name__} for {target}: {exc}", path=path
        ) from exc

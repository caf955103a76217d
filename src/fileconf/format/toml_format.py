from collections.abc import Mapping
from typing import Any

import rtoml

from .config_format import ConfigFormat, require_string_keys


def _is_table(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    return isinstance(value, list) and bool(value) and all(
        isinstance(item, Mapping) for item in value
    )


def _tables_last(data: Mapping[str, Any]) -> dict[str, Any]:
    # TOML requires plain keys of a table to precede its sub-tables
    ordered = sorted(data.items(), key=lambda item: _is_table(item[1]))
    return {
        key: _tables_last(value) if isinstance(value, Mapping) else value
        for key, value in ordered
    }


class TOMLFormat(ConfigFormat):
    """Read and write TOML configuration documents."""

    name = "TOML"
    extension = ".toml"
    decode_errors = (rtoml.TomlParsingError,)
    encode_errors = (rtoml.TomlSerializationError, TypeError, ValueError)

    def __init__(self, none_value: str | None = None, pretty: bool = False) -> None:
        """
        Args:
            none_value: controls how `None` values are serialized.
                `none_value=None` means `None` values are omitted on write
                and no string is read back as `None`.
            pretty: emit rtoml's pretty layout (multiline arrays).
        """
        self.none_value = none_value
        self.pretty = pretty

    def loads(self, text: str) -> dict[str, Any]:
        return rtoml.loads(text, none_value=self.none_value)

    def dumps(self, data: Any) -> str:
        if not isinstance(data, Mapping):
            raise TypeError(
                f"TOML documents must be tables, got {type(data).__name__}"
            )
        require_string_keys(data, self.name)

        return rtoml.dumps(
            _tables_last(data), pretty=self.pretty, none_value=self.none_value
        )

from collections.abc import Mapping
from typing import Any, Protocol


class ConfigFormat(Protocol):
    name: str
    extension: str
    # library exceptions meaning "input is not valid <format>"
    decode_errors: tuple[type[Exception], ...]
    # library exceptions meaning "value has no <format> representation"
    encode_errors: tuple[type[Exception], ...]

    def loads(self, text: str) -> Any: ...

    def dumps(self, data: Any) -> str: ...


def require_string_keys(data: Any, format_name: str) -> None:
    """Raise TypeError if any mapping nested in `data` has a non-string key."""

    if isinstance(data, Mapping):
        for key, value in data.items():
            if not isinstance(key, str):
                raise TypeError(
                    f"{format_name} object keys must be strings, got {key!r}"
                )
            require_string_keys(value, format_name)
    elif isinstance(data, list):
        for item in data:
            require_string_keys(item, format_name)

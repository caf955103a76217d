from __future__ import annotations

import json
from typing import Any

from .config_format import ConfigFormat, require_string_keys


class JSONFormat(ConfigFormat):
    """Read and write JSON configuration documents."""

    name = "JSON"
    extension = ".json"
    decode_errors = (json.JSONDecodeError,)
    encode_errors = (TypeError, ValueError)

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def loads(self, text: str) -> Any:
        return json.loads(text)

    def dumps(self, data: Any) -> str:
        # json.dumps would turn 1 into "1" and the key would not load back
        require_string_keys(data, self.name)
        # NaN and Infinity are not JSON
        return json.dumps(data, indent=self.indent, ensure_ascii=False, allow_nan=False)

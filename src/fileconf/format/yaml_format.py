from typing import Any

import yaml

from .config_format import ConfigFormat


class YAMLFormat(ConfigFormat):
    """Read and write YAML configuration documents with the safe loader/dumper."""

    name = "YAML"
    extension = ".yaml"
    decode_errors = (yaml.YAMLError,)
    encode_errors = (yaml.YAMLError, TypeError)

    def __init__(self, sort_keys: bool = False) -> None:
        self.sort_keys = sort_keys

    def loads(self, text: str) -> Any:
        return yaml.safe_load(text)

    def dumps(self, data: Any) -> str:
        return yaml.safe_dump(
            data,
            default_flow_style=False,
            sort_keys=self.sort_keys,
            allow_unicode=True,
        )

from .config_format import ConfigFormat
from .json_format import JSONFormat
from .toml_format import TOMLFormat
from .yaml_format import YAMLFormat

__all__ = ["ConfigFormat", "TOMLFormat", "JSONFormat", "YAMLFormat"]

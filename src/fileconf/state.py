from .format import JSONFormat, TOMLFormat, YAMLFormat
from .registry import FormatRegistry

_registry = FormatRegistry()
_registry.add(TOMLFormat())
_registry.add(JSONFormat())
_registry.add(YAMLFormat())

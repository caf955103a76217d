import os
from typing import TypeVar

from .exceptions import StrPath, UnsupportedFormatError
from .format.config_format import ConfigFormat

_KT = TypeVar("_KT")
_VT = TypeVar("_VT")


class _Registry(dict[_KT, _VT]):
    def register(self, name: _KT, t: _VT) -> None:
        self[name] = t

    def get_all_registered(self) -> list[_VT]:
        return list(self.values())

    def is_registered(self, name: _KT) -> bool:
        return name in self


class FormatRegistry(_Registry[str, ConfigFormat]):
    """Codecs keyed by extension, matched in registration order."""

    def add(self, fmt: ConfigFormat) -> None:
        self.register(fmt.extension, fmt)

    def for_path(self, path: StrPath) -> ConfigFormat:
        """
        Pick the codec whose extension is a literal, case-sensitive suffix
        of `path`. `settings.backup.toml` is TOML; `settings.TOML` is not.
        """

        name = os.fspath(path)
        for extension, fmt in self.items():
            if name.endswith(extension):
                return fmt

        raise UnsupportedFormatError(
            f"Unsupported config format for '{name}'; "
            f"expected one of: {', '.join(self)}",
            path=path,
        )

    def lookup(self, fmt: str | ConfigFormat) -> ConfigFormat:
        """Resolve a codec from an extension (".json"), a name ("json") or itself."""

        if not isinstance(fmt, str):
            return fmt

        extension = fmt if fmt.startswith(".") else f".{fmt}"
        if not self.is_registered(extension):
            raise UnsupportedFormatError(
                f"Unsupported config format '{fmt}'; "
                f"expected one of: {', '.join(self)}"
            )
        return self[extension]

import json
import unittest
from pathlib import Path

import rtoml
import yaml

from fileconf import (
    JSONFormat,
    TOMLFormat,
    UnsupportedFormatError,
    YAMLFormat,
    format_for_path,
    supported_extensions,
)
from fileconf.registry import FormatRegistry


class TestFormatForPath(unittest.TestCase):
    def test_recognized_suffixes(self) -> None:
        self.assertIsInstance(format_for_path("app.toml"), TOMLFormat)
        self.assertIsInstance(format_for_path("app.json"), JSONFormat)
        self.assertIsInstance(format_for_path("app.yaml"), YAMLFormat)
        self.assertIsInstance(format_for_path(Path("/etc/app.backup.toml")), TOMLFormat)
        self.assertIsInstance(format_for_path("archive.toml.json"), JSONFormat)

    def test_suffix_match_is_literal(self) -> None:
        for name in ("app.TOML", "app.Json", "app.yml", "app.ini", "app", "toml"):
            with self.subTest(name=name):
                with self.assertRaises(UnsupportedFormatError) as ctx:
                    format_for_path(name)
                self.assertEqual(ctx.exception.path, name)

    def test_supported_extensions_order(self) -> None:
        self.assertEqual(supported_extensions(), (".toml", ".json", ".yaml"))


class TestFormatRegistry(unittest.TestCase):
    def test_lookup(self) -> None:
        registry = FormatRegistry()
        json_format = JSONFormat()
        registry.add(json_format)

        self.assertIs(registry.lookup("json"), json_format)
        self.assertIs(registry.lookup(".json"), json_format)
        custom = YAMLFormat(sort_keys=True)
        self.assertIs(registry.lookup(custom), custom)

        with self.assertRaises(UnsupportedFormatError):
            registry.lookup("yaml")

    def test_registration_order_decides_match(self) -> None:
        registry = FormatRegistry()
        registry.add(TOMLFormat())
        registry.add(YAMLFormat())

        self.assertTrue(registry.is_registered(".yaml"))
        self.assertFalse(registry.is_registered(".json"))
        self.assertEqual(len(registry.get_all_registered()), 2)
        self.assertIsInstance(registry.for_path("a.yaml"), YAMLFormat)
        with self.assertRaises(UnsupportedFormatError):
            registry.for_path("a.json")


class TestTOMLFormat(unittest.TestCase):
    def test_none_values_omitted_by_default(self) -> None:
        text = TOMLFormat().dumps({"name": "demo", "label": None})
        self.assertEqual(rtoml.loads(text), {"name": "demo"})

    def test_none_value_placeholder(self) -> None:
        toml_format = TOMLFormat(none_value="null")
        text = toml_format.dumps({"label": None})

        self.assertEqual(rtoml.loads(text), {"label": "null"})
        self.assertEqual(toml_format.loads(text), {"label": None})

    def test_tables_written_after_values(self) -> None:
        data = {"server": {"port": 1}, "name": "demo", "debug": False}
        text = TOMLFormat().dumps(data)

        self.assertEqual(rtoml.loads(text), data)
        self.assertLess(text.index("name"), text.index("[server]"))

    def test_rejects_non_table(self) -> None:
        with self.assertRaises(TypeError):
            TOMLFormat().dumps(["a"])
        with self.assertRaises(TypeError):
            TOMLFormat().dumps({2: "b"})


class TestJSONFormat(unittest.TestCase):
    def test_indent(self) -> None:
        data = {"a": [1, 2], "b": "ü"}

        self.assertEqual(JSONFormat().dumps(data), json.dumps(data, indent=2, ensure_ascii=False))
        self.assertEqual(JSONFormat(indent=None).dumps(data), '{"a": [1, 2], "b": "ü"}')

    def test_rejects_non_string_keys(self) -> None:
        with self.assertRaises(TypeError):
            JSONFormat().dumps({"a": {3: "c"}})

    def test_rejects_nan(self) -> None:
        with self.assertRaises(ValueError):
            JSONFormat().dumps({"x": float("inf")})


class TestYAMLFormat(unittest.TestCase):
    def test_keeps_insertion_order(self) -> None:
        text = YAMLFormat().dumps({"zeta": 1, "alpha": {"b": 2, "a": 1}})
        self.assertEqual(text, "zeta: 1\nalpha:\n  b: 2\n  a: 1\n")

    def test_sort_keys(self) -> None:
        text = YAMLFormat(sort_keys=True).dumps({"zeta": 1, "alpha": 2})
        self.assertEqual(text, "alpha: 2\nzeta: 1\n")

    def test_safe_loader_rejects_python_tags(self) -> None:
        with self.assertRaises(yaml.YAMLError):
            YAMLFormat().loads("value: !!python/object:os.system {}\n")


if __name__ == "__main__":
    unittest.main()

"""Tests for configuration loading."""

import json

import pytest

from k8s_typegen.config import ELIDED_TYPES, SCALAR_TYPES, GeneratorConfig, load_config
from k8s_typegen.errors import ConfigError


def _write(tmp_path, data):
    path = tmp_path / "typegen.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestGeneratorConfig:

    def test_defaults(self):
        config = GeneratorConfig()
        assert dict(config.elided_types) == ELIDED_TYPES
        assert dict(config.scalar_types) == SCALAR_TYPES
        assert config.ref_prefix == "#/definitions/"
        assert config.file_extension == ".ts"

    def test_tables_read_only(self):
        config = GeneratorConfig()
        with pytest.raises(TypeError):
            config.scalar_types["Extra"] = "string"

    def test_plain_dicts_copied(self):
        table = {"Foo": "string"}
        config = GeneratorConfig(scalar_types=table)
        table["Bar"] = "number"
        assert list(config.scalar_types) == ["Foo"]


class TestLoadConfig:

    def test_none_gives_defaults(self):
        assert load_config(None) == GeneratorConfig()

    def test_overrides(self, tmp_path):
        path = _write(tmp_path, {
            "simplifications": {"com.example.": ""},
            "file_extension": ".d.ts",
        })
        config = load_config(path)
        assert list(config.simplifications) == ["com.example."]
        assert config.file_extension == ".d.ts"
        assert dict(config.elided_types) == ELIDED_TYPES

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(path)

    def test_not_an_object(self, tmp_path):
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(_write(tmp_path, ["x"]))

    def test_unknown_key(self, tmp_path):
        with pytest.raises(ConfigError, match="Unknown configuration keys"):
            load_config(_write(tmp_path, {"package_name": "x"}))

    def test_bad_table(self, tmp_path):
        with pytest.raises(ConfigError, match="must map strings to strings"):
            load_config(_write(tmp_path, {"elided_types": {"IntOrString": 1}}))

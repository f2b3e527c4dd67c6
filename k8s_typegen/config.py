"""Generator configuration.

Holds the static tables the generator consults: namespace prefix
simplifications, elided types and scalar overrides. Defaults target the
Kubernetes API; a JSON file can replace any of them.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .errors import ConfigError

logger = logging.getLogger(__name__)

# Definition name prefixes to strip (longest prefix match)
DEFINITION_SIMPLIFICATIONS: dict[str, str] = {
    "io.k8s.api.": "",
    "io.k8s.apimachinery.pkg.apis.": "",
    "io.k8s.apimachinery.pkg.": "",
    "io.k8s.apiextensions-apiserver.pkg.apis.": "",
}

# Types never declared on their own; references are replaced inline.
ELIDED_TYPES: dict[str, str] = {
    "IntOrString": "number | string",
}

# Object-shaped definitions declared as plain type aliases.
SCALAR_TYPES: dict[str, str] = {
    "Quantity": "string",
    "Time": "string",
    "MicroTime": "string",
    "JSONSchemaPropsOrArray": "JSONSchemaProps | JSONSchemaProps[]",
    "JSONSchemaPropsOrBool": "JSONSchemaProps | boolean",
    "JSONSchemaPropsOrStringArray": "JSONSchemaProps | string[]",
}

OPENAPI_REF_PREFIX = "#/definitions/"

FILE_EXTENSION = ".ts"

_TABLE_KEYS = ("simplifications", "elided_types", "scalar_types")


def _frozen(table: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(table))


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable settings for one generation pass."""

    simplifications: Mapping[str, str] = field(
        default_factory=lambda: _frozen(DEFINITION_SIMPLIFICATIONS)
    )
    elided_types: Mapping[str, str] = field(
        default_factory=lambda: _frozen(ELIDED_TYPES)
    )
    scalar_types: Mapping[str, str] = field(
        default_factory=lambda: _frozen(SCALAR_TYPES)
    )
    ref_prefix: str = OPENAPI_REF_PREFIX
    file_extension: str = FILE_EXTENSION

    def __post_init__(self) -> None:
        # Callers may pass plain dicts; store read-only copies.
        for key in _TABLE_KEYS:
            object.__setattr__(self, key, _frozen(getattr(self, key)))


def _validate_table(key: str, value: Any, path: Path) -> dict[str, str]:
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise ConfigError(f"'{key}' in {path} must map strings to strings")
    return value


def load_config(path: str | Path | None = None) -> GeneratorConfig:
    """Load a configuration file, falling back to the defaults.

    The file is a JSON object; any of ``simplifications``, ``elided_types``,
    ``scalar_types``, ``ref_prefix`` and ``file_extension`` replace the
    corresponding default. Table order in the file is preserved.
    """
    config = GeneratorConfig()
    if path is None:
        return config

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read configuration file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file must contain a JSON object: {config_path}")

    known = {f.name for f in fields(GeneratorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys in {config_path}: {', '.join(unknown)}")

    overrides: dict[str, Any] = {}
    for key, value in data.items():
        if key in _TABLE_KEYS:
            overrides[key] = _validate_table(key, value, config_path)
        elif not isinstance(value, str):
            raise ConfigError(f"'{key}' in {config_path} must be a string")
        else:
            overrides[key] = value

    logger.debug("Loaded configuration overrides %s from %s", sorted(overrides), config_path)
    return replace(config, **overrides)

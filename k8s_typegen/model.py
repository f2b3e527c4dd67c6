"""Typed view of a swagger 2.0 document.

Only the subset the generator understands is modelled: definitions with
properties, and property values that are references, scalars, arrays or
string-keyed maps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .errors import SpecLoadError, UnreachableShapeError


class ScalarType(Enum):
    """Scalar value types."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Reference:
    """Pointer to another definition, e.g. ``#/definitions/io.k8s...Pod``."""

    ref: str


@dataclass(frozen=True)
class Scalar:
    type: ScalarType


@dataclass(frozen=True)
class ArrayValue:
    items: Value


@dataclass(frozen=True)
class ObjectValue:
    """String-keyed map whose entries all share one value shape."""

    additional_properties: Value


Value = Union[Reference, Scalar, ArrayValue, ObjectValue]


@dataclass(frozen=True)
class GroupVersionKind:
    group: str
    version: str
    kind: str


@dataclass(frozen=True)
class Property:
    description: str
    schema: Any


@dataclass(frozen=True)
class Definition:
    description: str = ""
    required: tuple[str, ...] | None = None
    properties: dict[str, Property] | None = None
    group_version_kinds: tuple[GroupVersionKind, ...] = ()


@dataclass(frozen=True)
class APIInfo:
    title: str
    version: str


@dataclass(frozen=True)
class SchemaDocument:
    """A parsed document; ``definitions`` keeps the input order."""

    info: APIInfo
    definitions: dict[str, Definition] = field(default_factory=dict)


_SCALAR_TYPES = {t.value: t for t in ScalarType}


def parse_value(raw: Any) -> Value:
    """Build a Value from its raw JSON form.

    Raises:
        UnreachableShapeError: if the shape is not one of the four
            supported variants.
    """
    if not isinstance(raw, dict):
        raise UnreachableShapeError(f"Unsupported value shape: {raw!r}")

    if "$ref" in raw:
        ref = raw["$ref"]
        if not isinstance(ref, str):
            raise UnreachableShapeError(f"Unsupported $ref value: {ref!r}")
        return Reference(ref)

    value_type = raw.get("type")
    if value_type in _SCALAR_TYPES:
        return Scalar(_SCALAR_TYPES[value_type])
    if value_type == "array" and "items" in raw:
        return ArrayValue(parse_value(raw["items"]))
    if value_type == "object" and "additionalProperties" in raw:
        return ObjectValue(parse_value(raw["additionalProperties"]))

    raise UnreachableShapeError(f"Unsupported value shape: {raw!r}")


def _parse_gvk(raw: Any) -> GroupVersionKind:
    if not isinstance(raw, dict):
        raise SpecLoadError(f"Invalid x-kubernetes-group-version-kind entry: {raw!r}")
    return GroupVersionKind(
        group=raw.get("group", ""),
        version=raw.get("version", ""),
        kind=raw.get("kind", ""),
    )


def parse_definition(raw: Any, name: str = "") -> Definition:
    """Build a Definition from its raw JSON form.

    Property schemas are kept raw; ``parse_value`` converts them when the
    definition is generated, so skipped definitions are never validated.
    """
    if not isinstance(raw, dict):
        raise SpecLoadError(f"Definition {name} must be an object")

    properties = None
    if "properties" in raw:
        if not isinstance(raw["properties"], dict):
            raise SpecLoadError(f"Properties of {name} must be an object")
        properties = {
            prop_name: Property(
                description=prop.get("description", "") if isinstance(prop, dict) else "",
                schema=prop,
            )
            for prop_name, prop in raw["properties"].items()
        }

    required = raw.get("required")
    if required is not None and not isinstance(required, list):
        raise SpecLoadError(f"Required properties of {name} must be a list")

    gvks = raw.get("x-kubernetes-group-version-kind", [])
    if not isinstance(gvks, list):
        raise SpecLoadError(f"x-kubernetes-group-version-kind of {name} must be a list")

    return Definition(
        description=raw.get("description", ""),
        required=tuple(required) if required is not None else None,
        properties=properties,
        group_version_kinds=tuple(_parse_gvk(gvk) for gvk in gvks),
    )


def parse_document(raw: Any) -> SchemaDocument:
    """Build a SchemaDocument from a decoded swagger payload.

    Raises:
        SpecLoadError: if ``info`` or ``definitions`` is missing or is not
            an object, or a definition is malformed.
    """
    if (
        not isinstance(raw, dict)
        or not isinstance(raw.get("info"), dict)
        or not isinstance(raw.get("definitions"), dict)
    ):
        raise SpecLoadError("Invalid API specification: missing required fields")

    info = raw["info"]
    return SchemaDocument(
        info=APIInfo(title=info.get("title", ""), version=info.get("version", "")),
        definitions={
            name: parse_definition(definition, name)
            for name, definition in raw["definitions"].items()
        },
    )

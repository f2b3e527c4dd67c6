"""Turn schema values into TypeScript type expressions.

Handles:
- $ref resolution, with imports registered for the referencing unit
- Elided types replaced inline (IntOrString -> number | string)
- Scalars (integer collapses to number)
- Arrays (Array<T>) and string-keyed maps (Record<string, T>)
- kind/apiVersion narrowing for resources with a single group/version/kind
- Read-only detection from property descriptions
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Never, NoReturn, Sequence

from .config import GeneratorConfig
from .errors import ExcludedTypeReferencedError, UnreachableShapeError
from .imports import ImportManager
from .loader import resolve_ref
from .model import (
    ArrayValue,
    Definition,
    GroupVersionKind,
    ObjectValue,
    Reference,
    Scalar,
    ScalarType,
    SchemaDocument,
    Value,
    parse_value,
)
from .naming import parse_definition_name

# Description marker for fields the API server populates
READ_ONLY_MARKER = "Read-only."

_SCALAR_EXPRESSIONS: dict[ScalarType, str] = {
    ScalarType.STRING: "string",
    ScalarType.NUMBER: "number",
    ScalarType.BOOLEAN: "boolean",
    ScalarType.INTEGER: "number",
}


@dataclass
class PropertySignature:
    name: str
    type: str
    docs: list[str] = field(default_factory=list)
    optional: bool = True
    readonly: bool = False


def _unreachable(value: Never) -> NoReturn:
    raise UnreachableShapeError(f"Unreachable value shape: {value!r}")


def _reference_type(
    document: SchemaDocument,
    import_manager: ImportManager,
    reference: Reference,
    config: GeneratorConfig,
) -> str:
    name, _ = resolve_ref(document, reference, config.ref_prefix)
    parsed = parse_definition_name(name, config.simplifications)
    if parsed is None:
        raise ExcludedTypeReferencedError(
            f"Value references excluded type: {json.dumps(reference.ref)}"
        )

    if parsed.name in config.elided_types:
        return config.elided_types[parsed.name]

    import_manager.add_import(parsed.path, parsed.name)
    return parsed.name


def generate_type_string(
    document: SchemaDocument,
    import_manager: ImportManager,
    value: Value,
    config: GeneratorConfig,
) -> str:
    """Resolve a schema value to a TypeScript type expression."""
    if isinstance(value, Reference):
        return _reference_type(document, import_manager, value, config)
    if isinstance(value, Scalar):
        return _SCALAR_EXPRESSIONS[value.type]
    if isinstance(value, ArrayValue):
        item_type = generate_type_string(document, import_manager, value.items, config)
        return f"Array<{item_type}>"
    if isinstance(value, ObjectValue):
        entry_type = generate_type_string(
            document, import_manager, value.additional_properties, config
        )
        return f"Record<string, {entry_type}>"
    return _unreachable(value)


def generate_kind_type(
    gvk_list: Sequence[GroupVersionKind] | None, property_name: str,
) -> str | None:
    """Literal type for ``kind``/``apiVersion`` of a singly-typed resource."""
    if not gvk_list or len(gvk_list) != 1:
        return None

    gvk = gvk_list[0]
    if property_name == "apiVersion":
        api_version = "/".join(part for part in (gvk.group, gvk.version) if part)
        return json.dumps(api_version)
    if property_name == "kind":
        return json.dumps(gvk.kind)
    return None


def generate_properties(
    document: SchemaDocument,
    definition: Definition,
    import_manager: ImportManager,
    config: GeneratorConfig,
) -> list[PropertySignature]:
    """Build the property signatures of an interface declaration."""
    if not definition.properties:
        return []

    required = set(definition.required or ())
    signatures = []
    for property_name, prop in definition.properties.items():
        property_type = generate_kind_type(definition.group_version_kinds, property_name)
        if property_type is None:
            value = parse_value(prop.schema)
            property_type = generate_type_string(document, import_manager, value, config)

        signatures.append(PropertySignature(
            name=property_name,
            type=property_type,
            docs=[prop.description] if prop.description else [],
            optional=property_name not in required,
            readonly=READ_ONLY_MARKER in prop.description,
        ))
    return signatures

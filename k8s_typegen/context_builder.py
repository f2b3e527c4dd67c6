"""Build the output units and template context from a parsed spec.

Assigns each definition to the unit of its namespace, builds its
declaration, and only once every unit is complete turns the recorded
imports into import statements.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Union

from .config import GeneratorConfig
from .imports import ImportManager, ImportStatement
from .model import Definition, SchemaDocument
from .naming import generate_file_path, parse_definition_name
from .schema_parser import PropertySignature, generate_properties

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedDefinition:
    name: str
    path: str
    definition: Definition


@dataclass
class Interface:
    name: str
    properties: list[PropertySignature]
    docs: list[str] = field(default_factory=list)


@dataclass
class TypeAlias:
    name: str
    type: str
    docs: list[str] = field(default_factory=list)


Declaration = Union[Interface, TypeAlias]


@dataclass
class OutputUnit:
    """One generated file."""

    namespace: str
    file_path: str
    declarations: list[Declaration] = field(default_factory=list)
    imports: list[ImportStatement] = field(default_factory=list)


def extract_definitions(
    document: SchemaDocument, config: GeneratorConfig,
) -> list[ResolvedDefinition]:
    """Resolve every definition name, dropping unsupported namespaces."""
    definitions = []
    for definition_name, definition in document.definitions.items():
        parsed = parse_definition_name(definition_name, config.simplifications)
        if parsed is None:
            logger.debug("Skipping %s: unsupported namespace", definition_name)
            continue
        definitions.append(ResolvedDefinition(parsed.name, parsed.path, definition))
    return definitions


def build_units(
    document: SchemaDocument, config: GeneratorConfig | None = None,
) -> dict[str, OutputUnit]:
    """Generate every output unit, keyed by namespace in input order."""
    config = config or GeneratorConfig()
    units: dict[str, OutputUnit] = {}
    import_managers: dict[str, ImportManager] = {}

    for resolved in extract_definitions(document, config):
        if resolved.name in config.elided_types:
            continue

        unit = units.get(resolved.path)
        if unit is None:
            unit = OutputUnit(
                namespace=resolved.path,
                file_path=generate_file_path(resolved.path, config.file_extension),
            )
            units[resolved.path] = unit
            import_managers[resolved.path] = ImportManager(resolved.path)

        docs = [resolved.definition.description] if resolved.definition.description else []

        if resolved.name in config.scalar_types:
            unit.declarations.append(TypeAlias(
                name=resolved.name,
                type=config.scalar_types[resolved.name],
                docs=docs,
            ))
        else:
            properties = generate_properties(
                document, resolved.definition, import_managers[resolved.path], config
            )
            unit.declarations.append(Interface(
                name=resolved.name, properties=properties, docs=docs,
            ))

    # All declarations exist now; imports can point anywhere.
    for namespace, import_manager in import_managers.items():
        units[namespace].imports = import_manager.apply_imports()

    logger.info(
        "Generated %d declarations in %d units",
        sum(len(u.declarations) for u in units.values()), len(units),
    )
    return units


def build_context(
    document: SchemaDocument, config: GeneratorConfig | None = None,
) -> dict[str, Any]:
    """Build the full template context from the OpenAPI spec."""
    config = config or GeneratorConfig()
    units = build_units(document, config)
    return {
        "units": list(units.values()),
        "unit_count": len(units),
        "declaration_count": sum(len(u.declarations) for u in units.values()),
        "api_title": document.info.title,
        "api_version": document.info.version,
        "config": config,
    }

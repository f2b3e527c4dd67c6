"""Render output units and write the generated TypeScript files.

Takes the context from context_builder and produces one file per unit
under the destination directory.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

import jinja2

from .context_builder import Interface, OutputUnit
from .naming import property_name
from .schema_parser import PropertySignature

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
UNIT_TEMPLATE = "unit.ts.j2"


def doc_comment(docs: Iterable[str], indent: int = 0) -> str:
    """Format descriptions as a JSDoc block."""
    pad = " " * indent
    lines = [f"{pad}/**"]
    for doc in docs:
        for line in doc.replace("*/", "*\\/").splitlines() or [""]:
            lines.append(f"{pad} * {line}".rstrip())
    lines.append(f"{pad} */")
    return "\n".join(lines)


def signature(prop: PropertySignature) -> str:
    """Format one interface member, e.g. ``readonly uid?: string``."""
    readonly = "readonly " if prop.readonly else ""
    optional = "?" if prop.optional else ""
    return f"{readonly}{property_name(prop.name)}{optional}: {prop.type}"


def ts_string(value: str) -> str:
    return json.dumps(value)


def create_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["doc_comment"] = doc_comment
    env.filters["signature"] = signature
    env.filters["ts_string"] = ts_string
    env.tests["interface"] = lambda declaration: isinstance(declaration, Interface)
    return env


def render_unit(unit: OutputUnit, env: jinja2.Environment | None = None) -> str:
    """Render the source text of one unit."""
    template = (env or create_environment()).get_template(UNIT_TEMPLATE)
    return template.render(unit=unit)


def render_units(context: dict[str, Any]) -> dict[str, str]:
    """Render every unit in the context, keyed by namespace."""
    env = create_environment()
    return {unit.namespace: render_unit(unit, env) for unit in context["units"]}


def generate(context: dict[str, Any], destination: Path) -> list[Path]:
    """Render all units and write them below ``destination``."""
    env = create_environment()
    destination = Path(destination)
    logger.info("Writing %d files to %s", context["unit_count"], destination)

    written = []
    for unit in context["units"]:
        output_path = destination / unit.file_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(render_unit(unit, env), encoding="utf-8")
        logger.info("Generated: %s", unit.file_path)
        written.append(output_path)

    print(
        f"Generated {len(written)} files in {destination} "
        f"({context['declaration_count']} declarations)"
    )
    return written

"""Map definition names to output units and type names.

Pattern: {prefix}{namespace segments}.{TypeName}
  - the longest recognised prefix is replaced by its simplification
  - the last dot segment is the type name
  - the remaining segments, joined with '/', are the namespace

Examples (default prefixes):
  io.k8s.api.core.v1.Pod                                 -> core/v1, Pod
  io.k8s.apimachinery.pkg.apis.meta.v1.ObjectMeta         -> meta/v1, ObjectMeta
  io.k8s.apimachinery.pkg.util.intstr.IntOrString         -> util/intstr, IntOrString
  io.k8s.kube-aggregator.pkg.apis.apiregistration.v1.X    -> excluded
"""

from __future__ import annotations

import posixpath
import re
from typing import Mapping, NamedTuple

from .config import DEFINITION_SIMPLIFICATIONS, FILE_EXTENSION

# File stem used for the unit with an empty namespace
ROOT_MODULE = "index"

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class ParsedName(NamedTuple):
    name: str
    path: str


def simplify_definition_name(
    name: str, simplifications: Mapping[str, str] = DEFINITION_SIMPLIFICATIONS,
) -> str | None:
    """Replace the longest matching prefix, or return None if none matches."""
    best_prefix: str | None = None
    for prefix in simplifications:
        if name.startswith(prefix) and (best_prefix is None or len(prefix) > len(best_prefix)):
            best_prefix = prefix
    if best_prefix is None:
        return None
    return simplifications[best_prefix] + name[len(best_prefix):]


def parse_definition_name(
    name: str, simplifications: Mapping[str, str] = DEFINITION_SIMPLIFICATIONS,
) -> ParsedName | None:
    """Split a definition name into its type name and namespace.

    Returns None for names outside the recognised namespaces.
    """
    simplified = simplify_definition_name(name, simplifications)
    if simplified is None:
        return None

    parts = simplified.split(".")
    return ParsedName(name=parts[-1], path="/".join(parts[:-1]))


def _module_path(namespace: str) -> str:
    return namespace or ROOT_MODULE


def generate_file_path(namespace: str, extension: str = FILE_EXTENSION) -> str:
    """Relative file path for the unit holding ``namespace``."""
    return f"{_module_path(namespace)}{extension}"


def module_specifier(from_namespace: str, to_namespace: str) -> str:
    """Relative import specifier from one unit to another.

    >>> module_specifier("apps/v1", "core/v1")
    '../core/v1'
    >>> module_specifier("core/v1", "core/v1alpha1")
    './v1alpha1'
    """
    start = posixpath.dirname(_module_path(from_namespace)) or "."
    target = _module_path(to_namespace)
    # "core" seen from "core/v1" must be "../core", never "."
    directory = posixpath.relpath(posixpath.dirname(target) or ".", start)
    relative = posixpath.join(directory, posixpath.basename(target))
    if not relative.startswith(("./", "../")):
        relative = f"./{relative}"
    return relative


def property_name(name: str) -> str:
    """Property key as written in a declaration, quoted when not an identifier."""
    if _IDENTIFIER.match(name):
        return name
    return '"' + name.replace("\\", "\\\\").replace('"', '\\"') + '"'

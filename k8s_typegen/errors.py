"""Exceptions raised while loading a schema and generating types.

Every failure derives from TypeGenError so the entry point can report
them uniformly. A definition outside the recognised namespaces is not an
error: it is skipped by the orchestrator.
"""

from __future__ import annotations


class TypeGenError(Exception):
    """Base exception for type generation errors."""


class ConfigError(TypeGenError):
    """Invalid or unreadable generator configuration."""


class SpecLoadError(TypeGenError):
    """The schema document could not be fetched, read or validated."""


class MalformedReferenceError(TypeGenError):
    """A $ref does not point into the document's definitions."""


class UnresolvedReferenceError(TypeGenError):
    """A $ref names a definition the document does not contain."""


class ExcludedTypeReferencedError(TypeGenError):
    """A value references a definition outside the recognised namespaces."""


class UnreachableShapeError(TypeGenError):
    """A value matches none of the supported shapes."""

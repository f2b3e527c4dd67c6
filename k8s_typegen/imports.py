"""Track the names each output unit imports from other units."""

from __future__ import annotations

from typing import NamedTuple

from .naming import module_specifier


class ImportStatement(NamedTuple):
    module: str
    names: list[str]


class ImportManager:
    """Accumulates imports for one output unit.

    Imports are only turned into statements by ``apply_imports`` once every
    unit has been generated, so references to units that do not exist yet
    (or that reference this one back) resolve correctly.
    """

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        self._imports: dict[str, set[str]] = {}

    def add_import(self, from_namespace: str, name: str) -> ImportManager:
        """Record that ``name`` is imported from the unit ``from_namespace``."""
        if from_namespace == self.namespace:
            return self
        self._imports.setdefault(from_namespace, set()).add(name)
        return self

    def apply_imports(self) -> list[ImportStatement]:
        """One statement per source unit, names sorted."""
        return [
            ImportStatement(module_specifier(self.namespace, from_namespace), sorted(names))
            for from_namespace, names in self._imports.items()
            if names
        ]

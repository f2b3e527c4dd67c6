"""Generate TypeScript types from the Kubernetes OpenAPI spec."""

from .config import GeneratorConfig, load_config
from .context_builder import build_context, build_units
from .errors import TypeGenError
from .loader import fetch_spec, load_spec

__all__ = [
    "GeneratorConfig",
    "TypeGenError",
    "build_context",
    "build_units",
    "fetch_spec",
    "load_config",
    "load_spec",
]

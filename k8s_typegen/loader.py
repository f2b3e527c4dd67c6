"""Load the Kubernetes OpenAPI spec and resolve references into it.

Reads a swagger.json from disk or fetches it for a Kubernetes version,
and resolves ``#/definitions/...`` pointers.
"""

from __future__ import annotations

import json
import logging
import re
from importlib import metadata
from pathlib import Path
from typing import Any

import requests

from .config import OPENAPI_REF_PREFIX
from .errors import MalformedReferenceError, SpecLoadError, UnresolvedReferenceError
from .model import Definition, Reference, SchemaDocument, parse_document

logger = logging.getLogger(__name__)

SPEC_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/kubernetes/kubernetes/"
    "{version}/api/openapi-spec/swagger.json"
)

DISTRIBUTION_NAME = "k8s-typegen"


def load_spec(path: str | Path) -> SchemaDocument:
    """Load the OpenAPI spec from disk."""
    spec_file = Path(path)
    logger.debug("Loading spec from %s", spec_file)
    try:
        with open(spec_file, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise SpecLoadError(f"Invalid JSON in spec file {spec_file}: {e}") from e
    except OSError as e:
        raise SpecLoadError(f"Failed to read spec file {spec_file}: {e}") from e
    return parse_document(raw)


def fetch_spec(
    version: str,
    url_template: str = SPEC_URL_TEMPLATE,
    timeout: int = 30,
) -> SchemaDocument:
    """Fetch the OpenAPI spec published for a Kubernetes version.

    Raises:
        SpecLoadError: if the request fails, the payload is not JSON, or it
            lacks the ``info`` and ``definitions`` fields.
    """
    url = url_template.format(version=version)
    logger.info("Fetching %s", url)

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        raw: Any = response.json()
    except requests.exceptions.JSONDecodeError as e:
        raise SpecLoadError(
            f"Failed to fetch Kubernetes API for version {version}: invalid JSON response: {e}"
        ) from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        reason = e.response.reason if e.response is not None else ""
        raise SpecLoadError(
            f"Failed to fetch Kubernetes API for version {version}: HTTP {status}: {reason}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise SpecLoadError(f"Failed to fetch Kubernetes API for version {version}: {e}") from e

    try:
        return parse_document(raw)
    except SpecLoadError as e:
        raise SpecLoadError(f"Failed to fetch Kubernetes API for version {version}: {e}") from e


def resolve_ref(document: SchemaDocument, reference: Reference,
                prefix: str = OPENAPI_REF_PREFIX) -> tuple[str, Definition]:
    """Resolve a $ref pointer to the definition name and definition."""
    ref = reference.ref
    if not ref.startswith(prefix):
        raise MalformedReferenceError(f"Invalid or unsupported $ref: {json.dumps(ref)}")

    name = ref[len(prefix):]
    definition = document.definitions.get(name)
    if definition is None:
        raise UnresolvedReferenceError(
            f"Failed to resolve {name} in {document.info.title}/{document.info.version}"
        )
    return name, definition


def normalize_version(version: str) -> str:
    """Normalize a Kubernetes version to the form used by release tags.

    >>> normalize_version("1.30")
    'v1.30.0'
    >>> normalize_version("v1.30.2")
    'v1.30.2'
    """
    if re.match(r"^\d", version):
        version = f"v{version}"
    if re.match(r"^v\d+\.\d+$", version):
        version = f"{version}.0"
    return version


def package_version() -> str:
    """Installed version of this package, which tracks the Kubernetes release."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError as e:
        raise SpecLoadError(
            f"{DISTRIBUTION_NAME} is not installed; pass a Kubernetes version explicitly"
        ) from e

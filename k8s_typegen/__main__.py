"""Entry point: python -m k8s_typegen

Fetches (or reads) the Kubernetes swagger.json, generates TypeScript
types and writes them below the output directory.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .codegen import generate
from .config import load_config
from .context_builder import build_context
from .errors import TypeGenError
from .loader import fetch_spec, load_spec, normalize_version, package_version

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="k8s_typegen",
        description="Generate TypeScript types from the Kubernetes OpenAPI spec.",
    )
    parser.add_argument(
        "--kube-version",
        metavar="VERSION",
        help="Kubernetes version to fetch (default: this package's version)",
    )
    parser.add_argument(
        "--spec",
        type=Path,
        metavar="FILE",
        help="Read swagger.json from FILE instead of fetching it",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="FILE",
        help="JSON file overriding the prefix, elision and scalar tables",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("dist"),
        metavar="DIR",
        help="Destination directory (default: dist)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace) -> int:
    config = load_config(args.config)

    if args.spec:
        document = load_spec(args.spec)
    else:
        version = normalize_version(args.kube_version or package_version())
        print(f"Generating types for Kubernetes API version: {version}")
        document = fetch_spec(version)

    print(f"Loaded API specification: {document.info.title} {document.info.version}")
    context = build_context(document, config)
    generate(context, args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args)
    except TypeGenError as e:
        logger.debug("Generation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

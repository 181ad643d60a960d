"""CLI entry point: python -m make_mcp."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from make_mcp.adapters.schema import SchemaRemapper
from make_mcp.constants import DEFAULT_MAX_DEPTH, MAX_DEPTH_ENV
from make_mcp.errors import MappingError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the make-mcp CLI."""
    parser = argparse.ArgumentParser(
        prog="python -m make_mcp",
        description="Convert a Make scenario interface to the JSON Schema advertised for its tool.",
    )
    parser.add_argument(
        "interface",
        help=(
            "Path to a JSON file ('-' for stdin) holding a list of interface inputs, "
            "an interface response ({'interface': {'input': [...]}}) or a single parameter node."
        ),
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help=f"Maximum parameter nesting depth (default: ${MAX_DEPTH_ENV} or {DEFAULT_MAX_DEPTH}).",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Indentation of the printed schema (default: 2).",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging level (default: WARNING).",
    )
    return parser


def _resolve_max_depth(value: int | None, parser: argparse.ArgumentParser) -> int:
    """Resolve the depth limit: --max-depth → environment → default."""
    if value is None:
        raw = os.environ.get(MAX_DEPTH_ENV)
        if not raw:
            return DEFAULT_MAX_DEPTH
        try:
            value = int(raw)
        except ValueError:
            parser.error(f"{MAX_DEPTH_ENV} must be an integer, got {raw!r}")
    if value < 1:
        parser.error(f"--max-depth must be at least 1, got {value}")
    return value


def _load(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


def _convert(document: Any, remapper: SchemaRemapper) -> dict[str, Any]:
    """Remap whichever interface shape the document holds."""
    if isinstance(document, list):
        return remapper.remap_inputs(document)
    if isinstance(document, dict):
        interface = document.get("interface", document)
        if isinstance(interface, dict) and isinstance(interface.get("input"), list):
            return remapper.remap_inputs(interface["input"])
        return remapper.remap(document)
    raise MappingError(f"Expected a JSON array or object, got {type(document).__name__}")


def main() -> None:
    """CLI entry point.

    Exit codes:
        0 - Schema printed
        1 - Unreadable input or the interface could not be remapped
        2 - Invalid arguments (argparse)
    """
    parser = _build_parser()
    args = parser.parse_args()
    max_depth = _resolve_max_depth(args.max_depth, parser)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        document = _load(args.interface)
    except (OSError, ValueError, RecursionError) as e:
        print(f"Error: cannot read interface '{args.interface}': {e}", file=sys.stderr)
        sys.exit(1)

    remapper = SchemaRemapper(max_depth=max_depth)
    try:
        schema = _convert(document, remapper)
    except MappingError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    logger.info(
        "Converted interface '%s' with %d top-level field(s)",
        args.interface,
        len(schema.get("properties", {})),
    )
    print(json.dumps(schema, indent=args.indent))


if __name__ == "__main__":
    main()

"""Adapters: parameter-interface remapping and error normalization."""

from make_mcp.adapters.errors import ErrorMapper, ErrorNormalizer, normalize_remote_failure
from make_mcp.adapters.schema import SchemaRemapper, remap, remap_inputs

__all__ = [
    "ErrorMapper",
    "ErrorNormalizer",
    "SchemaRemapper",
    "normalize_remote_failure",
    "remap",
    "remap_inputs",
]

"""make-mcp: JSON Schema remapping and error normalization for Make scenario tools."""

from __future__ import annotations

from make_mcp.adapters.errors import ErrorMapper, ErrorNormalizer, normalize_remote_failure
from make_mcp.adapters.schema import SchemaRemapper, remap, remap_inputs
from make_mcp.constants import DEFAULT_MAX_DEPTH, RUN_SCENARIO_PATTERN
from make_mcp.converters.tools import ScenarioToolConverter, success_result
from make_mcp.errors import ErrorKind, MakeError, MakeMCPError, MappingError, NormalizedError, ValidationError
from make_mcp.helpers import require_argument
from make_mcp.models import (
    ElementSpec,
    FieldSpecs,
    ParameterOption,
    ParameterSpec,
    ParameterType,
    Scenario,
    parse_parameter_spec,
)

__all__ = [
    # Public API
    "remap",
    "remap_inputs",
    "normalize_remote_failure",
    "require_argument",
    "success_result",
    # Building blocks
    "SchemaRemapper",
    "ErrorNormalizer",
    "ErrorMapper",
    "ScenarioToolConverter",
    # Models
    "ParameterType",
    "ParameterOption",
    "ParameterSpec",
    "ElementSpec",
    "FieldSpecs",
    "Scenario",
    "parse_parameter_spec",
    # Errors
    "ErrorKind",
    "MakeMCPError",
    "NormalizedError",
    "MakeError",
    "ValidationError",
    "MappingError",
    # Constants
    "DEFAULT_MAX_DEPTH",
    "RUN_SCENARIO_PATTERN",
]

__version__ = "0.1.0"

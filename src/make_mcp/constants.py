"""Shared constants for make-mcp."""

from __future__ import annotations

import re

# Nesting limit applied by SchemaRemapper unless configured otherwise.
DEFAULT_MAX_DEPTH = 32

# Environment variable read by the CLI when --max-depth is not given.
MAX_DEPTH_ENV = "MAKE_MCP_MAX_DEPTH"

# Name of the synthetic root node wrapping a scenario's top-level inputs.
WRAPPER_NAME = "wrapper"

RUN_SCENARIO_PREFIX = "run_scenario_"
RUN_SCENARIO_PATTERN = re.compile(r"^run_scenario_(\d+)$")

# Only scenarios with this scheduling type accept inputs and can be run as tools.
ON_DEMAND_SCHEDULING = "on-demand"

INTERNAL_ERROR_MESSAGE = "Internal error occurred"

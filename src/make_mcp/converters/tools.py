"""ScenarioToolConverter: on-demand scenarios → MCP Tool definitions."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from mcp import types as mcp_types
from pydantic import ValidationError as PydanticValidationError

from make_mcp.adapters.schema import SchemaRemapper
from make_mcp.constants import ON_DEMAND_SCHEDULING, RUN_SCENARIO_PATTERN, RUN_SCENARIO_PREFIX
from make_mcp.errors import MappingError
from make_mcp.models import ParameterSpec, Scenario

logger = logging.getLogger(__name__)

ScenarioLike = Scenario | Mapping[str, Any]
InterfaceLoader = Callable[[int], Iterable[ParameterSpec | Mapping[str, Any]]]


class ScenarioToolConverter:
    """Builds one ``run_scenario_<id>`` tool per on-demand scenario."""

    def __init__(self, remapper: SchemaRemapper | None = None) -> None:
        self._remapper = remapper or SchemaRemapper()

    def build_tool(
        self,
        scenario: ScenarioLike,
        inputs: Iterable[ParameterSpec | Mapping[str, Any]],
    ) -> mcp_types.Tool:
        """Build an MCP Tool that runs a scenario.

        Mapping:
        - scenario.id -> Tool.name (``run_scenario_<id>``)
        - scenario.name and description -> Tool.description ("name (description)")
        - interface inputs -> Tool.inputSchema via SchemaRemapper.remap_inputs

        Raises:
            MappingError: If the interface cannot be remapped.
            pydantic.ValidationError: If ``scenario`` lacks id, name or scheduling.
        """
        scenario = Scenario.model_validate(scenario)
        description = scenario.name
        if scenario.description:
            description += f" ({scenario.description})"

        return mcp_types.Tool(
            name=self.tool_name(scenario.id),
            description=description,
            inputSchema=self._remapper.remap_inputs(inputs),
        )

    def build_tools(
        self,
        scenarios: Iterable[ScenarioLike],
        load_interface: InterfaceLoader,
    ) -> list[mcp_types.Tool]:
        """Build tools for every on-demand scenario in a listing.

        Scenarios with another scheduling type take no inputs and are left
        out. A scenario whose listing entry or interface is malformed is
        logged and skipped; errors raised by ``load_interface`` propagate.

        Args:
            scenarios: Scenario listing entries.
            load_interface: Returns the interface inputs of a scenario id.

        Returns:
            List of successfully built MCP Tool objects.
        """
        tools: list[mcp_types.Tool] = []
        for entry in scenarios:
            try:
                scenario = Scenario.model_validate(entry)
            except PydanticValidationError as e:
                logger.warning("Skipped malformed scenario entry: %s", e)
                continue
            if scenario.scheduling.type != ON_DEMAND_SCHEDULING:
                continue
            try:
                tools.append(self.build_tool(scenario, load_interface(scenario.id)))
            except MappingError as e:
                logger.warning("Failed to build tool for scenario %d: %s", scenario.id, e)
                continue
        logger.debug("Built %d scenario tool(s)", len(tools))
        return tools

    @staticmethod
    def tool_name(scenario_id: int) -> str:
        return f"{RUN_SCENARIO_PREFIX}{scenario_id}"

    @staticmethod
    def parse_tool_name(name: str) -> int | None:
        """Return the scenario id encoded in a ``run_scenario_<id>`` name, else None.

        Examples:
            >>> ScenarioToolConverter.parse_tool_name("run_scenario_42")
            42
            >>> ScenarioToolConverter.parse_tool_name("list_scenarios") is None
            True
        """
        match = RUN_SCENARIO_PATTERN.match(name)
        if match is None:
            return None
        return int(match.group(1))


def success_result(data: Any) -> mcp_types.CallToolResult:
    """Wrap a tool's payload as text content: strings as-is, anything else as indented JSON."""
    text = data if isinstance(data, str) else json.dumps(data, indent=2)
    return mcp_types.CallToolResult(content=[mcp_types.TextContent(type="text", text=text)])

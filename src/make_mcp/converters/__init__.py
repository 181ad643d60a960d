"""Converters: scenarios and results → MCP protocol types."""

from make_mcp.converters.tools import ScenarioToolConverter, success_result

__all__ = ["ScenarioToolConverter", "success_result"]

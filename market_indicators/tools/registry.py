"""
Tool registry.

Maps tool names to ToolDefinitions and dispatches calls by name.
"""

import logging

from market_indicators.core.config import DEFAULT_SETTINGS, IndicatorSettings

from .atr import atr_tool
from .base import ToolDefinition, UnknownToolError
from .macd import macd_tool
from .moving_averages import ema_tool, sma_tool
from .rsi import rsi_tool
from .volume_profile import make_volume_profile_tool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Named collection of indicator tools."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}

    def register(self, tool: ToolDefinition) -> None:
        """
        Add a tool to the registry.

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")

        self._tools[tool.name] = tool
        logger.info("Registered indicator tool: %s", tool.name)

    def get(self, name: str) -> ToolDefinition:
        """
        Look up a tool by name.

        Raises:
            UnknownToolError: If no tool has that name
        """
        try:
            return self._tools[name]
        except KeyError:
            available = ", ".join(self._tools) or "none"
            raise UnknownToolError(f"Unknown tool '{name}'. Available: {available}") from None

    def list_tools(self) -> list[ToolDefinition]:
        """Registered tools in registration order."""
        return list(self._tools.values())

    def call(self, name: str, arguments: dict | None = None) -> dict:
        """
        Run a tool by name.

        Args:
            name: Registered tool name
            arguments: Raw (unvalidated) tool arguments

        Returns:
            The tool's JSON-serializable result

        Raises:
            UnknownToolError: If the tool is not registered
            ToolInputError: If arguments fail validation
            IndicatorError: If the indicator rejects its inputs
        """
        tool = self.get(name)
        logger.debug("Calling tool %s", name)
        return tool.run(arguments or {})

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def build_default_registry(settings: IndicatorSettings | None = None) -> ToolRegistry:
    """Create a registry holding every built-in indicator tool."""
    settings = settings or DEFAULT_SETTINGS

    registry = ToolRegistry()
    for tool in (sma_tool, ema_tool, rsi_tool, macd_tool, atr_tool):
        registry.register(tool)
    registry.register(make_volume_profile_tool(settings))
    return registry

"""
Analytics tool registry.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

from app.schemas.analytics import ToolDefinition
from app.tools.base import AnalyticsTool, ToolNotFoundError
from app.tools.sales_tools import SALES_TOOLS


class ToolRegistry:
    """
    Name-keyed registry of tool instances.  Built-ins are the sales tools.
    """

    def __init__(self, tools: Iterable[AnalyticsTool] | None = None) -> None:
        self._tools: dict[str, AnalyticsTool] = {}
        for tool in tools if tools is not None else (tool_class() for tool_class in SALES_TOOLS):
            self.register(tool)

    def register(self, tool: AnalyticsTool) -> None:
        self._tools[tool.name] = tool

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def get(self, name: str) -> AnalyticsTool:
        tool = self._tools.get(name.strip())
        if tool is None:
            allowed = ", ".join(sorted(self._tools))
            raise ToolNotFoundError(f"Unknown tool '{name}'. Available tools: {allowed}.")
        return tool

    def definitions(self) -> list[ToolDefinition]:
        return [tool.definition() for tool in self._tools.values()]


@lru_cache(maxsize=1)
def get_tool_registry() -> ToolRegistry:
    """
    Build and cache the registry of built-in tools.
    """

    return ToolRegistry()

"""
app/tools package marker.
"""

from app.tools.base import AnalyticsTool, ToolInvocationError, ToolNotFoundError
from app.tools.registry import ToolRegistry, get_tool_registry

__all__ = [
    "AnalyticsTool",
    "ToolInvocationError",
    "ToolNotFoundError",
    "ToolRegistry",
    "get_tool_registry",
]

"""Registry mapping function names to tools."""

from typing import Any

from .base import BaseTool


class ToolRegistry:
    """Holds the tools offered to the model, keyed by name.

    The dispatch loop looks tools up here, so adding a capability is a
    ``register`` call rather than a new branch.
    """

    def __init__(self, tools: list[BaseTool] | None = None):
        self._tools: dict[str, BaseTool] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: BaseTool) -> "ToolRegistry":
        """Add a tool.

        Returns:
            Self for method chaining

        Raises:
            ValueError: If a tool with the same name is registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool {tool.name} already registered")
        self._tools[tool.name] = tool
        return self

    def get(self, name: str) -> BaseTool | None:
        return self._tools.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def function_declarations(self) -> list[dict[str, Any]]:
        return [tool.declaration() for tool in self._tools.values()]

    def set_debug_callback(self, callback: Any) -> None:
        """Propagate a debug callback to every registered tool."""
        for tool in self._tools.values():
            tool.set_debug_callback(callback)

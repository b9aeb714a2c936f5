# File: src/things_mcp/tools/registry.py
# Purpose: Name -> tool lookup, MCP tool listing and dispatch.
from typing import Any

import mcp.types as types

from things_mcp.tools.base import Tool
from things_mcp.tools.errors import ToolValidationError


class ToolRegistry:
    def __init__(self, tools: list[Tool]) -> None:
        self._tools = {tool.name: tool for tool in tools}

    def names(self) -> list[str]:
        return list(self._tools)

    def mcp_tools(self) -> list[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.parameters,
            )
            for tool in self._tools.values()
        ]

    def execute(self, name: str, args: dict[str, Any]) -> Any:
        tool = self._tools.get(name)
        if not tool:
            raise ToolValidationError(f"Unknown tool: {name}")
        return tool.execute(args)

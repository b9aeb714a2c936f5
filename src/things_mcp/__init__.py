# File: src/things_mcp/__init__.py
# Purpose: Things 3 MCP server package
__version__ = "0.2.0"

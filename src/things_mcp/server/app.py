# File: src/things_mcp/server/app.py
# Purpose: MCP stdio server exposing the Things tool registry.
import argparse
import asyncio
import json
from typing import Any, Optional

import mcp.types as types
import structlog
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from things_mcp.core.config import Settings, get_settings
from things_mcp.infrastructure.logging.setup import setup_logging
from things_mcp.things.client import ThingsClient
from things_mcp.tools.command_runner import CommandRunner
from things_mcp.tools.errors import ToolError
from things_mcp.tools.registry import ToolRegistry
from things_mcp.tools.things_tools import build_default_tools

logger = structlog.get_logger(__name__)


class ToolCallFailed(Exception):
    """Carries a serialized error payload; the MCP server reports it with isError."""


def serialize_result(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def call_tool(registry: ToolRegistry, name: str, arguments: Optional[dict[str, Any]]) -> list[types.TextContent]:
    logger.info("tool_call", tool=name)
    try:
        payload = registry.execute(name, arguments or {})
    except ToolError as exc:
        logger.warning("tool_failed", tool=name, error_type=exc.kind, error=exc.message)
        raise ToolCallFailed(serialize_result(exc.to_payload())) from exc
    logger.info("tool_succeeded", tool=name)
    return [types.TextContent(type="text", text=serialize_result(payload))]


def build_registry(settings: Settings) -> ToolRegistry:
    runner = CommandRunner(timeout_s=settings.COMMAND_TIMEOUT_S)
    client = ThingsClient(runner, osascript_path=settings.OSASCRIPT_PATH, open_path=settings.OPEN_PATH)
    return ToolRegistry(build_default_tools(client, auth_token=settings.THINGS_AUTH_TOKEN))


def create_server(registry: ToolRegistry, settings: Settings) -> Server:
    server = Server(settings.SERVER_NAME, version=settings.SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return registry.mcp_tools()

    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return call_tool(registry, name, arguments)

    return server


async def serve(settings: Settings) -> None:
    registry = build_registry(settings)
    server = create_server(registry, settings)
    logger.info(
        "server_starting",
        server=settings.SERVER_NAME,
        version=settings.SERVER_VERSION,
        tools=registry.names(),
        auth_token_configured=settings.has_auth_token,
    )
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="things-mcp", description="Things 3 MCP server (stdio)")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return parser.parse_args(argv)


def run(argv: Optional[list[str]] = None) -> int:
    args = parse_arguments(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.LOG_LEVEL, settings.LOG_DIR, app_name="things_mcp")
    asyncio.run(serve(settings))
    return 0


if __name__ == "__main__":
    raise SystemExit(run())

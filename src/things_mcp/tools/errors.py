# File: src/things_mcp/tools/errors.py
# Purpose: Error kinds raised by tool handlers and surfaced as MCP error results.
from typing import Any


class ToolError(Exception):
    """Base class for failures reported back to the tool caller."""

    kind: str = "tool_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, Any]:
        return {"ok": False, "error": self.message, "error_type": self.kind}


class ToolValidationError(ToolError):
    """Missing or ill-typed arguments, or an unknown tool name."""

    kind = "validation_error"


class AuthorizationError(ToolError):
    kind = "authorization_error"


class ExternalProcessError(ToolError):
    """
    A child process (osascript / open) failed to launch or exited non-zero.

    ``diagnostic`` holds the raw stderr text, unmodified. Things not running,
    denied automation permission and script syntax errors all land here.
    """

    kind = "external_process_error"

    def __init__(self, diagnostic: str, exit_code: int = -1) -> None:
        super().__init__(diagnostic or f"Process exited with code {exit_code}")
        self.diagnostic = diagnostic
        self.exit_code = exit_code

# File: tests/conftest.py
# Purpose: Shared fixtures: a recording fake runner standing in for osascript/open.
from typing import Any, Sequence

import pytest

from things_mcp.things.client import ThingsClient
from things_mcp.tools.registry import ToolRegistry
from things_mcp.tools.things_tools import build_default_tools


class FakeRunner:
    """Records every command and replies with queued results (default: ok, empty stdout)."""

    def __init__(self) -> None:
        self.commands: list[list[str]] = []
        self.results: list[dict[str, Any]] = []

    def reply(self, stdout: str = "", ok: bool = True, stderr: str = "", exit_code: int = 0) -> None:
        self.results.append({"ok": ok, "stdout": stdout, "stderr": stderr, "exit_code": exit_code})

    def run(self, command: Sequence[str]) -> dict[str, Any]:
        self.commands.append(list(command))
        if self.results:
            return self.results.pop(0)
        return {"ok": True, "stdout": "", "stderr": "", "exit_code": 0}

    @property
    def scripts(self) -> list[str]:
        return [cmd[-1] for cmd in self.commands if cmd[0] == "osascript"]

    @property
    def urls(self) -> list[str]:
        return [cmd[-1] for cmd in self.commands if cmd[0] == "open"]


@pytest.fixture()
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def client(runner) -> ThingsClient:
    return ThingsClient(runner)


@pytest.fixture()
def make_registry(client):
    def factory(auth_token: str = "") -> ToolRegistry:
        return ToolRegistry(build_default_tools(client, auth_token=auth_token))

    return factory


@pytest.fixture()
def registry(make_registry) -> ToolRegistry:
    return make_registry()

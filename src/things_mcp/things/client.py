# File: src/things_mcp/things/client.py
# Purpose: Run AppleScript against Things and dispatch things:/// URLs.
from typing import Any, Protocol, Sequence

import structlog

from things_mcp.tools.errors import ExternalProcessError

logger = structlog.get_logger(__name__)


class Runner(Protocol):
    def run(self, command: Sequence[str]) -> dict[str, Any]:
        ...


class ThingsClient:
    """
    The process boundary: one blocking child process per call.

    Every failure, whatever the cause, is raised as ``ExternalProcessError``
    with the process diagnostic text passed through verbatim.
    """

    def __init__(self, runner: Runner, osascript_path: str = "osascript", open_path: str = "open") -> None:
        self.runner = runner
        self.osascript_path = osascript_path
        self.open_path = open_path

    def _check(self, result: dict[str, Any]) -> str:
        if result.get("ok"):
            return str(result.get("stdout", ""))
        diagnostic = str(result.get("stderr") or result.get("error") or "")
        raise ExternalProcessError(diagnostic, int(result.get("exit_code", -1)))

    def run_applescript(self, source: str) -> str:
        result = self.runner.run([self.osascript_path, "-l", "AppleScript", "-e", source])
        try:
            return self._check(result)
        except ExternalProcessError as exc:
            logger.warning("applescript_failed", exit_code=exc.exit_code, diagnostic=exc.diagnostic)
            raise

    def open_url(self, url: str) -> None:
        self._check(self.runner.run([self.open_path, url]))
        logger.info("url_dispatched", url=url)

# File: src/things_mcp/tools/command_runner.py
# Purpose: Execute system commands and capture their trimmed output.
import shutil
import subprocess
from pathlib import Path
from typing import Optional, Sequence

# Standard macOS locations of the commands we shell out to
COMMAND_PATHS = {
    "osascript": "/usr/bin/osascript",
    "open": "/usr/bin/open",
}


class CommandRunner:
    def __init__(self, timeout_s: Optional[float] = None) -> None:
        # None waits for the child indefinitely.
        self.timeout_s = timeout_s

    @staticmethod
    def resolve(command_name: str) -> str:
        """Absolute paths pass through; known names prefer their macOS path, then PATH."""
        if command_name.startswith("/"):
            return command_name
        known = COMMAND_PATHS.get(command_name)
        if known and Path(known).exists():
            return known
        return shutil.which(command_name) or command_name

    def run(self, command: Sequence[str]) -> dict[str, str | int | bool]:
        argv = list(command)
        if argv:
            argv[0] = self.resolve(argv[0])
        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=self.timeout_s,
                check=False,
            )
            return {
                "ok": completed.returncode == 0,
                "stdout": completed.stdout.strip(),
                "stderr": completed.stderr.strip(),
                "exit_code": completed.returncode,
            }
        except subprocess.TimeoutExpired:
            return {"ok": False, "error": "Command timed out", "exit_code": -1}
        except OSError as exc:
            return {"ok": False, "error": str(exc), "exit_code": -1}

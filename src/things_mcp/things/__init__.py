# File: src/things_mcp/things/__init__.py
# Purpose: AppleScript / URL-scheme bridge to Things 3
from things_mcp.things.client import ThingsClient
from things_mcp.things.parser import parse_tsv
from things_mcp.things.url_scheme import build_things_url, percent_encode

__all__ = [
    "ThingsClient",
    "build_things_url",
    "parse_tsv",
    "percent_encode",
]

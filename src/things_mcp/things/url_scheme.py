# File: src/things_mcp/things/url_scheme.py
# Purpose: Build things:/// URLs for the commands dispatched through `open`.
from typing import Any, Mapping, Optional, Sequence
from urllib.parse import quote, urlencode

SCHEME = "things"
COMMANDS = ("add-project", "update", "update-project", "show", "search")


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def percent_encode(params: Mapping[str, Any]) -> str:
    """
    Encode ``params`` as a query string in insertion order.

    ``None`` values are omitted entirely and booleans become ``true`` /
    ``false``. Spaces encode as ``%20``.
    """
    pairs = [(key, _encode_value(value)) for key, value in params.items() if value is not None]
    return urlencode(pairs, quote_via=quote, safe="")


def join_tags(tags: Optional[Sequence[str]]) -> Optional[str]:
    if tags is None:
        return None
    return ",".join(tags)


def build_things_url(command: str, params: Mapping[str, Any]) -> str:
    if command not in COMMANDS:
        raise ValueError(f"Unsupported Things command: {command}")
    return f"{SCHEME}:///{command}?{percent_encode(params)}"

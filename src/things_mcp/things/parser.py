# File: src/things_mcp/things/parser.py
# Purpose: Turn tab-separated osascript output into field-named records.
from typing import Sequence

AREA_FIELDS = ["id", "name"]
PROJECT_FIELDS = ["id", "name", "status"]
TODO_FIELDS = ["id", "title", "status", "notes", "dueISO", "startISO"]


def parse_tsv(raw: str, fields: Sequence[str]) -> list[dict[str, str]]:
    """
    Zip each non-empty line's tab-separated cells against ``fields``.

    Missing trailing cells become ``""`` and extra cells are dropped. Values
    stay strings; an empty ``raw`` is an empty list, not an error.
    """
    if not raw:
        return []
    rows = []
    for line in raw.split("\n"):
        if not line:
            continue
        cells = line.split("\t")
        rows.append({field: cells[i] if i < len(cells) else "" for i, field in enumerate(fields)})
    return rows

# File: src/things_mcp/things/applescript.py
# Purpose: Build AppleScript sources that read from and write to Things 3.
from typing import Literal, Optional, Sequence

THINGS_APP = "Things3"

BuiltInList = Literal["Inbox", "Today", "Anytime", "Upcoming", "Someday"]

_HEADER = [
    'use AppleScript version "2.4"',
    "use scripting additions",
]

_JOIN_LINES = [
    "set AppleScript's text item delimiters to linefeed",
    "return outLines as text",
]

_MAYBE_DATE = [
    "on maybeDate(d)",
    '  if d is missing value then return ""',
    "  return (d as «class isot» as string)",
    "end maybeDate",
]

_AREA_LINE = "(id of a as text) & tab & (name of a as text)"
_PROJECT_LINE = "(id of p as text) & tab & (name of p as text) & tab & (status of p as text)"
_TODO_LINE = (
    "(id of t as text) & tab & (name of t as text) & tab & (status of t as text)"
    " & tab & (notes of t as text) & tab & my maybeDate(due date of t)"
    " & tab & my maybeDate(start date of t)"
)


def escape_applescript_string(value: str) -> str:
    """Escape ``value`` for use inside a double-quoted AppleScript literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def quote(value: str) -> str:
    return f'"{escape_applescript_string(value)}"'


def _tell(body: list[str]) -> list[str]:
    return [f"tell application {quote(THINGS_APP)}", *("  " + line for line in body), "end tell"]


def _listing_script(collection: str, var: str, line_expr: str, dates: bool = False) -> str:
    body = [
        f"repeat with {var} in {collection}",
        f"  set end of outLines to {line_expr}",
        "end repeat",
    ]
    lines = [*_HEADER, "set outLines to {}", *_tell(body), *_JOIN_LINES]
    if dates:
        lines += ["", *_MAYBE_DATE]
    return "\n".join(lines)


def build_list_areas_script() -> str:
    return _listing_script("areas", "a", _AREA_LINE)


def build_list_projects_script(area_id: Optional[str] = None) -> str:
    collection = f"projects of area id {quote(area_id)}" if area_id else "projects"
    return _listing_script(collection, "p", _PROJECT_LINE)


def build_list_todos_script(
    built_in: Optional[str] = None, project_id: Optional[str] = None
) -> str:
    """Todos of a built-in list, or of a project when no list is named."""
    if built_in:
        collection = f"to dos of list {quote(built_in)}"
    elif project_id:
        collection = f"to dos of project id {quote(project_id)}"
    else:
        raise ValueError("built_in or project_id is required")
    return _listing_script(collection, "t", _TODO_LINE, dates=True)


def _schedule_lines(var: str, when: str) -> list[str]:
    keyword = when.lower()
    if keyword == "today":
        return [f'move {var} to list "Today"']
    if keyword == "evening":
        return [f'move {var} to list "Evening"']
    if keyword == "tomorrow":
        return [f"set start date of {var} to (current date) + (1 * days)"]
    # Unparseable dates are ignored.
    return ["try", f"  set start date of {var} to date {quote(when)}", "end try"]


def build_create_todo_script(
    title: str,
    notes: Optional[str] = None,
    when: Optional[str] = None,
    deadline: Optional[str] = None,
    project_id: Optional[str] = None,
    area_id: Optional[str] = None,
    tags: Optional[Sequence[str]] = None,
) -> str:
    """
    Make a new to do and return its id.

    The item lands at the beginning of the project, else the area, else the
    Inbox. Schedule keywords ``today``/``evening``/``tomorrow`` are matched
    case-insensitively; any other ``when`` and ``deadline`` are parsed by
    AppleScript's ``date`` inside a ``try`` block.
    """
    if project_id:
        container = f"at beginning of project id {quote(project_id)}"
    elif area_id:
        container = f"at beginning of area id {quote(area_id)}"
    else:
        container = 'at beginning of list "Inbox"'

    body = [
        "set newToDo to make new to do with properties "
        f"{{name:{quote(title)}, notes:{quote(notes or '')}}} {container}",
    ]
    if when:
        body += _schedule_lines("newToDo", when)
    if deadline:
        body += ["try", f"  set due date of newToDo to date {quote(deadline)}", "end try"]
    if tags:
        body.append(f"set tag names of newToDo to {quote(', '.join(tags))}")
    body.append("set theId to id of newToDo as text")

    return "\n".join([*_HEADER, *_tell(body), "return theId"])


def build_set_status_script(todo_id: str, status: Literal["completed", "canceled"]) -> str:
    if status not in ("completed", "canceled"):
        raise ValueError(f"Unsupported status: {status}")
    body = [
        f"set t to to do id {quote(todo_id)}",
        f"set status of t to {status}",
    ]
    return "\n".join([*_tell(body), 'return "ok"'])

# File: tests/test_things_tools.py
# Purpose: Cover tool validation, dispatch and result shapes through the registry.
from urllib.parse import parse_qs, urlsplit

import pytest

from things_mcp.tools.errors import AuthorizationError, ExternalProcessError, ToolValidationError

ALL_TOOLS = [
    "things_list_areas",
    "things_list_projects",
    "things_list_todos",
    "things_create_todo",
    "things_create_project",
    "things_update_item",
    "things_show",
    "things_search",
    "things_complete",
    "things_cancel",
]

REQUIRED = {
    "things_create_todo": "title",
    "things_create_project": "title",
    "things_update_item": "id",
    "things_search": "query",
    "things_complete": "id",
    "things_cancel": "id",
}


def query_of(url: str) -> dict[str, list[str]]:
    return parse_qs(urlsplit(url).query)


def test_registry_lists_every_tool(registry):
    assert registry.names() == ALL_TOOLS
    schemas = {tool.name: tool.inputSchema for tool in registry.mcp_tools()}
    assert schemas["things_list_todos"]["properties"].keys() == {"builtIn", "projectId"}
    assert "authToken" in schemas["things_update_item"]["properties"]
    for name, field in REQUIRED.items():
        assert field in schemas[name]["required"]


@pytest.mark.parametrize("name", sorted(REQUIRED))
def test_missing_required_field_is_rejected_without_process(registry, runner, name):
    with pytest.raises(ToolValidationError) as exc_info:
        registry.execute(name, {})
    assert REQUIRED[name] in exc_info.value.message
    assert runner.commands == []


def test_list_todos_needs_a_source(registry, runner):
    with pytest.raises(ToolValidationError, match="builtIn or projectId"):
        registry.execute("things_list_todos", {})
    assert runner.commands == []


def test_list_todos_rejects_unknown_builtin(registry, runner):
    with pytest.raises(ToolValidationError):
        registry.execute("things_list_todos", {"builtIn": "Logbook"})
    assert runner.commands == []


def test_unknown_tool(registry):
    with pytest.raises(ToolValidationError, match="Unknown tool: things_delete"):
        registry.execute("things_delete", {})


def test_list_todos_today(registry, runner):
    runner.reply("t1\tBuy milk\topen\t\t\t\nt2\tCall Bob\topen\tre: invoice\t2025-03-01T00:00:00\t")
    rows = registry.execute("things_list_todos", {"builtIn": "Today"})
    assert [row["id"] for row in rows] == ["t1", "t2"]
    assert rows[1] == {
        "id": "t2",
        "title": "Call Bob",
        "status": "open",
        "notes": "re: invoice",
        "dueISO": "2025-03-01T00:00:00",
        "startISO": "",
    }
    assert runner.commands[0][:4] == ["osascript", "-l", "AppleScript", "-e"]
    assert 'to dos of list "Today"' in runner.scripts[0]


def test_list_todos_prefers_builtin_over_project(registry, runner):
    registry.execute("things_list_todos", {"builtIn": "Inbox", "projectId": "p1"})
    assert 'list "Inbox"' in runner.scripts[0]
    assert "project id" not in runner.scripts[0]


def test_list_todos_by_project(registry, runner):
    assert registry.execute("things_list_todos", {"projectId": "p1"}) == []
    assert 'to dos of project id "p1"' in runner.scripts[0]


def test_list_areas_and_projects(registry, runner):
    runner.reply("a1\tWork")
    runner.reply("p1\tLaunch\topen\np2\tArchive\tcompleted")
    assert registry.execute("things_list_areas", {}) == [{"id": "a1", "name": "Work"}]
    projects = registry.execute("things_list_projects", {"areaId": "a1"})
    assert projects[1] == {"id": "p2", "name": "Archive", "status": "completed"}
    assert 'projects of area id "a1"' in runner.scripts[1]


def test_create_todo_returns_new_id(registry, runner):
    runner.reply("NEW-ID")
    result = registry.execute(
        "things_create_todo",
        {"title": "Write report", "when": "today", "tags": ["work"], "projectId": "p9"},
    )
    assert result == {"id": "NEW-ID"}
    script = runner.scripts[0]
    assert 'name:"Write report"' in script
    assert 'move newToDo to list "Today"' in script
    assert 'at beginning of project id "p9"' in script


def test_create_project_dispatches_url(registry, runner):
    result = registry.execute("things_create_project", {"title": "Move house", "area": "Home"})
    assert result["ok"] is True
    assert runner.urls == [result["url"]]
    assert result["url"].startswith("things:///add-project?")
    assert query_of(result["url"]) == {"title": ["Move house"], "area": ["Home"], "reveal": ["false"]}


def test_update_requires_token(registry, runner):
    with pytest.raises(AuthorizationError, match="THINGS_AUTH_TOKEN"):
        registry.execute("things_update_item", {"id": "X1", "title": "New"})
    assert runner.commands == []


def test_update_uses_configured_token(make_registry, runner):
    registry = make_registry(auth_token="env-token")
    result = registry.execute("things_update_item", {"id": "X1", "completed": True, "addTags": ["a", "b"]})
    assert result["ok"] is True
    query = query_of(runner.urls[0])
    assert query["auth-token"] == ["env-token"]
    assert query["id"] == ["X1"]
    assert query["completed"] == ["true"]
    assert query["add-tags"] == ["a,b"]
    assert "title" not in query
    assert runner.urls[0].startswith("things:///update?")


def test_update_explicit_token_overrides(make_registry, runner):
    registry = make_registry(auth_token="env-token")
    registry.execute(
        "things_update_item",
        {"id": "P1", "authToken": "call-token", "isProject": True, "listId": "A2", "tags": ["x"]},
    )
    url = runner.urls[0]
    assert url.startswith("things:///update-project?")
    query = query_of(url)
    assert query["auth-token"] == ["call-token"]
    assert query["list-id"] == ["A2"]
    assert query["tags"] == ["x"]


def test_update_with_explicit_token_only(registry, runner):
    registry.execute("things_update_item", {"id": "X1", "authToken": "call-token"})
    assert query_of(runner.urls[0])["auth-token"] == ["call-token"]


def test_show_and_search(registry, runner):
    registry.execute("things_show", {"id": "today"})
    registry.execute("things_search", {"query": "tax return"})
    assert runner.urls == ["things:///show?id=today", "things:///search?query=tax%20return"]


@pytest.mark.parametrize("name, status", [("things_complete", "completed"), ("things_cancel", "canceled")])
def test_set_status_tools(registry, runner, name, status):
    assert registry.execute(name, {"id": "T7"}) == {"ok": True, "id": "T7"}
    assert 'set t to to do id "T7"' in runner.scripts[0]
    assert f"set status of t to {status}" in runner.scripts[0]


def test_process_failure_carries_diagnostic(registry, runner):
    runner.reply(ok=False, stderr="execution error: Things3 got an error: Application isn't running. (-600)", exit_code=1)
    with pytest.raises(ExternalProcessError) as exc_info:
        registry.execute("things_list_areas", {})
    assert exc_info.value.diagnostic == "execution error: Things3 got an error: Application isn't running. (-600)"
    assert exc_info.value.to_payload()["error_type"] == "external_process_error"


def test_url_launch_failure(make_registry, runner):
    registry = make_registry(auth_token="t")
    runner.reply(ok=False, stderr="LSOpenURLsWithRole() failed", exit_code=1)
    with pytest.raises(ExternalProcessError, match="LSOpenURLsWithRole"):
        registry.execute("things_update_item", {"id": "X1"})


def test_blank_tokens_count_as_missing(make_registry, runner):
    registry = make_registry(auth_token="   ")
    with pytest.raises(AuthorizationError):
        registry.execute("things_update_item", {"id": "X1", "authToken": "  "})
    assert runner.commands == []


def test_tokens_are_stripped_before_dispatch(make_registry, runner):
    registry = make_registry(auth_token=" env-token \n")
    registry.execute("things_update_item", {"id": "X1", "authToken": "  "})
    assert query_of(runner.urls[0])["auth-token"] == ["env-token"]

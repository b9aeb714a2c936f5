# File: src/things_mcp/tools/things_tools.py
# Purpose: Things 3 tools: AppleScript reads/creates and URL-scheme updates.
from dataclasses import dataclass
from typing import Any, Optional

from things_mcp.things.applescript import (
    build_create_todo_script,
    build_list_areas_script,
    build_list_projects_script,
    build_list_todos_script,
    build_set_status_script,
)
from things_mcp.things.client import ThingsClient
from things_mcp.things.parser import AREA_FIELDS, PROJECT_FIELDS, TODO_FIELDS, parse_tsv
from things_mcp.things.url_scheme import build_things_url, join_tags
from things_mcp.tools.base import Tool
from things_mcp.tools.errors import AuthorizationError
from things_mcp.tools.schemas import (
    CreateProjectInput,
    CreateTodoInput,
    ItemIdInput,
    ListAreasInput,
    ListProjectsInput,
    ListTodosInput,
    SearchInput,
    ShowInput,
    ToolInput,
    UpdateItemInput,
    validate_args,
)


@dataclass
class ThingsTool:
    client: ThingsClient
    name: str = ""
    description: str = ""
    input_model: type[ToolInput] = ToolInput
    parameters: Optional[dict[str, Any]] = None

    def __post_init__(self) -> None:
        if self.parameters is None:
            self.parameters = self.input_model.model_json_schema(by_alias=True)

    def execute(self, args: dict[str, Any]) -> Any:
        return self.handle(validate_args(self.input_model, args))

    def handle(self, params: Any) -> Any:
        raise NotImplementedError

    def dispatch(self, command: str, params: dict[str, Any]) -> dict[str, Any]:
        url = build_things_url(command, params)
        self.client.open_url(url)
        return {"ok": True, "url": url}


@dataclass
class ListAreasTool(ThingsTool):
    name: str = "things_list_areas"
    description: str = "List all Things areas (id, name)."
    input_model: type[ToolInput] = ListAreasInput

    def handle(self, params: ListAreasInput) -> list[dict[str, str]]:
        raw = self.client.run_applescript(build_list_areas_script())
        return parse_tsv(raw, AREA_FIELDS)


@dataclass
class ListProjectsTool(ThingsTool):
    name: str = "things_list_projects"
    description: str = "List projects, optionally filtered by areaId."
    input_model: type[ToolInput] = ListProjectsInput

    def handle(self, params: ListProjectsInput) -> list[dict[str, str]]:
        raw = self.client.run_applescript(build_list_projects_script(params.area_id))
        return parse_tsv(raw, PROJECT_FIELDS)


@dataclass
class ListTodosTool(ThingsTool):
    name: str = "things_list_todos"
    description: str = (
        "List to-dos from a built-in list (Inbox, Today, Anytime, Upcoming, Someday) or from a projectId."
    )
    input_model: type[ToolInput] = ListTodosInput

    def handle(self, params: ListTodosInput) -> list[dict[str, str]]:
        # builtIn wins when both are given
        if params.built_in:
            script = build_list_todos_script(built_in=params.built_in)
        else:
            script = build_list_todos_script(project_id=params.project_id)
        return parse_tsv(self.client.run_applescript(script), TODO_FIELDS)


@dataclass
class CreateTodoTool(ThingsTool):
    name: str = "things_create_todo"
    description: str = "Create a to-do. Returns the new Things ID."
    input_model: type[ToolInput] = CreateTodoInput

    def handle(self, params: CreateTodoInput) -> dict[str, str]:
        script = build_create_todo_script(
            title=params.title,
            notes=params.notes,
            when=params.when,
            deadline=params.deadline,
            project_id=params.project_id,
            area_id=params.area_id,
            tags=params.tags,
        )
        return {"id": self.client.run_applescript(script)}


@dataclass
class CreateProjectTool(ThingsTool):
    name: str = "things_create_project"
    description: str = "Create a project via Things URL scheme."
    input_model: type[ToolInput] = CreateProjectInput

    def handle(self, params: CreateProjectInput) -> dict[str, Any]:
        return self.dispatch(
            "add-project",
            {
                "title": params.title,
                "notes": params.notes,
                "when": params.when,
                "deadline": params.deadline,
                "area": params.area,
                "reveal": params.reveal,
            },
        )


@dataclass
class UpdateItemTool(ThingsTool):
    name: str = "things_update_item"
    description: str = (
        "Update a to-do or project by id via Things URL scheme. "
        "Uses THINGS_AUTH_TOKEN from env; you may override by passing authToken."
    )
    input_model: type[ToolInput] = UpdateItemInput
    auth_token: str = ""

    def handle(self, params: UpdateItemInput) -> dict[str, Any]:
        token = (params.auth_token or "").strip() or self.auth_token.strip()
        if not token:
            raise AuthorizationError(
                "Missing Things auth token. Set THINGS_AUTH_TOKEN in the MCP server env "
                "or pass authToken explicitly."
            )
        command = "update-project" if params.is_project else "update"
        return self.dispatch(
            command,
            {
                "auth-token": token,
                "id": params.id,
                "title": params.title,
                "notes": params.notes,
                "when": params.when,
                "deadline": params.deadline,
                "list-id": params.list_id,
                "reveal": params.reveal,
                "duplicate": params.duplicate,
                "completed": params.completed,
                "canceled": params.canceled,
                "add-tags": join_tags(params.add_tags),
                "tags": join_tags(params.tags),
            },
        )


@dataclass
class ShowTool(ThingsTool):
    name: str = "things_show"
    description: str = "Open Things to a specific item or view."
    input_model: type[ToolInput] = ShowInput

    def handle(self, params: ShowInput) -> dict[str, Any]:
        return self.dispatch("show", {"id": params.id, "filter": params.filter, "query": params.query})


@dataclass
class SearchTool(ThingsTool):
    name: str = "things_search"
    description: str = "Open Things and run a search query in the UI."
    input_model: type[ToolInput] = SearchInput

    def handle(self, params: SearchInput) -> dict[str, Any]:
        return self.dispatch("search", {"query": params.query})


@dataclass
class SetStatusTool(ThingsTool):
    input_model: type[ToolInput] = ItemIdInput
    status: str = "completed"

    def handle(self, params: ItemIdInput) -> dict[str, Any]:
        self.client.run_applescript(build_set_status_script(params.id, self.status))
        return {"ok": True, "id": params.id}


def build_default_tools(client: ThingsClient, auth_token: str = "") -> list[Tool]:
    return [
        ListAreasTool(client),
        ListProjectsTool(client),
        ListTodosTool(client),
        CreateTodoTool(client),
        CreateProjectTool(client),
        UpdateItemTool(client, auth_token=auth_token),
        ShowTool(client),
        SearchTool(client),
        SetStatusTool(
            client,
            name="things_complete",
            description="Mark a to-do as completed by ID (AppleScript).",
            status="completed",
        ),
        SetStatusTool(
            client,
            name="things_cancel",
            description="Mark a to-do as canceled by ID (AppleScript).",
            status="canceled",
        ),
    ]

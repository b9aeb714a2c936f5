# File: src/things_mcp/tools/schemas.py
# Purpose: Pydantic input models for the Things tools and argument validation.
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from things_mcp.things.applescript import BuiltInList
from things_mcp.tools.errors import ToolValidationError


class ToolInput(BaseModel):
    """Base for tool arguments: camelCase on the wire, unknown keys ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ListAreasInput(ToolInput):
    pass


class ListProjectsInput(ToolInput):
    area_id: Optional[str] = Field(None, alias="areaId", description="Optional area ID to filter projects")


class ListTodosInput(ToolInput):
    built_in: Optional[BuiltInList] = Field(
        None, alias="builtIn", description="Built-in list name"
    )
    project_id: Optional[str] = Field(None, alias="projectId", description="Project ID to list todos from")

    @model_validator(mode="after")
    def require_source(self) -> "ListTodosInput":
        if not self.built_in and not self.project_id:
            raise ValueError("Provide either builtIn or projectId")
        return self


class CreateTodoInput(ToolInput):
    title: str = Field(..., description="Title of the to-do")
    notes: Optional[str] = Field(None, description="Notes for the to-do")
    when: Optional[str] = Field(None, description="When to schedule (today, evening, tomorrow, or date)")
    deadline: Optional[str] = Field(None, description="Deadline date")
    project_id: Optional[str] = Field(None, alias="projectId", description="Project ID to add to")
    area_id: Optional[str] = Field(None, alias="areaId", description="Area ID to add to")
    tags: Optional[list[str]] = Field(None, description="Tags to apply")


class CreateProjectInput(ToolInput):
    title: str = Field(..., description="Project title")
    notes: Optional[str] = Field(None, description="Project notes")
    when: Optional[str] = Field(None, description="When to schedule")
    deadline: Optional[str] = Field(None, description="Project deadline")
    area: Optional[str] = Field(None, description="Area name")
    reveal: bool = Field(False, description="Show in Things after creation")


class UpdateItemInput(ToolInput):
    auth_token: Optional[str] = Field(None, alias="authToken", description="Override auth token")
    id: str = Field(..., description="Item ID to update")
    title: Optional[str] = Field(None, description="New title")
    notes: Optional[str] = Field(None, description="New notes")
    add_tags: Optional[list[str]] = Field(None, alias="addTags", description="Tags to add")
    tags: Optional[list[str]] = Field(None, description="Replace all tags")
    when: Optional[str] = Field(None, description="New schedule")
    deadline: Optional[str] = Field(None, description="New deadline")
    list_id: Optional[str] = Field(None, alias="listId", description="Move to list ID")
    reveal: Optional[bool] = Field(None, description="Show in Things")
    duplicate: Optional[bool] = Field(None, description="Duplicate item")
    completed: Optional[bool] = Field(None, description="Mark as completed")
    canceled: Optional[bool] = Field(None, description="Mark as canceled")
    is_project: bool = Field(False, alias="isProject", description="Is this a project (not a to-do)")


class ShowInput(ToolInput):
    id: Optional[str] = Field(None, description="Item ID to show")
    filter: Optional[str] = Field(None, description="Filter to apply")
    query: Optional[str] = Field(None, description="Query to search")


class SearchInput(ToolInput):
    query: str = Field(..., description="Search query")


class ItemIdInput(ToolInput):
    id: str = Field(..., description="To-do ID")


def _format_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


def validate_args(model: type[ToolInput], args: Optional[dict[str, Any]]) -> Any:
    try:
        return model.model_validate(args or {})
    except ValidationError as exc:
        raise ToolValidationError(_format_errors(exc)) from exc

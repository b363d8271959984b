"""MCP tools for reminder list management."""

from typing import Annotated

from fastmcp.tools.tool import ToolResult
from pydantic import Field

from ..constants import MAX_NAME_LENGTH
from ..exceptions import AppleScriptError, NotFoundError
from ..executor import missing_resource
from ..store import ReminderStore
from ..utils import error_result, success_result

ListName = Annotated[str, Field(min_length=1, max_length=MAX_NAME_LENGTH)]


async def list_reminder_lists() -> ToolResult:
    """Get all reminder lists from the macOS Reminders app.

    Returns list names, IDs, and reminder counts.
    """
    try:
        lists = await ReminderStore.get_instance().get_lists()
    except Exception as e:
        error_result(e)
    # Wrapped in a dict so an empty result still renders as content
    return success_result({"lists": [lst.model_dump() for lst in lists]})


async def get_reminder_list(name: Annotated[str, Field(min_length=1)]) -> ToolResult:
    """Get a single reminder list by name.

    Args:
        name: Exact name of the list.

    Returns:
        The list's ID, name, and reminder count.
    """
    try:
        found = await ReminderStore.get_instance().get_list(name)
        if found is None:
            raise NotFoundError("List", name)
    except AppleScriptError as e:
        if missing_resource(e.message) is not None:
            error_result(NotFoundError("List", name))
        error_result(e)
    except Exception as e:
        error_result(e)
    return success_result({"list": found.model_dump()})


async def create_reminder_list(name: ListName) -> ToolResult:
    """Create a new reminder list.

    Args:
        name: Name for the new list.
    """
    try:
        list_id = await ReminderStore.get_instance().create_list(name)
    except Exception as e:
        error_result(e)
    return success_result(
        {
            "success": True,
            "message": f'List "{name}" created successfully',
            "id": list_id,
        }
    )


async def delete_reminder_list(name: Annotated[str, Field(min_length=1)]) -> ToolResult:
    """Delete a reminder list and all its reminders.

    Warning: This cannot be undone.

    Args:
        name: Name of the list to delete.
    """
    try:
        await ReminderStore.get_instance().delete_list(name)
    except Exception as e:
        error_result(e)
    return success_result(
        {"success": True, "message": f'List "{name}" deleted successfully'}
    )


async def rename_reminder_list(
    current_name: Annotated[str, Field(min_length=1)],
    new_name: ListName,
) -> ToolResult:
    """Rename an existing reminder list.

    Args:
        current_name: Current name of the list.
        new_name: New name for the list.
    """
    try:
        await ReminderStore.get_instance().rename_list(current_name, new_name)
    except Exception as e:
        error_result(e)
    return success_result(
        {
            "success": True,
            "message": f'List renamed from "{current_name}" to "{new_name}"',
        }
    )


__all__ = [
    "list_reminder_lists",
    "get_reminder_list",
    "create_reminder_list",
    "delete_reminder_list",
    "rename_reminder_list",
]

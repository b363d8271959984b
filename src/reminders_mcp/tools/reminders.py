"""MCP tools for reminder CRUD operations."""

from typing import Annotated

from fastmcp.tools.tool import ToolResult
from pydantic import Field

from ..constants import (
    DEFAULT_RESULT_LIMIT,
    MAX_BODY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_RESULT_LIMIT,
)
from ..exceptions import AppleScriptError, NotFoundError
from ..executor import missing_resource
from ..models import (
    UNSET,
    CreateReminderInput,
    PriorityName,
    ReminderFilter,
    UpdateReminderInput,
)
from ..store import ReminderStore
from ..utils import error_result, filter_reminders, success_result

RequiredText = Annotated[str, Field(min_length=1)]

# Update fields where an explicit null means "clear"
_CLEARABLE = frozenset({"body", "due_date", "all_day_due_date", "remind_me_date"})


async def get_reminders(
    list_name: str | None = None,
    completed: bool | None = None,
    priority: PriorityName | None = None,
    due_before: str | None = None,
    due_after: str | None = None,
    search_text: str | None = None,
    limit: Annotated[int, Field(ge=1, le=MAX_RESULT_LIMIT)] = DEFAULT_RESULT_LIMIT,
) -> ToolResult:
    """Get reminders with optional filters.

    Lists are fetched one at a time and filtered in memory, in this order:
    completion, priority, due before, due after, text search, then limit.

    Args:
        list_name: Only search this list. If omitted, searches all lists.
        completed: true=completed only, false=incomplete only, omit for all.
        priority: Only reminders with this priority (none/high/medium/low).
        due_before: Only reminders due strictly before this ISO 8601 date.
        due_after: Only reminders due strictly after this ISO 8601 date.
        search_text: Case-insensitive text to find in name or body.
        limit: Maximum number of reminders to return (1-500, default 100).
    """
    try:
        criteria = ReminderFilter(
            list_name=list_name,
            completed=completed,
            priority=priority,
            due_before=due_before,
            due_after=due_after,
            search_text=search_text,
            limit=limit,
        )
        store = ReminderStore.get_instance()

        lists = await store.get_lists()
        if criteria.list_name:
            lists = [lst for lst in lists if lst.name == criteria.list_name]
            if not lists:
                raise NotFoundError("List", criteria.list_name)

        reminders = []
        for lst in lists:
            reminders.extend(await store.get_reminders_in_list(lst.name))

        matching = filter_reminders(reminders, criteria)
    except Exception as e:
        error_result(e)

    return success_result(
        {
            "total": len(matching),
            "reminders": [r.model_dump() for r in matching],
        }
    )


async def get_reminder(reminder_id: RequiredText, list_name: RequiredText) -> ToolResult:
    """Get a single reminder by ID.

    Args:
        reminder_id: The unique identifier of the reminder.
        list_name: The name of the list containing the reminder.
    """
    try:
        reminder = await ReminderStore.get_instance().get_reminder(list_name, reminder_id)
        if reminder is None:
            raise NotFoundError("Reminder", reminder_id)
    except AppleScriptError as e:
        resource_type = missing_resource(e.message)
        if resource_type == "List":
            error_result(NotFoundError("List", list_name))
        if resource_type == "Reminder":
            error_result(NotFoundError("Reminder", reminder_id))
        error_result(e)
    except Exception as e:
        error_result(e)
    return success_result({"reminder": reminder.model_dump()})


async def create_reminder(
    name: Annotated[str, Field(min_length=1, max_length=MAX_NAME_LENGTH)],
    list_name: RequiredText,
    body: Annotated[str | None, Field(max_length=MAX_BODY_LENGTH)] = None,
    due_date: str | None = None,
    all_day_due_date: str | None = None,
    remind_me_date: str | None = None,
    priority: PriorityName = "none",
) -> ToolResult:
    """Create a new reminder in the specified list.

    Args:
        name: Title of the reminder.
        list_name: Name of the list to add the reminder to.
        body: Notes/description for the reminder.
        due_date: Due date with time (ISO 8601, e.g. '2025-01-15T14:00:00').
        all_day_due_date: All-day due date without time (e.g. '2025-01-15').
        remind_me_date: When to show the alert notification (ISO 8601).
        priority: Priority level (none/high/medium/low). Default none.
    """
    try:
        data = CreateReminderInput(
            name=name,
            list_name=list_name,
            body=body,
            due_date=due_date,
            all_day_due_date=all_day_due_date,
            remind_me_date=remind_me_date,
            priority=priority,
        )
        reminder_id = await ReminderStore.get_instance().create_reminder(data)
    except Exception as e:
        error_result(e)
    return success_result(
        {
            "success": True,
            "message": f'Reminder "{name}" created successfully',
            "id": reminder_id,
        }
    )


async def update_reminder(
    reminder_id: RequiredText,
    list_name: RequiredText,
    name: Annotated[str | None, Field(min_length=1, max_length=MAX_NAME_LENGTH)] = None,
    body: Annotated[str | None, Field(max_length=MAX_BODY_LENGTH)] = UNSET,
    due_date: str | None = UNSET,
    all_day_due_date: str | None = UNSET,
    remind_me_date: str | None = UNSET,
    priority: PriorityName | None = None,
    completed: bool | None = None,
) -> ToolResult:
    """Update an existing reminder. Only the fields you pass are changed.

    Args:
        reminder_id: The unique identifier of the reminder to update.
        list_name: The name of the list containing the reminder.
        name: New title.
        body: New notes. Pass null to clear.
        due_date: New due date with time. Pass null to clear.
        all_day_due_date: New all-day due date. Pass null to clear.
        remind_me_date: New alert date. Pass null to clear.
        priority: New priority level; "none" removes the priority.
        completed: New completion status.
    """
    provided = {
        "name": name,
        "body": body,
        "due_date": due_date,
        "all_day_due_date": all_day_due_date,
        "remind_me_date": remind_me_date,
        "priority": priority,
        "completed": completed,
    }
    # Clearable fields count as present when explicitly null
    fields = {
        key: value
        for key, value in provided.items()
        if value is not UNSET and (value is not None or key in _CLEARABLE)
    }
    try:
        data = UpdateReminderInput(id=reminder_id, list_name=list_name, **fields)
        await ReminderStore.get_instance().update_reminder(data)
    except Exception as e:
        error_result(e)
    return success_result({"success": True, "message": "Reminder updated successfully"})


async def delete_reminder(reminder_id: RequiredText, list_name: RequiredText) -> ToolResult:
    """Delete a reminder. This action cannot be undone.

    Args:
        reminder_id: The unique identifier of the reminder to delete.
        list_name: The name of the list containing the reminder.
    """
    try:
        await ReminderStore.get_instance().delete_reminder(list_name, reminder_id)
    except Exception as e:
        error_result(e)
    return success_result({"success": True, "message": "Reminder deleted successfully"})


async def complete_reminder(
    reminder_id: RequiredText,
    list_name: RequiredText,
    completed: bool = True,
) -> ToolResult:
    """Mark a reminder as completed or incomplete.

    Args:
        reminder_id: The unique identifier of the reminder.
        list_name: The name of the list containing the reminder.
        completed: True to mark complete, False to mark incomplete.
    """
    try:
        await ReminderStore.get_instance().complete_reminder(
            list_name, reminder_id, completed
        )
    except Exception as e:
        error_result(e)
    state = "completed" if completed else "incomplete"
    return success_result({"success": True, "message": f"Reminder marked as {state}"})


__all__ = [
    "get_reminders",
    "get_reminder",
    "create_reminder",
    "update_reminder",
    "delete_reminder",
    "complete_reminder",
]

"""MCP tools for macOS Reminders."""

from .batch import batch_complete_reminders, batch_create_reminders, batch_update_reminders
from .lists import (
    create_reminder_list,
    delete_reminder_list,
    get_reminder_list,
    list_reminder_lists,
    rename_reminder_list,
)
from .reminders import (
    complete_reminder,
    create_reminder,
    delete_reminder,
    get_reminder,
    get_reminders,
    update_reminder,
)

__all__ = [
    # List management
    "list_reminder_lists",
    "get_reminder_list",
    "create_reminder_list",
    "delete_reminder_list",
    "rename_reminder_list",
    # Reminder CRUD
    "get_reminders",
    "get_reminder",
    "create_reminder",
    "update_reminder",
    "delete_reminder",
    "complete_reminder",
    # Batch operations
    "batch_create_reminders",
    "batch_update_reminders",
    "batch_complete_reminders",
]

"""MCP Server for macOS Reminders."""

from .exceptions import (
    AccessDeniedError,
    AppleScriptError,
    InvalidDateError,
    InvalidInputError,
    NotFoundError,
    RemindersError,
    ScriptTimeoutError,
    format_error,
)
from .executor import check_access, run_applescript
from .models import (
    BatchOperationResult,
    CreateReminderInput,
    OperationResult,
    Priority,
    Reminder,
    ReminderFilter,
    ReminderList,
    ReminderRef,
    UpdateReminderInput,
)
from .server import main, mcp
from .store import ReminderStore

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "main",
    "mcp",
    # Store
    "ReminderStore",
    # Executor
    "run_applescript",
    "check_access",
    # Models
    "Priority",
    "ReminderList",
    "Reminder",
    "OperationResult",
    "BatchOperationResult",
    "CreateReminderInput",
    "UpdateReminderInput",
    "ReminderRef",
    "ReminderFilter",
    # Exceptions
    "RemindersError",
    "AccessDeniedError",
    "ScriptTimeoutError",
    "AppleScriptError",
    "NotFoundError",
    "InvalidInputError",
    "InvalidDateError",
    "format_error",
]

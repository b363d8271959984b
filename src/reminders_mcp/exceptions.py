"""Exceptions for the Reminders MCP server."""

from typing import Any

from pydantic import ValidationError


class RemindersError(Exception):
    """Base exception for Reminders MCP operations.

    Attributes:
        message: Human-readable error description
        code: Stable machine-readable error code
        recoverable: Whether the caller may succeed by retrying or fixing input
    """

    code: str = "REMINDERS_ERROR"
    recoverable: bool = True

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class AccessDeniedError(RemindersError):
    """Automation access to Reminders hasn't been granted.

    To fix: Open System Settings > Privacy & Security > Automation
    and allow this application to control Reminders.
    """

    code = "PERMISSION_DENIED"
    recoverable = False

    def __init__(self, message: str | None = None) -> None:
        default_msg = (
            "Reminders access denied. Please grant permission in "
            "System Settings > Privacy & Security > Automation."
        )
        super().__init__(message or default_msg)


class ScriptTimeoutError(RemindersError):
    """AppleScript execution exceeded its time budget and was killed."""

    code = "TIMEOUT"

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(
            f"AppleScript execution timed out after {timeout_seconds:g} seconds"
        )
        self.timeout_seconds = timeout_seconds


class AppleScriptError(RemindersError):
    """The script failed inside osascript or the Reminders app.

    The message is the interpreter's own error text, passed through.
    """

    code = "APPLESCRIPT_ERROR"


class NotFoundError(RemindersError):
    """Reminder or list not found."""

    code = "NOT_FOUND"

    def __init__(self, resource_type: str, identifier: str) -> None:
        super().__init__(f"{resource_type} not found: {identifier}")
        self.resource_type = resource_type
        self.identifier = identifier


class InvalidInputError(RemindersError):
    """Input rejected before any script was run."""

    code = "VALIDATION_ERROR"


class InvalidDateError(InvalidInputError):
    """A date string could not be parsed as ISO-8601."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid date: {value}")
        self.value = value


def format_error(error: BaseException) -> dict[str, Any]:
    """Convert any exception into the JSON error envelope."""
    if isinstance(error, RemindersError):
        return {
            "error": True,
            "code": error.code,
            "message": error.message,
            "recoverable": error.recoverable,
        }

    if isinstance(error, ValidationError):
        return {
            "error": True,
            "code": InvalidInputError.code,
            "message": str(error),
            "recoverable": True,
        }

    return {
        "error": True,
        "code": "UNKNOWN_ERROR",
        "message": str(error) or type(error).__name__,
        "recoverable": False,
    }

"""Pydantic models for Reminders MCP server."""

from enum import IntEnum
from typing import Any, Literal

from pydantic import BaseModel, Field

from .constants import (
    DEFAULT_RESULT_LIMIT,
    MAX_BODY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_RESULT_LIMIT,
)

PriorityName = Literal["none", "high", "medium", "low"]


class Priority(IntEnum):
    """Reminder priority levels matching the Reminders app's own scale.

    Values match the Apple Reminders app UI:
    - NONE (0): No priority flag
    - HIGH (1): !!! in UI
    - MEDIUM (5): !! in UI
    - LOW (9): ! in UI
    """

    NONE = 0
    HIGH = 1
    MEDIUM = 5
    LOW = 9

    @classmethod
    def from_name(cls, name: str) -> "Priority":
        """Look up a priority by its lowercase tool-facing name."""
        return cls[name.upper()]

    @property
    def label(self) -> str:
        """Lowercase tool-facing name ("none", "high", ...)."""
        return self.name.lower()


class _Unset:
    """Marker for an argument that was not supplied at all."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


# Distinguishes "not provided" from an explicit None (which clears a field)
UNSET: Any = _Unset()


class ReminderList(BaseModel):
    """A Reminders list."""

    id: str = Field(description="Unique identifier for the list")
    name: str = Field(description="Display name of the list (unique, used for lookups)")
    reminder_count: int = Field(default=0, description="Number of reminders in the list")


class Reminder(BaseModel):
    """A reminder item."""

    id: str = Field(description="Unique identifier for the reminder")
    name: str = Field(description="Title of the reminder")
    body: str | None = Field(default=None, description="Notes/description")
    due_date: str | None = Field(
        default=None, description="Due date with time (ISO 8601)"
    )
    all_day_due_date: str | None = Field(
        default=None, description="All-day due date without time (ISO 8601)"
    )
    remind_me_date: str | None = Field(
        default=None, description="When the alert fires (ISO 8601)"
    )
    priority: int = Field(
        default=Priority.NONE,
        description="Priority code (0=none, 1=high, 5=medium, 9=low)",
    )
    completed: bool = Field(default=False, description="Whether the reminder is done")
    completion_date: str | None = Field(
        default=None, description="When the reminder was completed (ISO 8601)"
    )
    creation_date: str = Field(description="When the reminder was created (ISO 8601)")
    modification_date: str = Field(
        description="When the reminder was last modified (ISO 8601)"
    )
    list_id: str = Field(default="", description="ID of the owning list")
    list_name: str = Field(default="", description="Name of the owning list")


class OperationResult(BaseModel):
    """Outcome of a single write operation."""

    success: bool
    message: str
    id: str | None = None


class BatchOperationResult(BaseModel):
    """Result of a batch operation."""

    success: bool = Field(description="True when no item failed")
    total_processed: int = Field(description="Number of items processed")
    succeeded: int = Field(description="Number of successful operations")
    failed: int = Field(description="Number of failed operations")
    results: list[OperationResult] = Field(
        default_factory=list, description="Per-item outcomes, in input order"
    )

    @property
    def all_failed(self) -> bool:
        """Whether every item failed (escalated to a transport error)."""
        return self.succeeded == 0 and self.failed > 0


class CreateReminderInput(BaseModel):
    """Input for creating a reminder."""

    name: str = Field(
        min_length=1, max_length=MAX_NAME_LENGTH, description="Title of the reminder"
    )
    list_name: str = Field(min_length=1, description="List to add the reminder to")
    body: str | None = Field(
        default=None, max_length=MAX_BODY_LENGTH, description="Notes/description"
    )
    due_date: str | None = Field(
        default=None, description="Due date with time (ISO 8601, e.g. '2025-01-15T14:00:00')"
    )
    all_day_due_date: str | None = Field(
        default=None, description="All-day due date (ISO 8601 date, e.g. '2025-01-15')"
    )
    remind_me_date: str | None = Field(
        default=None, description="When to show the alert (ISO 8601)"
    )
    priority: PriorityName = Field(default="none", description="Priority level")


class UpdateReminderInput(BaseModel):
    """Input for updating a reminder.

    Only fields present in ``model_fields_set`` are changed. An explicit
    ``None`` for body or a date clears that field.
    """

    id: str = Field(min_length=1, description="ID of the reminder to update")
    list_name: str = Field(min_length=1, description="List containing the reminder")
    name: str | None = Field(
        default=None, min_length=1, max_length=MAX_NAME_LENGTH, description="New title"
    )
    body: str | None = Field(
        default=None, max_length=MAX_BODY_LENGTH, description="New notes; null clears"
    )
    due_date: str | None = Field(default=None, description="New due date; null clears")
    all_day_due_date: str | None = Field(
        default=None, description="New all-day due date; null clears"
    )
    remind_me_date: str | None = Field(
        default=None, description="New alert date; null clears"
    )
    priority: PriorityName | None = Field(default=None, description="New priority level")
    completed: bool | None = Field(default=None, description="New completion status")

    def is_set(self, field: str) -> bool:
        """Whether ``field`` was supplied by the caller."""
        return field in self.model_fields_set


class ReminderRef(BaseModel):
    """Reference to a reminder inside a named list."""

    id: str = Field(min_length=1, description="ID of the reminder")
    list_name: str = Field(min_length=1, description="List containing the reminder")


class ReminderFilter(BaseModel):
    """Criteria applied after fetching reminders, in declaration order."""

    list_name: str | None = None
    completed: bool | None = None
    priority: PriorityName | None = None
    due_before: str | None = None
    due_after: str | None = None
    search_text: str | None = None
    limit: int = Field(default=DEFAULT_RESULT_LIMIT, ge=1, le=MAX_RESULT_LIMIT)

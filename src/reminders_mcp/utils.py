"""Utility functions for the Reminders MCP server."""

import json
from typing import Any, NoReturn

from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

from .converters import parse_iso_datetime
from .exceptions import format_error
from .models import Priority, Reminder, ReminderFilter


def filter_reminders(reminders: list[Reminder], criteria: ReminderFilter) -> list[Reminder]:
    """Apply query filters in a fixed order, then cap the result count.

    Order: completion, priority, due before (strict), due after (strict),
    text search over name and body, limit. Reminders without a due date
    never match a due-date bound. Input order is preserved.

    Raises:
        InvalidDateError: If a due-date bound is not ISO-8601
    """
    filtered = reminders

    if criteria.completed is not None:
        filtered = [r for r in filtered if r.completed == criteria.completed]

    if criteria.priority is not None:
        code = int(Priority.from_name(criteria.priority))
        filtered = [r for r in filtered if r.priority == code]

    if criteria.due_before:
        before = parse_iso_datetime(criteria.due_before)
        filtered = [
            r for r in filtered if r.due_date and parse_iso_datetime(r.due_date) < before
        ]

    if criteria.due_after:
        after = parse_iso_datetime(criteria.due_after)
        filtered = [
            r for r in filtered if r.due_date and parse_iso_datetime(r.due_date) > after
        ]

    if criteria.search_text:
        needle = criteria.search_text.lower()
        filtered = [
            r
            for r in filtered
            if needle in r.name.lower() or (r.body is not None and needle in r.body.lower())
        ]

    return filtered[: criteria.limit]


# Response envelopes


def to_json_text(payload: Any) -> str:
    """Serialise a payload the way every tool response is rendered."""
    return json.dumps(payload, indent=2)


def success_result(payload: dict[str, Any]) -> ToolResult:
    """Wrap a payload as formatted JSON text plus structured content."""
    return ToolResult(
        content=[TextContent(type="text", text=to_json_text(payload))],
        structured_content=payload,
    )


def raise_tool_error(payload: dict[str, Any]) -> NoReturn:
    """Return ``payload`` to the client as an error result (``isError``)."""
    raise ToolError(to_json_text(payload))


def error_result(error: BaseException) -> NoReturn:
    """Convert any exception into the standard error envelope."""
    raise_tool_error(format_error(error))

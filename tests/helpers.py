"""Shared test doubles and record builders."""

import json
from collections.abc import Callable
from typing import Any

import pytest

SEP = "|||"


class FakeExecutor:
    """Stands in for osascript: records scripts, replays canned responses.

    Responses are consumed in order; an exception instance is raised
    instead of returned. With nothing queued, ``handler`` (if set) decides,
    otherwise the success sentinel is returned.
    """

    def __init__(self) -> None:
        self.scripts: list[str] = []
        self.timeouts: list[float] = []
        self.responses: list[str | BaseException] = []
        self.handler: Callable[[str], str] | None = None

    def queue(self, *responses: str | BaseException) -> None:
        self.responses.extend(responses)

    @property
    def call_count(self) -> int:
        return len(self.scripts)

    async def __call__(self, script: str, timeout: float) -> str:
        self.scripts.append(script)
        self.timeouts.append(timeout)
        if self.responses:
            response = self.responses.pop(0)
        elif self.handler is not None:
            response = self.handler(script)
        else:
            response = "success"
        if isinstance(response, BaseException):
            raise response
        return response


def reminder_line(
    reminder_id: str = "x-apple-reminder://A1",
    name: str = "Buy milk",
    body: str = "",
    due: str = "",
    all_day: str = "",
    remind_me: str = "",
    priority: str = "0",
    completed: str = "false",
    completion: str = "",
    created: str = "Monday, January 6, 2025 at 9:00:00 AM",
    modified: str = "Monday, January 6, 2025 at 9:30:00 AM",
    list_id: str = "LIST-1",
) -> str:
    """Build one reminder record exactly as the fetch script emits it."""
    return SEP.join(
        [
            reminder_id,
            name,
            body,
            due,
            all_day,
            remind_me,
            priority,
            completed,
            completion,
            created,
            modified,
            list_id,
        ]
    )


def list_line(list_id: str, name: str, count: int = 0) -> str:
    return SEP.join([list_id, name, str(count)])


def payload(result: Any) -> dict[str, Any]:
    """Decode the JSON text body of a ToolResult."""
    return json.loads(result.content[0].text)


def error_payload(exc_info: pytest.ExceptionInfo) -> dict[str, Any]:
    """Decode the JSON envelope carried by a ToolError."""
    return json.loads(str(exc_info.value))

"""MCP tools for batch reminder operations."""

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Annotated, TypeVar

from fastmcp.tools.tool import ToolResult
from pydantic import Field

from ..constants import MAX_BATCH_SIZE
from ..exceptions import format_error
from ..models import (
    BatchOperationResult,
    CreateReminderInput,
    OperationResult,
    ReminderRef,
    UpdateReminderInput,
)
from ..store import ReminderStore
from ..utils import raise_tool_error, success_result

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_batch(
    items: Sequence[T],
    operation: Callable[[T], Awaitable[OperationResult]],
    describe: Callable[[T], str],
) -> BatchOperationResult:
    """Run ``operation`` on each item in order, isolating failures.

    Args:
        items: Inputs to process sequentially.
        operation: Performs one item and returns its success result.
        describe: Label used in the failure message for an item.

    Returns:
        Aggregated result; ``success`` only when nothing failed.
    """
    results: list[OperationResult] = []
    succeeded = 0
    failed = 0

    for item in items:
        try:
            results.append(await operation(item))
            succeeded += 1
        except Exception as e:
            message = format_error(e)["message"]
            logger.warning("Batch item failed (%s): %s", describe(item), message)
            results.append(
                OperationResult(
                    success=False,
                    message=f"Failed to {describe(item)}: {message}",
                )
            )
            failed += 1

    return BatchOperationResult(
        success=failed == 0,
        total_processed=len(items),
        succeeded=succeeded,
        failed=failed,
        results=results,
    )


def _respond(result: BatchOperationResult) -> ToolResult:
    """Partial success is a normal result; only a total failure is an error."""
    payload = result.model_dump()
    if result.all_failed:
        raise_tool_error(payload)
    return success_result(payload)


async def batch_create_reminders(
    reminders: Annotated[
        list[CreateReminderInput], Field(min_length=1, max_length=MAX_BATCH_SIZE)
    ],
) -> ToolResult:
    """Create multiple reminders at once (max 100).

    Each reminder is created independently; one failure does not stop the
    others. Inspect ``results`` for per-item outcomes.

    Args:
        reminders: Reminders to create, each with name and list_name plus
            optional body, due_date, all_day_due_date, remind_me_date, priority.
    """
    store = ReminderStore.get_instance()

    async def create(data: CreateReminderInput) -> OperationResult:
        reminder_id = await store.create_reminder(data)
        return OperationResult(
            success=True, message=f'Created "{data.name}"', id=reminder_id
        )

    result = await run_batch(
        reminders, create, lambda data: f'create "{data.name}"'
    )
    return _respond(result)


async def batch_update_reminders(
    reminders: Annotated[
        list[UpdateReminderInput], Field(min_length=1, max_length=MAX_BATCH_SIZE)
    ],
) -> ToolResult:
    """Update multiple reminders at once (max 100).

    Only the fields given for each item are changed; null clears body and
    dates.

    Args:
        reminders: Updates, each with id and list_name plus fields to change.
    """
    store = ReminderStore.get_instance()

    async def update(data: UpdateReminderInput) -> OperationResult:
        await store.update_reminder(data)
        return OperationResult(
            success=True, message=f"Updated reminder {data.id}", id=data.id
        )

    result = await run_batch(
        reminders, update, lambda data: f"update reminder {data.id}"
    )
    return _respond(result)


async def batch_complete_reminders(
    reminders: Annotated[
        list[ReminderRef], Field(min_length=1, max_length=MAX_BATCH_SIZE)
    ],
    completed: bool = True,
) -> ToolResult:
    """Mark multiple reminders as completed or incomplete at once (max 100).

    Args:
        reminders: Reminders to change, each with id and list_name.
        completed: True to mark complete, False to mark incomplete.
    """
    store = ReminderStore.get_instance()
    state = "completed" if completed else "incomplete"

    async def complete(ref: ReminderRef) -> OperationResult:
        await store.complete_reminder(ref.list_name, ref.id, completed)
        return OperationResult(
            success=True, message=f"Marked reminder {ref.id} as {state}", id=ref.id
        )

    result = await run_batch(
        reminders, complete, lambda ref: f"update reminder {ref.id}"
    )
    return _respond(result)


__all__ = [
    "batch_create_reminders",
    "batch_update_reminders",
    "batch_complete_reminders",
]

"""AppleScript-backed access to the Reminders app.

This module provides the ReminderStore singleton that turns each operation
into a generated script, runs it through an injected executor and parses
the result. Nothing is cached: every call is a fresh round trip.
"""

import threading

import anyio

from . import scripts
from .constants import PROBE_TIMEOUT, SCRIPT_TIMEOUT
from .executor import ScriptExecutor, check_access, run_applescript
from .models import CreateReminderInput, Reminder, ReminderList, UpdateReminderInput
from .parser import (
    parse_list_record,
    parse_list_records,
    parse_reminder_record,
    parse_reminder_records,
)


class ReminderStore:
    """Singleton gateway to Reminders with serialised script execution.

    All scripts go through a CapacityLimiter(1) so two osascript processes
    from this server never drive Reminders at the same time.

    Usage:
        store = ReminderStore.get_instance()
        lists = await store.get_lists()
    """

    _instance: "ReminderStore | None" = None
    _lock = threading.Lock()

    def __init__(
        self,
        executor: ScriptExecutor = run_applescript,
        timeout: float = SCRIPT_TIMEOUT,
    ) -> None:
        self._executor = executor
        self._timeout = timeout
        self._limiter: anyio.CapacityLimiter | None = None

    @classmethod
    def get_instance(cls) -> "ReminderStore":
        """Get or create the singleton instance.

        Thread-safe singleton pattern with double-checked locking.
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def configure(
        cls,
        executor: ScriptExecutor = run_applescript,
        timeout: float = SCRIPT_TIMEOUT,
    ) -> "ReminderStore":
        """Replace the singleton, e.g. to apply a CLI timeout override."""
        with cls._lock:
            cls._instance = cls(executor=executor, timeout=timeout)
        return cls._instance

    @property
    def timeout(self) -> float:
        return self._timeout

    def _get_limiter(self) -> anyio.CapacityLimiter:
        """Get the capacity limiter, creating it inside the running loop."""
        if self._limiter is None:
            self._limiter = anyio.CapacityLimiter(1)
        return self._limiter

    async def run_script(self, script: str) -> str:
        """Execute one script with serialisation and the configured timeout."""
        async with self._get_limiter():
            return await self._executor(script, self._timeout)

    async def check_access(self, timeout: float = PROBE_TIMEOUT) -> bool:
        """Run the read-only permission probe (bypasses the limiter)."""
        return await check_access(self._executor, timeout)

    # List Operations

    async def get_lists(self) -> list[ReminderList]:
        output = await self.run_script(scripts.get_all_lists())
        return parse_list_records(output)

    async def get_list(self, name: str) -> ReminderList | None:
        output = await self.run_script(scripts.get_list_by_name(name))
        return parse_list_record(output)

    async def create_list(self, name: str) -> str:
        """Create a list and return its id."""
        output = await self.run_script(scripts.create_list(name))
        return output.strip()

    async def delete_list(self, name: str) -> None:
        await self.run_script(scripts.delete_list(name))

    async def rename_list(self, current_name: str, new_name: str) -> None:
        await self.run_script(scripts.rename_list(current_name, new_name))

    # Reminder Operations

    async def get_reminders_in_list(self, list_name: str) -> list[Reminder]:
        output = await self.run_script(scripts.get_reminders_from_list(list_name))
        return parse_reminder_records(output, list_name)

    async def get_reminder(self, list_name: str, reminder_id: str) -> Reminder | None:
        output = await self.run_script(scripts.get_reminder_by_id(list_name, reminder_id))
        return parse_reminder_record(output, list_name)

    async def create_reminder(self, data: CreateReminderInput) -> str:
        """Create a reminder and return its id.

        Raises:
            InvalidDateError: If a date is not ISO-8601 (no script is run)
        """
        output = await self.run_script(scripts.create_reminder(data))
        return output.strip()

    async def update_reminder(self, data: UpdateReminderInput) -> None:
        """Apply the fields present in ``data``.

        Raises:
            InvalidDateError: If a date is not ISO-8601 (no script is run)
        """
        await self.run_script(scripts.update_reminder(data))

    async def delete_reminder(self, list_name: str, reminder_id: str) -> None:
        await self.run_script(scripts.delete_reminder(list_name, reminder_id))

    async def complete_reminder(
        self, list_name: str, reminder_id: str, completed: bool = True
    ) -> None:
        await self.run_script(
            scripts.complete_reminder(list_name, reminder_id, completed)
        )

"""Parse delimited AppleScript output into models.

Record layouts (fields joined by FIELD_SEPARATOR, one record per line):

    list:     id, name, reminder count
    reminder: id, name, body, due date, allday due date, remind me date,
              priority, completed, completion date, creation date,
              modification date, list id

Parsing never raises: absent or malformed columns fall back to per-type
defaults so a truncated line still yields a record.
"""

import logging

from .constants import FIELD_SEPARATOR
from .converters import decode_applescript_date, now_iso
from .models import Reminder, ReminderList

logger = logging.getLogger(__name__)


def _records(output: str) -> list[list[str]]:
    """Split output into non-blank lines, then into raw columns."""
    return [
        line.split(FIELD_SEPARATOR)
        for line in output.strip().split("\n")
        if line.strip()
    ]


def _column(parts: list[str], index: int) -> str:
    return parts[index].strip() if index < len(parts) else ""


def _to_int(text: str) -> int:
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        logger.debug("Non-numeric column %r, defaulting to 0", text)
        return 0


def _list_from_parts(parts: list[str]) -> ReminderList:
    return ReminderList(
        id=_column(parts, 0),
        name=_column(parts, 1),
        reminder_count=_to_int(_column(parts, 2)),
    )


def _reminder_from_parts(parts: list[str], list_name: str) -> Reminder:
    return Reminder(
        id=_column(parts, 0),
        name=_column(parts, 1),
        body=_column(parts, 2) or None,
        due_date=decode_applescript_date(_column(parts, 3)),
        all_day_due_date=decode_applescript_date(_column(parts, 4)),
        remind_me_date=decode_applescript_date(_column(parts, 5)),
        priority=_to_int(_column(parts, 6)),
        completed=_column(parts, 7) == "true",
        completion_date=decode_applescript_date(_column(parts, 8)),
        creation_date=decode_applescript_date(_column(parts, 9)) or now_iso(),
        modification_date=decode_applescript_date(_column(parts, 10)) or now_iso(),
        list_id=_column(parts, 11),
        list_name=list_name,
    )


def parse_list_records(output: str) -> list[ReminderList]:
    """Parse the output of scripts.get_all_lists."""
    if not output.strip():
        return []
    return [_list_from_parts(parts) for parts in _records(output)]


def parse_list_record(output: str) -> ReminderList | None:
    """Parse the output of scripts.get_list_by_name."""
    if not output.strip():
        return None
    return _list_from_parts(output.strip().split(FIELD_SEPARATOR))


def parse_reminder_records(output: str, list_name: str) -> list[Reminder]:
    """Parse the output of scripts.get_reminders_from_list."""
    if not output.strip():
        return []
    return [_reminder_from_parts(parts, list_name) for parts in _records(output)]


def parse_reminder_record(output: str, list_name: str) -> Reminder | None:
    """Parse the output of scripts.get_reminder_by_id."""
    if not output.strip():
        return None
    return _reminder_from_parts(output.strip().split(FIELD_SEPARATOR), list_name)

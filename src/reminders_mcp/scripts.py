"""AppleScript program builders for the Reminders app.

Every builder returns a complete program that talks to ``application
"Reminders"``, performs one operation and returns either a value or the
success sentinel. Collection scripts emit one record per line with fields
joined by FIELD_SEPARATOR; see parser.py for the column order.
"""

from .constants import FIELD_SEPARATOR, SUCCESS_SENTINEL
from .converters import encode_all_day_date, encode_timed_date, escape_for_applescript
from .models import CreateReminderInput, Priority, UpdateReminderInput

_SEP = f'"{FIELD_SEPARATOR}"'


def _quote(value: str) -> str:
    """Escape and wrap a user-supplied string as an AppleScript literal."""
    return f'"{escape_for_applescript(value)}"'


def _optional_date_lines(var: str, prop: str, out: str) -> list[str]:
    return [
        f"set {var} to {prop} of r",
        f"if {var} is missing value then",
        f'  set {out} to ""',
        "else",
        f"  set {out} to ({var} as string)",
        "end if",
    ]


def _reminder_field_lines() -> list[str]:
    """Statements reading every serialised property of reminder ``r``."""
    lines = [
        "set rId to id of r",
        "set rName to name of r",
        "set rBody to body of r",
        'if rBody is missing value then set rBody to ""',
    ]
    lines += _optional_date_lines("rDueDate", "due date", "rDueDateStr")
    lines += _optional_date_lines("rAllDayDueDate", "allday due date", "rAllDayDueDateStr")
    lines += _optional_date_lines("rRemindMeDate", "remind me date", "rRemindMeDateStr")
    lines += [
        "set rPriority to priority of r",
        "set rCompleted to completed of r",
    ]
    lines += _optional_date_lines("rCompletionDate", "completion date", "rCompletionDateStr")
    lines += [
        "set rCreationDate to (creation date of r) as string",
        "set rModDate to (modification date of r) as string",
    ]
    return lines


_REMINDER_RECORD = f" & {_SEP} & ".join(
    [
        "rId",
        "rName",
        "rBody",
        "rDueDateStr",
        "rAllDayDueDateStr",
        "rRemindMeDateStr",
        "rPriority",
        "rCompleted",
        "rCompletionDateStr",
        "rCreationDate",
        "rModDate",
        "listId",
    ]
)

_LIST_RECORD = f"listId & {_SEP} & listName & {_SEP} & reminderCount"


def _indent(lines: list[str], depth: int) -> str:
    pad = "  " * depth
    return "\n".join(pad + line for line in lines)


# List scripts


def get_all_lists() -> str:
    """Every list as ``id|||name|||count``, one per line."""
    return f"""
tell application "Reminders"
  set output to ""
  repeat with aList in lists
    set listId to id of aList
    set listName to name of aList
    set reminderCount to count of reminders of aList
    set output to output & {_LIST_RECORD} & linefeed
  end repeat
  return output
end tell
"""


def get_list_by_name(name: str) -> str:
    return f"""
tell application "Reminders"
  set targetList to list {_quote(name)}
  set listId to id of targetList
  set listName to name of targetList
  set reminderCount to count of reminders of targetList
  return {_LIST_RECORD}
end tell
"""


def create_list(name: str) -> str:
    return f"""
tell application "Reminders"
  set newList to make new list with properties {{name:{_quote(name)}}}
  return id of newList
end tell
"""


def delete_list(name: str) -> str:
    return f"""
tell application "Reminders"
  delete list {_quote(name)}
  return "{SUCCESS_SENTINEL}"
end tell
"""


def rename_list(current_name: str, new_name: str) -> str:
    return f"""
tell application "Reminders"
  set name of list {_quote(current_name)} to {_quote(new_name)}
  return "{SUCCESS_SENTINEL}"
end tell
"""


# Reminder scripts


def get_reminders_from_list(list_name: str) -> str:
    """All reminders of one list, one record per line."""
    return f"""
tell application "Reminders"
  set targetList to list {_quote(list_name)}
  set listId to id of targetList
  set output to ""
  repeat with r in reminders of targetList
{_indent(_reminder_field_lines(), 2)}
    set output to output & {_REMINDER_RECORD} & linefeed
  end repeat
  return output
end tell
"""


def get_reminder_by_id(list_name: str, reminder_id: str) -> str:
    return f"""
tell application "Reminders"
  set targetList to list {_quote(list_name)}
  set listId to id of targetList
  set r to reminder id {_quote(reminder_id)} of targetList
{_indent(_reminder_field_lines(), 1)}
  return {_REMINDER_RECORD}
end tell
"""


def create_reminder(data: CreateReminderInput) -> str:
    """Build the creation script; returns the new reminder's id when run.

    Priority "none" is left out so the app applies its own default.

    Raises:
        InvalidDateError: If any date is not ISO-8601
    """
    properties = [f"name:{_quote(data.name)}"]

    if data.body:
        properties.append(f"body:{_quote(data.body)}")
    if data.due_date:
        properties.append(f'due date:date "{encode_timed_date(data.due_date)}"')
    if data.all_day_due_date:
        properties.append(
            f'allday due date:date "{encode_all_day_date(data.all_day_due_date)}"'
        )
    if data.remind_me_date:
        properties.append(
            f'remind me date:date "{encode_timed_date(data.remind_me_date)}"'
        )
    if data.priority != "none":
        properties.append(f"priority:{int(Priority.from_name(data.priority))}")

    record = ", ".join(properties)
    return f"""
tell application "Reminders"
  tell list {_quote(data.list_name)}
    set newReminder to make new reminder with properties {{{record}}}
    return id of newReminder
  end tell
end tell
"""


def _set_statement(prop: str, value: str) -> str:
    return f"set {prop} of targetReminder to {value}"


def update_statements(data: UpdateReminderInput) -> list[str]:
    """One ``set`` statement per field present in ``data``.

    A present None clears the property with ``missing value``. Priority
    "none" is always written as 0 so it can be cleared explicitly.

    Raises:
        InvalidDateError: If any date is not ISO-8601
    """
    statements: list[str] = []

    if data.is_set("name") and data.name is not None:
        statements.append(_set_statement("name", _quote(data.name)))
    if data.is_set("body"):
        value = "missing value" if data.body is None else _quote(data.body)
        statements.append(_set_statement("body", value))

    date_fields = (
        ("due_date", "due date", encode_timed_date),
        ("all_day_due_date", "allday due date", encode_all_day_date),
        ("remind_me_date", "remind me date", encode_timed_date),
    )
    for field, prop, encode in date_fields:
        if not data.is_set(field):
            continue
        raw = getattr(data, field)
        value = "missing value" if raw is None else f'date "{encode(raw)}"'
        statements.append(_set_statement(prop, value))

    if data.is_set("priority") and data.priority is not None:
        statements.append(
            _set_statement("priority", str(int(Priority.from_name(data.priority))))
        )
    if data.is_set("completed") and data.completed is not None:
        statements.append(_set_statement("completed", str(data.completed).lower()))

    return statements


def update_reminder(data: UpdateReminderInput) -> str:
    return f"""
tell application "Reminders"
  tell list {_quote(data.list_name)}
    set targetReminder to reminder id {_quote(data.id)}
{_indent(update_statements(data), 2)}
    return "{SUCCESS_SENTINEL}"
  end tell
end tell
"""


def delete_reminder(list_name: str, reminder_id: str) -> str:
    return f"""
tell application "Reminders"
  tell list {_quote(list_name)}
    delete reminder id {_quote(reminder_id)}
    return "{SUCCESS_SENTINEL}"
  end tell
end tell
"""


def complete_reminder(list_name: str, reminder_id: str, completed: bool) -> str:
    return f"""
tell application "Reminders"
  tell list {_quote(list_name)}
    set completed of reminder id {_quote(reminder_id)} to {str(completed).lower()}
    return "{SUCCESS_SENTINEL}"
  end tell
end tell
"""


# Read-only probe used to detect missing automation consent
ACCESS_PROBE = """
tell application "Reminders"
  count of lists
end tell
"""

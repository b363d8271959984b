"""Tests for parsing delimited script output."""

from datetime import datetime

from helpers import SEP, list_line, reminder_line

from reminders_mcp.converters import format_iso
from reminders_mcp.parser import (
    parse_list_record,
    parse_list_records,
    parse_reminder_record,
    parse_reminder_records,
)


def test_empty_output_yields_nothing():
    assert parse_list_records("") == []
    assert parse_list_records("  \n ") == []
    assert parse_reminder_records("", "Work") == []
    assert parse_list_record("") is None
    assert parse_reminder_record("\n", "Work") is None


def test_parse_list_records():
    output = "\n".join([list_line("L1", "Work", 3), list_line("L2", "Home", 0)]) + "\n"
    lists = parse_list_records(output)

    assert [(lst.id, lst.name, lst.reminder_count) for lst in lists] == [
        ("L1", "Work", 3),
        ("L2", "Home", 0),
    ]


def test_parse_list_record_bad_count_defaults_to_zero():
    parsed = parse_list_record(f"L1{SEP}Work{SEP}many")
    assert parsed is not None
    assert parsed.name == "Work"
    assert parsed.reminder_count == 0


def test_parse_full_reminder_record():
    line = reminder_line(
        body="Two litres",
        due="Wednesday, January 15, 2025 at 2:00:00 PM",
        all_day="Thursday, January 16, 2025 at 12:00:00 AM",
        priority="5",
        completed="true",
        completion="Wednesday, January 15, 2025 at 3:00:00 PM",
    )
    reminder = parse_reminder_record(line, "Groceries")

    assert reminder is not None
    assert reminder.id == "x-apple-reminder://A1"
    assert reminder.name == "Buy milk"
    assert reminder.body == "Two litres"
    assert reminder.due_date == format_iso(datetime(2025, 1, 15, 14).astimezone())
    assert reminder.all_day_due_date == format_iso(datetime(2025, 1, 16).astimezone())
    assert reminder.remind_me_date is None
    assert reminder.priority == 5
    assert reminder.completed is True
    assert reminder.completion_date == format_iso(datetime(2025, 1, 15, 15).astimezone())
    assert reminder.creation_date == format_iso(datetime(2025, 1, 6, 9).astimezone())
    assert reminder.list_id == "LIST-1"
    assert reminder.list_name == "Groceries"


def test_empty_body_becomes_none():
    reminder = parse_reminder_record(reminder_line(body=""), "Work")
    assert reminder.body is None


def test_truncated_record_uses_defaults():
    reminder = parse_reminder_record(f"R1{SEP}Half a record", "Work")

    assert reminder.id == "R1"
    assert reminder.name == "Half a record"
    assert reminder.body is None
    assert reminder.due_date is None
    assert reminder.priority == 0
    assert reminder.completed is False
    assert reminder.list_id == ""
    # Creation and modification fall back to the current time
    assert reminder.creation_date.endswith("Z")
    assert reminder.modification_date.endswith("Z")


def test_unparseable_columns_fall_back():
    line = reminder_line(priority="high", completed="yes", due="whenever", created="")
    reminder = parse_reminder_record(line, "Work")

    assert reminder.priority == 0
    assert reminder.completed is False
    assert reminder.due_date is None
    assert reminder.creation_date.endswith("Z")


def test_blank_lines_are_dropped():
    output = "\n".join(
        [
            reminder_line(reminder_id="R1", name="One"),
            "",
            "   ",
            reminder_line(reminder_id="R2", name="Two"),
            "",
        ]
    )
    reminders = parse_reminder_records(output, "Work")

    assert [r.id for r in reminders] == ["R1", "R2"]
    assert all(r.list_name == "Work" for r in reminders)


def test_whitespace_around_columns_is_trimmed():
    reminder = parse_reminder_record(
        reminder_line(reminder_id=" R1 ", name=" Padded ", priority=" 1 "), "Work"
    )
    assert reminder.id == "R1"
    assert reminder.name == "Padded"
    assert reminder.priority == 1

"""Converter functions between Python values and AppleScript text."""

import re
from datetime import datetime, timezone

from .constants import MISSING_VALUE
from .exceptions import InvalidDateError

# English names are fixed: Reminders parses `date "..."` literals as text,
# so the output must not follow the process locale.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# "Wednesday, " prefix produced by `date as string` on macOS
_WEEKDAY_PREFIX = re.compile(
    r"^(monday|tuesday|wednesday|thursday|friday|saturday|sunday),\s*",
    re.IGNORECASE,
)

_APPLESCRIPT_DATE_FORMATS = (
    "%B %d, %Y %I:%M:%S %p",
    "%B %d, %Y %I:%M %p",
    "%B %d, %Y %H:%M:%S",
    "%B %d, %Y %H:%M",
    "%B %d, %Y",
)


# String escaping


def escape_for_applescript(value: str) -> str:
    """Escape ``value`` for use inside a double-quoted AppleScript literal."""
    return "".join(_ESCAPES.get(ch, ch) for ch in value)


# Date/Time Conversions


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 string into an aware datetime.

    Naive values (including bare dates) are taken as local time.

    Raises:
        InvalidDateError: If ``value`` is not ISO-8601
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError as e:
        raise InvalidDateError(value) from e

    if dt.tzinfo is None:
        return dt.astimezone()
    return dt


# AppleScript date text has no offset, so an instant inside the repeated
# DST hour reads back as the first occurrence (fold=0), one hour early.
def _to_local_naive(value: str) -> datetime:
    return parse_iso_datetime(value).astimezone().replace(tzinfo=None)


def encode_timed_date(iso_date: str) -> str:
    """Convert ISO date-time to AppleScript text, e.g. "January 15, 2025 2:00:00 PM"."""
    dt = _to_local_naive(iso_date)
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return (
        f"{MONTH_NAMES[dt.month - 1]} {dt.day}, {dt.year} "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    )


def encode_all_day_date(iso_date: str) -> str:
    """Convert ISO date to AppleScript all-day text, e.g. "January 15, 2025".

    Bare dates keep their calendar day; only timestamps with an offset are
    shifted into local time first.
    """
    text = iso_date.strip()
    if len(text) == 10:
        try:
            dt = datetime.strptime(text, "%Y-%m-%d")
        except ValueError as e:
            raise InvalidDateError(iso_date) from e
    else:
        dt = _to_local_naive(iso_date)
    return f"{MONTH_NAMES[dt.month - 1]} {dt.day}, {dt.year}"


def format_iso(dt: datetime) -> str:
    """Render an aware datetime as UTC ISO-8601 with a ``Z`` suffix."""
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def now_iso() -> str:
    """Current wall-clock time as UTC ISO-8601."""
    return format_iso(datetime.now(timezone.utc))


def decode_applescript_date(text: str) -> str | None:
    """Parse AppleScript date text back to ISO-8601 (UTC).

    Returns None for empty input, ``missing value`` or anything that
    cannot be parsed. Never raises.
    """
    if not text:
        return None

    # Newer macOS puts a narrow no-break space before AM/PM
    cleaned = text.replace("\u202f", " ").replace("\xa0", " ").strip()
    if not cleaned or cleaned == MISSING_VALUE:
        return None

    cleaned = _WEEKDAY_PREFIX.sub("", cleaned)
    cleaned = re.sub(r"\s+at\s+", " ", cleaned)
    cleaned = re.sub(r"\s+", " ", cleaned)

    for fmt in _APPLESCRIPT_DATE_FORMATS:
        try:
            parsed = datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
        return format_iso(parsed.astimezone())

    # Already ISO (e.g. from a future script revision)
    try:
        return format_iso(parse_iso_datetime(cleaned))
    except InvalidDateError:
        return None

"""Constants for the Reminders MCP server."""

import os

# Timeouts (seconds)
SCRIPT_TIMEOUT: float = float(os.environ.get("REMINDERS_SCRIPT_TIMEOUT", "30.0"))
PROBE_TIMEOUT: float = float(os.environ.get("REMINDERS_PROBE_TIMEOUT", "5.0"))

# Interpreter used to run generated AppleScript
OSASCRIPT_PATH: str = os.environ.get("OSASCRIPT_PATH", "osascript")

# Record protocol shared by the script builder and the parser.
# Column order is part of the contract; change both sides together.
FIELD_SEPARATOR: str = "|||"
SUCCESS_SENTINEL: str = "success"
MISSING_VALUE: str = "missing value"

# Query limits
DEFAULT_RESULT_LIMIT: int = 100
MAX_RESULT_LIMIT: int = 500

# Input limits
MAX_BATCH_SIZE: int = 100
MAX_NAME_LENGTH: int = 255
MAX_BODY_LENGTH: int = 10000

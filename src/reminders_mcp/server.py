"""FastMCP server for macOS Reminders via AppleScript."""

import argparse
import logging
import os
import signal
import sys
from typing import Any

import anyio
from fastmcp import FastMCP

from .constants import SCRIPT_TIMEOUT
from .store import ReminderStore
from .tools.batch import (
    batch_complete_reminders,
    batch_create_reminders,
    batch_update_reminders,
)
from .tools.lists import (
    create_reminder_list,
    delete_reminder_list,
    get_reminder_list,
    list_reminder_lists,
    rename_reminder_list,
)
from .tools.reminders import (
    complete_reminder,
    create_reminder,
    delete_reminder,
    get_reminder,
    get_reminders,
    update_reminder,
)

# Configure logging (stderr; stdout carries the MCP transport)
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastMCP server instance
mcp = FastMCP(
    name="reminders-mcp",
    instructions="""
An MCP server for macOS Reminders via AppleScript.

Lists are addressed by name; reminders by id within a named list.
Dates are ISO 8601. Every response is a JSON document; errors carry
`code` and `recoverable`.

## Available Tools

### List Management (5 tools)
| Tool | Purpose |
|------|---------|
| list_reminder_lists | Get all reminder lists with counts |
| get_reminder_list | Get a specific list by name |
| create_reminder_list | Create a new list |
| delete_reminder_list | Delete a list and its reminders |
| rename_reminder_list | Rename a list |

### Reminder CRUD (6 tools)
| Tool | Purpose |
|------|---------|
| get_reminders | Query reminders (list, completion, priority, due range, text) |
| get_reminder | Get single reminder by ID |
| create_reminder | Create with name, body, due dates, alert, priority |
| update_reminder | Update fields; null clears body/dates |
| complete_reminder | Toggle completion status |
| delete_reminder | Delete a reminder |

### Batch Operations (3 tools)
| Tool | Purpose |
|------|---------|
| batch_create_reminders | Create up to 100 reminders |
| batch_update_reminders | Update up to 100 reminders |
| batch_complete_reminders | Complete/uncomplete up to 100 reminders |

Batch results report per-item outcomes; a partially failed batch is not an
error, so always check `results`.

## Limitations
- Requires Automation permission for Reminders (System Settings >
  Privacy & Security > Automation)
- Values containing the text `|||` or line breaks in names may not read
  back cleanly
""",
)

# Register all MCP tools

# List management tools
mcp.tool(list_reminder_lists)
mcp.tool(get_reminder_list)
mcp.tool(create_reminder_list)
mcp.tool(delete_reminder_list)
mcp.tool(rename_reminder_list)

# Reminder CRUD tools
mcp.tool(get_reminders)
mcp.tool(get_reminder)
mcp.tool(create_reminder)
mcp.tool(update_reminder)
mcp.tool(complete_reminder)
mcp.tool(delete_reminder)

# Batch tools
mcp.tool(batch_create_reminders)
mcp.tool(batch_update_reminders)
mcp.tool(batch_complete_reminders)


# Signal handling for graceful shutdown
def signal_handler(signum: int, frame: Any) -> None:
    """Handle shutdown signals."""
    logger.info(f"Received signal {signum}, shutting down...")
    sys.exit(0)


def check_permissions(store: ReminderStore) -> bool:
    """Run the startup permission probe and log the outcome."""
    logger.info("Checking Reminders automation access...")
    granted = anyio.run(store.check_access)
    if granted:
        logger.info("Reminders access available")
    else:
        logger.warning(
            "Reminders permission may not be granted. Please grant permission in "
            "System Settings > Privacy & Security > Automation when prompted."
        )
    return granted


def main() -> None:
    parser = argparse.ArgumentParser(description="An MCP Server for macOS Reminders")
    parser.add_argument(
        "--timeout",
        type=float,
        default=SCRIPT_TIMEOUT,
        help=f"Seconds before an AppleScript call is killed (default {SCRIPT_TIMEOUT:g})",
    )
    parser.add_argument(
        "--skip-permission-check",
        action="store_true",
        help="Do not probe Reminders access at startup",
    )
    args = parser.parse_args()

    try:
        store = ReminderStore.configure(timeout=args.timeout)
        logger.info(f"Starting server (script timeout {store.timeout:g}s)")

        # A denied probe only warns; tools report PERMISSION_DENIED until
        # access is granted
        if not args.skip_permission_check:
            check_permissions(store)

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

        mcp.run()
    except Exception:
        logger.exception("Fatal error during startup")
        sys.exit(1)


if __name__ == "__main__":
    main()

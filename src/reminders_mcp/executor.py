"""Run generated AppleScript through osascript.

Scripts are fed to ``osascript -`` on stdin, so no shell quoting is
involved. Failures are classified into the exception hierarchy in
exceptions.py.
"""

import logging
from collections.abc import Awaitable, Callable

import anyio

from . import scripts
from .constants import OSASCRIPT_PATH, PROBE_TIMEOUT, SCRIPT_TIMEOUT
from .exceptions import AccessDeniedError, AppleScriptError, ScriptTimeoutError

logger = logging.getLogger(__name__)

# (script, timeout_seconds) -> trimmed stdout
ScriptExecutor = Callable[[str, float], Awaitable[str]]

# Substrings (lowercased) osascript emits when automation consent is missing
PERMISSION_MARKERS = ("not allowed", "not authorized", "permission", "-1743")

# Reminders reports missing lists/reminders with these; passed through as-is
NOT_FOUND_MARKERS = {"can't get list": "List", "can't get reminder": "Reminder"}


def _normalise(output: str) -> str:
    return output.lower().replace("\u2019", "'")


def missing_resource(output: str) -> str | None:
    """Resource type ("List" or "Reminder") named by a not-found failure."""
    lowered = _normalise(output)
    for marker, resource_type in NOT_FOUND_MARKERS.items():
        if marker in lowered:
            return resource_type
    return None


def classify_failure(output: str) -> AppleScriptError | AccessDeniedError:
    """Map osascript failure text to the matching exception.

    Not-found text is checked first: it quotes the list or reminder name,
    which may itself contain a permission marker.
    """
    if missing_resource(output) is not None:
        return AppleScriptError(output)
    lowered = _normalise(output)
    if any(marker in lowered for marker in PERMISSION_MARKERS):
        return AccessDeniedError()
    return AppleScriptError(output or "Unknown AppleScript error")


async def run_applescript(script: str, timeout: float = SCRIPT_TIMEOUT) -> str:
    """Execute AppleScript and return its trimmed standard output.

    Args:
        script: Complete AppleScript program
        timeout: Seconds before the process is killed

    Returns:
        stdout with surrounding whitespace removed

    Raises:
        ScriptTimeoutError: If the script ran longer than ``timeout``
        AccessDeniedError: If automation access to Reminders is not granted
        AppleScriptError: For any other failure
    """
    logger.debug("Running AppleScript (%d chars, timeout %ss)", len(script), timeout)

    try:
        # Cancellation kills the child process inside run_process
        with anyio.fail_after(timeout):
            result = await anyio.run_process(
                [OSASCRIPT_PATH, "-"],
                input=script.encode("utf-8"),
                check=False,
            )
    except TimeoutError as e:
        logger.warning("AppleScript timed out after %ss", timeout)
        raise ScriptTimeoutError(timeout) from e
    except FileNotFoundError as e:
        raise AppleScriptError(
            f"{OSASCRIPT_PATH} not found - Reminders access requires macOS"
        ) from e

    stdout = result.stdout.decode("utf-8", errors="replace") if result.stdout else ""
    stderr = result.stderr.decode("utf-8", errors="replace") if result.stderr else ""

    if result.returncode != 0:
        error = classify_failure(stderr.strip() or stdout.strip())
        logger.warning(
            "AppleScript failed: rc=%s %s: %s",
            result.returncode,
            error.code,
            error.message,
        )
        raise error

    # osascript writes benign diagnostics to stderr; only a real error with
    # no output counts as failure
    if stderr.strip() and not stdout.strip():
        if "error" in stderr.lower():
            raise classify_failure(stderr.strip())
        logger.debug("Ignoring osascript diagnostics: %s", stderr.strip())

    return stdout.strip()


async def check_access(
    executor: ScriptExecutor = run_applescript,
    timeout: float = PROBE_TIMEOUT,
) -> bool:
    """Probe whether Reminders automation access is granted.

    Only a classified permission failure returns False; any other error is
    assumed to be unrelated to consent.
    """
    try:
        await executor(scripts.ACCESS_PROBE, timeout)
    except AccessDeniedError:
        return False
    except Exception as e:
        logger.debug("Access probe failed for a non-permission reason: %s", e)
    return True

"""Tests for osascript execution and failure classification."""

import subprocess

import anyio
import pytest

from reminders_mcp import executor
from reminders_mcp.exceptions import (
    AccessDeniedError,
    AppleScriptError,
    ScriptTimeoutError,
)
from reminders_mcp.executor import (
    check_access,
    classify_failure,
    missing_resource,
    run_applescript,
)


def fake_process(returncode: int = 0, stdout: str = "", stderr: str = ""):
    """Build a stand-in for anyio.run_process with a canned result."""
    calls: list[dict] = []

    async def run_process(command, *, input=None, check=True, **kwargs):
        calls.append({"command": command, "input": input, "check": check})
        return subprocess.CompletedProcess(
            command, returncode, stdout=stdout.encode(), stderr=stderr.encode()
        )

    run_process.calls = calls
    return run_process


class TestClassifyFailure:
    @pytest.mark.parametrize(
        "text",
        [
            "execution error: Not authorized to send Apple events to Reminders. (-1743)",
            "osascript is not allowed assistive access",
            "Operation not permitted: permission denied",
            "error -1743",
        ],
    )
    def test_permission_failures(self, text):
        assert isinstance(classify_failure(text), AccessDeniedError)

    def test_not_found_text_passes_through(self):
        text = 'execution error: Reminders got an error: Can\'t get list "Nope". (-1728)'
        error = classify_failure(text)

        assert type(error) is AppleScriptError
        assert error.message == text

    @pytest.mark.parametrize("name", ["Permission slips", "Not allowed", "Not authorized -1743"])
    def test_not_found_wins_over_markers_in_the_name(self, name):
        text = f'execution error: Reminders got an error: Can\'t get list "{name}". (-1728)'
        error = classify_failure(text)

        assert type(error) is AppleScriptError
        assert error.message == text

    def test_missing_resource(self):
        assert missing_resource('Can\'t get list "Work". (-1728)') == "List"
        assert missing_resource("Can\u2019t get reminder id \"R1\".") == "Reminder"
        assert missing_resource("Not authorized to send Apple events (-1743)") is None

    def test_generic_failure(self):
        error = classify_failure("syntax error: Expected end of line (-2741)")
        assert type(error) is AppleScriptError
        assert "Expected end of line" in error.message

    def test_empty_text_gets_a_message(self):
        assert classify_failure("").message == "Unknown AppleScript error"


class TestRunAppleScript:
    async def test_returns_trimmed_stdout(self, monkeypatch):
        fake = fake_process(stdout="  L1|||Work|||2\n\n")
        monkeypatch.setattr(anyio, "run_process", fake)

        assert await run_applescript('tell application "Reminders" to count lists') == (
            "L1|||Work|||2"
        )

    async def test_script_is_sent_on_stdin(self, monkeypatch):
        fake = fake_process(stdout="success")
        monkeypatch.setattr(anyio, "run_process", fake)

        await run_applescript('return "é"')

        call = fake.calls[0]
        assert call["command"] == [executor.OSASCRIPT_PATH, "-"]
        assert call["input"] == 'return "é"'.encode("utf-8")
        assert call["check"] is False

    async def test_nonzero_exit_permission(self, monkeypatch):
        monkeypatch.setattr(
            anyio,
            "run_process",
            fake_process(1, stderr="Not authorized to send Apple events to Reminders. (-1743)"),
        )

        with pytest.raises(AccessDeniedError) as exc_info:
            await run_applescript("script")
        assert exc_info.value.recoverable is False

    async def test_nonzero_exit_uses_stdout_when_stderr_empty(self, monkeypatch):
        monkeypatch.setattr(anyio, "run_process", fake_process(1, stdout="boom"))

        with pytest.raises(AppleScriptError, match="boom"):
            await run_applescript("script")

    async def test_nonzero_exit_not_found(self, monkeypatch):
        monkeypatch.setattr(
            anyio,
            "run_process",
            fake_process(1, stderr="Can't get reminder id \"R9\". (-1728)\n"),
        )

        with pytest.raises(AppleScriptError) as exc_info:
            await run_applescript("script")
        assert exc_info.value.message == 'Can\'t get reminder id "R9". (-1728)'

    async def test_missing_list_named_like_a_permission_error(self, monkeypatch):
        stderr = 'Reminders got an error: Can\'t get list "Permission slips". (-1728)'
        monkeypatch.setattr(anyio, "run_process", fake_process(1, stderr=stderr))

        with pytest.raises(AppleScriptError) as exc_info:
            await run_applescript("script")

        assert type(exc_info.value) is AppleScriptError
        assert exc_info.value.recoverable is True

    async def test_benign_stderr_is_ignored(self, monkeypatch):
        monkeypatch.setattr(
            anyio,
            "run_process",
            fake_process(0, stdout="", stderr="CFBundle warning: locale not set"),
        )
        assert await run_applescript("script") == ""

    async def test_stderr_with_output_is_ignored(self, monkeypatch):
        monkeypatch.setattr(
            anyio, "run_process", fake_process(0, stdout="ok", stderr="some error text")
        )
        assert await run_applescript("script") == "ok"

    async def test_stderr_error_without_output_fails(self, monkeypatch):
        monkeypatch.setattr(
            anyio, "run_process", fake_process(0, stderr="execution error: bad things")
        )

        with pytest.raises(AppleScriptError, match="bad things"):
            await run_applescript("script")

    async def test_timeout(self, monkeypatch):
        async def slow(command, **kwargs):
            await anyio.sleep(5)

        monkeypatch.setattr(anyio, "run_process", slow)

        with pytest.raises(ScriptTimeoutError) as exc_info:
            await run_applescript("script", timeout=0.05)
        assert exc_info.value.timeout_seconds == 0.05
        assert exc_info.value.code == "TIMEOUT"

    async def test_missing_osascript(self, monkeypatch):
        async def missing(command, **kwargs):
            raise FileNotFoundError(command[0])

        monkeypatch.setattr(anyio, "run_process", missing)

        with pytest.raises(AppleScriptError, match="requires macOS"):
            await run_applescript("script")


class TestCheckAccess:
    async def test_granted(self, fake_executor):
        fake_executor.queue("3")

        assert await check_access(fake_executor, timeout=2.0) is True
        assert fake_executor.timeouts == [2.0]
        assert "count of lists" in fake_executor.scripts[0]

    async def test_denied(self, fake_executor):
        fake_executor.queue(AccessDeniedError())
        assert await check_access(fake_executor) is False

    async def test_other_failures_assume_access(self, fake_executor):
        fake_executor.queue(ScriptTimeoutError(5.0))
        assert await check_access(fake_executor) is True

        fake_executor.queue(AppleScriptError("Reminders is not running"))
        assert await check_access(fake_executor) is True

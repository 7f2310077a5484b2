"""Subprocess helpers shared by the clipboard and terminal adapters."""

import logging
import subprocess

from smartpaste.config import get_command_timeout

logger = logging.getLogger("smartpaste")


def run_command(command: list[str], input: bytes | None = None, timeout: float | None = None) -> bytes | None:
    """Run a command and return its stdout, or None if it failed or is missing."""
    try:
        result = subprocess.run(
            command,
            input=input,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=True,
            timeout=timeout if timeout is not None else get_command_timeout(),
        )
        return result.stdout
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError) as e:
        logger.debug("Command %s failed: %s", command[0], e)
        return None


def run_text(command: list[str], timeout: float | None = None) -> str | None:
    """Run a command and return its stdout decoded as UTF-8."""
    output = run_command(command, timeout=timeout)
    if output is None:
        return None
    return output.decode("utf-8", errors="replace")


def run_checked(command: list[str], input: bytes | None = None, timeout: float | None = None) -> bytes:
    """Run a command that must succeed. Errors propagate to the caller."""
    result = subprocess.run(
        command,
        input=input,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=True,
        timeout=timeout if timeout is not None else get_command_timeout(),
    )
    return result.stdout

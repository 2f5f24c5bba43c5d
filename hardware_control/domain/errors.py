"""Errors raised by the executor and controllers."""

from typing import Optional


class ExecutionError(Exception):
    """External command could not be launched or exited non-zero."""

    def __init__(self, message: str, command: Optional[str] = None, returncode: Optional[int] = None):
        super().__init__(message)
        self.command = command
        self.returncode = returncode


class CommandTimeout(ExecutionError):
    """External command did not finish within the configured timeout."""

    def __init__(self, command: str, timeout: float):
        super().__init__(f"timed out after {timeout:g}s: {command}", command=command)
        self.timeout = timeout


class UnsupportedOperation(Exception):
    """Action has no implementation on the current platform."""

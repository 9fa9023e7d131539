"""Errors raised while applying or reverting the hardening override."""

from typing import Optional, Sequence


class HardeningError(Exception):
    """Base class for failures that abort the procedure.

    Attributes:
        exit_code: Process exit code the CLI should return
    """

    exit_code = 1


class InsufficientPrivilegeError(HardeningError, PermissionError):
    """Raised when the process is not running as root."""


class FilesystemError(HardeningError):
    """Raised when the drop-in directory or override file cannot be written."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class ServiceManagerError(HardeningError):
    """Raised when a systemctl invocation exits non-zero.

    Attributes:
        command: The command that was run
        returncode: Its exit status, if it ran at all
    """

    def __init__(self, message: str, command: Sequence[str] = (), returncode: Optional[int] = None):
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
        if returncode and returncode < 0:
            # Killed by signal N; report it the way a shell does
            self.exit_code = 128 + abs(returncode)
        elif returncode:
            self.exit_code = returncode

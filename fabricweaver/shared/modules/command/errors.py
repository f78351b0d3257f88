"""Exception types raised by the command builders and the process runner."""

from typing import List, Optional, Sequence


class InvalidCommandError(ValueError):
    """An option group was set while the builder is on a subcommand that does not accept it."""

    def __init__(self, command: str, allowed: Sequence[str]):
        self.command = command
        self.allowed = list(allowed)
        super().__init__(
            f'Invalid command "{command}" for the requested operation. '
            f"Allowed: {', '.join(self.allowed)}"
        )


class CommandExecutionError(RuntimeError):
    """The spawned binary failed to start or exited with a non-zero code."""

    def __init__(self, command: List[str], exit_code: Optional[int], output: Optional[str] = None, reason: Optional[str] = None):
        self.command = list(command)
        self.exit_code = exit_code
        self.output = (output or "").strip()
        message = reason or f"Process exited with code {exit_code}"
        message = f"{message}: {' '.join(self.command)}"
        if self.output:
            message += f"\nOutput: {self.output}"
        super().__init__(message)


class BinaryNotFoundError(CommandExecutionError):
    """The binary is not on PATH (or not under FABRIC_BIN_DIR)."""

    def __init__(self, command: List[str]):
        super().__init__(command, exit_code=127, reason=f"Binary not found: {command[0]}")


class CommandTimeoutError(CommandExecutionError):
    def __init__(self, command: List[str], timeout: float, output: Optional[str] = None):
        self.timeout = timeout
        super().__init__(command, exit_code=None, output=output, reason=f"Timed out after {timeout}s")


class InstallerError(RuntimeError):
    """Downloading or running the Fabric install script failed."""

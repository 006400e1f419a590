from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from create_gh_project.proc import CommandOutcome


class CreateGhProjectException(Exception):
    pass


class InvalidProjectConfig(CreateGhProjectException):
    pass


class SettingsError(CreateGhProjectException):
    pass


class UnsupportedLicense(CreateGhProjectException):
    pass


class ProcessSpawnError(CreateGhProjectException):
    # False when the missing program is `gh` itself; None otherwise.
    cli_installed: bool | None = None

    def __init__(self, command: list[str], reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"Could not start {command[0]!r}: {reason}")


class WorkflowError(CreateGhProjectException):
    """Non-zero exit of an external command, classified by its output."""

    def __init__(self, message: str, *, outcome: CommandOutcome) -> None:
        self.outcome = outcome
        super().__init__(message)

    @property
    def command_line(self) -> str:
        return " ".join(self.outcome.command)


class RepositoryAlreadyExists(WorkflowError):
    pass


class CommandNotFound(WorkflowError):
    # Set by the workflow after probing `gh --version`; None until probed.
    cli_installed: bool | None = None


class GenericCommandFailure(WorkflowError):
    def __init__(self, *, outcome: CommandOutcome) -> None:
        self.command = " ".join(outcome.command)
        self.stdout = outcome.stdout or ""
        self.stderr = outcome.stderr or ""
        super().__init__(self._build_message(outcome), outcome=outcome)

    def _build_message(self, outcome: CommandOutcome) -> str:
        message = f"Command failed: {self.command} (returncode={outcome.returncode})"
        if self.stdout:
            message += f"\nOutput: {self.stdout}"
        if self.stderr:
            message += f"\nError: {self.stderr}"
        return message

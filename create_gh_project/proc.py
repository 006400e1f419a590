from __future__ import annotations

from dataclasses import dataclass, replace
import enum
import logging
from pathlib import Path
import subprocess
from typing import Callable, Sequence

from create_gh_project.classify import Classifier, classify_failure
from create_gh_project.errors import ProcessSpawnError

logger = logging.getLogger(__name__)


class IOMode(str, enum.Enum):
    CAPTURED = "captured"
    INTERACTIVE = "interactive"


@dataclass(frozen=True)
class CommandSpec:
    argv: list[str]
    cwd: Path | None = None
    mode: IOMode = IOMode.CAPTURED


@dataclass(frozen=True)
class CommandOutcome:
    command: list[str]
    mode: IOMode
    returncode: int
    stdout: str | None = None
    stderr: str | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0


CommandRunner = Callable[[CommandSpec], CommandOutcome]


def default_runner(spec: CommandSpec) -> CommandOutcome:
    captured = spec.mode is IOMode.CAPTURED
    try:
        completed = subprocess.run(
            spec.argv,
            cwd=spec.cwd,
            capture_output=captured,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ProcessSpawnError(spec.argv, "program not found") from exc
    except PermissionError as exc:
        raise ProcessSpawnError(spec.argv, "permission denied") from exc
    except OSError as exc:
        raise ProcessSpawnError(spec.argv, str(exc)) from exc

    return CommandOutcome(
        command=list(spec.argv),
        mode=spec.mode,
        returncode=completed.returncode,
        stdout=(completed.stdout or "") if captured else None,
        stderr=(completed.stderr or "") if captured else None,
    )


def _normalize(outcome: CommandOutcome, spec: CommandSpec) -> CommandOutcome:
    if spec.mode is IOMode.INTERACTIVE:
        return replace(outcome, mode=IOMode.INTERACTIVE, stdout=None, stderr=None)
    return replace(outcome, stdout=outcome.stdout or "", stderr=outcome.stderr or "")


def execute(spec: CommandSpec, *, runner: CommandRunner | None = None) -> CommandOutcome:
    """Run one command and return its outcome without judging the exit code."""
    active_runner = runner or default_runner
    logger.debug("Running %s command: %s (cwd=%s)", spec.mode.value, " ".join(spec.argv), spec.cwd)
    outcome = _normalize(active_runner(spec), spec)
    logger.debug("Command exited with %d: %s", outcome.returncode, " ".join(spec.argv))
    return outcome


def run_command(
    argv: Sequence[str],
    *,
    cwd: Path | None = None,
    mode: IOMode = IOMode.CAPTURED,
    runner: CommandRunner | None = None,
    classifier: Classifier | None = None,
) -> CommandOutcome:
    spec = CommandSpec(argv=list(argv), cwd=cwd, mode=mode)
    outcome = execute(spec, runner=runner)
    if not outcome.ok:
        raise (classifier or classify_failure)(outcome)
    return outcome

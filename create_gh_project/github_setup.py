"""Local git initialisation and GitHub repository provisioning.

Drives ``git`` and the GitHub CLI (``gh``) through the process runner in a
fixed order: init, add, commit, confirmation, ``gh repo create``, branch
rename, push. Only ``RepositoryAlreadyExists`` is absorbed here; every other
failure propagates to the caller, which owns all terminal reporting.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Callable, Sequence, Union

from create_gh_project.classify import Classifier
from create_gh_project.errors import (
    CommandNotFound,
    CreateGhProjectException,
    ProcessSpawnError,
    RepositoryAlreadyExists,
    WorkflowError,
)
from create_gh_project.proc import (
    CommandOutcome,
    CommandRunner,
    CommandSpec,
    IOMode,
    execute,
    run_command,
)

logger = logging.getLogger(__name__)

DEFAULT_HOST = "github.com"
DEFAULT_BRANCH = "main"
INITIAL_COMMIT_MESSAGE = "Initial commit by create-gh-project"
OWNER_PLACEHOLDER = "username"
AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})

PromptReader = Callable[[str], str]
StepCallback = Callable[[str], None]
OwnerSupplier = Callable[[], str]


@dataclass(frozen=True)
class ProvisioningConfig:
    name: str
    description: str
    is_private: bool
    output_dir: Path


@dataclass(frozen=True)
class Created:
    remote_url: str


@dataclass(frozen=True)
class SkippedByUser:
    pass


@dataclass(frozen=True)
class AlreadyExists:
    pass


@dataclass(frozen=True)
class Failed:
    error: CreateGhProjectException


ProvisioningResult = Union[Created, SkippedByUser, AlreadyExists, Failed]


def is_affirmative(answer: str) -> bool:
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def resolve_first(suppliers: Sequence[OwnerSupplier], *, default: str) -> str:
    """Return the first non-empty answer from ``suppliers``; ``default`` if all fail."""
    for supplier in suppliers:
        try:
            value = supplier().strip()
        except (WorkflowError, ProcessSpawnError) as exc:
            logger.debug("Owner lookup failed: %s", exc)
            continue
        if value:
            return value
    return default


class GitHubSetup:
    """Takes a generated project directory to a pushed GitHub repository."""

    def __init__(
        self,
        *,
        runner: CommandRunner | None = None,
        classifier: Classifier | None = None,
        prompt: PromptReader = input,
        on_step: StepCallback | None = None,
        host: str = DEFAULT_HOST,
        create_mode: IOMode = IOMode.INTERACTIVE,
    ) -> None:
        self._runner = runner
        self._classifier = classifier
        self._prompt = prompt
        self._on_step = on_step
        self.host = host
        self.create_mode = create_mode

    def provision(self, config: ProvisioningConfig) -> ProvisioningResult:
        try:
            return self._provision(config)
        except RepositoryAlreadyExists as exc:
            logger.debug("Repository %s already exists: %s", config.name, exc)
            return AlreadyExists()
        except CommandNotFound as exc:
            exc.cli_installed = self.gh_installed()
            raise
        except ProcessSpawnError as exc:
            if exc.command[:1] == ["gh"]:
                exc.cli_installed = False
            raise

    def _provision(self, config: ProvisioningConfig) -> ProvisioningResult:
        cwd = config.output_dir

        self._step("Initializing Git repository...")
        self._run(["git", "init"], cwd=cwd)

        self._step("Adding files to Git...")
        self._run(["git", "add", "."], cwd=cwd)

        self._step("Creating initial commit...")
        self._run(["git", "commit", "-m", INITIAL_COMMIT_MESSAGE], cwd=cwd)

        if not self._confirm(f'Create GitHub repository "{config.name}"? (y/N): '):
            logger.debug("User declined creation of repository %s", config.name)
            return SkippedByUser()

        visibility = "private" if config.is_private else "public"
        self._step(f"Creating {visibility} GitHub repository...")
        self._run(
            [
                "gh",
                "repo",
                "create",
                config.name,
                "--description",
                config.description,
                f"--{visibility}",
                "--source",
                ".",
            ],
            cwd=cwd,
            mode=self.create_mode,
        )

        self._step(f"Setting up {DEFAULT_BRANCH} branch...")
        self._run(["git", "branch", "-M", DEFAULT_BRANCH], cwd=cwd)

        self._step("Pushing to GitHub...")
        self._run(["git", "push", "-u", "origin", DEFAULT_BRANCH], cwd=cwd, mode=IOMode.INTERACTIVE)

        owner = self.resolve_owner(cwd=cwd)
        return Created(remote_url=f"https://{self.host}/{owner}/{config.name}")

    def resolve_owner(self, *, cwd: Path | None = None) -> str:
        return resolve_first(
            [
                lambda: self._run(["gh", "api", "user", "--jq", ".login"], cwd=cwd).stdout or "",
                lambda: self._run(["git", "config", "user.name"], cwd=cwd).stdout or "",
            ],
            default=OWNER_PLACEHOLDER,
        )

    def gh_installed(self) -> bool:
        try:
            outcome = execute(CommandSpec(argv=["gh", "--version"]), runner=self._runner)
        except ProcessSpawnError:
            return False
        return outcome.ok

    def _confirm(self, question: str) -> bool:
        try:
            answer = self._prompt(question)
        except EOFError:
            return False
        return is_affirmative(answer)

    def _run(self, argv: list[str], *, cwd: Path | None, mode: IOMode = IOMode.CAPTURED) -> CommandOutcome:
        return run_command(argv, cwd=cwd, mode=mode, runner=self._runner, classifier=self._classifier)

    def _step(self, message: str) -> None:
        logger.debug(message)
        if self._on_step is not None:
            self._on_step(message)


from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence

from create_gh_project.errors import (
    CommandNotFound,
    GenericCommandFailure,
    RepositoryAlreadyExists,
    WorkflowError,
)

if TYPE_CHECKING:
    from create_gh_project.proc import CommandOutcome

Classifier = Callable[["CommandOutcome"], WorkflowError]
ClassificationRule = tuple[str, type[WorkflowError]]

REPO_CREATE_PREFIX = ("gh", "repo", "create")

# Matched in order against lower-cased stderr; first hit wins.
DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ("name already exists on this account", RepositoryAlreadyExists),
    ("command not found", CommandNotFound),
    ("not found", CommandNotFound),
)


def is_repo_create_command(command: Sequence[str]) -> bool:
    return tuple(command[: len(REPO_CREATE_PREFIX)]) == REPO_CREATE_PREFIX


class ErrorClassifier:
    """Turns a failed command outcome into a typed workflow error.

    Outcomes with captured stderr are matched against the rule table.
    Interactive outcomes carry no text, so the only evidence left is the
    shape of the command: a failed ``gh repo create`` is taken to mean the
    repository already exists, anything else is a generic failure.
    """

    def __init__(self, rules: Sequence[ClassificationRule] = DEFAULT_RULES) -> None:
        self._rules = tuple((needle.lower(), error_cls) for needle, error_cls in rules)

    def __call__(self, outcome: CommandOutcome) -> WorkflowError:
        if outcome.stderr is None:
            return self._classify_by_command(outcome)

        text = outcome.stderr.lower()
        for needle, error_cls in self._rules:
            if needle in text:
                return self._build(error_cls, outcome)
        return GenericCommandFailure(outcome=outcome)

    def _classify_by_command(self, outcome: CommandOutcome) -> WorkflowError:
        if is_repo_create_command(outcome.command):
            return RepositoryAlreadyExists(
                f"Repository creation failed: {' '.join(outcome.command)}",
                outcome=outcome,
            )
        return GenericCommandFailure(outcome=outcome)

    @staticmethod
    def _build(error_cls: type[WorkflowError], outcome: CommandOutcome) -> WorkflowError:
        if issubclass(error_cls, GenericCommandFailure):
            return error_cls(outcome=outcome)
        detail = (outcome.stderr or "").strip()
        return error_cls(f"{' '.join(outcome.command)}: {detail}", outcome=outcome)


classify_failure: Classifier = ErrorClassifier()

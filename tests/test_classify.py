from __future__ import annotations

import pytest

from create_gh_project.classify import ErrorClassifier, classify_failure, is_repo_create_command
from create_gh_project.errors import (
    CommandNotFound,
    GenericCommandFailure,
    RepositoryAlreadyExists,
    WorkflowError,
)
from create_gh_project.proc import CommandOutcome, IOMode


def _captured(command: list[str], *, stderr: str, stdout: str = "", returncode: int = 1) -> CommandOutcome:
    return CommandOutcome(
        command=command, mode=IOMode.CAPTURED, returncode=returncode, stdout=stdout, stderr=stderr
    )


def _interactive(command: list[str], returncode: int = 1) -> CommandOutcome:
    return CommandOutcome(command=command, mode=IOMode.INTERACTIVE, returncode=returncode)


@pytest.mark.parametrize(
    ("stderr", "expected"),
    [
        ("GraphQL: Name already exists on this account (createRepository)", RepositoryAlreadyExists),
        ("name already exists on this account", RepositoryAlreadyExists),
        ("bash: gh: command not found", CommandNotFound),
        ("HTTP 404: Not Found (https://api.github.com/user)", CommandNotFound),
        ("fatal: not a git repository", GenericCommandFailure),
        ("", GenericCommandFailure),
    ],
)
def test_captured_stderr_table(stderr: str, expected: type[WorkflowError]) -> None:
    error = classify_failure(_captured(["gh", "repo", "create", "x"], stderr=stderr))

    assert type(error) is expected


def test_already_exists_wins_over_not_found() -> None:
    stderr = "Name already exists on this account; remote not found"

    assert isinstance(classify_failure(_captured(["gh"], stderr=stderr)), RepositoryAlreadyExists)


def test_generic_failure_keeps_output_verbatim() -> None:
    error = classify_failure(
        _captured(["git", "commit", "-m", "msg"], stdout="  out text  ", stderr="  err text  ")
    )

    assert isinstance(error, GenericCommandFailure)
    assert error.command == "git commit -m msg"
    assert error.stdout == "  out text  "
    assert error.stderr == "  err text  "


def test_interactive_repo_create_failure_is_already_exists() -> None:
    error = classify_failure(_interactive(["gh", "repo", "create", "demo", "--public"]))

    assert isinstance(error, RepositoryAlreadyExists)


def test_interactive_other_failure_is_generic_with_command_only() -> None:
    error = classify_failure(_interactive(["git", "push", "-u", "origin", "main"]))

    assert isinstance(error, GenericCommandFailure)
    assert error.stdout == ""
    assert error.stderr == ""
    assert "git push -u origin main" in str(error)


def test_custom_rule_table() -> None:
    classifier = ErrorClassifier(rules=[("nom existe déjà", RepositoryAlreadyExists)])

    assert isinstance(classifier(_captured(["gh"], stderr="Le NOM EXISTE DÉJÀ")), RepositoryAlreadyExists)
    assert isinstance(classifier(_captured(["gh"], stderr="command not found")), GenericCommandFailure)


def test_repo_create_shape() -> None:
    assert is_repo_create_command(["gh", "repo", "create", "x"]) is True
    assert is_repo_create_command(["gh", "repo", "view", "x"]) is False
    assert is_repo_create_command(["gh"]) is False

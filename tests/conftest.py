from __future__ import annotations

import pytest
from typer.testing import CliRunner

from create_gh_project import proc
from create_gh_project.errors import ProcessSpawnError
from create_gh_project.proc import CommandOutcome, CommandSpec


class FakeRunner:
    """Scripted stand-in for ``proc.default_runner``.

    Responses are matched by argv prefix in registration order; unmatched
    commands succeed with empty output. Every spec is recorded in ``calls``.
    """

    def __init__(self) -> None:
        self.calls: list[CommandSpec] = []
        self._responses: list[tuple[list[str], int, str, str, bool]] = []

    def on(
        self,
        *prefix: str,
        returncode: int = 0,
        stdout: str = "",
        stderr: str = "",
        missing: bool = False,
    ) -> "FakeRunner":
        self._responses.append((list(prefix), returncode, stdout, stderr, missing))
        return self

    def __call__(self, spec: CommandSpec) -> CommandOutcome:
        self.calls.append(spec)
        for prefix, returncode, stdout, stderr, missing in self._responses:
            if spec.argv[: len(prefix)] == prefix:
                if missing:
                    raise ProcessSpawnError(spec.argv, "program not found")
                return CommandOutcome(
                    command=list(spec.argv),
                    mode=spec.mode,
                    returncode=returncode,
                    stdout=stdout,
                    stderr=stderr,
                )
        return CommandOutcome(command=list(spec.argv), mode=spec.mode, returncode=0, stdout="", stderr="")

    @property
    def argvs(self) -> list[list[str]]:
        return [spec.argv for spec in self.calls]

    def called(self, *prefix: str) -> bool:
        return any(argv[: len(prefix)] == list(prefix) for argv in self.argvs)

    def commands_of(self, program: str) -> list[list[str]]:
        return [argv for argv in self.argvs if argv[0] == program]


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("CREATE_GH_PROJECT_CONFIG", str(tmp_path / "no-such-config.yaml"))
    monkeypatch.delenv("CREATE_GH_PROJECT_LOG_LEVEL", raising=False)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def patched_runner(fake_runner, monkeypatch) -> FakeRunner:
    monkeypatch.setattr(proc, "default_runner", fake_runner)
    return fake_runner


@pytest.fixture
def cli_runner(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    from create_gh_project.cli import app

    return CliRunner(), app

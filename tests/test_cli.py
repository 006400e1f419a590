from __future__ import annotations

from pathlib import Path

from create_gh_project import __version__


def test_help(cli_runner) -> None:
    runner, app = cli_runner

    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "Bootstrap your projects with essential files" in result.output
    for option in ("--license", "--github", "--private", "--force", "--output"):
        assert option in result.output


def test_version(cli_runner) -> None:
    runner, app = cli_runner

    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_invalid_license_is_rejected(cli_runner, patched_runner) -> None:
    runner, app = cli_runner

    result = runner.invoke(app, ["test-project", "--license", "GPL"])

    assert result.exit_code == 1
    assert 'Invalid license "GPL" - Only MIT and Apache-2.0 are supported' in result.output
    assert patched_runner.calls == []


def test_invalid_name_is_rejected(cli_runner, patched_runner) -> None:
    runner, app = cli_runner

    result = runner.invoke(app, ["bad/name!"])

    assert result.exit_code == 1
    assert 'Invalid project name "bad/name!"' in result.output
    assert "letters, numbers, dots, underscores, and hyphens" in result.output


def test_creates_project_structure(cli_runner, patched_runner) -> None:
    patched_runner.on("gh", "api", "user", "--jq", ".name", stdout="Test Author\n")
    patched_runner.on("gh", "api", "user", "--jq", ".login", stdout="testauthor\n")
    runner, app = cli_runner

    result = runner.invoke(app, ["test-project", "--license", "MIT", "--description", "A test project"])

    assert result.exit_code == 0, result.output
    assert "📜 License: MIT" in result.output
    assert "👤 Author: Test Author" in result.output
    assert "Project structure created successfully!" in result.output
    root = Path("test-project")
    assert (root / "README.md").exists()
    assert "github.com/testauthor/test-project" in (root / "README.md").read_text()
    assert "Copyright (c)" in (root / "LICENSE").read_text()
    assert (root / ".github" / "copilot-instructions.md").is_symlink()
    assert not patched_runner.called("git")
    assert "git init" in result.output


def test_default_name_and_description(cli_runner, patched_runner) -> None:
    runner, app = cli_runner

    result = runner.invoke(app, [])

    assert result.exit_code == 0, result.output
    assert "📝 Project: new-project" in result.output
    assert "new-project - A project bootstrapped with create-gh-project" in result.output
    assert Path("new-project", "README.md").read_text().startswith("# new-project")


def test_non_empty_directory_requires_force(cli_runner, patched_runner) -> None:
    runner, app = cli_runner
    Path("out").mkdir()
    Path("out", "existing.txt").write_text("keep")

    result = runner.invoke(app, ["test-project", "--output", "out"])

    assert result.exit_code == 1
    assert "already exists and is not empty" in result.output
    assert "--force" in result.output
    assert not Path("out", "README.md").exists()


def test_force_overwrites_non_empty_directory(cli_runner, patched_runner) -> None:
    runner, app = cli_runner
    Path("out").mkdir()
    Path("out", "existing.txt").write_text("keep")

    result = runner.invoke(app, ["test-project", "--output", "out", "--force"])

    assert result.exit_code == 0, result.output
    assert Path("out", "README.md").exists()
    assert Path("out", "existing.txt").exists()


def test_github_flow_reports_repository_url(cli_runner, patched_runner) -> None:
    patched_runner.on("gh", "api", "user", "--jq", ".login", stdout="octocat\n")
    runner, app = cli_runner

    result = runner.invoke(app, ["demo", "--github", "--private"], input="y\n")

    assert result.exit_code == 0, result.output
    assert "Repository URL: https://github.com/octocat/demo" in result.output
    create_cmd = next(argv for argv in patched_runner.argvs if argv[:3] == ["gh", "repo", "create"])
    assert "--private" in create_cmd
    assert all(spec.cwd == Path("demo") for spec in patched_runner.calls if spec.argv[0] == "git")


def test_github_flow_declined(cli_runner, patched_runner) -> None:
    runner, app = cli_runner

    result = runner.invoke(app, ["demo", "--github"], input="n\n")

    assert result.exit_code == 0, result.output
    assert "Skipping GitHub repository creation" in result.output
    assert not patched_runner.called("gh", "repo")


def test_github_flow_already_exists_is_not_an_error(cli_runner, patched_runner) -> None:
    patched_runner.on("gh", "repo", "create", returncode=1)
    runner, app = cli_runner

    result = runner.invoke(app, ["demo", "--github"], input="yes\n")

    assert result.exit_code == 0, result.output
    assert 'GitHub repository "demo" already exists' in result.output
    assert not patched_runner.called("git", "push")


def test_github_flow_failure_exits_non_zero(cli_runner, patched_runner) -> None:
    patched_runner.on("git", "commit", returncode=1, stderr="Author identity unknown")
    runner, app = cli_runner

    result = runner.invoke(app, ["demo", "--github"])

    assert result.exit_code == 1
    assert "GitHub setup failed" in result.output
    assert "Author identity unknown" in result.output


def test_github_flow_missing_cli_guidance(cli_runner, patched_runner, tmp_path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("create_mode: captured\n")
    patched_runner.on("gh", "repo", "create", returncode=127, stderr="gh: command not found")
    patched_runner.on("gh", "--version", missing=True)
    runner, app = cli_runner

    result = runner.invoke(
        app, ["demo", "--github"], input="y\n", env={"CREATE_GH_PROJECT_CONFIG": str(config)}
    )

    assert result.exit_code == 1
    assert "Install: https://cli.github.com/" in result.output
    assert "gh auth login" in result.output


def test_github_flow_gh_not_installed_shows_install_guidance(cli_runner, patched_runner) -> None:
    patched_runner.on("gh", missing=True)
    runner, app = cli_runner

    result = runner.invoke(app, ["demo", "--github"], input="y\n")

    assert result.exit_code == 1
    assert "Could not start 'gh'" in result.output
    assert "Install: https://cli.github.com/" in result.output
    assert "gh auth login" in result.output


def test_output_path_that_is_a_file_is_rejected(cli_runner, patched_runner) -> None:
    runner, app = cli_runner
    Path("afile").write_text("not a directory")

    result = runner.invoke(app, ["demo", "--output", "afile"])

    assert result.exit_code == 1
    assert 'Error: "afile" exists and is not a directory.' in result.output
    assert Path("afile").read_text() == "not a directory"


def _write_settings(tmp_path: Path, content: str) -> dict[str, str]:
    config = tmp_path / "config.yaml"
    config.write_text(content)
    return {"CREATE_GH_PROJECT_CONFIG": str(config)}


def test_public_flag_overrides_private_setting(cli_runner, patched_runner, tmp_path) -> None:
    runner, app = cli_runner

    result = runner.invoke(
        app, ["demo", "--github", "--public"], input="y\n", env=_write_settings(tmp_path, "private: true\n")
    )

    assert result.exit_code == 0, result.output
    create_cmd = next(argv for argv in patched_runner.argvs if argv[:3] == ["gh", "repo", "create"])
    assert "--public" in create_cmd
    assert "--private" not in create_cmd


def test_private_setting_applies_without_flag(cli_runner, patched_runner, tmp_path) -> None:
    runner, app = cli_runner

    result = runner.invoke(
        app, ["demo", "--github"], input="y\n", env=_write_settings(tmp_path, "private: true\n")
    )

    assert result.exit_code == 0, result.output
    create_cmd = next(argv for argv in patched_runner.argvs if argv[:3] == ["gh", "repo", "create"])
    assert "--private" in create_cmd

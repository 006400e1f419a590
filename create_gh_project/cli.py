from __future__ import annotations

import logging
from pathlib import Path

import typer

from create_gh_project import __version__
from create_gh_project.errors import (
    CommandNotFound,
    CreateGhProjectException,
    InvalidProjectConfig,
    ProcessSpawnError,
)
from create_gh_project.github_setup import (
    AlreadyExists,
    Created,
    Failed,
    GitHubSetup,
    ProvisioningConfig,
    ProvisioningResult,
    SkippedByUser,
)
from create_gh_project.identity import get_github_info
from create_gh_project.logging_config import configure_logging
from create_gh_project.models import (
    DEFAULT_PROJECT_NAME,
    SUPPORTED_LICENSES,
    ProjectConfig,
    default_description,
    is_valid_project_name,
)
from create_gh_project.project_creator import create_project_structure
from create_gh_project.settings import load_settings

configure_logging()
logger = logging.getLogger(__name__)

EPILOG = """Examples:

  create-gh-project my-project

  create-gh-project my-project --output ./custom-dir

  create-gh-project my-project --github --private --license MIT
"""

app = typer.Typer(
    name="create-gh-project",
    help="🚀 Bootstrap your projects with essential files",
    epilog=EPILOG,
    add_completion=False,
    pretty_exceptions_show_locals=False,
)


def _fail(*lines: str) -> None:
    for line in lines:
        typer.echo(f"❌ {line}", err=True)
    raise typer.Exit(code=1)


def _exit_for_domain_error(exc: CreateGhProjectException) -> None:
    logger.warning("CLI command failed with domain error: %s", exc)
    _fail(f"Error: {exc}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def validate_license(license_name: str) -> None:
    if license_name not in SUPPORTED_LICENSES:
        raise InvalidProjectConfig(
            f'Invalid license "{license_name}" - Only MIT and Apache-2.0 are supported'
        )


def validate_name(name: str) -> None:
    if not is_valid_project_name(name):
        raise InvalidProjectConfig(
            f'Invalid project name "{name}".\n'
            "  Project names must contain only letters, numbers, dots, underscores, and hyphens.\n"
            "  Example: create-gh-project my-awesome-project"
        )


def validate_output_dir(output_dir: str, *, name: str, force: bool) -> bool:
    """Return whether ``output_dir`` holds files that will be overwritten."""
    path = Path(output_dir).resolve()
    if not path.exists():
        return False
    if not path.is_dir():
        raise InvalidProjectConfig(f'"{output_dir}" exists and is not a directory.')
    if not any(path.iterdir()):
        return False
    if not force:
        raise InvalidProjectConfig(
            f'Directory "{output_dir}" already exists and is not empty.\n'
            "  Use --force to overwrite existing files or choose a different directory.\n"
            f"  Example: create-gh-project {name} --output ./my-{name}"
        )
    return True


def _warn_overwrite(output_dir: str) -> None:
    typer.echo(f'⚠️ Directory "{output_dir}" exists and will be overwritten (--force specified)')


def _print_summary(config: ProjectConfig) -> None:
    typer.echo(f"📝 Project: {config.name}")
    typer.echo(f"📁 Output directory: {config.output_dir}")
    typer.echo(f"📄 Description: {config.description}")
    typer.echo(f"👤 Author: {config.author}")
    typer.echo(f"📜 License: {config.license}\n")


def _print_files_created() -> None:
    typer.echo("📁 Files created:")
    typer.echo("   ├── README.md          # Project documentation")
    typer.echo("   ├── LICENSE            # License file")
    typer.echo("   ├── CHANGELOG.md       # Version history")
    typer.echo("   ├── CLAUDE.md          # AI development instructions")
    typer.echo("   ├── .gitignore         # Git ignore rules")
    typer.echo("   ├── .editorconfig      # Editor configuration")
    typer.echo("   ├── .claude/agents/    # Claude Code agents")
    typer.echo("   └── .github/           # GitHub workflows & copilot-instructions.md")
    typer.echo("")


def _print_next_steps(output_dir: str, *, git_initialized: bool) -> None:
    typer.echo("Next steps:")
    if output_dir != ".":
        typer.echo(f"  cd {output_dir}")
    if not git_initialized:
        typer.echo("  git init               # Initialize git repository")
        typer.echo("  git add .              # Stage all files")
        typer.echo('  git commit -m "🎉 Initial commit"')
    typer.echo("  # Start coding! 🎉")


def _gh_cli_installed(error: CreateGhProjectException) -> bool | None:
    if isinstance(error, (CommandNotFound, ProcessSpawnError)):
        return error.cli_installed
    return None


def report_provisioning(result: ProvisioningResult, *, name: str) -> None:
    if isinstance(result, Created):
        typer.echo("✅ GitHub repository created and pushed successfully!")
        typer.echo(f"🌐 Repository URL: {result.remote_url}\n")
    elif isinstance(result, SkippedByUser):
        typer.echo("ℹ️ Skipping GitHub repository creation")
        typer.echo("💡 You can create it later with: gh repo create\n")
    elif isinstance(result, AlreadyExists):
        typer.echo(f'ℹ️ GitHub repository "{name}" already exists, nothing was pushed')
        typer.echo("💡 Add it as a remote and push manually: git push -u origin main\n")
    elif isinstance(result, Failed):
        lines = [f"GitHub setup failed: {result.error}"]
        cli_installed = _gh_cli_installed(result.error)
        if cli_installed is not None:
            if cli_installed:
                lines += ["💡 GitHub CLI (gh) is installed but not authenticated:", "   - Login: gh auth login"]
            else:
                lines += [
                    "💡 Make sure GitHub CLI (gh) is installed and authenticated:",
                    "   - Install: https://cli.github.com/",
                    "   - Login: gh auth login",
                ]
        _fail(*lines)


@app.command()
def create(
    name: str = typer.Argument(DEFAULT_PROJECT_NAME, help="Project name"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output directory (default: project name)"
    ),
    description: str | None = typer.Option(None, "--description", "-d", help="Project description"),
    license_name: str | None = typer.Option(
        None, "--license", "-l", help="License type (MIT or Apache-2.0) [default: Apache-2.0]"
    ),
    github: bool = typer.Option(False, "--github", "-g", help="Create GitHub repository"),
    private: bool | None = typer.Option(
        None,
        "--private/--public",
        "-p/-P",
        help="Repository visibility (only with --github) [default: public, or the settings file]",
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite existing directory without confirmation"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    try:
        settings = load_settings()
    except CreateGhProjectException as e:
        _exit_for_domain_error(e)
    if verbose or settings.log_level:
        configure_logging(level="DEBUG" if verbose else settings.log_level, force=True)

    chosen_license = license_name or settings.license
    output_dir = output or name
    try:
        validate_license(chosen_license)
        validate_name(name)
        overwriting = validate_output_dir(output_dir, name=name, force=force)
    except InvalidProjectConfig as e:
        _exit_for_domain_error(e)
    if overwriting:
        _warn_overwrite(output_dir)

    typer.echo("🚀 Starting project initialization...\n")
    typer.echo("🔍 Getting author information from GitHub…")
    info = get_github_info()

    config = ProjectConfig(
        name=name,
        description=description or default_description(name),
        author=info.name,
        github_username=info.username,
        license=chosen_license,
        output_dir=output_dir,
    )
    _print_summary(config)

    try:
        linked = create_project_structure(config, on_step=typer.echo)
    except (CreateGhProjectException, OSError) as e:
        _fail(f"Error: {e}")
    if not linked:
        typer.echo("⚠️ Could not create symbolic link for GitHub Copilot")
    typer.echo("✅ Project structure created successfully!")

    if github:
        typer.echo("\n🐙 Setting up GitHub repository…")
        setup = GitHubSetup(
            on_step=typer.echo,
            host=settings.host,
            create_mode=settings.create_mode,
        )
        provisioning = ProvisioningConfig(
            name=name,
            description=config.description,
            is_private=settings.private if private is None else private,
            output_dir=Path(output_dir),
        )
        try:
            result = setup.provision(provisioning)
        except CreateGhProjectException as e:
            result = Failed(error=e)
        report_provisioning(result, name=name)

    _print_files_created()
    _print_next_steps(output_dir, git_initialized=github)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

from __future__ import annotations

from pathlib import Path

from create_gh_project.filesystem import GeneratedFile
from create_gh_project.models import ProjectConfig
from create_gh_project.templates.changelog import generate_changelog
from create_gh_project.templates.claude_agents import generate_claude_agents
from create_gh_project.templates.claude_md import generate_claude_md
from create_gh_project.templates.editorconfig import generate_editorconfig
from create_gh_project.templates.github_workflows import generate_github_workflows
from create_gh_project.templates.gitignore import generate_gitignore
from create_gh_project.templates.license import generate_license
from create_gh_project.templates.readme import generate_readme


def generate_core_files(config: ProjectConfig) -> list[GeneratedFile]:
    root = Path(config.output_dir)
    return [
        GeneratedFile(root / "README.md", generate_readme(config)),
        GeneratedFile(root / "CLAUDE.md", generate_claude_md(config)),
        GeneratedFile(root / "CHANGELOG.md", generate_changelog(config)),
        GeneratedFile(root / "LICENSE", generate_license(config)),
        GeneratedFile(root / ".gitignore", generate_gitignore()),
        GeneratedFile(root / ".editorconfig", generate_editorconfig()),
    ]


def generate_workflow_files(config: ProjectConfig) -> list[GeneratedFile]:
    workflows_dir = Path(config.output_dir) / ".github" / "workflows"
    return [
        GeneratedFile(workflows_dir / filename, content)
        for filename, content in generate_github_workflows(config).items()
    ]


def generate_claude_agent_files(config: ProjectConfig) -> list[GeneratedFile]:
    agents_dir = Path(config.output_dir) / ".claude" / "agents"
    return [
        GeneratedFile(agents_dir / filename, content)
        for filename, content in generate_claude_agents().items()
    ]


def generate_all_files(config: ProjectConfig) -> list[GeneratedFile]:
    return [
        *generate_core_files(config),
        *generate_workflow_files(config),
        *generate_claude_agent_files(config),
    ]

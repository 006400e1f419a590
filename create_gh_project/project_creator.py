from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from create_gh_project.filesystem import create_symlink, ensure_directories, write_files
from create_gh_project.models import ProjectConfig
from create_gh_project.templates import generate_all_files

logger = logging.getLogger(__name__)

GITHUB_DIRECTORIES = (".github", ".github/workflows")
COPILOT_INSTRUCTIONS = Path(".github") / "copilot-instructions.md"
COPILOT_TARGET = "../CLAUDE.md"


def create_project_structure(
    config: ProjectConfig,
    *,
    on_step: Callable[[str], None] | None = None,
) -> bool:
    """Write the project tree for ``config``.

    Returns whether the Copilot instructions symlink could be created; a
    filesystem without symlink support is not fatal.
    """
    step = on_step or (lambda message: None)
    project_path = Path(config.output_dir)

    step(f"📁 Creating project directory: {project_path}")
    ensure_directories(project_path, GITHUB_DIRECTORIES)

    step("📝 Generating core files…")
    write_files(generate_all_files(config))

    step("🔗 Creating symbolic link for GitHub Copilot…")
    linked = create_symlink(COPILOT_TARGET, project_path / COPILOT_INSTRUCTIONS)
    logger.info("Project structure created at %s (copilot symlink=%s)", project_path, linked)
    return linked

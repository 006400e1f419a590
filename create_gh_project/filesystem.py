from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedFile:
    path: Path
    content: str


def ensure_directories(base_path: Path, directories: Iterable[str | Path]) -> None:
    for directory in directories:
        full_path = base_path / directory
        full_path.mkdir(parents=True, exist_ok=True)
        logger.debug("Ensured directory: %s", full_path)


def write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s (%d bytes)", path, len(content))


def write_files(files: Iterable[GeneratedFile]) -> None:
    for generated in files:
        write_file(generated.path, generated.content)


def create_symlink(target: str | Path, link_path: Path) -> bool:
    """Point ``link_path`` at ``target``, replacing whatever is there."""
    try:
        if link_path.is_symlink() or link_path.exists():
            link_path.unlink()
        os.symlink(target, link_path)
    except OSError as exc:
        logger.warning("Could not create symlink %s -> %s: %s", link_path, target, exc)
        return False
    return True

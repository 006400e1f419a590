from __future__ import annotations

import re
from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, field_validator

SupportedLicense = Literal["MIT", "Apache-2.0"]
SUPPORTED_LICENSES: tuple[str, ...] = get_args(SupportedLicense)

PROJECT_NAME_RE = re.compile(r"^[a-zA-Z0-9._-]+$")
DEFAULT_PROJECT_NAME = "new-project"
DEFAULT_AUTHOR = "Your Name"
DEFAULT_GITHUB_USERNAME = "yourusername"


def is_valid_project_name(name: str) -> bool:
    return bool(PROJECT_NAME_RE.fullmatch(name))


def default_description(name: str) -> str:
    return f"{name} - A project bootstrapped with create-gh-project"


class ProjectConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    author: str = DEFAULT_AUTHOR
    github_username: str = DEFAULT_GITHUB_USERNAME
    license: SupportedLicense = "Apache-2.0"
    output_dir: str

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not is_valid_project_name(value):
            raise ValueError(
                "project names must contain only letters, numbers, dots, underscores, and hyphens"
            )
        return value


class GitHubInfo(BaseModel):
    name: str = DEFAULT_AUTHOR
    username: str = DEFAULT_GITHUB_USERNAME

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from create_gh_project.errors import SettingsError
from create_gh_project.github_setup import DEFAULT_HOST
from create_gh_project.models import SupportedLicense
from create_gh_project.proc import IOMode

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CREATE_GH_PROJECT_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "create-gh-project" / "config.yaml"


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    license: SupportedLicense = "Apache-2.0"
    private: bool = False
    host: str = DEFAULT_HOST
    log_level: str | None = None
    # Interactive lets `gh` prompt for auth but leaves only the command shape
    # to classify a failure; captured gives exact stderr matching.
    create_mode: IOMode = IOMode.INTERACTIVE


def settings_path() -> Path:
    override = os.getenv(CONFIG_ENV_VAR)
    return Path(override).expanduser() if override else DEFAULT_CONFIG_PATH


def load_settings(path: Path | None = None) -> Settings:
    resolved = path or settings_path()
    if not resolved.exists():
        logger.debug("No settings file at %s, using defaults", resolved)
        return Settings()

    try:
        content = resolved.read_text()
    except OSError as exc:
        raise SettingsError(f"Unable to read settings file {resolved}: {exc}") from exc
    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in settings file {resolved}: {exc}") from exc

    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise SettingsError(f"Settings file {resolved} must contain a mapping")
    try:
        settings = Settings.model_validate(raw)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings in {resolved}: {exc}") from exc
    logger.debug("Loaded settings from %s", resolved)
    return settings

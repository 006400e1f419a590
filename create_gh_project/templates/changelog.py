from __future__ import annotations

from datetime import date

from create_gh_project.models import ProjectConfig


def generate_changelog(config: ProjectConfig, *, today: date | None = None) -> str:
    release_date = (today or date.today()).isoformat()
    return f"""# Changelog

All notable changes to {config.name} will be documented in this file.

The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/),
and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html).

## [Unreleased]

### Added
- Initial project setup
- CI/CD pipeline configuration

### Changed
- Nothing yet

### Deprecated
- Nothing yet

### Removed
- Nothing yet

### Fixed
- Nothing yet

### Security
- Nothing yet

## [0.1.0] - {release_date}

### Added
- Initial release of {config.name}
- Basic project structure
- Comprehensive documentation
- CI/CD integration
- {config.license} license

---

**Note**: This project follows [Semantic Versioning](https://semver.org/) and dates are in YYYY-MM-DD format.
"""

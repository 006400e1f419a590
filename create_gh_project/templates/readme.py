from __future__ import annotations

import re

from create_gh_project.models import ProjectConfig

_WHITESPACE_RE = re.compile(r"\s+")


def kebab_case(name: str) -> str:
    return _WHITESPACE_RE.sub("-", name.lower())


def generate_readme(config: ProjectConfig) -> str:
    slug = kebab_case(config.name)
    repo_url = f"https://github.com/{config.github_username}/{slug}"
    # shields.io escapes a literal dash as a double dash
    license_badge = config.license.replace("-", "--")

    return f"""# {config.name}

[![CI]({repo_url}/actions/workflows/ci.yml/badge.svg)]({repo_url}/actions/workflows/ci.yml)
[![License](https://img.shields.io/badge/License-{license_badge}-blue.svg)](https://opensource.org/licenses/{config.license})

{config.description}

## 🌟 Features

- 🚀 Add a short list of main features here

## 📦 Installation

```bash
# Instructions
```

Download pre-compiled binaries from the [releases page]({repo_url}/releases) for Linux, macOS, or Windows.

## 🚀 Usage Examples

```bash
# Example command to run the project
```

## 🛠️ Development

This repository comes pre-configured with:

- 🚀 **CI/CD Pipeline**: Automated workflows in `.github/workflows/`
- 📚 **Documentation**: This README plus AI-friendly development guides
- 🤖 **AI Integration**: `CLAUDE.md` and `copilot-instructions.md` for AI assistants

### Building

```bash
git clone {repo_url}.git
cd {slug}

# adapt to your technology stack
```

### Development Workflow

- **Check CI status**: The workflows in `.github/workflows/` provide automated testing
- **Follow conventions**: See `CLAUDE.md` for coding standards and best practices
- **Update documentation**: Keep README and other docs current with changes

Use available Claude Agents to help: @code-quality-reviewer, @documentation-maintainer, @release-preparation-validator.

## 🤝 Contributing

1. Fork the repository
2. Create a feature branch: `git checkout -b feature/your-feature`
3. Commit with clear, descriptive messages
4. Push to your branch: `git push origin feature/your-feature`
5. Open a Pull Request

## 🙏 Acknowledgments

- Built with [create-gh-project](https://github.com/davlgd/create-gh-project)

## 📄 License

This project is licensed under the {config.license} License - see the [LICENSE](LICENSE) file for details.

---

⭐ Found this useful? Give it a star [on GitHub]({repo_url}) and share it with others!

Made with ❤️ for the Open Source Community
"""

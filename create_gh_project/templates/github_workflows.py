from __future__ import annotations

from create_gh_project.models import ProjectConfig

CI_WORKFLOW = """name: CI

on:
  push:
    branches: [main]
  pull_request:
    branches: [main]

permissions:
  contents: read

jobs:
  # Generic template: adapt the steps below to your technology stack
  test:
    name: Test Suite
    runs-on: ubuntu-latest
    steps:
      - name: Checkout code
        uses: actions/checkout@v4

      # Example: Node.js setup (remove if not using Node.js)
      - name: Setup Node.js
        uses: actions/setup-node@v4
        with:
          node-version: '22'
          cache: 'npm'

      # Example: Python setup (uncomment if using Python)
      # - name: Setup Python
      #   uses: actions/setup-python@v5
      #   with:
      #     python-version: '3.12'

      - name: Install dependencies
        run: |
          npm ci                    # Node.js with npm
          # pip install -r requirements.txt # Python

      - name: Run quality checks
        run: |
          # npm run lint            # Linting
          # npm run typecheck       # Type checking
          echo "Add your quality checks here"

      - name: Run tests
        run: |
          # npm test                # Node.js
          # pytest                  # Python
          echo "Add your test commands here"
"""

RELEASE_WORKFLOW = """name: Release

on:
  push:
    tags:
      - 'v*'

permissions:
  contents: write

jobs:
  release:
    name: Create Release
    runs-on: ubuntu-latest
    steps:
      - name: Checkout code
        uses: actions/checkout@v4

      # Use the same project setup as in ci.yml
      - name: Setup Node.js
        uses: actions/setup-node@v4
        with:
          node-version: '22'
          cache: 'npm'

      - name: Install dependencies
        run: npm ci

      - name: Run tests
        run: npm test

      - name: Build project
        run: npm run build

      - name: Create GitHub Release
        uses: softprops/action-gh-release@v2
        with:
          generate_release_notes: true
          draft: false
          prerelease: false
"""


def generate_github_workflows(config: ProjectConfig) -> dict[str, str]:
    return {
        "ci.yml": CI_WORKFLOW,
        "release.yml": RELEASE_WORKFLOW,
    }

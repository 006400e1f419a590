GITIGNORE = """# Dependencies
node_modules/
vendor/
.venv/
venv/

# Build output
dist/
build/
target/
*.egg-info/
__pycache__/

# Environment
.env
.env.*
!.env.example

# Logs
*.log
logs/

# Editors and OS
.idea/
.vscode/
*.swp
.DS_Store
Thumbs.db

# Coverage
coverage/
.coverage
htmlcov/

# AI assistants
.claude/*
!.claude/agents/
claude-conversations/
"""


def generate_gitignore() -> str:
    return GITIGNORE

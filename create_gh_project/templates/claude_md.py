from __future__ import annotations

from create_gh_project.models import ProjectConfig


def generate_claude_md(config: ProjectConfig) -> str:
    return f"""# {config.name} - Development Instructions

## Project Overview

This project is **{config.name}**, {config.description}

**License**: {config.license} | **Author**: {config.author}

## Core Development Principles

### 🎯 KISS (Keep It Simple, Stupid)
- **Simplicity over cleverness**: Write code that is easy to understand and maintain
- **Minimal dependencies**: Only add dependencies when absolutely necessary
- **Clear naming**: Use descriptive names for variables, functions, and classes
- **Avoid over-engineering**: Solve the current problem, not all possible future problems

### 🔄 DRY (Don't Repeat Yourself)
- **Extract common functionality**: Create reusable functions, classes, and modules
- **Configuration centralization**: Keep configuration in dedicated files
- **Documentation consistency**: Maintain consistent documentation patterns

### 🏗️ SOLID Principles
- **Single Responsibility**: Each class/function should have one reason to change
- **Open/Closed**: Open for extension, closed for modification
- **Liskov Substitution**: Derived classes must be substitutable for their base classes
- **Interface Segregation**: Many specific interfaces are better than one general-purpose interface
- **Dependency Inversion**: Depend on abstractions, not concretions

## Code Quality Standards (NON-NEGOTIABLE)

### 🧪 Testing Requirements
- **Integration tests** for all public APIs and critical paths
- **Test-first approach** - write tests before implementation when possible
- **All tests must pass** - no exceptions, no workarounds
- **Edge case coverage** - test boundary conditions and error scenarios

### 🔍 Quality Gates
Before any commit or merge:
1. **All tests pass** (using your project's test runner)
2. **Linting passes** (using your project's linter)
3. **Code formatting is applied** (using your project's formatter)
4. **Type checking passes** (if applicable to your language)
5. **Documentation is updated** for any public API changes

### 📝 Documentation Requirements
- **README.md**: Always current with installation, usage, and examples
- **CHANGELOG.md**: Document ALL changes following semantic versioning
- **Architecture decisions**: Document significant design choices and trade-offs

## Development Workflow (MANDATORY)

### 🔀 Feature Development Process
1. **Create feature branch** from main
2. **Write tests first** that describe the expected behavior
3. **Implement the minimum code** needed to make tests pass
4. **Refactor** while maintaining passing tests
5. **Update documentation** (README, API docs, CHANGELOG)
6. **Merge only after** all checks pass and documentation is complete

### 🐛 Bug Fix Process
1. **Write a failing test** that reproduces the bug
2. **Fix the code** to make the test pass
3. **Ensure no regressions** - all existing tests still pass
4. **Add to CHANGELOG.md** as a fix

## AI Assistant Guidelines (CRITICAL)

### 🎯 Token Efficiency Requirements
- **Read before writing**: Inspect only the files relevant to the task
- **Targeted edits**: Change the smallest region of code that solves the problem
- **No speculative rewrites**: Do not reformat or restructure unrelated code
- **Concise answers**: Summaries over transcripts

### ✅ Before Making ANY Changes
- Understand the existing architecture and conventions
- Check for existing tests covering the area
- Confirm the scope of the change

### ❌ NEVER Do This
- Commit secrets, credentials, or generated artifacts
- Disable tests or quality checks to make a build pass
- Leave documentation out of date after a change

## Technology-Specific Guidelines

### 🤖 LLM Collaboration Best Practices

#### **🎨 User Experience & Interface Design**
- Clear error messages that say what went wrong and how to fix it
- Sensible defaults, with options for advanced users
- Consistent output formatting across commands

#### **📚 Documentation Excellence**
- Examples for every public command or API
- Keep the README as the single entry point for new contributors
- Document breaking changes prominently in the CHANGELOG

### Project Hygiene (CRITICAL)
- Keep the repository root clean: no scratch files or local experiments
- Keep `.gitignore` current with your toolchain's artifacts

## Remember: Quality is Non-Negotiable

Every change should leave **{config.name}** simpler, better tested, and better documented than before.
"""

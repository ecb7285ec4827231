"""Project name rules, following npm package naming."""

from __future__ import annotations

import re

MAX_NAME_LENGTH = 214

RESERVED_NAMES: frozenset[str] = frozenset(
    {
        "node_modules",
        "favicon.ico",
        "package.json",
        "package-lock.json",
        "yarn.lock",
        ".git",
        ".gitignore",
        "readme",
        "license",
        "changelog",
    }
)

NAME_RULES: tuple[str, ...] = (
    "Only contain lowercase letters, numbers, and hyphens",
    "Start with a letter",
    "Not end with a hyphen",
    f"Be between 1-{MAX_NAME_LENGTH} characters",
)


def validate_project_name(name: str) -> str | None:
    """Return why *name* is not a valid project name, or ``None`` if it is."""
    if not name:
        return "Project name cannot be empty"
    if len(name) > MAX_NAME_LENGTH:
        return f"Project name must be {MAX_NAME_LENGTH} characters or less"
    if name in RESERVED_NAMES:
        return f'"{name}" is a reserved name and cannot be used'
    if not re.match(r"[a-z]", name):
        return "Project name must start with a letter"
    if not re.fullmatch(r"[a-z0-9-]+", name):
        return "Project name can only contain lowercase letters, numbers, and hyphens"
    if name.endswith("-"):
        return "Project name cannot end with a hyphen"
    if "--" in name:
        return "Project name cannot contain consecutive hyphens"
    return None

"""Identifier forms derived from a project name."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[-_\s]+")


def _segments(name: str) -> list[str]:
    return [segment for segment in _SEPARATORS.split(name) if segment]


def to_pascal_case(name: str) -> str:
    """Convert ``my-vue_app`` to ``MyVueApp``."""
    return "".join(segment[:1].upper() + segment[1:].lower() for segment in _segments(name))


def to_camel_case(name: str) -> str:
    """Convert ``my-vue_app`` to ``myVueApp``."""
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]

"""Project configuration consumed by the resolver and the rewriter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StyleDialect(str, Enum):
    """Style-sheet dialect of the generated project."""

    SCSS = "scss"
    LESS = "less"
    NONE = "none"

    @property
    def label(self) -> str:
        labels: dict[StyleDialect, str] = {
            StyleDialect.SCSS: "SCSS",
            StyleDialect.LESS: "Less",
            StyleDialect.NONE: "Plain CSS",
        }
        return labels[self]


@dataclass(frozen=True, kw_only=True)
class ProjectConfiguration:
    """
    User choices for one generation run.

    Values are validated by the CLI before construction; the engine treats
    every well-typed instance as valid.

    Attributes:
        project_name: Directory and package name of the generated project.
        css_preprocessor: Style-sheet dialect.
        use_pinia: Include the Pinia state store module.
        use_router: Include the Vue Router module.
    """

    project_name: str
    css_preprocessor: StyleDialect = StyleDialect.SCSS
    use_pinia: bool = False
    use_router: bool = False

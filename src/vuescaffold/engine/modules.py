"""Feature module and base layout descriptors."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from vuescaffold.engine.config import ProjectConfiguration


@dataclass(frozen=True, kw_only=True)
class FeatureModule:
    """
    An independently activatable bundle of template paths and dependencies.

    Attributes:
        name: Identifier shown to the user.
        description: One-line summary of what the module adds.
        condition: Pure predicate deciding whether the module is active.
        files: Template files contributed by the module.
        directories: Template directories contributed by the module.
        dependencies: Runtime package identifiers.
        dev_dependencies: Development package identifiers.
    """

    name: str
    description: str = ""
    condition: Callable[[ProjectConfiguration], bool]
    files: tuple[str, ...] = ()
    directories: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()

    def is_active(self, config: ProjectConfiguration) -> bool:
        return bool(self.condition(config))


@dataclass(frozen=True, kw_only=True)
class BaseLayout:
    """Paths and dependencies included regardless of configuration."""

    files: tuple[str, ...] = ()
    directories: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()

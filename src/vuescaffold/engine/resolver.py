"""Resolves a configuration into inclusion and dependency sets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from vuescaffold.engine.catalog import BASE_LAYOUT, DEFAULT_CATALOG
from vuescaffold.engine.config import ProjectConfiguration
from vuescaffold.engine.modules import BaseLayout, FeatureModule

PathParts = tuple[str, ...]


def split_path(path: str) -> PathParts:
    """Split a relative template path into its segments.

    Backslashes count as separators; empty and ``.`` segments are dropped.
    """
    return tuple(part for part in path.replace("\\", "/").split("/") if part not in ("", "."))


def _unique(items: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))


def _is_within(path: PathParts, base: PathParts) -> bool:
    return len(path) >= len(base) and path[: len(base)] == base


class ModuleResolver:
    """
    Derives what to generate for one configuration.

    Every query recomputes its result from the bound configuration and the
    injected catalog; nothing is cached and nothing is mutated.

    Paths are matched segment by segment: ``src/store`` does not match
    ``src/stores``. A file enumerated only by inactive modules is excluded
    even when its directory is included, while files no module enumerates
    follow their parent directory.
    """

    def __init__(
        self,
        config: ProjectConfiguration,
        catalog: Sequence[FeatureModule] = DEFAULT_CATALOG,
        base: BaseLayout = BASE_LAYOUT,
    ) -> None:
        self._config = config
        self._catalog = tuple(catalog)
        self._base = base

    @property
    def config(self) -> ProjectConfiguration:
        return self._config

    def active_modules(self) -> tuple[FeatureModule, ...]:
        """Active modules, in catalog order."""
        return tuple(module for module in self._catalog if module.is_active(self._config))

    def files_to_include(self) -> tuple[str, ...]:
        modules = self.active_modules()
        return _unique([*self._base.files, *(f for m in modules for f in m.files)])

    def directories_to_include(self) -> tuple[str, ...]:
        modules = self.active_modules()
        return _unique([*self._base.directories, *(d for m in modules for d in m.directories)])

    def dependencies(self) -> tuple[str, ...]:
        modules = self.active_modules()
        return _unique([*self._base.dependencies, *(d for m in modules for d in m.dependencies)])

    def dev_dependencies(self) -> tuple[str, ...]:
        modules = self.active_modules()
        return _unique(
            [*self._base.dev_dependencies, *(d for m in modules for d in m.dev_dependencies)]
        )

    # -- Inclusion predicates ----------------------------------------------

    def should_include_directory(self, path: str) -> bool:
        parts = split_path(path)
        if not parts:
            return True
        if self._within_included_directory(parts):
            return True

        # Ancestors of anything included must exist for it to be written.
        targets = [
            *(split_path(d) for d in self.directories_to_include()),
            *(split_path(f) for f in self.files_to_include()),
        ]
        return any(len(t) > len(parts) and _is_within(t, parts) for t in targets)

    def should_include_file(self, path: str) -> bool:
        parts = split_path(path)
        if not parts:
            return False

        if parts in {split_path(f) for f in self.files_to_include()}:
            return True

        managed = {split_path(f) for module in self._catalog for f in module.files}
        if parts in managed or len(parts) == 1:
            return False

        return self._within_included_directory(parts[:-1])

    def _within_included_directory(self, parts: PathParts) -> bool:
        included = [split_path(d) for d in self.directories_to_include()]
        if any(_is_within(parts, excluded) for excluded in self._excluded_directories(included)):
            return False
        return any(_is_within(parts, directory) for directory in included)

    def _excluded_directories(self, included: list[PathParts]) -> list[PathParts]:
        """Directories owned by inactive modules and not included by anything else."""
        active = set(self.active_modules())
        return [
            parts
            for module in self._catalog
            if module not in active
            for parts in map(split_path, module.directories)
            if parts not in included
        ]

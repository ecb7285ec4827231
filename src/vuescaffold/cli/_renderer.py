"""Materializes the bundled template tree into a project directory."""

from __future__ import annotations

import importlib.resources as ilr
import logging
from importlib.resources.abc import Traversable
from pathlib import Path

from vuescaffold.engine import (
    ModuleResolver,
    ProjectConfiguration,
    TemplateEngine,
    build_manifest,
    build_variables,
    dump_manifest,
)

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"

# Dotfiles are stored under a plain name inside the package.
_RENAMES: dict[str, str] = {
    "_gitignore": ".gitignore",
    "_eslintrc.cjs": ".eslintrc.cjs",
    "_prettierrc": ".prettierrc",
}


class MaterializationError(RuntimeError):
    """A template entry could not be written to the output directory."""

    def __init__(self, path: str, cause: Exception) -> None:
        super().__init__(f"Failed to process {path}: {cause}")
        self.path = path


def default_template_root() -> Traversable:
    return ilr.files("vuescaffold").joinpath("template")


def _prepare_output(project_dir: Path) -> None:
    if project_dir.exists() and (not project_dir.is_dir() or any(project_dir.iterdir())):
        raise FileExistsError(f"'{project_dir}' already exists and is not empty")
    project_dir.mkdir(parents=True, exist_ok=True)


def _write(target: Path, content: str, rel: str) -> None:
    try:
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise MaterializationError(rel, e) from e


def _walk(
    source: Traversable,
    target: Path,
    prefix: str,
    resolver: ModuleResolver,
    engine: TemplateEngine,
    created: list[str],
) -> None:
    for entry in sorted(source.iterdir(), key=lambda e: e.name):
        name = _RENAMES.get(entry.name, entry.name)
        rel = f"{prefix}{name}"

        if entry.is_dir():
            if not resolver.should_include_directory(rel):
                logger.debug("Skipping directory %s", rel)
                continue
            try:
                (target / name).mkdir(exist_ok=True)
            except OSError as e:
                raise MaterializationError(f"{rel}/", e) from e
            created.append(f"{rel}/")
            _walk(entry, target / name, f"{rel}/", resolver, engine, created)
            continue

        if not resolver.should_include_file(rel):
            logger.debug("Skipping file %s", rel)
            continue

        try:
            raw = entry.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise MaterializationError(rel, e) from e
        _write(target / name, engine.render(raw, source=rel), rel)
        created.append(rel)


def render_project(
    project_dir: Path,
    config: ProjectConfiguration,
    template_root: Traversable | None = None,
) -> list[str]:
    """
    Generate a project from the template tree.

    Args:
        project_dir: Output directory. It may exist only if it is empty.
        config: Choices driving file selection and template variables.
        template_root: Template tree to walk. Defaults to the bundled one.

    Returns:
        Created paths relative to *project_dir*; directories end with ``/``.

    Raises:
        FileExistsError: *project_dir* exists and is not empty.
        MaterializationError: A template entry could not be read or written.
    """
    root = template_root if template_root is not None else default_template_root()
    resolver = ModuleResolver(config)
    engine = TemplateEngine()
    engine.set_variables(build_variables(config))

    _prepare_output(project_dir)

    manifest = dump_manifest(build_manifest(resolver))
    _write(project_dir / MANIFEST_NAME, manifest, MANIFEST_NAME)
    created = [MANIFEST_NAME]

    _walk(root, project_dir, "", resolver, engine, created)
    logger.debug("Generated %d entries in %s", len(created), project_dir)
    return created

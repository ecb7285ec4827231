"""Typer CLI application for vuescaffold."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.logging import RichHandler
from typer import Argument, Exit, Option, Typer

import vuescaffold
from vuescaffold.cli._prompts import (
    DEFAULT_PROJECT_NAME,
    confirm_configuration,
    prompt_css_preprocessor,
    prompt_pinia,
    prompt_project_name,
    prompt_reconfigure,
    prompt_router,
)
from vuescaffold.cli._renderer import MaterializationError, render_project
from vuescaffold.cli._types import Preset
from vuescaffold.cli._validation import NAME_RULES, validate_project_name
from vuescaffold.engine import DEFAULT_CATALOG, ModuleResolver, ProjectConfiguration, StyleDialect

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


@app.callback()
def main() -> None:
    """vuescaffold — generate Vue 3 projects with Vite, Ant Design Vue and TypeScript."""


_FILE_DESCRIPTIONS: dict[str, str] = {
    "package.json": "dependencies and scripts",
    "vite.config.ts": "build configuration",
    "index.html": "entry page",
    "src/main.ts": "application bootstrap",
    "src/router/index.ts": "route table",
    "src/stores/counter.ts": "example store",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_console, show_time=False, show_path=False)],
        force=True,
    )


def _print_modules() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available feature modules")
    _console.print("[dim]│[/]")
    for module in DEFAULT_CATALOG:
        _console.print(f"[dim]│[/]  [bold cyan]{module.name:<12}[/] {module.description}")
        for path in module.files:
            _console.print(f"[dim]│[/]  {' ' * 12} [dim]{path}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_modules_callback(value: bool) -> None:
    if value:
        _print_modules()
        raise Exit()


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"vuescaffold {vuescaffold.__version__}")
        raise Exit()


def _show_step(question: str, answer: str) -> None:
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {answer}")
    _console.print("[dim]│[/]")


def _report_existing(project_name: str) -> None:
    _console.print(
        f"[bold red]Error:[/] Directory '{project_name}' already exists and is not empty."
    )
    _console.print(
        "[yellow]Please choose a different name or remove the existing directory.[/]"
    )


def _collect_configuration(
    project_name: str | None,
    css: StyleDialect | None,
    pinia: bool | None,
    router: bool | None,
    preset: Preset,
    skip_prompts: bool,
    default_name: str | None = None,
) -> tuple[ProjectConfiguration, bool]:
    """Fill in missing choices. Returns the configuration and whether anything was prompted."""
    prompted = False

    if project_name is None:
        if skip_prompts:
            project_name = DEFAULT_PROJECT_NAME
        else:
            project_name = prompt_project_name(default=default_name)
            prompted = True
    else:
        _show_step("Project name", project_name)

    if css is None:
        if skip_prompts:
            css = StyleDialect.SCSS
        else:
            css = prompt_css_preprocessor()
            prompted = True
    else:
        _show_step("Select CSS preprocessor", css.label)

    if pinia is None:
        if skip_prompts:
            pinia = preset.enables_modules
        else:
            pinia = prompt_pinia()
            prompted = True
    else:
        _show_step("Add Pinia for state management?", "Yes" if pinia else "No")

    if router is None:
        if skip_prompts:
            router = preset.enables_modules
        else:
            router = prompt_router()
            prompted = True
    else:
        _show_step("Add Vue Router for routing?", "Yes" if router else "No")

    config = ProjectConfiguration(
        project_name=project_name,
        css_preprocessor=css,
        use_pinia=pinia,
        use_router=router,
    )
    return config, prompted


@app.command()
def create(
    project_name: Annotated[
        str | None, Argument(help="Name of the project to create", show_default=False)
    ] = None,
    css: Annotated[
        StyleDialect | None, Option("--css", "-c", help="Style-sheet dialect")
    ] = None,
    pinia: Annotated[
        bool | None, Option("--pinia/--no-pinia", help="Add Pinia for state management")
    ] = None,
    router: Annotated[
        bool | None, Option("--router/--no-router", help="Add Vue Router for routing")
    ] = None,
    preset: Annotated[
        Preset, Option("--preset", "-t", help="Defaults for toggles when prompts are skipped")
    ] = Preset.BASIC,
    skip_prompts: Annotated[
        bool,
        Option("--skip-prompts", "-s", help="Use defaults instead of interactive prompts"),
    ] = False,
    output_dir: Annotated[
        Path, Option("--output-dir", "-o", help="Parent directory of the new project")
    ] = Path("."),
    verbose: Annotated[bool, Option("--verbose", "-v", help="Show debug output")] = False,
    list_modules: Annotated[
        bool,
        Option(
            "--list-modules",
            "-l",
            help="List the available feature modules and exit.",
            callback=_list_modules_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
    version: Annotated[
        bool,
        Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new Vue 3 project."""
    _configure_logging(verbose)

    if project_name is not None:
        project_name = project_name.strip()
        error = validate_project_name(project_name)
        if error is not None:
            _console.print(f"[bold red]Error:[/] Invalid project name: {error}")
            _console.print("[yellow]Project name should:[/]")
            for rule in NAME_RULES:
                _console.print(f"  - {rule}")
            raise Exit(code=1)

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  vuescaffold v{vuescaffold.__version__}")
    _console.print("[dim]│[/]")

    config, prompted = _collect_configuration(
        project_name, css, pinia, router, preset, skip_prompts
    )
    while prompted and not confirm_configuration(config):
        if not prompt_reconfigure():
            _console.print("[yellow]Project generation cancelled.[/]")
            raise Exit(code=0)
        config, _ = _collect_configuration(
            None, None, None, None, preset, False, default_name=config.project_name
        )

    project_dir = output_dir / config.project_name

    if project_dir.exists() and (not project_dir.is_dir() or any(project_dir.iterdir())):
        _report_existing(config.project_name)
        raise Exit(code=1)

    # Render
    _console.print(f"[bold green]◇[/]  Creating {config.project_name}/...")

    existed = project_dir.exists()
    try:
        created = render_project(project_dir, config)
    except FileExistsError:
        _report_existing(config.project_name)
        raise Exit(code=1) from None
    except (MaterializationError, OSError) as e:
        _console.print(f"[bold red]Error:[/] Project generation failed: {e}")
        try:
            if not existed:
                shutil.rmtree(project_dir)
        except OSError:
            _console.print("[yellow]Warning: Failed to clean up project directory[/]")
        raise Exit(code=1) from None

    for name in created:
        desc = _FILE_DESCRIPTIONS.get(name, "")
        desc_str = f" [dim]— {desc}[/]" if desc else ""
        _console.print(f"[dim]│[/]  {name}{desc_str}")

    active = ModuleResolver(config).active_modules()
    if active:
        _console.print("[dim]│[/]")
        _console.print("[bold green]◇[/]  Features enabled")
        for module in active:
            _console.print(f"[dim]│[/]  [green]✔[/] {module.name}")

    _console.print("[dim]│[/]")
    _console.print(
        f"[bold cyan]●[/]  Done! cd {project_dir} && npm install && npm run dev"
    )
    _console.print("[dim]   npm run lint · npm run format · npm run build · npm run preview[/]")
    _console.print()

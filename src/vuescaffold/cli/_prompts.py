"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from typing import TypeVar

from rich.console import Console
from simple_term_menu import TerminalMenu

from vuescaffold.cli._validation import validate_project_name
from vuescaffold.engine import ProjectConfiguration, StyleDialect

_console = Console()

T = TypeVar("T")

DEFAULT_PROJECT_NAME = "my-vue-app"


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _select(question: str, options: list[T], labels: list[str]) -> T:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        raise SystemExit(1)

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    for i, lbl in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {lbl}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{lbl}[/]")
    _print_bar()

    return selected


def _confirm(question: str, default: bool = True) -> bool:
    """Display a clack-style yes/no prompt."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    suffix = " [Y/n] " if default else " [y/N] "
    _console.print("[dim]│[/]  ", end="")
    answer = input(suffix).strip().lower()

    result = default if answer == "" else answer in ("y", "yes")

    display = "Yes" if result else "No"

    # Overwrite the ◆ question + │ bar + │ [Y/n] input line
    _clear_lines(3)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {display}")
    _print_bar()

    return result


def prompt_project_name(default: str | None = None) -> str:
    """Ask for a project name until a valid one is given."""
    default = default or DEFAULT_PROJECT_NAME
    while True:
        _console.print("[bold cyan]◆[/]  Project name")
        _print_bar()
        _console.print("[dim]│[/]  ", end="")
        name = input(f"({default}) ").strip().lower() or default

        error = validate_project_name(name)
        _clear_lines(3)
        if error is None:
            _console.print("[bold green]◇[/]  Project name")
            _console.print(f"[dim]│[/]  {name}")
            _print_bar()
            return name

        _console.print(f"[bold red]▲[/]  {error}")


def prompt_css_preprocessor() -> StyleDialect:
    """Prompt user to choose a style-sheet dialect."""
    dialects = list(StyleDialect)
    labels = [d.label for d in dialects]
    return _select("Select CSS preprocessor", dialects, labels)


def prompt_pinia() -> bool:
    return _confirm("Add Pinia for state management?", default=False)


def prompt_router() -> bool:
    return _confirm("Add Vue Router for routing?", default=False)


def confirm_configuration(config: ProjectConfiguration) -> bool:
    """Show a summary of *config* and ask the user to confirm it."""
    _console.print("[bold cyan]◆[/]  Project configuration")
    _console.print(f"[dim]│[/]  Project name: [green]{config.project_name}[/]")
    _console.print(f"[dim]│[/]  CSS preprocessor: [green]{config.css_preprocessor.label}[/]")
    _console.print(f"[dim]│[/]  Pinia: {_yes_no(config.use_pinia)}")
    _console.print(f"[dim]│[/]  Vue Router: {_yes_no(config.use_router)}")
    _print_bar()
    return _confirm("Is this configuration correct?", default=True)


def prompt_reconfigure() -> bool:
    return _confirm("Would you like to reconfigure the project?", default=True)


def _yes_no(value: bool) -> str:
    return "[green]Yes[/]" if value else "[dim]No[/]"

"""Interactive boilerplate selection with simple-term-menu."""

from __future__ import annotations

from rich.console import Console
from simple_term_menu import TerminalMenu

from netrose_scaffold._types import BoilerplateKind

_console = Console()

QUESTION = "Choose a boilerplate"


def _describe(value: str) -> str:
    return BoilerplateKind(value).description


def _menu_entries() -> list[str]:
    # "label|data": simple-term-menu shows the label and hands data to the preview
    return [f"{k.label}|{k.value}" for k in BoilerplateKind]


def prompt_kind() -> BoilerplateKind:
    """Prompt user to choose a boilerplate kind, previewing its description."""
    kinds = list(BoilerplateKind)
    menu = TerminalMenu(
        _menu_entries(),
        title=f"◆  {QUESTION}",
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
        preview_command=_describe,
        preview_title="",
        preview_size=0.25,
    )
    raw_index = menu.show()

    if raw_index is None:
        raise SystemExit(1)

    kind = kinds[int(raw_index)]

    _console.print(f"[bold green]◇[/]  {QUESTION}")
    _console.print(f"[dim]│[/]  [bold green]●[/] {kind.label}")
    _console.print(f"[dim]│[/]    [dim]{kind.description}[/]")
    _console.print("[dim]│[/]")

    return kind

"""Typer CLI application for netrose-scaffold."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import netrose_scaffold
from netrose_scaffold._types import BoilerplateKind
from netrose_scaffold.cli._prompts import prompt_kind
from netrose_scaffold.config import (
    ROOT_ENVVAR,
    TEMPLATES_ENVVAR,
    ScaffoldConfig,
    parse_substitutions,
)
from netrose_scaffold.errors import ScaffoldError
from netrose_scaffold.scaffolder import DEFAULT_EXTENSION, generate, plan

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()
_err_console = Console(stderr=True)


@app.callback()
def main() -> None:
    """netrose-scaffold: NetRose storage API client boilerplate generator."""


RootArg = Annotated[
    Path | None,
    Argument(
        help="Project root. Defaults to the current directory.",
        envvar=ROOT_ENVVAR,
        show_default=False,
        file_okay=False,
    ),
]
OverwriteOpt = Annotated[
    bool, Option("--overwrite", help="Replace generated files that already exist.")
]
DryRunOpt = Annotated[
    bool, Option("--dry-run", "-n", help="Show the files that would be created and exit.")
]
SetOpt = Annotated[
    list[str] | None,
    Option(
        "--set",
        "-s",
        help="Template substitution as KEY=VALUE. Repeatable.",
        show_default=False,
    ),
]
TemplatesDirOpt = Annotated[
    Path | None,
    Option(
        "--templates-dir",
        help="Directory with *.cs.txt templates overriding the bundled ones.",
        envvar=TEMPLATES_ENVVAR,
        exists=True,
        file_okay=False,
        show_default=False,
    ),
]
ExtensionOpt = Annotated[str, Option("--extension", "-e", help="Extension of generated files.")]
VerboseOpt = Annotated[bool, Option("--verbose", "-v", help="Enable debug logging.")]


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("netrose_scaffold")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=_err_console, show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _print_kinds() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available boilerplates")
    _console.print("[dim]│[/]")
    for k in BoilerplateKind:
        _console.print(f"[dim]│[/]  [bold cyan]{k.value:<16}[/] [bold]{k.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 16} [dim]{k.description}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_kinds_callback(value: bool) -> None:
    if value:
        _print_kinds()
        raise Exit()


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


def _build_config(
    root: Path | None,
    overwrite: bool,
    dry_run: bool,
    pairs: list[str] | None,
    templates_dir: Path | None,
    extension: str,
) -> ScaffoldConfig:
    try:
        substitutions = parse_substitutions(pairs or [])
    except ValueError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=2) from None

    return ScaffoldConfig(
        project_root=root if root is not None else Path.cwd(),
        overwrite=overwrite,
        extension=extension,
        templates_dir=templates_dir,
        substitutions=substitutions,
        dry_run=dry_run,
    )


def _run(kind: BoilerplateKind, config: ScaffoldConfig) -> None:
    root = config.project_root

    if config.dry_run:
        _console.print(f"[bold green]◇[/]  Would create in {escape(str(root))}/")
        for planned in plan(kind, root, extension=config.extension):
            exists = planned.destination.exists()
            note = " [yellow](exists)[/]" if exists else ""
            _console.print(f"[dim]│[/]  {escape(_relative(planned.destination, root))}{note}")
        _console.print("[dim]│[/]")
        _console.print("[bold cyan]●[/]  Dry run, nothing written.")
        _console.print()
        return

    _console.print(f"[bold green]◇[/]  Creating {kind.label} in {escape(str(root))}/...")

    try:
        created = generate(
            kind,
            root,
            substitutions=config.substitutions,
            overwrite=config.overwrite,
            loader=config.loader(),
            extension=config.extension,
        )
    except ScaffoldError as exc:
        _console.print("[dim]│[/]")
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=1) from None

    for path in created:
        _console.print(f"[dim]│[/]  {escape(_relative(path, root))}")

    _console.print("[dim]│[/]")
    _console.print(f"[bold cyan]●[/]  Done! {len(created)} files created.")
    _console.print()


def _header() -> None:
    _console.print()
    _console.print(f"[bold cyan]●[/]  netrose-scaffold v{netrose_scaffold.__version__}")
    _console.print("[dim]│[/]")


@app.command("single-account")
def single_account(
    root: RootArg = None,
    overwrite: OverwriteOpt = False,
    dry_run: DryRunOpt = False,
    pairs: SetOpt = None,
    templates_dir: TemplatesDirOpt = None,
    extension: ExtensionOpt = DEFAULT_EXTENSION,
    verbose: VerboseOpt = False,
) -> None:
    """Create the Single-Account storage API client boilerplate."""
    _configure_logging(verbose)
    config = _build_config(root, overwrite, dry_run, pairs, templates_dir, extension)
    _header()
    _run(BoilerplateKind.SINGLE_ACCOUNT, config)


@app.command("multi-account")
def multi_account(
    root: RootArg = None,
    overwrite: OverwriteOpt = False,
    dry_run: DryRunOpt = False,
    pairs: SetOpt = None,
    templates_dir: TemplatesDirOpt = None,
    extension: ExtensionOpt = DEFAULT_EXTENSION,
    verbose: VerboseOpt = False,
) -> None:
    """Create the Multiple-Account storage API client boilerplate."""
    _configure_logging(verbose)
    config = _build_config(root, overwrite, dry_run, pairs, templates_dir, extension)
    _header()
    _run(BoilerplateKind.MULTI_ACCOUNT, config)


@app.command()
def create(
    root: RootArg = None,
    kind_str: Annotated[
        str | None,
        Option(
            "--kind",
            "-k",
            help="Boilerplate kind. Run with --list-kinds / -l to see all options.",
            show_default=False,
        ),
    ] = None,
    overwrite: OverwriteOpt = False,
    dry_run: DryRunOpt = False,
    pairs: SetOpt = None,
    templates_dir: TemplatesDirOpt = None,
    extension: ExtensionOpt = DEFAULT_EXTENSION,
    verbose: VerboseOpt = False,
    list_kinds: Annotated[
        bool,
        Option(
            "--list-kinds",
            "-l",
            help="List all available boilerplates and exit.",
            callback=_list_kinds_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a storage API client boilerplate, choosing the kind interactively if needed."""
    _configure_logging(verbose)

    kind: BoilerplateKind | None = None
    if kind_str is not None:
        try:
            kind = BoilerplateKind(kind_str)
        except ValueError:
            valid = ", ".join(f"'{k.value}'" for k in BoilerplateKind)
            _console.print()
            _console.print(f"[bold red]Error:[/] [bold]{kind_str!r}[/] is not a valid boilerplate.")
            _console.print(f"[dim]Valid values:[/] {valid}")
            _print_kinds()
            raise Exit(code=2) from None

    config = _build_config(root, overwrite, dry_run, pairs, templates_dir, extension)
    _header()

    if kind is None:
        kind = prompt_kind()
    else:
        _console.print("[bold green]◇[/]  Choose a boilerplate")
        _console.print(f"[dim]│[/]  {kind.label}")
        _console.print("[dim]│[/]")

    _run(kind, config)

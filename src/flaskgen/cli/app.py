"""Typer CLI application for flaskgen."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import flaskgen
from flaskgen.cli._errors import ScaffoldError, UsageError
from flaskgen.cli._renderer import ensure_absent, render_project
from flaskgen.cli._types import CATALOG
from flaskgen.cli._validation import validate_args, validate_name

app = Typer(add_completion=False)
_console = Console()
_err_console = Console(stderr=True)

_FILE_DESCRIPTIONS: dict[str, str] = {entry.destination: entry.description for entry in CATALOG}

_APP_URL = "http://localhost:8080"


def _print_files() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Generated files")
    _console.print("[dim]│[/]")
    for entry in CATALOG:
        name = f"{entry.destination:<24}"
        _console.print(f"[dim]│[/]  [bold cyan]{name}[/] [dim]{entry.description}[/]")
    _console.print()


def _list_files_callback(value: bool) -> None:
    if value:
        _print_files()
        raise Exit()


def _report_created(label: str) -> None:
    desc = _FILE_DESCRIPTIONS.get(label, "")
    desc_str = f" [dim]— {desc}[/]" if desc else ""
    _console.print(f"[dim]│[/]  {escape(label)}{desc_str}")


def _print_next_steps(project_name: str) -> None:
    _console.print("[dim]│[/]")
    _console.print(
        f"[bold cyan]●[/]  Flask app '{project_name}' created successfully!", soft_wrap=True
    )
    _console.print()
    _console.print("Next steps:")
    _console.print(f"  1. cd {project_name}", soft_wrap=True)
    _console.print("  2. python -m venv venv")
    _console.print("  3. source venv/bin/activate")
    _console.print("  4. pip install -r requirements.txt")
    _console.print("  5. python run.py")
    _console.print()
    _console.print("Or use Docker:")
    _console.print(f"  1. cd {project_name}", soft_wrap=True)
    _console.print("  2. make build")
    _console.print("  3. make up")
    _console.print()
    _console.print(f"Your app will be available at: {_APP_URL}")


def _fail(err: ScaffoldError) -> Exit:
    prefix = "" if isinstance(err, UsageError) else "[bold red]Error:[/] "
    _err_console.print(f"{prefix}{escape(str(err))}")
    return Exit(code=err.exit_code)


@app.command(
    # Names may start with "-", so unknown options are passed through as arguments.
    # No short options exist, so "-xyz" is never read as a cluster of flags.
    context_settings={"ignore_unknown_options": True}
)
def create(
    args: Annotated[
        list[str] | None,
        Argument(
            metavar="PROJECT_NAME",
            help="Name of the new project directory (letters, digits, '-' and '_').",
            show_default=False,
        ),
    ] = None,
    list_files: Annotated[
        bool,
        Option(
            "--list-files",
            help="List the files a new project contains and exit.",
            callback=_list_files_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new Flask service project in the current directory."""
    try:
        project_name = validate_name(validate_args(args))
        project_dir = Path.cwd() / project_name
        ensure_absent(project_dir)

        _console.print()
        _console.print(f"[bold cyan]●[/]  flaskgen v{flaskgen.__version__}")
        _console.print("[dim]│[/]")
        _console.print(
            f"[bold green]◇[/]  Creating Flask app boilerplate: {project_name}", soft_wrap=True
        )

        render_project(project_dir, project_name, on_created=_report_created)
    except ScaffoldError as err:
        raise _fail(err) from None

    _print_next_steps(project_name)

"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rutcl.cli.ui_components import print_banner
from rutcl.core.config import RutSettings, get_user_env_file
from rutcl.core.services.rut import compute_check_digit, group_thousands

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

# Known (number, check digit) pairs; cover the 'K' and '0' branches too.
REFERENCE_VECTORS: tuple[tuple[int, str], ...] = (
    (12345678, "5"),
    (9876543, "3"),
    (11111111, "1"),
    (1000005, "K"),
    (1000013, "0"),
)


def _check_vectors() -> tuple[bool, str]:
    failures = [
        f"{number} -> {compute_check_digit(number)} (expected {expected})"
        for number, expected in REFERENCE_VECTORS
        if compute_check_digit(number) != expected
    ]
    if failures:
        return False, "; ".join(failures)
    return True, f"{len(REFERENCE_VECTORS)} vectors"


@app.command()
def run() -> None:
    """Show the effective configuration and self-check the check digit engine."""

    print_banner(_console)

    try:
        settings = RutSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red]\n{escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    table = Table(title="rutcl Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Minimum", "OK", group_thousands(settings.rut_min))
    table.add_row("Maximum", "OK", group_thousands(settings.rut_max))
    table.add_row("Default style", "OK", f"{settings.default_style.value} ({settings.default_style.example()})")
    env_file = get_user_env_file()
    table.add_row("User .env", "FOUND" if env_file.exists() else "OPTIONAL", str(env_file))

    ok_vectors, detail_vectors = _check_vectors()
    table.add_row("Check digit engine", "OK" if ok_vectors else "FAIL", detail_vectors)

    _console.print(table)

    if not ok_vectors:
        raise typer.Exit(code=1)

"""CLI de rutcl (Typer + Rich).

Por qué la CLI es delgada:
- Toda la lógica vive en `core.services`; aquí solo se parsean argumentos,
  se elige el estilo de salida y se presentan resultados/errores.
- Los errores de input se muestran como `typer.BadParameter` (exit code 2);
  un RUT inválido en `validate` termina con exit code 1.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from rutcl.adapters.json_exporter import dump_json
from rutcl.cli import doctor
from rutcl.cli.ui_components import build_reports_table, build_rut_panel
from rutcl.core.config import get_settings
from rutcl.core.domain.errors import InvalidInputError
from rutcl.core.domain.format_style import FormatStyle
from rutcl.core.services.report import build_reports
from rutcl.core.services.rut import (
    append_check_digit,
    compute_check_digit,
    format_rut,
    parse_rut,
    remove_check_digit,
)

app = typer.Typer(
    no_args_is_help=True,
    help="Parse, validate and format Chilean RUT/RUN identifiers.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _resolve_style(grouped: Optional[bool]) -> FormatStyle:
    if grouped is None:
        return get_settings().default_style
    return FormatStyle.from_bool(grouped)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr."),
) -> None:
    _configure_logging(verbose)

    # `doctor` reporta la configuración inválida por su cuenta.
    if ctx.invoked_subcommand == "doctor":
        return
    try:
        get_settings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red]\n{escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@app.command()
def validate(
    values: List[str] = typer.Argument(..., help="One or more RUTs (dots and dash optional)."),
    json_output: bool = typer.Option(False, "--json", help="Print reports as JSON."),
    grouped: Optional[bool] = typer.Option(None, "--grouped/--compact", help="Output style for the table."),
) -> None:
    """Validate RUTs (range, check digit format and checksum)."""

    settings = get_settings()
    logger.debug("Bounds: %s..%s", settings.rut_min, settings.rut_max)

    reports = build_reports(values, settings)
    for report in reports:
        logger.debug("%r -> valid=%s (%s)", report.input, report.valid, report.error_type)

    if json_output:
        typer.echo(dump_json(reports), nl=False)
    else:
        _console.print(build_reports_table(reports, _resolve_style(grouped)))

    if not all(r.valid for r in reports):
        raise typer.Exit(code=1)


@app.command(name="format")
def format_command(
    value: str = typer.Argument(..., help="RUT with check digit, or the bare number with --number."),
    number: bool = typer.Option(False, "--number", "-n", help="VALUE is only the numeric part; compute the check digit."),
    grouped: Optional[bool] = typer.Option(None, "--grouped/--compact", help="12.345.678-5 or 12345678-5."),
) -> None:
    """Format a RUT without validating it (an existing check digit is kept)."""

    style = _resolve_style(grouped)
    try:
        if number and not (value.isascii() and value.isdigit()):
            raise InvalidInputError(value, "the numeric part must contain only digits")
        source: str | int = int(value) if number else value
        output = format_rut(source, style)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="VALUE") from exc

    logger.debug("format %r (%s) -> %r", value, style.value, output)
    typer.echo(output)


@app.command(name="check-digit")
def check_digit(
    number: int = typer.Argument(..., min=0, help="Numeric part of the RUT."),
) -> None:
    """Print the check digit for NUMBER."""

    typer.echo(compute_check_digit(number))


@app.command(name="append-check-digit")
def append_check_digit_command(
    number: int = typer.Argument(..., min=0, help="Numeric part of the RUT."),
) -> None:
    """Print NUMBER followed by its check digit, without separators."""

    typer.echo(append_check_digit(number))


@app.command(name="remove-check-digit")
def remove_check_digit_command(
    value: str = typer.Argument(..., help="RUT with check digit."),
) -> None:
    """Print only the numeric part of a RUT."""

    try:
        typer.echo(remove_check_digit(value))
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc), param_hint="VALUE") from exc


@app.command()
def decompose(
    value: str = typer.Argument(..., help="RUT with check digit (dots and dash optional)."),
    json_output: bool = typer.Option(False, "--json", help="Print as JSON."),
) -> None:
    """Split a RUT into number and check digit (no validation)."""

    try:
        rut = parse_rut(value)
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc), param_hint="VALUE") from exc

    if json_output:
        typer.echo(dump_json(rut), nl=False)
    else:
        _console.print(build_rut_panel(rut))


def run() -> None:
    app()

"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rutcl.core.domain.format_style import FormatStyle
from rutcl.core.domain.models import Rut, RutReport
from rutcl.core.services.rut import group_thousands


def print_banner(console: Console) -> None:
    """Imprime el banner (solo en `doctor`, nunca en salidas para pipelines)."""

    title = Text("rutcl", style="bold cyan")
    subtitle = Text("RUT/RUN chileno • Módulo 11 • Formato", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_reports_table(reports: Sequence[RutReport], style: FormatStyle) -> Table:
    """Tabla de resultados de `validate`."""

    table = Table(title="RUT validation")
    table.add_column("Input", style="white", no_wrap=True)
    table.add_column("RUT", style="cyan", no_wrap=True)
    table.add_column("Valid", no_wrap=True)
    table.add_column("Expected DV", style="magenta")
    table.add_column("Error", style="red")

    for report in reports:
        shown = report.grouped if style is FormatStyle.GROUPED else report.compact
        table.add_row(
            report.input,
            shown or "-",
            "[green]yes[/green]" if report.valid else "[red]no[/red]",
            report.expected_check_digit or "-",
            report.error or "",
        )
    return table


def build_rut_panel(rut: Rut) -> Panel:
    """Panel con la descomposición de un RUT (sin validar)."""

    body = Text()
    body.append("Number: ", style="bold")
    body.append(f"{rut.number}\n")
    body.append("Check digit: ", style="bold")
    body.append(f"{rut.check_digit}\n")
    body.append("Grouped: ", style="bold")
    body.append(f"{group_thousands(rut.number)}-{rut.check_digit}", style="cyan")
    return Panel(body, title=Text("RUT", style="bold yellow"), border_style="yellow")

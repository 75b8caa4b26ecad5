"""Construcción de reportes por valor ingresado.

La CLI delega aquí todo lo que no es presentación: descomponer, validar y
formatear cada valor, capturando los errores de validación en el reporte en
vez de cortar la ejecución. Así la misma lógica sirve para tablas, JSON o
tests sin efectos secundarios.
"""

from __future__ import annotations

from typing import Iterable

from rutcl.core.config import RutSettings, get_settings
from rutcl.core.domain.errors import RutError
from rutcl.core.domain.models import RutReport
from rutcl.core.services.rut import (
    compute_check_digit,
    format_compact,
    format_grouped,
    parse_rut,
    validate,
)


def build_report(value: str, settings: RutSettings | None = None) -> RutReport:
    """Revisa un valor y devuelve un `RutReport` (nunca levanta `RutError`)."""

    settings = settings or get_settings()
    report = RutReport(input=value)

    try:
        rut = parse_rut(value)
    except RutError as exc:
        report.error_type = type(exc).__name__
        report.error = str(exc)
        return report

    report.rut = rut
    report.expected_check_digit = compute_check_digit(rut.number)
    report.compact = format_compact(value)
    report.grouped = format_grouped(value)

    try:
        validate(value, settings)
    except RutError as exc:
        report.error_type = type(exc).__name__
        report.error = str(exc)
    else:
        report.valid = True
    return report


def build_reports(values: Iterable[str], settings: RutSettings | None = None) -> list[RutReport]:
    settings = settings or get_settings()
    return [build_report(v, settings) for v in values]

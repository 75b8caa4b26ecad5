"""Operaciones sobre RUT/RUN chilenos.

Este módulo concentra el algoritmo completo:
- normalización/descomposición del texto ingresado,
- cálculo del dígito verificador (módulo 11),
- validación de rango y dígito,
- formato compacto (12345678-5) y agrupado (12.345.678-5).

Todo es puro y sin estado: las funciones se pueden llamar desde cualquier
hilo. La descomposición y el formato NO validan; `validate` es el único paso
que comprueba rango y checksum.
"""

from __future__ import annotations

import re

from rutcl.core.config import RutSettings, get_settings
from rutcl.core.domain.errors import (
    AboveMaximumError,
    BelowMinimumError,
    ChecksumMismatchError,
    InvalidCheckDigitFormatError,
    InvalidInputError,
    RutError,
)
from rutcl.core.domain.format_style import FormatStyle
from rutcl.core.domain.models import Rut

_SEPARATORS = str.maketrans("", "", ".,-")
_CHECK_DIGIT_RE = re.compile(r"^[0-9K]$")


def _clean(text: str) -> str:
    """Quita separadores de miles (punto o coma) y el guion."""

    if not isinstance(text, str):
        raise InvalidInputError(text, "expected a string")
    return text.strip().translate(_SEPARATORS)


def _ensure_number(number: int) -> int:
    # bool es subclase de int; True no es un RUT.
    if isinstance(number, bool) or not isinstance(number, int):
        raise InvalidInputError(number, "expected an integer")
    if number < 0:
        raise InvalidInputError(number, "the numeric part cannot be negative")
    return number


def decompose(text: str) -> tuple[int, str]:
    """Separa un RUT en (parte numérica, dígito verificador).

    Puntos, comas y guion son opcionales. El último carácter es el dígito
    verificador (en mayúscula) y no se valida aquí.

    >>> decompose("12.345.678-k")
    (12345678, 'K')
    """

    cleaned = _clean(text)
    if not cleaned:
        raise InvalidInputError(text, "the value is empty")

    body, check_digit = cleaned[:-1], cleaned[-1].upper()
    if not body:
        raise InvalidInputError(text, "the numeric part is missing")
    if not (body.isascii() and body.isdigit()):
        raise InvalidInputError(text, "the numeric part must contain only digits")
    # 'ß'.upper() == 'SS': el dígito debe seguir siendo un solo carácter.
    if len(check_digit) != 1:
        raise InvalidInputError(text, "the check digit must be a single character")

    return int(body), check_digit


def parse_rut(text: str) -> Rut:
    """Igual que `decompose`, pero devuelve un `Rut`."""

    number, check_digit = decompose(text)
    return Rut(number=number, check_digit=check_digit)


def rut_from_number(number: int) -> Rut:
    return Rut(number=_ensure_number(number), check_digit=compute_check_digit(number))


def compute_check_digit(number: int) -> str:
    """Calcula el dígito verificador (módulo 11) de la parte numérica.

    Se recorren los dígitos desde el menos significativo con pesos
    9, 8, 7, 6, 5, 4 (ciclo de 6). La suma parte en 1; un resultado 0 es 'K',
    cualquier otro `s` corresponde al dígito `s - 1`.
    """

    n = _ensure_number(number)
    s = 1
    m = 0
    while n:
        n, digit = divmod(n, 10)
        s = (s + digit * (9 - m % 6)) % 11
        m += 1
    return str(s - 1) if s else "K"


def group_thousands(number: int) -> str:
    """Parte numérica con punto como separador de miles: 1000000 -> '1.000.000'."""

    return f"{_ensure_number(number):,}".replace(",", ".")


def remove_check_digit(text: str) -> int:
    """Devuelve solo la parte numérica de un RUT con dígito verificador."""

    number, _ = decompose(text)
    return number


def append_check_digit(number: int) -> str:
    """Concatena el dígito verificador al número, sin formato: 12345678 -> '123456785'."""

    return f"{_ensure_number(number)}{compute_check_digit(number)}"


def format_compact(value: str | int) -> str:
    """Formatea a `12345678-5` (sin puntos).

    - `str`: se espera que ya traiga dígito verificador (guion opcional). El
      dígito se conserva tal cual, aunque sea incorrecto: esto es presentación,
      no corrección.
    - `int`: es solo la parte numérica; el dígito se calcula.
    """

    if isinstance(value, str):
        number, check_digit = decompose(value)
    else:
        number, check_digit = decompose(append_check_digit(value))
    return f"{number}-{check_digit}"


def format_grouped(value: str | int) -> str:
    """Formatea a `12.345.678-5`."""

    number, check_digit = decompose(format_compact(value))
    return f"{group_thousands(number)}-{check_digit}"


def format_rut(value: str | int, style: FormatStyle = FormatStyle.COMPACT) -> str:
    if style is FormatStyle.GROUPED:
        return format_grouped(value)
    return format_compact(value)


def validate(text: str, settings: RutSettings | None = None) -> None:
    """Valida un RUT; no devuelve nada y levanta un `RutError` ante el primer problema.

    Orden: descomposición, rango, forma del dígito, checksum.
    """

    settings = settings or get_settings()
    number, check_digit = decompose(text)

    if number < settings.rut_min:
        raise BelowMinimumError(value=number, bound=settings.rut_min)
    if number > settings.rut_max:
        raise AboveMaximumError(value=number, bound=settings.rut_max)

    if not _CHECK_DIGIT_RE.match(check_digit):
        raise InvalidCheckDigitFormatError(check_digit)

    expected = compute_check_digit(number)
    if check_digit != expected:
        raise ChecksumMismatchError(
            rut=format_grouped(text),
            number=number,
            check_digit=check_digit,
            expected=expected,
        )


def is_valid(text: str, settings: RutSettings | None = None) -> bool:
    try:
        validate(text, settings)
    except RutError:
        return False
    return True

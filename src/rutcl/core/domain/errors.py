"""Errores tipados del dominio RUT.

Por qué una jerarquía propia:
- Cada falla de validación es capturable por separado (rango, formato del
  dígito, dígito incorrecto, input malformado).
- Todas heredan de `ValueError`, así que código que ya captura `ValueError`
  sigue funcionando.
- Los valores de diagnóstico viajan como atributos, no solo en el mensaje.
"""

from __future__ import annotations


def _group(number: int) -> str:
    # Evita importar services desde el dominio.
    return f"{number:,}".replace(",", ".")


class RutError(ValueError):
    """Base de todos los errores de la librería."""


class InvalidInputError(RutError):
    """El input no se puede descomponer en número + dígito verificador."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid RUT input {value!r}: {reason}.")


class OutOfRangeError(RutError):
    """La parte numérica cae fuera de los límites configurados."""

    def __init__(self, message: str, *, value: int, bound: int) -> None:
        self.value = value
        self.bound = bound
        super().__init__(message)


class BelowMinimumError(OutOfRangeError):
    def __init__(self, *, value: int, bound: int) -> None:
        super().__init__(
            f"The RUT cannot be less than {_group(bound)} and the value {_group(value)} was found.",
            value=value,
            bound=bound,
        )


class AboveMaximumError(OutOfRangeError):
    def __init__(self, *, value: int, bound: int) -> None:
        super().__init__(
            f"The RUT cannot be greater than {_group(bound)} and the value {_group(value)} was found.",
            value=value,
            bound=bound,
        )


class InvalidCheckDigitFormatError(RutError):
    """El dígito verificador no es 0-9 ni K."""

    def __init__(self, check_digit: str) -> None:
        self.check_digit = check_digit
        super().__init__(
            'The verification digit must be a character between "0" and "9", '
            f'or the uppercase letter "K". The value "{check_digit}" was found.'
        )


class ChecksumMismatchError(RutError):
    """El dígito verificador no corresponde a la parte numérica.

    `rut` es el RUT tal como llegó, en formato agrupado, para que el mensaje
    muestre exactamente qué se ingresó y qué dígito corresponde.
    """

    def __init__(self, *, rut: str, number: int, check_digit: str, expected: str) -> None:
        self.rut = rut
        self.number = number
        self.check_digit = check_digit
        self.expected = expected
        super().__init__(
            f'The verification digit of the RUT {rut} is incorrect. The value "{check_digit}" '
            f"was found and for the numeric part {_group(number)} of the RUT, "
            f'the verification digit should be "{expected}".'
        )

"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación de forma y documentación autocontenida (Field).
- Facilita la serialización estable (JSON) de resultados para la CLI.

Nota:
- Estos modelos describen *qué* es un RUT, no *si* es válido. El rango y el
  dígito verificador se comprueban en `core.services.rut.validate`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Rut(BaseModel):
    """Par lógico (número, dígito verificador).

    Por qué existe:
    - Da nombre y tipo al resultado de la descomposición cuando sale de la
      librería (JSON, tablas) en vez de una tupla anónima.
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(
        ...,
        ge=0,
        description="Parte numérica del RUT (sin dígito verificador).",
    )
    check_digit: str = Field(
        ...,
        min_length=1,
        max_length=1,
        description="Dígito verificador tal como venía (en mayúscula), sin validar.",
    )

    def as_tuple(self) -> tuple[int, str]:
        return self.number, self.check_digit


class RutReport(BaseModel):
    """Resultado de revisar un valor ingresado.

    Por qué es un modelo separado:
    - La CLI necesita reportar inputs inválidos sin cortar la ejecución.
    - Un RUT inválido sigue teniendo formato útil (se muestra lo ingresado).
    """

    input: str = Field(
        ...,
        description="Texto original tal como se recibió.",
    )
    valid: bool = Field(
        default=False,
        description="True si pasó rango, formato del dígito y checksum.",
    )
    rut: Rut | None = Field(
        default=None,
        description="Descomposición del input (None si no se pudo descomponer).",
    )
    expected_check_digit: str | None = Field(
        default=None,
        description="Dígito verificador calculado para la parte numérica.",
    )
    compact: str | None = Field(
        default=None,
        description="Formato compacto (NNNNNNNN-D) con el dígito ingresado.",
    )
    grouped: str | None = Field(
        default=None,
        description="Formato agrupado (N.NNN.NNN-D) con el dígito ingresado.",
    )
    error_type: str | None = Field(
        default=None,
        description="Nombre de la clase de error (p.ej. 'ChecksumMismatchError').",
    )
    error: str | None = Field(
        default=None,
        description="Mensaje legible del error de validación.",
    )

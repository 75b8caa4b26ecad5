"""rutcl: parse, validate and format Chilean RUT/RUN identifiers."""

from rutcl.core.config import RutSettings, get_settings
from rutcl.core.domain.errors import (
    AboveMaximumError,
    BelowMinimumError,
    ChecksumMismatchError,
    InvalidCheckDigitFormatError,
    InvalidInputError,
    OutOfRangeError,
    RutError,
)
from rutcl.core.domain.format_style import FormatStyle
from rutcl.core.domain.models import Rut, RutReport
from rutcl.core.services.rut import (
    append_check_digit,
    compute_check_digit,
    decompose,
    format_compact,
    format_grouped,
    format_rut,
    group_thousands,
    is_valid,
    parse_rut,
    remove_check_digit,
    rut_from_number,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "AboveMaximumError",
    "BelowMinimumError",
    "ChecksumMismatchError",
    "FormatStyle",
    "InvalidCheckDigitFormatError",
    "InvalidInputError",
    "OutOfRangeError",
    "Rut",
    "RutError",
    "RutReport",
    "RutSettings",
    "append_check_digit",
    "compute_check_digit",
    "decompose",
    "format_compact",
    "format_grouped",
    "format_rut",
    "get_settings",
    "group_thousands",
    "is_valid",
    "parse_rut",
    "remove_check_digit",
    "rut_from_number",
    "validate",
]

"""Output styles for a RUT.

This module centralizes the two textual renderings supported across the
package. Keeping it in the domain layer allows config, services and CLI to
share a single source of truth without circular imports.
"""

from __future__ import annotations

from enum import Enum


class FormatStyle(str, Enum):
    """Supported output renderings."""

    COMPACT = "compact"
    GROUPED = "grouped"

    @classmethod
    def default(cls) -> "FormatStyle":
        """Return the default style used across the package."""

        return cls.COMPACT

    @classmethod
    def from_bool(cls, grouped: bool) -> "FormatStyle":
        """Derive a style from a boolean CLI flag."""

        return cls.GROUPED if grouped else cls.COMPACT

    def example(self) -> str:
        """Human readable sample for help texts and diagnostics."""

        return "12.345.678-5" if self is FormatStyle.GROUPED else "12345678-5"

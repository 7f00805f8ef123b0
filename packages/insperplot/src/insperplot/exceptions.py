"""Exception and warning hierarchy for insperplot."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class InsperPlotError(Exception):
    """Base exception for all insperplot errors."""

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}

    def __repr__(self) -> str:
        if self.detail:
            return f"{type(self).__name__}({self!s}, detail={self.detail})"
        return f"{type(self).__name__}({self!s})"


class InvalidInputError(InsperPlotError, TypeError):
    """Primary data argument is not usable (wrong type, not numeric, empty)."""


class ColumnNotFoundError(InsperPlotError, ValueError):
    """A column reference does not exist in the dataset."""

    def __init__(self, column: str, available: Iterable[str]) -> None:
        self.column = column
        self.available = list(available)
        super().__init__(
            f"Column '{column}' not found in data. Available columns: {self.available}",
            detail={"column": column},
        )


class InvalidEnumValueError(InsperPlotError, ValueError):
    """Enumerated parameter outside its allowed set."""

    def __init__(self, param_name: str, value: Any, allowed: Iterable[Any]) -> None:
        self.param_name = param_name
        self.value = value
        self.allowed = list(allowed)
        choices = ", ".join(repr(a) for a in self.allowed)
        super().__init__(
            f"'{param_name}' must be one of {choices}; got {value!r}",
            detail={"param": param_name},
        )


class InvalidColorArgumentError(InsperPlotError, ValueError):
    """A quoted aesthetic argument is not a recognizable color."""

    def __init__(self, param_name: str, value: Any) -> None:
        self.param_name = param_name
        self.value = value
        super().__init__(
            f"Invalid {param_name} argument: {value!r} is not a valid color. "
            f"To map a column use {param_name}=col(\"column_name\"); "
            "for a fixed color use a color name like \"steelblue\" "
            "or a hex code like \"#E4002B\".",
            detail={"param": param_name},
        )


class MissingBinCountError(InsperPlotError, ValueError):
    """Manual binning was requested without a bin count."""


class InvalidBinCountError(InsperPlotError, ValueError):
    """Bin count is not a positive integer."""


class PaletteNotFoundError(InsperPlotError, ValueError):
    """Unknown palette name."""

    def __init__(self, palette: str, available: Iterable[str]) -> None:
        self.palette = palette
        self.available = sorted(available)
        super().__init__(
            f"Palette '{palette}' not found. Available palettes: {', '.join(self.available)}",
            detail={"palette": palette},
        )


class ColorNotFoundError(InsperPlotError, ValueError):
    """Unknown individual brand color name."""

    def __init__(self, missing: Iterable[str], available: Iterable[str]) -> None:
        self.missing = list(missing)
        self.available = list(available)
        super().__init__(
            f"Color(s) not found: {', '.join(self.missing)}. "
            f"Available colors: {', '.join(self.available)}"
        )


class ConfigError(InsperPlotError):
    """Settings could not be loaded or validated."""


class ExportError(InsperPlotError):
    """A figure could not be written to disk."""


# -- Warnings ---------------------------------------------------------------


class InsperPlotWarning(UserWarning):
    """Base warning category for insperplot."""


class PaletteIgnoredWarning(InsperPlotWarning):
    """A palette was requested but the aesthetic is a static color."""


class PaletteRecycledWarning(InsperPlotWarning):
    """More colors were requested than the palette holds."""

"""Aesthetic argument classification.

Every chart constructor accepts ``fill``/``color`` arguments as one of:

* ``None`` -- not set, the chart falls back to its brand default;
* a ``str`` -- always a color literal, never a column lookup;
* ``col("name")`` / ``factor("name")`` -- a reference to a data column;
* a ``pandas.Series`` -- an expression the caller already evaluated.

``detect_aesthetic_type`` turns that argument into an ``AestheticType``
record that the constructors branch on.
"""

from __future__ import annotations

import enum
import re
import warnings
from dataclasses import dataclass
from typing import Any

import pandas as pd
from loguru import logger
from matplotlib.colors import CSS4_COLORS, to_rgba

from insperplot.exceptions import (
    ColumnNotFoundError,
    InvalidColorArgumentError,
    PaletteIgnoredWarning,
)

_HEX_RE = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")
_NAMED_COLORS = frozenset(name.lower() for name in CSS4_COLORS)


@dataclass(frozen=True)
class ColumnRef:
    """Reference to a dataset column used as an aesthetic or axis.

    ``as_factor`` forces discrete treatment of numeric columns.
    """

    name: str
    as_factor: bool = False

    def resolve(self, data: pd.DataFrame) -> pd.Series:
        if self.name not in data.columns:
            raise ColumnNotFoundError(self.name, data.columns)
        values = data[self.name]
        if self.as_factor:
            values = values.astype("category")
        return values


def col(name: str) -> ColumnRef:
    """Map an aesthetic to the column ``name``."""
    return ColumnRef(name)


def factor(name: str) -> ColumnRef:
    """Map an aesthetic to ``name`` treated as a categorical variable."""
    return ColumnRef(name, as_factor=True)


class AestheticKind(str, enum.Enum):
    MISSING = "missing"
    STATIC_COLOR = "static_color"
    VARIABLE_MAPPING = "variable_mapping"


@dataclass(frozen=True)
class AestheticType:
    """Classification result for one aesthetic argument."""

    type: AestheticKind
    value: str | None = None
    is_continuous: bool = False
    label: str | None = None
    values: pd.Series | None = None

    @property
    def is_missing(self) -> bool:
        return self.type is AestheticKind.MISSING

    @property
    def is_static(self) -> bool:
        return self.type is AestheticKind.STATIC_COLOR

    @property
    def is_mapping(self) -> bool:
        return self.type is AestheticKind.VARIABLE_MAPPING


def is_valid_color(value: Any) -> bool:
    """True for hex codes (#RGB, #RRGGBB, #RRGGBBAA) and CSS color names.

    Only the CSS4 names Plotly can render are accepted; numbered X11 variants
    such as "grey50" or "red4" are not.
    """
    if not isinstance(value, str) or not value:
        return False
    if value.startswith("#"):
        return bool(_HEX_RE.match(value))
    return value.lower() in _NAMED_COLORS


def is_continuous_series(values: pd.Series) -> bool:
    """Numeric, non-boolean, non-categorical data."""
    return (
        pd.api.types.is_numeric_dtype(values)
        and not pd.api.types.is_bool_dtype(values)
        and not isinstance(values.dtype, pd.CategoricalDtype)
    )


def detect_aesthetic_type(
    arg: Any,
    param_name: str,
    data: pd.DataFrame | None = None,
) -> AestheticType:
    """Classify an aesthetic argument as missing, static color or mapping.

    Raises:
        InvalidColorArgumentError: ``arg`` is a string that is not a color,
            or a value of an unsupported type.
        ColumnNotFoundError: ``arg`` references a column absent from ``data``.
    """
    if arg is None:
        return AestheticType(AestheticKind.MISSING)

    if isinstance(arg, str):
        if not is_valid_color(arg):
            raise InvalidColorArgumentError(param_name, arg)
        return AestheticType(AestheticKind.STATIC_COLOR, value=arg)

    if isinstance(arg, ColumnRef):
        if data is None:
            return AestheticType(AestheticKind.VARIABLE_MAPPING, label=arg.name)
        values = arg.resolve(data)
        result = AestheticType(
            AestheticKind.VARIABLE_MAPPING,
            is_continuous=is_continuous_series(values),
            label=arg.name,
            values=values,
        )
        logger.debug("{} -> column '{}' (continuous={})", param_name, arg.name, result.is_continuous)
        return result

    if isinstance(arg, pd.Series):
        if data is not None and len(arg) != len(data):
            raise InvalidColorArgumentError(param_name, f"<Series of length {len(arg)}>")
        values = arg
        if data is not None:
            values = pd.Series(arg.to_numpy(), index=data.index, name=arg.name, dtype=arg.dtype)
        return AestheticType(
            AestheticKind.VARIABLE_MAPPING,
            is_continuous=is_continuous_series(values),
            label=str(arg.name) if arg.name is not None else param_name,
            values=values,
        )

    raise InvalidColorArgumentError(param_name, arg)


def warn_palette_ignored(aesthetic: AestheticType, palette: str | None, param_name: str) -> None:
    """Warn once when a palette was requested for a static color."""
    if palette is None or not aesthetic.is_static:
        return
    warnings.warn(
        f"'palette' is ignored because {param_name} is a static color ({aesthetic.value!r}). "
        f"Map a column with {param_name}=col(\"...\") to use a palette.",
        PaletteIgnoredWarning,
        stacklevel=3,
    )


def to_plotly_color(color: str, alpha: float | None = None) -> str:
    """Convert a color literal to something Plotly accepts.

    8-digit hex and explicit ``alpha`` become ``rgba()`` strings.
    """
    if alpha is None and not (color.startswith("#") and len(color) == 9):
        return color
    r, g, b, a = to_rgba(color)
    if alpha is not None:
        a = alpha
    return f"rgba({round(r * 255)}, {round(g * 255)}, {round(b * 255)}, {a:g})"

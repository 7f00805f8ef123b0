"""Insper brand colors and palettes.

Single source of truth for every color used by the package. Both tables are
read-only mappings built once at import.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

import numpy as np
import pandas as pd
from loguru import logger
from matplotlib.colors import LinearSegmentedColormap, to_hex

from insperplot.exceptions import (
    ColorNotFoundError,
    InvalidEnumValueError,
    PaletteNotFoundError,
    PaletteRecycledWarning,
)

# -- Individual colors ------------------------------------------------------

INSPER_COLORS: MappingProxyType[str, str] = MappingProxyType(
    {
        # Basics
        "white": "#FFFFFF",
        "off_white": "#FEFEFE",
        "black": "#000000",
        # Grays
        "gray_light": "#E6E7E8",
        "gray_med": "#BCBEC0",
        "gray_meddark": "#414042",
        "gray_dark": "#333333",
        # Reds
        "reds1": "#E4002B",
        "reds2": "#FCA5A8",
        "reds3": "#A50020",
        # Oranges
        "oranges1": "#F15A22",
        "oranges2": "#F58220",
        "oranges3": "#FAA61A",
        # Magentas
        "magentas1": "#A62B4D",
        "magentas2": "#C43150",
        "magentas3": "#EE2A5D",
        # Teals
        "teals1": "#009491",
        "teals2": "#27A5A2",
        "teals3": "#3CBFAE",
    }
)

# Color families shown by show_insper_colors()
COLOR_FAMILIES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "basic": ("white", "off_white", "black"),
        "grays": ("gray_light", "gray_med", "gray_meddark", "gray_dark"),
        "reds": ("reds1", "reds2", "reds3"),
        "oranges": ("oranges1", "oranges2", "oranges3"),
        "magentas": ("magentas1", "magentas2", "magentas3"),
        "teals": ("teals1", "teals2", "teals3"),
    }
)

# -- Palettes ---------------------------------------------------------------

INSPER_PALETTES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "main": ("#E4002B", "#F15A22", "#FAA61A", "#009491", "#3CBFAE", "#414042"),
        # Sequential, light to dark
        "reds": ("#FEE5E7", "#FCA5A8", "#E4002B", "#A50020", "#6B0015"),
        "oranges": ("#FEF1E5", "#FAA61A", "#F58220", "#F15A22", "#B83E16"),
        "teals": ("#E5F7F7", "#3CBFAE", "#27A5A2", "#009491", "#006763"),
        "grays": ("#F5F5F5", "#E6E7E8", "#BCBEC0", "#414042", "#1A1A1A"),
        # Diverging
        "red_teal": ("#E4002B", "#FCA5A8", "#FFFFFF", "#7DD4D2", "#009491"),
        "red_teal_ext": (
            "#6B0015",
            "#A50020",
            "#E4002B",
            "#FCA5A8",
            "#FEE5E7",
            "#FFFFFF",
            "#E5F7F7",
            "#7DD4D2",
            "#009491",
            "#006763",
            "#003D3B",
        ),
        "diverging": ("#009491", "#3CBFAE", "#E6E7E8", "#FCA5A8", "#E4002B"),
        # Qualitative
        "bright": ("#E4002B", "#F15A22", "#FAA61A", "#009491", "#EE2A5D", "#9B59B6"),
        "contrast": ("#E4002B", "#009491", "#F58220", "#A62B4D", "#414042", "#3CBFAE"),
        "categorical": (
            "#003366",
            "#4A90E2",
            "#FF6B35",
            "#2ECC71",
            "#E74C3C",
            "#F39C12",
            "#9B59B6",
            "#6C757D",
        ),
        "accent_red": ("#414042", "#BCBEC0", "#E6E7E8", "#FAA61A", "#F15A22", "#E4002B"),
        "accent_teal": ("#414042", "#BCBEC0", "#E6E7E8", "#003366", "#009491", "#954000"),
        # Colorblind-safe: Okabe-Ito without black, Tableau 10, ColorBrewer Set1
        "categorical_ito": (
            "#E69F00",
            "#56B4E9",
            "#009E73",
            "#F0E442",
            "#0072B2",
            "#D55E00",
            "#CC79A7",
            "#999999",
        ),
        "categorical_tab": (
            "#4E79A7",
            "#F28E2B",
            "#E15759",
            "#76B7B2",
            "#59A14F",
            "#EDC948",
            "#B07AA1",
            "#FF9DA7",
            "#9C755F",
            "#BAB0AC",
        ),
        "categorical_set": (
            "#E41A1C",
            "#377EB8",
            "#4DAF4A",
            "#984EA3",
            "#FF7F00",
            "#FFFF33",
            "#A65628",
            "#F781BF",
            "#999999",
        ),
    }
)

PaletteType = Literal["sequential", "diverging", "qualitative"]
PALETTE_TYPES: tuple[str, ...] = ("sequential", "diverging", "qualitative")


@dataclass(frozen=True)
class PaletteInfo:
    """Descriptive metadata for one palette."""

    name: str
    type: PaletteType
    n_colors: int
    recommended_use: str


_PALETTE_META: tuple[tuple[str, PaletteType, str], ...] = (
    ("main", "qualitative", "Primary Insper brand colors"),
    ("reds", "sequential", "Intensity scales (light to dark red)"),
    ("oranges", "sequential", "Intensity scales (light to dark orange)"),
    ("teals", "sequential", "Intensity scales (light to dark teal)"),
    ("grays", "sequential", "Intensity scales (light to dark gray)"),
    ("red_teal", "diverging", "Diverging data (negative/positive, red/teal)"),
    ("red_teal_ext", "diverging", "Extended diverging palette (11 colors)"),
    ("diverging", "diverging", "Classic diverging palette (teal/gray/red)"),
    ("bright", "qualitative", "Bright categorical colors (high contrast)"),
    ("contrast", "qualitative", "High contrast categorical colors"),
    ("categorical", "qualitative", "8-color categorical palette"),
    ("accent_red", "qualitative", "Grays with warm accents for highlights"),
    ("accent_teal", "qualitative", "Grays with cool accents for highlights"),
    ("categorical_ito", "qualitative", "Colorblind-safe Okabe-Ito colors"),
    ("categorical_tab", "qualitative", "Colorblind-friendly Tableau 10 colors"),
    ("categorical_set", "qualitative", "ColorBrewer Set1 categorical colors"),
)

PALETTE_INFO: MappingProxyType[str, PaletteInfo] = MappingProxyType(
    {
        name: PaletteInfo(name, ptype, len(INSPER_PALETTES[name]), use)
        for name, ptype, use in _PALETTE_META
    }
)


# -- Accessors --------------------------------------------------------------


def insper_col(name: str) -> str:
    """Return the hex code of a single brand color."""
    try:
        return INSPER_COLORS[name]
    except KeyError:
        raise ColorNotFoundError([name], INSPER_COLORS) from None


def get_insper_colors(*names: str) -> dict[str, str]:
    """Return brand colors by name; all colors when no names are given."""
    if not names:
        return dict(INSPER_COLORS)
    missing = [n for n in names if n not in INSPER_COLORS]
    if missing:
        raise ColorNotFoundError(missing, INSPER_COLORS)
    return {n: INSPER_COLORS[n] for n in names}


def _palette(palette: str) -> tuple[str, ...]:
    try:
        return INSPER_PALETTES[palette]
    except KeyError:
        raise PaletteNotFoundError(palette, INSPER_PALETTES) from None


def interpolate_colors(colors: tuple[str, ...] | list[str], n: int) -> list[str]:
    """Return ``n`` hex colors evenly spaced along a color ramp."""
    if n <= 0:
        return []
    if n == 1:
        return [to_hex(colors[0]).upper()]
    cmap = LinearSegmentedColormap.from_list("insper", list(colors))
    return [to_hex(cmap(t)).upper() for t in np.linspace(0.0, 1.0, n)]


def insper_pal(
    palette: str = "main",
    n: int | None = None,
    type: str = "discrete",
    reverse: bool = False,
) -> list[str]:
    """Return colors from a named Insper palette.

    Args:
        palette: Palette name, see ``list_palettes()``.
        n: Number of colors. ``None`` returns the whole palette.
        type: ``"discrete"`` takes colors in order and recycles when ``n``
            exceeds the palette; ``"continuous"`` interpolates ``n`` colors.
        reverse: Reverse the palette before selecting.

    Returns:
        List of uppercase hex strings.
    """
    if type not in ("discrete", "continuous"):
        raise InvalidEnumValueError("type", type, ("discrete", "continuous"))

    colors = list(_palette(palette))
    if reverse:
        colors.reverse()
    if n is None:
        return colors
    if n < 0:
        raise ValueError(f"n must be non-negative; got {n}")

    if type == "continuous":
        return interpolate_colors(colors, n)

    if n > len(colors):
        warnings.warn(
            f"Not enough colors in palette '{palette}' ({len(colors)} < {n}). "
            "Recycling colors.",
            PaletteRecycledWarning,
            stacklevel=2,
        )
        logger.debug("Recycling palette {} to {} colors", palette, n)
        return [colors[i % len(colors)] for i in range(n)]
    return colors[:n]


def get_palette_colors(palette: str, n: int | None = None, reverse: bool = False) -> list[str]:
    """Discrete colors from a palette (shorthand for ``insper_pal``)."""
    return insper_pal(palette, n=n, type="discrete", reverse=reverse)


def list_palettes(type: str = "all", names_only: bool = False) -> pd.DataFrame | list[str]:
    """Describe the available palettes, optionally filtered by type."""
    if type not in ("all", *PALETTE_TYPES):
        raise InvalidEnumValueError("type", type, ("all", *PALETTE_TYPES))

    infos = [i for i in PALETTE_INFO.values() if type == "all" or i.type == type]
    if names_only:
        return [i.name for i in infos]
    return pd.DataFrame(
        {
            "name": [i.name for i in infos],
            "type": [i.type for i in infos],
            "n_colors": [i.n_colors for i in infos],
            "recommended_use": [i.recommended_use for i in infos],
        }
    )

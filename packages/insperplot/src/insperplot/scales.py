"""Color scales built from Insper palettes.

A discrete scale assigns palette colors to ordered levels; a continuous
scale turns a palette into a Plotly colorscale and samples it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd
from matplotlib.colors import LinearSegmentedColormap, to_hex

from insperplot.colors import insper_pal


def ordered_levels(values: pd.Series) -> list[Any]:
    """Distinct non-null values in display order.

    Categoricals keep their category order (unused categories dropped);
    everything else is sorted.
    """
    if isinstance(values.dtype, pd.CategoricalDtype):
        present = set(values.dropna().unique())
        return [c for c in values.cat.categories if c in present]
    uniques = pd.unique(values.dropna())
    try:
        return sorted(uniques)
    except TypeError:
        return list(uniques)


@dataclass(frozen=True)
class DiscreteScale:
    """Maps ordered levels to palette colors, recycling when needed."""

    palette: str = "main"
    reverse: bool = False
    aesthetic: str = "color"

    def colors(self, n: int) -> list[str]:
        return insper_pal(self.palette, n=n, type="discrete", reverse=self.reverse)

    def map_levels(self, levels: list[Any]) -> dict[Any, str]:
        return dict(zip(levels, self.colors(len(levels))))


@dataclass(frozen=True)
class ContinuousScale:
    """Gradient through every palette color."""

    palette: str = "main"
    reverse: bool = False
    aesthetic: str = "color"

    @property
    def colors(self) -> list[str]:
        return insper_pal(self.palette, type="discrete", reverse=self.reverse)

    @property
    def colorscale(self) -> list[list]:
        """Plotly colorscale: evenly spaced stops."""
        cols = self.colors
        stops = np.linspace(0.0, 1.0, len(cols))
        return [[float(s), c] for s, c in zip(stops, cols)]

    def color_for(self, value: float, vmin: float, vmax: float) -> str:
        """Hex color of ``value`` on a ``[vmin, vmax]`` gradient."""
        cmap = LinearSegmentedColormap.from_list(self.palette, self.colors)
        if vmax == vmin:
            t = 0.5
        else:
            t = float(np.clip((value - vmin) / (vmax - vmin), 0.0, 1.0))
        return to_hex(cmap(t)).upper()


def scale_color_insper(palette: str = "main", discrete: bool = True, reverse: bool = False):
    """Discrete or continuous color scale from an Insper palette."""
    if discrete:
        return DiscreteScale(palette, reverse, "color")
    return ContinuousScale(palette, reverse, "color")


def scale_fill_insper(palette: str = "main", discrete: bool = True, reverse: bool = False):
    """Discrete or continuous fill scale from an Insper palette."""
    if discrete:
        return DiscreteScale(palette, reverse, "fill")
    return ContinuousScale(palette, reverse, "fill")


def scale_color_insper_d(palette: str = "main", reverse: bool = False) -> DiscreteScale:
    return DiscreteScale(palette, reverse, "color")


def scale_fill_insper_d(palette: str = "main", reverse: bool = False) -> DiscreteScale:
    return DiscreteScale(palette, reverse, "fill")


def scale_color_insper_c(palette: str = "main", reverse: bool = False) -> ContinuousScale:
    return ContinuousScale(palette, reverse, "color")


def scale_fill_insper_c(palette: str = "main", reverse: bool = False) -> ContinuousScale:
    return ContinuousScale(palette, reverse, "fill")


scale_colour_insper = scale_color_insper
scale_colour_insper_d = scale_color_insper_d
scale_colour_insper_c = scale_color_insper_c

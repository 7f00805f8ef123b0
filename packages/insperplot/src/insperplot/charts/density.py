"""Kernel density plot."""

from __future__ import annotations

import warnings

import numpy as np
import pandas as pd
import plotly.graph_objects as go
from loguru import logger
from scipy.stats import gaussian_kde

from insperplot.aesthetics import detect_aesthetic_type, to_plotly_color, warn_palette_ignored
from insperplot.charts._base import (
    AxisArg,
    add_colorbar,
    build_grouping,
    finish_legend,
    label_axes,
    level_name,
    palette_or_default,
    resolve_column,
    themed_figure,
    validate_choice,
    validate_data,
)
from insperplot.colors import INSPER_COLORS
from insperplot.config import InsperSettings
from insperplot.exceptions import InsperPlotWarning, InvalidInputError

GRID_POINTS = 512
CUT = 3
BW_RULES = ("nrd0", "nrd")


def bw_nrd0(x: np.ndarray) -> float:
    """Silverman's rule of thumb, 0.9 * min(sd, IQR/1.34) * n^(-1/5)."""
    n = x.size
    sd = float(np.std(x, ddof=1)) if n > 1 else 0.0
    q25, q75 = np.quantile(x, [0.25, 0.75])
    lo = min(sd, float(q75 - q25) / 1.34)
    if lo <= 0:
        lo = sd or abs(float(x[0])) or 1.0
    return 0.9 * lo * n ** (-0.2)


def bw_nrd(x: np.ndarray) -> float:
    """Scott's variation, 1.06 * min(sd, IQR/1.34) * n^(-1/5)."""
    n = x.size
    sd = float(np.std(x, ddof=1))
    q25, q75 = np.quantile(x, [0.25, 0.75])
    return 1.06 * min(sd, float(q75 - q25) / 1.34) * n ** (-0.2)


def kde_curve(values: np.ndarray, bw: float | str | None = None, adjust: float = 1.0) -> tuple[np.ndarray, np.ndarray]:
    """Gaussian KDE evaluated on a 512-point grid extending 3 bandwidths."""
    values = values[~np.isnan(values)]
    if values.size < 2 or np.unique(values).size < 2:
        raise InvalidInputError("Density estimation needs at least 2 distinct values")

    if bw is None or bw == "nrd0":
        h = bw_nrd0(values)
    elif bw == "nrd":
        h = bw_nrd(values)
    else:
        h = float(bw)
    h *= adjust
    if h <= 0:
        raise InvalidInputError(f"Bandwidth must be positive; got {h}")

    # gaussian_kde scales its factor by the sample sd
    kde = gaussian_kde(values, bw_method=h / float(np.std(values, ddof=1)))
    grid = np.linspace(values.min() - CUT * h, values.max() + CUT * h, GRID_POINTS)
    return grid, kde(grid)


def insper_density(
    data: pd.DataFrame,
    x: AxisArg,
    fill=None,
    palette: str | None = None,
    fill_color: str = INSPER_COLORS["teals1"],
    line_color: str = INSPER_COLORS["teals3"],
    alpha: float = 0.6,
    bw: float | str | None = None,
    adjust: float = 1.0,
    *,
    settings: InsperSettings | None = None,
    **trace_kwargs,
) -> go.Figure:
    """Density curve of ``x``; a mapped ``fill`` draws one curve per level.

    ``bw`` is a numeric bandwidth or a rule name (``nrd0`` default,
    ``nrd``); ``adjust`` multiplies it.
    """
    validate_data(data)
    if isinstance(bw, str):
        validate_choice("bw", bw, BW_RULES)
    x_vals, x_label = resolve_column(data, x, "x")
    try:
        numeric = x_vals.to_numpy(dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Density needs a numeric 'x'; '{x_label}' is {x_vals.dtype}") from e

    fill_type = detect_aesthetic_type(fill, "fill", data)
    warn_palette_ignored(fill_type, palette, "fill")

    fig = themed_figure(settings)
    grouping = None
    if fill_type.is_mapping:
        grouping = build_grouping(fill_type, palette_or_default(palette, settings))
        drawn = 0
        for level in grouping.levels:
            group = numeric[grouping.mask(level)]
            group = group[~np.isnan(group)]
            if np.unique(group).size < 2:
                logger.debug("Group '{}' has fewer than two distinct values; dropped", level)
                warnings.warn(
                    f"Density group '{level}' has fewer than two distinct values and was dropped.",
                    InsperPlotWarning,
                    stacklevel=2,
                )
                continue
            grid, dens = kde_curve(group, bw, adjust)
            c = grouping.colors[level]
            fig.add_trace(
                go.Scatter(
                    x=grid,
                    y=dens,
                    mode="lines",
                    name=level_name(level),
                    showlegend=not grouping.continuous,
                    fill="tozeroy",
                    fillcolor=to_plotly_color(c, alpha),
                    line=dict(color=c, width=1.5),
                    **trace_kwargs,
                )
            )
            drawn += 1
        if not drawn:
            raise InvalidInputError("No group has enough distinct values for a density estimate")
        add_colorbar(fig, grouping)
    else:
        area = fill_type.value if fill_type.is_static else fill_color
        outline = fill_type.value if fill_type.is_static else line_color
        grid, dens = kde_curve(numeric, bw, adjust)
        fig.add_trace(
            go.Scatter(
                x=grid,
                y=dens,
                mode="lines",
                fill="tozeroy",
                fillcolor=to_plotly_color(area, alpha),
                line=dict(color=to_plotly_color(outline), width=1.5),
                **trace_kwargs,
            )
        )

    fig.update_yaxes(rangemode="tozero")
    label_axes(fig, x_label, "density")
    finish_legend(fig, grouping)
    return fig

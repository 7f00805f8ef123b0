"""Histogram with rule-based bin counts."""

from __future__ import annotations

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from insperplot.aesthetics import detect_aesthetic_type, to_plotly_color, warn_palette_ignored
from insperplot.bins import compute_bins
from insperplot.charts._base import (
    AxisArg,
    add_colorbar,
    add_zero_line,
    build_grouping,
    finish_legend,
    label_axes,
    level_name,
    palette_or_default,
    resolve_column,
    themed_figure,
    validate_data,
)
from insperplot.colors import INSPER_COLORS
from insperplot.config import InsperSettings
from insperplot.exceptions import InvalidInputError

MAPPED_OPACITY = 0.7


def bin_edges(values: np.ndarray, n_bins: int) -> dict:
    """Plotly ``xbins`` for ``n_bins`` equal bins centred on min and max."""
    lo, hi = float(np.min(values)), float(np.max(values))
    span = hi - lo
    if n_bins > 1 and span > 0:
        size = span / (n_bins - 1)
    else:
        size = span if span > 0 else 1.0
    start = lo - size / 2
    end = hi + size / 2
    if n_bins == 1:
        size = end - start
    return dict(start=start, end=end, size=size)


def insper_histogram(
    data: pd.DataFrame,
    x: AxisArg,
    fill=None,
    palette: str | None = None,
    bins: int | None = None,
    bin_method: str = "sturges",
    border_color: str = "white",
    zero: bool = True,
    *,
    settings: InsperSettings | None = None,
    **trace_kwargs,
) -> go.Figure:
    """Histogram of ``x``.

    The bin count comes from ``bin_method`` (``sturges``, ``fd`` /
    ``freedman_diaconis``, ``scott``) or from ``bins`` with
    ``bin_method="manual"``. Mapped groups overlap at 70% opacity and share
    the same bin edges.
    """
    validate_data(data)
    x_vals, x_label = resolve_column(data, x, "x")
    try:
        numeric = x_vals.to_numpy(dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Histogram needs a numeric 'x'; '{x_label}' is {x_vals.dtype}") from e

    n_bins = compute_bins(numeric, bin_method, bins)
    fill_type = detect_aesthetic_type(fill, "fill", data)
    warn_palette_ignored(fill_type, palette, "fill")

    finite = numeric[~np.isnan(numeric)]
    if finite.size == 0:
        raise InvalidInputError(f"Histogram needs at least one non-missing value in '{x_label}'")
    xbins = bin_edges(finite, n_bins)
    border = dict(color=to_plotly_color(border_color), width=1)

    fig = themed_figure(settings)
    grouping = None
    if fill_type.is_mapping:
        grouping = build_grouping(fill_type, palette_or_default(palette, settings))
        for level in grouping.levels:
            mask = grouping.mask(level)
            fig.add_trace(
                go.Histogram(
                    x=x_vals[mask],
                    xbins=xbins,
                    name=level_name(level),
                    showlegend=not grouping.continuous,
                    opacity=MAPPED_OPACITY,
                    marker=dict(color=grouping.colors[level], line=border),
                    **trace_kwargs,
                )
            )
        add_colorbar(fig, grouping)
        fig.update_layout(barmode="overlay")
    else:
        color = fill_type.value if fill_type.is_static else INSPER_COLORS["reds1"]
        fig.add_trace(
            go.Histogram(
                x=x_vals,
                xbins=xbins,
                marker=dict(color=to_plotly_color(color), line=border),
                **trace_kwargs,
            )
        )

    fig.update_layout(bargap=0)
    fig.update_yaxes(rangemode="tozero")
    if zero:
        add_zero_line(fig)

    label_axes(fig, x_label, "count")
    finish_legend(fig, grouping)
    return fig

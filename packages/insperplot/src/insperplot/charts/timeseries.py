"""Line chart for time series."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

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
    validate_data,
)
from insperplot.colors import INSPER_COLORS
from insperplot.config import InsperSettings


def insper_timeseries(
    data: pd.DataFrame,
    x: AxisArg,
    y: AxisArg,
    color=None,
    palette: str | None = None,
    line_width: float = 2,
    add_points: bool = False,
    *,
    settings: InsperSettings | None = None,
    **trace_kwargs,
) -> go.Figure:
    """One line per level of ``color`` (or a single teal line)."""
    validate_data(data)
    color_type = detect_aesthetic_type(color, "color", data)
    warn_palette_ignored(color_type, palette, "color")

    x_vals, x_label = resolve_column(data, x, "x")
    y_vals, y_label = resolve_column(data, y, "y")
    order = x_vals.reset_index(drop=True).sort_values(kind="stable").index
    x_vals, y_vals = x_vals.iloc[order], y_vals.iloc[order]

    mode = "lines+markers" if add_points else "lines"
    fig = themed_figure(settings)

    grouping = None
    if color_type.is_mapping:
        grouping = build_grouping(color_type, palette_or_default(palette, settings))
        codes = grouping.codes.iloc[order]
        for level in grouping.levels:
            mask = (codes == level).to_numpy()
            c = grouping.colors[level]
            fig.add_trace(
                go.Scatter(
                    x=x_vals[mask],
                    y=y_vals[mask],
                    mode=mode,
                    name=level_name(level),
                    showlegend=not grouping.continuous,
                    line=dict(color=c, width=line_width),
                    marker=dict(color=c, size=5),
                    **trace_kwargs,
                )
            )
        add_colorbar(fig, grouping)
    else:
        c = to_plotly_color(color_type.value) if color_type.is_static else INSPER_COLORS["teals1"]
        fig.add_trace(
            go.Scatter(
                x=x_vals,
                y=y_vals,
                mode=mode,
                line=dict(color=c, width=line_width),
                marker=dict(color=c, size=5),
                **trace_kwargs,
            )
        )

    fig.update_xaxes(minor=dict(showgrid=False))
    label_axes(fig, x_label, y_label)
    finish_legend(fig, grouping)
    return fig

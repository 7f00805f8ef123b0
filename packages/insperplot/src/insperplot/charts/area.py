"""Area chart."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from insperplot.aesthetics import detect_aesthetic_type, to_plotly_color, warn_palette_ignored
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


def insper_area(
    data: pd.DataFrame,
    x: AxisArg,
    y: AxisArg,
    fill=None,
    palette: str | None = None,
    stacked: bool = False,
    area_alpha: float = 0.9,
    fill_color: str = INSPER_COLORS["teals1"],
    add_line: bool = True,
    line_color: str = INSPER_COLORS["teals3"],
    line_width: float = 1.5,
    zero: bool = False,
    *,
    settings: InsperSettings | None = None,
    **trace_kwargs,
) -> go.Figure:
    """Filled area under ``y``.

    A mapped ``fill`` draws one area per level, stacked when ``stacked``
    is true; the outline follows the same colors. A static ``fill`` colors
    both area and outline.
    """
    validate_data(data)
    fill_type = detect_aesthetic_type(fill, "fill", data)
    warn_palette_ignored(fill_type, palette, "fill")

    x_vals, x_label = resolve_column(data, x, "x")
    y_vals, y_label = resolve_column(data, y, "y")
    order = x_vals.reset_index(drop=True).sort_values(kind="stable").index
    x_vals, y_vals = x_vals.iloc[order], y_vals.iloc[order]

    line_spec = (lambda c: dict(color=c, width=line_width)) if add_line else (lambda c: dict(width=0))
    fig = themed_figure(settings)

    grouping = None
    if fill_type.is_mapping:
        grouping = build_grouping(fill_type, palette_or_default(palette, settings))
        codes = grouping.codes.iloc[order]
        for level in grouping.levels:
            mask = (codes == level).to_numpy()
            c = grouping.colors[level]
            fig.add_trace(
                go.Scatter(
                    x=x_vals[mask],
                    y=y_vals[mask],
                    mode="lines",
                    name=level_name(level),
                    showlegend=not grouping.continuous,
                    stackgroup="area" if stacked else None,
                    fill=None if stacked else "tozeroy",
                    fillcolor=to_plotly_color(c, area_alpha),
                    line=line_spec(c),
                    **trace_kwargs,
                )
            )
        add_colorbar(fig, grouping)
    else:
        area = fill_type.value if fill_type.is_static else fill_color
        outline = fill_type.value if fill_type.is_static else line_color
        fig.add_trace(
            go.Scatter(
                x=x_vals,
                y=y_vals,
                mode="lines",
                fill="tozeroy",
                fillcolor=to_plotly_color(area, area_alpha),
                line=line_spec(to_plotly_color(outline)),
                **trace_kwargs,
            )
        )

    if zero:
        add_zero_line(fig)

    fig.update_xaxes(minor=dict(showgrid=False))
    label_axes(fig, x_label, y_label)
    finish_legend(fig, grouping)
    return fig

"""Violin plot."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from insperplot.aesthetics import detect_aesthetic_type, to_plotly_color, warn_palette_ignored
from insperplot.charts._base import (
    AxisArg,
    build_grouping,
    discrete_axis,
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


def insper_violin(
    data: pd.DataFrame,
    x: AxisArg,
    y: AxisArg,
    fill=None,
    palette: str | None = None,
    show_boxplot: bool = False,
    show_points: bool = False,
    violin_alpha: float = 0.7,
    *,
    settings: InsperSettings | None = None,
    **trace_kwargs,
) -> go.Figure:
    """Violin per ``x`` group, optionally with an inner box and raw points."""
    validate_data(data)
    fill_type = detect_aesthetic_type(fill, "fill", data)
    warn_palette_ignored(fill_type, palette, "fill")

    x_vals, x_label = resolve_column(data, x, "x")
    y_vals, y_label = resolve_column(data, y, "y")

    extras = dict(
        box=dict(visible=show_boxplot, width=0.2, fillcolor="rgba(255, 255, 255, 0.5)"),
        points="all" if show_points else False,
        jitter=0.2,
        pointpos=0,
        marker=dict(color=INSPER_COLORS["gray_med"], opacity=0.5, size=5),
        line=dict(color=INSPER_COLORS["gray_dark"], width=1),
        meanline=dict(visible=False),
    )

    fig = themed_figure(settings)
    grouping = None
    if fill_type.is_mapping:
        grouping = build_grouping(fill_type, palette_or_default(palette, settings), force_discrete=True)
        for level in grouping.levels:
            mask = grouping.mask(level)
            fig.add_trace(
                go.Violin(
                    x=x_vals[mask],
                    y=y_vals[mask],
                    name=level_name(level),
                    fillcolor=to_plotly_color(grouping.colors[level], violin_alpha),
                    **{**extras, **trace_kwargs},
                )
            )
        fig.update_layout(violinmode="group")
    else:
        color = fill_type.value if fill_type.is_static else INSPER_COLORS["teals2"]
        fig.add_trace(
            go.Violin(
                x=x_vals,
                y=y_vals,
                fillcolor=to_plotly_color(color, violin_alpha),
                **{**extras, **trace_kwargs},
            )
        )

    discrete_axis(fig, "x")
    fig.update_xaxes(showgrid=False)
    label_axes(fig, x_label, y_label)
    finish_legend(fig, grouping)
    return fig

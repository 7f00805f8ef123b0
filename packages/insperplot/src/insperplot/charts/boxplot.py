"""Box plot with optional jittered points."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
from loguru import logger

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

JITTER_MAX_GROUP = 100
OUTLINE_COLOR = INSPER_COLORS["gray_dark"]


def auto_jitter(x_vals: pd.Series) -> bool:
    """Jitter only when every group has fewer than 100 rows."""
    counts = x_vals.value_counts(dropna=False)
    return bool(len(counts)) and int(counts.max()) < JITTER_MAX_GROUP


def insper_boxplot(
    data: pd.DataFrame,
    x: AxisArg,
    y: AxisArg,
    fill=None,
    palette: str | None = None,
    add_jitter: bool | None = None,
    add_notch: bool = False,
    box_alpha: float = 0.8,
    *,
    settings: InsperSettings | None = None,
    **trace_kwargs,
) -> go.Figure:
    """Box plot per ``x`` group; a mapped ``fill`` dodges boxes within groups.

    ``add_jitter=None`` overlays the raw points automatically for small
    groups.
    """
    validate_data(data)
    fill_type = detect_aesthetic_type(fill, "fill", data)
    warn_palette_ignored(fill_type, palette, "fill")

    x_vals, x_label = resolve_column(data, x, "x")
    y_vals, y_label = resolve_column(data, y, "y")
    if add_jitter is None:
        add_jitter = auto_jitter(x_vals)
        logger.debug("add_jitter resolved to {}", add_jitter)

    points = dict(
        boxpoints="all" if add_jitter else "outliers",
        jitter=0.4 if add_jitter else 0,
        pointpos=0 if add_jitter else None,
        marker=dict(color=INSPER_COLORS["gray_med"], opacity=0.5, size=5),
    )

    fig = themed_figure(settings)
    grouping = None
    if fill_type.is_mapping:
        grouping = build_grouping(fill_type, palette_or_default(palette, settings), force_discrete=True)
        for level in grouping.levels:
            mask = grouping.mask(level)
            fig.add_trace(
                go.Box(
                    x=x_vals[mask],
                    y=y_vals[mask],
                    name=level_name(level),
                    fillcolor=to_plotly_color(grouping.colors[level], box_alpha),
                    line=dict(color=OUTLINE_COLOR, width=1),
                    notched=add_notch,
                    **{**points, **trace_kwargs},
                )
            )
        fig.update_layout(boxmode="group")
    else:
        color = fill_type.value if fill_type.is_static else INSPER_COLORS["teals2"]
        fig.add_trace(
            go.Box(
                x=x_vals,
                y=y_vals,
                fillcolor=to_plotly_color(color, box_alpha),
                line=dict(color=OUTLINE_COLOR, width=1),
                notched=add_notch,
                **{**points, **trace_kwargs},
            )
        )

    discrete_axis(fig, "x")
    fig.update_xaxes(showgrid=False)
    label_axes(fig, x_label, y_label)
    finish_legend(fig, grouping)
    return fig

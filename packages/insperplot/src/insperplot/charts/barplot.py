"""Bar chart."""

from __future__ import annotations

from collections.abc import Callable

import pandas as pd
import plotly.graph_objects as go

from insperplot.aesthetics import detect_aesthetic_type, to_plotly_color, warn_palette_ignored
from insperplot.charts._base import (
    AxisArg,
    add_zero_line,
    build_grouping,
    discrete_axis,
    finish_legend,
    is_numeric,
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

POSITIONS = ("dodge", "stack", "fill", "identity")
_BARMODE = {"dodge": "group", "stack": "stack", "fill": "stack", "identity": "overlay"}


def comma_label(value: float) -> str:
    """Thousands separator, one decimal place."""
    return f"{value:,.1f}"


def insper_barplot(
    data: pd.DataFrame,
    x: AxisArg,
    y: AxisArg,
    fill=None,
    position: str = "dodge",
    palette: str | None = None,
    zero: bool = True,
    text: bool = False,
    text_size: float = 12,
    text_color: str = "black",
    label_formatter: Callable[[float], str] | None = None,
    *,
    settings: InsperSettings | None = None,
    **trace_kwargs,
) -> go.Figure:
    """Bar chart with Insper styling.

    Bars are horizontal when ``x`` is numeric and ``y`` is categorical.
    A mapped ``fill`` always uses a discrete scale, and ``position``
    controls how the groups are laid out (``dodge``, ``stack``, ``fill``
    for 100% stacks, or ``identity`` for overlapping bars).
    """
    validate_data(data)
    validate_choice("position", position, POSITIONS)

    fill_type = detect_aesthetic_type(fill, "fill", data)
    warn_palette_ignored(fill_type, palette, "fill")

    x_vals, x_label = resolve_column(data, x, "x")
    y_vals, y_label = resolve_column(data, y, "y")
    horizontal = is_numeric(x_vals) and not is_numeric(y_vals)
    cat_vals, num_vals = (y_vals, x_vals) if horizontal else (x_vals, y_vals)

    formatter = label_formatter or comma_label
    fig = themed_figure(settings)

    def _bar(mask, color: str, name: str | None = None, show: bool = False) -> go.Bar:
        cats = cat_vals[mask] if mask is not None else cat_vals
        nums = num_vals[mask] if mask is not None else num_vals
        labels = [formatter(v) for v in nums] if text else None
        coords = dict(x=nums, y=cats, orientation="h") if horizontal else dict(x=cats, y=nums)
        return go.Bar(
            **coords,
            name=name,
            showlegend=show,
            marker=dict(color=color, line=dict(width=0)),
            text=labels,
            textposition="outside" if text else None,
            textfont=dict(size=text_size, color=text_color) if text else None,
            cliponaxis=False,
            **trace_kwargs,
        )

    grouping = None
    if fill_type.is_mapping:
        grouping = build_grouping(fill_type, palette_or_default(palette, settings), force_discrete=True)
        for level in grouping.levels:
            fig.add_trace(_bar(grouping.mask(level), grouping.colors[level], level_name(level), True))
    else:
        color = fill_type.value if fill_type.is_static else INSPER_COLORS["reds1"]
        fig.add_trace(_bar(None, to_plotly_color(color)))

    fig.update_layout(barmode=_BARMODE[position], bargap=0.1)
    if position == "fill":
        fig.update_layout(barnorm="fraction")

    value_axis = dict(rangemode="tozero", tickformat=".0%" if position == "fill" else ",")
    if horizontal:
        fig.update_xaxes(**value_axis)
        fig.update_yaxes(showgrid=False)
        discrete_axis(fig, "y")
    else:
        fig.update_yaxes(**value_axis)
        fig.update_xaxes(showgrid=False)
        discrete_axis(fig, "x")

    if zero:
        add_zero_line(fig, vertical=horizontal)

    label_axes(fig, x_label, y_label)
    finish_legend(fig, grouping)
    return fig

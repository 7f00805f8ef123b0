"""Shared plumbing for the chart constructors."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from insperplot.aesthetics import AestheticType, ColumnRef, is_continuous_series
from insperplot.config import InsperSettings, resolve_settings
from insperplot.exceptions import ColumnNotFoundError, InvalidEnumValueError, InvalidInputError
from insperplot.scales import ContinuousScale, DiscreteScale, ordered_levels
from insperplot.theme import theme_from_settings

AxisArg = str | ColumnRef | pd.Series


def validate_data(data: Any, *, allow_matrix: bool = False) -> None:
    """Raise InvalidInputError unless ``data`` is a DataFrame."""
    if isinstance(data, pd.DataFrame):
        return
    if allow_matrix and isinstance(data, np.ndarray) and data.ndim == 2:
        return
    expected = "a pandas DataFrame or 2-D numpy array" if allow_matrix else "a pandas DataFrame"
    raise InvalidInputError(
        f"'data' must be {expected}; you supplied an object of type {type(data).__name__}. "
        "Convert it with pandas.DataFrame(...).",
        detail={"type": type(data).__name__},
    )


def validate_choice(param_name: str, value: Any, allowed: Iterable[Any]) -> None:
    allowed = tuple(allowed)
    if value not in allowed:
        raise InvalidEnumValueError(param_name, value, allowed)


def resolve_column(data: pd.DataFrame, arg: AxisArg, param_name: str) -> tuple[pd.Series, str]:
    """Resolve an x/y argument to (values, label)."""
    if isinstance(arg, str):
        if arg not in data.columns:
            raise ColumnNotFoundError(arg, data.columns)
        return data[arg], arg
    if isinstance(arg, ColumnRef):
        return arg.resolve(data), arg.name
    if isinstance(arg, pd.Series):
        if len(arg) != len(data):
            raise InvalidInputError(
                f"'{param_name}' has {len(arg)} values but data has {len(data)} rows"
            )
        label = str(arg.name) if arg.name is not None else param_name
        return pd.Series(arg.to_numpy(), index=data.index, name=arg.name, dtype=arg.dtype), label
    raise InvalidInputError(
        f"'{param_name}' must be a column name, col(...) or a pandas Series; "
        f"got {type(arg).__name__}"
    )


def is_numeric(values: pd.Series) -> bool:
    return is_continuous_series(values)


def themed_figure(settings: InsperSettings | None = None, *traces) -> go.Figure:
    """Create a go.Figure with the Insper template applied."""
    fig = go.Figure(list(traces))
    fig.update_layout(template=theme_from_settings(settings))
    return fig


def palette_or_default(palette: str | None, settings: InsperSettings | None) -> str:
    return palette if palette is not None else resolve_settings(settings).default_palette


def legend_title(label: str | None) -> str:
    return f"<b>{label}</b>" if label else ""


def discrete_axis(fig: go.Figure, axis: str = "x") -> None:
    """Force a categorical axis (numbers shown as labels)."""
    if axis == "x":
        fig.update_xaxes(type="category")
    else:
        fig.update_yaxes(type="category")


def add_zero_line(fig: go.Figure, *, vertical: bool = False) -> None:
    if vertical:
        fig.add_vline(x=0, line_width=2, line_color="black")
    else:
        fig.add_hline(y=0, line_width=2, line_color="black")


def label_axes(fig: go.Figure, x_label: str | None, y_label: str | None) -> None:
    fig.update_xaxes(title_text=x_label)
    fig.update_yaxes(title_text=y_label)


# -- Grouping for mapped aesthetics -----------------------------------------


@dataclass
class Grouping:
    """Levels of a mapped aesthetic with their colors.

    ``continuous`` groupings also carry the scale and value range so a
    colorbar can be drawn.
    """

    label: str | None
    levels: list[Any]
    colors: dict[Any, str]
    continuous: bool = False
    scale: ContinuousScale | None = None
    vmin: float = 0.0
    vmax: float = 0.0
    codes: pd.Series = field(default_factory=lambda: pd.Series(dtype=object))

    def mask(self, level: Any) -> np.ndarray:
        return (self.codes == level).to_numpy()


def build_grouping(aes: AestheticType, palette: str, *, force_discrete: bool = False) -> Grouping:
    """Assign colors to the levels of a mapped aesthetic.

    Continuous values become one level per distinct value, colored along
    the palette gradient, unless ``force_discrete`` is set.
    """
    values = aes.values
    if values is None:
        raise InvalidInputError(f"Aesthetic '{aes.label}' has no data to map")

    if aes.is_continuous and not force_discrete:
        scale = ContinuousScale(palette, aesthetic="fill")
        levels = sorted(pd.unique(values.dropna()))
        vmin, vmax = (float(min(levels)), float(max(levels))) if levels else (0.0, 0.0)
        colors = {lv: scale.color_for(float(lv), vmin, vmax) for lv in levels}
        return Grouping(aes.label, levels, colors, True, scale, vmin, vmax, values)

    levels = ordered_levels(values)
    colors = DiscreteScale(palette, aesthetic="fill").map_levels(levels)
    return Grouping(aes.label, levels, colors, codes=values)


def add_colorbar(fig: go.Figure, grouping: Grouping) -> None:
    """Invisible marker trace that only renders the gradient legend."""
    if not grouping.continuous or grouping.scale is None:
        return
    fig.add_trace(
        go.Scatter(
            x=[None],
            y=[None],
            mode="markers",
            showlegend=False,
            hoverinfo="skip",
            marker=dict(
                colorscale=grouping.scale.colorscale,
                cmin=grouping.vmin,
                cmax=grouping.vmax,
                color=[grouping.vmin],
                showscale=True,
                colorbar=dict(title=dict(text=legend_title(grouping.label)), thickness=12),
            ),
        )
    )


def finish_legend(fig: go.Figure, grouping: Grouping | None) -> None:
    if grouping is None:
        fig.update_layout(showlegend=False)
    elif grouping.continuous:
        fig.update_layout(showlegend=False)
    else:
        fig.update_layout(showlegend=True, legend_title_text=legend_title(grouping.label))


def level_name(level: Any) -> str:
    if isinstance(level, float) and level.is_integer():
        return str(int(level))
    return str(level)

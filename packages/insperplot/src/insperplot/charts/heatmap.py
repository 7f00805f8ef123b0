"""Heatmap for matrices, wide numeric frames or long Var1/Var2/value data."""

from __future__ import annotations

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from insperplot.charts._base import legend_title, themed_figure, validate_data
from insperplot.config import InsperSettings
from insperplot.exceptions import InvalidInputError
from insperplot.scales import ContinuousScale

LONG_COLUMNS = ("Var1", "Var2", "value")


def melt_matrix(data: pd.DataFrame | np.ndarray) -> pd.DataFrame:
    """Long form (Var1 = row label, Var2 = column label, value) of ``data``.

    Frames that already carry Var1/Var2/value are returned as is.
    """
    if isinstance(data, pd.DataFrame) and all(c in data.columns for c in LONG_COLUMNS):
        return data

    if isinstance(data, pd.DataFrame):
        non_numeric = [c for c in data.columns if not pd.api.types.is_numeric_dtype(data[c])]
        if non_numeric:
            raise InvalidInputError(
                "Heatmap data must contain only numeric columns when not in long form "
                f"(non-numeric: {non_numeric}). Or provide columns Var1, Var2, value."
            )
        rows = list(data.index)
        cols = list(data.columns)
        matrix = data.to_numpy(dtype=float)
    else:
        if not np.issubdtype(data.dtype, np.number):
            raise InvalidInputError(f"Heatmap matrix must be numeric; got dtype {data.dtype}")
        matrix = data.astype(float)
        rows = list(range(1, matrix.shape[0] + 1))
        cols = list(range(1, matrix.shape[1] + 1))

    return pd.DataFrame(
        {
            "Var1": np.tile(rows, len(cols)),
            "Var2": np.repeat(cols, len(rows)),
            "value": matrix.ravel(order="F"),
        }
    )


def insper_heatmap(
    data: pd.DataFrame | np.ndarray,
    show_values: bool = False,
    value_color: str = "white",
    value_size: float = 10,
    palette: str = "diverging",
    *,
    settings: InsperSettings | None = None,
    **trace_kwargs,
) -> go.Figure:
    """Tile heatmap with a continuous palette (``diverging`` by default).

    Row labels run along x and column labels along y; ``show_values``
    prints each value rounded to 2 decimals.
    """
    validate_data(data, allow_matrix=True)
    long = melt_matrix(data)
    if not pd.api.types.is_numeric_dtype(long["value"]):
        raise InvalidInputError("Heatmap column 'value' must be numeric")
    grid = long.pivot_table(index="Var2", columns="Var1", values="value", aggfunc="last", sort=False)
    grid = grid.reindex(index=pd.unique(long["Var2"]), columns=pd.unique(long["Var1"]))
    z = grid.to_numpy(dtype=float)

    scale = ContinuousScale(palette, aesthetic="fill")
    text = np.round(z, 2) if show_values else None
    fig = themed_figure(
        settings,
        go.Heatmap(
            z=z,
            x=[str(v) for v in grid.columns],
            y=[str(v) for v in grid.index],
            colorscale=scale.colorscale,
            xgap=1,
            ygap=1,
            text=text,
            texttemplate="%{text}" if show_values else None,
            textfont=dict(color=value_color, size=value_size) if show_values else None,
            colorbar=dict(title=dict(text=legend_title("Value")), thickness=12),
            **trace_kwargs,
        ),
    )
    fig.update_xaxes(showgrid=False, tickangle=-45, title_text=None, type="category")
    fig.update_yaxes(showgrid=False, title_text=None, type="category")
    fig.update_layout(plot_bgcolor="white")
    return fig

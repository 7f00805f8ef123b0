"""Scatter plot with optional trend line."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from insperplot.aesthetics import AestheticType, detect_aesthetic_type, to_plotly_color, warn_palette_ignored
from insperplot.charts._base import (
    AxisArg,
    Grouping,
    add_colorbar,
    build_grouping,
    finish_legend,
    label_axes,
    legend_title,
    level_name,
    palette_or_default,
    resolve_column,
    themed_figure,
    validate_choice,
    validate_data,
)
from insperplot.charts._smooth import SMOOTH_METHODS, fit_smooth
from insperplot.colors import INSPER_COLORS
from insperplot.config import InsperSettings

SMOOTH_COLOR = INSPER_COLORS["oranges1"]
SMOOTH_ALPHA = 0.2


def _static(aes: AestheticType, default: str | None) -> str | None:
    if aes.is_static:
        return to_plotly_color(aes.value)
    return default


def _point_colors(grouping: Grouping) -> list[str]:
    return [grouping.colors.get(v, INSPER_COLORS["gray_med"]) for v in grouping.codes]


def insper_scatterplot(
    data: pd.DataFrame,
    x: AxisArg,
    y: AxisArg,
    color=None,
    fill=None,
    palette: str | None = None,
    add_smooth: bool = False,
    smooth_method: str = "lm",
    point_size: float = 8,
    point_alpha: float = 1.0,
    *,
    settings: InsperSettings | None = None,
    **trace_kwargs,
) -> go.Figure:
    """Scatter plot with Insper styling.

    ``color`` drives the point outline and ``fill`` the point face; when
    only ``color`` is given it colors the whole point. ``add_smooth`` draws
    a trend line fitted with ``smooth_method`` (``lm``, ``loess``, ``gam``
    or ``glm``) and a 95% confidence band for the parametric fits.
    """
    validate_data(data)
    validate_choice("smooth_method", smooth_method, SMOOTH_METHODS)

    color_type = detect_aesthetic_type(color, "color", data)
    fill_type = detect_aesthetic_type(fill, "fill", data)
    if not (color_type.is_mapping or fill_type.is_mapping):
        if color_type.is_static:
            warn_palette_ignored(color_type, palette, "color")
        else:
            warn_palette_ignored(fill_type, palette, "fill")

    x_vals, x_label = resolve_column(data, x, "x")
    y_vals, y_label = resolve_column(data, y, "y")
    pal = palette_or_default(palette, settings)
    fig = themed_figure(settings)

    marker_base = dict(size=point_size, opacity=point_alpha)

    if color_type.is_mapping and fill_type.is_mapping:
        color_g = build_grouping(color_type, pal)
        fill_g = build_grouping(fill_type, pal)
        fig.add_trace(
            go.Scatter(
                x=x_vals,
                y=y_vals,
                mode="markers",
                showlegend=False,
                marker=dict(
                    **marker_base,
                    color=_point_colors(fill_g),
                    line=dict(color=_point_colors(color_g), width=2),
                ),
                **trace_kwargs,
            )
        )
        for grouping in (color_g, fill_g):
            if grouping.continuous:
                add_colorbar(fig, grouping)
                continue
            for level in grouping.levels:
                fig.add_trace(
                    go.Scatter(
                        x=[None],
                        y=[None],
                        mode="markers",
                        name=level_name(level),
                        legendgroup=grouping.label,
                        legendgrouptitle_text=legend_title(grouping.label),
                        marker=dict(size=point_size, color=grouping.colors[level]),
                    )
                )
        has_legend = not (color_g.continuous and fill_g.continuous)
        fig.update_layout(showlegend=has_legend)

    elif color_type.is_mapping or fill_type.is_mapping:
        mapped = color_type if color_type.is_mapping else fill_type
        grouping = build_grouping(mapped, pal)
        if mapped is color_type:
            # face follows the mapping unless a static fill was given
            face_static = _static(fill_type, None)
            outline = None
        else:
            face_static = None
            outline = _static(color_type, INSPER_COLORS["teals3"])

        if grouping.continuous:
            values = grouping.codes
            mapped_marker = dict(
                color=values,
                colorscale=grouping.scale.colorscale,
                cmin=grouping.vmin,
                cmax=grouping.vmax,
                showscale=True,
                colorbar=dict(title=dict(text=legend_title(grouping.label)), thickness=12),
            )
            if face_static is not None:
                marker = dict(**marker_base, color=face_static, line=dict(color=_point_colors(grouping), width=2))
                fig.add_trace(go.Scatter(x=x_vals, y=y_vals, mode="markers", marker=marker, **trace_kwargs))
                add_colorbar(fig, grouping)
            else:
                line = dict(color=outline, width=1) if outline else dict(width=0)
                marker = dict(**marker_base, **mapped_marker, line=line)
                fig.add_trace(go.Scatter(x=x_vals, y=y_vals, mode="markers", marker=marker, **trace_kwargs))
            fig.update_layout(showlegend=False)
        else:
            for level in grouping.levels:
                mask = grouping.mask(level)
                level_color = grouping.colors[level]
                if face_static is not None:
                    marker = dict(**marker_base, color=face_static, line=dict(color=level_color, width=2))
                else:
                    line = dict(color=outline, width=1) if outline else dict(width=0)
                    marker = dict(**marker_base, color=level_color, line=line)
                fig.add_trace(
                    go.Scatter(
                        x=x_vals[mask],
                        y=y_vals[mask],
                        mode="markers",
                        name=level_name(level),
                        marker=marker,
                        **trace_kwargs,
                    )
                )
            finish_legend(fig, grouping)

    else:
        outline = _static(color_type, INSPER_COLORS["teals1"])
        face = _static(fill_type, None)
        if face is None:
            marker = dict(**marker_base, color=outline, line=dict(width=0))
        else:
            marker = dict(**marker_base, color=face, line=dict(color=outline, width=1.5))
        fig.add_trace(go.Scatter(x=x_vals, y=y_vals, mode="markers", marker=marker, showlegend=False, **trace_kwargs))
        fig.update_layout(showlegend=False)

    if add_smooth:
        _add_smooth(fig, x_vals, y_vals, smooth_method)

    label_axes(fig, x_label, y_label)
    return fig


def _add_smooth(fig: go.Figure, x_vals: pd.Series, y_vals: pd.Series, method: str) -> None:
    trend = fit_smooth(x_vals.to_numpy(dtype=float), y_vals.to_numpy(dtype=float), method)
    if trend["upper"].notna().all():
        fig.add_trace(
            go.Scatter(
                x=trend["x"],
                y=trend["upper"],
                mode="lines",
                line=dict(width=0),
                showlegend=False,
                hoverinfo="skip",
            )
        )
        fig.add_trace(
            go.Scatter(
                x=trend["x"],
                y=trend["lower"],
                mode="lines",
                line=dict(width=0),
                fill="tonexty",
                fillcolor=to_plotly_color(SMOOTH_COLOR, SMOOTH_ALPHA),
                showlegend=False,
                hoverinfo="skip",
            )
        )
    fig.add_trace(
        go.Scatter(
            x=trend["x"],
            y=trend["fit"],
            mode="lines",
            name=method,
            line=dict(color=SMOOTH_COLOR, width=2),
            showlegend=False,
        )
    )

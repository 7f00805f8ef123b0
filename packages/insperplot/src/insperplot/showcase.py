"""Swatch figures for browsing brand colors and palettes."""

from __future__ import annotations

import plotly.graph_objects as go
from matplotlib.colors import to_rgb
from plotly.subplots import make_subplots

from insperplot.colors import COLOR_FAMILIES, INSPER_COLORS, INSPER_PALETTES, PALETTE_INFO, PALETTE_TYPES
from insperplot.config import InsperSettings
from insperplot.exceptions import InvalidEnumValueError, PaletteNotFoundError
from insperplot.theme import insper_title, theme_insper_minimal

_HIDDEN_AXIS = dict(visible=False, showgrid=False, zeroline=False)


def text_color_for(hex_color: str) -> str:
    """Black on light swatches, white on dark ones."""
    r, g, b = (c * 255 for c in to_rgb(hex_color))
    return "black" if r * 0.299 + g * 0.587 + b * 0.114 > 128 else "white"


def _swatch_row(fig: go.Figure, colors: list[str], labels: list[str], *, angle: int = 0, outline: str = "black") -> None:
    for i, (color, label) in enumerate(zip(colors, labels)):
        fig.add_shape(
            type="rect",
            x0=i + 0.05,
            x1=i + 0.95,
            y0=0,
            y1=1,
            fillcolor=color,
            line=dict(color=outline, width=1),
        )
        fig.add_annotation(
            x=i + 0.5,
            y=0.5,
            text=f"<b>{label}</b>",
            showarrow=False,
            textangle=angle,
            font=dict(color=text_color_for(color), size=11),
        )
    fig.update_xaxes(range=[0, max(len(colors), 1)], **_HIDDEN_AXIS)
    fig.update_yaxes(range=[-0.05, 1.05], **_HIDDEN_AXIS)


def show_insper_colors(color_family: str = "all", *, settings: InsperSettings | None = None) -> go.Figure:
    """One swatch per brand color, labeled with name and hex code."""
    if color_family == "all":
        names = list(INSPER_COLORS)
    elif color_family in COLOR_FAMILIES:
        names = list(COLOR_FAMILIES[color_family])
    else:
        raise InvalidEnumValueError("color_family", color_family, ("all", *COLOR_FAMILIES))

    template = theme_insper_minimal(settings)
    fig = go.Figure(layout=dict(template=template))
    _swatch_row(fig, [INSPER_COLORS[n] for n in names], [f"{n}<br>{INSPER_COLORS[n]}" for n in names])
    fig.update_layout(
        title=insper_title(
            f"Insper Individual Colors: {color_family.title()}",
            "Use get_insper_colors('name') to extract by name",
            template,
        ),
        height=260,
        width=max(600, 110 * len(names)),
        showlegend=False,
    )
    return fig


def show_insper_palette(palette: str = "all", *, settings: InsperSettings | None = None) -> go.Figure:
    """Swatches of one palette, or every palette grouped by type."""
    if palette == "all":
        return show_palette_types(settings=settings)
    if palette not in INSPER_PALETTES:
        raise PaletteNotFoundError(palette, INSPER_PALETTES)

    info = PALETTE_INFO[palette]
    colors = list(INSPER_PALETTES[palette])
    template = theme_insper_minimal(settings)
    fig = go.Figure(layout=dict(template=template))
    _swatch_row(fig, colors, colors, angle=-90, outline="white")
    fig.update_layout(
        title=insper_title(
            f"Palette: {palette}",
            f"{info.type.title()} | {info.n_colors} colors | {info.recommended_use}",
            template,
        ),
        height=300,
        width=max(500, 90 * len(colors)),
        showlegend=False,
    )
    return fig


def show_palette_types(*, settings: InsperSettings | None = None) -> go.Figure:
    """All palettes, one row each, in panels by type."""
    groups = {t: [i.name for i in PALETTE_INFO.values() if i.type == t] for t in PALETTE_TYPES}
    fig = make_subplots(
        rows=len(PALETTE_TYPES),
        cols=1,
        subplot_titles=[t.title() for t in PALETTE_TYPES],
        row_heights=[len(groups[t]) for t in PALETTE_TYPES],
        vertical_spacing=0.06,
    )
    widest = max(len(c) for c in INSPER_PALETTES.values())

    for row, ptype in enumerate(PALETTE_TYPES, start=1):
        names = groups[ptype]
        for i, name in enumerate(names):
            for j, color in enumerate(INSPER_PALETTES[name]):
                fig.add_shape(
                    type="rect",
                    x0=j,
                    x1=j + 1,
                    y0=i,
                    y1=i + 0.9,
                    fillcolor=color,
                    line=dict(color="white", width=1),
                    row=row,
                    col=1,
                )
        fig.update_yaxes(
            range=[len(names), -0.1],
            tickvals=[i + 0.45 for i in range(len(names))],
            ticktext=names,
            showgrid=False,
            zeroline=False,
            row=row,
            col=1,
        )
        fig.update_xaxes(range=[0, widest], visible=False, showgrid=False, row=row, col=1)

    template = theme_insper_minimal(settings)
    fig.update_layout(
        template=template,
        title=insper_title(
            "Insper Color Palettes",
            "Organized by type: Sequential, Diverging, and Qualitative",
            template,
        ),
        height=160 + 40 * len(INSPER_PALETTES),
        width=900,
        showlegend=False,
    )
    return fig

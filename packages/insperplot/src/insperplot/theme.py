"""Insper Plotly theme.

``theme_insper()`` builds a ``go.layout.Template`` carrying the Insper
visual identity. ``ensure_theme()`` registers it (and its variants) in
``plotly.io.templates`` so ``template="insper"`` works anywhere.
"""

from __future__ import annotations

import plotly.graph_objects as go

from insperplot.colors import INSPER_COLORS, INSPER_PALETTES
from insperplot.config import InsperSettings, resolve_settings
from insperplot.exceptions import InvalidEnumValueError
from insperplot.fonts import detect_font

BORDERS = ("none", "half", "closed")

OFF_WHITE = INSPER_COLORS["off_white"]
GRID_COLOR = INSPER_COLORS["gray_light"]
AXIS_COLOR = INSPER_COLORS["gray_dark"]
SUBTITLE_COLOR = INSPER_COLORS["gray_meddark"]
CAPTION_COLOR = "#666666"
TEXT_COLOR = "#1A1A1A"

TITLE_FALLBACK = "serif"
TEXT_FALLBACK = "sans-serif"

TEMPLATE_NAMES = ("insper", "insper_minimal", "insper_presentation", "insper_print")


def _pt(points: float) -> int:
    """Typographic points to CSS pixels."""
    return round(points * 96 / 72)


def theme_insper(
    base_size: float = 12,
    font_title: str = "EB Garamond",
    font_text: str = "Barlow",
    grid: bool = True,
    border: str = "none",
    settings: InsperSettings | None = None,
) -> go.layout.Template:
    """Build the Insper chart template.

    Args:
        base_size: Base font size in points; titles scale from it.
        font_title: Title family, falls back to ``serif`` when unavailable.
        font_text: Body family, falls back to ``sans-serif``.
        grid: Draw dashed major grid lines.
        border: ``"none"``, ``"half"`` (axis lines with ticks) or
            ``"closed"`` (full box with ticks).
        settings: Session settings; only ``fonts_loaded`` is read here.

    Raises:
        InvalidEnumValueError: ``grid`` is not a bool or ``border`` is unknown.
    """
    if not isinstance(grid, bool):
        raise InvalidEnumValueError("grid", grid, (True, False))
    if border not in BORDERS:
        raise InvalidEnumValueError("border", border, BORDERS)
    if base_size <= 0:
        raise ValueError(f"base_size must be positive; got {base_size}")

    settings = resolve_settings(settings)
    title_family = detect_font(font_title, TITLE_FALLBACK, settings)
    text_family = detect_font(font_text, TEXT_FALLBACK, settings)
    size = _pt(base_size)

    axis = dict(
        showgrid=grid,
        gridcolor=GRID_COLOR,
        gridwidth=1,
        griddash="dash",
        minor=dict(showgrid=False),
        zeroline=False,
        showline=False,
        ticks="",
        tickfont=dict(color=TEXT_COLOR, size=round(size * 0.9)),
        title=dict(font=dict(size=size, color=TEXT_COLOR), standoff=10),
        automargin=True,
    )
    if border == "half":
        axis.update(showline=True, linecolor=AXIS_COLOR, linewidth=1, ticks="outside", ticklen=7, tickcolor=AXIS_COLOR)
    elif border == "closed":
        axis.update(showline=True, linecolor="black", linewidth=1, mirror=True, ticks="outside", ticklen=7, tickcolor="black")

    title_size = round(size * 1.8)
    return go.layout.Template(
        layout=go.Layout(
            font=dict(family=text_family, size=size, color=TEXT_COLOR),
            title=dict(
                font=dict(family=title_family, size=title_size, color="black"),
                x=0,
                xref="paper",
                xanchor="left",
                yanchor="top",
            ),
            plot_bgcolor=OFF_WHITE,
            paper_bgcolor=OFF_WHITE,
            xaxis=axis,
            yaxis=axis,
            legend=dict(
                orientation="h",
                x=0,
                xanchor="left",
                y=1.02,
                yanchor="bottom",
                bgcolor="rgba(0,0,0,0)",
                title=dict(side="left", font=dict(size=size, color=TEXT_COLOR)),
                font=dict(size=round(size * 0.9)),
            ),
            # 20/15/20/15 pt plot margins plus headroom for title and legend
            margin=dict(t=_pt(20) + title_size * 3, r=_pt(15), b=_pt(20) + size * 2, l=_pt(15) + size),
            hoverlabel=dict(bgcolor="white", bordercolor=INSPER_COLORS["gray_med"]),
            colorway=list(INSPER_PALETTES["categorical"]),
            meta=dict(
                insper_theme=dict(
                    base_size=base_size,
                    font_title=title_family,
                    font_text=text_family,
                    grid=grid,
                    border=border,
                )
            ),
        )
    )


def theme_insper_minimal(settings: InsperSettings | None = None, **kwargs) -> go.layout.Template:
    """No grid, no border."""
    kwargs.setdefault("grid", False)
    kwargs.setdefault("border", "none")
    return theme_insper(settings=settings, **kwargs)


def theme_insper_presentation(settings: InsperSettings | None = None, **kwargs) -> go.layout.Template:
    """Larger type for slides."""
    kwargs.setdefault("base_size", 16)
    kwargs.setdefault("grid", False)
    return theme_insper(settings=settings, **kwargs)


def theme_insper_print(settings: InsperSettings | None = None, **kwargs) -> go.layout.Template:
    """Compact type with a closed frame for print."""
    kwargs.setdefault("base_size", 11)
    kwargs.setdefault("grid", True)
    kwargs.setdefault("border", "closed")
    return theme_insper(settings=settings, **kwargs)


def theme_from_settings(settings: InsperSettings | None = None) -> go.layout.Template:
    """Template built from ``settings.theme`` defaults."""
    settings = resolve_settings(settings)
    t = settings.theme
    return theme_insper(
        base_size=t.base_size,
        font_title=t.font_title,
        font_text=t.font_text,
        grid=t.grid,
        border=t.border,
        settings=settings,
    )


# -- Lazy template registration ---------------------------------------------

_REGISTERED = False


def ensure_theme(settings: InsperSettings | None = None, *, force: bool = False) -> None:
    """Register the Insper templates with Plotly (idempotent).

    ``force=True`` rebuilds them, e.g. after fonts were registered.
    """
    global _REGISTERED
    if _REGISTERED and not force:
        return
    import plotly.io as pio

    pio.templates["insper"] = theme_from_settings(settings)
    pio.templates["insper_minimal"] = theme_insper_minimal(settings)
    pio.templates["insper_presentation"] = theme_insper_presentation(settings)
    pio.templates["insper_print"] = theme_insper_print(settings)
    _REGISTERED = True


# -- Annotation helpers -----------------------------------------------------


def insper_title(
    main: str,
    subtitle: str = "",
    template: go.layout.Template | None = None,
) -> dict:
    """Build a Plotly title dict with the gray Insper subtitle.

    Usage:
        fig.update_layout(title=insper_title("PIB real", "Variação anual"))
    """
    template = template or theme_insper()
    base = _theme_meta(template)
    title_font = template.layout.title.font
    if subtitle:
        text = (
            f"{main}<br><span style='font-size:{round(_pt(base['base_size']) * 0.9)}px;"
            f"color:{SUBTITLE_COLOR};font-family:{title_font.family}'>"
            f"{subtitle}</span>"
        )
    else:
        text = main
    return dict(
        text=text,
        font=dict(family=title_font.family, size=title_font.size, color="black"),
        x=0,
        xref="paper",
        xanchor="left",
    )


def add_caption(
    fig: go.Figure,
    caption: str,
    template: go.layout.Template | None = None,
) -> go.Figure:
    """Add a small caption annotation at the bottom-right of a chart."""
    if not caption:
        return fig
    template = template or theme_insper()
    base = _theme_meta(template)
    fig.add_annotation(
        text=caption,
        xref="paper",
        yref="paper",
        x=1,
        y=-0.15,
        showarrow=False,
        font=dict(family=base["font_text"], size=round(_pt(base["base_size"]) * 0.8), color=CAPTION_COLOR),
        xanchor="right",
        yanchor="top",
    )
    return fig


def _theme_meta(template: go.layout.Template) -> dict:
    meta = template.layout.meta
    if isinstance(meta, dict) and "insper_theme" in meta:
        return meta["insper_theme"]
    return dict(base_size=12, font_text=TEXT_FALLBACK)

"""Figure export."""

from __future__ import annotations

from pathlib import Path

import plotly.graph_objects as go
from loguru import logger

from insperplot.config import InsperSettings, resolve_settings
from insperplot.exceptions import ExportError

IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg", ".webp", ".svg", ".pdf")


def save_insper_plot(
    fig: go.Figure,
    filename: str | Path,
    width: float | None = None,
    height: float | None = None,
    dpi: int | None = None,
    *,
    settings: InsperSettings | None = None,
) -> Path:
    """Save a figure with Insper defaults (4.3in tall, golden-ratio wide, 300 dpi).

    Args:
        fig: Plotly figure from any insperplot constructor.
        filename: Target path; ``.html`` is written as interactive HTML, the
            image formats go through kaleido.
        width: Width in inches, defaults to ``height * 1.618``.
        height: Height in inches.
        dpi: Resolution for raster formats.

    Returns:
        The saved file path.
    """
    if not isinstance(fig, go.Figure):
        raise TypeError(f"Unsupported figure type: {type(fig)}")

    cfg = resolve_settings(settings).export
    height = cfg.height if height is None else height
    width = height * cfg.aspect if width is None else width
    dpi = cfg.dpi if dpi is None else dpi
    if width <= 0 or height <= 0 or dpi <= 0:
        raise ValueError("width, height and dpi must be positive")

    path = Path(filename)
    suffix = path.suffix.lower()
    if suffix != ".html" and suffix not in IMAGE_SUFFIXES:
        raise ExportError(
            f"Unsupported file type '{path.suffix}'. Use .html or one of {', '.join(IMAGE_SUFFIXES)}",
            detail={"path": str(path)},
        )
    path.parent.mkdir(parents=True, exist_ok=True)

    px_w = round(width * cfg.px_per_inch)
    px_h = round(height * cfg.px_per_inch)
    try:
        if suffix == ".html":
            fig.write_html(str(path), include_plotlyjs="cdn", default_width=px_w, default_height=px_h)
        else:
            fig.write_image(str(path), width=px_w, height=px_h, scale=dpi / cfg.px_per_inch)
    except (ValueError, RuntimeError, ImportError, OSError) as e:
        raise ExportError(f"Could not save {path.name}: {e}", detail={"path": str(path)}) from e

    logger.info("Plot saved: {}", path)
    return path

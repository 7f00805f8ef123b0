"""Insper visual identity for Plotly charts.

Brand colors and palettes, a chart template, and nine chart constructors
that return pre-styled ``plotly.graph_objects.Figure`` objects.
"""

from loguru import logger

from insperplot.aesthetics import (
    AestheticKind,
    AestheticType,
    ColumnRef,
    col,
    detect_aesthetic_type,
    factor,
    is_valid_color,
    warn_palette_ignored,
)
from insperplot.bins import compute_bins, nclass_fd, nclass_scott, nclass_sturges
from insperplot.charts import (
    insper_area,
    insper_barplot,
    insper_boxplot,
    insper_density,
    insper_heatmap,
    insper_histogram,
    insper_scatterplot,
    insper_timeseries,
    insper_violin,
)
from insperplot.colors import (
    INSPER_COLORS,
    INSPER_PALETTES,
    PALETTE_INFO,
    PaletteInfo,
    get_insper_colors,
    get_palette_colors,
    insper_col,
    insper_pal,
    list_palettes,
)
from insperplot.config import InsperSettings
from insperplot.export import save_insper_plot
from insperplot.fonts import (
    check_insper_fonts,
    detect_font,
    has_insper_fonts,
    register_insper_fonts,
    setup_insper_fonts,
)
from insperplot.formatting import format_brl, format_num_br, format_percent_br, insper_caption
from insperplot.scales import (
    scale_color_insper,
    scale_color_insper_c,
    scale_color_insper_d,
    scale_colour_insper,
    scale_colour_insper_c,
    scale_colour_insper_d,
    scale_fill_insper,
    scale_fill_insper_c,
    scale_fill_insper_d,
)
from insperplot.showcase import show_insper_colors, show_insper_palette, show_palette_types
from insperplot.theme import (
    add_caption,
    ensure_theme,
    insper_title,
    theme_insper,
    theme_insper_minimal,
    theme_insper_presentation,
    theme_insper_print,
)

__version__ = "1.3.0"

# Library code stays quiet unless the application opts in (see logging_setup)
logger.disable("insperplot")

__all__ = [
    "INSPER_COLORS",
    "INSPER_PALETTES",
    "PALETTE_INFO",
    "AestheticKind",
    "AestheticType",
    "ColumnRef",
    "InsperSettings",
    "PaletteInfo",
    "add_caption",
    "check_insper_fonts",
    "col",
    "compute_bins",
    "detect_aesthetic_type",
    "detect_font",
    "ensure_theme",
    "factor",
    "format_brl",
    "format_num_br",
    "format_percent_br",
    "get_insper_colors",
    "get_palette_colors",
    "has_insper_fonts",
    "insper_area",
    "insper_barplot",
    "insper_boxplot",
    "insper_caption",
    "insper_col",
    "insper_density",
    "insper_heatmap",
    "insper_histogram",
    "insper_pal",
    "insper_scatterplot",
    "insper_timeseries",
    "insper_title",
    "insper_violin",
    "is_valid_color",
    "list_palettes",
    "nclass_fd",
    "nclass_scott",
    "nclass_sturges",
    "register_insper_fonts",
    "save_insper_plot",
    "scale_color_insper",
    "scale_color_insper_c",
    "scale_color_insper_d",
    "scale_colour_insper",
    "scale_colour_insper_c",
    "scale_colour_insper_d",
    "scale_fill_insper",
    "scale_fill_insper_c",
    "scale_fill_insper_d",
    "setup_insper_fonts",
    "show_insper_colors",
    "show_insper_palette",
    "show_palette_types",
    "theme_insper",
    "theme_insper_minimal",
    "theme_insper_presentation",
    "theme_insper_print",
    "warn_palette_ignored",
]

"""Insper chart constructors.

Each constructor returns a themed ``go.Figure``; nothing is rendered or
written until the caller shows or saves it.
"""

from insperplot.charts.area import insper_area
from insperplot.charts.barplot import insper_barplot
from insperplot.charts.boxplot import insper_boxplot
from insperplot.charts.density import insper_density
from insperplot.charts.heatmap import insper_heatmap
from insperplot.charts.histogram import insper_histogram
from insperplot.charts.scatterplot import insper_scatterplot
from insperplot.charts.timeseries import insper_timeseries
from insperplot.charts.violin import insper_violin

__all__ = [
    "insper_area",
    "insper_barplot",
    "insper_boxplot",
    "insper_density",
    "insper_heatmap",
    "insper_histogram",
    "insper_scatterplot",
    "insper_timeseries",
    "insper_violin",
]

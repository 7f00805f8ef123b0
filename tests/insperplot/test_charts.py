"""Tests for the chart constructors."""

from __future__ import annotations

import warnings

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import pytest

from insperplot.aesthetics import col, factor
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
from insperplot.charts._smooth import fit_smooth
from insperplot.charts.boxplot import auto_jitter
from insperplot.charts.density import kde_curve
from insperplot.charts.heatmap import melt_matrix
from insperplot.charts.histogram import bin_edges
from insperplot.exceptions import (
    ColumnNotFoundError,
    InvalidColorArgumentError,
    InvalidEnumValueError,
    InsperPlotWarning,
    InvalidInputError,
    MissingBinCountError,
    PaletteIgnoredWarning,
)
from insperplot.formatting import format_num_br

CATEGORICAL = ["#003366", "#4A90E2", "#FF6B35"]


@pytest.fixture()
def settings(loaded_settings):
    return loaded_settings


@pytest.fixture()
def sales() -> pd.DataFrame:
    return pd.DataFrame({"region": ["a", "b", "c"], "total": [1234.5, 10.0, 3.0]})


def _data_traces(fig: go.Figure) -> list:
    """Traces that actually draw data (colorbar helpers have x=[None])."""
    return [t for t in fig.data if not (t.x is not None and len(t.x) == 1 and t.x[0] is None)]


# -- Shared validation ---------------------------------------------------------


class TestCommonValidation:
    @pytest.mark.parametrize(
        "build",
        [
            lambda d, s: insper_barplot(d, "x", "y", settings=s),
            lambda d, s: insper_scatterplot(d, "x", "y", settings=s),
            lambda d, s: insper_timeseries(d, "x", "y", settings=s),
            lambda d, s: insper_area(d, "x", "y", settings=s),
            lambda d, s: insper_boxplot(d, "x", "y", settings=s),
            lambda d, s: insper_violin(d, "x", "y", settings=s),
            lambda d, s: insper_histogram(d, "x", settings=s),
            lambda d, s: insper_density(d, "x", settings=s),
        ],
    )
    def test_rejects_non_frames(self, build, settings):
        with pytest.raises(InvalidInputError, match="pandas DataFrame"):
            build({"x": [1, 2, 3], "y": [1, 2, 3]}, settings)

    def test_missing_axis_column(self, cars, settings):
        with pytest.raises(ColumnNotFoundError, match="speed"):
            insper_scatterplot(cars, "speed", "mpg", settings=settings)

    def test_invalid_color_string(self, cars, settings):
        with pytest.raises(InvalidColorArgumentError, match="cyl"):
            insper_boxplot(cars, "cyl", "mpg", fill="cyl", settings=settings)

    def test_axis_as_series(self, cars, settings):
        fig = insper_scatterplot(cars, cars["wt"] * 1000, "mpg", settings=settings)
        assert fig.layout.xaxis.title.text == "wt"
        assert fig.data[0].x[0] == pytest.approx(cars["wt"].iloc[0] * 1000)

    def test_theme_applied(self, cars, settings):
        fig = insper_scatterplot(cars, "wt", "mpg", settings=settings)
        assert fig.layout.template.layout.plot_bgcolor == "#FEFEFE"


# -- Bar -----------------------------------------------------------------------


class TestBarplot:
    def test_defaults(self, sales, settings):
        fig = insper_barplot(sales, "region", "total", settings=settings)
        bar = fig.data[0]
        assert bar.marker.color == "#E4002B"
        assert fig.layout.barmode == "group"
        assert fig.layout.xaxis.type == "category"
        assert fig.layout.showlegend is False
        assert len(fig.layout.shapes) == 1
        assert fig.layout.shapes[0].y0 == 0

    def test_horizontal_when_x_numeric(self, sales, settings):
        fig = insper_barplot(sales, "total", "region", settings=settings)
        assert fig.data[0].orientation == "h"
        assert fig.layout.yaxis.type == "category"
        assert fig.layout.shapes[0].x0 == 0

    def test_no_zero_line(self, sales, settings):
        fig = insper_barplot(sales, "region", "total", zero=False, settings=settings)
        assert len(fig.layout.shapes) == 0

    def test_value_labels(self, sales, settings):
        fig = insper_barplot(sales, "region", "total", text=True, settings=settings)
        assert list(fig.data[0].text) == ["1,234.5", "10.0", "3.0"]
        assert fig.data[0].textposition == "outside"

    def test_custom_formatter(self, sales, settings):
        fig = insper_barplot(
            sales,
            "region",
            "total",
            text=True,
            label_formatter=lambda v: format_num_br(v, digits=2),
            settings=settings,
        )
        assert fig.data[0].text[0] == "1.234,50"

    def test_mapped_fill_is_discrete(self, cars, settings):
        fig = insper_barplot(cars, "cyl", "mpg", fill=col("gear"), settings=settings)
        assert [t.name for t in fig.data] == ["3", "4", "5"]
        assert [t.marker.color for t in fig.data] == CATEGORICAL
        assert fig.layout.showlegend is True
        assert fig.layout.legend.title.text == "<b>gear</b>"

    def test_stack_and_fill(self, cars, settings):
        stacked = insper_barplot(cars, "cyl", "mpg", fill=col("gear"), position="stack", settings=settings)
        assert stacked.layout.barmode == "stack"
        fill = insper_barplot(cars, "cyl", "mpg", fill=col("gear"), position="fill", settings=settings)
        assert fill.layout.barnorm == "fraction"
        assert fill.layout.yaxis.tickformat == ".0%"

    def test_bad_position(self, sales, settings):
        with pytest.raises(InvalidEnumValueError, match="position"):
            insper_barplot(sales, "region", "total", position="side", settings=settings)

    def test_static_fill_with_palette_warns(self, sales, settings):
        with pytest.warns(PaletteIgnoredWarning):
            fig = insper_barplot(sales, "region", "total", fill="steelblue", palette="bright", settings=settings)
        assert fig.data[0].marker.color == "steelblue"

    def test_palette_used_for_mapping(self, cars, settings):
        fig = insper_barplot(cars, "cyl", "mpg", fill=factor("gear"), palette="main", settings=settings)
        assert fig.data[0].marker.color == "#E4002B"


# -- Scatter -------------------------------------------------------------------


class TestScatterplot:
    def test_default_teal_points(self, cars, settings):
        fig = insper_scatterplot(cars, "wt", "mpg", settings=settings)
        assert len(fig.data) == 1
        assert fig.data[0].marker.color == "#009491"
        assert fig.data[0].mode == "markers"
        assert fig.layout.showlegend is False

    def test_point_size_and_alpha(self, cars, settings):
        fig = insper_scatterplot(cars, "wt", "mpg", point_size=4, point_alpha=0.5, settings=settings)
        assert fig.data[0].marker.size == 4
        assert fig.data[0].marker.opacity == 0.5

    def test_discrete_color(self, flowers, settings):
        fig = insper_scatterplot(flowers, "sepal_length", "sepal_width", color=col("species"), settings=settings)
        assert [t.name for t in fig.data] == ["setosa", "versicolor", "virginica"]
        assert [t.marker.color for t in fig.data] == CATEGORICAL
        assert sum(len(t.x) for t in fig.data) == len(flowers)
        assert fig.layout.legend.title.text == "<b>species</b>"

    def test_continuous_color(self, cars, settings):
        fig = insper_scatterplot(cars, "wt", "mpg", color=col("hp"), settings=settings)
        assert len(fig.data) == 1
        marker = fig.data[0].marker
        assert marker.showscale is True
        assert marker.colorscale[0][1] == "#003366"
        assert marker.colorbar.title.text == "<b>hp</b>"

    def test_factor_makes_numeric_discrete(self, cars, settings):
        fig = insper_scatterplot(cars, "wt", "mpg", color=factor("cyl"), settings=settings)
        assert [t.name for t in fig.data] == ["4", "6", "8"]

    def test_fill_mapping_gets_teal_outline(self, flowers, settings):
        fig = insper_scatterplot(flowers, "sepal_length", "sepal_width", fill=col("species"), settings=settings)
        assert fig.data[0].marker.line.color == "#3CBFAE"
        assert fig.data[0].marker.color == "#003366"

    def test_static_outline_with_fill_mapping(self, flowers, settings):
        fig = insper_scatterplot(
            flowers, "sepal_length", "sepal_width", color="black", fill=col("species"), settings=settings
        )
        assert fig.data[0].marker.line.color == "black"

    def test_static_face_with_color_mapping(self, flowers, settings):
        fig = insper_scatterplot(
            flowers, "sepal_length", "sepal_width", color=col("species"), fill="white", settings=settings
        )
        assert fig.data[0].marker.color == "white"
        assert fig.data[0].marker.line.color == "#003366"

    def test_both_mapped(self, flowers, settings):
        fig = insper_scatterplot(
            flowers,
            "sepal_length",
            "sepal_width",
            color=col("species"),
            fill=col("species"),
            settings=settings,
        )
        points = fig.data[0]
        assert len(points.marker.color) == len(flowers)
        assert len(points.marker.line.color) == len(flowers)
        # one legend entry per level for each aesthetic
        assert len(fig.data) == 1 + 3 + 3

    def test_static_color_and_fill(self, cars, settings):
        fig = insper_scatterplot(cars, "wt", "mpg", color="#E4002B", fill="white", settings=settings)
        assert fig.data[0].marker.color == "white"
        assert fig.data[0].marker.line.color == "#E4002B"

    def test_palette_warning_without_mapping(self, cars, settings):
        with pytest.warns(PaletteIgnoredWarning, match="because color"):
            insper_scatterplot(cars, "wt", "mpg", color="red", fill="blue", palette="bright", settings=settings)
        with pytest.warns(PaletteIgnoredWarning, match="'blue'"):
            insper_scatterplot(cars, "wt", "mpg", color="blue", palette="bright", settings=settings)
        with pytest.warns(PaletteIgnoredWarning, match="because fill"):
            insper_scatterplot(cars, "wt", "mpg", fill="blue", palette="bright", settings=settings)

    def test_no_palette_warning_with_mapping(self, cars, settings):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            insper_scatterplot(cars, "wt", "mpg", color=factor("cyl"), fill="blue", palette="bright", settings=settings)
        assert not [w for w in caught if issubclass(w.category, PaletteIgnoredWarning)]

    def test_lm_smooth_has_band(self, cars, settings):
        fig = insper_scatterplot(cars, "wt", "mpg", add_smooth=True, settings=settings)
        assert len(fig.data) == 4
        assert fig.data[2].fill == "tonexty"
        assert fig.data[-1].line.color == "#F15A22"
        assert fig.data[-1].mode == "lines"

    def test_loess_smooth_has_no_band(self, cars, settings):
        fig = insper_scatterplot(cars, "wt", "mpg", add_smooth=True, smooth_method="loess", settings=settings)
        assert len(fig.data) == 2

    @pytest.mark.parametrize("method", ["gam", "glm"])
    def test_other_smooths(self, cars, settings, method):
        fig = insper_scatterplot(cars, "wt", "mpg", add_smooth=True, smooth_method=method, settings=settings)
        assert len(fig.data) == 4
        assert fig.data[-1].name == method

    def test_bad_smooth_method(self, cars, settings):
        with pytest.raises(InvalidEnumValueError, match="smooth_method"):
            insper_scatterplot(cars, "wt", "mpg", add_smooth=True, smooth_method="spline", settings=settings)


class TestFitSmooth:
    @pytest.fixture()
    def line(self):
        rng = np.random.default_rng(0)
        x = np.linspace(0, 10, 40)
        return x, 2 * x + 1 + rng.normal(0, 0.5, x.size)

    def test_lm_recovers_line(self, line):
        x, y = line
        trend = fit_smooth(x, y, "lm")
        assert list(trend.columns) == ["x", "fit", "lower", "upper"]
        assert trend["fit"].iloc[0] == pytest.approx(1, abs=0.5)
        assert trend["fit"].iloc[-1] == pytest.approx(21, abs=0.5)
        assert (trend["lower"] <= trend["fit"]).all()
        assert (trend["upper"] >= trend["fit"]).all()

    def test_grid_spans_range(self, line):
        x, y = line
        trend = fit_smooth(x, y, "glm")
        assert trend["x"].iloc[0] == 0
        assert trend["x"].iloc[-1] == 10

    def test_loess_band_missing(self, line):
        trend = fit_smooth(*line, method="loess")
        assert trend["lower"].isna().all()
        assert trend["fit"].notna().all()

    def test_gam(self, line):
        trend = fit_smooth(*line, method="gam")
        assert trend["fit"].iloc[-1] == pytest.approx(21, abs=1.5)

    def test_gam_falls_back_with_few_values(self):
        x = np.array([1.0, 1.0, 2.0, 2.0, 3.0])
        trend = fit_smooth(x, x * 2, "gam")
        assert trend["fit"].iloc[-1] == pytest.approx(6)

    def test_too_few_points(self):
        with pytest.raises(InvalidInputError):
            fit_smooth(np.array([1.0, 2.0]), np.array([1.0, 2.0]))

    def test_nan_rows_dropped(self, line):
        x, y = line
        y = y.copy()
        y[:5] = np.nan
        assert fit_smooth(x, y)["fit"].notna().all()


# -- Time series ---------------------------------------------------------------


class TestTimeseries:
    def test_single_line(self, series_df, settings):
        north = series_df[series_df["region"] == "north"]
        fig = insper_timeseries(north, "date", "value", settings=settings)
        trace = fig.data[0]
        assert trace.mode == "lines"
        assert trace.line.color == "#009491"
        assert trace.line.width == 2
        assert list(trace.y) == list(np.arange(12.0))

    def test_sorted_by_x(self, series_df, settings):
        fig = insper_timeseries(series_df, "date", "value", color=col("region"), settings=settings)
        assert [t.name for t in fig.data] == ["north", "south"]
        for trace in fig.data:
            assert pd.Series(pd.to_datetime(trace.x)).is_monotonic_increasing
        assert list(fig.data[1].y) == list(np.arange(12.0) * 2)

    def test_group_colors(self, series_df, settings):
        fig = insper_timeseries(series_df, "date", "value", color=col("region"), palette="contrast", settings=settings)
        assert [t.line.color for t in fig.data] == ["#E4002B", "#009491"]

    def test_points(self, series_df, settings):
        fig = insper_timeseries(series_df, "date", "value", add_points=True, settings=settings)
        assert fig.data[0].mode == "lines+markers"

    def test_static_color(self, series_df, settings):
        fig = insper_timeseries(series_df, "date", "value", color="#E4002B", line_width=3, settings=settings)
        assert fig.data[0].line.color == "#E4002B"
        assert fig.data[0].line.width == 3

    def test_continuous_color_adds_colorbar(self, cars, settings):
        fig = insper_timeseries(cars, "wt", "mpg", color=col("hp"), settings=settings)
        assert fig.data[-1].marker.showscale is True
        assert fig.layout.showlegend is False

    def test_duplicate_index(self, series_df, settings):
        df = series_df.set_index(pd.Index([0] * len(series_df)))
        fig = insper_timeseries(df, "date", "value", color=col("region"), settings=settings)
        assert sum(len(t.x) for t in fig.data) == len(df)


# -- Area ----------------------------------------------------------------------


class TestArea:
    def test_defaults(self, series_df, settings):
        fig = insper_area(series_df[series_df["region"] == "north"], "date", "value", settings=settings)
        trace = fig.data[0]
        assert trace.fill == "tozeroy"
        assert trace.fillcolor == "rgba(0, 148, 145, 0.9)"
        assert trace.line.color == "#3CBFAE"
        assert len(fig.layout.shapes) == 0

    def test_without_line(self, series_df, settings):
        fig = insper_area(series_df, "date", "value", add_line=False, settings=settings)
        assert fig.data[0].line.width == 0

    def test_static_fill_colors_outline(self, series_df, settings):
        fig = insper_area(series_df, "date", "value", fill="steelblue", area_alpha=0.5, settings=settings)
        assert fig.data[0].fillcolor == "rgba(70, 130, 180, 0.5)"
        assert fig.data[0].line.color == "steelblue"

    def test_stacked_groups(self, series_df, settings):
        fig = insper_area(series_df, "date", "value", fill=col("region"), stacked=True, settings=settings)
        assert [t.stackgroup for t in fig.data] == ["area", "area"]
        assert fig.data[0].line.color == "#003366"

    def test_overlapping_groups(self, series_df, settings):
        fig = insper_area(series_df, "date", "value", fill=col("region"), settings=settings)
        assert all(t.stackgroup is None for t in fig.data)
        assert all(t.fill == "tozeroy" for t in fig.data)

    def test_zero_line(self, series_df, settings):
        fig = insper_area(series_df, "date", "value", zero=True, settings=settings)
        assert len(fig.layout.shapes) == 1


# -- Box and violin ------------------------------------------------------------


class TestBoxplot:
    def test_defaults_with_auto_jitter(self, cars, settings):
        fig = insper_boxplot(cars, "cyl", "mpg", settings=settings)
        box = fig.data[0]
        assert box.fillcolor == "rgba(39, 165, 162, 0.8)"
        assert box.boxpoints == "all"
        assert box.notched is False
        assert fig.layout.xaxis.type == "category"

    def test_jitter_off(self, cars, settings):
        fig = insper_boxplot(cars, "cyl", "mpg", add_jitter=False, add_notch=True, settings=settings)
        assert fig.data[0].boxpoints == "outliers"
        assert fig.data[0].notched is True

    def test_auto_jitter_threshold(self):
        assert auto_jitter(pd.Series(["a"] * 99 + ["b"]))
        assert not auto_jitter(pd.Series(["a"] * 100))

    def test_mapped_fill_dodges(self, cars, settings):
        fig = insper_boxplot(cars, "cyl", "mpg", fill=col("gear"), settings=settings)
        assert fig.layout.boxmode == "group"
        assert [t.name for t in fig.data] == ["3", "4", "5"]
        assert fig.data[0].fillcolor == "rgba(0, 51, 102, 0.8)"

    def test_trace_kwargs_override(self, cars, settings):
        fig = insper_boxplot(cars, "cyl", "mpg", boxpoints=False, settings=settings)
        assert fig.data[0].boxpoints is False


class TestViolin:
    def test_defaults(self, flowers, settings):
        fig = insper_violin(flowers, "species", "sepal_length", settings=settings)
        violin = fig.data[0]
        assert violin.fillcolor == "rgba(39, 165, 162, 0.7)"
        assert violin.box.visible is False
        assert violin.points is False

    def test_box_and_points(self, flowers, settings):
        fig = insper_violin(flowers, "species", "sepal_length", show_boxplot=True, show_points=True, settings=settings)
        assert fig.data[0].box.visible is True
        assert fig.data[0].points == "all"

    def test_mapped_fill(self, cars, settings):
        fig = insper_violin(cars, "cyl", "mpg", fill=col("gear"), violin_alpha=0.5, settings=settings)
        assert fig.layout.violinmode == "group"
        assert fig.data[1].fillcolor == "rgba(74, 144, 226, 0.5)"


# -- Histogram -----------------------------------------------------------------


class TestBinEdges:
    def test_centred_bins(self):
        assert bin_edges(np.array([0.0, 10.0]), 3) == dict(start=-2.5, end=12.5, size=5.0)

    def test_single_bin(self):
        assert bin_edges(np.array([0.0, 10.0]), 1) == dict(start=-5.0, end=15.0, size=20.0)

    def test_constant_values(self):
        assert bin_edges(np.array([3.0, 3.0]), 1) == dict(start=2.5, end=3.5, size=1.0)


class TestHistogram:
    def test_defaults(self, cars, settings):
        fig = insper_histogram(cars, "mpg", settings=settings)
        hist = fig.data[0]
        assert hist.marker.color == "#E4002B"
        assert hist.marker.line.color == "white"
        assert fig.layout.bargap == 0
        assert fig.layout.yaxis.title.text == "count"
        span = cars["mpg"].max() - cars["mpg"].min()
        # Sturges for 32 rows -> 6 bins
        assert hist.xbins.size == pytest.approx(span / 5)
        assert hist.xbins.start == pytest.approx(cars["mpg"].min() - span / 10)

    def test_manual_bins(self, cars, settings):
        fig = insper_histogram(cars, "mpg", bins=4, bin_method="manual", settings=settings)
        span = cars["mpg"].max() - cars["mpg"].min()
        assert fig.data[0].xbins.size == pytest.approx(span / 3)

    def test_manual_needs_bins(self, cars, settings):
        with pytest.raises(MissingBinCountError):
            insper_histogram(cars, "mpg", bin_method="manual", settings=settings)

    def test_non_numeric(self, cars, settings):
        with pytest.raises(InvalidInputError, match="numeric"):
            insper_histogram(cars, "brand", settings=settings)

    @pytest.mark.parametrize("values", [[np.nan, np.nan], []])
    def test_manual_bins_without_values(self, values, settings):
        df = pd.DataFrame({"x": pd.Series(values, dtype=float)})
        with pytest.raises(InvalidInputError, match="non-missing"):
            insper_histogram(df, "x", bins=5, bin_method="manual", settings=settings)

    def test_groups_overlap_on_shared_bins(self, flowers, settings):
        fig = insper_histogram(flowers, "sepal_length", fill=col("species"), settings=settings)
        assert fig.layout.barmode == "overlay"
        assert [t.opacity for t in fig.data] == [0.7, 0.7, 0.7]
        assert len({t.xbins.start for t in fig.data}) == 1

    def test_static_fill(self, cars, settings):
        fig = insper_histogram(cars, "mpg", fill="#009491", border_color="black", settings=settings)
        assert fig.data[0].marker.color == "#009491"
        assert fig.data[0].marker.line.color == "black"


# -- Density -------------------------------------------------------------------


class TestDensity:
    def test_curve_integrates_to_one(self, cars):
        grid, dens = kde_curve(cars["mpg"].to_numpy(dtype=float))
        assert grid.size == 512
        area = float(np.sum((dens[1:] + dens[:-1]) / 2 * np.diff(grid)))
        assert area == pytest.approx(1, abs=0.01)

    def test_adjust_widens_grid(self, cars):
        values = cars["mpg"].to_numpy(dtype=float)
        narrow, _ = kde_curve(values)
        wide, _ = kde_curve(values, adjust=2)
        assert wide[0] < narrow[0]
        assert wide[-1] > narrow[-1]

    def test_needs_two_distinct_values(self):
        with pytest.raises(InvalidInputError):
            kde_curve(np.array([1.0, 1.0, 1.0]))

    def test_defaults(self, cars, settings):
        fig = insper_density(cars, "mpg", settings=settings)
        trace = fig.data[0]
        assert len(trace.x) == 512
        assert trace.fillcolor == "rgba(0, 148, 145, 0.6)"
        assert trace.line.color == "#3CBFAE"
        assert fig.layout.yaxis.title.text == "density"

    def test_bandwidth_rules(self, cars, settings):
        insper_density(cars, "mpg", bw="nrd", settings=settings)
        insper_density(cars, "mpg", bw=1.5, settings=settings)
        with pytest.raises(InvalidEnumValueError, match="bw"):
            insper_density(cars, "mpg", bw="silverman", settings=settings)

    def test_mapped_fill(self, flowers, settings):
        fig = insper_density(flowers, "sepal_length", fill=col("species"), settings=settings)
        assert [t.name for t in fig.data] == ["setosa", "versicolor", "virginica"]

    def test_degenerate_group_dropped(self, settings):
        df = pd.DataFrame({"v": [1.0, 1.0, 1.0, 2.0, 3.0, 4.5], "g": ["a", "a", "a", "b", "b", "b"]})
        with pytest.warns(InsperPlotWarning, match="'a'"):
            fig = insper_density(df, "v", fill=col("g"), settings=settings)
        assert [t.name for t in _data_traces(fig)] == ["b"]

    def test_all_groups_degenerate(self, settings):
        df = pd.DataFrame({"v": [1.0, 1.0, 2.0, 2.0], "g": ["a", "a", "b", "b"]})
        with pytest.raises(InvalidInputError):
            insper_density(df, "v", fill=col("g"), settings=settings)


# -- Heatmap -------------------------------------------------------------------


class TestHeatmap:
    def test_matrix_orientation(self, settings):
        fig = insper_heatmap(np.array([[1, 2], [3, 4]]), settings=settings)
        heat = fig.data[0]
        assert np.asarray(heat.z).tolist() == [[1.0, 3.0], [2.0, 4.0]]
        assert list(heat.x) == ["1", "2"]
        assert heat.colorscale[0][1] == "#009491"
        assert heat.colorbar.title.text == "<b>Value</b>"
        assert fig.layout.xaxis.tickangle == -45

    def test_correlation_frame(self, cars, settings):
        corr = cars[["mpg", "wt", "hp"]].corr()
        fig = insper_heatmap(corr, show_values=True, settings=settings)
        heat = fig.data[0]
        assert list(heat.x) == ["mpg", "wt", "hp"]
        assert heat.texttemplate == "%{text}"
        assert np.asarray(heat.text)[0][0] == 1.0

    def test_long_frame_passes_through(self):
        long = pd.DataFrame({"Var1": ["a", "b"], "Var2": ["x", "x"], "value": [1.0, 2.0]})
        assert melt_matrix(long) is long

    def test_melt_column_major(self):
        long = melt_matrix(np.array([[1, 2], [3, 4]]))
        assert long["Var1"].tolist() == [1, 2, 1, 2]
        assert long["Var2"].tolist() == [1, 1, 2, 2]
        assert long["value"].tolist() == [1.0, 3.0, 2.0, 4.0]

    def test_non_numeric_wide_frame(self, settings):
        df = pd.DataFrame({"a": [1, 2], "b": ["x", "y"]})
        with pytest.raises(InvalidInputError, match="numeric"):
            insper_heatmap(df, settings=settings)

    def test_non_numeric_long_values(self, settings):
        df = pd.DataFrame({"Var1": ["a"], "Var2": ["b"], "value": ["high"]})
        with pytest.raises(InvalidInputError, match="numeric"):
            insper_heatmap(df, settings=settings)

    def test_rejects_lists(self, settings):
        with pytest.raises(InvalidInputError, match="2-D numpy array"):
            insper_heatmap([[1, 2], [3, 4]], settings=settings)

    def test_custom_palette(self, settings):
        fig = insper_heatmap(np.eye(3), palette="reds", settings=settings)
        assert fig.data[0].colorscale[-1][1] == "#6B0015"

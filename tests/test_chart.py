"""Unit tests for the series chart host."""

import logging

import pandas as pd
import plotly.graph_objects as go
import pytest

from chart_colors.chart import SeriesChart
from chart_colors.color_resolver import ColorResolver
from chart_colors.config import ColorConfig
from chart_colors.palettes import DARK_PALETTE, DIVERGING_STOPS, LIGHT_PALETTE


class TestSeriesData:
    """Tests for SeriesChart data preparation."""

    def test_one_datum_per_numeric_column(self, numeric_dataframe):
        """Each numeric column becomes a {key, value} datum with its mean."""
        chart = SeriesChart(numeric_dataframe)
        data = chart.data()

        assert [d["key"] for d in data] == ["col1", "col2", "col3"]
        assert [d["value"] for d in data] == pytest.approx([3.0, 30.0, 0.3])

    def test_non_numeric_columns_dropped(self, mixed_dataframe):
        """String and datetime columns are not series."""
        chart = SeriesChart(mixed_dataframe)

        assert [d["key"] for d in chart.data()] == ["numeric1", "numeric2"]

    def test_all_nan_columns_dropped_with_warning(self, dataframe_with_nans, caplog):
        """All-NaN columns are dropped and logged."""
        with caplog.at_level(logging.WARNING):
            chart = SeriesChart(dataframe_with_nans)

        assert [d["key"] for d in chart.data()] == ["no_nan", "some_nan"]
        assert "all_nan" in caplog.text

    def test_no_numeric_columns_raises(self):
        """Raise ValueError when nothing is plottable."""
        df = pd.DataFrame({"s": ["a", "b"]})

        with pytest.raises(ValueError, match="No numeric columns"):
            SeriesChart(df)

    def test_holds_a_color_resolver(self, numeric_dataframe):
        """The chart composes a resolver bound to itself."""
        chart = SeriesChart(numeric_dataframe)

        assert isinstance(chart.color, ColorResolver)
        assert chart.color.color_accessor()(chart.data()[0], 0) == "col1"

    def test_custom_key_accessor(self, numeric_dataframe):
        """The resolver's default accessor follows the chart's key accessor."""
        chart = SeriesChart(numeric_dataframe)
        chart.set_key_accessor(lambda d, i=None: d["key"].upper())

        assert chart.color.color_accessor()(chart.data()[1], 1) == "COL2"


class TestSeriesColors:
    """Tests for color resolution through the chart."""

    def test_default_palette_by_theme(self, numeric_dataframe):
        """Series take the theme palette in column order."""
        light = SeriesChart(numeric_dataframe).series_colors()
        dark = SeriesChart(numeric_dataframe, theme="dark").series_colors()

        assert list(light.values()) == LIGHT_PALETTE[:3]
        assert list(dark.values()) == DARK_PALETTE[:3]

    def test_explicit_config_wins_over_theme(self, numeric_dataframe):
        """A supplied config provides the default colors."""
        cfg = ColorConfig().set_default_colors(["red", "green", "blue"])
        chart = SeriesChart(numeric_dataframe, theme="dark", config=cfg)

        assert list(chart.series_colors().values()) == ["red", "green", "blue"]

    def test_linear_colors_by_value(self, numeric_dataframe):
        """Lowest and highest means take the end stops of a linear scale."""
        chart = SeriesChart(numeric_dataframe)
        (
            chart.color.linear_colors(DIVERGING_STOPS)
            .set_color_accessor(lambda d, i=None: d["value"])
            .calculate_color_domain()
        )
        colors = chart.series_colors()

        assert colors["col3"] == DIVERGING_STOPS[0]
        assert colors["col2"] == DIVERGING_STOPS[1]
        assert colors["col1"] not in DIVERGING_STOPS


class TestCreateTraces:
    """Tests for SeriesChart.create_traces()."""

    def test_one_scattergl_trace_per_series(self, numeric_dataframe):
        """Generate one ScatterGL line trace per column."""
        traces = SeriesChart(numeric_dataframe).create_traces()

        assert len(traces) == 3
        for trace in traces:
            assert isinstance(trace, go.Scattergl)
            assert trace.mode == "lines"
            assert trace.connectgaps is False
        assert [t.name for t in traces] == ["col1", "col2", "col3"]

    def test_trace_colors_from_resolver(self, numeric_dataframe):
        """Trace line colors come from the resolver."""
        traces = SeriesChart(numeric_dataframe).create_traces()

        assert [t.line.color for t in traces] == LIGHT_PALETTE[:3]

    def test_color_calculator_overrides_traces(self, numeric_dataframe):
        """A calculator colors every trace."""
        chart = SeriesChart(numeric_dataframe)
        chart.color.set_color_calculator(lambda d, i: "black")

        assert {t.line.color for t in chart.create_traces()} == {"black"}


class TestCreateFigure:
    """Tests for SeriesChart.create_figure() and create_layout()."""

    def test_create_figure_with_data(self, numeric_dataframe):
        """Create complete figure with data and layout."""
        fig = SeriesChart(numeric_dataframe).create_figure()

        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 3

    def test_layout_theme_colors(self, numeric_dataframe):
        """Layout background follows the theme."""
        light = SeriesChart(numeric_dataframe).create_layout()
        dark = SeriesChart(numeric_dataframe, theme="dark").create_layout()

        assert light.paper_bgcolor == "#ffffff"
        assert dark.paper_bgcolor == "#1a1a1a"
        assert dark.plot_bgcolor == "#1a1a1a"

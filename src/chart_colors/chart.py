"""
Series Chart - Plotly line chart that colors its traces through a ColorResolver.

Each plottable numeric column of a DataFrame is one series. The chart's data
points are per-series summaries, so the resolver can color series either by
name (ordinal) or by summary value (linear / quantize).
"""

from typing import Any, Callable, Optional
import logging

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from .color_resolver import ColorResolver
from .config import ColorConfig, DEFAULT_THEME

logger = logging.getLogger(__name__)

THEME_COLORS = {
    "light": {"bg": "#ffffff", "grid": "#e0e0e0", "text": "#1a1a1a"},
    "dark": {"bg": "#1a1a1a", "grid": "#3a3a3a", "text": "#e8e8e8"},
}


def default_key_accessor(d: dict, i: Optional[int] = None) -> Any:
    """Series datum key: the column name."""
    return d["key"]


class SeriesChart:
    """
    Line chart over the numeric columns of a DataFrame.

    Args:
        df: Source DataFrame; the index is used as the x-axis.
        theme: 'light' or 'dark'; selects layout colors and, unless `config`
               is given, the default palette.
        config: Color configuration for the chart's resolver.

    Raises:
        ValueError: if no plottable numeric columns remain.
    """

    def __init__(
        self,
        df: pd.DataFrame,
        theme: str = DEFAULT_THEME,
        config: Optional[ColorConfig] = None,
    ):
        self.theme = theme
        self.df = _plottable_columns(df)
        self._key_accessor: Callable[..., Any] = default_key_accessor
        self._data = [
            {"key": col, "value": float(self.df[col].mean())}
            for col in self.df.columns
        ]
        self.color = ColorResolver(self, config if config is not None else ColorConfig(theme))

    def data(self) -> list[dict]:
        return list(self._data)

    def key_accessor(self) -> Callable[..., Any]:
        return self._key_accessor

    def set_key_accessor(self, key_accessor: Callable[..., Any]) -> "SeriesChart":
        self._key_accessor = key_accessor
        return self

    def series_colors(self) -> dict[str, Any]:
        """Map each series key to its resolved color."""
        return {
            d["key"]: self.color.get_color(d, i)
            for i, d in enumerate(self._data)
        }

    def create_traces(self, x_values: Optional[np.ndarray] = None) -> list[go.Scattergl]:
        """
        Create ScatterGL traces, one per series.

        Args:
            x_values: X-axis values; defaults to the DataFrame index.

        Returns:
            List of ScatterGL trace objects.
        """
        if x_values is None:
            x_values = self.df.index.to_numpy()

        traces = []
        for i, datum in enumerate(self._data):
            trace = go.Scattergl(
                x=x_values,
                y=self.df[datum["key"]].to_numpy(),
                mode="lines",
                name=str(datum["key"]),
                connectgaps=False,
                line=dict(color=self.color.get_color(datum, i)),
                hovertemplate="%{y:.2f}<extra>%{fullData.name}</extra>",
            )
            traces.append(trace)

        logger.debug("Created %d traces", len(traces))
        return traces

    def create_layout(self) -> go.Layout:
        """Create chart layout with theme-appropriate colors."""
        colors = THEME_COLORS.get(self.theme, THEME_COLORS["light"])

        return go.Layout(
            paper_bgcolor=colors["bg"],
            plot_bgcolor=colors["bg"],
            font=dict(color=colors["text"], family="Roboto, Helvetica, Arial, sans-serif"),
            margin=dict(l=60, r=200, t=60, b=60),
            legend=dict(
                orientation="v",
                yanchor="top",
                y=1,
                xanchor="left",
                x=1.02,
            ),
            xaxis=dict(
                gridcolor=colors["grid"],
                linecolor=colors["grid"],
                zerolinecolor=colors["grid"],
            ),
            yaxis=dict(
                gridcolor=colors["grid"],
                linecolor=colors["grid"],
                zerolinecolor=colors["grid"],
                autorange=True,
            ),
            hovermode="x unified",
        )

    def create_figure(self) -> go.Figure:
        """Create a complete figure with all traces."""
        return go.Figure(data=self.create_traces(), layout=self.create_layout())


def _plottable_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Keep numeric columns that hold at least one value.

    Raises:
        ValueError: if no such column remains.
    """
    numeric = df.select_dtypes(include="number")

    for col in df.columns.difference(numeric.columns):
        logger.info("Dropped non-numeric column: '%s' (dtype: %s)", col, df[col].dtype)

    all_nan = [col for col in numeric.columns if numeric[col].isna().all()]
    for col in all_nan:
        logger.warning("Dropped all-NaN column: '%s'", col)

    numeric = numeric.drop(columns=all_nan)
    if numeric.columns.empty:
        raise ValueError("No numeric columns remain after filtering")
    return numeric

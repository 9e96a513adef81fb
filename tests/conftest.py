"""Pytest fixtures for chart-colors tests."""

import tempfile
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from chart_colors.config import ColorConfig


class StubHost:
    """Minimal chart host: a record list keyed by one field."""

    def __init__(self, records, key="name"):
        self.records = records
        self._key_accessor = lambda d, i=None: d[key]

    def data(self):
        return self.records

    def key_accessor(self):
        return self._key_accessor


@pytest.fixture
def records():
    """Three data points with a categorical and a numeric field."""
    return [
        {"name": "a", "v": 1},
        {"name": "b", "v": 5},
        {"name": "c", "v": 3},
    ]


@pytest.fixture
def host(records):
    return StubHost(records)


@pytest.fixture
def light_config():
    """Fresh light-theme config, isolated from the shared module config."""
    return ColorConfig("light")


@pytest.fixture
def temp_csv_file():
    """Create a temporary CSV file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.csv', delete=False) as f:
        f.write("Timestamp,Value1,Value2,Label\n")
        f.write("2025-01-01T10:00:00Z,1.0,10.0,A\n")
        f.write("2025-01-01T10:01:00Z,2.0,20.0,B\n")
        f.write("2025-01-01T10:02:00Z,3.0,30.0,C\n")
        f.flush()
        temp_path = Path(f.name)
    yield temp_path
    temp_path.unlink(missing_ok=True)


@pytest.fixture
def numeric_dataframe():
    """DataFrame with all numeric columns."""
    return pd.DataFrame({
        "col1": [1.0, 2.0, 3.0, 4.0, 5.0],
        "col2": [10, 20, 30, 40, 50],
        "col3": [0.1, 0.2, 0.3, 0.4, 0.5],
    })


@pytest.fixture
def mixed_dataframe():
    """DataFrame with mixed numeric and non-numeric columns."""
    return pd.DataFrame({
        "numeric1": [1.0, 2.0, 3.0],
        "numeric2": [10, 20, 30],
        "string_col": ["a", "b", "c"],
        "date_col": pd.to_datetime(["2025-01-01", "2025-01-02", "2025-01-03"]),
    })


@pytest.fixture
def dataframe_with_nans():
    """DataFrame with various NaN patterns."""
    return pd.DataFrame({
        "no_nan": [1.0, 2.0, 3.0, 4.0],
        "some_nan": [1.0, np.nan, 3.0, np.nan],
        "all_nan": [np.nan, np.nan, np.nan, np.nan],
    })


@pytest.fixture
def make_host():
    """Factory for hosts over arbitrary records."""
    return StubHost

"""
Tests for data loaders and series building.

Run with:
    pytest code/tests/test_data.py -v
"""

import sys
from pathlib import Path

# Add code directory to path for imports
code_dir = Path(__file__).parent.parent
sys.path.insert(0, str(code_dir))

import numpy as np
import pandas as pd
import pytest

from data import CsvDataLoader, SampleDataLoader, build_series


@pytest.fixture
def tidy_df():
    return pd.DataFrame(
        {
            "series": ["b", "b", "a", "target"],
            "x": [0, 1, 0, 0],
            "y": [1.5, 2.5, 3.0, 40.0],
            "z": [10.0, np.nan, 30.0, 5.0],
        }
    )


class TestSampleDataLoader:
    """Test the SampleDataLoader."""

    def test_generates_tidy_frame(self):
        df = SampleDataLoader(series=["p", "q"], n_points=4, seed=1).load()

        assert list(df.columns) == ["series", "x", "y", "z"]
        assert len(df) == 8
        assert df["z"].between(10, 100).all()

    def test_same_seed_is_reproducible(self):
        first = SampleDataLoader(seed=5).load()
        second = SampleDataLoader(seed=5).load()

        pd.testing.assert_frame_equal(first, second)


class TestCsvDataLoader:
    """Test the CsvDataLoader."""

    def test_reads_csv(self, tmp_path, tidy_df):
        path = tmp_path / "points.csv"
        tidy_df.to_csv(path, index=False)

        df = CsvDataLoader(path).load()

        assert list(df.columns) == ["series", "x", "y", "z"]
        assert len(df) == 4


class TestBuildSeries:
    """Test build_series()."""

    def test_series_keep_first_appearance_order(self, tidy_df):
        series = build_series(tidy_df, "x", "y", "z")

        assert [s.id for s in series] == ["b", "a", "target"]
        assert [p.index for p in series[0].values] == [0, 1]

    def test_composite_values_with_z_column(self, tidy_df):
        series = build_series(tidy_df, "x", "y", "z")

        assert series[1].values[0].value == {"y": 3.0, "z": 30.0}
        assert series[1].values[0].x == 0

    def test_missing_z_becomes_none(self, tidy_df):
        series = build_series(tidy_df, "x", "y", "z")

        assert series[0].values[1].value == {"y": 2.5, "z": None}

    def test_plain_values_without_z_column(self, tidy_df):
        series = build_series(tidy_df, "x", "y")

        assert series[0].values[0].value == 1.5

    def test_bar_series_get_plain_values(self, tidy_df):
        series = build_series(tidy_df, "x", "y", "z", bar_series=["target"])

        target = series[2]
        assert target.type == "bar"
        assert target.values[0].value == 40.0
        assert series[0].type == "bubble"

    def test_missing_column_raises(self, tidy_df):
        with pytest.raises(KeyError, match="size"):
            build_series(tidy_df, "x", "y", "size")

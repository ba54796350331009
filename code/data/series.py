"""Conversion of tidy DataFrames into chart series."""

import pandas as pd

from core.models import DataPoint, Series


def _clean(value):
    """Convert pandas/numpy scalars to plain Python, NaN to None."""
    if pd.isna(value):
        return None
    return value.item() if hasattr(value, "item") else value


def build_series(
    df: pd.DataFrame,
    x_column: str,
    y_column: str,
    z_column: str | None = None,
    series_column: str = "series",
    bar_series: list[str] | None = None,
) -> list[Series]:
    """
    Group a DataFrame into Series of DataPoints.

    Series keep the order in which they first appear. When ``z_column`` is
    given, point values are composites ``{"y": ..., "z": ...}``; otherwise
    the y value is used directly (it then also drives the bubble size).
    Bar-type series always get plain y values.

    Args:
        df: DataFrame with one row per point
        x_column: Column for the x position
        y_column: Column for the y position
        z_column: Column for the bubble size (None/"" for plain bubble mode)
        series_column: Column identifying the series of each row
        bar_series: Series ids to mark as bar-type

    Returns:
        List of Series

    Raises:
        KeyError: If a required column is missing
    """
    required = [series_column, x_column, y_column] + ([z_column] if z_column else [])
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise KeyError(f"Missing columns: {missing}")

    bar_series = set(bar_series or [])
    result = []
    for series_id, group in df.groupby(series_column, sort=False):
        series_id = str(series_id)
        points = []
        for index, row in enumerate(group.to_dict("records")):
            y = _clean(row[y_column])
            if z_column and series_id not in bar_series:
                value = {"y": y, "z": _clean(row[z_column])}
            else:
                value = y
            points.append(
                DataPoint(id=series_id, value=value, x=_clean(row[x_column]), index=index)
            )
        result.append(
            Series(
                id=series_id,
                values=points,
                type="bar" if series_id in bar_series else "bubble",
            )
        )
    return result

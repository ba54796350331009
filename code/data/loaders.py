"""
Data loader classes for the Bubble Compare Explorer.

This module provides abstract and concrete data loader implementations
returning tidy DataFrames (one row per point, one column per dimension).
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

import numpy as np
import pandas as pd
import panel as pn

logger = logging.getLogger(__name__)

# Cache settings
CACHE_MAX_ITEMS = 20
CACHE_POLICY = "LRU"
CACHE_TTL = 3600  # 1 hour TTL so edited CSV files are picked up


class DataLoader(ABC):
    """
    Abstract base class for data loaders.

    Each dataset should implement this interface so the app can load it
    without knowing where the data comes from.
    """

    _load_cached: object | None = None

    @abstractmethod
    def load(self) -> pd.DataFrame:
        """
        Load the dataset.

        Returns:
            DataFrame with one row per data point
        """
        pass

    def clear_cache(self) -> None:
        """Clear the cache for this loader (if applicable)."""
        load_cached = getattr(self, "_load_cached", None)
        if load_cached is not None and hasattr(load_cached, "clear"):
            load_cached.clear()


class SampleDataLoader(DataLoader):
    """
    Generates a reproducible random dataset.

    Each series gets ``n_points`` bubbles with x in ``[0, n_points)``,
    y in ``[0, 100)`` and a size column ``z`` drawn from ``z_range``.
    """

    def __init__(
        self,
        series: list[str] | None = None,
        n_points: int = 8,
        z_range: tuple[float, float] = (10, 100),
        seed: int = 0,
    ):
        """
        Initialize the sample loader.

        Args:
            series: Series names (defaults to data1..data3)
            n_points: Points per series
            z_range: Range of the generated size values
            seed: Random seed
        """
        self.series = series or ["data1", "data2", "data3"]
        self.n_points = n_points
        self.z_range = z_range
        self.seed = seed

    def load(self) -> pd.DataFrame:
        """Generate the dataset (cached)."""
        return self._load_cached(
            tuple(self.series), self.n_points, tuple(self.z_range), self.seed
        )

    @staticmethod
    @pn.cache(max_items=CACHE_MAX_ITEMS, policy=CACHE_POLICY, ttl=CACHE_TTL)
    def _load_cached(
        series: tuple[str, ...],
        n_points: int,
        z_range: tuple[float, float],
        seed: int,
    ) -> pd.DataFrame:
        """Cached generation - memoized based on settings."""
        rng = np.random.default_rng(seed)
        frames = []
        for name in series:
            frames.append(
                pd.DataFrame(
                    {
                        "series": name,
                        "x": np.arange(n_points),
                        "y": rng.uniform(0, 100, n_points).round(1),
                        "z": rng.uniform(*z_range, n_points).round(1),
                    }
                )
            )
        df = pd.concat(frames, ignore_index=True)
        logger.info(f"Generated {len(df)} sample points in {len(series)} series")
        return df


class CsvDataLoader(DataLoader):
    """Loads a tidy CSV file."""

    def __init__(self, path: str | Path):
        """
        Initialize the CSV loader.

        Args:
            path: Path of the CSV file
        """
        self.path = Path(path)

    def load(self) -> pd.DataFrame:
        """Read the CSV file (cached)."""
        return self._load_cached(str(self.path))

    @staticmethod
    @pn.cache(max_items=CACHE_MAX_ITEMS, policy=CACHE_POLICY, ttl=CACHE_TTL)
    def _load_cached(path: str) -> pd.DataFrame:
        """Cached CSV reading - memoized based on path."""
        df = pd.read_csv(path)
        logger.info(f"Read {len(df)} rows from {path}")
        return df

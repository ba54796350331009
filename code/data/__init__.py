"""
Data layer for the Bubble Compare Explorer.

This package provides data loading and DataFrame-to-series conversion.
"""

from .loaders import (
    CACHE_MAX_ITEMS,
    CACHE_POLICY,
    CACHE_TTL,
    CsvDataLoader,
    DataLoader,
    SampleDataLoader,
)
from .series import build_series

__all__ = [
    "DataLoader",
    "CsvDataLoader",
    "SampleDataLoader",
    "build_series",
    "CACHE_MAX_ITEMS",
    "CACHE_POLICY",
    "CACHE_TTL",
]

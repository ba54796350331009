"""
Configuration module for the Bubble Compare Explorer.

Submodules:
    - models: Configuration dataclasses (AppConfig, BubbleCompareConfig, etc.)
    - projects: Demo dataset configurations and registry

Note: DataLoader classes are in the `data` package.
"""

from data import CsvDataLoader, DataLoader, SampleDataLoader

from .models import AppConfig, BubbleChartConfig, BubbleCompareConfig
from .projects import (
    MARKET_COMPARISON_CONFIG,
    MIXED_BAR_CONFIG,
    PLAIN_BUBBLE_CONFIG,
    PROJECT_REGISTRY,
)

__all__ = [
    # Loaders
    "DataLoader",
    "CsvDataLoader",
    "SampleDataLoader",
    # Models
    "AppConfig",
    "BubbleChartConfig",
    "BubbleCompareConfig",
    # Projects
    "PROJECT_REGISTRY",
    "MARKET_COMPARISON_CONFIG",
    "MIXED_BAR_CONFIG",
    "PLAIN_BUBBLE_CONFIG",
]

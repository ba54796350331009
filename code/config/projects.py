"""
Demo dataset configurations for the Bubble Compare Explorer.

This module defines one configuration per dataset available in the app.
Add new datasets here to make them available in the project selector.
"""

from data import SampleDataLoader

from .models import AppConfig, BubbleChartConfig, BubbleCompareConfig


# =============================================================================
# Project Configurations
# =============================================================================

# Composite values: y position and bubble size come from different columns
MARKET_COMPARISON_CONFIG = AppConfig(
    data_loader=SampleDataLoader(
        series=["north", "south", "east", "west"],
        n_points=10,
        z_range=(5, 250),
        seed=7,
    ),
    bubble_compare=BubbleCompareConfig(min_r=11, max_r=74, expand_scale=1.1),
    bubble_chart=BubbleChartConfig(
        z_column="z",
        title="Revenue vs quarter, sized by volume",
    ),
)


# Plain bubble mode: the y value is also the bubble size
PLAIN_BUBBLE_CONFIG = AppConfig(
    app_title="Bubble Compare Explorer - Plain Bubbles",
    doc_title="Bubble Compare Explorer - Plain Bubbles",
    data_loader=SampleDataLoader(seed=3),
    bubble_compare=BubbleCompareConfig(min_r=5, max_r=40, expand_scale=1.3),
    bubble_chart=BubbleChartConfig(title="Value vs index"),
)


# Mixed chart: the "target" series is drawn as bars and never hit-tested
MIXED_BAR_CONFIG = AppConfig(
    app_title="Bubble Compare Explorer - Bubbles and Bars",
    doc_title="Bubble Compare Explorer - Bubbles and Bars",
    data_loader=SampleDataLoader(series=["target", "actual", "forecast"], seed=11),
    bubble_compare=BubbleCompareConfig(min_r=8, max_r=50, expand_scale=1.2),
    bubble_chart=BubbleChartConfig(
        z_column="z",
        bar_series=["target"],
        title="Actual and forecast against target",
    ),
)


# =============================================================================
# Project Registry
# =============================================================================
# Maps display names to (dataset key, AppConfig) tuples

PROJECT_REGISTRY: dict[str, tuple[str, AppConfig]] = {
    "Market Comparison": ("market-comparison", MARKET_COMPARISON_CONFIG),
    "Plain Bubbles": ("plain-bubbles", PLAIN_BUBBLE_CONFIG),
    "Bubbles and Bars": ("bubbles-and-bars", MIXED_BAR_CONFIG),
}

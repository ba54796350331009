"""
Configuration dataclasses for the Bubble Compare Explorer.

This module provides typed configuration classes for the chart, the
bubble-compare plugin and the app.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from data import DataLoader

logger = logging.getLogger(__name__)

# camelCase option names accepted by BubbleCompareConfig.from_options
_OPTION_ALIASES = {
    "minR": "min_r",
    "maxR": "max_r",
    "expandScale": "expand_scale",
}


@dataclass
class BubbleCompareConfig:
    """
    Radius options for the bubble-compare plugin.

    Values are not validated: ``min_r > max_r`` inverts the visual range.
    """

    # Radius for missing/zero values and floor of the mapped range (pixels)
    min_r: float = 11
    # Ceiling of the mapped range (pixels)
    max_r: float = 74
    # Multiplier applied to a focused bubble's radius
    expand_scale: float = 1

    def __post_init__(self):
        if self.min_r > self.max_r:
            logger.warning(
                f"min_r ({self.min_r}) is larger than max_r ({self.max_r}); "
                "bubble sizes will be inverted"
            )

    @classmethod
    def from_options(
        cls, options: "BubbleCompareConfig | Mapping[str, Any] | None"
    ) -> "BubbleCompareConfig":
        """
        Build a config from plugin options.

        Args:
            options: Existing config, a mapping (camelCase or snake_case keys) or None

        Returns:
            BubbleCompareConfig instance
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options

        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in known:
                kwargs[name] = value
            else:
                logger.warning(f"Ignoring unknown bubble compare option '{key}'")
        return cls(**kwargs)


@dataclass
class BubbleChartConfig:
    """Configuration for the bubble chart component."""

    # Column names in the loaded DataFrame
    x_column: str = "x"
    y_column: str = "y"
    # Empty string = plain bubble mode (the y value is also the size)
    z_column: str = ""
    series_column: str = "series"

    # Series drawn as bars instead of bubbles
    bar_series: list[str] = field(default_factory=list)
    bar_width: float = 0.6

    # Key of the size component inside composite values
    z_key: str = "z"

    # Used when no plugin replaces the chart functions
    default_radius: float = 10
    sensitivity: float = 10

    cursor_style: str = "pointer"
    palette: str = "Category10"
    default_alpha: float = 0.6

    # Plot dimensions
    width: int = 700
    height: int = 500
    # Fraction of the data span added on each side of the axes
    padding: float = 0.1

    title: str = ""


@dataclass
class AppConfig:
    """
    Main application configuration.

    One AppConfig per demo dataset in the project registry.
    """

    # App metadata
    app_title: str = "Bubble Compare Explorer"
    doc_title: str = "Bubble Compare Explorer"

    # Data loader - implements the DataLoader interface
    data_loader: "DataLoader | None" = None

    # Sub-configurations
    bubble_compare: BubbleCompareConfig = field(default_factory=BubbleCompareConfig)
    bubble_chart: BubbleChartConfig = field(default_factory=BubbleChartConfig)

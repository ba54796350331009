"""
Bubble compare plugin.

Compares data three ways: x axis, y axis and bubble size. Bubble radii are
scaled against the whole dataset, hovering enlarges the bubble under the
pointer and brings it above overlapping series.

Usage:
    chart = BubbleChart(data_holder, config)
    chart.load_plugin(BubbleCompare(BubbleCompareConfig(min_r=11, max_r=74, expand_scale=1.1)))
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from functools import partial
from typing import Any

from config.models import BubbleCompareConfig

from .focus import FocusController
from .models import DataPoint
from .plugin import Plugin
from .proximity import find_closest
from .radius import dataset_extent, get_z_value, scale_radius

logger = logging.getLogger(__name__)


class BubbleCompare(Plugin):
    """
    Plugin replacing a chart's ``get_bubble_r``, ``find_closest`` and
    ``point_expanded_r`` functions.

    Options may be a BubbleCompareConfig or a mapping using either
    ``minR``/``maxR``/``expandScale`` or snake_case keys.
    """

    version = "0.0.1"

    def __init__(self, options: BubbleCompareConfig | dict | None = None):
        super().__init__(BubbleCompareConfig.from_options(options))

    def bind(self, host) -> dict[str, Callable[..., Any]]:
        functions = {
            "find_closest": partial(self.find_closest, host=host),
            "get_bubble_r": partial(self.get_bubble_r, host=host),
            "point_expanded_r": partial(self.point_expanded_r, host=host),
        }
        host.register_functions(functions)
        logger.debug(f"BubbleCompare {self.version} bound with {self.options}")
        return functions

    def get_bubble_r(self, d: DataPoint, host) -> float:
        """Radius of the bubble for ``d``, scaled against the dataset extent."""
        cur_val = get_z_value(d, host)
        # Same check as scale_radius, done here to skip the extent scan
        if not cur_val:
            return self.options.min_r

        extent = dataset_extent(host.data_targets, lambda p: get_z_value(p, host))
        return scale_radius(cur_val, extent, self.options.min_r, self.options.max_r)

    def find_closest(
        self,
        values: Iterable[DataPoint | None],
        pos: Sequence[float],
        host,
    ) -> DataPoint | None:
        """Bubble under the pointer, or None."""
        return find_closest(values, pos, host, partial(self.get_bubble_r, host=host))

    def point_expanded_r(self, d: DataPoint, host) -> float:
        """Radius of the focused bubble; also raises its layer and sets the cursor."""
        controller = FocusController(
            host,
            partial(self.get_bubble_r, host=host),
            expand_scale=self.options.expand_scale,
        )
        return controller.expanded_radius(d)

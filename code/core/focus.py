"""
Focus handling for a hovered bubble.

Focusing a bubble enlarges it by ``expand_scale``, brings its layer above
overlapping series and switches the chart cursor to a clickable style.
Side effects are fire-and-forget: nothing here checks that they applied.
"""

import logging
from collections.abc import Callable

from .models import DataPoint, Raisable

logger = logging.getLogger(__name__)

CLICKABLE_CURSOR = "pointer"


def raise_focused_layer(point: DataPoint) -> bool:
    """Bring the point's layer to the front if its node supports it."""
    node = point.node
    if isinstance(node, Raisable):
        node.bring_to_front()
        return True
    return False


class FocusController:
    """
    Computes the focused radius and issues the focus side effects.

    Args:
        host: ChartHost whose cursor is updated
        radius_of: Function giving a point's base bubble radius
        expand_scale: Multiplier applied to the base radius
        cursor: Cursor style set while a bubble is focused
    """

    def __init__(
        self,
        host,
        radius_of: Callable[[DataPoint], float],
        expand_scale: float = 1,
        cursor: str = CLICKABLE_CURSOR,
    ):
        self.host = host
        self.radius_of = radius_of
        self.expand_scale = expand_scale
        self.cursor = cursor

    def expanded_radius(self, point: DataPoint) -> float:
        """Return the enlarged radius of ``point`` and apply focus effects."""
        base_r = self.radius_of(point)

        if raise_focused_layer(point):
            logger.debug(f"Raised layer of series '{point.id}'")
        self.host.set_cursor(self.cursor)

        return base_r * self.expand_scale

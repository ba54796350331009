"""
Bubble radius mapping.

Maps a point's third-dimension (z) value to a pixel radius in
``[min_r, max_r]``, normalised against the dataset's extent. The extent is
sampled from the *first* point of every series only, and the value is
divided by the extent's maximum alone; the minimum is only used to detect
a zero-spread dataset.
"""

from collections.abc import Callable, Iterable
from typing import Any

from .models import DataPoint, Series

# Seeds for the extent scan; an empty dataset yields (EXTENT_MIN_SEED, 0)
EXTENT_MIN_SEED = 10000
EXTENT_MAX_SEED = 0


def get_z_value(point: DataPoint, host) -> Any:
    """Return the value that drives the point's bubble size."""
    if host.is_bubble_z_type(point):
        return host.get_bubble_z_data(point.value, "z")
    return point.value


def dataset_extent(
    series: Iterable[Series],
    z_getter: Callable[[DataPoint], Any],
) -> tuple[float, float]:
    """
    Compute ``(min, max)`` of the z value over each series' first point.

    Series without points are skipped. A first point without a z value
    counts as 0, which pulls the minimum down to 0.

    Args:
        series: Series of the chart (host's data targets)
        z_getter: Function extracting the z value from a point

    Returns:
        Tuple of (min, max)
    """
    lo, hi = EXTENT_MIN_SEED, EXTENT_MAX_SEED
    for target in series:
        first = target.first
        if first is None:
            continue
        val = z_getter(first)
        if val is None:
            val = 0
        lo = min(lo, val)
        hi = max(hi, val)
    return lo, hi


def scale_radius(
    cur_val: Any,
    extent: tuple[float, float],
    min_r: float,
    max_r: float,
) -> float:
    """
    Scale a z value into a radius.

    Args:
        cur_val: The point's z value
        extent: ``(min, max)`` from :func:`dataset_extent`
        min_r: Radius for missing/zero values and floor of the range
        max_r: Ceiling of the range

    Returns:
        Radius in pixels
    """
    if not cur_val:
        return min_r

    lo, hi = extent
    if lo > 0 and hi == lo:
        # All series share one positive value: nothing to compare against
        size = 0
    elif hi == 0:
        # Floor instead of an infinite radius from dividing by zero
        size = 0
    else:
        size = cur_val / hi

    # abs() keeps negative inputs from producing negative radii
    return abs(size) * (max_r - min_r) + min_r

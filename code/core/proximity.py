"""Pointer hit-testing against rendered bubbles."""

from collections.abc import Callable, Iterable, Sequence

from .models import NO_MATCH, DataPoint


def find_closest(
    candidates: Iterable[DataPoint | None],
    pos: Sequence[float],
    host,
    radius_of: Callable[[DataPoint], float],
) -> DataPoint | None:
    """
    Find the bubble under the pointer.

    Missing entries and points of bar-type series are ignored. Every
    remaining point whose distance to ``pos`` is strictly less than its own
    radius replaces the current match, so when bubbles overlap the *last*
    hit in iteration order wins, not the one nearest to the pointer.

    Args:
        candidates: Points to test, in drawing order
        pos: Pointer position in screen pixels
        host: ChartHost providing ``is_bar_type`` and ``dist``
        radius_of: Function giving a point's bubble radius

    Returns:
        The matched point, or ``NO_MATCH`` (None)
    """
    eligible = [v for v in candidates if v is not None and not host.is_bar_type(v.id)]

    closest = NO_MATCH
    for point in eligible:
        if host.dist(point, pos) < radius_of(point):
            closest = point
    return closest

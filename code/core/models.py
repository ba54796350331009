"""
Data structures shared by the bubble-compare core and its host chart.

A chart is a list of ``Series``; each series holds ``DataPoint`` objects.
A point's ``value`` is either a plain number (bubble mode, where the value
is both the y position and the bubble size) or a composite carrying an
explicit z component (``{"y": 3, "z": 40}`` or ``[3, 40]``).
"""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

# Result of a hit-test that matched nothing
NO_MATCH = None


@runtime_checkable
class Raisable(Protocol):
    """A rendered visual handle that can be brought above its siblings."""

    def bring_to_front(self) -> None: ...


@dataclass
class DataPoint:
    """One observation in one series."""

    id: str
    value: Any
    x: Any = None
    index: int = 0
    # Opaque handle to the rendered element, owned by the host
    node: Any = field(default=None, repr=False, compare=False)


@dataclass
class Series:
    """A named sequence of data points (a "data target")."""

    id: str
    values: list[DataPoint] = field(default_factory=list)
    type: str = "bubble"

    @property
    def first(self) -> DataPoint | None:
        return self.values[0] if self.values else None

"""
Host chart contract consumed by the bubble-compare core.

The core never talks to Bokeh or Panel directly. Everything it needs from
the chart that draws the bubbles (type classification, z extraction,
distance, dataset access, cursor styling) goes through this interface.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any

from .models import DataPoint, Series


class ChartHost(ABC):
    """
    Abstract base class for charts that host bubble-compare.

    Besides the hooks, a host owns a named function table. Rendering code
    looks operations up by name (``call("get_bubble_r", point)``) so a
    plugin can replace them without the host knowing about the plugin.
    """

    def __init__(self):
        self._functions: dict[str, Callable[..., Any]] = {}

    # ------------------------------------------------------------------
    # Function table
    # ------------------------------------------------------------------

    def register_functions(self, functions: dict[str, Callable[..., Any]]) -> None:
        """Add or replace entries of the host's function table."""
        self._functions.update(functions)

    def has_function(self, name: str) -> bool:
        return name in self._functions

    def call(self, name: str, *args, **kwargs) -> Any:
        """
        Invoke a function from the table by name.

        Raises:
            KeyError: If nothing is registered under ``name``
        """
        try:
            func = self._functions[name]
        except KeyError:
            raise KeyError(f"No chart function registered as '{name}'") from None
        return func(*args, **kwargs)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def is_bar_type(self, series_id: str) -> bool:
        """Whether the series is drawn as bars (never hit-tested as a bubble)."""

    @abstractmethod
    def is_bubble_z_type(self, point: DataPoint) -> bool:
        """Whether the point's value is a composite carrying a z component."""

    @abstractmethod
    def get_bubble_z_data(self, value: Any, key: str) -> Any:
        """Extract the ``key`` component ("y" or "z") from a composite value."""

    @abstractmethod
    def dist(self, point: DataPoint, pos: Sequence[float]) -> float:
        """Screen distance between a point's rendered position and ``pos``."""

    @property
    @abstractmethod
    def data_targets(self) -> list[Series]:
        """All series currently in the chart."""

    @abstractmethod
    def set_cursor(self, style: str) -> None:
        """Set the cursor style on the interactive capture surface."""

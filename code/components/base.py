"""Common base for the explorer's Panel components."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import panel as pn

if TYPE_CHECKING:
    from config import AppConfig
    from core.base_app import DataHolder


class BaseComponent(ABC):
    """
    Panel component bound to the app's DataHolder.

    Components render from ``data_holder.df`` and publish pointer focus
    through ``focused_point``/``focused_radius``. ``config`` is the selected
    dataset's AppConfig; the app swaps it when the dataset changes.
    """

    def __init__(self, data_holder: "DataHolder", config: "AppConfig"):
        self.data_holder = data_holder
        self.config = config

    @abstractmethod
    def create(self) -> pn.viewable.Viewable:
        """Build the component's Panel layout."""

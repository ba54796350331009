"""
Base application class with DataHolder pattern for reactive state management.

This module provides the foundational patterns for building Panel apps with:
- Centralized reactive state via DataHolder
- Template layout helpers
"""

import logging

import pandas as pd
import panel as pn
import param

logger = logging.getLogger(__name__)


class DataHolder(param.Parameterized):
    """
    Centralized holder for reactive application state.

    Components can watch parameters on this object to react to changes.

    Attributes:
        df: The loaded DataFrame (one row per data point)
        focused_point: The bubble currently under the pointer, or None
        focused_radius: Radius the focused bubble is drawn with
        is_loaded: Whether data has been loaded
        load_status: Status message from data loading
    """

    df = param.DataFrame(default=pd.DataFrame(), doc="Loaded DataFrame")
    focused_point = param.Parameter(default=None, doc="Data point under the pointer")
    focused_radius = param.Number(default=None, allow_None=True, doc="Radius of the focused bubble")
    is_loaded = param.Boolean(default=False, doc="Whether data has been loaded")
    load_status = param.String(default="", doc="Status message from data loading")


class BaseApp(param.Parameterized):
    """
    Base class for Panel visualization apps.

    Subclasses should:
    1. Override `load_data()` to fetch the dataset
    2. Override `create_main_content()` to build the UI
    3. Optionally override `create_sidebar()`
    """

    def __init__(self, **params):
        super().__init__(**params)
        self.data_holder = DataHolder()
        self._components: dict = {}

    def load_data(self) -> str:
        """
        Load the dataset into the DataHolder. Override in subclass.

        Returns:
            Status message
        """
        raise NotImplementedError("Subclass must implement load_data()")

    def create_main_content(self) -> pn.viewable.Viewable:
        """
        Create the main content layout. Override in subclass.

        Returns:
            Panel viewable object
        """
        raise NotImplementedError("Subclass must implement create_main_content()")

    def create_sidebar(self) -> pn.Column:
        """
        Create sidebar content. Override to customize.

        Returns:
            Panel Column for the sidebar
        """
        return pn.Column(
            pn.pane.Markdown("### Record Count"),
            pn.bind(
                lambda df: pn.pane.Markdown(
                    f"**{len(df) if df is not None else 0}** points",
                    css_classes=["alert", "alert-info", "p-2"],
                ),
                df=self.data_holder.param.df,
            ),
        )

    def main_layout(self, title: str = "Bubble Compare Explorer") -> pn.template.BootstrapTemplate:
        """
        Construct the full application layout.

        Args:
            title: Application title

        Returns:
            BootstrapTemplate ready to serve
        """
        template = pn.template.BootstrapTemplate(
            title=title,
            main=[self.create_main_content()],
            sidebar=[self.create_sidebar()],
            theme="default",
        )
        template.sidebar_width = 260
        return template

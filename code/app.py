"""
Bubble Compare Explorer

A Panel app comparing series three ways: x axis, y axis and bubble size.

To run:
    panel serve code/app.py --dev --show
"""

import dataclasses
import logging

import pandas as pd
import panel as pn
import param
from bokeh.io import curdoc

from components import BubbleChart, FocusPanel
from config import PROJECT_REGISTRY, AppConfig
from core.base_app import BaseApp
from core.bubble_compare import BubbleCompare

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

pn.extension()


class BubbleCompareApp(BaseApp):
    """
    Panel app for exploring the demo datasets as bubble charts.

    Adds to BaseApp:
    - Dataset selection via dropdown (loads data on selection)
    - The bubble chart with the bubble-compare plugin bound
    - An expand-scale slider re-binding the plugin with new options
    """

    current_config = param.ClassSelector(
        class_=AppConfig, default=None, doc="Current dataset config"
    )

    def __init__(self, **params):
        super().__init__(**params)

        first_project = list(PROJECT_REGISTRY.keys())[0]
        self.current_config = PROJECT_REGISTRY[first_project][1]

        self.project_selector = pn.widgets.Select(
            name="Select Dataset",
            options=list(PROJECT_REGISTRY.keys()),
            value=first_project,
            sizing_mode="stretch_width",
        )
        self.expand_slider = pn.widgets.FloatSlider(
            name="Expand Scale",
            start=1.0,
            end=2.0,
            step=0.05,
            value=self.current_config.bubble_compare.expand_scale,
            sizing_mode="stretch_width",
        )

        self.project_selector.param.watch(self._on_project_change, "value")
        self.expand_slider.param.watch(self._on_expand_scale_change, "value")

        self._init_components()
        self.load_data()

    def _init_components(self):
        """Create components for the current config."""
        self._components["bubble_chart"] = BubbleChart(
            self.data_holder,
            self.current_config,
            plugins=[BubbleCompare(self.current_config.bubble_compare)],
        )
        self._components["focus_panel"] = FocusPanel(self.data_holder, self.current_config)

    def _on_project_change(self, event):
        """Switch dataset and reload."""
        _, config = PROJECT_REGISTRY[event.new]
        self.current_config = config
        for component in self._components.values():
            component.config = config

        chart = self._components["bubble_chart"]
        chart.load_plugin(BubbleCompare(config.bubble_compare))
        self.expand_slider.value = config.bubble_compare.expand_scale

        logger.info(f"Dataset changed to: {event.new}")
        self.load_data()

    def _on_expand_scale_change(self, event):
        """Re-bind the plugin with the new expand scale."""
        options = dataclasses.replace(
            self.current_config.bubble_compare, expand_scale=float(event.new)
        )
        self._components["bubble_chart"].load_plugin(BubbleCompare(options))

    def load_data(self) -> str:
        """Load the selected dataset into the DataHolder."""
        loader = self.current_config.data_loader
        if loader is None:
            return "Error: No data loader configured"

        try:
            self.data_holder.load_status = "Loading..."
            df = loader.load()
        except Exception as e:
            logger.error(f"Failed to load data: {e}")
            self.data_holder.df = pd.DataFrame()
            self.data_holder.is_loaded = False
            self.data_holder.load_status = f"Error: {e}"
            return f"Error: {e}"

        if df is None or df.empty:
            logger.warning("Loader returned no data")
            self.data_holder.df = pd.DataFrame()
            self.data_holder.is_loaded = False
            self.data_holder.load_status = "No data returned"
            return "No data returned"

        logger.info(f"Loaded {len(df)} points")
        self.data_holder.df = df
        self.data_holder.is_loaded = True
        self.data_holder.load_status = f"Loaded {len(df)} points"
        return self.data_holder.load_status

    def create_main_content(self) -> pn.viewable.Viewable:
        return pn.Column(
            pn.bind(
                lambda status: pn.pane.Markdown(
                    f"**{status}**", css_classes=["alert", "alert-success", "p-2"]
                ),
                status=self.data_holder.param.load_status,
            ),
            self._components["bubble_chart"].create(),
            sizing_mode="stretch_width",
        )

    def create_sidebar(self) -> pn.Column:
        return pn.Column(
            pn.pane.Markdown("### Dataset"),
            self.project_selector,
            self.expand_slider,
            pn.layout.Divider(),
            self._components["focus_panel"].create(),
            pn.layout.Divider(),
            super().create_sidebar(),
            sizing_mode="stretch_width",
        )


# =============================================================================
# App Initialization
# =============================================================================

curdoc = curdoc()

app = BubbleCompareApp()
curdoc.title = app.current_config.doc_title
layout = app.main_layout(title=app.current_config.app_title)
layout.servable()

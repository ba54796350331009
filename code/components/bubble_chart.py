"""
Bubble chart component hosting the bubble-compare plugin.

Provides:
- One Bokeh renderer per series (bubbles, or bars for bar-type series)
- The ChartHost hooks (type classification, z extraction, distance, cursor)
- A named function table the plugin can override
- Pointer tracking: hovered bubble is enlarged and raised above its siblings
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd
import panel as pn
from bokeh.events import MouseLeave, MouseMove
from bokeh.models import ColumnDataSource, Range1d
from bokeh.palettes import all_palettes
from bokeh.plotting import figure

from core.host import ChartHost
from core.models import DataPoint, Series
from core.plugin import Plugin
from data import build_series

from .base import BaseComponent

if TYPE_CHECKING:
    from config import AppConfig
    from core.base_app import DataHolder

logger = logging.getLogger(__name__)

DEFAULT_CURSOR = "default"


@dataclass
class PixelFrame:
    """Linear mapping from data space to screen pixels of the plot frame."""

    x_start: float
    x_end: float
    y_start: float
    y_end: float
    width: float
    height: float

    def to_screen(self, x: float, y: float) -> tuple[float, float]:
        """Screen position of a data coordinate (origin at the frame's top-left)."""
        sx = (x - self.x_start) / (self.x_end - self.x_start) * self.width
        sy = (self.y_end - y) / (self.y_end - self.y_start) * self.height
        return sx, sy


class LayerNode:
    """Handle to one series' renderer; raising it redraws the series on top."""

    def __init__(self, fig, renderer):
        self.figure = fig
        self.renderer = renderer

    def bring_to_front(self) -> None:
        renderers = list(self.figure.renderers)
        others = [r for r in renderers if r is not self.renderer]
        if len(others) == len(renderers) or renderers[-1] is self.renderer:
            return
        self.figure.renderers = others + [self.renderer]


def _padded_range(values: Sequence[float], padding: float) -> tuple[float, float]:
    """Min/max of ``values`` widened by ``padding`` of the span on each side."""
    arr = np.asarray([v for v in values if v is not None], dtype=float)
    arr = arr[~np.isnan(arr)]
    if arr.size == 0:
        return 0.0, 1.0
    lo, hi = float(arr.min()), float(arr.max())
    span = hi - lo
    if span == 0:
        return lo - 1, hi + 1
    return lo - span * padding, hi + span * padding


def _series_colors(palette_name: str, n_series: int) -> list[str]:
    """Pick one color per series, cycling through the largest palette size."""
    palette_dict = all_palettes.get(palette_name, all_palettes["Category10"])
    palette = palette_dict[max(palette_dict.keys())]
    return [palette[i % len(palette)] for i in range(n_series)]


class BubbleChart(BaseComponent, ChartHost):
    """
    Interactive bubble chart.

    Sizes, hit-testing and focus go through the function table
    (``get_bubble_r``, ``find_closest``, ``point_expanded_r``). Without a
    plugin the chart draws every bubble at ``default_radius`` and focuses
    the nearest bubble within ``sensitivity`` pixels.
    """

    def __init__(
        self,
        data_holder: "DataHolder",
        config: "AppConfig",
        plugins: Sequence[Plugin] = (),
    ):
        """
        Initialize the bubble chart.

        Args:
            data_holder: Shared state container for reactive updates
            config: Current dataset configuration
            plugins: Plugins to bind, in order
        """
        BaseComponent.__init__(self, data_holder, config)
        ChartHost.__init__(self)

        self.series: list[Series] = []
        self.figure = None
        self.cursor = DEFAULT_CURSOR
        self.plugins: list[Plugin] = []
        self._sources: dict[str, ColumnDataSource] = {}
        self._renderers: dict[str, Any] = {}
        self._pane = None
        self._focused: DataPoint | None = None

        self.register_functions(
            {
                "get_bubble_r": self._default_bubble_r,
                "find_closest": self._default_find_closest,
                "point_expanded_r": self._default_expanded_r,
            }
        )
        for plugin in plugins:
            self.load_plugin(plugin)

    def load_plugin(self, plugin: Plugin) -> None:
        """Bind a plugin so its functions replace the chart's."""
        names = plugin.bind(self)
        self.plugins.append(plugin)
        logger.info(f"Loaded {type(plugin).__name__} ({', '.join(names)})")

    # ------------------------------------------------------------------
    # Default chart functions
    # ------------------------------------------------------------------

    def _default_bubble_r(self, d: DataPoint) -> float:
        return self.config.bubble_chart.default_radius

    def _default_expanded_r(self, d: DataPoint) -> float:
        return self.call("get_bubble_r", d)

    def _default_find_closest(self, values, pos) -> DataPoint | None:
        closest = None
        min_dist = self.config.bubble_chart.sensitivity
        for v in values:
            if v is None or self.is_bar_type(v.id):
                continue
            d = self.dist(v, pos)
            if d < min_dist:
                closest, min_dist = v, d
        return closest

    # ------------------------------------------------------------------
    # ChartHost hooks
    # ------------------------------------------------------------------

    @property
    def data_targets(self) -> list[Series]:
        return self.series

    def is_bar_type(self, series_id: str) -> bool:
        if series_id in self.config.bubble_chart.bar_series:
            return True
        return any(s.id == series_id and s.type == "bar" for s in self.series)

    def is_bubble_z_type(self, point: DataPoint) -> bool:
        if self.is_bar_type(point.id):
            return False
        value = point.value
        if isinstance(value, dict):
            return "z" in value or "y" in value
        return isinstance(value, (list, tuple)) and len(value) >= 2

    def get_bubble_z_data(self, value: Any, key: str) -> Any:
        if isinstance(value, dict):
            return value.get(key)
        return value[0 if key == "y" else 1]

    def y_value(self, point: DataPoint) -> Any:
        """Vertical data coordinate of a point."""
        if isinstance(point.value, (dict, list, tuple)):
            return self.get_bubble_z_data(point.value, "y")
        return point.value

    def dist(self, point: DataPoint, pos: Sequence[float]) -> float:
        y = self.y_value(point)
        if point.x is None or y is None:
            return float("inf")
        sx, sy = self.pixel_frame().to_screen(point.x, y)
        return float(np.hypot(sx - pos[0], sy - pos[1]))

    def set_cursor(self, style: str) -> None:
        self.cursor = style
        if self._pane is not None:
            self._pane.styles = {**(self._pane.styles or {}), "cursor": style}

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def pixel_frame(self) -> PixelFrame:
        """
        Current data-to-screen mapping.

        Uses the frame size reported by the browser once the plot is
        rendered, and the configured plot size before that.
        """
        chart_config = self.config.bubble_chart
        p = self.figure
        if p is None:
            return PixelFrame(0, 1, 0, 1, chart_config.width, chart_config.height)
        width = getattr(p, "inner_width", None) or chart_config.width
        height = getattr(p, "inner_height", None) or chart_config.height
        return PixelFrame(
            p.x_range.start, p.x_range.end, p.y_range.start, p.y_range.end, width, height
        )

    # ------------------------------------------------------------------
    # Data and rendering
    # ------------------------------------------------------------------

    def candidates(self) -> list[DataPoint]:
        """All points of all series, in drawing order."""
        return [point for s in self.series for point in s.values]

    def set_series(self, series: list[Series]) -> None:
        """Replace the chart's data and rebuild the figure."""
        self.series = series
        self._focused = None
        self.data_holder.focused_point = None
        self.data_holder.focused_radius = None
        self.figure = self._create_figure() if series else None

    def _bubble_size(self, point: DataPoint, radius: float | None = None) -> float:
        """Scatter marker size (diameter in pixels) for a point."""
        if radius is None:
            radius = self.call("get_bubble_r", point)
        return 2 * radius

    def _create_figure(self):
        """Create the Bokeh figure with one renderer per series."""
        chart_config = self.config.bubble_chart

        xs = [p.x for p in self.candidates()]
        ys = [self.y_value(p) for p in self.candidates()]
        if any(s.type == "bar" for s in self.series):
            ys.append(0)

        p = figure(
            title=chart_config.title,
            width=chart_config.width,
            height=chart_config.height,
            x_range=Range1d(*_padded_range(xs, chart_config.padding)),
            y_range=Range1d(*_padded_range(ys, chart_config.padding)),
            tools="pan,wheel_zoom,reset",
        )
        self.figure = p

        colors = _series_colors(chart_config.palette, len(self.series))
        self._sources = {}
        self._renderers = {}
        for series, color in zip(self.series, colors):
            points = series.values
            if self.is_bar_type(series.id):
                source = ColumnDataSource(
                    data={"x": [v.x for v in points], "top": [self.y_value(v) for v in points]}
                )
                renderer = p.vbar(
                    x="x",
                    top="top",
                    width=chart_config.bar_width,
                    source=source,
                    color=color,
                    alpha=chart_config.default_alpha,
                    legend_label=series.id,
                )
            else:
                source = ColumnDataSource(
                    data={
                        "x": [v.x for v in points],
                        "y": [self.y_value(v) for v in points],
                        "size": [self._bubble_size(v) for v in points],
                        "index": [v.index for v in points],
                    }
                )
                renderer = p.scatter(
                    x="x",
                    y="y",
                    size="size",
                    source=source,
                    fill_color=color,
                    line_color=color,
                    alpha=chart_config.default_alpha,
                    legend_label=series.id,
                )

            node = LayerNode(p, renderer)
            for point in points:
                point.node = node
            self._sources[series.id] = source
            self._renderers[series.id] = renderer

        p.on_event(MouseMove, self.on_pointer_move)
        p.on_event(MouseLeave, self.on_pointer_leave)
        p.legend.click_policy = "hide"
        return p

    # ------------------------------------------------------------------
    # Pointer handling
    # ------------------------------------------------------------------

    def on_pointer_move(self, event) -> None:
        """Focus the bubble under the pointer (event carries data-space x/y)."""
        if self.figure is None or event.x is None or event.y is None:
            return
        pos = self.pixel_frame().to_screen(event.x, event.y)
        self.focus(self.call("find_closest", self.candidates(), pos))

    def on_pointer_leave(self, event) -> None:
        self.focus(None)

    def focus(self, point: DataPoint | None) -> float | None:
        """
        Move the focus to ``point`` (None clears it).

        Returns:
            Radius the focused bubble is drawn with, or None
        """
        previous = self._focused
        if previous is not None and previous is not point:
            self._patch_size(previous, self._bubble_size(previous))

        self._focused = point
        if point is None:
            if previous is not None:
                self.set_cursor(DEFAULT_CURSOR)
                logger.debug("Focus cleared")
            self.data_holder.focused_point = None
            self.data_holder.focused_radius = None
            return None

        radius = self.call("point_expanded_r", point)
        self._patch_size(point, self._bubble_size(point, radius))
        if point is not previous:
            logger.debug(f"Focused {point.id}[{point.index}] with radius {radius:.1f}")
        self.data_holder.focused_point = point
        self.data_holder.focused_radius = radius
        return radius

    def _patch_size(self, point: DataPoint, size: float) -> None:
        source = self._sources.get(point.id)
        if source is None or "size" not in source.data:
            return
        sizes = list(source.data["size"])
        sizes[point.index] = size
        source.data["size"] = sizes

    # ------------------------------------------------------------------
    # Panel integration
    # ------------------------------------------------------------------

    def _render_chart(self, df: pd.DataFrame):
        """Rebuild the chart when the loaded data changes."""
        chart_config = self.config.bubble_chart
        if df is None or df.empty:
            self.set_series([])
            return pn.pane.Markdown(
                "No data available.",
                css_classes=["alert", "alert-info", "p-3"],
            )

        try:
            series = build_series(
                df,
                chart_config.x_column,
                chart_config.y_column,
                chart_config.z_column or None,
                chart_config.series_column,
                chart_config.bar_series,
            )
        except KeyError as e:
            logger.error(f"Cannot build chart series: {e}")
            return pn.pane.Markdown(
                f"Cannot build chart: {e}",
                css_classes=["alert", "alert-warning", "p-3"],
            )

        self.set_series(series)
        self._pane = pn.pane.Bokeh(
            self.figure, sizing_mode="fixed", styles={"cursor": self.cursor}
        )
        return self._pane

    def create(self) -> pn.viewable.Viewable:
        """
        Create the bubble chart bound to the loaded data.

        Returns:
            Panel viewable with the reactive chart
        """
        return pn.Column(
            pn.bind(self._render_chart, df=self.data_holder.param.df),
            sizing_mode="stretch_width",
        )

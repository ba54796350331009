"""
Tests for the Bokeh bubble chart host.

Run with:
    pytest code/tests/test_bubble_chart.py -v
"""

import sys
from pathlib import Path
from types import SimpleNamespace

# Add code directory to path for imports
code_dir = Path(__file__).parent.parent
sys.path.insert(0, str(code_dir))

import pandas as pd
import panel as pn
import pytest
from bokeh.plotting import figure

from components import BubbleChart, LayerNode, PixelFrame
from config import AppConfig, BubbleChartConfig, BubbleCompareConfig
from core.base_app import DataHolder
from core.bubble_compare import BubbleCompare
from core.models import DataPoint


@pytest.fixture
def df():
    # Representative z values: a -> 10, b -> 100
    return pd.DataFrame(
        {
            "series": ["a", "a", "b"],
            "x": [0, 10, 5],
            "y": [0, 10, 50],
            "z": [10, 20, 100],
        }
    )


def _make_chart(with_plugin=True, **chart_options):
    config = AppConfig(
        bubble_compare=BubbleCompareConfig(min_r=5, max_r=50, expand_scale=1.2),
        bubble_chart=BubbleChartConfig(z_column="z", **chart_options),
    )
    holder = DataHolder()
    plugins = [BubbleCompare(config.bubble_compare)] if with_plugin else []
    return BubbleChart(holder, config, plugins=plugins), holder


def _point(chart, series_id, index):
    series = next(s for s in chart.series if s.id == series_id)
    return series.values[index]


class TestRendering:
    """Test building the chart from a DataFrame."""

    def test_bubble_sizes_come_from_plugin(self, df):
        """Marker sizes are bubble diameters from get_bubble_r."""
        chart, _ = _make_chart()
        pane = chart._render_chart(df)

        assert isinstance(pane, pn.pane.Bokeh)
        assert chart._sources["a"].data["size"] == pytest.approx([19, 28])
        assert chart._sources["b"].data["size"] == pytest.approx([100])

    def test_default_radius_without_plugin(self, df):
        chart, _ = _make_chart(with_plugin=False, default_radius=7)
        chart._render_chart(df)

        assert chart._sources["a"].data["size"] == [14, 14]

    def test_bar_series_drawn_without_sizes(self, df):
        chart, _ = _make_chart(bar_series=["a"])
        chart._render_chart(df)

        assert "size" not in chart._sources["a"].data
        assert chart._sources["a"].data["top"] == [0, 10]

    def test_empty_data_shows_message(self):
        chart, _ = _make_chart()
        pane = chart._render_chart(pd.DataFrame())

        assert isinstance(pane, pn.pane.Markdown)
        assert chart.figure is None

    def test_missing_column_shows_warning(self, df):
        chart, _ = _make_chart(x_column="missing")
        pane = chart._render_chart(df)

        assert isinstance(pane, pn.pane.Markdown)
        assert "Cannot build chart" in pane.object


class TestHostHooks:
    """Test the ChartHost hooks implemented by BubbleChart."""

    def test_bubble_z_type_detection(self):
        chart, _ = _make_chart(bar_series=["bars"])

        assert chart.is_bubble_z_type(DataPoint(id="a", value={"y": 1, "z": 2}))
        assert chart.is_bubble_z_type(DataPoint(id="a", value=[1, 2]))
        assert not chart.is_bubble_z_type(DataPoint(id="a", value=3))
        assert not chart.is_bubble_z_type(DataPoint(id="bars", value=[1, 2]))

    def test_get_bubble_z_data(self):
        chart, _ = _make_chart()

        assert chart.get_bubble_z_data({"y": 3, "z": 9}, "z") == 9
        assert chart.get_bubble_z_data([3, 9], "y") == 3
        assert chart.get_bubble_z_data([3, 9], "z") == 9

    def test_dist_is_zero_at_point_position(self, df):
        chart, _ = _make_chart()
        chart._render_chart(df)
        point = _point(chart, "b", 0)

        pos = chart.pixel_frame().to_screen(5, 50)
        assert chart.dist(point, pos) == pytest.approx(0)

    def test_pixel_frame_mapping(self):
        frame = PixelFrame(0, 10, 0, 100, 200, 100)

        assert frame.to_screen(5, 25) == (100, 75)

    def test_layer_node_moves_renderer_last(self):
        p = figure()
        first = p.scatter([1], [1])
        second = p.scatter([2], [2])

        LayerNode(p, first).bring_to_front()

        assert p.renderers[-1] is first
        assert p.renderers[0] is second


class TestFocus:
    """Test focusing bubbles."""

    def test_focus_expands_and_raises(self, df):
        chart, holder = _make_chart()
        chart._render_chart(df)
        point = _point(chart, "a", 0)

        radius = chart.focus(point)

        assert radius == pytest.approx(9.5 * 1.2)
        assert chart._sources["a"].data["size"][0] == pytest.approx(2 * 9.5 * 1.2)
        assert chart.figure.renderers[-1] is chart._renderers["a"]
        assert chart.cursor == "pointer"
        assert chart._pane.styles["cursor"] == "pointer"
        assert holder.focused_point is point
        assert holder.focused_radius == pytest.approx(radius)

    def test_clearing_focus_restores_size_and_cursor(self, df):
        chart, holder = _make_chart()
        chart._render_chart(df)
        chart.focus(_point(chart, "a", 0))

        chart.focus(None)

        assert chart._sources["a"].data["size"][0] == pytest.approx(19)
        assert chart.cursor == "default"
        assert holder.focused_point is None

    def test_moving_focus_restores_previous_bubble(self, df):
        chart, _ = _make_chart()
        chart._render_chart(df)
        chart.focus(_point(chart, "a", 0))

        chart.focus(_point(chart, "a", 1))

        assert chart._sources["a"].data["size"] == pytest.approx([19, 2 * 14 * 1.2])


class TestPointer:
    """Test pointer events driving the focus."""

    def test_pointer_over_bubble_focuses_it(self, df):
        chart, holder = _make_chart()
        chart._render_chart(df)

        chart.on_pointer_move(SimpleNamespace(x=5, y=50))

        assert holder.focused_point is _point(chart, "b", 0)
        assert holder.focused_radius == pytest.approx(60)

    def test_pointer_over_bar_does_not_focus(self, df):
        chart, holder = _make_chart(bar_series=["a"])
        chart._render_chart(df)

        chart.on_pointer_move(SimpleNamespace(x=0, y=0))

        assert holder.focused_point is None

    def test_default_find_closest_without_plugin(self, df):
        chart, holder = _make_chart(with_plugin=False)
        chart._render_chart(df)

        chart.on_pointer_move(SimpleNamespace(x=0, y=0))

        assert holder.focused_point is _point(chart, "a", 0)
        assert holder.focused_radius == chart.config.bubble_chart.default_radius

    def test_pointer_outside_frame_is_ignored(self, df):
        chart, holder = _make_chart()
        chart._render_chart(df)
        chart.focus(_point(chart, "b", 0))

        chart.on_pointer_move(SimpleNamespace(x=None, y=None))

        assert holder.focused_point is _point(chart, "b", 0)

    def test_pointer_leave_clears_focus(self, df):
        chart, holder = _make_chart()
        chart._render_chart(df)
        chart.focus(_point(chart, "b", 0))

        chart.on_pointer_leave(SimpleNamespace())

        assert holder.focused_point is None

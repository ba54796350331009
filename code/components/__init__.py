"""Reusable visualization components."""

from .base import BaseComponent
from .bubble_chart import BubbleChart, LayerNode, PixelFrame
from .focus_panel import FocusPanel

__all__ = [
    "BaseComponent",
    "BubbleChart",
    "FocusPanel",
    "LayerNode",
    "PixelFrame",
]

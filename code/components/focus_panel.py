"""Sidebar readout of the bubble under the pointer."""

import panel as pn

from .base import BaseComponent


class FocusPanel(BaseComponent):
    """Shows the focused bubble's series, position, size value and radius."""

    def _render(self, point, radius):
        if point is None:
            return pn.pane.Markdown(
                "*Hover a bubble to inspect it*",
                css_classes=["alert", "alert-secondary", "p-2"],
            )

        value = point.value
        if isinstance(value, dict):
            value_text = ", ".join(f"{k}: {v}" for k, v in value.items())
        else:
            value_text = str(value)

        return pn.pane.Markdown(
            f"**Series:** {point.id}  \n"
            f"**Point:** #{point.index} (x = {point.x})  \n"
            f"**Value:** {value_text}  \n"
            f"**Radius:** {radius:.1f}px",
            css_classes=["alert", "alert-info", "p-2"],
            styles={"font-size": "12px"},
        )

    def create(self) -> pn.Column:
        """Create the focus readout with reactive bindings."""
        return pn.Column(
            pn.pane.Markdown("### Focused Bubble"),
            pn.bind(
                self._render,
                point=self.data_holder.param.focused_point,
                radius=self.data_holder.param.focused_radius,
            ),
            sizing_mode="stretch_width",
        )

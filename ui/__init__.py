"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import command_buttons, endpoint_picker, status_panel
"""

from ui.canvas import render_canvas, CanvasConfig, edge_state, node_state

from ui.controls import (
    command_buttons,
    endpoint_picker,
    status_panel,
)

__all__ = [
    "render_canvas",
    "CanvasConfig",
    "edge_state",
    "node_state",
    "command_buttons",
    "endpoint_picker",
    "status_panel",
]

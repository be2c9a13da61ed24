from lx.output.layout import column_geometry, order_tokens
from lx.output.renderer import render, render_json_items
from lx.output.styles import DIRECTORY_STYLE, sanitize_name, strip_styles, visual_width

__all__ = [
    "column_geometry", "order_tokens",
    "render", "render_json_items",
    "DIRECTORY_STYLE", "sanitize_name", "strip_styles", "visual_width",
]

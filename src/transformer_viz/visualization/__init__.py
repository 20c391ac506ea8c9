"""Visualization utilities for attention weights.

This module provides the color encoding, number formatting and heatmap
rendering consumed by presentation code.

Example:
    from transformer_viz.visualization import get_attention_color, format_percent

    color = get_attention_color(0.42)  # "rgb(133, 106, 207)"
    label = format_percent(0.42)  # "42.0%"

    # Render a full weight matrix
    from transformer_viz.visualization import render_attention_heatmap
    image = render_attention_heatmap(weights, cell_size=32)
"""

from transformer_viz.visualization.colors import (
    attention_legend,
    get_attention_color,
    interpolate_color,
    interpolate_rgb,
    rgb_string,
    validate_color,
)
from transformer_viz.visualization.formatting import format_number, format_percent
from transformer_viz.visualization.heatmaps import (
    apply_colormap,
    attention_colormap,
    render_attention_heatmap,
)

__all__ = [
    # Colors
    "interpolate_rgb",
    "interpolate_color",
    "get_attention_color",
    "attention_legend",
    "rgb_string",
    "validate_color",
    # Formatting
    "format_percent",
    "format_number",
    # Heatmaps
    "attention_colormap",
    "apply_colormap",
    "render_attention_heatmap",
]

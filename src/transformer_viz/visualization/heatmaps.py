"""Heatmap rendering for attention weight matrices.

This module converts attention weights into colored heatmap images using
a matplotlib colormap built from the same blue/pink endpoints as
`get_attention_color()`.

Key functions:
- `attention_colormap()`: Two-color matplotlib colormap
- `apply_colormap()`: Weights matrix to RGBA array
- `render_attention_heatmap()`: Weights matrix to PIL image, one cell per weight
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

import matplotlib
import numpy as np
from matplotlib.colors import LinearSegmentedColormap

from transformer_viz.config import HEATMAP_CELL_SIZE, HIGH_COLOR, LOW_COLOR, RGB
from transformer_viz.errors import InvalidInputError
from transformer_viz.ops.vectors import MatrixLike, as_matrix
from transformer_viz.visualization.colors import validate_color

if TYPE_CHECKING:
    from PIL import Image

# Use non-interactive backend for headless rendering
matplotlib.use("Agg")

logger = logging.getLogger(__name__)

# Minimum cell opacity when opacity encodes weight (0.3 + 0.7 * w)
MIN_CELL_OPACITY = 0.3

# Maximum number of distinct endpoint pairs kept as built colormaps
COLORMAP_CACHE_SIZE = 16


@lru_cache(maxsize=COLORMAP_CACHE_SIZE)
def _build_colormap(low: RGB, high: RGB) -> LinearSegmentedColormap:
    colors = [np.array(low) / 255.0, np.array(high) / 255.0]
    return LinearSegmentedColormap.from_list("attention", colors)


def attention_colormap(
    low: RGB = LOW_COLOR,
    high: RGB = HIGH_COLOR,
) -> LinearSegmentedColormap:
    """Get a two-color colormap running from ``low`` to ``high``, with caching.

    Raises:
        InvalidInputError: If either endpoint is not a valid RGB triple.
    """
    return _build_colormap(validate_color(low, "low"), validate_color(high, "high"))


def apply_colormap(
    weights: MatrixLike,
    low: RGB = LOW_COLOR,
    high: RGB = HIGH_COLOR,
    weight_opacity: bool = False,
) -> np.ndarray:
    """Apply the attention colormap to a 2D weight matrix.

    Args:
        weights: 2D matrix of shape (Q, K) with values in [0, 1].
            Values outside are clipped for rendering.
        low: Color for weight 0.
        high: Color for weight 1.
        weight_opacity: If True, alpha encodes weight as ``0.3 + 0.7 * w``.
            Otherwise all cells are opaque.

    Returns:
        RGBA image as numpy array of shape (Q, K, 4) with uint8 values [0, 255].

    Example:
        >>> rgba = apply_colormap(softmax_rows(DEMO_ATTENTION_SCORES))
        >>> rgba.shape
        (6, 6, 4)
    """
    matrix = np.clip(as_matrix(weights, name="weights"), 0.0, 1.0)

    cmap = attention_colormap(low, high)
    colored = cmap(matrix)  # (Q, K, 4) float in [0, 1]

    if weight_opacity:
        colored[..., 3] = MIN_CELL_OPACITY + (1.0 - MIN_CELL_OPACITY) * matrix

    return np.rint(colored * 255).astype(np.uint8)


def render_attention_heatmap(
    weights: MatrixLike,
    cell_size: int = HEATMAP_CELL_SIZE,
    low: RGB = LOW_COLOR,
    high: RGB = HIGH_COLOR,
    weight_opacity: bool = False,
) -> Image.Image:
    """Render an attention weight matrix as a PIL image.

    Each weight becomes a ``cell_size`` x ``cell_size`` square, so a (Q, K)
    matrix renders as a ``K * cell_size`` wide, ``Q * cell_size`` tall image.

    Args:
        weights: 2D matrix of attention weights.
        cell_size: Edge length of each cell in pixels.
        low: Color for weight 0.
        high: Color for weight 1.
        weight_opacity: Encode weight in the alpha channel too.

    Returns:
        PIL Image in RGBA mode.
    """
    from PIL import Image as PILImage

    if cell_size < 1:
        raise InvalidInputError(f"cell_size must be >= 1, got {cell_size}")

    rgba = apply_colormap(weights, low=low, high=high, weight_opacity=weight_opacity)
    pixels = np.repeat(np.repeat(rgba, cell_size, axis=0), cell_size, axis=1)
    logger.debug("Rendering %dx%d heatmap at %dpx per cell", rgba.shape[0], rgba.shape[1], cell_size)

    return PILImage.fromarray(np.ascontiguousarray(pixels))

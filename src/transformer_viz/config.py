"""Centralized configuration for the transformer-viz numeric core.

This module provides a single source of truth for default parameters
and presentation constants used throughout the library.

Usage:
    from transformer_viz.config import DEFAULT_TEMPERATURE, SUM_TOLERANCE

    print(DEFAULT_TEMPERATURE)  # 1.0

    # Access color endpoints
    from transformer_viz.config import LOW_COLOR, HIGH_COLOR
    print(LOW_COLOR)  # (59, 130, 246)
"""

import os

# =============================================================================
# Softmax Defaults
# =============================================================================

# Temperature applied when callers don't supply one.
# tau < 1 sharpens the distribution, tau > 1 flattens it.
DEFAULT_TEMPERATURE: float = 1.0

# Tolerance for "sums to one" checks on probability distributions.
SUM_TOLERANCE: float = 1e-6


# =============================================================================
# Attention Colors
# =============================================================================
# Two-color gradient used uniformly across all attention-weight visuals.

RGB = tuple[int, int, int]

LOW_COLOR: RGB = (59, 130, 246)  # blue-500
HIGH_COLOR: RGB = (236, 72, 153)  # pink-500

# Legend stops drawn between the "low" and "high" labels.
LEGEND_STOPS: tuple[float, ...] = (0.0, 0.2, 0.4, 0.6, 0.8, 1.0)


# =============================================================================
# Formatting Defaults
# =============================================================================

DEFAULT_PERCENT_DECIMALS: int = 1
DEFAULT_NUMBER_DECIMALS: int = 3


# =============================================================================
# Heatmap Rendering
# =============================================================================

# Edge length in pixels of one weight cell in a rendered heatmap.
# Can be overridden via TRANSFORMER_VIZ_CELL_SIZE environment variable.
HEATMAP_CELL_SIZE: int = int(os.environ.get("TRANSFORMER_VIZ_CELL_SIZE", "48"))

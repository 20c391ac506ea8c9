"""Color mapping for attention weights.

Maps a scalar weight onto a fixed blue-to-pink gradient so every attention
visualization uses the same encoding.

Factors outside [0, 1] are extrapolated linearly rather than clamped;
softmax output is already bounded, so only hand-built inputs reach that path.
"""

from __future__ import annotations

import logging
import math

from transformer_viz.config import HIGH_COLOR, LEGEND_STOPS, LOW_COLOR, RGB
from transformer_viz.errors import InvalidInputError

logger = logging.getLogger(__name__)


def _round_half_up(x: float) -> int:
    # Python's round() is banker's rounding; 126.5 must become 127
    return math.floor(x + 0.5)


def validate_color(color: tuple[int, int, int] | list[int], name: str = "color") -> RGB:
    """Validate an RGB triple and return it as a tuple of ints.

    Args:
        color: Three channels, each an integral value in [0, 255].
        name: Argument name used in error messages.

    Returns:
        The color as ``(r, g, b)``.

    Raises:
        InvalidInputError: If the color doesn't have 3 channels, or a channel
            is fractional, non-finite or outside [0, 255].
    """
    if len(color) != 3:
        raise InvalidInputError(f"{name} must have 3 channels, got {len(color)}")
    if any(not float(c).is_integer() for c in color):
        raise InvalidInputError(f"{name} channels must be whole numbers, got {tuple(color)}")
    channels = tuple(int(c) for c in color)
    if any(not 0 <= c <= 255 for c in channels):
        raise InvalidInputError(f"{name} channels must be in [0, 255], got {channels}")
    return channels  # type: ignore[return-value]


def rgb_string(color: RGB) -> str:
    """Serialize an RGB triple as ``"rgb(r, g, b)"``."""
    r, g, b = color
    return f"rgb({r}, {g}, {b})"


def interpolate_rgb(
    color1: tuple[int, int, int] | list[int],
    color2: tuple[int, int, int] | list[int],
    factor: float,
) -> RGB:
    """Linearly interpolate between two colors per channel.

    Args:
        color1: Color at ``factor == 0``.
        color2: Color at ``factor == 1``.
        factor: Position along the gradient. Not clamped.

    Returns:
        RGB triple with ``round(c1 + (c2 - c1) * factor)`` per channel.
    """
    start = validate_color(color1, "color1")
    end = validate_color(color2, "color2")
    factor = float(factor)
    if not math.isfinite(factor):
        raise InvalidInputError(f"Factor must be finite, got {factor}")
    if not 0.0 <= factor <= 1.0:
        logger.debug("Extrapolating color gradient with factor %.3f", factor)

    r, g, b = (_round_half_up(c1 + (c2 - c1) * factor) for c1, c2 in zip(start, end))
    return (r, g, b)


def interpolate_color(
    color1: tuple[int, int, int] | list[int],
    color2: tuple[int, int, int] | list[int],
    factor: float,
) -> str:
    """Interpolate between two colors and return a CSS ``rgb()`` string.

    Example:
        >>> interpolate_color((0, 0, 0), (255, 255, 255), 0.5)
        'rgb(128, 128, 128)'
    """
    return rgb_string(interpolate_rgb(color1, color2, factor))


def get_attention_color(weight: float) -> str:
    """Color for an attention weight, from blue (low) to pink (high)."""
    return interpolate_color(LOW_COLOR, HIGH_COLOR, weight)


def attention_legend(stops: tuple[float, ...] = LEGEND_STOPS) -> list[tuple[float, str]]:
    """Build legend entries for the attention gradient.

    Args:
        stops: Weights to sample along the gradient.

    Returns:
        List of (weight, color string) pairs in the given order.
    """
    return [(stop, get_attention_color(stop)) for stop in stops]

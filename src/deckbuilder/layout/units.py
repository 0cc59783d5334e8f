"""
Unit conversion helpers for the design canvas.

The templates are specified on a pixel canvas (1280 x 720 in the reference
theme) and converted to inches, points and EMU when shapes are emitted.
"""

import math
from typing import Optional

EMU_PER_INCH = 914400
POINTS_PER_PIXEL = 72.0 / 96.0

MAX_PX = 5000
MAX_RADIUS_PX = 200
MIN_FONT_PT = 6
MAX_FONT_PT = 72
MIN_BOX_PX = 4


def clamp(value: float, minimum: Optional[float] = None, maximum: Optional[float] = None) -> float:
    """
    Clamp a value into [minimum, maximum].

    Non-finite input (NaN, inf, None) collapses to the minimum so that a bad
    number never reaches the serializer.
    """
    try:
        is_finite = math.isfinite(value)
    except TypeError:
        is_finite = False
    if not is_finite:
        return minimum if minimum is not None else 0.0

    if minimum is not None:
        value = max(minimum, value)
    if maximum is not None:
        value = min(maximum, value)
    return value


def px_to_in(px: float, px_per_in: float) -> float:
    """Convert canvas pixels to inches."""
    return round(clamp(px, 0, MAX_PX) / px_per_in, 4)


def px_to_pt(px: float) -> float:
    """Convert a pixel font size to points, kept within a legible range."""
    return round(clamp(px * POINTS_PER_PIXEL, MIN_FONT_PT, MAX_FONT_PT), 2)


def px_radius_to_in(px: float, px_per_in: float) -> float:
    """Convert a corner radius in pixels to inches."""
    return round(clamp(px, 0, MAX_RADIUS_PX) / px_per_in, 4)


def in_to_px(inches: float, px_per_in: float) -> float:
    return inches * px_per_in


def opacity_to_decimal(percent: float) -> float:
    """Convert an opacity percentage (0-100) to 0.0-1.0."""
    return clamp(percent, 0, 100) / 100


def inches_to_emu(inches: float) -> int:
    return int(round(inches * EMU_PER_INCH))

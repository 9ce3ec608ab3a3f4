"""
RGBA color value type and color blending.

Components are floats nominally in [0, 1]. Only add_color/subtract_color clamp,
the rest pass out-of-range values through untouched.
"""
from typing import NamedTuple

from .scalar import clamp


class Color(NamedTuple):
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


# ITU-R BT.709 luminance weights
_LUMINANCE_R = 0.2125
_LUMINANCE_G = 0.7154
_LUMINANCE_B = 0.0721


def add_color(c0, c1):
    """Sum of two colors, each component saturating at 1."""
    return Color(*(min(p + q, 1.0) for p, q in zip(c0, c1)))

def subtract_color(c0, c1):
    """Difference of two colors, each component saturating at 0."""
    return Color(*(max(p - q, 0.0) for p, q in zip(c0, c1)))

def adjust_contrast(color, contrast):
    return Color(
        0.5 + contrast * (color.r - 0.5),
        0.5 + contrast * (color.g - 0.5),
        0.5 + contrast * (color.b - 0.5),
        color.a
    )

def adjust_saturation(color, saturation):
    """Blend each channel toward (saturation < 1) or away from (> 1) the color's grey level."""
    luminance = color.r * _LUMINANCE_R + color.g * _LUMINANCE_G + color.b * _LUMINANCE_B
    return Color(
        luminance + saturation * (color.r - luminance),
        luminance + saturation * (color.g - luminance),
        luminance + saturation * (color.b - luminance),
        color.a
    )

def interpolate_color(c0, c1, s):
    return Color(*(p + s * (q - p) for p, q in zip(c0, c1)))

def modulate_color(c0, c1):
    return Color(*(p * q for p, q in zip(c0, c1)))

def negate_color(color):
    return Color(*(1.0 - p for p in color))

def scale_color(color, s):
    return Color(*(p * s for p in color))


def _to_byte(value):
    # Truncates like an integer cast after clamping to [0, 1]
    return int(clamp(value, 0.0, 1.0) * 255)

def argb_color(color):
    """Pack into a 32-bit integer laid out 0xAARRGGBB."""
    return (_to_byte(color.a) << 24) | (_to_byte(color.r) << 16) | (_to_byte(color.g) << 8) | _to_byte(color.b)

def abgr_color(color):
    """Pack into a 32-bit integer laid out 0xAABBGGRR."""
    return (_to_byte(color.a) << 24) | (_to_byte(color.b) << 16) | (_to_byte(color.g) << 8) | _to_byte(color.r)

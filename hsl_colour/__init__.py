"""Represent colours in HSL and convert between HSL and 8-bit RGB.

Example:
    >>> from hsl_colour import HSL, from_rgb
    >>> from_rgb(255, 255, 0)
    HSL(hue=60.0, saturation=1.0, lightness=0.5)
    >>> HSL(180, 1, 0.5).to_rgb()
    RGB(red=0, green=255, blue=255)
"""

from hsl_colour.core.hsl import (
    HSL,
    RGB,
    ColourRangeError,
    from_rgb,
    to_rgb,
    validate_hsl,
    validate_rgb,
)

__all__ = [
    'HSL',
    'RGB',
    'ColourRangeError',
    'from_rgb',
    'to_rgb',
    'validate_hsl',
    'validate_rgb',
]

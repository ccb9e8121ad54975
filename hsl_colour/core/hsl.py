"""HSL colour value and HSL <-> RGB conversion.

HSL components:
    hue:        degrees, wrapped modulo 360 when interpreted (never clamped)
    saturation: 0 (grey) .. 1 (fully saturated)
    lightness:  0 (black) .. 1 (white), 0.5 = pure hue

RGB channels are integers 0..255.

Out-of-range values are allowed on an HSL value (hue arithmetic, interpolation)
and are normalised at the point of conversion: hue wraps, saturation and
lightness clamp. RGB inputs are clamped into 0..255.

Rounding from a 0..1 fraction to a byte is round half away from zero
(127.5 -> 128, 126.5 -> 127), not Python's round-half-to-even.

Example:
    >>> HSL(180, 1, 0.5).to_rgb()
    RGB(red=0, green=255, blue=255)
    >>> HSL.from_rgb(255, 255, 0)
    HSL(hue=60.0, saturation=1.0, lightness=0.5)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple


class ColourRangeError(ValueError):
    """A colour component is outside its valid range (strict validation only)."""


class RGB(NamedTuple):
    """8-bit RGB triple. Compares equal to a plain (r, g, b) tuple."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True, order=True)
class HSL:
    """Immutable HSL colour. Defaults to black."""

    hue: float = 0.0
    saturation: float = 0.0
    lightness: float = 0.0

    def __post_init__(self) -> None:
        # frozen: assign through object.__setattr__
        object.__setattr__(self, 'hue', float(self.hue))
        object.__setattr__(self, 'saturation', float(self.saturation))
        object.__setattr__(self, 'lightness', float(self.lightness))

    def normalized(self) -> HSL:
        """Return a copy with hue wrapped into [0, 360) and s/l clamped into [0, 1]."""
        return HSL(wrap_hue(self.hue), _clamp_unit(self.saturation), _clamp_unit(self.lightness))

    def to_rgb(self) -> RGB:
        return to_rgb(self)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> HSL:
        hsl = from_rgb(r, g, b)
        return cls(hsl.hue, hsl.saturation, hsl.lightness)


def wrap_hue(hue: float) -> float:
    """Wrap a hue in degrees into [0, 360). Non-finite hues become 0."""
    if not math.isfinite(hue):
        return 0.0
    wrapped = hue % 360.0
    # -1e-15 % 360.0 rounds up to 360.0
    if wrapped >= 360.0:
        return 0.0
    return wrapped


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def _clamp_channel(value: float) -> int:
    """Round a channel half up, then clamp it into 0..255."""
    return max(0, min(255, round_half_up(value)))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def fraction_to_byte(fraction: float) -> int:
    """Map a 0..1 fraction to a 0..255 channel, rounding half up and clamping."""
    return max(0, min(255, round_half_up(fraction * 255.0)))


def to_rgb(hsl: HSL) -> RGB:
    """Convert an HSL colour to an 8-bit RGB triple."""
    norm = hsl.normalized()
    hue, s, l = norm.hue, norm.saturation, norm.lightness

    if s == 0.0:
        # Achromatic: hue does not contribute
        v = fraction_to_byte(l)
        return RGB(v, v, v)

    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    hue_prime = hue / 60.0
    x = chroma * (1.0 - abs(hue_prime % 2.0 - 1.0))
    m = l - chroma / 2.0

    sector = min(int(hue_prime), 5)
    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return RGB(fraction_to_byte(r + m), fraction_to_byte(g + m), fraction_to_byte(b + m))


def from_rgb(r: int, g: int, b: int) -> HSL:
    """Convert an 8-bit RGB triple to HSL.

    Non-integer channels are rounded half up; channels outside 0..255 are clamped.
    """
    r, g, b = _clamp_channel(r), _clamp_channel(g), _clamp_channel(b)
    hi = max(r, g, b)
    lo = min(r, g, b)

    max_c = hi / 255.0
    min_c = lo / 255.0
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2.0

    if hi == lo:
        # Grey: hue is undefined, 0 by convention
        return HSL(0.0, 0.0, lightness)

    saturation = delta / (1.0 - abs(2.0 * lightness - 1.0))

    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    # Ties resolve red first, then green (compared on the integer channels)
    if hi == r:
        hue = 60.0 * ((gf - bf) / delta)
    elif hi == g:
        hue = 60.0 * ((bf - rf) / delta + 2.0)
    else:
        hue = 60.0 * ((rf - gf) / delta + 4.0)

    if hue < 0.0:
        hue += 360.0

    return HSL(hue, saturation, lightness)


def validate_rgb(r: int, g: int, b: int) -> None:
    """Raise ColourRangeError if any channel is outside 0..255."""
    for name, value in (('red', r), ('green', g), ('blue', b)):
        if not 0 <= value <= 255:
            raise ColourRangeError(f'{name} must be in 0..255, got {value}')


def validate_hsl(hue: float, saturation: float, lightness: float) -> None:
    """Raise ColourRangeError if saturation or lightness is outside 0..1.

    Hue is never rejected: it wraps modulo 360. It must still be finite.
    """
    if not math.isfinite(hue):
        raise ColourRangeError(f'hue must be finite, got {hue}')
    for name, value in (('saturation', saturation), ('lightness', lightness)):
        if not 0.0 <= value <= 1.0:
            raise ColourRangeError(f'{name} must be in 0..1, got {value}')

"""Color math and adaptive recoloring against the terminal background.

Hex ⇄ RGB ⇄ HSL conversions, WCAG relative luminance, and ``adapt()`` which
pulls very dark colors up on dark backgrounds and very light colors down on
light backgrounds. The background classification lives in a
``BackgroundCache`` so it is probed once per process and can be stubbed in
tests.

// [LAW:one-source-of-truth] Adaptation thresholds and blend factors live here only.
"""

from __future__ import annotations

import logging
import math
import re
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

import tailtext.environment

if TYPE_CHECKING:
    from tailtext.style import Color

logger = logging.getLogger(__name__)

# SGR sequences the ANSI renderer emits by hand.
RESET = "\x1b[0m"
STRIKE = "\x1b[9m"
STRIKE_OFF = "\x1b[29m"

TRANSPARENT = "transparent"
CURRENT_COLOR = "currentColor"
SENTINELS = frozenset({TRANSPARENT, CURRENT_COLOR})

# Adaptation constants
MIN_LUMINANCE = 0.15  # darker than this needs lifting on a dark background
MAX_LUMINANCE = 0.85  # lighter than this needs lowering on a light background
DARK_BG_TARGET_L = 0.75
LIGHT_BG_TARGET_L = 0.25
BLEND = 0.8

_HEX_RE = re.compile(r"#?[0-9a-fA-F]{6}")


class InvalidColorError(ValueError):
    """Raised by hex_to_rgb for anything that is not a 6-digit hex color."""


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` (leading ``#`` optional) to 0-255 ints.

    Exactly six ASCII hex digits; short ``#rgb`` forms, signs and
    whitespace are rejected.
    """
    if not _HEX_RE.fullmatch(hex_color):
        raise InvalidColorError(f"invalid hex color: {hex_color!r}")
    h = hex_color[-6:]
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def is_hex(value: str) -> bool:
    return value.startswith("#") and _HEX_RE.fullmatch(value) is not None


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """0-255 ints to lowercase ``#rrggbb``; out-of-range channels are clamped."""
    r, g, b = (max(0, min(255, int(c))) for c in (r, g, b))
    return "#{:02x}{:02x}{:02x}".format(r, g, b)


def _round_channel(c: float) -> int:
    # half away from zero
    scaled = c * 255
    whole = math.floor(scaled)
    return int(whole + 1 if scaled - whole >= 0.5 else whole)


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """0-255 RGB to (h, s, l), each in 0-1.

    Hue is taken from the max channel as ``(g-b)/d`` (+6 when negative),
    ``(b-r)/d + 2`` or ``(r-g)/d + 4``, then divided by 6. The float
    operations are ordered so adapted colors are reproducible bit for bit.
    """
    rn, gn, bn = r / 255.0, g / 255.0, b / 255.0
    hi = max(rn, gn, bn)
    lo = min(rn, gn, bn)
    lightness = (hi + lo) / 2
    if hi == lo:
        return 0.0, 0.0, lightness

    d = hi - lo
    s = d / (2 - hi - lo) if lightness > 0.5 else d / (hi + lo)
    if hi == rn:
        h = (gn - bn) / d
        if gn < bn:
            h += 6
    elif hi == gn:
        h = (bn - rn) / d + 2
    else:
        h = (rn - gn) / d + 4
    return h / 6, s, lightness


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1.0 / 6.0:
        return p + (q - p) * 6 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, lightness: float) -> tuple[int, int, int]:
    """(h, s, l) in 0-1 to 0-255 RGB."""
    if s == 0:
        r = g = b = lightness
    else:
        q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
        p = 2 * lightness - q
        r = _hue_to_channel(p, q, h + 1.0 / 3.0)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1.0 / 3.0)
    return _round_channel(r), _round_channel(g), _round_channel(b)


def _linearize(c: float) -> float:
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def luminance(r: int, g: int, b: int) -> float:
    """WCAG relative luminance of a 0-255 RGB triple."""
    return (
        0.2126 * _linearize(r / 255.0)
        + 0.7152 * _linearize(g / 255.0)
        + 0.0722 * _linearize(b / 255.0)
    )


def adapt(hex_color: str, is_dark: bool) -> str:
    """Recolor ``hex_color`` for contrast against the terminal background.

    Sentinels, empty strings and anything that is not 6-digit hex come back
    unchanged. Colors inside the [MIN_LUMINANCE, MAX_LUMINANCE] band are
    left alone.
    """
    if not hex_color or hex_color in SENTINELS:
        return hex_color
    try:
        r, g, b = hex_to_rgb(hex_color)
    except InvalidColorError:
        logger.debug("not adapting non-hex color %r", hex_color)
        return hex_color

    lum = luminance(r, g, b)
    if is_dark and lum < MIN_LUMINANCE:
        h, s, lightness = rgb_to_hsl(r, g, b)
        new_l = max(0.6, lightness + (DARK_BG_TARGET_L - lightness) * BLEND)
        new_s = s * 0.9
        return rgb_to_hex(*hsl_to_rgb(h, new_s, new_l))
    if not is_dark and lum > MAX_LUMINANCE:
        h, s, lightness = rgb_to_hsl(r, g, b)
        new_l = min(0.4, lightness + (LIGHT_BG_TARGET_L - lightness) * BLEND)
        new_s = min(1.0, s * 1.1)
        return rgb_to_hex(*hsl_to_rgb(h, new_s, new_l))
    return hex_color


def adapt_color(color: Color | None, is_dark: bool) -> Color | None:
    """``adapt()`` for a style Color; opacity is carried over untouched."""
    if color is None:
        return None
    adapted = adapt(color.value, is_dark)
    if adapted == color.value:
        return color
    return color.with_value(adapted)


class BackgroundCache:
    """Process-wide answer to "is the terminal background dark?".

    The probe runs at most once. Reads after initialization take no lock;
    the first read probes under the lock and re-checks so concurrent first
    readers never probe twice.

    Args:
        probe: Zero-argument callable returning True for a dark background.
    """

    def __init__(self, probe: Callable[[], bool]):
        self._probe = probe
        self._lock = threading.Lock()
        self._value: bool | None = None

    def is_dark(self) -> bool:
        value = self._value
        if value is not None:
            return value
        with self._lock:
            if self._value is None:
                self._value = bool(self._probe())
                logger.debug("background classified as %s", "dark" if self._value else "light")
            return self._value

    def set(self, is_dark: bool) -> None:
        """Pin the classification without probing."""
        with self._lock:
            self._value = bool(is_dark)

    def reset(self) -> None:
        """Forget the cached value; the next is_dark() probes again."""
        with self._lock:
            self._value = None

    @property
    def resolved(self) -> bool:
        return self._value is not None


def fixed_background(is_dark: bool) -> BackgroundCache:
    """A cache pre-set to ``is_dark`` whose probe is never called."""
    cache = BackgroundCache(lambda: is_dark)
    cache.set(is_dark)
    return cache


# Module-level default; renderers fall back to this when no cache is passed.
BACKGROUND = BackgroundCache(tailtext.environment.detect_dark_background)

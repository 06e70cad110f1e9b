"""Spacing and font-size scales for padding and ``text-{size}`` tokens.

All values are in rem units (16px = 1rem). Bracketed custom values such as
``p-[10px]`` or ``text-[1.5rem]`` are normalized to the same unit.
"""

import logging
import math
from typing import NamedTuple

logger = logging.getLogger(__name__)

SPACING_SCALE: dict[str, float] = {
    "0": 0.0,
    "px": 0.0625,
    "0.5": 0.125,
    "1": 0.25,
    "1.5": 0.375,
    "2": 0.5,
    "2.5": 0.625,
    "3": 0.75,
    "3.5": 0.875,
    "4": 1.0,
    "5": 1.25,
    "6": 1.5,
    "7": 1.75,
    "8": 2.0,
    "9": 2.25,
    "10": 2.5,
    "11": 2.75,
    "12": 3.0,
    "14": 3.5,
    "16": 4.0,
    "20": 5.0,
    "24": 6.0,
    "28": 7.0,
    "32": 8.0,
    "36": 9.0,
    "40": 10.0,
    "44": 11.0,
    "48": 12.0,
    "52": 13.0,
    "56": 14.0,
    "60": 15.0,
    "64": 16.0,
    "72": 18.0,
    "80": 20.0,
    "96": 24.0,
}

FONT_SIZE_SCALE: dict[str, float] = {
    "xs": 0.75,
    "sm": 0.875,
    "base": 1.0,
    "lg": 1.125,
    "xl": 1.25,
    "2xl": 1.5,
    "3xl": 1.875,
    "4xl": 2.25,
    "5xl": 3.0,
    "6xl": 3.75,
    "7xl": 4.5,
    "8xl": 6.0,
    "9xl": 8.0,
}


class PaddingSides(NamedTuple):
    """Per-side padding from one token. None means the token left that side alone."""
    top: float | None
    right: float | None
    bottom: float | None
    left: float | None


NO_PADDING = PaddingSides(None, None, None, None)

# prefix -> (top, right, bottom, left) mask
_PADDING_SIDES: dict[str, tuple[bool, bool, bool, bool]] = {
    "p": (True, True, True, True),
    "px": (False, True, False, True),
    "py": (True, False, True, False),
    "pt": (True, False, False, False),
    "pr": (False, True, False, False),
    "pb": (False, False, True, False),
    "pl": (False, False, False, True),
}


def unbracket(value: str) -> str | None:
    """Return the inside of ``[...]``, or None if ``value`` is not bracketed."""
    if len(value) >= 2 and value.startswith("[") and value.endswith("]"):
        return value[1:-1]
    return None


def parse_custom_spacing(value: str) -> float | None:
    """Parse ``10px`` / ``1.5rem`` / ``2em`` / ``24`` into rem units.

    px values are divided by 16; em is treated as rem; unitless values are
    taken as rem. Returns None when the value does not parse.
    """
    value = value.strip()
    divisor = 1.0
    # "rem" must be checked before "em"
    for suffix, scale in (("px", 16.0), ("rem", 1.0), ("em", 1.0)):
        if value.endswith(suffix):
            value = value[: -len(suffix)]
            divisor = scale
            break
    try:
        parsed = float(value)
    except ValueError:
        return None
    if not math.isfinite(parsed):
        return None
    return parsed / divisor


def parse_padding(token: str) -> PaddingSides:
    """Parse a padding utility (``p-4``, ``px-[10px]``, ``pt-0.5``).

    Returns NO_PADDING for anything that is not a recognized padding token.
    """
    prefix, sep, raw = token.partition("-")
    mask = _PADDING_SIDES.get(prefix)
    if not sep or mask is None:
        return NO_PADDING

    value = SPACING_SCALE.get(raw)
    if value is None:
        inner = unbracket(raw)
        value = parse_custom_spacing(inner) if inner is not None else None
    if value is None:
        logger.debug("ignoring padding token with unknown value: %r", token)
        return NO_PADDING

    return PaddingSides(*(value if on else None for on in mask))


def parse_font_size(value: str) -> float | None:
    """Font size in rem for the part after ``text-``, or None if not a size."""
    size = FONT_SIZE_SCALE.get(value)
    if size is not None:
        return size
    inner = unbracket(value)
    if inner is None:
        return None
    return parse_custom_spacing(inner)

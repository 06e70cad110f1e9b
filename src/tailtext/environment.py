"""Host environment probing: terminal background brightness.

Probed lazily and once, through colors.BackgroundCache. Never raises: any
failure to classify the background falls back to "not dark".
"""

import logging
import os

import tailtext.settings

logger = logging.getLogger(__name__)

# xterm 16-color indices whose background reads as light
_LIGHT_INDICES = frozenset({7, 9, 10, 11, 12, 13, 14, 15})


def parse_colorfgbg(value: str) -> bool | None:
    """Classify a COLORFGBG value (``"15;0"``, ``"0;default;15"``).

    The last field is the background palette index. Returns None when it is
    missing or not a number.
    """
    fields = value.strip().split(";")
    if len(fields) < 2:
        return None
    try:
        index = int(fields[-1])
    except ValueError:
        return None
    if not 0 <= index <= 15:
        return None
    return index not in _LIGHT_INDICES


def detect_dark_background() -> bool:
    """True when the terminal background is dark.

    Order: explicit preference (env / settings file), then COLORFGBG, then
    the "not dark" default.
    """
    preference = tailtext.settings.load_background_preference()
    if preference != "auto":
        logger.debug("background preference from settings: %s", preference)
        return preference == "dark"

    colorfgbg = os.environ.get("COLORFGBG")
    if colorfgbg:
        is_dark = parse_colorfgbg(colorfgbg)
        if is_dark is not None:
            return is_dark
        logger.debug("unparseable COLORFGBG=%r", colorfgbg)

    logger.debug("background undetectable, assuming light")
    return False

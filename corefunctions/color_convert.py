"""
Color conversion between 8-bit RGB and the normalized MCF form
(Minecraft Bedrock server form colors, channels from 0 to 1)
"""

import numpy as np
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Tuple

RGB_MAX = 255
MCF_DECIMALS = 3
MCF_STEP = Decimal(1).scaleb(-MCF_DECIMALS)


class Direction(Enum):
    RGB_TO_MCF = "0"
    MCF_TO_RGB = "1"


class ColorError(ValueError):
    """Base class for user input problems"""


class ColorFormatError(ColorError):
    """Input is not three comma separated numbers"""


class ColorRangeError(ColorError):
    """A channel is outside the allowed range"""


def _channels(values, low, high) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if not np.all(np.isfinite(arr)) or np.any((arr < low) | (arr > high)):
        raise ColorRangeError(f"Channel values must be in the range {low} to {high}")
    return arr


def rgb_to_mcf(r, g, b) -> Tuple[str, str, str]:
    """
    Convert an RGB color to MCF form

    Args:
        r, g, b: Channel values (0-255)

    Returns:
        tuple: Three strings with 3 decimal places, e.g. ("1.000", "0.588", "0.000")

    Raises:
        ColorRangeError: If any channel is outside 0-255
    """
    scaled = _channels((r, g, b), 0, RGB_MAX) / RGB_MAX
    # exact binary value, ties round up (0.0625 -> "0.063")
    return tuple(str(Decimal(float(x)).quantize(MCF_STEP, rounding=ROUND_HALF_UP)) for x in scaled)


def mcf_to_rgb(nr, ng, nb) -> Tuple[int, int, int]:
    """
    Convert an MCF color back to RGB

    Args:
        nr, ng, nb: Normalized channel values (0-1)

    Returns:
        tuple: Three ints (0-255), halves round away from zero (0.5 -> 128)

    Raises:
        ColorRangeError: If any channel is outside 0-1
    """
    # channels are non-negative here, so floor(x + 0.5) rounds halves up
    scaled = np.floor(_channels((nr, ng, nb), 0, 1) * RGB_MAX + 0.5)
    return tuple(int(x) for x in scaled)


def parse_triple(text: str) -> Tuple[float, float, float]:
    """Parse "R, G, B" style input into three numbers"""
    fields = [field.strip() for field in text.split(",")]
    if len(fields) != 3:
        raise ColorFormatError(f"Expected 3 values, got {len(fields)}")

    values = []
    for field in fields:
        try:
            value = float(field)
        except ValueError:
            raise ColorFormatError(f"Not a number: {field!r}") from None
        if not np.isfinite(value):
            raise ColorFormatError(f"Not a number: {field!r}")
        values.append(value)
    return tuple(values)


def convert(direction: Direction, values):
    """Run the converter that matches the chosen direction"""
    if direction is Direction.RGB_TO_MCF:
        return rgb_to_mcf(*values)
    return mcf_to_rgb(*values)

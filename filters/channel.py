"""
Instafilter — Channel Emphasis Filters
Push above-average pixels of one colour channel further from the average.
"""

import numpy as np

from core.raster import RasterBuffer
from core.statistics import average_channels

_CHANNEL_INDEX = {"red": 0, "green": 1, "blue": 2}


def _emphasize(buffer: RasterBuffer, channel: str, intensity: int) -> None:
    """Shared body of the blue/red/green filters.

    The deviation is always measured on the blue channel, whichever channel
    is being written. Only the average and the target channel vary.
    """
    averages = average_channels(buffer)
    average = getattr(averages, channel)
    # diff >= 1 wherever a write happens, so +-256 already saturates 0-255
    intensity = max(-256, min(256, int(intensity)))

    pixels = buffer.pixels
    diff = pixels[:, :, 2].astype(np.int64) - average
    mask = diff > 0
    if not mask.any():
        return

    boosted = np.clip(average + diff[mask] * intensity, 0, 255)
    pixels[:, :, _CHANNEL_INDEX[channel]][mask] = boosted.astype(np.uint8)


def blue_filter(buffer: RasterBuffer, intensity: int = 2) -> None:
    """Emphasize blue. Intensity -4..4 gives the most usable results.

    Args:
        buffer: Buffer to modify in place.
        intensity: Multiplier on each pixel's above-average deviation.
            Negative values invert the effect. Not bounded.
    """
    _emphasize(buffer, "blue", intensity)


def red_filter(buffer: RasterBuffer, intensity: int = 2) -> None:
    """Emphasize red. See blue_filter for the intensity range."""
    _emphasize(buffer, "red", intensity)


def green_filter(buffer: RasterBuffer, intensity: int = 2) -> None:
    """Emphasize green. See blue_filter for the intensity range."""
    _emphasize(buffer, "green", intensity)

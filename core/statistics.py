"""
Instafilter — Channel Statistics
Per-channel averages used by the colour emphasis filters.
"""

from typing import NamedTuple

import numpy as np

from core.raster import InvalidBufferError, RasterBuffer


class ChannelAverages(NamedTuple):
    red: int
    green: int
    blue: int


def average_channels(buffer: RasterBuffer) -> ChannelAverages:
    """Truncating integer mean of the red, green and blue channels.

    Always computed from the buffer's current pixels, so a filter that
    calls this sees the result of every filter applied before it.

    Raises:
        InvalidBufferError: If the buffer holds no pixels.
    """
    count = buffer.pixel_count
    if count <= 0:
        raise InvalidBufferError("Cannot average an empty buffer")

    totals = buffer.pixels[:, :, :3].sum(axis=(0, 1), dtype=np.int64)
    red, green, blue = (int(t) // count for t in totals)
    return ChannelAverages(red, green, blue)

"""
Instafilter — Brightness Filter
Scales red, green and blue by a percentage. Alpha is left alone.
"""

import numpy as np

from core.raster import RasterBuffer


def brightness(buffer: RasterBuffer, percentage: int = 100) -> None:
    """Scale every pixel's RGB by percentage / 100.

    Args:
        buffer: Buffer to modify in place.
        percentage: 50 halves, 150 brightens by half, 100 is the identity.

    Results round half away from zero (67.5 -> 68), then clamp to 0-255.
    """
    # past +-256x every nonzero channel already clips to 0 or 255
    percentage = max(-25600, min(25600, percentage))
    scale = percentage / 100
    rgb = buffer.pixels[:, :, :3]
    scaled = rgb.astype(np.float64) * scale
    rounded = np.sign(scaled) * np.floor(np.abs(scaled) + 0.5)
    rgb[...] = np.clip(rounded, 0, 255).astype(np.uint8)

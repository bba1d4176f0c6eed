"""
Instafilter — Dot Overlay Filter
Punches a dotted grid into the image: one pixel in every 2x2 block.
"""

from core.raster import RasterBuffer

DOT_MODES = ("dark", "light")


def dots(buffer: RasterBuffer, mode: str = "dark") -> None:
    """Blank every pixel whose x and y are both even.

    Args:
        buffer: Buffer to modify in place.
        mode: 'dark' zeroes RGB and keeps alpha (opaque black dots).
              'light' zeroes RGB and alpha (transparent holes).
              Anything else leaves the buffer untouched.
    """
    grid = buffer.pixels[0::2, 0::2]
    if mode == "dark":
        grid[:, :, :3] = 0
    elif mode == "light":
        grid[:, :, :] = 0

"""
Instafilter — Image I/O Boundary
Converts Pillow images to RasterBuffers and back. Nothing here writes files.
"""

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from core.raster import InvalidBufferError, RasterBuffer
from core.safety import validate_dimensions


class DecodeError(Exception):
    """Raised when source imagery can't be turned into a RasterBuffer."""
    pass


class EncodeError(Exception):
    """Raised when a RasterBuffer can't be turned back into an image."""
    pass


def decode_image(image: Image.Image) -> RasterBuffer:
    """Convert a Pillow image (any mode) to an RGBA RasterBuffer."""
    if image is None:
        raise DecodeError("No image to decode")
    if image.width <= 0 or image.height <= 0:
        raise DecodeError(f"Image has no pixels ({image.width}x{image.height})")
    try:
        rgba = image.convert("RGBA")
        return RasterBuffer.from_array(np.asarray(rgba))
    except InvalidBufferError as e:
        raise DecodeError(f"Image has no usable pixels: {e}") from e
    except (OSError, ValueError) as e:
        raise DecodeError(f"Could not decode image: {e}") from e


def load_image(path: str) -> RasterBuffer:
    """Read an image file and decode it.

    Raises:
        DecodeError: Missing, unreadable or corrupt file.
        SafetyError: Image dimensions exceed MAX_PIXELS (checked before decoding).
    """
    path = Path(path)
    if not path.is_file():
        raise DecodeError(f"Image not found: {path}")
    try:
        with Image.open(path) as img:
            validate_dimensions(*img.size)
            img.load()
            return decode_image(img)
    except UnidentifiedImageError as e:
        raise DecodeError(f"Not a recognized image format: {path}") from e
    except OSError as e:
        raise DecodeError(f"Could not read {path}: {e}") from e


def encode_image(buffer: RasterBuffer) -> Image.Image:
    """Convert a RasterBuffer to an RGBA Pillow image of the same size."""
    try:
        # (H, W, 4) uint8 is inferred as RGBA
        return Image.fromarray(buffer.to_array())
    except (TypeError, ValueError, AttributeError) as e:
        raise EncodeError(f"Could not encode buffer: {e}") from e

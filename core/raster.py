"""
Instafilter — Raster Buffer
Fixed-size RGBA pixel grid (8 bits per channel) that every filter mutates in place.

Storage is a (height, width, 4) uint8 numpy array, row-major, so the flat
index of pixel (x, y) is y * width + x.
"""

import operator
from typing import Iterator, NamedTuple

import numpy as np


class InvalidBufferError(ValueError):
    """Raised when a buffer has zero dimensions or mismatched pixel data."""
    pass


class OutOfBoundsError(IndexError):
    """Raised on pixel access outside [0, width) x [0, height)."""
    pass


class Pixel(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: int


TRANSPARENT = Pixel(0, 0, 0, 0)


class RasterBuffer:
    """A width x height grid of RGBA pixels.

    The size is fixed at construction. Filters operate on the live array
    exposed by ``pixels``; callers use ``get``/``set`` for single pixels.
    """

    def __init__(self, width: int, height: int, fill: Pixel = TRANSPARENT):
        width, height = _check_dimensions(width, height)
        self._pixels = np.empty((height, width, 4), dtype=np.uint8)
        self._pixels[:, :] = _check_pixel(fill)

    @classmethod
    def from_array(cls, array) -> "RasterBuffer":
        """Build a buffer from an (H, W, 4) array. The data is copied."""
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] != 4:
            raise InvalidBufferError(
                f"Expected an (height, width, 4) array, got shape {array.shape}"
            )
        height, width = array.shape[:2]
        _check_dimensions(width, height)
        if array.dtype != np.uint8:
            if array.dtype.kind not in "biuf":
                raise InvalidBufferError(f"Unsupported pixel dtype {array.dtype}")
            if array.dtype.kind == "f":
                if not np.isfinite(array).all() or (array != np.floor(array)).any():
                    raise InvalidBufferError("Channel values must be whole numbers")
            if array.min() < 0 or array.max() > 255:
                raise InvalidBufferError("Channel values must be in 0-255")
            array = array.astype(np.uint8)
        buffer = cls.__new__(cls)
        buffer._pixels = np.array(array, dtype=np.uint8, copy=True)
        return buffer

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels) -> "RasterBuffer":
        """Build a buffer from a flat, row-major sequence of pixels."""
        width, height = _check_dimensions(width, height)
        pixels = list(pixels)
        if len(pixels) != width * height:
            raise InvalidBufferError(
                f"{width}x{height} buffer needs {width * height} pixels, got {len(pixels)}"
            )
        try:
            flat = np.array([tuple(p) for p in pixels], dtype=np.int64)
        except (TypeError, ValueError) as e:
            raise InvalidBufferError(f"Malformed pixel data: {e}") from e
        if flat.shape != (width * height, 4):
            raise InvalidBufferError("Every pixel needs exactly 4 channels (RGBA)")
        return cls.from_array(flat.reshape(height, width, 4))

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def pixels(self) -> np.ndarray:
        """Live (H, W, 4) view of the pixel storage. Writes go straight into the buffer."""
        return self._pixels

    def get(self, x: int, y: int) -> Pixel:
        self._check_bounds(x, y)
        r, g, b, a = self._pixels[y, x]
        return Pixel(int(r), int(g), int(b), int(a))

    def set(self, x: int, y: int, pixel: Pixel) -> None:
        self._check_bounds(x, y)
        self._pixels[y, x] = _check_pixel(pixel)

    def iter_pixels(self) -> Iterator[Pixel]:
        """Yield every pixel in row-major order."""
        for r, g, b, a in self._pixels.reshape(-1, 4).tolist():
            yield Pixel(r, g, b, a)

    def to_array(self) -> np.ndarray:
        return self._pixels.copy()

    def copy(self) -> "RasterBuffer":
        return RasterBuffer.from_array(self._pixels)

    def _check_bounds(self, x: int, y: int) -> None:
        try:
            operator.index(x)
            operator.index(y)
        except TypeError:
            raise OutOfBoundsError(f"Pixel coordinates must be integers, got ({x!r}, {y!r})") from None
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(
                f"Pixel ({x}, {y}) is outside the {self.width}x{self.height} buffer"
            )

    def __eq__(self, other):
        if not isinstance(other, RasterBuffer):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    def __repr__(self):
        return f"RasterBuffer(width={self.width}, height={self.height})"


def _check_dimensions(width, height) -> tuple[int, int]:
    width, height = int(width), int(height)
    if width <= 0 or height <= 0:
        raise InvalidBufferError(f"Buffer dimensions must be positive, got {width}x{height}")
    return width, height


def _check_pixel(pixel) -> tuple:
    values = tuple(int(v) for v in pixel)
    if len(values) != 4:
        raise ValueError(f"A pixel has 4 channels (RGBA), got {len(values)}")
    for v in values:
        if not 0 <= v <= 255:
            raise ValueError(f"Channel value {v} is outside 0-255")
    return values

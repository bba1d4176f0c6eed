"""
Conftest: shared fixtures for all Instafilter test modules.

1. Small hand-written buffers from the documented scenarios
2. Deterministic random buffers for property-style checks
3. On-disk sample images for the I/O and CLI tests
"""

import os
import sys

import numpy as np
import pytest
from PIL import Image

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.raster import Pixel, RasterBuffer


SCENARIO_PIXELS = [
    Pixel(100, 50, 200, 255),
    Pixel(10, 10, 10, 255),
    Pixel(250, 250, 250, 0),
    Pixel(0, 0, 0, 255),
]


def _make_test_array(width=16, height=12, seed=42):
    """Deterministic random RGBA array (not blank, mixed alpha)."""
    rng = np.random.RandomState(seed)
    return rng.randint(0, 256, (height, width, 4), dtype=np.uint8)


@pytest.fixture
def scenario_buffer():
    """2x2 buffer: (100,50,200,255) (10,10,10,255) / (250,250,250,0) (0,0,0,255)."""
    return RasterBuffer.from_pixels(2, 2, SCENARIO_PIXELS)


@pytest.fixture
def random_buffer():
    """A 16x12 deterministic random RGBA buffer."""
    return RasterBuffer.from_array(_make_test_array())


@pytest.fixture
def odd_buffer():
    """A 5x3 buffer -- odd dimensions for the dot grid."""
    return RasterBuffer.from_array(_make_test_array(width=5, height=3, seed=7))


@pytest.fixture
def sample_png(tmp_path):
    """An 8x6 RGBA PNG with a horizontal gradient."""
    arr = np.zeros((6, 8, 4), dtype=np.uint8)
    arr[:, :, 0] = np.linspace(0, 255, 8, dtype=np.uint8)
    arr[:, :, 1] = 128
    arr[:, :, 2] = np.linspace(255, 0, 8, dtype=np.uint8)
    arr[:, :, 3] = 255
    path = tmp_path / "sample.png"
    Image.fromarray(arr).save(path)
    return path

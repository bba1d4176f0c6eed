"""Tests for the FilterProcessor session."""

import numpy as np
from PIL import Image

from core.processor import FilterProcessor
from core.raster import Pixel, RasterBuffer
from conftest import SCENARIO_PIXELS


def _scenario_image():
    arr = np.array(SCENARIO_PIXELS, dtype=np.uint8).reshape(2, 2, 4)
    return Image.fromarray(arr)


class TestFilterProcessor:

    def test_decodes_pillow_image(self):
        proc = FilterProcessor(_scenario_image())
        assert proc.buffer.get(0, 1) == Pixel(250, 250, 250, 0)

    def test_takes_ownership_of_buffer(self, scenario_buffer):
        proc = FilterProcessor(scenario_buffer)
        assert proc.buffer is scenario_buffer

    def test_run_filters_mutates_session_buffer(self):
        proc = FilterProcessor(_scenario_image())
        skipped = proc.run_filters(["blue 100%", "dark dots"])
        assert skipped == []
        assert proc.buffer.get(0, 0) == Pixel(0, 0, 0, 255)
        assert proc.buffer.get(0, 1) == Pixel(250, 250, 255, 0)
        assert proc.applied == ["blue 100%", "dark dots"]

    def test_warnings_accumulate_across_runs(self, random_buffer):
        proc = FilterProcessor(random_buffer)
        first = proc.run_filters(["bogus"])
        second = proc.run_filters(["Red 50%", "Other"])
        assert first == ["This filter 'bogus' is an invalid choice"]
        assert second == ["This filter 'other' is an invalid choice"]
        assert proc.warnings == first + second
        assert proc.applied == ["red 50%"]

    def test_display_image_reflects_filters(self):
        proc = FilterProcessor(_scenario_image())
        proc.run_filters(["light dots"])
        img = proc.display_image()
        assert img.mode == "RGBA"
        assert img.size == (2, 2)
        assert img.getpixel((0, 0)) == (0, 0, 0, 0)
        assert img.getpixel((1, 1)) == (0, 0, 0, 255)

    def test_sessions_are_independent(self):
        image = _scenario_image()
        a = FilterProcessor(image)
        b = FilterProcessor(image)
        a.run_filters(["brightness 50%"])
        assert b.buffer == RasterBuffer.from_pixels(2, 2, SCENARIO_PIXELS)

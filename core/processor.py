"""
Instafilter — Filter Processor
A processing session: owns one decoded image, runs filter chains on it,
and hands the result back as a Pillow image.
"""

from dataclasses import dataclass, field

from PIL import Image

from core.image_io import decode_image, encode_image
from core.raster import RasterBuffer
from filters import FILTERS, normalize_name, run_filters


@dataclass
class FilterProcessor:
    """Session state for one image.

    Configuration:
        image: Pillow image or an existing RasterBuffer. A RasterBuffer is
            used as-is (the session takes ownership); a Pillow image is decoded.

    Runtime state:
        applied: Labels applied so far, lowercased, in order.
        warnings: Messages for every skipped label across all runs.
    """
    image: Image.Image | RasterBuffer
    applied: list = field(default_factory=list)
    warnings: list = field(default_factory=list)

    def __post_init__(self):
        if isinstance(self.image, RasterBuffer):
            self._buffer = self.image
        else:
            self._buffer = decode_image(self.image)

    @property
    def buffer(self) -> RasterBuffer:
        return self._buffer

    def run_filters(self, filter_choices) -> list[str]:
        """Apply the named filters to this session's image, in order.

        Returns the warnings for this call only; ``self.warnings`` keeps them all.
        """
        filter_choices = list(filter_choices)
        skipped = run_filters(self._buffer, filter_choices)
        self.applied.extend(
            normalize_name(n) for n in filter_choices if normalize_name(n) in FILTERS
        )
        self.warnings.extend(skipped)
        return skipped

    def display_image(self) -> Image.Image:
        """Current state of the image as an RGBA Pillow image."""
        return encode_image(self._buffer)

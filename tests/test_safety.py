"""
Instafilter -- Safety & Resource Limit Tests
Image file checks and decoded-size limits.

Run with: pytest tests/test_safety.py -v
"""

import pytest

from core import safety
from core.safety import SafetyError, check_image_file, validate_dimensions


class TestCheckImageFile:

    def test_valid_png(self, sample_png):
        info = check_image_file(sample_png)
        assert info["extension"] == ".png"
        assert info["size_mb"] < 1
        assert info["path"].endswith("sample.png")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            check_image_file(tmp_path / "missing.png")

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            check_image_file(tmp_path)

    @pytest.mark.parametrize("name", ["notes.txt", "run.sh", "clip.mp4", "noext"])
    def test_rejects_non_image_extensions(self, tmp_path, name):
        path = tmp_path / name
        path.write_bytes(b"data")
        with pytest.raises(SafetyError, match="not allowed"):
            check_image_file(path)

    def test_uppercase_extension_allowed(self, tmp_path):
        path = tmp_path / "PHOTO.JPG"
        path.write_bytes(b"data")
        assert check_image_file(path)["extension"] == ".jpg"

    def test_rejects_oversized_file(self, sample_png, monkeypatch):
        monkeypatch.setattr(safety, "MAX_FILE_MB", 0)
        with pytest.raises(SafetyError, match="refused"):
            check_image_file(sample_png)


class TestDimensions:

    def test_within_limit(self):
        validate_dimensions(4000, 3000)

    def test_over_limit(self):
        with pytest.raises(SafetyError, match="the limit is"):
            validate_dimensions(safety.MAX_PIXELS, 2)

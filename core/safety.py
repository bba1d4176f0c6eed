"""
Instafilter — Input Guards
Checks an image file and its header dimensions before the pixels are decoded.
"""

from pathlib import Path

# --- Configurable Limits ---
MAX_FILE_MB = 50           # Largest image file accepted
MAX_PIXELS = 40_000_000    # Largest width x height accepted
ALLOWED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff", ".webp"}


class SafetyError(Exception):
    """Raised when an input image is rejected before decoding."""
    pass


def check_image_file(path) -> dict:
    """Make sure path names a reasonably sized file with an image extension.

    Returns:
        {"path": resolved path str, "size_mb": float, "extension": lowercase suffix}

    Raises:
        FileNotFoundError: Nothing (or a directory) at path.
        SafetyError: Unsupported suffix or file over MAX_FILE_MB.
    """
    resolved = Path(path).resolve()
    if not resolved.is_file():
        raise FileNotFoundError(f"No image file at {path}")

    extension = resolved.suffix.lower()
    if extension not in ALLOWED_EXTENSIONS:
        kinds = " ".join(sorted(ALLOWED_EXTENSIONS))
        raise SafetyError(f"{resolved.name}: '{extension or 'no extension'}' is not allowed, expected one of {kinds}")

    size_mb = resolved.stat().st_size / 2**20
    if size_mb > MAX_FILE_MB:
        raise SafetyError(f"{resolved.name} is {size_mb:.1f}MB; images over {MAX_FILE_MB}MB are refused")

    return {"path": str(resolved), "size_mb": size_mb, "extension": extension}


def validate_dimensions(width: int, height: int) -> None:
    """Refuse images whose pixel count is over MAX_PIXELS.

    Raises:
        SafetyError: If width x height exceeds MAX_PIXELS.
    """
    if width * height > MAX_PIXELS:
        raise SafetyError(
            f"{width}x{height} image has {width * height} pixels; the limit is {MAX_PIXELS}"
        )

"""
Image decoding utilities.

Decodes byte buffers and files into 8-bit BGR arrays with OpenCV,
falling back to Pillow for formats OpenCV cannot read.
"""

from __future__ import annotations
import io
import logging
import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import InvalidInputError

logger = logging.getLogger(__name__)


def _pil_to_bgr(pil: Image.Image) -> np.ndarray:
    arr = np.array(pil.convert("RGB"))
    return cv2.cvtColor(arr, cv2.COLOR_RGB2BGR)


def decode_image(data: bytes) -> np.ndarray:
    """Decode an encoded image buffer into an 8-bit BGR array."""
    if not data:
        raise InvalidInputError("Cannot read image!")
    buf = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(buf, cv2.IMREAD_COLOR)
    if img is not None and img.size:
        return img

    # Fallback: use Pillow if OpenCV fails
    logger.debug("OpenCV could not decode %d bytes, trying Pillow", len(data))
    try:
        with Image.open(io.BytesIO(data)) as pil:
            return _pil_to_bgr(pil)
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidInputError("Cannot read image!") from e


def imread_color(path: str) -> np.ndarray:
    """Read an image file and return it as an 8-bit BGR array."""
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is not None and img.size:
        return img
    try:
        with Image.open(path) as pil:
            return _pil_to_bgr(pil)
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidInputError(f"Cannot read image: {path}") from e

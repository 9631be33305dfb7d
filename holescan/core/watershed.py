"""
Region growing via OpenCV marker-controlled watershed.

OpenCV writes -1 on watershed lines (and on the one-pixel image frame); the
returned label map re-encodes those as BOUNDARY so every pixel holds a
non-negative label: 0 boundary, 1 background, 2..N holes.
"""

from __future__ import annotations
import cv2
import numpy as np

BOUNDARY = 0
_CV_WSHED = -1


def as_bgr(img: np.ndarray) -> np.ndarray:
    """3-channel 8-bit copy of img, as cv2.watershed requires."""
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2BGR)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2BGR)
    return img.copy()


def grow_regions(img: np.ndarray, markers: np.ndarray) -> np.ndarray:
    """Flood the unknown band of `markers` from its seeds over `img`; returns a new label map."""
    labels = markers.astype(np.int32, copy=True)
    cv2.watershed(as_bgr(img), labels)
    labels[labels == _CV_WSHED] = BOUNDARY
    return labels

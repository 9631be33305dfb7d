"""
Candidate mask construction.

Includes:
- Grayscale conversion
- Fixed-intensity bright thresholding
- Elliptical open/close cleanup
"""

from __future__ import annotations
import cv2
import numpy as np

from .params import DetectionParams


def ellipse_kernel(size: int) -> np.ndarray:
    """Elliptical structuring element of size×size."""
    return cv2.getStructuringElement(cv2.MORPH_ELLIPSE, (size, size))


def to_gray(img: np.ndarray) -> np.ndarray:
    """Return a single-channel copy of a BGR, BGRA or grayscale image."""
    if img.ndim == 2:
        return img.copy()
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2GRAY)
    return cv2.cvtColor(img, cv2.COLOR_BGR2GRAY)


def threshold_bright(gray: np.ndarray, intensity: int) -> np.ndarray:
    """Binary mask: 255 where gray >= intensity, 0 elsewhere."""
    # THRESH_BINARY is strict (src > thresh)
    _, bw = cv2.threshold(gray, float(intensity) - 1.0, 255, cv2.THRESH_BINARY)
    return bw


def morph_open(bw: np.ndarray, kernel_size: int, iterations: int) -> np.ndarray:
    """Binary opening with an elliptical kernel; removes isolated specks."""
    if iterations <= 0:
        return bw.copy()
    return cv2.morphologyEx(bw, cv2.MORPH_OPEN, ellipse_kernel(kernel_size), iterations=iterations)


def morph_close(bw: np.ndarray, kernel_size: int, iterations: int) -> np.ndarray:
    """Binary closing with an elliptical kernel; re-joins fragmented interiors."""
    if iterations <= 0:
        return bw.copy()
    return cv2.morphologyEx(bw, cv2.MORPH_CLOSE, ellipse_kernel(kernel_size), iterations=iterations)


def build_candidate_mask(img: np.ndarray, params: DetectionParams | None = None) -> np.ndarray:
    """
    Build the "possible hole" mask:
      1) grayscale
      2) optional Gaussian blur
      3) threshold at params.threshold_intensity
      4) open, then close
    """
    P = params or DetectionParams()
    gray = to_gray(img)
    if P.blur_ksize:
        gray = cv2.GaussianBlur(gray, (P.blur_ksize, P.blur_ksize), 0)
    bw = threshold_bright(gray, P.threshold_intensity)
    bw = morph_open(bw, P.morph_kernel_size, P.open_iterations)
    bw = morph_close(bw, P.morph_kernel_size, P.close_iterations)
    return bw

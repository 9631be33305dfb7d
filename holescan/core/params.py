"""
Detection parameter data structures.

Defines the full set of segmentation and measurement
parameters used by the bullet-hole detection pipeline,
plus the per-image area bounds derived from image size.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class AreaThresholds:
    """Plausible hole area range (px) for one image."""
    min_area: int
    max_area: int


@dataclass(frozen=True)
class DetectionParams:
    """Configuration parameters for hole segmentation and measurement."""

    # Thresholding: holes are overexposed, bright regions
    threshold_intensity: int = 200
    blur_ksize: int = 0  # Gaussian pre-blur, 0 disables

    # Mask cleanup
    morph_kernel_size: int = 3
    open_iterations: int = 1
    close_iterations: int = 1

    # Marker synthesis on the normalized distance field
    peak_kernel_size: int = 7
    peak_min_strength: float = 0.2
    foreground_threshold: float = 0.3
    background_dilate_iterations: int = 1

    # Measurement
    noise_floor_px: int = 50
    enforce_area_thresholds: bool = False

    # Area bounds relative to image size
    min_area_fraction: float = 0.0005
    max_area_fraction: float = 0.01
    min_area_floor: int = 50
    max_area_ceiling: int = 50000

    def __post_init__(self) -> None:
        if not 0 <= self.threshold_intensity <= 255:
            raise ValueError("threshold_intensity must be within 0..255.")
        if self.blur_ksize and (self.blur_ksize < 0 or self.blur_ksize % 2 == 0):
            raise ValueError("blur_ksize must be 0 or a positive odd number.")
        for name in ("morph_kernel_size", "peak_kernel_size"):
            k = getattr(self, name)
            if k < 1 or k % 2 == 0:
                raise ValueError(f"{name} must be a positive odd number.")
        for name in ("open_iterations", "close_iterations", "background_dilate_iterations", "noise_floor_px"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative.")
        for name in ("min_area_fraction", "max_area_fraction"):
            f = getattr(self, name)
            if not 0.0 < f <= 1.0:
                raise ValueError(f"{name} must be within (0, 1].")
        if self.min_area_floor > self.max_area_ceiling:
            raise ValueError("min_area_floor must not exceed max_area_ceiling.")

"""
End-to-end hole detection.

raw BGR image -> candidate mask -> markers -> watershed labels -> blobs.
Each pass is a pure function of its input image and parameters; no stage
writes into a buffer owned by another stage.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple
import numpy as np

from .area import estimate_area_thresholds
from .errors import InvalidInputError
from .mask import build_candidate_mask
from .markers import distance_field, synthesize_markers
from .measure import Blob, measure_blobs
from .params import AreaThresholds, DetectionParams
from .watershed import grow_regions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectionResult:
    """Blobs found in one image together with the bounds that were used."""
    blobs: Tuple[Blob, ...]
    image_width: int
    image_height: int
    thresholds: AreaThresholds

    @property
    def count(self) -> int:
        return len(self.blobs)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation used by the HTTP service and CLI."""
        return {
            "count": self.count,
            "coordinates": [
                {"x": b.centroid_x, "y": b.centroid_y, "radius": b.radius}
                for b in self.blobs
            ],
            "imageWidth": self.image_width,
            "imageHeight": self.image_height,
            "areaThresholds": {
                "min": self.thresholds.min_area,
                "max": self.thresholds.max_area,
            },
        }


@dataclass(frozen=True)
class PipelineStages:
    """Intermediate images of one pass, kept for overlays and inspection."""
    mask: np.ndarray
    dist: np.ndarray
    markers: np.ndarray
    labels: np.ndarray
    result: DetectionResult


def validate_image(img: Any) -> None:
    """Raise InvalidInputError unless img is a non-empty 8-bit gray/BGR/BGRA array."""
    if img is None:
        raise InvalidInputError("Cannot read image!")
    if not isinstance(img, np.ndarray):
        raise InvalidInputError(f"Expected a numpy array, got {type(img).__name__}.")
    if img.size == 0:
        raise InvalidInputError("Image is empty.")
    if img.dtype != np.uint8:
        raise InvalidInputError(f"Expected an 8-bit image, got dtype {img.dtype}.")
    if img.ndim == 3 and img.shape[2] in (3, 4):
        return
    if img.ndim == 2:
        return
    raise InvalidInputError(f"Unsupported image shape {img.shape}.")


def run_stages(img: np.ndarray, params: DetectionParams | None = None) -> PipelineStages:
    """Run the full pipeline and keep every intermediate image."""
    P = params or DetectionParams()
    validate_image(img)
    h, w = img.shape[:2]
    thresholds = estimate_area_thresholds(w, h, P)

    mask = build_candidate_mask(img, P)
    dist = distance_field(mask)
    markers = synthesize_markers(mask, P, dist=dist)
    labels = grow_regions(img, markers)
    blobs = measure_blobs(labels, thresholds, P)

    result = DetectionResult(
        blobs=tuple(blobs),
        image_width=int(w),
        image_height=int(h),
        thresholds=thresholds,
    )
    logger.info("Detected %d hole(s) in %dx%d image (area bounds %d..%d px)",
                result.count, w, h, thresholds.min_area, thresholds.max_area)
    return PipelineStages(mask=mask, dist=dist, markers=markers, labels=labels, result=result)


def detect_holes(img: np.ndarray, params: DetectionParams | None = None) -> DetectionResult:
    """Detect bright, roughly circular holes in an 8-bit image."""
    return run_stages(img, params).result

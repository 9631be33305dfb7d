"""
Region measurement and radius statistics.

- Accumulate raw moments (m00, m10, m01) per label in one pass
- Convert surviving labels to centroid + equivalent-circle radius
- Compute basic radius stats (count, mean, std, median, min, max)
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Dict, List
import numpy as np

from .markers import FIRST_SEED
from .params import AreaThresholds, DetectionParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Blob:
    """One detected hole, in pixel coordinates."""
    label: int
    area_px: int
    centroid_x: float
    centroid_y: float
    radius: float


@dataclass(frozen=True)
class LabelMoments:
    """Raw binary-mask moments of one label: area and coordinate sums."""
    label: int
    m00: int
    m10: float
    m01: float


def accumulate_label_moments(labels: np.ndarray, first_label: int = FIRST_SEED) -> List[LabelMoments]:
    """
    Return one LabelMoments record for every label in first_label..max(labels),
    including labels that own no pixels (m00 == 0).
    """
    top = int(labels.max()) if labels.size else 0
    if top < first_label:
        return []
    ys, xs = np.indices(labels.shape)
    sel = labels >= first_label
    lab = labels[sel]
    n = top + 1
    m00 = np.bincount(lab, minlength=n)
    m10 = np.bincount(lab, weights=xs[sel].astype(np.float64), minlength=n)
    m01 = np.bincount(lab, weights=ys[sel].astype(np.float64), minlength=n)
    return [
        LabelMoments(label=i, m00=int(m00[i]), m10=float(m10[i]), m01=float(m01[i]))
        for i in range(first_label, n)
    ]


def measure_blobs(
    labels: np.ndarray,
    thresholds: AreaThresholds,
    params: DetectionParams | None = None,
) -> List[Blob]:
    """
    Measure every hole label of a watershed label map.

    Regions below params.noise_floor_px are dropped regardless of thresholds;
    with params.enforce_area_thresholds the adaptive [min_area, max_area]
    range is applied as well. Blobs are returned in ascending label order.
    """
    P = params or DetectionParams()
    blobs: List[Blob] = []

    for mom in accumulate_label_moments(labels):
        area = mom.m00
        if area < P.noise_floor_px:
            continue
        if mom.m00 == 0:
            logger.debug("Label %d has no mass, skipped", mom.label)
            continue
        if P.enforce_area_thresholds and not (thresholds.min_area <= area <= thresholds.max_area):
            logger.debug("Label %d area %d outside [%d, %d], skipped",
                         mom.label, area, thresholds.min_area, thresholds.max_area)
            continue

        blobs.append(Blob(
            label=mom.label,
            area_px=area,
            centroid_x=mom.m10 / mom.m00,
            centroid_y=mom.m01 / mom.m00,
            radius=math.sqrt(area / math.pi),
        ))

    return blobs


def stats_from_radii(radii: np.ndarray) -> Dict[str, float | int]:
    """Return basic statistics for an array of hole radii in px."""
    return {
        "holes": int(radii.size),
        "mean": float(np.mean(radii)) if radii.size else 0.0,
        "std": float(np.std(radii)) if radii.size else 0.0,
        "median": float(np.median(radii)) if radii.size else 0.0,
        "min": float(np.min(radii)) if radii.size else 0.0,
        "max": float(np.max(radii)) if radii.size else 0.0,
    }

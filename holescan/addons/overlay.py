"""
Result overlay rendering.

Paints hole regions red, marks each centroid with a green dot and
draws the equivalent circle, on a copy of the input image.
"""

from __future__ import annotations
import cv2
import numpy as np

from holescan.core.markers import FIRST_SEED
from holescan.core.pipeline import PipelineStages
from holescan.core.watershed import as_bgr


def render_overlay(img: np.ndarray, stages: PipelineStages, dot_radius: int = 5) -> np.ndarray:
    """Return a BGR overlay of the detected holes."""
    out = as_bgr(img)
    out[stages.labels >= FIRST_SEED] = (0, 0, 255)
    for b in stages.result.blobs:
        center = (int(round(b.centroid_x)), int(round(b.centroid_y)))
        cv2.circle(out, center, max(1, int(round(b.radius))), (255, 255, 0), thickness=1)
        cv2.circle(out, center, dot_radius, (0, 255, 0), thickness=-1)
    return out

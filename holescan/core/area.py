"""
Adaptive area bounds.

Holes are assumed to cover between 0.05% and 1% of the frame; an absolute
floor and ceiling keep tiny crops and huge panoramas sensible.
"""

from __future__ import annotations
import logging

from .errors import InvalidInputError
from .params import AreaThresholds, DetectionParams

logger = logging.getLogger(__name__)


def estimate_area_thresholds(width: int, height: int, params: DetectionParams | None = None) -> AreaThresholds:
    """
    Return (min_area, max_area) in px for an image of the given size.

    Proportional bounds use Python's round(), so exact halves go to the
    nearest even integer. Above roughly 1e8 px the proportional minimum
    exceeds the absolute ceiling and min_area > max_area; the bounds are
    returned as computed and a warning is logged, since enforcing them
    would reject every region.
    """
    if width <= 0 or height <= 0:
        raise InvalidInputError(f"Image dimensions must be positive, got {width}x{height}.")
    P = params or DetectionParams()
    total = float(width) * float(height)
    min_area = max(P.min_area_floor, int(round(total * P.min_area_fraction)))
    max_area = min(P.max_area_ceiling, int(round(total * P.max_area_fraction)))
    if min_area > max_area:
        logger.warning("Area bounds inverted for %dx%d image: min %d > max %d px",
                       width, height, min_area, max_area)
    return AreaThresholds(min_area=min_area, max_area=max_area)

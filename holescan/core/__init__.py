# Public API of the core package (re-export)
from .errors import InvalidInputError
from .params import AreaThresholds, DetectionParams
from .area import estimate_area_thresholds
from .io_utils import decode_image, imread_color
from .mask import (
    ellipse_kernel,
    to_gray,
    threshold_bright,
    morph_open,
    morph_close,
    build_candidate_mask,
)
from .markers import (
    UNKNOWN,
    BACKGROUND,
    FIRST_SEED,
    distance_field,
    local_maxima,
    synthesize_markers,
)
from .watershed import BOUNDARY, as_bgr, grow_regions
from .measure import (
    Blob,
    LabelMoments,
    accumulate_label_moments,
    measure_blobs,
    stats_from_radii,
)
from .pipeline import (
    DetectionResult,
    PipelineStages,
    validate_image,
    run_stages,
    detect_holes,
)

__all__ = [
    # errors / params
    "InvalidInputError", "AreaThresholds", "DetectionParams", "estimate_area_thresholds",
    # io
    "decode_image", "imread_color",
    # candidate mask
    "ellipse_kernel", "to_gray", "threshold_bright", "morph_open", "morph_close", "build_candidate_mask",
    # markers & region growing
    "UNKNOWN", "BACKGROUND", "FIRST_SEED", "distance_field", "local_maxima", "synthesize_markers",
    "BOUNDARY", "as_bgr", "grow_regions",
    # measurement & stats
    "Blob", "LabelMoments", "accumulate_label_moments", "measure_blobs", "stats_from_radii",
    # pipeline
    "DetectionResult", "PipelineStages", "validate_image", "run_stages", "detect_holes",
]

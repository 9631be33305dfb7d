import pytest
from dataclasses import FrozenInstanceError
from holescan.core import DetectionParams


def test_defaults_match_detection_policy():
    P = DetectionParams()
    assert P.threshold_intensity == 200
    assert P.peak_kernel_size == 7
    assert P.peak_min_strength == pytest.approx(0.2)
    assert P.foreground_threshold == pytest.approx(0.3)
    assert P.noise_floor_px == 50
    assert P.enforce_area_thresholds is False


def test_params_are_immutable():
    P = DetectionParams()
    with pytest.raises(FrozenInstanceError):
        P.threshold_intensity = 100


@pytest.mark.parametrize("kwargs", [
    dict(threshold_intensity=300),
    dict(blur_ksize=4),
    dict(morph_kernel_size=2),
    dict(peak_kernel_size=0),
    dict(open_iterations=-1),
    dict(min_area_fraction=0.0),
    dict(min_area_floor=100, max_area_ceiling=10),
])
def test_invalid_params_rejected(kwargs):
    with pytest.raises(ValueError):
        DetectionParams(**kwargs)

import logging
import pytest
from holescan.core import AreaThresholds, DetectionParams, InvalidInputError, estimate_area_thresholds


def test_area_thresholds_small_image_hits_floor():
    t = estimate_area_thresholds(200, 200)
    assert t == AreaThresholds(min_area=50, max_area=400)


def test_area_thresholds_proportional():
    t = estimate_area_thresholds(1000, 1000)
    assert t.min_area == 500 and t.max_area == 10000


def test_area_thresholds_ceiling():
    t = estimate_area_thresholds(20000, 10000)
    assert t.max_area == 50000
    assert t.min_area == 100000


@pytest.mark.parametrize("w,h", [(10, 10), (200, 150), (640, 480), (1920, 1080), (5000, 4000)])
def test_area_thresholds_monotone_in_size(w, h):
    small = estimate_area_thresholds(w, h)
    big = estimate_area_thresholds(2 * w, 2 * h)
    assert big.min_area >= small.min_area
    assert big.max_area >= small.max_area


def test_area_thresholds_follow_params():
    P = DetectionParams(min_area_floor=10, max_area_ceiling=100, min_area_fraction=0.001)
    t = estimate_area_thresholds(100, 100, P)
    assert t.min_area == 10 and t.max_area == 100


@pytest.mark.parametrize("w,h", [(0, 10), (10, 0), (-5, 5)])
def test_area_thresholds_reject_non_positive(w, h):
    with pytest.raises(InvalidInputError):
        estimate_area_thresholds(w, h)


def test_inverted_bounds_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="holescan.core.area"):
        t = estimate_area_thresholds(20000, 10000)
    assert t.min_area > t.max_area
    assert "inverted" in caplog.text


def test_regular_bounds_log_nothing(caplog):
    with caplog.at_level(logging.WARNING, logger="holescan.core.area"):
        estimate_area_thresholds(640, 480)
    assert caplog.text == ""


def test_round_half_to_even():
    P = DetectionParams(min_area_fraction=0.5, max_area_fraction=0.5, min_area_floor=0, max_area_ceiling=10**6)
    assert estimate_area_thresholds(5, 1, P) == AreaThresholds(min_area=2, max_area=2)
    assert estimate_area_thresholds(7, 1, P) == AreaThresholds(min_area=4, max_area=4)

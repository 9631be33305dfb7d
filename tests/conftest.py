import numpy as np
import cv2
import pytest


def draw_disks(shape, disks, value=255, bg=0):
    """BGR image with filled circles (cx, cy, r) of the given intensity."""
    img = np.full((shape[0], shape[1], 3), bg, np.uint8)
    for cx, cy, r in disks:
        cv2.circle(img, (cx, cy), r, (value, value, value), -1)
    return img


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def single_disk():
    return draw_disks((200, 200), [(100, 100, 10)])


@pytest.fixture
def two_disks():
    return draw_disks((200, 200), [(70, 100, 8), (130, 100, 8)])


@pytest.fixture
def touching_disks():
    return draw_disks((200, 200), [(95, 100, 8), (105, 100, 8)])


@pytest.fixture
def dark_image():
    return np.full((200, 200, 3), 50, np.uint8)


@pytest.fixture
def noisy_targets(rng):
    # 256x256 синтетика: кілька яскравих дір на шумному тлі
    img = draw_disks((256, 256), [(64, 64, 12), (128, 128, 9), (192, 60, 7)], value=235, bg=90)
    noise = rng.normal(0, 12, img.shape).astype(np.int16)
    return np.clip(img.astype(np.int16) + noise, 0, 255).astype(np.uint8)


@pytest.fixture
def png_bytes(single_disk):
    ok, buf = cv2.imencode(".png", single_disk)
    assert ok
    return buf.tobytes()

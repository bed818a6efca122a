import cv2
import numpy as np
import pytest

RED = (0, 0, 255)
# upward triangle, 61 px wide and 121 px tall
CONE_PTS = [(100, 40), (70, 160), (130, 160)]


def make_cone_image(size=(200, 200), pts=CONE_PTS, color=RED, background=(0, 0, 0)):
    h, w = size
    img = np.full((h, w, 3), background, dtype=np.uint8)
    cv2.fillPoly(img, [np.array(pts, dtype=np.int32)], color)
    return img


def hull(pts):
    return np.array(pts, dtype=np.int32).reshape(-1, 1, 2)


@pytest.fixture
def cone_image():
    return make_cone_image()


@pytest.fixture
def blank_image():
    return np.full((120, 160, 3), 255, dtype=np.uint8)


@pytest.fixture
def cone_png(cone_image):
    ok, buf = cv2.imencode(".png", cone_image)
    assert ok
    return buf.tobytes()

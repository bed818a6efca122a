import cv2
import numpy as np
import pytest

from cone_detect import detect_cones, find_traffic_cones, load_image, InvalidImageError
from cone_detect.config import DEFAULT_CONFIG
from cone_detect.visualize import StageRecorder
from .conftest import make_cone_image


def _components(mask):
    num, _ = cv2.connectedComponents(mask.astype(np.uint8))
    return num - 1


def test_single_red_cone(cone_image):
    result = find_traffic_cones(cone_image)

    assert result.count == 1
    assert result.message == "1 traffic cone was found"
    assert len(result.cones) == 1
    assert len(result.candidates) == len(result.contours)

    cone = result.accepted[0]
    x, y, w, h = cone.bbox
    assert 60 <= x <= 75 and 30 <= y <= 55
    assert float(w) / h <= DEFAULT_CONFIG.max_aspect_ratio
    cx, cy = cone.center
    assert cx == pytest.approx(100, abs=3)
    assert cy == pytest.approx(120, abs=6)


def test_annotated_image_has_one_outline_and_one_marker(cone_image):
    result, vis = detect_cones(cone_image)

    assert vis.shape == cone_image.shape
    assert not np.array_equal(vis, cone_image)

    outline = np.all(vis == DEFAULT_CONFIG.outline_color, axis=2)
    marker = np.all(vis == DEFAULT_CONFIG.marker_color, axis=2)
    assert _components(outline) == 1
    assert _components(marker) == 1

    cx, cy = result.accepted[0].center
    assert tuple(vis[int(cy), int(cx)]) == DEFAULT_CONFIG.marker_color


def test_input_image_not_modified(cone_image):
    before = cone_image.copy()
    detect_cones(cone_image)
    assert np.array_equal(cone_image, before)


def test_blank_image(blank_image):
    result, vis = detect_cones(blank_image)
    assert result.contours == []
    assert result.count == 0
    assert result.message == "no traffic cones were found"
    assert np.array_equal(vis, blank_image)


def test_inverted_triangle_is_not_reported():
    img = make_cone_image(pts=[(100, 160), (70, 40), (130, 40)])
    result = find_traffic_cones(img)
    assert result.count == 0
    assert any(c.reason == "not_pointing_up" for c in result.candidates)


def test_two_cones():
    img = make_cone_image(size=(200, 300))
    cv2.fillPoly(img, [np.array([(230, 60), (205, 170), (255, 170)], dtype=np.int32)], (0, 0, 255))
    result = find_traffic_cones(img)
    assert result.count == 2
    assert result.message == "2 traffic cones were found"


def test_pipeline_is_deterministic(cone_image):
    a = find_traffic_cones(cone_image)
    b = find_traffic_cones(cone_image)
    assert a.count == b.count
    assert len(a.cones) == len(b.cones)
    for ha, hb in zip(a.cones, b.cones):
        assert np.array_equal(ha, hb)


def test_tracer_sees_every_stage(cone_image):
    rec = StageRecorder()
    find_traffic_cones(cone_image, tracer=rec)
    assert rec.stages == [
        "hsv", "thresh", "thresh_smoothed", "canny",
        "contours", "all_convex_hulls", "traffic_cones",
    ]
    assert rec.images["thresh"].shape == cone_image.shape[:2]
    assert rec.images["traffic_cones"].shape == cone_image.shape


def test_custom_config_changes_target_color():
    green = make_cone_image(color=(0, 255, 0))
    assert find_traffic_cones(green).count == 0

    cfg = DEFAULT_CONFIG.replace(hsv_ranges=(((50, 70), (135, 255), (135, 255)),))
    assert find_traffic_cones(green, config=cfg).count == 1


def test_debug_output(cone_image, capsys):
    find_traffic_cones(cone_image, debug=True)
    out = capsys.readouterr().out
    assert "[INFO]" in out
    assert "1 traffic cone was found" in out


@pytest.mark.parametrize("bad", [
    None,
    np.zeros((0, 0, 3), dtype=np.uint8),
    np.zeros((20, 20), dtype=np.uint8),
    make_cone_image().astype(np.float32),
    make_cone_image().astype(np.float64),
    make_cone_image().astype(np.uint16),
    make_cone_image().astype(np.int32),
])
def test_invalid_images_raise(bad):
    with pytest.raises(InvalidImageError):
        find_traffic_cones(bad)


def test_load_image(tmp_path, cone_image):
    assert load_image(tmp_path / "missing.png") is None

    junk = tmp_path / "junk.png"
    junk.write_bytes(b"not an image")
    assert load_image(junk) is None

    good = tmp_path / "cone.png"
    assert cv2.imwrite(str(good), cone_image)
    img = load_image(good)
    assert img is not None
    assert np.array_equal(img, cone_image)


def test_tracer_cannot_change_detection(cone_image):
    def scribble(stage, img):
        img[...] = 0

    assert find_traffic_cones(cone_image, tracer=scribble).count == 1

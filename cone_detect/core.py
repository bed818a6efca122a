from typing import Optional, Tuple
import numpy as np
import cv2

from .config import ConeConfig, DEFAULT_CONFIG
from .preprocess import to_hsv, threshold_hsv, refine_mask, extract_edges
from .geometry import find_contours, convex_hulls
from .detect import classify_hulls
from .visualize import draw_contours_on_black, draw_cones_on_image
from .types import ConeDetection, StageTracer


def load_image(path: str) -> Optional[np.ndarray]:
    """Read a color image; None when the file is missing or undecodable."""
    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if img is None or img.size == 0:
        return None
    return img


def find_traffic_cones(
        image_bgr: np.ndarray,
        config: Optional[ConeConfig] = None,
        tracer: Optional[StageTracer] = None,
        debug: bool = False,
    ) -> ConeDetection:
    config = config or DEFAULT_CONFIG

    def trace(stage: str, img: np.ndarray) -> None:
        if tracer is not None:
            tracer(stage, img.copy())

    # ---- color segmentation
    hsv = to_hsv(image_bgr)
    trace("hsv", hsv)
    thresh = threshold_hsv(hsv, config.hsv_ranges)
    trace("thresh", thresh)

    # ---- open + blur, then edges
    smoothed = refine_mask(thresh, morph_kernel=config.morph_kernel, blur_kernel=config.blur_kernel)
    trace("thresh_smoothed", smoothed)
    edges = extract_edges(smoothed, config.canny_low, config.canny_high)
    trace("canny", edges)

    # ---- contours -> hulls
    contours = find_contours(edges)
    if tracer is not None:
        trace("contours", draw_contours_on_black(image_bgr.shape, contours))
    hulls = convex_hulls(contours)
    if tracer is not None:
        trace("all_convex_hulls", draw_contours_on_black(image_bgr.shape, hulls))

    # ---- classify
    candidates = classify_hulls(hulls, config)
    result = ConeDetection(candidates=candidates, contours=contours)
    if tracer is not None:
        trace("traffic_cones", draw_contours_on_black(image_bgr.shape, result.cones))

    if debug:
        print(f"[INFO] {len(contours)} contours, {len(hulls)} hulls")
        for i, c in enumerate(candidates):
            status = "cone" if c.is_cone else f"rejected ({c.reason})"
            print(f"[INFO] hull #{i} bbox={c.bbox} points={len(c.hull)}: {status}")
        print(f"[INFO] {result.message}")

    return result


def detect_cones(
        image_bgr: np.ndarray,
        config: Optional[ConeConfig] = None,
        tracer: Optional[StageTracer] = None,
        debug: bool = False,
    ) -> Tuple[ConeDetection, np.ndarray]:
    """Run the pipeline and return the result plus an annotated copy of the image."""
    config = config or DEFAULT_CONFIG
    result = find_traffic_cones(image_bgr, config=config, tracer=tracer, debug=debug)
    annotated = draw_cones_on_image(image_bgr, result.cones, config)
    return result, annotated

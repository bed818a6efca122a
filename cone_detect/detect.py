from typing import List, Optional, Tuple
import numpy as np

from .config import ConeConfig, DEFAULT_CONFIG
from .geometry import as_points, bounding_box, contour_centroid
from .types import ConeCandidate


def dimension_reject_reason(bbox: tuple, config: ConeConfig) -> Optional[str]:
    """Gross size/shape check on the hull's bounding rect. None means it passed."""
    _, _, w, h = bbox
    if w * h < config.min_area:
        return "area"
    if w < config.min_width:
        return "width"
    if h < config.min_height:
        return "height"
    if float(w) / float(h) > config.max_aspect_ratio:
        return "aspect_ratio"
    return None


def is_pointing_up(pts: List[Tuple[int, int]], bbox: tuple) -> bool:
    """
    Split hull points at the bbox y center. Every point above the center has
    to sit strictly between the leftmost and rightmost points below it,
    i.e. the shape narrows going up.
    """
    _, y, _, h = bbox
    y_center = y + int(h / 2.0)

    above = [p for p in pts if p[1] < y_center]
    below = [p for p in pts if p[1] >= y_center]
    if not below:
        return False

    left_most = min(p[0] for p in below)
    right_most = max(p[0] for p in below)

    for px, _ in above:
        if px <= left_most or px >= right_most:
            return False
    return True


def classify_hull(hull: np.ndarray, config: Optional[ConeConfig] = None) -> ConeCandidate:
    config = config or DEFAULT_CONFIG
    hull = as_points(hull)
    if len(hull) == 0:
        return ConeCandidate(hull=hull, bbox=(0, 0, 0, 0), reason="empty")

    bbox = bounding_box(hull)
    reason = dimension_reject_reason(bbox, config)
    if reason is not None:
        return ConeCandidate(hull=hull, bbox=bbox, reason=reason)

    pts = [(int(x), int(y)) for x, y in hull.reshape(-1, 2)]
    if not is_pointing_up(pts, bbox):
        return ConeCandidate(hull=hull, bbox=bbox, reason="not_pointing_up")

    return ConeCandidate(hull=hull, bbox=bbox, is_cone=True, center=contour_centroid(hull))


def is_traffic_cone(hull: np.ndarray, config: Optional[ConeConfig] = None) -> bool:
    return classify_hull(hull, config).is_cone


def classify_hulls(hulls: List[np.ndarray], config: Optional[ConeConfig] = None) -> List[ConeCandidate]:
    return [classify_hull(h, config) for h in hulls]

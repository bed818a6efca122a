from typing import List, Optional, Tuple
import numpy as np
import cv2


def as_points(pts) -> np.ndarray:
    # OpenCV point layout: (N,1,2) int32
    return np.asarray(pts, dtype=np.int32).reshape(-1, 1, 2)


def find_contours(edges: np.ndarray) -> List[np.ndarray]:
    contours, _ = cv2.findContours(edges.copy(), cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
    return list(contours)


def convex_hull(cnt: np.ndarray) -> np.ndarray:
    pts = as_points(cnt)
    if len(pts) == 0:
        return pts
    return cv2.convexHull(pts, returnPoints=True).reshape(-1, 1, 2).astype(np.int32)


def convex_hulls(contours: List[np.ndarray]) -> List[np.ndarray]:
    return [convex_hull(c) for c in contours]


def bounding_box(pts: np.ndarray) -> Tuple[int, int, int, int]:
    pts = as_points(pts)
    if len(pts) == 0:
        return (0, 0, 0, 0)
    x, y, w, h = cv2.boundingRect(pts)
    return int(x), int(y), int(w), int(h)


def contour_centroid(cnt: np.ndarray) -> Optional[Tuple[float, float]]:
    pts = as_points(cnt)
    if len(pts) == 0:
        return None
    m = cv2.moments(pts)
    if abs(m.get("m00", 0.0)) < 1e-6:
        return None
    cx = m["m10"] / m["m00"]
    cy = m["m01"] / m["m00"]
    return (float(cx), float(cy))

from typing import List
import cv2
import numpy as np

from .types import InvalidImageError


def validate_bgr(img: np.ndarray) -> None:
    if img is None or not isinstance(img, np.ndarray) or img.size == 0:
        raise InvalidImageError("Image is empty or could not be read.")
    if img.ndim != 3 or img.shape[2] != 3:
        raise InvalidImageError(f"Expected a 3-channel BGR image, got shape {img.shape}.")
    if img.dtype != np.uint8:
        raise InvalidImageError(f"Expected an 8-bit BGR image, got dtype {img.dtype}.")


def to_hsv(img_bgr: np.ndarray) -> np.ndarray:
    validate_bgr(img_bgr)
    return cv2.cvtColor(img_bgr, cv2.COLOR_BGR2HSV)


def threshold_hsv(hsv: np.ndarray, ranges: List[tuple]) -> np.ndarray:
    mask_all = np.zeros(hsv.shape[:2], dtype=np.uint8)
    for (hmin, hmax), (smin, smax), (vmin, vmax) in ranges:
        lower = np.array([hmin, smin, vmin], dtype=np.uint8)
        upper = np.array([hmax, smax, vmax], dtype=np.uint8)
        mask = cv2.inRange(hsv, lower, upper)
        mask_all = cv2.bitwise_or(mask_all, mask)
    return mask_all


def segment(img_bgr: np.ndarray, ranges: List[tuple]) -> np.ndarray:
    """BGR image -> 0/255 mask of pixels inside any of the HSV ranges."""
    return threshold_hsv(to_hsv(img_bgr), ranges)


def refine_mask(mask: np.ndarray, morph_kernel: int = 3, blur_kernel: int = 3) -> np.ndarray:
    """
    Open the mask (erode, then dilate) to drop speckles, then blur lightly so
    Canny sees soft borders instead of pixel stairs.
    """
    k = cv2.getStructuringElement(cv2.MORPH_RECT, (morph_kernel, morph_kernel))
    out = cv2.erode(mask, k)
    out = cv2.dilate(out, k)
    return cv2.GaussianBlur(out, (blur_kernel, blur_kernel), 0)


def extract_edges(mask: np.ndarray, low: float = 80, high: float = 160) -> np.ndarray:
    return cv2.Canny(mask, low, high)

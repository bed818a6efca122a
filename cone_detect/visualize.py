from typing import Dict, List, Optional, Tuple
import matplotlib.pyplot as plt
import numpy as np
import cv2

from .config import COLORS, ConeConfig, DEFAULT_CONFIG
from .geometry import as_points, contour_centroid


def draw_contours_on_black(
    shape: Tuple[int, ...],
    contours: List[np.ndarray],
    color: Tuple[int, int, int] = COLORS["white"],
) -> np.ndarray:
    """Debug canvas: contours drawn in white on a black image of the given size."""
    canvas = np.zeros((shape[0], shape[1], 3), dtype=np.uint8)
    if contours:
        cv2.drawContours(canvas, [as_points(c) for c in contours], -1, color)
    return canvas


def draw_cone_center(
    image: np.ndarray,
    cone: np.ndarray,
    color: Tuple[int, int, int],
    radius: int = 3,
) -> Optional[Tuple[int, int]]:
    cxy = contour_centroid(cone)
    if cxy is None:
        return None
    center = (int(cxy[0]), int(cxy[1]))
    cv2.circle(image, center, radius, color, -1)
    return center


def draw_cones_on_image(
    image_bgr: np.ndarray,
    cones: List[np.ndarray],
    config: Optional[ConeConfig] = None,
) -> np.ndarray:
    config = config or DEFAULT_CONFIG
    vis = image_bgr.copy()
    if not cones:
        return vis

    hulls = [as_points(c) for c in cones]
    cv2.drawContours(vis, hulls, -1, config.outline_color, config.outline_thickness)

    for hull in hulls:
        draw_cone_center(vis, hull, config.marker_color, config.marker_radius)

    return vis


class StageRecorder:
    """Tracer that keeps a copy of every stage image, in pipeline order."""

    def __init__(self):
        self.images: Dict[str, np.ndarray] = {}

    def __call__(self, stage: str, image: np.ndarray) -> None:
        self.images[stage] = image.copy()

    @property
    def stages(self) -> List[str]:
        return list(self.images.keys())


def show_stage_images(
    images: Dict[str, np.ndarray],
    cols: int = 3,
    figsize: tuple = (12, 8),
    title: str = "Traffic cone pipeline stages",
):
    names = list(images.keys())
    n = len(names)
    if n == 0:
        return None
    rows = (n + cols - 1) // cols

    fig, axes = plt.subplots(rows, cols, figsize=figsize)
    axes = np.array(axes).reshape(-1)

    for ax in axes[n:]:
        ax.axis("off")

    for i, name in enumerate(names):
        img = images[name]
        ax = axes[i]
        if img.ndim == 2:
            ax.imshow(img, cmap="gray")
        else:
            ax.imshow(cv2.cvtColor(img, cv2.COLOR_BGR2RGB))
        ax.set_title(name)
        ax.axis("off")

    fig.suptitle(title, fontsize=14)
    plt.tight_layout()
    plt.show()
    return fig

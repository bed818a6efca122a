from dataclasses import dataclass, replace as dc_replace
from typing import Tuple

HSVRange = Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]

# Each entry: ((Hmin,Hmax),(Smin,Smax),(Vmin,Vmax)), OpenCV hue scale 0..179
HSV_RANGES: Tuple[HSVRange, ...] = (
    ((0, 15), (135, 255), (135, 255)),     # low red
    ((159, 179), (135, 255), (135, 255)),  # high red (hue wraps)
)

MORPH = {
    "kernel": 3,       # square structuring element for erode/dilate
    "blur_kernel": 3,  # gaussian blur after opening
}

CANNY = {
    "low": 80,
    "high": 160,
}

CONE_THRESH = {
    "min_area": 80,
    "min_width": 10,
    "min_height": 10,
    "max_aspect_ratio": 0.8,  # width / height
}

# BGR
COLORS = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "yellow": (0, 255, 255),
    "green": (0, 255, 0),
    "red": (0, 0, 255),
}


@dataclass(frozen=True)
class ConeConfig:
    hsv_ranges: Tuple[HSVRange, ...] = HSV_RANGES

    morph_kernel: int = MORPH["kernel"]
    blur_kernel: int = MORPH["blur_kernel"]

    canny_low: float = CANNY["low"]
    canny_high: float = CANNY["high"]

    min_area: int = CONE_THRESH["min_area"]
    min_width: int = CONE_THRESH["min_width"]
    min_height: int = CONE_THRESH["min_height"]
    max_aspect_ratio: float = CONE_THRESH["max_aspect_ratio"]

    outline_color: Tuple[int, int, int] = COLORS["yellow"]
    outline_thickness: int = 2
    marker_color: Tuple[int, int, int] = COLORS["green"]
    marker_radius: int = 3

    def __post_init__(self):
        if not self.hsv_ranges:
            raise ValueError("hsv_ranges must contain at least one range")
        for name in ("morph_kernel", "blur_kernel"):
            k = getattr(self, name)
            if k <= 0 or k % 2 == 0:
                raise ValueError(f"{name} must be a positive odd number, got {k}")
        for i, rng in enumerate(self.hsv_ranges):
            for lo, hi in rng:
                if not (0 <= lo <= hi <= 255):
                    raise ValueError(f"hsv_ranges[{i}] has bad bounds ({lo}, {hi}), need 0 <= low <= high <= 255")
        if self.canny_low > self.canny_high:
            raise ValueError("canny_low must be <= canny_high")
        if self.max_aspect_ratio <= 0:
            raise ValueError("max_aspect_ratio must be > 0")

    def replace(self, **changes) -> "ConeConfig":
        return dc_replace(self, **changes)


DEFAULT_CONFIG = ConeConfig()

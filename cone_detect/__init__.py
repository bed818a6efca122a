"""Top-level package interface for cone_detect.

Expose the main API: find_traffic_cones / detect_cones and the config.
"""
from .config import ConeConfig, DEFAULT_CONFIG
from .core import find_traffic_cones, detect_cones, load_image  # re-export
from .postprocess import cone_count_message, detection_to_json
from .types import ConeCandidate, ConeDetection, InvalidImageError

__all__ = [
    "ConeConfig",
    "DEFAULT_CONFIG",
    "find_traffic_cones",
    "detect_cones",
    "load_image",
    "cone_count_message",
    "detection_to_json",
    "ConeCandidate",
    "ConeDetection",
    "InvalidImageError",
]

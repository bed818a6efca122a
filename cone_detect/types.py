from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple
import numpy as np

from .postprocess import cone_count_message

# tracer(stage_name, image) -- called after each pipeline stage when given
StageTracer = Callable[[str, np.ndarray], None]


class InvalidImageError(ValueError):
    """Raised when the pipeline is handed an empty or non-BGR image."""


@dataclass
class ConeCandidate:
    hull: np.ndarray                         # (N,1,2) int32 convex hull points
    bbox: Tuple[int, int, int, int]          # x,y,w,h
    is_cone: bool = False

    center: Optional[Tuple[float, float]] = None  # cx,cy from moments
    reason: Optional[str] = None                  # why it was rejected


@dataclass
class ConeDetection:
    candidates: List[ConeCandidate] = field(default_factory=list)
    contours: List[np.ndarray] = field(default_factory=list)

    @property
    def cones(self) -> List[np.ndarray]:
        return [c.hull for c in self.candidates if c.is_cone]

    @property
    def accepted(self) -> List[ConeCandidate]:
        return [c for c in self.candidates if c.is_cone]

    @property
    def count(self) -> int:
        return len(self.accepted)

    @property
    def message(self) -> str:
        return cone_count_message(self.count)

from typing import Any, Dict, List


def cone_count_message(n: int) -> str:
    if n <= 0:
        return "no traffic cones were found"
    if n == 1:
        return "1 traffic cone was found"
    return f"{n} traffic cones were found"


def hull_to_list(hull) -> List[List[int]]:
    return [[int(x), int(y)] for x, y in hull.reshape(-1, 2)]


def detection_to_json(result) -> Dict[str, Any]:
    """Turn a ConeDetection into a JSON-friendly dict (numpy scalars converted)."""
    cones: List[Dict[str, Any]] = []
    for c in result.accepted:
        x, y, w, h = c.bbox
        rec: Dict[str, Any] = {
            "hull": hull_to_list(c.hull),
            "bbox": [int(x), int(y), int(w), int(h)],
            "center_x": None,
            "center_y": None,
        }
        if c.center is not None:
            rec["center_x"] = float(c.center[0])
            rec["center_y"] = float(c.center[1])
        cones.append(rec)

    return {
        "count": len(cones),
        "message": cone_count_message(len(cones)),
        "traffic_cones": cones,
    }

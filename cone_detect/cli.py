import sys
import os
import json
import cv2
from .core import load_image, detect_cones
from .postprocess import detection_to_json

USAGE = 'Usage: cone-detect "inputs/your_image.png" [out_dir] [--show]'


def main(argv=None):
    argv = sys.argv if argv is None else argv
    show = "--show" in argv
    args = [a for a in argv[1:] if a != "--show"]
    if not args:
        print(USAGE)
        return 2

    in_path = args[0]
    out_dir = args[1] if len(args) > 1 else "outputs"

    img = load_image(in_path)
    if img is None:
        print("error: image not read from file")
        return 1

    recorder = None
    if show:
        from .visualize import StageRecorder
        recorder = StageRecorder()

    result, vis = detect_cones(img, tracer=recorder, debug=show)
    print(result.message)

    os.makedirs(out_dir, exist_ok=True)
    base = os.path.splitext(os.path.basename(in_path))[0]
    json_path = os.path.join(out_dir, f"{base}.json")
    vis_path = os.path.join(out_dir, f"{base}.jpg")

    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(detection_to_json(result), f, ensure_ascii=False, indent=2)
    print(f"[OK] Wrote JSON to: {json_path}")

    ok = cv2.imwrite(vis_path, vis)
    if not ok:
        raise RuntimeError(f"Failed to write image: {vis_path}")
    print(f"[OK] Wrote visualization to: {vis_path}")

    if recorder is not None:
        from .visualize import show_stage_images
        images = dict(recorder.images)
        images["with_cones"] = vis
        show_stage_images(images)

    return 0


if __name__ == "__main__":
    sys.exit(main())

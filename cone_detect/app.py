import cv2
import numpy as np
from fastapi import FastAPI, File, UploadFile, HTTPException
from fastapi.responses import JSONResponse, Response
from fastapi.middleware.cors import CORSMiddleware

from .core import detect_cones
from .postprocess import detection_to_json

app = FastAPI(title="Traffic Cone Detection API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def decode_upload_to_bgr(upload: UploadFile) -> np.ndarray:
    data = upload.file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Empty file.")
    arr = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(arr, cv2.IMREAD_COLOR)
    if img is None:
        raise HTTPException(status_code=400, detail="Could not decode image. Provide a valid JPG/PNG.")
    return img


@app.post("/detect")
def detect(file: UploadFile = File(...)):
    img = decode_upload_to_bgr(file)
    result, _ = detect_cones(img)
    print(f"[INFO] {file.filename}: {result.message}")
    return JSONResponse(detection_to_json(result))


@app.post("/annotate")
def annotate(file: UploadFile = File(...)):
    img = decode_upload_to_bgr(file)
    result, vis = detect_cones(img)
    ok, buf = cv2.imencode(".png", vis)
    if not ok:
        raise HTTPException(status_code=500, detail="Could not encode annotated image.")
    return Response(
        content=buf.tobytes(),
        media_type="image/png",
        headers={"X-Cone-Count": str(result.count)},
    )

import cv2
import numpy as np
from fastapi.testclient import TestClient

from cone_detect.app import app

client = TestClient(app)


def test_detect(cone_png):
    r = client.post("/detect", files={"file": ("cone.png", cone_png, "image/png")})
    assert r.status_code == 200
    body = r.json()
    assert body["count"] == 1
    assert body["message"] == "1 traffic cone was found"
    assert len(body["traffic_cones"][0]["hull"]) >= 3


def test_detect_empty_upload():
    r = client.post("/detect", files={"file": ("empty.png", b"", "image/png")})
    assert r.status_code == 400
    assert r.json()["detail"] == "Empty file."


def test_detect_undecodable_upload():
    r = client.post("/detect", files={"file": ("x.png", b"definitely not a png", "image/png")})
    assert r.status_code == 400


def test_annotate(cone_png):
    r = client.post("/annotate", files={"file": ("cone.png", cone_png, "image/png")})
    assert r.status_code == 200
    assert r.headers["content-type"] == "image/png"
    assert r.headers["x-cone-count"] == "1"
    vis = cv2.imdecode(np.frombuffer(r.content, dtype=np.uint8), cv2.IMREAD_COLOR)
    assert vis.shape == (200, 200, 3)

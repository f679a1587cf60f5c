from __future__ import annotations

import base64

import cv2
import numpy as np


def encode_preview(pixels: np.ndarray, quality: int = 70) -> str:
    """Encodes an RGBA frame as a JPEG data URL for the raw-video <img>."""
    bgr = cv2.cvtColor(pixels, cv2.COLOR_RGBA2BGR)
    ok, buf = cv2.imencode(".jpg", bgr, [int(cv2.IMWRITE_JPEG_QUALITY), quality])
    if not ok:
        raise ValueError("could not encode preview frame")
    return "data:image/jpeg;base64," + base64.b64encode(buf.tobytes()).decode("ascii")

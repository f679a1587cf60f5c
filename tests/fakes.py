from __future__ import annotations

from typing import Optional

import numpy as np

from asciicam.service.capture import Capture, CaptureRequest


def solid_frame(width: int, height: int, rgb=(0, 0, 0)) -> np.ndarray:
    frame = np.zeros((height, width, 4), dtype=np.uint8)
    frame[..., :3] = rgb
    frame[..., 3] = 255
    return frame


class FakeCapture(Capture):
    def __init__(self,
                 request: CaptureRequest,
                 frame: Optional[np.ndarray] = None,
                 loaded: bool = True,
                 read_error: Optional[Exception] = None):
        self.request = request
        self.width = request.width
        self.height = request.height
        self.visible = False
        self.released = False
        self.hide_calls = 0
        self._loaded = loaded
        self._read_error = read_error
        self._frame = frame if frame is not None else solid_frame(request.width, request.height)

    @property
    def loaded_metadata(self) -> bool:
        return self._loaded and not self.released

    def read_pixels(self) -> Optional[np.ndarray]:
        if self._read_error is not None:
            raise self._read_error
        return self._frame.copy()

    def hide(self) -> None:
        self.hide_calls += 1
        super().hide()

    def release(self) -> None:
        self.released = True


class RecordingProvider:
    """Capture provider that remembers every capture it hands out."""

    def __init__(self, loaded: bool = True, rgb=(0, 0, 0), read_error: Optional[Exception] = None):
        self.loaded = loaded
        self.rgb = rgb
        self.read_error = read_error
        self.captures: list[FakeCapture] = []

    def __call__(self, request: CaptureRequest) -> FakeCapture:
        capture = FakeCapture(
            request,
            solid_frame(request.width, request.height, self.rgb),
            loaded=self.loaded,
            read_error=self.read_error,
        )
        self.captures.append(capture)
        return capture

    @property
    def requests(self) -> list[CaptureRequest]:
        return [c.request for c in self.captures]

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

import cv2
import numpy as np

from asciicam.models.options import MAX_SCREEN_SIZE, RenderOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScreenSize:
    width: int
    height: int


@dataclass(frozen=True)
class CaptureRequest:
    width: int
    height: int
    audio: bool = False


def capture_request(options: RenderOptions, screen: ScreenSize) -> CaptureRequest:
    # Halved when coloured: every cell becomes a <span>, so keep the count down
    factor = 2 if options.coloured else 1
    width = min(max(screen.width, 1), MAX_SCREEN_SIZE)
    height = min(max(screen.height, 1), MAX_SCREEN_SIZE)
    return CaptureRequest(
        width=max(1, int(width / 10 / factor)),
        height=max(1, int(height / 15 / factor)),
        audio=False,
    )


class Capture(ABC):
    """A live video source delivering RGBA pixel buffers of a fixed size."""

    width: int
    height: int
    visible: bool = False

    @property
    @abstractmethod
    def loaded_metadata(self) -> bool:
        """True once the source is open and frames can be read."""
        ...

    @abstractmethod
    def read_pixels(self) -> Optional[np.ndarray]:
        """Returns the current frame as uint8 (height, width, 4) RGBA, or None."""
        ...

    @abstractmethod
    def release(self) -> None:
        """Frees the underlying device."""
        ...

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False


CaptureProvider = Callable[[CaptureRequest], Capture]


class OpenCVCapture(Capture):
    def __init__(self, request: CaptureRequest, camera_index: int = 0, mirror: bool = True):
        self.width = request.width
        self.height = request.height
        self.visible = False
        self._mirror = mirror
        self._cap: Optional[cv2.VideoCapture] = cv2.VideoCapture(camera_index)
        if not self._cap.isOpened():
            logger.warning("could not open camera %d; check camera permissions", camera_index)

    @property
    def loaded_metadata(self) -> bool:
        return self._cap is not None and self._cap.isOpened()

    def read_pixels(self) -> Optional[np.ndarray]:
        if not self.loaded_metadata:
            return None
        ok, frame = self._cap.read()
        if not ok or frame is None:
            return None
        if self._mirror:
            frame = cv2.flip(frame, 1)
        small = cv2.resize(frame, (self.width, self.height), interpolation=cv2.INTER_AREA)
        return cv2.cvtColor(small, cv2.COLOR_BGR2RGBA)

    def release(self) -> None:
        if self._cap is not None:
            self._cap.release()
            self._cap = None


def opencv_provider(camera_index: int = 0, mirror: bool = True) -> CaptureProvider:
    def _open(request: CaptureRequest) -> Capture:
        return OpenCVCapture(request, camera_index=camera_index, mirror=mirror)
    return _open


class CaptureManager:
    """Owns the single live Capture; replaces it whenever the options change."""

    def __init__(self, provider: CaptureProvider):
        self._provider = provider
        self._capture: Optional[Capture] = None

    @property
    def capture(self) -> Optional[Capture]:
        return self._capture

    def rebuild(self, options: RenderOptions, screen: ScreenSize) -> Capture:
        self.close()
        request = capture_request(options, screen)
        capture = self._provider(request)
        if options.show_video:
            capture.show()
        else:
            capture.hide()
        self._capture = capture
        logger.debug("capture rebuilt at %dx%d", request.width, request.height)
        return capture

    def close(self) -> None:
        if self._capture is not None:
            self._capture.hide()
            self._capture.release()
            self._capture = None

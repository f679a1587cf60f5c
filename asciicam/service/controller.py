from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from asciicam.models.messages import (
    ClientMessage,
    Frame,
    OptionsState,
    Reset,
    Screen,
    SetColoured,
    SetReversed,
    SetShowVideo,
    SetWhitespace,
)
from asciicam.models.options import RenderOptions
from asciicam.service.capture import CaptureManager, CaptureProvider, ScreenSize
from asciicam.service.options_store import OptionsStore
from asciicam.service.preview import encode_preview
from asciicam.service.ramp import build_ramp
from asciicam.service.renderer import render_frame, snapshot

logger = logging.getLogger(__name__)


@dataclass
class RenderState:
    store: OptionsStore
    captures: CaptureManager
    screen: ScreenSize
    ramp: str = field(default="")

    @property
    def options(self) -> RenderOptions:
        return self.store.current


class RenderController:
    """One render session: options, ramp and capture for a single page.

    Every client message goes through dispatch(), which applies the change and
    then rebuilds the ramp and the capture, in that order. dispatch(),
    render_tick() and close() hold the session lock, so they can run on worker
    threads and a tick never sees a change whose rebuilds are incomplete.
    """

    def __init__(self,
                 provider: CaptureProvider,
                 screen: ScreenSize,
                 preview_quality: int = 70):
        self.state = RenderState(store=OptionsStore(), captures=CaptureManager(provider), screen=screen)
        self._preview_quality = preview_quality
        self._lock = threading.RLock()
        self._rebuild()

    @property
    def options(self) -> RenderOptions:
        return self.state.options

    def options_state(self) -> OptionsState:
        return OptionsState.from_options(self.options)

    # --- rebuilds ---
    def rebuild_ramp(self) -> str:
        options = self.options
        self.state.ramp = build_ramp(options.whitespace, options.reversed)
        return self.state.ramp

    def rebuild_capture(self) -> None:
        self.state.captures.rebuild(self.options, self.state.screen)

    def _rebuild(self) -> None:
        with self._lock:
            self.rebuild_ramp()
            self.rebuild_capture()

    # --- message dispatcher ---
    def dispatch(self, msg: ClientMessage) -> RenderOptions:
        with self._lock:
            store = self.state.store
            match msg:
                case SetShowVideo(value=value):
                    store.set_show_video(value)
                case SetColoured(value=value):
                    store.set_coloured(value)
                case SetReversed(value=value):
                    store.set_reversed(value)
                case SetWhitespace(value=value):
                    store.set_whitespace(value)
                case Reset():
                    store.reset()
                case Screen(width=width, height=height):
                    self.state.screen = ScreenSize(width, height)
                case _:
                    raise ValueError(f"unrecognized client message: {msg!r}")
            logger.debug("dispatched %s", msg.type)
            self._rebuild()
            return self.options

    # --- rendering ---
    def render_tick(self) -> Optional[Frame]:
        with self._lock:
            capture = self.state.captures.capture
            pixels = snapshot(capture)
            if pixels is None:
                return None
            html = render_frame(pixels, self.state.ramp, self.options.coloured)
            video = encode_preview(pixels, self._preview_quality) if capture.visible else None
            return Frame(html=html, video=video)

    def close(self) -> None:
        with self._lock:
            self.state.captures.close()

from __future__ import annotations
from fastapi import WebSocket

from asciicam.service.capture import CaptureProvider
from asciicam.settings import AppSettings

def get_settings_ws(ws: WebSocket) -> AppSettings:
    return ws.app.state.settings

def get_capture_provider_ws(ws: WebSocket) -> CaptureProvider:
    return ws.app.state.capture_provider

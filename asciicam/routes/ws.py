import asyncio
import logging
from contextlib import suppress

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from pydantic import TypeAdapter, ValidationError

from asciicam.deps import get_capture_provider_ws, get_settings_ws
from asciicam.models.messages import ClientMessage, Error
from asciicam.service.capture import CaptureProvider, ScreenSize
from asciicam.service.controller import RenderController
from asciicam.settings import AppSettings

logger = logging.getLogger(__name__)

router = APIRouter()

_client_messages = TypeAdapter(ClientMessage)


async def render_loop(websocket: WebSocket, controller: RenderController, fps: float) -> None:
    """Ticks at `fps`. Camera reads run on a worker thread; a failing tick renders nothing."""
    interval = 1.0 / fps
    loop = asyncio.get_running_loop()
    failing = False
    while True:
        started = loop.time()
        try:
            frame = await asyncio.to_thread(controller.render_tick)
        except Exception as exc:
            # Reported once per run of failures; ticking continues so the camera can recover
            if not failing:
                logger.exception("render tick failed")
                await websocket.send_json(Error(detail=f"render failed: {exc}").dump())
            failing = True
            frame = None
        else:
            failing = False
        if frame is not None:
            await websocket.send_json(frame.dump())
        await asyncio.sleep(max(0.0, interval - (loop.time() - started)))


@router.websocket("/ws")
async def render_ws(
    websocket: WebSocket,
    settings: AppSettings = Depends(get_settings_ws),
    provider: CaptureProvider = Depends(get_capture_provider_ws),
):
    await websocket.accept()
    client = websocket.client
    logger.info("render session opened: %s", client)

    controller = await asyncio.to_thread(
        RenderController,
        provider,
        ScreenSize(settings.screen_width, settings.screen_height),
        preview_quality=settings.preview_quality,
    )
    ticker: asyncio.Task | None = None

    try:
        await websocket.send_json(controller.options_state().dump())
        ticker = asyncio.create_task(render_loop(websocket, controller, settings.fps))
        while True:
            raw = await websocket.receive_text()
            try:
                msg = _client_messages.validate_json(raw)
            except ValidationError as exc:
                logger.warning("rejected client message %r: %s", raw, exc.errors())
                await websocket.send_json(Error(detail=str(exc)).dump())
                continue
            await asyncio.to_thread(controller.dispatch, msg)
            await websocket.send_json(controller.options_state().dump())
    except WebSocketDisconnect:
        logger.info("render session closed: %s", client)
    finally:
        try:
            if ticker is not None:
                ticker.cancel()
                with suppress(asyncio.CancelledError, Exception):
                    await ticker
        finally:
            # close() takes the session lock, so it waits for a tick still running on a worker thread
            await asyncio.shield(asyncio.to_thread(controller.close))

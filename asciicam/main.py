from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from asciicam.logging_setup import configure_logging
from asciicam.routes.page import router as page_router
from asciicam.routes.ws import router as ws_router
from asciicam.service.capture import CaptureProvider, opencv_provider
from asciicam.settings import AppSettings, settings as default_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[AppSettings] = None,
               capture_provider: Optional[CaptureProvider] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Expose via app.state for dependency access
        app.state.settings = settings
        app.state.capture_provider = capture_provider or opencv_provider(
            camera_index=settings.camera_index,
            mirror=settings.mirror,
        )
        logger.info("asciicam started (camera %d, %.0f fps)", settings.camera_index, settings.fps)
        try:
            yield # App runs here
        finally:
            logger.info("asciicam stopped")

    app = FastAPI(title="ASCII Cam",
                  version="0.1.0",
                  lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(page_router)
    app.include_router(ws_router)
    return app


app = create_app()

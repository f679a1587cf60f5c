from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from asciicam.models.options import DEFAULT_OPTIONS, RenderOptions

router = APIRouter()

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


@router.get("/options/defaults", response_model=RenderOptions)
async def default_options() -> RenderOptions:
    return DEFAULT_OPTIONS


@router.get("/healthz")
async def healthz() -> dict:
    return {"ok": True}

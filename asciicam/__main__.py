"""Run the ASCII cam server: python -m asciicam [--host H] [--port P] [--cam N]"""

from __future__ import annotations

import argparse

import uvicorn

from asciicam.main import create_app
from asciicam.settings import AppSettings


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="asciicam", description="Serve the webcam as live ASCII art.")
    p.add_argument("--host", default=None, help="Bind address (default: from settings)")
    p.add_argument("--port", type=int, default=None, help="Bind port (default: from settings)")
    p.add_argument("--cam", type=int, default=None, help="Camera index (default: from settings)")
    p.add_argument("--fps", type=float, default=None, help="Render ticks per second")
    p.add_argument("--no-mirror", dest="mirror", action="store_false", default=None, help="Disable mirroring")
    p.add_argument("--log-level", default=None, help="Log level, e.g. DEBUG")
    return p


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    overrides = {
        "host": args.host,
        "port": args.port,
        "camera_index": args.cam,
        "fps": args.fps,
        "mirror": args.mirror,
        "log_level": args.log_level,
    }
    return AppSettings(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

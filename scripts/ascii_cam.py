#!/usr/bin/env python3
# ascii_cam.py: terminal preview using the same ramp and luminance mapping as the web page
import argparse
import curses
import time

import cv2
import numpy as np

from asciicam.service.ramp import build_ramp
from asciicam.service.renderer import luminance, ramp_indices


def to_ascii_rows(frame_bgr, ramp, cols, rows, mirror=True):
    if mirror:
        frame_bgr = cv2.flip(frame_bgr, 1)
    small = cv2.resize(frame_bgr, (cols, rows), interpolation=cv2.INTER_AREA)
    rgba = cv2.cvtColor(small, cv2.COLOR_BGR2RGBA)
    glyphs = np.array(list(ramp), dtype='<U1')
    chars = glyphs[ramp_indices(luminance(rgba), len(ramp))]
    return ["".join(row) for row in chars]


def run(stdscr, cam_index=0, fps_cap=30, mirror=True, whitespace=15, reversed_=False):
    curses.curs_set(0)
    stdscr.nodelay(True)

    ramp = build_ramp(whitespace, reversed_)
    cap = cv2.VideoCapture(cam_index)
    if not cap.isOpened():
        raise RuntimeError("Could not open webcam. Check camera permission for your terminal.")

    last = time.time()
    try:
        while True:
            if stdscr.getch() == ord('q'):
                break
            ok, frame = cap.read()
            if not ok:
                continue

            max_y, max_x = stdscr.getmaxyx()
            lines = to_ascii_rows(frame, ramp, cols=max(1, max_x - 1), rows=max(1, max_y - 1), mirror=mirror)
            for y, line in enumerate(lines):
                stdscr.addstr(y, 0, line)

            now = time.time()
            dt = now - last
            last = now
            fps = 1.0 / dt if dt > 0 else 0
            stdscr.addstr(len(lines), 0, f"q to quit | {fps:5.1f} FPS")
            stdscr.clrtoeol()
            stdscr.refresh()

            if fps_cap:
                time.sleep(max(0, (1.0 / fps_cap) - (time.time() - now)))
    finally:
        cap.release()


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--cam", type=int, default=0, help="Camera index (default: 0)")
    p.add_argument("--fps-cap", type=int, default=30, help="FPS cap (0 = uncapped)")
    p.add_argument("--no-mirror", dest="mirror", action="store_false", help="Disable mirroring")
    p.add_argument("--whitespace", type=int, default=15, choices=range(0, 51), metavar="[0-50]",
                   help="Leading blanks in the ramp (default: 15)")
    p.add_argument("--reversed", action="store_true", help="Reverse the character ramp")
    p.set_defaults(mirror=True)
    args = p.parse_args()

    try:
        curses.wrapper(
            run,
            cam_index=args.cam,
            fps_cap=args.fps_cap,
            mirror=args.mirror,
            whitespace=args.whitespace,
            reversed_=args.reversed,
        )
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()

"""Pixel buffer -> luminance -> ramp index -> escaped character -> text rows."""

from __future__ import annotations

from typing import Optional

import numpy as np

from asciicam.service.capture import Capture
from asciicam.service.escape import escape_ramp

LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])
LINE_BREAK = "<br/>"


def luminance(pixels: np.ndarray) -> np.ndarray:
    """Perceived brightness of each pixel, in [0, 255]."""
    return pixels[..., :3].astype(np.float64) @ LUMA_WEIGHTS


def ramp_indices(lum: np.ndarray, ramp_len: int) -> np.ndarray:
    # Linear remap [0, 255] -> [0, ramp_len - 1], rounded half-up, then clamped
    scaled = np.floor(np.asarray(lum, dtype=np.float64) * (ramp_len - 1) / 255.0 + 0.5)
    return np.clip(scaled, 0, ramp_len - 1).astype(np.intp)


def ramp_index(r: int, g: int, b: int, ramp_len: int) -> int:
    lum = 0.299 * r + 0.587 * g + 0.114 * b
    return int(ramp_indices(lum, ramp_len))


def coloured_cell(char: str, r: int, g: int, b: int) -> str:
    return f'<span style="color: rgb({r}, {g}, {b})">{char}</span>'


def render_frame(pixels: np.ndarray, ramp: str, coloured: bool = False) -> str:
    """Renders a (height, width, 4) RGBA frame as markup, one <br/>-terminated row per pixel row.

    In coloured mode each cell carries the source pixel's RGB; the character
    itself is escaped, the colour is taken from the raw pixel.
    """
    if pixels.ndim != 3 or pixels.shape[2] < 3:
        raise ValueError(f"expected (height, width, 4) pixels, got shape {pixels.shape}")

    glyphs = np.array(escape_ramp(ramp), dtype=object)
    cells = glyphs[ramp_indices(luminance(pixels), len(ramp))]

    parts: list[str] = []
    if coloured:
        rgb = pixels[..., :3].tolist()
        for row_cells, row_rgb in zip(cells.tolist(), rgb):
            parts.extend(coloured_cell(c, r, g, b) for c, (r, g, b) in zip(row_cells, row_rgb))
            parts.append(LINE_BREAK)
    else:
        for row_cells in cells.tolist():
            parts.extend(row_cells)
            parts.append(LINE_BREAK)
    return "".join(parts)


def snapshot(capture: Optional[Capture]) -> Optional[np.ndarray]:
    """Current pixel buffer, or None while the capture is not ready."""
    if capture is None or not capture.loaded_metadata:
        return None
    return capture.read_pixels()

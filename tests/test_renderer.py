import unittest

import numpy as np

from asciicam.service.capture import CaptureRequest
from asciicam.service.escape import escape_char
from asciicam.service.ramp import build_ramp
from asciicam.service.renderer import (
    LINE_BREAK,
    luminance,
    ramp_index,
    ramp_indices,
    render_frame,
    snapshot,
)
from fakes import FakeCapture, solid_frame


def frame_of(pixels_rgb):
    """Builds a one-row RGBA frame from a list of (r, g, b)."""
    frame = np.zeros((1, len(pixels_rgb), 4), dtype=np.uint8)
    frame[0, :, :3] = pixels_rgb
    frame[0, :, 3] = 255
    return frame


class LuminanceTests(unittest.TestCase):
    def test_weights(self):
        lum = luminance(frame_of([(255, 0, 0), (0, 255, 0), (0, 0, 255)]))
        np.testing.assert_allclose(lum[0], [0.299 * 255, 0.587 * 255, 0.114 * 255])

    def test_black_and_white_hit_the_ends(self):
        for whitespace in (0, 15, 50):
            n = len(build_ramp(whitespace))
            self.assertEqual(ramp_index(0, 0, 0, n), 0)
            self.assertEqual(ramp_index(255, 255, 255, n), n - 1)

    def test_monotonic_in_grey_level(self):
        n = len(build_ramp(15))
        indices = [ramp_index(v, v, v, n) for v in range(256)]
        self.assertEqual(indices, sorted(indices))

    def test_out_of_range_luminance_is_clamped(self):
        idx = ramp_indices(np.array([-40.0, 300.0, 1e9]), 10)
        self.assertEqual(idx.tolist(), [0, 9, 9])

    def test_rounds_half_up(self):
        # 63.75 * 2 / 255 == 0.5 exactly
        self.assertEqual(ramp_indices(np.array([63.75]), 3).tolist(), [1])


class RenderFrameTests(unittest.TestCase):
    def test_two_pixel_row(self):
        ramp = build_ramp(0, False)
        html = render_frame(frame_of([(0, 0, 0), (255, 255, 255)]), ramp, coloured=False)
        self.assertEqual(html, escape_char(ramp[0]) + escape_char(ramp[-1]) + "<br/>")
        self.assertEqual(html, "&nbsp$<br/>")

    def test_rows_terminated_in_row_major_order(self):
        ramp = build_ramp(0)
        frame = np.zeros((2, 2, 4), dtype=np.uint8)
        frame[0, 1, :3] = 255
        frame[1, 0, :3] = 255
        html = render_frame(frame, ramp)
        self.assertEqual(html, "&nbsp$" + LINE_BREAK + "$&nbsp" + LINE_BREAK)

    def test_reversed_ramp_inverts_mapping(self):
        ramp = build_ramp(0, True)
        html = render_frame(frame_of([(0, 0, 0), (255, 255, 255)]), ramp)
        self.assertEqual(html, "$&nbsp<br/>")

    def test_coloured_wraps_with_unescaped_rgb(self):
        ramp = build_ramp(0)
        html = render_frame(frame_of([(0, 0, 0), (255, 255, 255)]), ramp, coloured=True)
        self.assertEqual(
            html,
            '<span style="color: rgb(0, 0, 0)">&nbsp</span>'
            '<span style="color: rgb(255, 255, 255)">$</span>'
            "<br/>",
        )

    def test_alpha_is_ignored(self):
        ramp = build_ramp(0)
        frame = frame_of([(255, 255, 255)])
        frame[0, 0, 3] = 0
        self.assertEqual(render_frame(frame, ramp), "$<br/>")

    def test_line_count_matches_height(self):
        html = render_frame(solid_frame(7, 5, (128, 128, 128)), build_ramp(15))
        self.assertEqual(html.count(LINE_BREAK), 5)

    def test_rejects_flat_buffer(self):
        with self.assertRaises(ValueError):
            render_frame(np.zeros(16, dtype=np.uint8), build_ramp(0))


class SnapshotTests(unittest.TestCase):
    def test_no_capture(self):
        self.assertIsNone(snapshot(None))

    def test_capture_without_metadata(self):
        capture = FakeCapture(CaptureRequest(2, 1), loaded=False)
        self.assertIsNone(snapshot(capture))

    def test_loaded_capture_renders(self):
        capture = FakeCapture(CaptureRequest(2, 1), frame_of([(0, 0, 0), (255, 255, 255)]))
        self.assertEqual(render_frame(snapshot(capture), build_ramp(0)), "&nbsp$<br/>")


if __name__ == "__main__":
    unittest.main()

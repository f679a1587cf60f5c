import unittest

from asciicam.service.ramp import DENSITY, build_ramp


class RampTests(unittest.TestCase):
    def test_density_literal(self):
        self.assertEqual(len(DENSITY), 73)
        self.assertEqual(DENSITY[0], " ")
        self.assertEqual(DENSITY[-1], "$")
        self.assertEqual(len(set(DENSITY)), 73)

    def test_length_is_whitespace_plus_density(self):
        for whitespace in range(0, 51):
            self.assertEqual(len(build_ramp(whitespace, False)), whitespace + 73)
            self.assertEqual(len(build_ramp(whitespace, True)), whitespace + 73)

    def test_reversed_is_reverse_of_forward(self):
        for whitespace in (0, 1, 15, 50):
            self.assertEqual(build_ramp(whitespace, True), build_ramp(whitespace, False)[::-1])

    def test_leading_whitespace(self):
        ramp = build_ramp(15, False)
        self.assertEqual(ramp[:16], " " * 16)
        self.assertEqual(ramp[16], ".")
        self.assertTrue(ramp.endswith(DENSITY))

    def test_reversed_starts_dense_and_ends_blank(self):
        ramp = build_ramp(3, True)
        self.assertEqual(ramp[0], "$")
        self.assertEqual(ramp[-4:], "    ")

    def test_zero_whitespace_is_density(self):
        self.assertEqual(build_ramp(0), DENSITY)


if __name__ == "__main__":
    unittest.main()

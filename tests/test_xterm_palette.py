"""
Tests for the xterm palette and nearest-color matching.
Run from project root: python -m pytest tests/ -v
"""
import random
import sys
import unittest
from pathlib import Path

# scripts/ on path so the flat modules import from a checkout
SCRIPTS = Path(__file__).resolve().parent.parent / "scripts"
if str(SCRIPTS) not in sys.path:
    sys.path.insert(0, str(SCRIPTS))

from xterm_palette import (  # noqa: E402
    CUBE_LEVELS,
    XTERM_COLORS,
    distance,
    nearest,
    parse_hex,
    to_hex,
)


def _brute_force(rgb):
    return min(range(256), key=lambda i: (distance(rgb, XTERM_COLORS[i]), i))


class TestPalette(unittest.TestCase):

    def test_palette_layout(self):
        self.assertEqual(len(XTERM_COLORS), 256)
        self.assertEqual(CUBE_LEVELS, (0, 95, 135, 175, 215, 255))
        self.assertEqual(XTERM_COLORS[1], (128, 0, 0))
        self.assertEqual(XTERM_COLORS[7], (192, 192, 192))
        self.assertEqual(XTERM_COLORS[16], (0, 0, 0))
        self.assertEqual(XTERM_COLORS[180], (215, 175, 135))
        self.assertEqual(XTERM_COLORS[231], (255, 255, 255))
        self.assertEqual(XTERM_COLORS[232], (8, 8, 8))
        self.assertEqual(XTERM_COLORS[255], (238, 238, 238))

    def test_cube_index_formula(self):
        for r in range(6):
            for g in range(6):
                for b in range(6):
                    color = (CUBE_LEVELS[r], CUBE_LEVELS[g], CUBE_LEVELS[b])
                    self.assertEqual(XTERM_COLORS[16 + 36 * r + 6 * g + b], color)


class TestNearest(unittest.TestCase):

    def test_every_palette_color_maps_to_its_first_occurrence(self):
        for i, color in enumerate(XTERM_COLORS):
            self.assertEqual(nearest(color), XTERM_COLORS.index(color))

    def test_unique_palette_colors_map_to_themselves(self):
        for i in (1, 17, 100, 180, 230, 232, 243, 255):
            self.assertEqual(nearest(XTERM_COLORS[i]), i)

    def test_matches_brute_force_minimum(self):
        rng = random.Random(1234)
        samples = [tuple(rng.randrange(256) for _ in range(3)) for _ in range(300)]
        samples += [(r, g, b) for r in (0, 51, 128, 255) for g in (0, 77, 200) for b in (1, 99, 254)]
        for rgb in samples:
            self.assertEqual(nearest(rgb), _brute_force(rgb), rgb)

    def test_deterministic(self):
        self.assertEqual(nearest((123, 45, 67)), nearest((123, 45, 67)))

    def test_known_values(self):
        self.assertEqual(nearest((222, 165, 132)), 180)  # rust
        self.assertEqual(nearest((53, 114, 165)), 61)  # python
        self.assertEqual(nearest((8, 8, 8)), 232)
        self.assertEqual(nearest((238, 238, 238)), 255)

    def test_pure_red_prefers_system_color(self):
        self.assertEqual(XTERM_COLORS[196], (255, 0, 0))
        self.assertEqual(nearest((255, 0, 0)), 9)

    def test_rejects_bad_input(self):
        with self.assertRaises(ValueError):
            nearest((256, 0, 0))
        with self.assertRaises(ValueError):
            nearest((-1, 0, 0))
        with self.assertRaises(ValueError):
            nearest((1, 2))
        with self.assertRaises(ValueError):
            nearest((True, 0, 0))
        with self.assertRaises(ValueError):
            nearest((0.5, 0, 0))


class TestHex(unittest.TestCase):

    def test_parse_hex(self):
        self.assertEqual(parse_hex("#dea584"), (222, 165, 132))
        self.assertEqual(parse_hex("DEA584"), (222, 165, 132))
        self.assertEqual(parse_hex("#fff"), (255, 255, 255))
        self.assertEqual(parse_hex(" #3572A5 "), (53, 114, 165))

    def test_parse_hex_rejects_garbage(self):
        for text in ("", "#12345", "#gggggg", "red", "#1234567"):
            with self.assertRaises(ValueError, msg=text):
                parse_hex(text)

    def test_to_hex(self):
        self.assertEqual(to_hex((222, 165, 132)), "#dea584")
        self.assertEqual(to_hex((0, 10, 255)), "#000aff")


if __name__ == "__main__":
    unittest.main()

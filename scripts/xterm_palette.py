"""The xterm 256-color palette and nearest-color matching.

Indices 0-15 are the system colors, 16-231 the 6x6x6 color cube and
232-255 the grayscale ramp. See:

- https://gist.github.com/jasonm23/2868981#file-xterm-256color-yaml
- https://commons.wikimedia.org/wiki/File:Xterm_256color_chart.svg
"""

import re

SYSTEM_COLORS = (
    (0, 0, 0),        # black
    (128, 0, 0),      # maroon
    (0, 128, 0),      # green
    (128, 128, 0),    # olive
    (0, 0, 128),      # navy
    (128, 0, 128),    # purple
    (0, 128, 128),    # teal
    (192, 192, 192),  # silver
    (128, 128, 128),  # grey
    (255, 0, 0),      # red
    (0, 255, 0),      # lime
    (255, 255, 0),    # yellow
    (0, 0, 255),      # blue
    (255, 0, 255),    # fuchsia
    (0, 255, 255),    # aqua
    (255, 255, 255),  # white
)

CUBE_LEVELS = tuple(0 if i == 0 else 55 + 40 * i for i in range(6))
GRAY_LEVELS = tuple(8 + 10 * k for k in range(24))

XTERM_COLORS = (
    SYSTEM_COLORS
    + tuple((r, g, b) for r in CUBE_LEVELS for g in CUBE_LEVELS for b in CUBE_LEVELS)
    + tuple((v, v, v) for v in GRAY_LEVELS)
)

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})")


def _check_rgb(rgb) -> tuple:
    values = tuple(rgb)
    if len(values) != 3:
        raise ValueError(f"expected 3 color components, got {len(values)}")
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 255:
            raise ValueError(f"color component out of range 0-255: {v!r}")
    return values


def distance(a, b) -> int:
    """Squared Euclidean distance between two RGB triples."""
    return sum((x - y) ** 2 for x, y in zip(a, b))


def nearest(rgb) -> int:
    """Return the index of the palette entry closest to ``rgb``.

    Ties go to the lowest index, so colors present twice in the palette
    (pure red is both 9 and 196) always resolve to the system color.
    """
    rgb = _check_rgb(rgb)
    best_index = 0
    best_distance = distance(rgb, XTERM_COLORS[0])
    for index, color in enumerate(XTERM_COLORS[1:], 1):
        d = distance(rgb, color)
        if d < best_distance:
            best_index, best_distance = index, d
            if d == 0:
                break
    return best_index


def parse_hex(text: str) -> tuple:
    """Parse ``#rrggbb``, ``rrggbb`` or ``#rgb`` into an RGB triple."""
    match = _HEX_RE.fullmatch(text.strip())
    if not match:
        raise ValueError(f"not a hex color: {text!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def to_hex(rgb) -> str:
    r, g, b = _check_rgb(rgb)
    return f"#{r:02x}{g:02x}{b:02x}"

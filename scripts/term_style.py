"""
Terminal styling for lookup results.

Three renderers share one interface, ``render(text, rgb)``: 24-bit
truecolor, the xterm 256-color palette, and plain text. The renderer is
chosen once at startup by ``select_renderer``.
"""

import abc
import os
import sys

from xterm_palette import XTERM_COLORS, nearest, to_hex

RESET = "\033[0m"
MODES = ("auto", "truecolor", "256", "none")


class Renderer(abc.ABC):
    """Wraps text in the escape codes for one RGB color."""

    @abc.abstractmethod
    def render(self, text: str, rgb) -> str:
        ...


class TrueColorRenderer(Renderer):
    def render(self, text, rgb):
        r, g, b = rgb
        return f"\033[1;38;2;{r};{g};{b}m{text}{RESET}"


class Xterm256Renderer(Renderer):
    def render(self, text, rgb):
        return f"\033[1;38;5;{nearest(rgb)}m{text}{RESET}"


class PlainRenderer(Renderer):
    def render(self, text, rgb):
        return text


def _env_flag(name: str) -> bool:
    value = os.getenv(name, "")
    return bool(value) and value != "0"


def select_renderer(mode: str = "auto", stream=None) -> Renderer:
    """Pick a renderer for ``mode``.

    ``auto`` honours the NO_COLOR and CLICOLOR_FORCE conventions and
    otherwise colors only when ``stream`` is a terminal.
    """
    if mode == "truecolor":
        return TrueColorRenderer()
    if mode == "256":
        return Xterm256Renderer()
    if mode == "none":
        return PlainRenderer()
    if mode != "auto":
        raise ValueError(f"unknown color mode {mode!r}, expected one of {MODES}")

    if os.getenv("NO_COLOR"):
        return PlainRenderer()
    if _env_flag("CLICOLOR_FORCE"):
        return TrueColorRenderer()
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is not None and isatty():
        return TrueColorRenderer()
    return PlainRenderer()


def format_color(rgb, renderer: Renderer, index=None) -> str:
    """``rgb #rrggbb xterm NNN``, each token in its own color."""
    if index is None:
        index = nearest(rgb)
    color_text = renderer.render(f"rgb {to_hex(rgb)}", rgb)
    xterm_text = renderer.render(f"xterm {index:<3}", XTERM_COLORS[index])
    return f"{color_text} {xterm_text}"


def format_result(result, renderer: Renderer) -> str:
    line = format_color(result.rgb, renderer, result.xterm_index)
    return f"{line} {result.matched_name}"

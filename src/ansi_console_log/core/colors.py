"""ANSI SGR escape lookup for the 16 console colors."""

from __future__ import annotations

from enum import Enum

ESC = "\x1b"

DEFAULT_FOREGROUND = f"{ESC}[39m{ESC}[22m"
DEFAULT_BACKGROUND = f"{ESC}[49m"


class ColorCode(str, Enum):
    BLACK = "black"
    DARK_BLUE = "darkBlue"
    DARK_GREEN = "darkGreen"
    DARK_CYAN = "darkCyan"
    DARK_RED = "darkRed"
    DARK_MAGENTA = "darkMagenta"
    DARK_YELLOW = "darkYellow"
    GRAY = "gray"
    DARK_GRAY = "darkGray"
    BLUE = "blue"
    GREEN = "green"
    CYAN = "cyan"
    RED = "red"
    MAGENTA = "magenta"
    YELLOW = "yellow"
    WHITE = "white"


_FOREGROUND: dict[ColorCode, str] = {
    ColorCode.BLACK: f"{ESC}[30m",
    ColorCode.DARK_RED: f"{ESC}[31m",
    ColorCode.DARK_GREEN: f"{ESC}[32m",
    ColorCode.DARK_YELLOW: f"{ESC}[33m",
    ColorCode.DARK_BLUE: f"{ESC}[34m",
    ColorCode.DARK_MAGENTA: f"{ESC}[35m",
    ColorCode.DARK_CYAN: f"{ESC}[36m",
    ColorCode.GRAY: f"{ESC}[37m",
    # bold black renders as dark gray on most terminals
    ColorCode.DARK_GRAY: f"{ESC}[1m{ESC}[30m",
    ColorCode.RED: f"{ESC}[1m{ESC}[31m",
    ColorCode.GREEN: f"{ESC}[1m{ESC}[32m",
    ColorCode.YELLOW: f"{ESC}[1m{ESC}[33m",
    ColorCode.BLUE: f"{ESC}[1m{ESC}[34m",
    ColorCode.MAGENTA: f"{ESC}[1m{ESC}[35m",
    ColorCode.CYAN: f"{ESC}[1m{ESC}[36m",
    ColorCode.WHITE: f"{ESC}[1m{ESC}[37m",
}

_BACKGROUND: dict[ColorCode, str] = {
    ColorCode.BLACK: f"{ESC}[40m",
    ColorCode.DARK_RED: f"{ESC}[41m",
    ColorCode.DARK_GREEN: f"{ESC}[42m",
    ColorCode.DARK_YELLOW: f"{ESC}[43m",
    ColorCode.DARK_BLUE: f"{ESC}[44m",
    ColorCode.DARK_MAGENTA: f"{ESC}[45m",
    ColorCode.DARK_CYAN: f"{ESC}[46m",
    ColorCode.GRAY: f"{ESC}[47m",
}


def foreground_escape(color: ColorCode | None) -> str:
    """Return the SGR sequence that sets ``color`` as foreground.

    Anything outside the table, ``None`` included, maps to the default
    foreground sequence instead of raising.
    """
    return _FOREGROUND.get(color, DEFAULT_FOREGROUND)  # type: ignore[arg-type]


def background_escape(color: ColorCode | None) -> str:
    """Return the SGR sequence that sets ``color`` as background.

    Only the eight dark/plain colors have one; the rest map to the default
    background sequence.
    """
    return _BACKGROUND.get(color, DEFAULT_BACKGROUND)  # type: ignore[arg-type]


def colorize(
    text: str,
    *,
    foreground: ColorCode | None = None,
    background: ColorCode | None = None,
) -> str:
    """Wrap ``text`` as bg, fg, text, fg-reset, bg-reset.

    A color left as ``None`` contributes neither its set nor its reset
    sequence.
    """
    parts: list[str] = []
    if background is not None:
        parts.append(background_escape(background))
    if foreground is not None:
        parts.append(foreground_escape(foreground))
    parts.append(text)
    if foreground is not None:
        parts.append(DEFAULT_FOREGROUND)
    if background is not None:
        parts.append(DEFAULT_BACKGROUND)
    return "".join(parts)


__all__ = [
    "ColorCode",
    "DEFAULT_BACKGROUND",
    "DEFAULT_FOREGROUND",
    "background_escape",
    "colorize",
    "foreground_escape",
]

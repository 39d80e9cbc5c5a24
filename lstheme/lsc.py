"""Parsing of ``LS_COLORS``-style strings into named styles."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from lstheme.style import RGB, AnyColour, Colour, Fixed, Style

__all__ = ["Pair", "LSColors"]

_BYTE = re.compile(r"\+?[0-9]+")

_ATTRIBUTES = {
    "1": Style.bold,
    "2": Style.dimmed,
    "3": Style.italic,
    "4": Style.underline,
    "5": Style.blink,
    "7": Style.reverse,
    "8": Style.hidden,
    "9": Style.strikethrough,
}

_BASIC = {
    "0": Colour.BLACK,
    "1": Colour.RED,
    "2": Colour.GREEN,
    "3": Colour.YELLOW,
    "4": Colour.BLUE,
    "5": Colour.PURPLE,
    "6": Colour.CYAN,
    "7": Colour.WHITE,
}


def _parse_byte(text: str | None) -> int | None:
    if text is None or not _BYTE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 255 else None


def _next(codes: deque[str]) -> str | None:
    return codes.popleft() if codes else None


def _parse_high_colour(codes: deque[str]) -> AnyColour | None:
    """Read a 256-colour or true-colour specification from the front of ``codes``."""
    if not codes:
        return None
    mode = codes[0]
    if mode == "5":
        codes.popleft()
        index = _parse_byte(_next(codes))
        return Fixed(index) if index is not None else None
    if mode == "2":
        codes.popleft()
        first = _next(codes)
        if first is None:
            return None
        red = _parse_byte(first)
        green = _parse_byte(_next(codes))
        blue = _parse_byte(_next(codes))
        if red is not None and green is not None and blue is not None:
            return RGB(red, green, blue)
    return None


@dataclass(frozen=True)
class Pair:
    """One ``key=value`` entry of a colour specification."""

    key: str
    value: str

    def to_style(self) -> Style:
        """Interpret the value's semicolon-separated ANSI codes as a style.

        Codes that are not understood are ignored.
        """
        style = Style()
        codes = deque(self.value.split(";"))
        while codes:
            code = codes.popleft().lstrip("0")
            if code in _ATTRIBUTES:
                style = _ATTRIBUTES[code](style)
            elif len(code) == 2 and code[0] in "34" and code[1] in _BASIC:
                colour = _BASIC[code[1]]
                style = style.fg(colour) if code[0] == "3" else style.on(colour)
            elif code in ("38", "48"):
                colour = _parse_high_colour(codes)
                if colour is not None:
                    style = style.fg(colour) if code == "38" else style.on(colour)
        return style


@dataclass(frozen=True)
class LSColors:
    """A colon-separated list of ``key=value`` colour definitions."""

    spec: str

    def each_pair(self) -> Iterator[Pair]:
        """Yield every well-formed pair in order, skipping malformed entries."""
        for entry in self.spec.split(":"):
            bits = entry.split("=")
            if len(bits) == 2 and bits[0] and bits[1]:
                yield Pair(bits[0], bits[1])

    def __iter__(self) -> Iterator[Pair]:
        return self.each_pair()
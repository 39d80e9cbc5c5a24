"""Terminal text styles: colours and attributes that can be combined."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Union

__all__ = ["Colour", "Fixed", "RGB", "Style", "AnyColour", "apply_overlay"]


def _check_byte(value: int, what: str) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be between 0 and 255, got {value}")


class Colour(Enum):
    """The eight basic terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PURPLE = 5
    CYAN = 6
    WHITE = 7

    def normal(self) -> Style:
        """A style with this colour as foreground and nothing else."""
        return Style(foreground=self)

    def bold(self) -> Style:
        """A bold style in this colour."""
        return self.normal().bold()

    def underline(self) -> Style:
        """An underlined style in this colour."""
        return self.normal().underline()

    def on(self, background: AnyColour) -> Style:
        """A style in this colour on the given background."""
        return self.normal().on(background)


@dataclass(frozen=True)
class Fixed:
    """A colour from the 256-colour palette."""

    index: int

    def __post_init__(self) -> None:
        _check_byte(self.index, "palette index")

    def normal(self) -> Style:
        """A style with this colour as foreground and nothing else."""
        return Style(foreground=self)

    def bold(self) -> Style:
        """A bold style in this colour."""
        return self.normal().bold()

    def underline(self) -> Style:
        """An underlined style in this colour."""
        return self.normal().underline()

    def on(self, background: AnyColour) -> Style:
        """A style in this colour on the given background."""
        return self.normal().on(background)


@dataclass(frozen=True)
class RGB:
    """A 24-bit true colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_byte(self.red, "red component")
        _check_byte(self.green, "green component")
        _check_byte(self.blue, "blue component")

    def normal(self) -> Style:
        """A style with this colour as foreground and nothing else."""
        return Style(foreground=self)

    def bold(self) -> Style:
        """A bold style in this colour."""
        return self.normal().bold()

    def underline(self) -> Style:
        """An underlined style in this colour."""
        return self.normal().underline()

    def on(self, background: AnyColour) -> Style:
        """A style in this colour on the given background."""
        return self.normal().on(background)


AnyColour = Union[Colour, Fixed, RGB]


@dataclass(frozen=True)
class Style:
    """An immutable set of colours and text attributes."""

    foreground: AnyColour | None = None
    background: AnyColour | None = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False
    is_strikethrough: bool = False

    def bold(self) -> Style:
        return replace(self, is_bold=True)

    def dimmed(self) -> Style:
        return replace(self, is_dimmed=True)

    def italic(self) -> Style:
        return replace(self, is_italic=True)

    def underline(self) -> Style:
        return replace(self, is_underline=True)

    def blink(self) -> Style:
        return replace(self, is_blink=True)

    def reverse(self) -> Style:
        return replace(self, is_reverse=True)

    def hidden(self) -> Style:
        return replace(self, is_hidden=True)

    def strikethrough(self) -> Style:
        return replace(self, is_strikethrough=True)

    def fg(self, colour: AnyColour) -> Style:
        """Return this style with the given foreground colour."""
        return replace(self, foreground=colour)

    def on(self, colour: AnyColour) -> Style:
        """Return this style with the given background colour."""
        return replace(self, background=colour)


_FLAGS = tuple(f.name for f in fields(Style) if f.name.startswith("is_"))


def apply_overlay(base: Style, overlay: Style) -> Style:
    """Amend ``base`` with every colour and attribute that ``overlay`` sets.

    Attributes the overlay leaves unset keep their value from the base.
    """
    changes: dict[str, object] = {}
    if overlay.foreground is not None:
        changes["foreground"] = overlay.foreground
    if overlay.background is not None:
        changes["background"] = overlay.background
    for flag in _FLAGS:
        if getattr(overlay, flag):
            changes[flag] = True
    return replace(base, **changes)
"""Building a complete theme from options and colour definition strings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from lstheme.file_colours import (
    ExtensionMappings,
    FileColours,
    FileColoursPair,
    NoFileColours,
)
from lstheme.lsc import LSColors, Pair
from lstheme.style import Style, apply_overlay
from lstheme.ui_styles import ColourScale, UiStyles

__all__ = ["UseColours", "Prefix", "Definitions", "Options", "Theme"]

_log = logging.getLogger(__name__)


class UseColours(Enum):
    """When coloured output should be produced."""

    ALWAYS = "always"
    """Even when output is not going to a terminal."""
    AUTOMATIC = "automatic"
    """Only when output is going to a terminal."""
    NEVER = "never"
    """Never, even when output is going to a terminal."""


class Prefix(Enum):
    """Decimal and binary magnitude prefixes for file sizes."""

    KILO = "k"
    MEGA = "M"
    GIGA = "G"
    TERA = "T"
    PETA = "P"
    EXA = "E"
    ZETTA = "Z"
    YOTTA = "Y"
    KIBI = "Ki"
    MEBI = "Mi"
    GIBI = "Gi"
    TEBI = "Ti"
    PEBI = "Pi"
    EXBI = "Ei"
    ZEBI = "Zi"
    YOBI = "Yi"


_MAGNITUDES = {
    Prefix.KILO: "kilo",
    Prefix.KIBI: "kilo",
    Prefix.MEGA: "mega",
    Prefix.MEBI: "mega",
    Prefix.GIGA: "giga",
    Prefix.GIBI: "giga",
}


def _magnitude(prefix: Prefix | None) -> str:
    if prefix is None:
        return "byte"
    return _MAGNITUDES.get(prefix, "huge")


def _add_glob(exts: ExtensionMappings, pair: Pair) -> None:
    try:
        exts.add(pair.key, pair.to_style())
    except ValueError as error:
        _log.warning("Couldn't parse glob pattern %r: %s", pair.key, error)


@dataclass(frozen=True)
class Definitions:
    """The raw ``LS_COLORS`` and ``EXA_COLORS`` strings, if set."""

    ls: str | None = None
    exa: str | None = None

    def parse_color_vars(self, colours: UiStyles) -> tuple[ExtensionMappings, bool]:
        """Apply interface codes to ``colours`` and collect file name globs.

        Returns the glob mappings and whether the default file type colours
        should still be used: an ``exa`` string starting with ``reset``
        turns them off.
        """
        exts = ExtensionMappings()

        if self.ls is not None:
            for pair in LSColors(self.ls):
                if not colours.set_ls(pair):
                    _add_glob(exts, pair)

        use_default_filetypes = True

        if self.exa is not None:
            if self.exa == "reset" or self.exa.startswith("reset:"):
                use_default_filetypes = False
            for pair in LSColors(self.exa):
                if not colours.set_ls(pair) and not colours.set_exa(pair):
                    _add_glob(exts, pair)

        return exts, use_default_filetypes


@dataclass(frozen=True)
class Options:
    """Everything that decides how output gets coloured."""

    use_colours: UseColours = UseColours.AUTOMATIC
    colour_scale: ColourScale = ColourScale.FIXED
    definitions: Definitions = field(default_factory=Definitions)

    def to_theme(
        self, isatty: bool, default_file_colours: FileColours | None = None
    ) -> Theme:
        """Build the theme, using ``default_file_colours`` as the built-in
        file type colouring unless the definitions reset it."""
        if self.use_colours is UseColours.NEVER or (
            self.use_colours is UseColours.AUTOMATIC and not isatty
        ):
            return Theme(UiStyles.plain(), NoFileColours())

        ui = UiStyles.default_theme(self.colour_scale)
        custom, use_default_filetypes = self.definitions.parse_color_vars(ui)
        default = default_file_colours if use_default_filetypes else None

        exts: FileColours
        if custom.is_non_empty() and default is not None:
            exts = FileColoursPair(custom, default)
        elif custom.is_non_empty():
            exts = custom
        elif default is not None:
            exts = default
        else:
            exts = NoFileColours()
        return Theme(ui, exts)


@dataclass
class Theme:
    """Interface styles together with a source of file name colours."""

    ui: UiStyles
    exts: FileColours

    def size(self, prefix: Prefix | None) -> Style:
        """The style for a size number of the given magnitude."""
        return getattr(self.ui.size, f"number_{_magnitude(prefix)}")

    def unit(self, prefix: Prefix | None) -> Style:
        """The style for a size unit of the given magnitude."""
        return getattr(self.ui.size, f"unit_{_magnitude(prefix)}")

    def broken_filename(self) -> Style:
        """The style for the target path of a broken symlink."""
        return apply_overlay(self.ui.broken_symlink, self.ui.broken_path_overlay)

    def broken_control_char(self) -> Style:
        """The style for a control character in a broken symlink's path."""
        return apply_overlay(self.ui.control_char, self.ui.broken_path_overlay)

    def colour_file(self, name: str) -> Style:
        """The style for a file name, falling back to the normal file style."""
        style = self.exts.colour_file(name)
        return style if style is not None else self.ui.filekinds.normal
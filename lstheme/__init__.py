"""Terminal colour themes for file listings from LS_COLORS and EXA_COLORS definitions."""

__version__ = "0.1.0"
__all__ = ["file_colours", "lsc", "style", "theme", "ui_styles"]
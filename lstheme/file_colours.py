"""Choosing a style for a file from its name."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from lstheme.style import Style

__all__ = ["FileColours", "NoFileColours", "FileColoursPair", "ExtensionMappings"]


class FileColours(ABC):
    """Something that may pick a style for a file name."""

    @abstractmethod
    def colour_file(self, name: str) -> Style | None:
        """The style for the file, or None if this source has no opinion."""


class NoFileColours(FileColours):
    """Never picks a style."""

    def colour_file(self, name: str) -> Style | None:
        return None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoFileColours)

    def __hash__(self) -> int:
        return hash(NoFileColours)

    def __repr__(self) -> str:
        return "NoFileColours()"


@dataclass(frozen=True)
class FileColoursPair(FileColours):
    """Asks the first source, falling back to the second."""

    first: FileColours
    second: FileColours

    def colour_file(self, name: str) -> Style | None:
        style = self.first.colour_file(name)
        return style if style is not None else self.second.colour_file(name)


_CLASS_ITEM = re.compile(r".-.|.", re.DOTALL)


def _translate_class(content: str) -> list[str]:
    parts = []
    for item in _CLASS_ITEM.finditer(content):
        text = item.group()
        if len(text) == 3:
            low, high = text[0], text[2]
            if low <= high:
                parts.append(f"[{re.escape(low)}-{re.escape(high)}]")
        else:
            parts.append(re.escape(text))
    return parts


def _compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a shell glob into a regular expression.

    Raises ValueError for malformed patterns: unclosed brackets, three or
    more stars in a row, or ``**`` that is not a whole path component.
    """
    out = []
    pos = 0
    length = len(pattern)
    while pos < length:
        char = pattern[pos]
        if char == "?":
            out.append(".")
            pos += 1
        elif char == "*":
            end = pos
            while end < length and pattern[end] == "*":
                end += 1
            stars = end - pos
            if stars > 2:
                raise ValueError(
                    f"invalid glob {pattern!r}: wildcards are either '*' or '**'"
                )
            if stars == 2:
                starts_component = pos == 0 or pattern[pos - 1] == "/"
                ends_component = end == length or pattern[end] == "/"
                if not (starts_component and ends_component):
                    raise ValueError(
                        f"invalid glob {pattern!r}: "
                        "recursive wildcards must form a single path component"
                    )
            out.append(".*")
            pos = end
        elif char == "[":
            start = pos + 1
            negated = start < length and pattern[start] == "!"
            if negated:
                start += 1
            search_from = start + 1 if start < length and pattern[start] == "]" else start
            close = pattern.find("]", search_from)
            if close == -1:
                raise ValueError(f"invalid glob {pattern!r}: invalid range pattern")
            parts = _translate_class(pattern[start:close])
            alternatives = "|".join(parts)
            if negated:
                out.append(f"(?!(?:{alternatives})).")
            else:
                out.append(f"(?:{alternatives})" if parts else "(?!)")
            pos = close + 1
        else:
            out.append(re.escape(char))
            pos += 1
    return re.compile("".join(out), re.DOTALL)


@dataclass
class ExtensionMappings(FileColours):
    """Glob patterns paired with styles; later patterns take precedence."""

    mappings: list[tuple[str, Style]] = field(default_factory=list)
    _compiled: list[re.Pattern[str]] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._compiled = [_compile_glob(pattern) for pattern, _ in self.mappings]

    def add(self, pattern: str, style: Style) -> None:
        """Add a glob pattern; raises ValueError if it is malformed."""
        compiled = _compile_glob(pattern)
        self.mappings.append((pattern, style))
        self._compiled.append(compiled)

    def is_non_empty(self) -> bool:
        return bool(self.mappings)

    def colour_file(self, name: str) -> Style | None:
        for regex, (_, style) in zip(reversed(self._compiled), reversed(self.mappings)):
            if regex.fullmatch(name):
                return style
        return None
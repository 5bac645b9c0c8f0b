'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Tuple

from stickynote.core.constants import KIND_TEXT, KIND_TODO

__all__ = ["Line", "Document", "InvalidLineIndex"]


class InvalidLineIndex(IndexError):
    """Raised when an edit addresses a line position outside the document."""

    def __init__(self, index: int, length: int):
        super().__init__(f"line index {index} out of range for document of {length} line(s)")
        self.index = index
        self.length = length


@dataclass(slots=True, frozen=True)
class Line:
    """
    A single line of a note.

    • kind     – "text" or "todo"
    • text     – line content, never containing a line break
    • checked  – completion state (todo only)
    • indent   – checklist nesting depth (todo only, root = 0)
    """
    kind: str
    text: str = ""
    checked: bool = False
    indent: int = 0

    def __post_init__(self):
        if self.kind not in (KIND_TEXT, KIND_TODO):
            raise ValueError(f"unknown line kind: {self.kind!r}")
        if "\n" in self.text:
            raise ValueError("line text may not contain a newline")
        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")
        if self.kind == KIND_TEXT and (self.indent or self.checked):
            raise ValueError("text lines carry no indent or checked state")

    @classmethod
    def plain(cls, text: str = "") -> Line:
        return cls(KIND_TEXT, text)

    @classmethod
    def todo(cls, text: str = "", checked: bool = False, indent: int = 0) -> Line:
        return cls(KIND_TODO, text, checked, indent)

    @property
    def is_todo(self) -> bool:
        return self.kind == KIND_TODO

    def with_changes(self, **changes) -> Line:
        return replace(self, **changes)


@dataclass(frozen=True)
class Document:
    """Immutable, never-empty sequence of lines addressed by position."""
    lines: Tuple[Line, ...]

    def __post_init__(self):
        # Accept any iterable of lines but always store a tuple
        object.__setattr__(self, "lines", tuple(self.lines))
        if not self.lines:
            raise ValueError("a document always holds at least one line")

    @classmethod
    def empty(cls) -> Document:
        return cls((Line.plain(),))

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def check_index(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < len(self.lines)):
            raise InvalidLineIndex(index, len(self.lines))
        return index

    def line(self, index: int) -> Line:
        return self.lines[self.check_index(index)]

    def replace_line(self, index: int, line: Line) -> Document:
        self.check_index(index)
        lines = list(self.lines)
        lines[index] = line
        return Document(lines)

    def insert_after(self, index: int, line: Line) -> Document:
        self.check_index(index)
        lines = list(self.lines)
        lines.insert(index + 1, line)
        return Document(lines)

    def remove_line(self, index: int) -> Document:
        """Remove a line; removing the sole line is refused."""
        self.check_index(index)
        if len(self.lines) == 1:
            raise ValueError("cannot remove the only line of a document")
        return Document(self.lines[:index] + self.lines[index + 1:])

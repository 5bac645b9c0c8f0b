'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from stickynote.core.document import Document

__all__ = ["FocusDirective", "FocusTarget", "FocusController"]


@dataclass(slots=True, frozen=True)
class FocusDirective:
    """
    Where input should go after an action.

    • line   – position of the line to focus
    • caret  – caret offset within that line; None leaves it to the host,
               -1 means "end of line"
    """
    line: int
    caret: Optional[int] = None

    @classmethod
    def end_of(cls, line: int) -> FocusDirective:
        return cls(line, -1)


@dataclass(slots=True, frozen=True)
class FocusTarget:
    """A directive resolved against a concrete document."""
    line: int
    caret: Optional[int] = None


class FocusController:
    """
    Holds the focus directive emitted by the most recent action until the
    host has re-rendered, then resolves it against the current document.

    Lines have no identity, only position, so a directive is only meaningful
    for the document produced by the action that emitted it. Requesting a new
    directive replaces any unconsumed one.
    """

    def __init__(self):
        self._pending: Optional[FocusDirective] = None

    @property
    def pending(self) -> Optional[FocusDirective]:
        return self._pending

    def request(self, directive: Optional[FocusDirective]):
        if directive is not None:
            self._pending = directive

    def clear(self):
        self._pending = None

    def consume(self, document: Document) -> Optional[FocusTarget]:
        directive, self._pending = self._pending, None
        if directive is None:
            return None
        return self.resolve(directive, document)

    @staticmethod
    def resolve(directive: FocusDirective, document: Document) -> FocusTarget:
        line = min(max(directive.line, 0), len(document) - 1)
        if directive.caret is None:
            return FocusTarget(line)

        text_len = len(document.lines[line].text)
        caret = text_len if directive.caret < 0 else min(directive.caret, text_len)
        return FocusTarget(line, caret)

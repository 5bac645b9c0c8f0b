'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Callable, Optional

from stickynote.core import edit_engine
from stickynote.core.document import Document
from stickynote.core.edit_engine import EditResult
from stickynote.core.focus import FocusController, FocusTarget
from stickynote.core.log import Log
from stickynote.core.note_format import parse_content, serialize_document

__all__ = ["NoteSession"]


class NoteSession:
    """
    Editing state for one open note.

    Applies edit actions to the current document, keeps the pending focus
    directive, and hands serialized content to `on_commit` whenever an action
    actually changed the document.
    """

    def __init__(self, content: str = "", on_commit: Optional[Callable[[str], None]] = None):
        self.document: Document = parse_content(content)
        self.focus = FocusController()
        self._on_commit = on_commit

    @property
    def content(self) -> str:
        return serialize_document(self.document)

    def reload(self, content: str):
        """Replace the document with external content (load, merge) without committing."""
        self.document = parse_content(content)
        self.focus.clear()
        Log.debug(f"Reloaded note ({len(self.document)} lines)", 2)

    def take_focus(self) -> Optional[FocusTarget]:
        """Resolve and clear the pending focus directive for the host UI."""
        return self.focus.consume(self.document)

    def _apply(self, name: str, result: EditResult) -> EditResult:
        changed = result.document != self.document
        self.document = result.document
        self.focus.request(result.focus)

        if changed:
            Log.debug(f"{name}: committed ({len(self.document)} lines)", 2)
            if self._on_commit is not None:
                self._on_commit(self.content)
        return result

    # ---------------- Actions ----------------

    def split(self, index: int) -> EditResult:
        return self._apply("split", edit_engine.split_line(self.document, index))

    def toggle(self, index: int) -> EditResult:
        return self._apply("toggle", edit_engine.toggle_line(self.document, index))

    def edit_text(self, index: int, new_text: str) -> EditResult:
        return self._apply("edit_text", edit_engine.edit_text(self.document, index, new_text))

    def indent(self, index: int) -> EditResult:
        return self._apply("indent", edit_engine.indent_line(self.document, index))

    def outdent(self, index: int) -> EditResult:
        return self._apply("outdent", edit_engine.outdent_line(self.document, index))

    def convert_to_todo(self, index: int) -> EditResult:
        return self._apply("convert_to_todo", edit_engine.convert_to_todo(self.document, index))

    def delete_backward(self, index: int) -> EditResult:
        return self._apply("delete_backward", edit_engine.delete_backward(self.document, index))

    def move_focus(self, index: int, direction: str) -> EditResult:
        return self._apply("move_focus", edit_engine.move_focus(self.document, index, direction))

    def insert_indent_spaces(self, index: int, start: int, end: int) -> EditResult:
        return self._apply(
            "insert_indent_spaces",
            edit_engine.insert_indent_spaces(self.document, index, start, end),
        )

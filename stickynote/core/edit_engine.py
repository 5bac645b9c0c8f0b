'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from stickynote.core.checklist import propagate_checked
from stickynote.core.constants import INDENT_MARKER, MAX_INDENT
from stickynote.core.document import Document, Line
from stickynote.core.focus import FocusDirective
from stickynote.core.note_format import split_todo_prefix

__all__ = [
    "EditResult",
    "UP",
    "DOWN",
    "split_line",
    "toggle_line",
    "edit_text",
    "indent_line",
    "outdent_line",
    "convert_to_todo",
    "delete_backward",
    "move_focus",
    "insert_indent_spaces",
]

UP = "up"
DOWN = "down"


@dataclass(frozen=True)
class EditResult:
    """Outcome of one edit action: the new document plus an optional focus directive."""
    document: Document
    focus: Optional[FocusDirective] = None


def _clamp_indent(indent: int) -> int:
    return min(max(indent, 0), MAX_INDENT)

def _outdented(line: Line) -> Line:
    """One level shallower; a root todo becomes plain text."""
    if line.indent > 0:
        return line.with_changes(indent=_clamp_indent(line.indent - 1))
    return Line.plain(line.text)

# ---------- Structural edits ----------

def split_line(document: Document, index: int) -> EditResult:
    """
    Insert an empty line after `index`. A todo continues as an unchecked
    todo at the same depth; text continues as text.
    """
    line = document.line(index)
    if line.is_todo:
        new_line = Line.todo("", False, _clamp_indent(line.indent))
    else:
        new_line = Line.plain()
    return EditResult(document.insert_after(index, new_line), FocusDirective(index + 1, 0))

def delete_backward(document: Document, index: int) -> EditResult:
    """
    Backspace on an empty line: step a todo out one level (or back to text),
    otherwise remove the text line unless it is the last one left.
    """
    line = document.line(index)
    if line.text:
        return EditResult(document)

    if line.is_todo:
        return EditResult(document.replace_line(index, _outdented(line)), FocusDirective(index))

    if len(document) == 1:
        return EditResult(document)

    return EditResult(document.remove_line(index), FocusDirective.end_of(max(0, index - 1)))

# ---------- Checklist state ----------

def toggle_line(document: Document, index: int) -> EditResult:
    """Flip a todo's checked state and recompute its ancestors."""
    line = document.line(index)
    if not line.is_todo:
        return EditResult(document)

    toggled = document.replace_line(index, line.with_changes(checked=not line.checked))
    return EditResult(propagate_checked(toggled, index))

# ---------- Text and type conversion ----------

def edit_text(document: Document, index: int, new_text: str) -> EditResult:
    """
    Replace a line's text. Typing a todo marker at the start of a text line
    turns it into a root-level todo; nothing else changes a line's kind.
    """
    line = document.line(index)

    if not line.is_todo:
        todo = split_todo_prefix(new_text)
        if todo is not None:
            checked, text = todo
            converted = Line.todo(text, checked, 0)
            return EditResult(document.replace_line(index, converted), FocusDirective.end_of(index))

    if new_text == line.text:
        return EditResult(document)
    return EditResult(document.replace_line(index, line.with_changes(text=new_text)))

def convert_to_todo(document: Document, index: int) -> EditResult:
    """Turn a text line into an unchecked root-level todo keeping its text."""
    line = document.line(index)
    if line.is_todo:
        return EditResult(document)
    return EditResult(document.replace_line(index, Line.todo(line.text)))

def indent_line(document: Document, index: int) -> EditResult:
    line = document.line(index)
    if not line.is_todo:
        return EditResult(document)

    indent = _clamp_indent(line.indent + 1)
    if indent == line.indent:
        return EditResult(document)
    return EditResult(document.replace_line(index, line.with_changes(indent=indent)))

def outdent_line(document: Document, index: int) -> EditResult:
    line = document.line(index)
    if not line.is_todo:
        return EditResult(document)
    return EditResult(document.replace_line(index, _outdented(line)))

def insert_indent_spaces(document: Document, index: int, start: int, end: int) -> EditResult:
    """
    Literal-indent mode for text lines: replace the [start, end) selection
    with an indent marker and put the caret right after it.
    """
    line = document.line(index)
    if line.is_todo:
        return EditResult(document)

    end = min(max(end, 0), len(line.text))
    start = min(max(start, 0), end)
    text = line.text[:start] + INDENT_MARKER + line.text[end:]
    return EditResult(
        document.replace_line(index, line.with_changes(text=text)),
        FocusDirective(index, start + len(INDENT_MARKER)),
    )

# ---------- Navigation ----------

def move_focus(document: Document, index: int, direction: str) -> EditResult:
    document.check_index(index)
    if direction == UP:
        target = index - 1
    elif direction == DOWN:
        target = index + 1
    else:
        raise ValueError(f"unknown focus direction: {direction!r}")

    if 0 <= target < len(document):
        return EditResult(document, FocusDirective(target))
    return EditResult(document)

'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Optional, Tuple

from stickynote.core.constants import (
    INDENT_MARKER,
    TODO_PREFIX_CHECKED,
    TODO_PREFIX_UNCHECKED,
    TODO_PREFIX_LEN,
)
from stickynote.core.document import Document, Line

__all__ = [
    "split_todo_prefix",
    "parse_line",
    "parse_content",
    "serialize_line",
    "serialize_document",
]

# Persisted grammar, one line per Line:
#   todo: <INDENT_MARKER * indent>- [x] text   (or "- [ ] ")
#   text: stored text verbatim


def split_todo_prefix(text: str) -> Optional[Tuple[bool, str]]:
    """
    If `text` starts with a todo marker, return (checked, remainder); else None.
    """
    if text.startswith(TODO_PREFIX_CHECKED):
        return True, text[TODO_PREFIX_LEN:]
    if text.startswith(TODO_PREFIX_UNCHECKED):
        return False, text[TODO_PREFIX_LEN:]
    return None


def parse_line(raw: str) -> Line:
    """Classify one raw line. Indent depth is not clamped here."""
    indent = 0
    stripped = raw
    while stripped.startswith(INDENT_MARKER):
        indent += 1
        stripped = stripped[len(INDENT_MARKER):]

    todo = split_todo_prefix(stripped)
    if todo is None:
        # Indent markers only matter for todo detection; text keeps them.
        return Line.plain(raw)

    checked, text = todo
    return Line.todo(text, checked, indent)


def parse_content(content: str) -> Document:
    """
    Parse persisted note content into a Document.
    Total: malformed markers simply degrade to text lines.
    """
    if not content:
        return Document.empty()

    return Document(parse_line(raw) for raw in content.split("\n"))


def serialize_line(line: Line) -> str:
    if not line.is_todo:
        return line.text
    marker = TODO_PREFIX_CHECKED if line.checked else TODO_PREFIX_UNCHECKED
    return INDENT_MARKER * line.indent + marker + line.text


def serialize_document(document: Document) -> str:
    return "\n".join(serialize_line(line) for line in document)

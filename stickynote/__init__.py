'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from stickynote.core.document import Document, Line, InvalidLineIndex
from stickynote.core.note_format import parse_content, serialize_document
from stickynote.core.checklist import propagate_checked
from stickynote.core.focus import FocusController, FocusDirective, FocusTarget
from stickynote.core.session import NoteSession

__all__ = [
    "Document",
    "Line",
    "InvalidLineIndex",
    "parse_content",
    "serialize_document",
    "propagate_checked",
    "FocusController",
    "FocusDirective",
    "FocusTarget",
    "NoteSession",
]

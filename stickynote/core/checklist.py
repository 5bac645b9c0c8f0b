'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import List, Optional

from stickynote.core.document import Document, Line

__all__ = [
    "find_parent_index",
    "direct_child_indices",
    "propagate_checked",
    "checklist_progress",
]


def find_parent_index(lines: List[Line], index: int) -> Optional[int]:
    """
    Nearest todo above `index` with a smaller indent, searching only through
    the contiguous run of todo lines. Returns None for root-level or text lines.
    """
    line = lines[index]
    if not line.is_todo or line.indent == 0:
        return None

    for i in range(index - 1, -1, -1):
        candidate = lines[i]
        if not candidate.is_todo:
            return None
        if candidate.indent < line.indent:
            return i
    return None


def direct_child_indices(lines: List[Line], parent_index: int) -> List[int]:
    """Indices of todos exactly one level below the parent, within its subtree."""
    child_indent = lines[parent_index].indent + 1
    children = []
    for i in range(parent_index + 1, len(lines)):
        line = lines[i]
        if not line.is_todo or line.indent < child_indent:
            break
        if line.indent == child_indent:
            children.append(i)
    return children


def propagate_checked(document: Document, changed_index: int) -> Document:
    """
    Recompute ancestor checked state after the line at `changed_index` changed.

    Each ancestor becomes checked iff all of its direct children are checked.
    An ancestor without direct children is left untouched. Only ancestors are
    rewritten; the changed line and its siblings never are.
    """
    document.check_index(changed_index)
    lines = list(document.lines)

    current = changed_index
    while True:
        parent = find_parent_index(lines, current)
        if parent is None:
            break

        children = direct_child_indices(lines, parent)
        if children:
            all_checked = all(lines[i].checked for i in children)
            if lines[parent].checked != all_checked:
                lines[parent] = lines[parent].with_changes(checked=all_checked)
        current = parent

    if lines == list(document.lines):
        return document
    return Document(lines)


def checklist_progress(document: Document) -> tuple[int, int]:
    """Return (checked, total) over every todo line in the document."""
    todos = [line for line in document if line.is_todo]
    return sum(1 for line in todos if line.checked), len(todos)

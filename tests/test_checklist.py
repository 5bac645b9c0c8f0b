from stickynote.core.checklist import (
    checklist_progress,
    direct_child_indices,
    find_parent_index,
    propagate_checked,
)
from stickynote.core.document import Document, Line
from stickynote.core.edit_engine import toggle_line
from stickynote.core.note_format import parse_content


def _checked(doc):
    return [line.checked for line in doc]


def test_identity_for_root_and_text_lines():
    doc = parse_content("- [ ] a\nplain")
    assert propagate_checked(doc, 0) is doc
    assert propagate_checked(doc, 1) is doc


def test_parent_checked_only_when_all_children_checked():
    doc = parse_content("- [ ] a\n  - [x] b\n  - [ ] c")
    assert propagate_checked(doc, 1) == doc

    doc = parse_content("- [ ] a\n  - [x] b\n  - [x] c")
    assert _checked(propagate_checked(doc, 2)) == [True, True, True]


def test_parent_unchecked_when_a_child_is_unchecked():
    doc = parse_content("- [x] a\n  - [x] b\n  - [ ] c")
    assert _checked(propagate_checked(doc, 2)) == [False, True, False]


def test_grandchildren_do_not_count_as_direct_children():
    doc = parse_content("- [ ] a\n  - [x] b\n    - [ ] deep\n  - [x] c")
    lines = list(doc)
    assert direct_child_indices(lines, 0) == [1, 3]
    assert _checked(propagate_checked(doc, 3))[0] is True


def test_parent_without_direct_children_is_unchanged():
    # Child sits two levels below its nearest ancestor
    doc = parse_content("- [ ] a\n    - [x] skipped level")
    assert find_parent_index(list(doc), 1) == 0
    assert direct_child_indices(list(doc), 0) == []
    assert propagate_checked(doc, 1) == doc


def test_text_line_ends_parent_search_and_child_scan():
    doc = parse_content("- [ ] a\nbreak\n  - [x] orphan")
    assert find_parent_index(list(doc), 2) is None
    assert propagate_checked(doc, 2) == doc

    doc = parse_content("- [ ] a\n  - [x] b\nbreak\n  - [ ] c")
    assert direct_child_indices(list(doc), 0) == [1]
    assert _checked(propagate_checked(doc, 1))[0] is True


def test_scan_stops_at_next_sibling_of_parent():
    doc = parse_content("- [ ] a\n  - [x] b\n- [ ] z\n  - [ ] y")
    assert direct_child_indices(list(doc), 0) == [1]


def test_cascade_through_three_levels():
    doc = parse_content(
        "- [ ] grandparent\n"
        "  - [ ] parent\n"
        "    - [x] done child\n"
        "    - [ ] last child"
    )
    result = toggle_line(doc, 3).document
    assert _checked(result) == [True, True, True, True]

    # Unchecking the leaf cascades back up
    result = toggle_line(result, 3).document
    assert _checked(result) == [False, False, True, False]


def test_descendants_are_never_rewritten():
    doc = parse_content("- [x] a\n  - [ ] b\n    - [x] c\n    - [x] d")
    result = propagate_checked(doc, 1)
    assert [line.checked for line in list(result)[1:]] == [False, True, True]
    assert result.lines[0].checked is False


def test_checklist_progress_counts_todos_only():
    doc = Document((Line.plain("title"), Line.todo("a", True), Line.todo("b", indent=1)))
    assert checklist_progress(doc) == (1, 2)

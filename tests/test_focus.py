from stickynote.core.focus import FocusController, FocusDirective, FocusTarget
from stickynote.core.note_format import parse_content


def test_consume_resolves_and_clears():
    doc = parse_content("one\ntwo")
    focus = FocusController()
    focus.request(FocusDirective(1, 2))
    assert focus.pending == FocusDirective(1, 2)
    assert focus.consume(doc) == FocusTarget(1, 2)
    assert focus.pending is None
    assert focus.consume(doc) is None


def test_none_request_keeps_previous_directive():
    focus = FocusController()
    focus.request(FocusDirective(0))
    focus.request(None)
    assert focus.pending == FocusDirective(0)


def test_newer_directive_replaces_older():
    focus = FocusController()
    focus.request(FocusDirective(0))
    focus.request(FocusDirective(2, 1))
    assert focus.consume(parse_content("a\nb\ncc")) == FocusTarget(2, 1)


def test_end_of_line_caret():
    doc = parse_content("a\nhello")
    assert FocusController.resolve(FocusDirective.end_of(1), doc) == FocusTarget(1, 5)


def test_resolve_clamps_to_current_document():
    doc = parse_content("abc")
    assert FocusController.resolve(FocusDirective(4, 10), doc) == FocusTarget(0, 3)
    assert FocusController.resolve(FocusDirective(0), doc) == FocusTarget(0, None)


def test_clear_drops_pending():
    focus = FocusController()
    focus.request(FocusDirective(0))
    focus.clear()
    assert focus.consume(parse_content("a")) is None

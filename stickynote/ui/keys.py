# ui/keys.py

from __future__ import annotations

from typing import Optional, Tuple

import wx

from stickynote.core.edit_engine import UP, DOWN
from stickynote.core.log import Log

# Canonical key map for a note line being edited:
#   Enter            split line (todo continues as todo)
#   Tab              text -> todo, todo -> indent
#   Shift+Tab        outdent (root todo -> text)
#   Ctrl+Tab         literal indent spaces in a text line
#   Backspace        on an empty line: outdent / un-todo / remove
#   Up / Down        move to the adjacent line

# ------------ Key event handlers ------------

def handle_key_event(session, index: int, evt: wx.KeyEvent,
                     selection: Optional[Tuple[int, int]] = None) -> bool:
    """
    Route a key press on line `index` to the note session.
    Returns False when the key should fall through to the host text control.
    """
    key_code = evt.GetKeyCode()

    if key_code in (wx.WXK_RETURN, wx.WXK_NUMPAD_ENTER):
        return _handle_enter_key(session, index, evt)

    if key_code == wx.WXK_TAB:
        return _handle_tab_key(session, index, evt, selection)

    if key_code == wx.WXK_BACK:
        return _handle_backspace_key(session, index)

    if key_code in (wx.WXK_UP, wx.WXK_NUMPAD_UP, wx.WXK_DOWN, wx.WXK_NUMPAD_DOWN):
        return _handle_vertical_keys(session, index, key_code)

    return False

def _handle_enter_key(session, index: int, evt) -> bool:
    """Handle Enter key - new line after the current one."""
    if evt.ShiftDown():
        # Lines never hold line breaks; let the host ignore Shift+Enter.
        return False
    session.split(index)
    return True

def _handle_tab_key(session, index: int, evt, selection) -> bool:
    """Handle Tab / Shift+Tab / Ctrl+Tab."""
    line = session.document.line(index)

    if evt.ControlDown():
        if line.is_todo or selection is None:
            return False
        start, end = selection
        session.insert_indent_spaces(index, start, end)
        return True

    if evt.ShiftDown():
        session.outdent(index)
        return True

    if line.is_todo:
        session.indent(index)
    else:
        session.convert_to_todo(index)
    return True

def _handle_backspace_key(session, index: int) -> bool:
    """Backspace is only structural on an empty line."""
    if session.document.line(index).text:
        return False
    session.delete_backward(index)
    return True

def _handle_vertical_keys(session, index: int, key_code: int) -> bool:
    """Handle up/down arrows - move between lines."""
    direction = UP if key_code in (wx.WXK_UP, wx.WXK_NUMPAD_UP) else DOWN
    result = session.move_focus(index, direction)
    Log.debug(f"_handle_vertical_keys: {direction} from line {index} -> {result.focus}", 75)
    return result.focus is not None

'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Callable, Optional

import wx

from stickynote.core.constants import SAVE_DEBOUNCE_MS
from stickynote.core.log import Log

__all__ = ["AutoSaver"]


class AutoSaver:
    """
    Debounced writer for note content. GUI thread only.

    save() restarts a one-shot wx.CallLater timer so a burst of keystrokes
    produces a single write; save_now() cancels the timer and writes any
    pending content immediately. Callers must flush before merges and on close.
    """

    def __init__(
        self,
        write_fn: Callable[[str], None],
        delay_ms: int = SAVE_DEBOUNCE_MS,
        call_later=wx.CallLater,
    ):
        self._write_fn = write_fn
        self._delay_ms = delay_ms
        self._call_later = call_later
        self._timer = None
        self._pending: Optional[str] = None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def save(self, content: str):
        """Remember content and (re)start the quiet period."""
        self._pending = content
        self._stop_timer()
        self._timer = self._call_later(self._delay_ms, self._on_timer)

    def save_now(self) -> bool:
        """
        Write pending content synchronously. Returns True if a write happened.
        Write errors propagate and leave the content pending.
        """
        self._stop_timer()
        if self._pending is None:
            return False

        content = self._pending
        self._write_fn(content)
        if self._pending is content:
            self._pending = None
        return True

    def cancel(self):
        """Drop pending content without writing it."""
        self._stop_timer()
        self._pending = None

    def _stop_timer(self):
        if self._timer is not None:
            if self._timer.IsRunning():
                self._timer.Stop()
            self._timer = None

    def _on_timer(self):
        self._timer = None
        try:
            self.save_now()
        except (OSError, ValueError) as e:
            # Keep the content pending; the next save or flush retries it.
            Log.debug(f"Autosave failed: {e}", 0)

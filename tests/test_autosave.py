import pytest

pytest.importorskip("wx")

from stickynote.core.session import NoteSession
from stickynote.ui.autosave import AutoSaver


class FakeCallLater:
    """Stands in for wx.CallLater: records the callback instead of scheduling it."""

    def __init__(self):
        self.timers = []

    def __call__(self, millis, fn):
        timer = FakeTimer(millis, fn)
        self.timers.append(timer)
        return timer

    def fire_latest(self):
        timer = self.timers[-1]
        assert timer.running
        timer.running = False
        timer.fn()


class FakeTimer:
    def __init__(self, millis, fn):
        self.millis = millis
        self.fn = fn
        self.running = True

    def IsRunning(self):
        return self.running

    def Stop(self):
        self.running = False


def test_burst_of_saves_writes_once_after_quiet_period():
    writes, clock = [], FakeCallLater()
    saver = AutoSaver(writes.append, delay_ms=300, call_later=clock)

    for content in ("a", "ab", "abc"):
        saver.save(content)

    assert writes == []
    assert [t.running for t in clock.timers] == [False, False, True]
    assert clock.timers[-1].millis == 300

    clock.fire_latest()
    assert writes == ["abc"]
    assert not saver.has_pending


def test_save_now_cancels_timer_and_writes_immediately():
    writes, clock = [], FakeCallLater()
    saver = AutoSaver(writes.append, call_later=clock)
    saver.save("pending")

    assert saver.save_now() is True
    assert writes == ["pending"]
    assert not clock.timers[-1].running
    assert saver.save_now() is False


def test_failed_timer_write_stays_pending_for_flush():
    attempts, clock = [], FakeCallLater()

    def flaky_write(content):
        attempts.append(content)
        if len(attempts) == 1:
            raise OSError("disk full")

    saver = AutoSaver(flaky_write, call_later=clock)
    saver.save("x")
    clock.fire_latest()
    assert saver.has_pending

    assert saver.save_now() is True
    assert attempts == ["x", "x"]
    assert not saver.has_pending


def test_save_now_propagates_write_errors():
    def broken(content):
        raise OSError("read-only")

    saver = AutoSaver(broken, call_later=FakeCallLater())
    saver.save("x")
    with pytest.raises(OSError):
        saver.save_now()
    assert saver.has_pending


def test_cancel_drops_pending_content():
    writes, clock = [], FakeCallLater()
    saver = AutoSaver(writes.append, call_later=clock)
    saver.save("x")
    saver.cancel()
    assert not saver.has_pending
    assert saver.save_now() is False
    assert writes == []


def test_session_commits_feed_the_saver():
    writes, clock = [], FakeCallLater()
    saver = AutoSaver(writes.append, call_later=clock)
    session = NoteSession("- [ ] a", on_commit=saver.save)

    session.split(0)
    session.edit_text(1, "b")
    session.indent(1)
    saver.save_now()

    assert writes == ["- [ ] a\n  - [ ] b"]

from warpgrid.timers import FrameScheduler, Scheduler

from conftest import FakeClock


def test_action_fires_once_at_deadline():
    clock = FakeClock()
    scheduler = Scheduler(clock)
    fired = []
    scheduler.call_later(100, lambda: fired.append(clock()))

    clock.advance(99)
    assert scheduler.run_due() == 0
    clock.advance(1)
    assert scheduler.run_due() == 1
    assert fired == [100]
    clock.advance(500)
    assert scheduler.run_due() == 0


def test_cancelled_action_never_runs():
    clock = FakeClock()
    scheduler = Scheduler(clock)
    fired = []
    handle = scheduler.call_later(10, lambda: fired.append(1))
    handle.cancel()
    clock.advance(20)
    scheduler.run_due()
    assert fired == []
    assert not handle.pending


def test_due_actions_run_in_deadline_order():
    clock = FakeClock()
    scheduler = Scheduler(clock)
    order = []
    scheduler.call_later(30, lambda: order.append("c"))
    scheduler.call_later(10, lambda: order.append("a"))
    scheduler.call_later(20, lambda: order.append("b"))
    scheduler.run_due(100)
    assert order == ["a", "b", "c"]


def test_pending_count_and_clear():
    scheduler = Scheduler(FakeClock())
    scheduler.call_later(10, lambda: None)
    scheduler.call_later(10, lambda: None).cancel()
    assert scheduler.pending_count() == 1
    scheduler.clear()
    assert scheduler.pending_count() == 0


def test_frame_requests_made_during_dispatch_wait_for_next_frame():
    frames = FrameScheduler()
    seen = []

    def callback(ts):
        seen.append(ts)
        frames.request(callback)

    frames.request(callback)
    assert frames.dispatch(16) == 1
    assert frames.dispatch(32) == 1
    assert seen == [16, 32]
    assert len(frames) == 1


def test_cancelled_frame_is_skipped_even_mid_dispatch():
    frames = FrameScheduler()
    seen = []
    handles = {}
    handles["first"] = frames.request(lambda ts: frames.cancel(handles["second"]))
    handles["second"] = frames.request(lambda ts: seen.append(ts))
    assert frames.dispatch(0) == 1
    assert seen == []

"""Tests for the manual and threaded schedulers and the dispatchers."""

import threading

import pytest
from tick_clock import (
    DirectDispatcher,
    ManualScheduler,
    QueueDispatcher,
    Scheduler,
    TickConfig,
)


class TestManualSchedulerFiring:
    """Entries fire at their due times as the clock advances."""

    def test_zero_delay_fires_on_run_pending(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.schedule(lambda: calls.append(scheduler.clock.now()), 0.0, 0.1)

        assert scheduler.run_pending() == 1
        assert calls == [0.0]

    def test_does_not_fire_before_delay(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.schedule(lambda: calls.append(True), 0.5, 0.1)

        scheduler.advance(0.4)
        assert calls == []

        scheduler.advance(0.1)
        assert calls == [True]

    def test_recurring_fires_every_interval(self):
        scheduler = ManualScheduler()
        times = []
        scheduler.schedule(lambda: times.append(scheduler.clock.now()), 0.0, 0.25)

        fired = scheduler.advance(1.0)
        assert fired == 5
        assert times == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])
        assert scheduler.clock.now() == 1.0

    def test_entries_fire_in_chronological_order(self):
        scheduler = ManualScheduler()
        order = []
        scheduler.schedule(lambda: order.append("slow"), 0.3, 1.0)
        scheduler.schedule(lambda: order.append("fast"), 0.1, 1.0)

        scheduler.advance(0.5)
        assert order == ["fast", "slow"]

    def test_late_run_pending_fires_once(self):
        """A late firing runs once, then the next one is an interval later."""
        scheduler = ManualScheduler()
        times = []
        scheduler.schedule(lambda: times.append(scheduler.clock.now()), 0.1, 0.1)

        scheduler.clock.advance(0.35)
        assert scheduler.run_pending() == 1
        assert times == pytest.approx([0.35])

        scheduler.advance(0.1)
        assert times == pytest.approx([0.35, 0.45])

    def test_callback_exception_propagates(self):
        scheduler = ManualScheduler()

        def boom():
            raise RuntimeError("boom")

        scheduler.schedule(boom, 0.0, 0.1)
        with pytest.raises(RuntimeError, match="boom"):
            scheduler.run_pending()


class TestScheduleValidation:
    def test_non_positive_interval_raises(self):
        scheduler = ManualScheduler()
        with pytest.raises(ValueError, match="interval must be positive"):
            scheduler.schedule(lambda: None, 0.0, 0.0)

    def test_negative_delay_raises(self):
        scheduler = ManualScheduler()
        with pytest.raises(ValueError, match="delay must be >= 0"):
            scheduler.schedule(lambda: None, -1.0, 0.1)


class TestCancellation:
    """Cancelling a handle stops future firings."""

    def test_cancel_before_due(self):
        scheduler = ManualScheduler()
        calls = []
        handle = scheduler.schedule(lambda: calls.append(True), 0.1, 0.1)
        handle.cancel()

        scheduler.advance(1.0)
        assert calls == []
        assert handle.cancelled is True
        assert scheduler.active == 0

    def test_cancel_from_inside_entry(self):
        scheduler = ManualScheduler()
        calls = []
        handles = []

        def fire():
            calls.append(True)
            if len(calls) == 2:
                handles[0].cancel()

        handles.append(scheduler.schedule(fire, 0.0, 0.1))
        scheduler.advance(1.0)
        assert len(calls) == 2

    def test_cancel_one_keeps_others(self):
        scheduler = ManualScheduler()
        a, b = [], []
        handle_a = scheduler.schedule(lambda: a.append(True), 0.0, 0.1)
        scheduler.schedule(lambda: b.append(True), 0.0, 0.1)

        handle_a.cancel()
        scheduler.advance(0.35)
        assert a == []
        assert len(b) == 4
        assert scheduler.active == 1

    def test_cancel_twice_is_harmless(self):
        scheduler = ManualScheduler()
        handle = scheduler.schedule(lambda: None, 0.0, 0.1)
        handle.cancel()
        handle.cancel()
        assert handle.cancelled is True


class TestConfigure:
    def test_configure_replaces_config(self):
        scheduler = ManualScheduler()
        original = scheduler.config
        updated = scheduler.configure(fps_target=30)

        assert scheduler.config is updated
        assert updated.fps_target == 30
        assert updated.frame_skip is True
        assert original.fps_target == 60

    def test_configure_validates(self):
        scheduler = ManualScheduler(config=TickConfig(fps_target=10))
        with pytest.raises(ValueError):
            scheduler.configure(fps_target=0)
        assert scheduler.config.fps_target == 10


class TestThreadedScheduler:
    """Smoke tests against the real clock. Kept short."""

    def test_entry_fires_on_background_thread(self):
        scheduler = Scheduler(name="test-scheduler")
        fired = threading.Event()
        thread_names = []

        def fire():
            thread_names.append(threading.current_thread().name)
            fired.set()

        try:
            scheduler.schedule(fire, 0.0, 0.01)
            assert fired.wait(timeout=2.0)
            assert scheduler.running
        finally:
            scheduler.shutdown()

        assert thread_names[0] == "test-scheduler"
        assert not scheduler.running

    def test_failing_entry_is_cancelled_and_others_continue(self):
        scheduler = Scheduler(name="test-failing")
        good = threading.Event()
        bad_calls = []

        def bad():
            bad_calls.append(True)
            raise RuntimeError("broken entry")

        try:
            handle = scheduler.schedule(bad, 0.0, 0.005)
            scheduler.schedule(good.set, 0.02, 0.005)
            assert good.wait(timeout=2.0)
        finally:
            scheduler.shutdown()

        assert bad_calls == [True]
        assert handle.cancelled is True

    def test_schedule_after_shutdown_raises(self):
        scheduler = Scheduler()
        scheduler.shutdown()
        with pytest.raises(RuntimeError, match="shut down"):
            scheduler.schedule(lambda: None, 0.0, 0.1)


class TestDispatchers:
    def test_direct_dispatcher_runs_inline(self):
        calls = []
        DirectDispatcher().dispatch(lambda: calls.append(1))
        assert calls == [1]

    def test_queue_dispatcher_defers_until_drain(self):
        dispatcher = QueueDispatcher()
        calls = []
        dispatcher.dispatch(lambda: calls.append(1))
        dispatcher.dispatch(lambda: calls.append(2))

        assert calls == []
        assert dispatcher.pending == 2

        assert dispatcher.drain() == 2
        assert calls == [1, 2]
        assert dispatcher.pending == 0

    def test_queue_dispatcher_drain_limit(self):
        dispatcher = QueueDispatcher()
        calls = []
        for i in range(3):
            dispatcher.dispatch(lambda i=i: calls.append(i))

        assert dispatcher.drain(limit=2) == 2
        assert calls == [0, 1]
        assert dispatcher.drain() == 1
        assert calls == [0, 1, 2]

    def test_callback_dispatched_while_draining_runs_in_same_drain(self):
        dispatcher = QueueDispatcher()
        calls = []

        def first():
            calls.append("first")
            dispatcher.dispatch(lambda: calls.append("second"))

        dispatcher.dispatch(first)
        assert dispatcher.drain() == 2
        assert calls == ["first", "second"]

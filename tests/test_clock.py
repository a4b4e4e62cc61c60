#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Dual Clock Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
License:        MIT License
================================================================================
"""

import matplotlib.pyplot as plt
import pytest
from relativity.clock import (
    ClockPhase, ClockState, DualClockAnimator, ManualFrameScheduler,
    MatplotlibFrameScheduler
)


class RecordingScheduler(ManualFrameScheduler):
    """Scheduler that remembers every callback, even cancelled ones."""

    def __init__(self):
        super().__init__()
        self.requested = []
        self.cancelled = []

    def request_frame(self, callback):
        self.requested.append(callback)
        return super().request_frame(callback)

    def cancel_frame(self, handle):
        self.cancelled.append(handle)
        super().cancel_frame(handle)


class TestInitialState:
    """Tests for a fresh animator."""

    def test_idle(self):
        clock = DualClockAnimator()
        assert clock.phase is ClockPhase.IDLE
        assert not clock.is_running
        assert clock.elapsed_stationary_seconds == 0.0
        assert clock.state == ClockState()

    def test_state_is_a_copy(self):
        """Edits to the returned state don't reach the animator."""
        clock = DualClockAnimator()
        state = clock.state
        state.elapsed_stationary_seconds = 99.0
        assert clock.elapsed_stationary_seconds == 0.0


class TestTicking:
    """Tests for tick accumulation."""

    def test_first_tick_sets_baseline(self):
        """Ticks at t = 0, 1, 2, 3 accumulate 3 seconds."""
        clock = DualClockAnimator()
        clock.start()
        for t in [0.0, 1.0, 2.0, 3.0]:
            clock.tick(t)
        assert clock.elapsed_stationary_seconds == 3.0

    def test_first_tick_contributes_nothing(self):
        clock = DualClockAnimator()
        clock.start()
        clock.tick(1000.0)
        assert clock.elapsed_stationary_seconds == 0.0
        assert clock.state.last_tick_timestamp == 1000.0

    def test_irregular_intervals(self):
        """Large gaps (e.g. a backgrounded host) are applied unclamped."""
        clock = DualClockAnimator()
        clock.start()
        for t in [5.0, 5.016, 5.05, 125.05]:
            clock.tick(t)
        assert clock.elapsed_stationary_seconds == pytest.approx(120.05)

    def test_tick_while_idle_ignored(self):
        clock = DualClockAnimator()
        clock.tick(1.0)
        clock.tick(2.0)
        assert clock.elapsed_stationary_seconds == 0.0
        assert clock.state.last_tick_timestamp is None


class TestTransitions:
    """Tests for start / pause / reset."""

    def test_pause_freezes_elapsed(self):
        clock = DualClockAnimator()
        clock.start()
        clock.tick(0.0)
        clock.tick(2.0)
        clock.pause()
        assert clock.phase is ClockPhase.IDLE
        assert clock.elapsed_stationary_seconds == 2.0
        assert clock.state.last_tick_timestamp is None

    def test_tick_after_pause_ignored(self):
        """A stray tick racing a pause leaves the clock untouched."""
        clock = DualClockAnimator()
        clock.start()
        clock.tick(0.0)
        clock.tick(1.5)
        clock.pause()
        clock.tick(10.0)
        assert clock.elapsed_stationary_seconds == 1.5

    def test_resume_sets_fresh_baseline(self):
        """Time spent paused is never charged after a restart."""
        clock = DualClockAnimator()
        clock.start()
        clock.tick(0.0)
        clock.tick(1.0)
        clock.pause()
        clock.start()
        clock.tick(50.0)
        clock.tick(51.0)
        assert clock.elapsed_stationary_seconds == 2.0

    def test_start_while_running_ignored(self):
        clock = DualClockAnimator()
        clock.start()
        clock.tick(0.0)
        clock.start()
        clock.tick(1.0)
        assert clock.elapsed_stationary_seconds == 1.0
        assert clock.is_running

    def test_pause_while_idle_ignored(self):
        clock = DualClockAnimator()
        clock.pause()
        assert clock.phase is ClockPhase.IDLE

    @pytest.mark.parametrize("running", [True, False])
    def test_reset(self, running):
        """Reset from either state zeroes the clock and stops it."""
        clock = DualClockAnimator()
        clock.start()
        clock.tick(0.0)
        clock.tick(4.0)
        if not running:
            clock.pause()

        clock.reset()

        assert clock.elapsed_stationary_seconds == 0.0
        assert not clock.is_running
        assert clock.state.last_tick_timestamp is None

    def test_toggle(self):
        clock = DualClockAnimator()
        assert clock.toggle() is True
        assert clock.toggle() is False


class TestMovingObserver:
    """Tests for the derived moving-frame reading."""

    def test_explicit_dilation(self):
        """10 s at γ = 1.25 (v = 0.6c) reads 8 s on the moving clock."""
        clock = DualClockAnimator()
        clock.start()
        clock.tick(0.0)
        clock.tick(10.0)
        assert clock.moving_observer_seconds(1.25) == pytest.approx(8.0)

    def test_live_dilation_provider(self):
        """The moving clock follows dilation changes without touching elapsed time."""
        dilation = {"gamma": 1.25}
        clock = DualClockAnimator(dilation_provider=lambda: dilation["gamma"])
        clock.start()
        clock.tick(0.0)
        clock.tick(10.0)
        assert clock.moving_observer_seconds() == pytest.approx(8.0)

        dilation["gamma"] = 2.0
        assert clock.moving_observer_seconds() == pytest.approx(5.0)
        assert clock.elapsed_stationary_seconds == 10.0

    def test_no_provider_means_rest_frame(self):
        clock = DualClockAnimator()
        clock.start()
        clock.tick(0.0)
        clock.tick(3.0)
        assert clock.moving_observer_seconds() == 3.0


class TestScheduling:
    """Tests for frame scheduling and cancellation."""

    def test_start_requests_frame(self):
        scheduler = ManualFrameScheduler()
        clock = DualClockAnimator(scheduler=scheduler)
        clock.start()
        assert scheduler.pending_count == 1
        assert clock.has_pending_frame

    def test_frames_drive_the_clock(self):
        """Each fired frame ticks and re-requests the next one."""
        scheduler = ManualFrameScheduler()
        clock = DualClockAnimator(scheduler=scheduler)
        clock.start()
        for t in [0.0, 1.0, 2.0, 3.0]:
            assert scheduler.advance(t) == 1
        assert clock.elapsed_stationary_seconds == 3.0
        assert scheduler.pending_count == 1

    def test_pause_cancels_pending_frame(self):
        scheduler = ManualFrameScheduler()
        clock = DualClockAnimator(scheduler=scheduler)
        clock.start()
        scheduler.advance(0.0)
        clock.pause()
        assert scheduler.pending_count == 0
        assert not clock.has_pending_frame
        assert scheduler.advance(5.0) == 0

    def test_reset_cancels_pending_frame(self):
        scheduler = ManualFrameScheduler()
        clock = DualClockAnimator(scheduler=scheduler)
        clock.start()
        scheduler.advance(0.0)
        clock.reset()
        assert scheduler.pending_count == 0

    def test_orphaned_callback_after_pause(self):
        """A cancelled callback that fires anyway changes nothing."""
        scheduler = RecordingScheduler()
        clock = DualClockAnimator(scheduler=scheduler)
        clock.start()
        scheduler.advance(0.0)
        scheduler.advance(1.0)
        clock.pause()

        orphan = scheduler.requested[-1]
        orphan(9.0)

        assert clock.elapsed_stationary_seconds == 1.0
        assert scheduler.pending_count == 0

    def test_orphaned_callback_after_restart(self):
        """A callback from an earlier run can't start a second tick chain."""
        scheduler = RecordingScheduler()
        clock = DualClockAnimator(scheduler=scheduler)
        clock.start()
        scheduler.advance(0.0)
        orphan = scheduler.requested[-1]
        clock.pause()
        clock.start()

        orphan(100.0)
        assert clock.elapsed_stationary_seconds == 0.0
        assert scheduler.pending_count == 1

        scheduler.advance(200.0)
        scheduler.advance(201.0)
        assert clock.elapsed_stationary_seconds == 1.0

    def test_close_releases_frame(self):
        scheduler = RecordingScheduler()
        clock = DualClockAnimator(scheduler=scheduler)
        clock.start()
        clock.close()
        assert scheduler.pending_count == 0
        assert len(scheduler.cancelled) == 1
        assert not clock.is_running

    def test_no_scheduler_is_manual(self):
        """Without a scheduler the host ticks the clock directly."""
        clock = DualClockAnimator()
        clock.start()
        assert not clock.has_pending_frame


class TestMatplotlibScheduler:
    """Tests for the canvas-timer scheduler, fired by hand on the Agg backend."""

    @pytest.fixture
    def figure(self):
        fig = plt.figure()
        yield fig
        plt.close(fig)

    @staticmethod
    def fake_clock(*readings):
        times = iter(readings)
        return lambda: next(times)

    @staticmethod
    def pending_timer(scheduler):
        assert len(scheduler._timers) == 1
        return next(iter(scheduler._timers.values()))

    def test_timers_drive_the_clock(self, figure):
        scheduler = MatplotlibFrameScheduler(figure, clock=self.fake_clock(0.0, 1.0, 2.0, 3.0))
        clock = DualClockAnimator(scheduler=scheduler)
        clock.start()

        for _ in range(3):
            self.pending_timer(scheduler)._on_timer()

        assert clock.elapsed_stationary_seconds == 2.0
        assert clock.has_pending_frame

    def test_pause_stops_pending_timer(self, figure):
        scheduler = MatplotlibFrameScheduler(figure, clock=self.fake_clock(0.0, 1.0, 2.0, 3.0))
        clock = DualClockAnimator(scheduler=scheduler)
        clock.start()
        for _ in range(3):
            self.pending_timer(scheduler)._on_timer()

        timer = self.pending_timer(scheduler)
        clock.pause()
        assert scheduler._timers == {}
        assert not clock.has_pending_frame

        # A timer event already queued by the backend still arrives
        timer._on_timer()
        assert clock.elapsed_stationary_seconds == 2.0
        assert scheduler._timers == {}

    def test_cancel_unknown_handle(self, figure):
        scheduler = MatplotlibFrameScheduler(figure)
        scheduler.cancel_frame(42)
        assert scheduler._timers == {}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

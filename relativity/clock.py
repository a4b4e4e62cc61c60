#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Dual-Clock Animation Driver
================================================================================

Project:        Special Relativity Canvas
Module:         clock.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

A stopwatch pair for the time dilation demo. Stationary-frame time is
accumulated from host frame timestamps; the moving observer's reading is
derived from it on every read as t_moving = t_stationary / γ, so changing
the velocity mid-run changes the moving clock's rate without a jump in the
stationary clock.

The animator is a small state machine (IDLE / RUNNING) that knows nothing
about how frames are produced. A frame scheduler is injected instead:
    - ManualFrameScheduler: frames are fired explicitly (tests, Streamlit)
    - MatplotlibFrameScheduler: frames come from matplotlib GUI timers
"""

import functools
import itertools
import logging
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, Hashable, Optional, Protocol

from .physics import moving_clock_reading

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    """Host primitive that delivers one frame timestamp (seconds) per request."""

    def request_frame(self, callback: FrameCallback) -> Hashable:
        ...

    def cancel_frame(self, handle: Hashable) -> None:
        ...


class ManualFrameScheduler:
    """
    Frame scheduler whose frames are fired by the caller.

    Pending callbacks run on `advance(now)`. Used by the test-suite and by
    the Streamlit app, which advances once per script rerun.
    """

    def __init__(self):
        self._pending: Dict[int, FrameCallback] = {}
        self._handles = itertools.count(1)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._handles)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: Hashable) -> None:
        self._pending.pop(handle, None)

    def advance(self, now: float) -> int:
        """
        Fire every pending frame with timestamp `now`.

        Frames requested while firing are kept for the next advance.

        Returns:
            Number of callbacks fired
        """
        due = list(self._pending.values())
        self._pending.clear()
        for callback in due:
            callback(now)
        return len(due)


class MatplotlibFrameScheduler:
    """Frame scheduler backed by single-shot matplotlib canvas timers."""

    def __init__(
        self,
        figure,
        interval_ms: int = 16,
        clock: Callable[[], float] = time.perf_counter
    ):
        self.figure = figure
        self.interval_ms = interval_ms
        self.clock = clock
        self._timers: Dict[int, object] = {}
        self._handles = itertools.count(1)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._handles)
        timer = self.figure.canvas.new_timer(interval=self.interval_ms)
        timer.single_shot = True

        def fire():
            if self._timers.pop(handle, None) is not None:
                callback(self.clock())

        timer.add_callback(fire)
        self._timers[handle] = timer
        timer.start()
        return handle

    def cancel_frame(self, handle: Hashable) -> None:
        timer = self._timers.pop(handle, None)
        if timer is not None:
            timer.stop()


class ClockPhase(Enum):
    """States of the dual-clock animator."""
    IDLE = "idle"
    RUNNING = "running"


@dataclass
class ClockState:
    """Stationary stopwatch state. Owned by DualClockAnimator."""
    elapsed_stationary_seconds: float = 0.0
    running: bool = False
    last_tick_timestamp: Optional[float] = None


class DualClockAnimator:
    """
    Tick-driven stationary/moving stopwatch pair.

    Transitions never raise. Misordered calls (start while running, pause
    while idle, ticks while idle) are ignored.

    Every frame request is tagged with the run generation it was issued in.
    A callback that outlives its run (cancelled too late by the host, or
    fired after a pause/start cycle) is discarded instead of driving a
    second tick chain.
    """

    def __init__(
        self,
        scheduler: Optional[FrameScheduler] = None,
        dilation_provider: Optional[Callable[[], float]] = None
    ):
        self.scheduler = scheduler
        self.dilation_provider = dilation_provider
        self._state = ClockState()
        self._frame_handle: Optional[Hashable] = None
        self._generation = 0

    @property
    def state(self) -> ClockState:
        """Copy of the current clock state."""
        return replace(self._state)

    @property
    def phase(self) -> ClockPhase:
        return ClockPhase.RUNNING if self._state.running else ClockPhase.IDLE

    @property
    def is_running(self) -> bool:
        return self._state.running

    @property
    def elapsed_stationary_seconds(self) -> float:
        return self._state.elapsed_stationary_seconds

    @property
    def has_pending_frame(self) -> bool:
        return self._frame_handle is not None

    def moving_observer_seconds(self, time_dilation: Optional[float] = None) -> float:
        """
        Reading of the moving observer's clock.

        Args:
            time_dilation: Dilation factor γ to apply. Defaults to the live
                value from the dilation provider, or 1 without one.
        """
        if time_dilation is None:
            time_dilation = self.dilation_provider() if self.dilation_provider else 1.0
        return moving_clock_reading(self._state.elapsed_stationary_seconds, time_dilation)

    def start(self) -> None:
        """IDLE -> RUNNING. The first tick afterwards only sets the baseline."""
        if self._state.running:
            logger.debug("start() ignored: clock already running")
            return

        self._state.running = True
        self._state.last_tick_timestamp = None
        self._generation += 1
        self._request_frame()
        logger.info("Clock started at %.3f s", self._state.elapsed_stationary_seconds)

    def pause(self) -> None:
        """RUNNING -> IDLE, keeping the elapsed time."""
        if not self._state.running:
            logger.debug("pause() ignored: clock not running")
            return

        self._state.running = False
        self._state.last_tick_timestamp = None
        self._cancel_frame()
        logger.info("Clock paused at %.3f s", self._state.elapsed_stationary_seconds)

    def toggle(self) -> bool:
        """Start when idle, pause when running. Returns the new running flag."""
        if self._state.running:
            self.pause()
        else:
            self.start()
        return self._state.running

    def reset(self) -> None:
        """Any state -> IDLE with both clocks at zero."""
        self._cancel_frame()
        self._state = ClockState()
        logger.info("Clock reset")

    def close(self) -> None:
        """Release any outstanding frame request before the host goes away."""
        if self._state.running:
            self.pause()
        self._cancel_frame()

    def tick(self, now: float) -> None:
        """
        Advance the stationary clock to host timestamp `now` (seconds).

        Whatever delta the host reports is applied as-is, including the large
        jump after a suspended host resumes.
        """
        state = self._state
        if not state.running:
            logger.debug("tick(%.3f) ignored: clock idle", now)
            return

        if state.last_tick_timestamp is None:
            state.last_tick_timestamp = now
            return

        state.elapsed_stationary_seconds += now - state.last_tick_timestamp
        state.last_tick_timestamp = now

    def _on_frame(self, generation: int, now: float) -> None:
        if generation != self._generation:
            logger.debug("Discarding frame from stale run %d", generation)
            return

        self._frame_handle = None
        self.tick(now)
        if self._state.running:
            self._request_frame()

    def _request_frame(self) -> None:
        if self.scheduler is None:
            return
        callback = functools.partial(self._on_frame, self._generation)
        self._frame_handle = self.scheduler.request_frame(callback)

    def _cancel_frame(self) -> None:
        if self._frame_handle is not None and self.scheduler is not None:
            self.scheduler.cancel_frame(self._frame_handle)
        self._frame_handle = None

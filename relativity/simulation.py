#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Special Relativity Simulation
================================================================================

Project:        Special Relativity Canvas
Module:         simulation.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Facade over the velocity control, the kinematics engine and the dual clock.
This is the only surface the CLI and the Streamlit app talk to.

Velocity and kinematic factors are recomputed from the control position on
every read instead of being cached alongside it.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .clock import DualClockAnimator, FrameScheduler
from .physics import KinematicFactors, compute_kinematic_factors
from .velocity import (
    CONTROL_MIDPOINT, ScaleMode, VelocityMapper, VelocityScale, coerce_scale_mode
)

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for the relativity simulation."""
    # Velocity control
    initial_control_input: float = CONTROL_MIDPOINT
    scale_mode: ScaleMode = ScaleMode.LINEAR

    # Length contraction demo
    rest_length: float = 10.0  # Ruler length in metres


@dataclass(frozen=True)
class SimulationSnapshot:
    """All readings needed to draw one frame."""
    control_input: float
    scale_mode: ScaleMode
    factors: KinematicFactors
    elapsed_stationary_seconds: float
    moving_observer_seconds: float
    running: bool
    rest_length: float

    @property
    def velocity(self) -> float:
        return self.factors.velocity

    @property
    def contracted_length(self) -> float:
        return self.rest_length * self.factors.length_contraction


class RelativitySimulation:
    """
    Velocity control, Lorentz factors and dual stopwatch in one object.

    The clock reads the current time dilation through a provider, so the
    moving clock follows velocity changes made while it runs.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        scheduler: Optional[FrameScheduler] = None
    ):
        self.config = config or SimulationConfig()
        self.mapper = VelocityMapper(
            control_input=self.config.initial_control_input,
            mode=self.config.scale_mode
        )
        self.clock = DualClockAnimator(
            scheduler=scheduler,
            dilation_provider=lambda: self.kinematic_factors().time_dilation
        )

    # Velocity control

    def set_control_input(self, control_input: float) -> None:
        self.mapper.set_control_input(control_input)
        logger.debug("Control input %.4f -> v = %.6fc",
                     self.mapper.control_input, self.velocity())

    def set_scale_mode(self, mode: Union[ScaleMode, str]) -> None:
        self.mapper.set_scale_mode(mode)

    def toggle_scale_mode(self) -> ScaleMode:
        return self.mapper.toggle_scale_mode()

    @property
    def control_input(self) -> float:
        return self.mapper.control_input

    @property
    def scale_mode(self) -> ScaleMode:
        return self.mapper.mode

    @property
    def scale(self) -> VelocityScale:
        return self.mapper.scale

    # Clock transitions

    def start(self) -> None:
        self.clock.start()

    def pause(self) -> None:
        self.clock.pause()

    def reset(self) -> None:
        self.clock.reset()

    def toggle_running(self) -> bool:
        return self.clock.toggle()

    def tick(self, now: float) -> None:
        """Feed a host timestamp straight to the clock (no scheduler)."""
        self.clock.tick(now)

    def close(self) -> None:
        self.clock.close()

    # Read accessors

    def velocity(self) -> float:
        return self.mapper.velocity

    def kinematic_factors(self) -> KinematicFactors:
        return compute_kinematic_factors(self.mapper.velocity)

    def elapsed_stationary_seconds(self) -> float:
        return self.clock.elapsed_stationary_seconds

    def moving_observer_seconds(self) -> float:
        return self.clock.moving_observer_seconds()

    def is_running(self) -> bool:
        return self.clock.is_running

    def snapshot(self) -> SimulationSnapshot:
        """Readings taken against a single velocity evaluation."""
        factors = self.kinematic_factors()
        elapsed = self.clock.elapsed_stationary_seconds
        return SimulationSnapshot(
            control_input=self.mapper.control_input,
            scale_mode=self.mapper.mode,
            factors=factors,
            elapsed_stationary_seconds=elapsed,
            moving_observer_seconds=self.clock.moving_observer_seconds(factors.time_dilation),
            running=self.clock.is_running,
            rest_length=self.config.rest_length
        )


def create_simulation(
    control_input: float = CONTROL_MIDPOINT,
    scale_mode: Union[ScaleMode, str] = ScaleMode.LINEAR,
    scheduler: Optional[FrameScheduler] = None,
    rest_length: float = 10.0
) -> RelativitySimulation:
    """
    Create a simulation with the control at a given position.

    Args:
        control_input: Initial slider position in [0, 1]
        scale_mode: Velocity scale, as a ScaleMode or its string value
        scheduler: Frame scheduler driving the stopwatch
        rest_length: Rest length of the ruler in metres

    Returns:
        Initialized RelativitySimulation
    """
    config = SimulationConfig(
        initial_control_input=control_input,
        scale_mode=coerce_scale_mode(scale_mode),
        rest_length=rest_length
    )
    return RelativitySimulation(config, scheduler=scheduler)

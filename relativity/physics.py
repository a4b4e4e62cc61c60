#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Relativistic Kinematics Engine
================================================================================

Project:        Special Relativity Canvas
Module:         physics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This module computes the special-relativistic factors for an observer moving
at a velocity v, expressed as a fraction of the speed of light (β = v/c).

The Lorentz factor is:
    γ = 1 / √(1 - β²)

From which:
    - Length contraction:  L = L₀ / γ     (factor 1/γ = √(1 - β²))
    - Time dilation:       Δt = γ Δt₀     (factor γ)

γ diverges as β → 1, so velocities are kept strictly below 1 by the
velocity mapping rather than by clamping here.
"""

import numpy as np
from numba import jit
from dataclasses import dataclass


@jit(nopython=True, cache=True)
def lorentz_factor(beta: float) -> float:
    """
    Calculate the Lorentz factor.

    γ = 1 / √(1 - β²)

    Args:
        beta: Velocity as a fraction of c, in [0, 1)

    Returns:
        Lorentz factor γ ≥ 1
    """
    return 1.0 / np.sqrt(1.0 - beta * beta)


@jit(nopython=True, cache=True)
def lorentz_factor_array(betas: np.ndarray) -> np.ndarray:
    """
    Calculate the Lorentz factor for an array of velocities.

    Args:
        betas: 1D array of velocities as fractions of c, each in [0, 1)

    Returns:
        1D array of Lorentz factors
    """
    gammas = np.empty_like(betas)
    for i in range(betas.shape[0]):
        gammas[i] = 1.0 / np.sqrt(1.0 - betas[i] * betas[i])
    return gammas


@dataclass(frozen=True)
class KinematicFactors:
    """
    Relativistic factors for a single velocity.

    Only γ is stored. Length contraction and time dilation are exact
    functions of it and are derived on access.
    """
    velocity: float
    gamma: float

    @property
    def length_contraction(self) -> float:
        """Factor 1/γ by which a moving ruler shrinks along its motion."""
        return 1.0 / self.gamma

    @property
    def time_dilation(self) -> float:
        """Factor γ by which a moving clock's interval is stretched."""
        return self.gamma

    @property
    def velocity_percent(self) -> float:
        return self.velocity * 100.0


def compute_kinematic_factors(velocity: float) -> KinematicFactors:
    """
    Compute γ, length contraction and time dilation for a velocity.

    Pure and stateless: the same velocity always yields bit-identical output.

    Args:
        velocity: Velocity as a fraction of c

    Returns:
        KinematicFactors for that velocity

    Raises:
        ValueError: If velocity lies outside [0, 1)
    """
    velocity = float(velocity)
    if not 0.0 <= velocity < 1.0:
        raise ValueError(f"Velocity must lie in [0, 1), got {velocity!r}")

    return KinematicFactors(velocity=velocity, gamma=float(lorentz_factor(velocity)))


def contracted_length(rest_length: float, velocity: float) -> float:
    """
    Length of a moving object as measured by the stationary observer.

    Args:
        rest_length: Proper length L₀
        velocity: Velocity as a fraction of c

    Returns:
        Contracted length L = L₀ / γ
    """
    return rest_length * compute_kinematic_factors(velocity).length_contraction


def dilated_interval(proper_interval: float, velocity: float) -> float:
    """Stationary-frame duration of a proper interval on the moving clock."""
    return proper_interval * compute_kinematic_factors(velocity).time_dilation


def moving_clock_reading(stationary_seconds: float, time_dilation: float) -> float:
    """Time shown on the moving clock after `stationary_seconds` of stationary time."""
    return stationary_seconds / time_dilation

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Velocity Control Mapping
================================================================================

Project:        Special Relativity Canvas
Module:         velocity.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Maps the normalized slider position x ∈ [0, 1] onto a velocity fraction of c.

Two scales are offered:
    - Linear:       v = 0.1 + 0.8 x                     covering [0.1, 0.9]
    - Logarithmic:  v = 0.9 + 0.0999 (1 - (1 - x)⁴)     covering [0.9, 0.9999]

The logarithmic scale is a quartic ease-out. Its slope vanishes at x = 1, so
the last stretch of the slider resolves velocities very close to c far more
finely than a linear map could.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)


class ScaleMode(Enum):
    """Velocity scales selectable on the control."""
    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"


@dataclass(frozen=True)
class VelocityScale:
    """
    Codomain and display settings for one scale.

    The mapping is v = min + (max - min) * (1 - (1 - x)^exponent).
    With exponent = 1 this reduces to the affine map min + (max - min) * x.
    """
    min_velocity: float
    max_velocity: float
    exponent: int
    percent_decimals: int     # velocity as % of c
    velocity_decimals: int    # velocity as fraction of c

    @property
    def span(self) -> float:
        return self.max_velocity - self.min_velocity

    @property
    def labels(self) -> Tuple[str, str]:
        """Slider end labels, e.g. ('0.1c', '0.9c')."""
        return f"{self.min_velocity:g}c", f"{self.max_velocity:g}c"


SCALES: Dict[ScaleMode, VelocityScale] = {
    ScaleMode.LINEAR: VelocityScale(
        min_velocity=0.1, max_velocity=0.9, exponent=1,
        percent_decimals=1, velocity_decimals=4
    ),
    ScaleMode.LOGARITHMIC: VelocityScale(
        min_velocity=0.9, max_velocity=0.9999, exponent=4,
        percent_decimals=4, velocity_decimals=6
    ),
}

# Slider position restored whenever the scale changes
CONTROL_MIDPOINT = 0.5


def map_control_input(control_input: float, mode: ScaleMode) -> float:
    """
    Map a control position onto a velocity fraction of c.

    Args:
        control_input: Slider position in [0, 1]
        mode: Active velocity scale

    Returns:
        Velocity as a fraction of the speed of light
    """
    scale = SCALES[mode]
    if scale.exponent == 1:
        eased = control_input
    else:
        eased = 1.0 - (1.0 - control_input) ** scale.exponent
    return scale.min_velocity + scale.span * eased


def map_control_inputs(control_inputs: np.ndarray, mode: ScaleMode) -> np.ndarray:
    """Vectorized map_control_input for plotting the mapping curve."""
    scale = SCALES[mode]
    x = np.asarray(control_inputs, dtype=float)
    if scale.exponent == 1:
        eased = x
    else:
        eased = 1.0 - (1.0 - x) ** scale.exponent
    return scale.min_velocity + scale.span * eased


def coerce_scale_mode(mode: Union[ScaleMode, str]) -> ScaleMode:
    """Accept a ScaleMode or its string value ('linear' / 'logarithmic')."""
    if isinstance(mode, ScaleMode):
        return mode
    return ScaleMode(str(mode).lower())


class VelocityMapper:
    """
    Holds the control position and scale mode.

    Velocity is never stored: every read maps the current control position
    through the current scale, so it can't go stale.
    """

    def __init__(
        self,
        control_input: float = CONTROL_MIDPOINT,
        mode: ScaleMode = ScaleMode.LINEAR
    ):
        self.mode = coerce_scale_mode(mode)
        self.control_input = CONTROL_MIDPOINT
        self.set_control_input(control_input)

    @property
    def scale(self) -> VelocityScale:
        return SCALES[self.mode]

    @property
    def velocity(self) -> float:
        return map_control_input(self.control_input, self.mode)

    def set_control_input(self, control_input: float) -> None:
        """Store the control position, clipped into [0, 1]."""
        self.control_input = float(np.clip(control_input, 0.0, 1.0))

    def set_scale_mode(self, mode: Union[ScaleMode, str]) -> None:
        """
        Switch scales and recenter the control.

        A slider position carried over from the other scale would land at an
        arbitrary point of the new range, so the control always snaps back
        to its midpoint.
        """
        self.mode = coerce_scale_mode(mode)
        self.control_input = CONTROL_MIDPOINT
        logger.info("Velocity scale set to %s (control reset to %.1f)",
                    self.mode.value, CONTROL_MIDPOINT)

    def toggle_scale_mode(self) -> ScaleMode:
        """Flip between linear and logarithmic scales."""
        if self.mode is ScaleMode.LINEAR:
            self.set_scale_mode(ScaleMode.LOGARITHMIC)
        else:
            self.set_scale_mode(ScaleMode.LINEAR)
        return self.mode

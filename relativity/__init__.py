#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Special Relativity Canvas
================================================================================

Project:        Special Relativity Canvas
Description:    Interactive visualization of length contraction and time
                dilation with a live dual-observer stopwatch

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This package implements the numerical core of a special relativity demo:
- Velocity control mapping on a linear or near-light logarithmic scale
- Lorentz factor, length contraction and time dilation
- A tick-driven dual stopwatch for stationary and moving observers
- Rendering of the contracted ruler and the two stopwatches

Modules:
    - velocity: Control input to velocity mapping
    - physics: Lorentz factor and derived kinematic factors
    - clock: Dual-clock animation state machine and frame schedulers
    - simulation: Facade tying velocity, kinematics and the clock together
    - visualization: Ruler, stopwatch and curve rendering
"""

__version__ = "1.0.0"
__author__ = "Ryan Kamp"

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Ruler and Stopwatch Visualization
================================================================================

Project:        Special Relativity Canvas
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This module provides the two linked views of the demo:
- Length contraction: a stationary ruler above a moving ruler shrunk by 1/γ
- Time dilation: stationary and moving observer stopwatches
plus the γ(v) curve and the text formatting shared by the CLI and the app.
"""

import io
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle

from .physics import KinematicFactors, dilated_interval, lorentz_factor_array
from .simulation import SimulationSnapshot
from .velocity import SCALES, ScaleMode

# Velocity thresholds for the on-screen annotations
NOTICEABLE_RANGE = (0.6, 0.7)
EXTREME_VELOCITY = 0.99


class ViewMode(Enum):
    """Which demo is shown."""
    LENGTH = "length"
    TIME = "time"


@dataclass
class VisualizationConfig:
    """Configuration for visualization."""
    stationary_color: str = "#3b82f6"   # Blue
    moving_color: str = "#ef4444"       # Red
    stationary_fill: str = "#dbeafe"
    moving_fill: str = "#fee2e2"
    background_color: str = "#ffffff"
    text_color: str = "#111827"
    ruler_ticks: int = 10
    figsize: Tuple[int, int] = (8, 4)
    dpi: int = 100


def format_velocity_percent(velocity: float, mode: ScaleMode) -> str:
    """Velocity as % of c with 1 decimal (linear) or 4 decimals (logarithmic)."""
    return f"{velocity * 100:.{SCALES[mode].percent_decimals}f}"


def format_velocity(velocity: float, mode: ScaleMode) -> str:
    """Velocity as a fraction of c with 4 or 6 decimals."""
    return f"{velocity:.{SCALES[mode].velocity_decimals}f}c"


def describe_regime(velocity: float, mode: ScaleMode) -> Optional[str]:
    """
    Short annotation for the velocity readout.

    Returns None when the velocity is unremarkable.
    """
    low, high = NOTICEABLE_RANGE
    if mode is ScaleMode.LINEAR and low < velocity < high:
        return "Effects becoming noticeable"
    if velocity > EXTREME_VELOCITY:
        return "Extreme relativistic effects"
    return None


def format_seconds(seconds: float) -> str:
    return f"{seconds:.2f}s"


def formula_lines(factors: KinematicFactors) -> List[str]:
    """The three formulas with the current values substituted."""
    return [
        f"γ = 1/√(1-v²/c²) = {factors.gamma:.3f}",
        f"L = L₀/γ = L₀ × {factors.length_contraction:.3f}",
        f"Δt = γ × Δt₀ = Δt₀ × {factors.time_dilation:.3f}",
    ]


def describe_length_contraction(snapshot: SimulationSnapshot) -> str:
    return (
        f"Length contraction factor: {snapshot.factors.length_contraction:.3f} "
        f"(A {snapshot.rest_length:g}m object appears as "
        f"{snapshot.contracted_length:.3f}m)"
    )


def describe_time_dilation(snapshot: SimulationSnapshot) -> str:
    dilation = dilated_interval(1.0, snapshot.velocity)
    return (
        f"Time dilation factor: {dilation:.3f} "
        f"(1 second for the moving observer is {dilation:.3f} seconds "
        f"for the stationary observer)"
    )


def _prepare_axes(
    ax: Optional[plt.Axes],
    config: VisualizationConfig
) -> Tuple[plt.Figure, plt.Axes]:
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=config.figsize)
    else:
        fig = ax.figure

    ax.clear()
    ax.set_facecolor(config.background_color)
    fig.patch.set_facecolor(config.background_color)
    return fig, ax


def _draw_ruler(
    ax: plt.Axes,
    y: float,
    width: float,
    edge_color: str,
    fill_color: str,
    n_ticks: int,
    text_color: str
):
    height = 0.5
    ax.add_patch(Rectangle((0.0, y), width, height,
                           facecolor=fill_color, edgecolor=edge_color, linewidth=1.5))

    # Tick labels shrink with the ruler
    for i in range(n_ticks + 1):
        x = width * (0.03 + 0.94 * i / n_ticks)
        ax.text(x, y + height / 2, str(i), ha='center', va='center',
                fontsize=8, color=text_color)


def render_ruler_matplotlib(
    snapshot: SimulationSnapshot,
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Render the length contraction demo.

    The stationary ruler spans the full width; the moving ruler spans
    1/γ of it.

    Args:
        snapshot: Current simulation readings
        config: Visualization configuration
        ax: Optional existing axes to draw on

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()

    fig, ax = _prepare_axes(ax, config)
    mode = snapshot.scale_mode

    _draw_ruler(ax, 1.2, 1.0, config.stationary_color, config.stationary_fill,
                config.ruler_ticks, config.text_color)
    ax.text(0.0, 1.8, "Stationary observer's ruler:", fontsize=10, color=config.text_color)

    _draw_ruler(ax, 0.0, snapshot.factors.length_contraction,
                config.moving_color, config.moving_fill,
                config.ruler_ticks, config.text_color)
    ax.text(0.0, 0.6,
            f"Moving observer's ruler (at {format_velocity_percent(snapshot.velocity, mode)}% of c):",
            fontsize=10, color=config.text_color)

    ax.set_xlim(-0.02, 1.02)
    ax.set_ylim(-0.3, 2.1)
    ax.set_title("Length Contraction Demo", color=config.text_color)
    ax.axis('off')

    return fig


def render_stopwatches_matplotlib(
    snapshot: SimulationSnapshot,
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Render the stationary and moving observer stopwatches.

    Args:
        snapshot: Current simulation readings
        config: Visualization configuration
        ax: Optional existing axes to draw on

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()

    fig, ax = _prepare_axes(ax, config)
    mode = snapshot.scale_mode

    dials = [
        (0.25, snapshot.elapsed_stationary_seconds, "Stationary Observer",
         config.stationary_color, config.stationary_fill),
        (0.75, snapshot.moving_observer_seconds,
         f"Moving Observer (at {format_velocity_percent(snapshot.velocity, mode)}% of c)",
         config.moving_color, config.moving_fill),
    ]

    for x, seconds, label, edge, fill in dials:
        ax.add_patch(Circle((x, 0.55), 0.18, facecolor=fill, edgecolor=edge, linewidth=4))
        ax.text(x, 0.55, format_seconds(seconds), ha='center', va='center',
                fontsize=16, fontweight='bold', color=config.text_color)
        ax.text(x, 0.22, label, ha='center', va='center',
                fontsize=9, color=config.text_color)

    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.set_aspect('equal')
    ax.set_title("Time Dilation Demo", color=config.text_color)
    ax.axis('off')

    return fig


def render_lorentz_curve(
    current_velocity: Optional[float] = None,
    ax: Optional[plt.Axes] = None,
    n_points: int = 2000
) -> plt.Figure:
    """
    Plot γ(v) and 1/γ(v), shading the linear and logarithmic slider ranges.

    Args:
        current_velocity: Optional velocity to mark on the curve
        ax: Optional existing axes
        n_points: Curve resolution

    Returns:
        Matplotlib figure
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(10, 5))
    else:
        fig = ax.figure

    ax.clear()

    # Dense sampling near c where γ turns steep
    betas = 1.0 - np.logspace(0, -4, n_points)
    betas = betas[betas < 1.0]
    gammas = lorentz_factor_array(betas)

    ax.plot(betas, gammas, 'b-', linewidth=2, label='γ (time dilation)')
    ax.plot(betas, 1.0 / gammas, 'r-', linewidth=2, label='1/γ (length contraction)')

    linear, logarithmic = SCALES[ScaleMode.LINEAR], SCALES[ScaleMode.LOGARITHMIC]
    ax.axvspan(linear.min_velocity, linear.max_velocity,
               alpha=0.08, color='green', label='Linear slider range')
    ax.axvspan(logarithmic.min_velocity, logarithmic.max_velocity,
               alpha=0.15, color='orange', label='Logarithmic slider range')

    if current_velocity is not None:
        gamma = lorentz_factor_array(np.array([current_velocity]))[0]
        ax.plot(current_velocity, gamma, 'ko', markersize=8,
                label=f'v = {current_velocity:.4f}c')

    ax.set_yscale('log')
    ax.set_xlim(0, 1)
    ax.set_xlabel('Velocity (fraction of c)')
    ax.set_ylabel('Factor')
    ax.set_title('Lorentz Factor')
    ax.legend(loc='upper left', fontsize=8)
    ax.grid(True, alpha=0.3, which='both')

    return fig


def figure_to_png(fig: plt.Figure, dpi: int = 100) -> bytes:
    """Save a figure to PNG bytes and close it."""
    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=dpi,
                facecolor=fig.get_facecolor(), edgecolor='none',
                bbox_inches='tight')
    plt.close(fig)
    buf.seek(0)

    return buf.getvalue()


def render_view_streamlit(
    snapshot: SimulationSnapshot,
    view_mode: ViewMode,
    config: Optional[VisualizationConfig] = None
) -> bytes:
    """
    Render the selected demo and return PNG bytes for Streamlit.

    Args:
        snapshot: Current simulation readings
        view_mode: Length or time demo
        config: Visualization configuration

    Returns:
        PNG image as bytes
    """
    if config is None:
        config = VisualizationConfig()

    if view_mode is ViewMode.LENGTH:
        fig = render_ruler_matplotlib(snapshot, config)
    else:
        fig = render_stopwatches_matplotlib(snapshot, config)

    return figure_to_png(fig, dpi=config.dpi)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Special Relativity Canvas - Command Line Interface
================================================================================

Project:        Special Relativity Canvas
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Command line interface for exploring the relativistic factors and running
the dual stopwatch outside of the Streamlit app.
"""

import argparse
import logging

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.widgets import Button, Slider

from relativity.clock import MatplotlibFrameScheduler
from relativity.logging_config import setup_logging
from relativity.simulation import create_simulation
from relativity.velocity import ScaleMode, map_control_inputs
from relativity.physics import compute_kinematic_factors
from relativity.visualization import (
    VisualizationConfig, describe_regime, format_velocity,
    render_lorentz_curve, render_ruler_matplotlib, render_stopwatches_matplotlib
)

logger = logging.getLogger("relativity.cli")


def print_factor_table(scale_mode: ScaleMode, n_rows: int = 11):
    """
    Print γ, 1/γ and the clock readings across the slider range.

    Args:
        scale_mode: Velocity scale to tabulate
        n_rows: Number of evenly spaced slider positions
    """
    print("=" * 72)
    print(f"Special Relativity Canvas - {scale_mode.value.title()} Scale")
    print("=" * 72)
    print(f"{'slider':>8} {'velocity':>12} {'gamma':>12} {'1/gamma':>10} "
          f"{'10 m ruler':>11} {'1 s moving':>11}")

    controls = np.linspace(0.0, 1.0, n_rows)
    for control, velocity in zip(controls, map_control_inputs(controls, scale_mode)):
        factors = compute_kinematic_factors(velocity)
        print(f"{control:8.2f} {format_velocity(velocity, scale_mode):>12} "
              f"{factors.gamma:12.4f} {factors.length_contraction:10.4f} "
              f"{10.0 * factors.length_contraction:10.3f}m "
              f"{factors.time_dilation:10.3f}s")

        note = describe_regime(velocity, scale_mode)
        if note:
            print(f"{'':>8} ({note})")


def run_curve_plot(control: float, scale_mode: ScaleMode):
    """Plot the Lorentz factor curve and mark the selected velocity."""
    sim = create_simulation(control_input=control, scale_mode=scale_mode)
    velocity = sim.velocity()

    print(f"Plotting Lorentz factor curve (v = {format_velocity(velocity, scale_mode)})")
    fig = render_lorentz_curve(current_velocity=velocity)

    plt.tight_layout()
    fig.savefig('lorentz_factor.png', dpi=150)
    print("Plot saved to lorentz_factor.png")
    plt.show()


def run_live_stopwatch(control: float, scale_mode: ScaleMode, duration: float = 0.0):
    """
    Open a window with the ruler, the dual stopwatch and live controls.

    Stopwatch ticks come from matplotlib GUI timers; the figure is redrawn
    by a separate FuncAnimation.

    Args:
        control: Initial slider position
        scale_mode: Initial velocity scale
        duration: Close the window after this many stationary seconds (0 = never)
    """
    print("=" * 60)
    print("Special Relativity Canvas - Live Stopwatch")
    print("=" * 60)

    fig = plt.figure(figsize=(9, 9))
    ax_ruler = fig.add_axes([0.05, 0.58, 0.9, 0.38])
    ax_clock = fig.add_axes([0.05, 0.20, 0.9, 0.36])
    ax_slider = fig.add_axes([0.15, 0.12, 0.7, 0.03])
    ax_start = fig.add_axes([0.15, 0.03, 0.2, 0.06])
    ax_reset = fig.add_axes([0.40, 0.03, 0.2, 0.06])
    ax_scale = fig.add_axes([0.65, 0.03, 0.2, 0.06])

    scheduler = MatplotlibFrameScheduler(fig, interval_ms=16)
    sim = create_simulation(control_input=control, scale_mode=scale_mode, scheduler=scheduler)
    vis_config = VisualizationConfig()

    slider = Slider(ax_slider, 'Velocity', 0.0, 1.0, valinit=sim.control_input, valstep=0.001)
    start_button = Button(ax_start, 'Start')
    reset_button = Button(ax_reset, 'Reset')
    scale_button = Button(ax_scale, 'Log scale')

    def on_slider(value):
        sim.set_control_input(value)

    def on_start(_event):
        running = sim.toggle_running()
        start_button.label.set_text('Pause' if running else 'Start')

    def on_reset(_event):
        sim.reset()
        start_button.label.set_text('Start')

    def on_scale(_event):
        mode = sim.toggle_scale_mode()
        scale_button.label.set_text('Linear scale' if mode is ScaleMode.LOGARITHMIC else 'Log scale')
        slider.set_val(sim.control_input)

    slider.on_changed(on_slider)
    start_button.on_clicked(on_start)
    reset_button.on_clicked(on_reset)
    scale_button.on_clicked(on_scale)

    def update(_frame):
        snapshot = sim.snapshot()
        render_ruler_matplotlib(snapshot, vis_config, ax=ax_ruler)
        render_stopwatches_matplotlib(snapshot, vis_config, ax=ax_clock)
        slider.valtext.set_text(format_velocity(snapshot.velocity, snapshot.scale_mode))

        if duration > 0 and snapshot.elapsed_stationary_seconds >= duration:
            sim.pause()
            plt.close(fig)
        return ax_ruler, ax_clock

    ani = FuncAnimation(fig, update, interval=33, blit=False, cache_frame_data=False)

    def on_close(_event):
        sim.close()
        snapshot = sim.snapshot()
        print(f"  Stationary clock: {snapshot.elapsed_stationary_seconds:.2f}s")
        print(f"  Moving clock:     {snapshot.moving_observer_seconds:.2f}s")

    fig.canvas.mpl_connect('close_event', on_close)

    if duration > 0:
        sim.start()
        start_button.label.set_text('Pause')

    plt.show()
    return ani


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Special Relativity Canvas - Length Contraction and Time Dilation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --table                      Print factors across the slider
  python main.py --table --scale logarithmic  Same, near light speed
  python main.py --plot --control 0.8         Plot the Lorentz factor curve
  python main.py --animate                    Open the live stopwatch window
  python main.py --app                        Launch Streamlit app
        """
    )

    parser.add_argument('--table', action='store_true',
                        help='Print kinematic factors across the slider range')
    parser.add_argument('--plot', action='store_true',
                        help='Plot the Lorentz factor curve')
    parser.add_argument('--animate', action='store_true',
                        help='Open the live ruler and stopwatch window')
    parser.add_argument('--app', action='store_true',
                        help='Launch Streamlit web app')
    parser.add_argument('--scale', choices=[m.value for m in ScaleMode],
                        default=ScaleMode.LINEAR.value,
                        help='Velocity scale (default: linear)')
    parser.add_argument('--control', '-c', type=float, default=0.5,
                        help='Slider position in [0, 1] (default: 0.5)')
    parser.add_argument('--duration', '-d', type=float, default=0.0,
                        help='Auto-run the stopwatch for this many seconds (default: off)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    scale_mode = ScaleMode(args.scale)
    logger.debug("CLI arguments: %s", vars(args))

    if args.table:
        print_factor_table(scale_mode)
    elif args.plot:
        run_curve_plot(args.control, scale_mode)
    elif args.animate:
        run_live_stopwatch(args.control, scale_mode, args.duration)
    elif args.app:
        import subprocess
        print("Launching Streamlit app...")
        subprocess.run(['streamlit', 'run', 'app.py'])
    else:
        parser.print_help()
        print("\nNo action specified. Run with --table, --plot, --animate, or --app")


if __name__ == "__main__":
    main()

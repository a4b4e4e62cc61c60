#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Special Relativity Canvas - Interactive Streamlit Application
================================================================================

Project:        Special Relativity Canvas
Module:         app.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This is the main Streamlit application for the Special Relativity Canvas.
Users can:
- Set the observer velocity on a linear or near-light logarithmic scale
- Watch a moving ruler contract relative to a stationary one
- Run a stationary and a moving stopwatch side by side
- Read off the Lorentz factor and the derived formulas
"""

import io
import logging
import time

import streamlit as st
import matplotlib.pyplot as plt
from PIL import Image

from relativity.clock import ManualFrameScheduler
from relativity.logging_config import setup_logging
from relativity.simulation import RelativitySimulation, SimulationConfig
from relativity.velocity import CONTROL_MIDPOINT, ScaleMode
from relativity.visualization import (
    ViewMode, VisualizationConfig, describe_length_contraction, describe_regime,
    describe_time_dilation, format_velocity, format_velocity_percent, formula_lines,
    render_lorentz_curve, render_view_streamlit
)

logger = logging.getLogger("relativity.app")

# Delay between reruns while the stopwatch runs
FRAME_DELAY = 0.05
DISPLAY_WIDTH = 700


# Page configuration
st.set_page_config(
    page_title="Special Relativity Canvas",
    page_icon="🚀",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
.regime-note {
    font-weight: bold;
    margin-left: 8px;
}
.noticeable {
    color: #2563eb;
}
.extreme {
    color: #dc2626;
}
.formula {
    font-family: monospace;
    font-size: 18px;
    text-align: center;
}
</style>
""", unsafe_allow_html=True)


def initialize_session_state():
    """Initialize Streamlit session state variables."""
    if 'scheduler' not in st.session_state:
        st.session_state.scheduler = ManualFrameScheduler()
    if 'simulation' not in st.session_state:
        st.session_state.simulation = RelativitySimulation(
            SimulationConfig(), scheduler=st.session_state.scheduler
        )
    if 'view_mode' not in st.session_state:
        st.session_state.view_mode = ViewMode.LENGTH
    if 'control_slider' not in st.session_state:
        st.session_state.control_slider = CONTROL_MIDPOINT
    if 'vis_config' not in st.session_state:
        st.session_state.vis_config = VisualizationConfig()


def on_slider_change():
    st.session_state.simulation.set_control_input(st.session_state.control_slider)


def on_scale_toggle():
    sim: RelativitySimulation = st.session_state.simulation
    mode = ScaleMode.LOGARITHMIC if st.session_state.log_scale else ScaleMode.LINEAR
    sim.set_scale_mode(mode)
    st.session_state.control_slider = sim.control_input


def on_start_pause():
    st.session_state.simulation.toggle_running()


def on_reset():
    st.session_state.simulation.reset()


def render_sidebar():
    """Render the sidebar with background and instructions."""
    st.sidebar.title("🚀 Special Relativity Canvas")

    st.sidebar.markdown("""
    ---
    ### About This Simulation

    An observer moving at velocity **v** relative to you sees the world
    through the **Lorentz factor**:

    $$\\gamma = \\frac{1}{\\sqrt{1 - v^2/c^2}}$$

    - 📏 **Length contraction**: moving rulers shrink to $L_0/\\gamma$
    - ⏱️ **Time dilation**: moving clocks tick slower by a factor $\\gamma$

    ---
    ### How to use this simulation
    1. Use the slider to adjust the velocity of the moving observer
       (as a fraction of the speed of light)
    2. Toggle between **Linear** and **Logarithmic** scales to explore
       different velocity ranges
    3. Switch between **Length Contraction** and **Time Dilation** views
    4. In Time Dilation view, use **Start/Pause** and **Reset** to control
       the stopwatches
    5. Notice how relativistic effects become more prominent above 0.6c

    ---
    """)

    st.sidebar.checkbox("Show Lorentz factor curve", value=False, key="show_curve")


def render_velocity_controls(sim: RelativitySimulation):
    """Render the velocity slider, scale toggle and readouts."""
    mode = sim.scale_mode
    velocity = sim.velocity()
    factors = sim.kinematic_factors()

    head_col, toggle_col = st.columns([3, 1])
    with head_col:
        st.subheader(f"Observer Velocity: {format_velocity_percent(velocity, mode)}% of c")
    with toggle_col:
        st.toggle(
            "Logarithmic scale",
            value=mode is ScaleMode.LOGARITHMIC,
            key="log_scale",
            on_change=on_scale_toggle
        )

    st.slider(
        "Velocity control",
        min_value=0.0, max_value=1.0, step=0.001,
        key="control_slider",
        on_change=on_slider_change,
        label_visibility="collapsed"
    )

    low_label, high_label = sim.scale.labels
    low_col, high_col = st.columns(2)
    low_col.markdown(low_label)
    high_col.markdown(f"<div style='text-align: right'>{high_label}</div>",
                      unsafe_allow_html=True)

    note = describe_regime(velocity, mode)
    note_html = ""
    if note:
        css_class = "extreme" if "Extreme" in note else "noticeable"
        note_html = f"<span class='regime-note {css_class}'>({note})</span>"

    st.markdown(
        f"<div style='text-align: center'>Current velocity: "
        f"{format_velocity(velocity, mode)}{note_html}<br>"
        f"Lorentz factor (γ): {factors.gamma:.2f}</div>",
        unsafe_allow_html=True
    )


def render_view_toggle():
    """Render the Length Contraction / Time Dilation switch."""
    labels = {ViewMode.LENGTH: "Length Contraction", ViewMode.TIME: "Time Dilation"}
    choice = st.radio(
        "View",
        list(labels.values()),
        index=list(labels).index(st.session_state.view_mode),
        horizontal=True,
        label_visibility="collapsed"
    )
    st.session_state.view_mode = next(m for m, label in labels.items() if label == choice)


def render_demo(sim: RelativitySimulation):
    """Render the selected demo view."""
    snapshot = sim.snapshot()
    view_mode = st.session_state.view_mode

    img_bytes = render_view_streamlit(snapshot, view_mode, st.session_state.vis_config)
    pil_image = Image.open(io.BytesIO(img_bytes))
    st.image(pil_image, width=DISPLAY_WIDTH)

    if view_mode is ViewMode.LENGTH:
        st.caption(describe_length_contraction(snapshot))
        return

    btn_col1, btn_col2, _ = st.columns([1, 1, 4])
    with btn_col1:
        st.button(
            "⏸️ Pause" if snapshot.running else "▶️ Start",
            on_click=on_start_pause,
            use_container_width=True,
            key="start_pause_btn"
        )
    with btn_col2:
        st.button("🔄 Reset", on_click=on_reset, use_container_width=True, key="reset_btn")

    st.caption(describe_time_dilation(snapshot))


def render_formulas(sim: RelativitySimulation):
    """Render the formula panel with live values."""
    st.markdown("### Special Relativity Formulas")
    titles = ["Lorentz Factor (γ):", "Length Contraction:", "Time Dilation:"]
    for col, title, line in zip(st.columns(3), titles, formula_lines(sim.kinematic_factors())):
        with col:
            st.markdown(title)
            st.markdown(f"<p class='formula'>{line}</p>", unsafe_allow_html=True)


def render_curve(sim: RelativitySimulation):
    """Render the γ(v) curve with the current velocity marked."""
    fig = render_lorentz_curve(current_velocity=sim.velocity())
    plt.tight_layout()
    st.pyplot(fig)
    plt.close(fig)


def main():
    """Main application entry point."""
    setup_logging()
    initialize_session_state()

    sim: RelativitySimulation = st.session_state.simulation

    # One frame per rerun; a no-op unless the stopwatch requested one
    fired = st.session_state.scheduler.advance(time.monotonic())
    logger.debug("Rerun: %d frame(s) fired, stationary clock at %.3f s",
                 fired, sim.elapsed_stationary_seconds())

    render_sidebar()
    st.title("Special Relativity Simulation")
    render_view_toggle()
    render_velocity_controls(sim)
    st.markdown("---")
    render_demo(sim)
    st.markdown("---")
    render_formulas(sim)

    if st.session_state.get("show_curve"):
        render_curve(sim)

    # Auto-refresh while the stopwatch runs
    if sim.is_running():
        time.sleep(FRAME_DELAY)
        st.rerun()


if __name__ == "__main__":
    main()

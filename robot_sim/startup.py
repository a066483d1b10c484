"""Startup panel for choosing piston force, mass and robot count."""

from __future__ import annotations

from dataclasses import dataclass, replace

import matplotlib.pyplot as plt
from matplotlib.widgets import Button, Slider

from .config import SimulationConfig
from .constants import MASS_GRAMS_RANGE, MAX_SLIDER_ROBOTS, PISTON_OUTPUT_RANGE


@dataclass
class _StartupSelection:
    piston_output: float
    mass_grams: float
    num_robots: int
    confirmed: bool = False


def format_piston_output(value: float) -> str:
    return f"{value / 100.0:.2f}"


def prompt_runtime_inputs(config: SimulationConfig) -> SimulationConfig:
    """Return ``config`` updated with the values chosen on the sliders.

    Closing the window without pressing "Start" keeps the slider values.
    """

    selection = _StartupSelection(
        piston_output=config.piston_output,
        mass_grams=config.mass_grams,
        num_robots=min(config.num_robots, MAX_SLIDER_ROBOTS),
    )

    plt.ion()
    fig = plt.figure(figsize=(6, 4))
    fig.subplots_adjust(bottom=0.32)
    fig.suptitle("Startparameter wählen")

    piston_ax = fig.add_axes([0.3, 0.75, 0.5, 0.06])
    piston_slider = Slider(
        piston_ax,
        "Kolbenkraft",
        PISTON_OUTPUT_RANGE[0],
        PISTON_OUTPUT_RANGE[1],
        valinit=selection.piston_output,
        valstep=1,
    )
    piston_slider.valtext.set_text(format_piston_output(selection.piston_output))

    mass_ax = fig.add_axes([0.3, 0.6, 0.5, 0.06])
    mass_slider = Slider(
        mass_ax,
        "Masse (g)",
        MASS_GRAMS_RANGE[0],
        MASS_GRAMS_RANGE[1],
        valinit=selection.mass_grams,
        valstep=1,
    )

    robots_ax = fig.add_axes([0.3, 0.45, 0.5, 0.06])
    robots_slider = Slider(
        robots_ax,
        "Robots",
        1,
        MAX_SLIDER_ROBOTS,
        valinit=selection.num_robots,
        valstep=1,
    )

    def handle_piston(value: float) -> None:
        selection.piston_output = float(value)
        piston_slider.valtext.set_text(format_piston_output(value))
        fig.canvas.draw_idle()

    def handle_mass(value: float) -> None:
        selection.mass_grams = float(value)

    def handle_robots(value: float) -> None:
        selection.num_robots = int(value)

    piston_slider.on_changed(handle_piston)
    mass_slider.on_changed(handle_mass)
    robots_slider.on_changed(handle_robots)

    start_ax = fig.add_axes([0.3, 0.1, 0.4, 0.1])
    start_button = Button(start_ax, "Start")

    def handle_start(_: object) -> None:
        selection.confirmed = True
        plt.close(fig)

    start_button.on_clicked(handle_start)

    plt.show(block=False)
    while not selection.confirmed and plt.fignum_exists(fig.number):
        plt.pause(0.05)

    plt.ioff()
    if plt.fignum_exists(fig.number):
        plt.close(fig)

    return replace(
        config,
        piston_output=selection.piston_output,
        mass_grams=selection.mass_grams,
        num_robots=selection.num_robots,
    )


__all__ = ["format_piston_output", "prompt_runtime_inputs"]

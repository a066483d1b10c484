"""Headless frame statistics with optional Matplotlib charts."""

from __future__ import annotations

from typing import List

import matplotlib.pyplot as plt

from .models import FrameReport, HeadlessSummary, Phase
from .simulation import SimulationContext, run_frames


def summarize_reports(reports: List[FrameReport], robot_count: int) -> HeadlessSummary:
    summary = HeadlessSummary(frames=len(reports), robot_count=robot_count)
    for report in reports:
        summary.collision_counts.append(len(report.collisions.pairs))
        summary.boundary_counts.append(len(report.collisions.boundary_hits))
        summary.tipping_counts.append(report.phase_counts.get(Phase.TIPPING, 0))
        summary.landings += report.phase_counts.get(Phase.LANDED, 0)
    return summary


def plot_summary(summary: HeadlessSummary) -> None:
    frames = list(range(summary.frames))
    fig, (ax_collisions, ax_boundary, ax_tipping) = plt.subplots(3, 1, figsize=(7, 9), sharex=True)
    ax_collisions.plot(frames, summary.collision_counts, color="tab:orange", label="Kollisionen")
    ax_collisions.set_ylabel("Kollisionen pro Frame")
    ax_boundary.plot(frames, summary.boundary_counts, color="tab:blue", label="Feldgrenze")
    ax_boundary.set_ylabel("Grenzverletzungen")
    ax_tipping.plot(frames, summary.tipping_counts, color="tab:green", label="Kippend")
    ax_tipping.set_ylabel("Kippende Robots")
    ax_tipping.set_xlabel("Frame")
    for ax in (ax_collisions, ax_boundary, ax_tipping):
        ax.grid(True, alpha=0.3)
        ax.legend(loc="upper right")
    fig.suptitle(
        f"{summary.robot_count} Robots – {summary.total_collisions} Kollisionen, "
        f"{summary.landings} Landungen"
    )
    fig.tight_layout()
    plt.show()


def run_headless(context: SimulationContext, frames: int, plot: bool = False) -> HeadlessSummary:
    """Advance ``frames`` frames without a display and collect statistics."""

    reports = run_frames(context, frames)
    summary = summarize_reports(reports, len(context.robots))
    if plot:
        plot_summary(summary)
    return summary


__all__ = ["plot_summary", "run_headless", "summarize_reports"]

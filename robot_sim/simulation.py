"""High-level orchestration for running the robot simulation."""

from __future__ import annotations

import logging
import random
from collections import Counter
from typing import Callable, List, Optional

from .collisions import detect_collisions
from .config import SimulationConfig
from .models import FrameReport, Phase, Robot, RuntimeInputs
from .physics import move
from .placement import initialize_robots

logger = logging.getLogger(__name__)


class SimulationContext:
    """Own the robots and runtime inputs driven by the frame loop."""

    def __init__(
        self,
        robots: List[Robot],
        inputs: RuntimeInputs,
        rng: Optional[random.Random] = None,
        num_robots: Optional[int] = None,
    ) -> None:
        self.robots = robots
        self.inputs = inputs
        self.rng = rng or random.Random()
        self.num_robots = num_robots if num_robots is not None else len(robots)
        self.frame = 0
        self.landings = 0

    @classmethod
    def create(cls, config: SimulationConfig) -> "SimulationContext":
        rng = random.Random(config.seed)
        robots = initialize_robots(config.num_robots, rng)
        logger.info("Placed %d robots (seed=%s)", len(robots), config.seed)
        return cls(robots, config.runtime_inputs(), rng, config.num_robots)

    def set_inputs(
        self, piston_force: Optional[float] = None, mass: Optional[float] = None
    ) -> RuntimeInputs:
        self.inputs = RuntimeInputs(
            piston_force=self.inputs.piston_force if piston_force is None else piston_force,
            mass=self.inputs.mass if mass is None else mass,
        )
        return self.inputs

    def reset(self) -> None:
        """Discard all robots and place a fresh population."""

        self.robots = initialize_robots(self.num_robots, self.rng)
        self.frame = 0
        self.landings = 0
        logger.info("Simulation reset with %d robots", len(self.robots))

    def dispatch_directions(self) -> Counter:
        phases: Counter = Counter()
        for robot in self.robots:
            phase = move(robot, robot.direction, self.inputs, self.rng)
            phases[phase] += 1
        self.landings += phases[Phase.LANDED]
        return phases

    def step(self) -> FrameReport:
        """Run one frame: collision response first, then movement."""

        collisions = detect_collisions(self.robots)
        phases = self.dispatch_directions()
        report = FrameReport(frame=self.frame, collisions=collisions, phase_counts=dict(phases))
        self.frame += 1
        return report


def run_frames(
    context: SimulationContext,
    frames: int,
    on_frame: Optional[Callable[[FrameReport], None]] = None,
) -> List[FrameReport]:
    reports: List[FrameReport] = []
    for _ in range(frames):
        report = context.step()
        reports.append(report)
        if on_frame is not None:
            on_frame(report)
    return reports


def run_simulation(config: SimulationConfig) -> SimulationContext:
    if config.show_controls:
        from .startup import prompt_runtime_inputs

        config = prompt_runtime_inputs(config)

    context = SimulationContext.create(config)

    if config.headless:
        from .headless import run_headless

        summary = run_headless(context, config.frames, plot=config.plot)
        print(
            f"{summary.frames} Frames, {summary.robot_count} Robots: "
            f"{summary.total_collisions} Kollisionen, {summary.landings} Landungen",
            flush=True,
        )
        return context

    import pygame

    from .viewers import run_interactive_viewer

    pygame.init()
    try:
        run_interactive_viewer(context)
    finally:
        pygame.mouse.set_visible(True)
        pygame.quit()
    print(f"Simulation nach {context.frame} Frames beendet", flush=True)
    return context


__all__ = ["SimulationContext", "run_frames", "run_simulation"]

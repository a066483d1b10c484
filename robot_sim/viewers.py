"""Interactive Pygame viewer driving the robot frame loop."""

from __future__ import annotations

import math

import numpy as np
import pygame

from .constants import FRAME_RATE, MASS_GRAMS_RANGE, PISTON_OUTPUT_RANGE
from .render import CameraState, draw_scene
from .simulation import SimulationContext


def _update_camera_from_input(camera: CameraState, dt_ms: int) -> None:
    keys = pygame.key.get_pressed()
    move_direction = np.zeros(3)
    if keys[pygame.K_w]:
        move_direction += camera.forward()
    if keys[pygame.K_s]:
        move_direction -= camera.forward()
    if keys[pygame.K_d]:
        move_direction += camera.right()
    if keys[pygame.K_a]:
        move_direction -= camera.right()
    if keys[pygame.K_SPACE]:
        move_direction += camera.up()
    if keys[pygame.K_LCTRL] or keys[pygame.K_f]:
        move_direction -= camera.up()

    if np.linalg.norm(move_direction) > 1e-6:
        move_direction = move_direction / np.linalg.norm(move_direction)
        speed_multiplier = 2.5 if keys[pygame.K_LSHIFT] or keys[pygame.K_RSHIFT] else 1.0
        camera.position += move_direction * camera.move_speed * speed_multiplier * (dt_ms / 1000.0)


def _nudge_inputs(context: SimulationContext, key: int) -> None:
    """Step the piston output or mass slider by one unit."""

    piston_output = round(context.inputs.piston_force * 100.0)
    mass_grams = round(context.inputs.mass * 1000.0)
    if key == pygame.K_UP:
        piston_output = min(piston_output + 1, PISTON_OUTPUT_RANGE[1])
    elif key == pygame.K_DOWN:
        piston_output = max(piston_output - 1, PISTON_OUTPUT_RANGE[0])
    elif key == pygame.K_RIGHT:
        mass_grams = min(mass_grams + 1, MASS_GRAMS_RANGE[1])
    elif key == pygame.K_LEFT:
        mass_grams = max(mass_grams - 1, MASS_GRAMS_RANGE[0])
    else:
        return
    context.set_inputs(piston_force=piston_output / 100.0, mass=mass_grams / 1000.0)


def run_interactive_viewer(context: SimulationContext) -> SimulationContext:
    screen = pygame.display.set_mode((960, 720))
    pygame.display.set_caption("Cube Robot Simulation")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas", 20)

    camera = CameraState()
    mouse_rotating = False
    paused = False
    last_caption_update = 0

    running = True
    while running:
        dt_ms = clock.tick(FRAME_RATE)
        render_fps = 1000.0 / dt_ms if dt_ms > 0 else 0.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_p:
                    paused = not paused
                elif event.key == pygame.K_r:
                    context.reset()
                else:
                    _nudge_inputs(context, event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mouse_rotating = True
                pygame.mouse.get_rel()
                pygame.event.set_grab(True)
                pygame.mouse.set_visible(False)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                mouse_rotating = False
                pygame.event.set_grab(False)
                pygame.mouse.set_visible(True)

        if mouse_rotating:
            delta_x, delta_y = pygame.mouse.get_rel()
            camera.yaw += delta_x * camera.mouse_sensitivity
            camera.pitch -= delta_y * camera.mouse_sensitivity
            camera.pitch = max(min(camera.pitch, math.radians(89.0)), math.radians(-89.0))
            camera.yaw = (camera.yaw + math.pi) % (2 * math.pi) - math.pi
        else:
            pygame.mouse.get_rel()

        _update_camera_from_input(camera, dt_ms)

        overlay_status = "PAUSIERT" if paused else "Aktiv"
        draw_scene(
            screen,
            context.robots,
            camera,
            overlay_text=(
                f"Kolbenkraft: {context.inputs.piston_force:.2f} | "
                f"Masse: {context.inputs.mass * 1000.0:.0f} g | "
                f"Robots: {len(context.robots)} | Frame: {context.frame} | "
                f"Status: {overlay_status}"
            ),
            font=font,
        )
        if not paused:
            context.step()

        now_ticks = pygame.time.get_ticks()
        if now_ticks - last_caption_update >= 250:
            pygame.display.set_caption(
                "Cube Robot Simulation - "
                f"Render FPS: {render_fps:5.1f} | "
                f"Landungen: {context.landings} | "
                f"Status: {overlay_status}"
            )
            last_caption_update = now_ticks

    pygame.event.set_grab(False)
    return context


__all__ = ["run_interactive_viewer"]

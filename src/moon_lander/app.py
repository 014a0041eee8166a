"""
Moon Lander - interactive landing game
======================================

Host loop: wires pygame keyboard and window events into the simulation,
runs fixed 60 Hz physics ticks from wall-clock time and renders each frame.

Controls: UP main engine, LEFT/RIGHT side thrusters, R restart after a
landing or crash, ESC quit.
"""
from __future__ import annotations

import argparse
import sys

import numpy as np
import pygame
from pygame.locals import DOUBLEBUF, RESIZABLE

from moon_lander import __version__
from moon_lander.core.config import PHYSICS_CFG, RENDER_CFG, TERRAIN_CFG
from moon_lander.core.logging_utils import RunLogger
from moon_lander.core.model import InputState
from moon_lander.core.simulation import Simulation
from moon_lander.core.timekeeping import FixedStepAccumulator, FrameTimer
from moon_lander.data.profiles import DEFAULT_PROFILE_KEY, PROFILE_DISPLAY_ORDER, get_profile
from moon_lander.render import SceneRenderer

KEY_BINDINGS: dict[int, str] = {
    pygame.K_UP: "thrust",
    pygame.K_LEFT: "rotate_left",
    pygame.K_RIGHT: "rotate_right",
    pygame.K_r: "restart",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="moon-lander", description=__doc__.strip().splitlines()[0])
    parser.add_argument("--profile", choices=PROFILE_DISPLAY_ORDER, default=DEFAULT_PROFILE_KEY)
    parser.add_argument("--seed", type=int, default=None, help="seed for terrain and effects")
    parser.add_argument("--width", type=int, default=RENDER_CFG.width)
    parser.add_argument("--height", type=int, default=RENDER_CFG.height)
    parser.add_argument("--log-runs", action="store_true", help="write CSV telemetry under --log-dir")
    parser.add_argument("--log-dir", default="data/runs")
    return parser.parse_args(argv)


def handle_key(inputs: InputState, event: pygame.event.Event) -> None:
    control = KEY_BINDINGS.get(event.key)
    if control is None:
        return
    inputs.set(control, event.type == pygame.KEYDOWN)


def build_meta(args: argparse.Namespace, size: tuple[int, int]) -> dict:
    profile = get_profile(args.profile)
    return {
        "profile": profile.key,
        "speed_limit": profile.limits.speed_limit,
        "angle_limit": profile.limits.angle_limit,
        "seed": args.seed,
        "viewport": list(size),
        "gravity": PHYSICS_CFG.gravity,
        "thrust": PHYSICS_CFG.thrust,
        "side_thrust": PHYSICS_CFG.side_thrust,
        "burn_rate": PHYSICS_CFG.burn_rate,
        "tick_rate": PHYSICS_CFG.tick_rate,
        "terrain_segments": TERRAIN_CFG.segments,
        "log_strategy": f"every_{PHYSICS_CFG.log_every_ticks}_ticks",
        "code_version": f"Moon Lander v{__version__}",
    }


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    profile = get_profile(args.profile)

    pygame.init()
    pygame.display.set_caption("Moon Lander")
    size = (max(RENDER_CFG.min_window_size[0], args.width), max(RENDER_CFG.min_window_size[1], args.height))
    screen = pygame.display.set_mode(size, RESIZABLE | DOUBLEBUF)
    size = screen.get_size()
    clock = pygame.time.Clock()

    logger: RunLogger | None = None
    if args.log_runs:
        logger = RunLogger(args.log_dir)
        logger.write_meta(build_meta(args, size))
        print(f"Logging run to {logger.run_dir}")

    rng = np.random.default_rng(args.seed)
    sim = Simulation(size[0], size[1], profile, rng=rng, logger=logger)
    renderer = SceneRenderer(size)
    inputs = InputState()
    timer = FrameTimer()
    accumulator = FixedStepAccumulator(step=PHYSICS_CFG.dt, max_substeps=PHYSICS_CFG.max_substeps)

    try:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    handle_key(inputs, event)
                elif event.type == pygame.VIDEORESIZE:
                    new_size = (
                        max(RENDER_CFG.min_window_size[0], event.w),
                        max(RENDER_CFG.min_window_size[1], event.h),
                    )
                    screen = pygame.display.set_mode(new_size, RESIZABLE | DOUBLEBUF)
                    sim.resize(*new_size)
                    renderer.resize(new_size)

            accumulator.accrue(timer.tick())
            for _ in range(accumulator.consume()):
                sim.tick(inputs)

            renderer.draw(screen, sim.snapshot(), sim.telemetry())
            pygame.display.flip()
            clock.tick(RENDER_CFG.target_fps)
    finally:
        if logger is not None:
            logger.close()
        pygame.quit()


def run() -> None:
    try:
        main()
    except KeyboardInterrupt:
        pygame.quit()
        sys.exit(130)


if __name__ == "__main__":
    run()

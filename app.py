"""Application entry point.

Opens the window and drives the simulation from a fixed-rate pygame
clock. ``--frames N`` runs the simulation headless for N ticks (jumping
whenever the blob is grounded) and logs a short summary instead.
"""

from __future__ import annotations

import argparse

import pygame

from blobworld.config import PRESETS, SimConfig
from blobworld.input_router import InputRouter
from blobworld.logger import get_logger
from blobworld.renderer import Renderer
from blobworld.settings import settings
from blobworld.simulation import Simulation
from blobworld.snapshot import SnapshotService

log = get_logger("app")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Blob World")
    parser.add_argument("--preset", choices=sorted(PRESETS), default="default", help="tuning preset")
    parser.add_argument("--seed", type=int, default=None, help="seed for cloud and sparkle randomness")
    parser.add_argument(
        "--frames", type=int, default=None, help="run headless for N frames, jumping whenever grounded, and exit"
    )
    return parser


def build_simulation(preset: str = "default", seed: int | None = None) -> Simulation:
    try:
        config = SimConfig.from_preset(preset)
    except ValueError as e:
        log.error("Invalid configuration:", e)
        raise
    log.info(f"preset={preset}")
    return Simulation(config=config, seed=seed)


def run_headless(sim: Simulation, frames: int) -> dict:
    jumps = apexes = landings = 0
    for _ in range(frames):
        report = sim.update(jump=sim.blob.on_ground)
        jumps += report.jumped
        apexes += report.apex
        landings += report.landed
    summary = {
        "frames": sim.frame,
        "jumps": jumps,
        "apexes": apexes,
        "landings": landings,
        "sparkles": len(sim.particles),
        "blob": (round(sim.blob.pos[0], 2), round(sim.blob.pos[1], 2)),
    }
    log.info("headless run:", summary)
    return summary


def main(argv=None):
    args = build_parser().parse_args(argv)
    sim = build_simulation(args.preset, args.seed)
    if args.frames is not None:
        run_headless(sim, args.frames)
        return

    pygame.init()
    try:
        run_window(sim)
    finally:
        pygame.quit()


def run_window(sim: Simulation) -> None:
    screen = pygame.display.set_mode((int(sim.scene.width), int(sim.scene.height)))
    pygame.display.set_caption(settings.caption)
    clock = pygame.time.Clock()
    router = InputRouter()
    renderer = Renderer(help_text=settings.help_text)

    running = True
    while running:
        # single central event poll
        actions = router.process(pygame.event.get())
        if "quit" in actions:
            running = False
            continue

        move = router.horizontal_intent(pygame.key.get_pressed())
        sim.update(move, jump="jump" in actions)
        renderer.render(SnapshotService.capture(sim), screen)
        pygame.display.flip()
        clock.tick(settings.fps)


if __name__ == "__main__":  # pragma: no cover
    main()

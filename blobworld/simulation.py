"""Simulation context.

One ``Simulation`` owns the blob, the cloud set and the sparkle system and
advances them in a fixed order once per frame:

  1. jump edge (gated on the blob being grounded)
  2. blob input / gravity / apex / integration
  3. blob to cloud contact impulses
  4. blob ground resolution and animation state
  5. clouds drift, wrap and bounce
  6. sparkles move, fade and cull

There is no time step argument: every constant is tuned per frame at a
fixed tick rate.
"""

from __future__ import annotations

from dataclasses import dataclass

from blobworld.clouds import Clouds
from blobworld.config import SceneBounds, SimConfig
from blobworld.entities import Blob
from blobworld.interaction import resolve_cloud_contacts
from blobworld.logger import get_logger
from blobworld.mathutil import PerlinNoise
from blobworld.particle_system import ParticleSystem
from blobworld.rng_service import RNGService
from blobworld.services import ServiceContainer

log = get_logger("simulation")


@dataclass
class FrameReport:
    frame: int
    jumped: bool
    apex: bool
    landed: bool
    contacts: int
    sparkles_removed: int


class Simulation:
    def __init__(
        self,
        config: SimConfig | None = None,
        scene: SceneBounds | None = None,
        seed: int | None = None,
    ):
        self.config = config or SimConfig()
        self.scene = scene or SceneBounds()
        self.rng = RNGService(seed)
        self.frame = 0

        self.particles = ParticleSystem(config=self.config, rng=self.rng)
        self.services = ServiceContainer(particles=self.particles)
        self.clouds = Clouds(self.scene, self.config, self.rng)
        self.blob = Blob(self.scene, self.config, services=self.services, noise=PerlinNoise(self.rng))
        log.info(
            f"simulation ready: scene {self.scene.width}x{self.scene.height} floor={self.scene.floor_y}, "
            f"{len(self.clouds)} clouds, seed={seed!r}"
        )

    def update(self, move: int = 0, jump: bool = False) -> FrameReport:
        blob = self.blob
        jumped = blob.jump() if jump else False
        apex = blob.begin_update(move)
        contacts = resolve_cloud_contacts(blob, self.clouds)
        landed = blob.finish_update()
        self.clouds.update()
        removed = self.particles.update()

        self.frame += 1
        return FrameReport(self.frame, jumped, apex, landed, contacts, removed)


__all__ = ["Simulation", "FrameReport"]

"""Drifting clouds.

A fixed set of soft bodies that drift left, can be shoved by the blob and
slowly return to their calm drift. A cloud leaving past the left edge is
reused on the right at a fresh height.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from blobworld.config import SceneBounds, SimConfig
from blobworld.constants import (
    CLOUD_BOUNCE,
    CLOUD_DRIFT_FORCE,
    CLOUD_FLOOR_MARGIN,
    CLOUD_MIN_Y,
    CLOUD_SPAWN_FLOOR_MARGIN,
    CLOUD_SPAWN_MIN_Y,
)
from blobworld.logger import get_logger
from blobworld.mathutil import lerp
from blobworld.rng_service import RNGService

log = get_logger("clouds")


@dataclass
class Cloud:
    pos: List[float]
    velocity: List[float]
    size: float

    def relax(self, drift_speed: float, damping: float) -> None:
        self.velocity[0] = lerp(self.velocity[0], -drift_speed, CLOUD_DRIFT_FORCE)
        self.velocity[1] = lerp(self.velocity[1], 0.0, CLOUD_DRIFT_FORCE)
        self.velocity[0] *= damping
        self.velocity[1] *= damping

    def move(self) -> None:
        self.pos[0] += self.velocity[0]
        self.pos[1] += self.velocity[1]


class Clouds:
    def __init__(self, scene: SceneBounds, config: SimConfig | None = None, rng: RNGService | None = None):
        self.scene = scene
        self.config = config or SimConfig()
        self.rng = rng or RNGService.get()
        low, high = self.vertical_bounds
        band_low, band_high = self.spawn_band
        if not low <= band_low <= band_high <= high:
            raise ValueError(
                f"scene floor {scene.floor_y} leaves no room for clouds "
                f"(spawn band {band_low}..{band_high}, bounds {low}..{high})"
            )
        self.clouds: List[Cloud] = [self._spawn() for _ in range(self.config.cloud_count)]

    @property
    def vertical_bounds(self) -> Tuple[float, float]:
        return CLOUD_MIN_Y, self.scene.floor_y - CLOUD_FLOOR_MARGIN

    @property
    def spawn_band(self) -> Tuple[float, float]:
        return CLOUD_SPAWN_MIN_Y, self.scene.floor_y - CLOUD_SPAWN_FLOOR_MARGIN

    def __len__(self) -> int:
        return len(self.clouds)

    def __iter__(self) -> Iterator[Cloud]:
        return iter(self.clouds)

    def _spawn(self) -> Cloud:
        return Cloud(
            pos=[self.rng.uniform(0, self.scene.width), self.rng.in_range(self.spawn_band)],
            velocity=[-self.config.cloud_speed, 0.0],
            size=self.rng.in_range(self.config.cloud_size_range),
        )

    def wrap(self, cloud: Cloud) -> None:
        cloud.pos[0] = self.scene.width + cloud.size
        cloud.pos[1] = self.rng.in_range(self.spawn_band)
        cloud.velocity[0] = -self.config.cloud_speed
        cloud.velocity[1] = 0.0
        log.debug(f"cloud wrapped to y={cloud.pos[1]:.1f}")

    def bound(self, cloud: Cloud) -> None:
        top, bottom = self.vertical_bounds
        if cloud.pos[1] < top:
            cloud.pos[1] = top
            cloud.velocity[1] *= CLOUD_BOUNCE
        if cloud.pos[1] > bottom:
            cloud.pos[1] = bottom
            cloud.velocity[1] *= CLOUD_BOUNCE

    def update(self) -> None:
        for cloud in self.clouds:
            cloud.relax(self.config.cloud_speed, self.config.cloud_damping)
            cloud.move()
            if cloud.pos[0] + cloud.size < 0:
                self.wrap(cloud)
            self.bound(cloud)


__all__ = ["Cloud", "Clouds"]

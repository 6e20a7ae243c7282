"""Sparkle particle system.

Owns every live sparkle. ``emit`` spawns a radial burst (the blob calls
it at the top of a jump); ``update`` moves, pulls down and fades each
sparkle and drops the spent ones in the same tick.

Culling builds a fresh list of survivors instead of removing while
iterating, so no neighbour is skipped or processed twice.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from blobworld.config import SimConfig
from blobworld.constants import SPARKLE_GRAVITY
from blobworld.logger import get_logger
from blobworld.rng_service import RNGService

log = get_logger("particles")


@dataclass
class Sparkle:
    pos: List[float]
    velocity: List[float]
    size: float
    fade: float
    life: float = 1.0

    def update(self) -> bool:
        """Advance one tick. Returns True once the sparkle is spent."""
        self.pos[0] += self.velocity[0]
        self.pos[1] += self.velocity[1]
        self.velocity[1] += SPARKLE_GRAVITY
        self.life -= self.fade
        return self.life <= 0

    @property
    def alpha(self) -> int:
        return int(max(0.0, min(1.0, self.life)) * 255)

    @property
    def draw_size(self) -> float:
        return self.size * self.life


@dataclass
class ParticleSystem:
    config: SimConfig = field(default_factory=SimConfig)
    rng: RNGService = field(default_factory=RNGService.get)
    sparkles: List[Sparkle] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.sparkles)

    def __iter__(self) -> Iterator[Sparkle]:
        return iter(self.sparkles)

    def emit(self, origin: Tuple[float, float]) -> List[Sparkle]:
        count = self.config.sparkle_count
        burst = []
        for i in range(count):
            angle = i / count * math.tau
            speed = self.rng.in_range(self.config.sparkle_speed_range)
            burst.append(
                Sparkle(
                    pos=[origin[0], origin[1]],
                    velocity=[math.cos(angle) * speed, math.sin(angle) * speed],
                    size=self.rng.in_range(self.config.sparkle_size_range),
                    fade=self.rng.in_range(self.config.sparkle_fade_range),
                )
            )
        self.sparkles.extend(burst)
        log.debug(f"sparkle burst at ({origin[0]:.1f}, {origin[1]:.1f}); {len(self.sparkles)} live")
        return burst

    def update(self) -> int:
        """Advance all sparkles; returns how many were culled this tick."""
        survivors = [s for s in self.sparkles if not s.update()]
        removed = len(self.sparkles) - len(survivors)
        self.sparkles = survivors
        return removed


__all__ = ["Sparkle", "ParticleSystem"]

"""Service interfaces handed to entities.

The blob depends on a narrow ``ParticlePort`` instead of the whole
simulation, so tests can hand it a recorder and a blob can run with no
particle system at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple


class ParticlePort(Protocol):
    def emit(self, origin: Tuple[float, float]): ...


@dataclass
class ServiceContainer:
    particles: ParticlePort | None = None

    def emit_sparkles(self, origin: Tuple[float, float]) -> None:
        if self.particles is not None:
            self.particles.emit(origin)


__all__ = ["ParticlePort", "ServiceContainer"]

import random
from typing import Tuple

from blobworld.logger import get_logger

log = get_logger("rng")


class RNGService:
    """Seedable random source.

    Each simulation owns its own instance so two simulations built with the
    same seed evolve identically. ``get()`` keeps a process default for
    components built outside a simulation.
    """

    _instance: "RNGService | None" = None

    def __init__(self, seed: int | None = None):
        self._generator = random.Random(seed)
        log.debug(f"RNG initialized with seed: {seed!r}")

    @classmethod
    def get(cls) -> "RNGService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def uniform(self, a: float, b: float) -> float:
        """Return a random floating point number N such that a <= N <= b for a <= b."""
        return self._generator.uniform(a, b)

    def in_range(self, bounds: Tuple[float, float]) -> float:
        """Uniform sample from a ``(low, high)`` pair."""
        return self.uniform(bounds[0], bounds[1])


__all__ = ["RNGService"]

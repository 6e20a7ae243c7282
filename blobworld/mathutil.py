"""Scalar helpers and coherent noise.

``lerp``/``clamp``/``remap`` are the interpolation primitives the update
code is written against. ``PerlinNoise`` wraps ``noise.pnoise3`` layered
into octaves and normalized to [0, 1], used for the blob's silhouette
wobble.
"""

from __future__ import annotations

from noise import pnoise3

from blobworld.rng_service import RNGService

# pnoise3 hashes ``base`` into a 256-entry permutation
NOISE_BASES = 256


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def remap(value: float, in_low: float, in_high: float, out_low: float, out_high: float) -> float:
    """Linearly map ``value`` from one range onto another (no clamping)."""
    if in_high == in_low:
        return out_low
    return out_low + (value - in_low) * (out_high - out_low) / (in_high - in_low)


class PerlinNoise:
    def __init__(self, rng: RNGService | None = None, octaves: int = 4, falloff: float = 0.5):
        if octaves < 1:
            raise ValueError(f"octaves must be at least 1, got {octaves}")
        rng = rng or RNGService.get()
        self.base = int(rng.uniform(0, NOISE_BASES)) % NOISE_BASES
        self.octaves = octaves
        self.falloff = falloff

    def __call__(self, x: float, y: float = 0.0, z: float = 0.0) -> float:
        # pnoise3 is roughly [-1, 1]
        n = pnoise3(x, y, z, octaves=self.octaves, persistence=self.falloff, base=self.base)
        return clamp((n + 1) * 0.5, 0.0, 1.0)


__all__ = ["lerp", "clamp", "remap", "PerlinNoise"]

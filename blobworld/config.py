"""Simulation configuration.

``SimConfig`` is the named tuning set the simulation core takes as an
explicit input. Values are fixed once a simulation is built; presets cover
the classic tuning tweaks (slippery floor, heavier feel) without editing
code.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Dict, Tuple

from blobworld import constants as C

Range = Tuple[float, float]


def _check_range(name: str, value: Range) -> None:
    low, high = value
    if low > high:
        raise ValueError(f"{name}: low bound {low} is greater than high bound {high}")


@dataclass(frozen=True)
class SceneBounds:
    width: float = C.SCENE_WIDTH
    height: float = C.SCENE_HEIGHT
    floor_y: float = C.SCENE_HEIGHT - C.FLOOR_OFFSET

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"scene size must be positive, got {self.width}x{self.height}")
        if not 0 < self.floor_y <= self.height:
            raise ValueError(f"floor_y {self.floor_y} lies outside the scene (height {self.height})")
        blob_span = 2 * C.BLOB_RADIUS
        if self.width < blob_span or self.floor_y < blob_span:
            raise ValueError(
                f"scene {self.width}x{self.floor_y} (width x floor) cannot hold a blob {blob_span} across"
            )

    @classmethod
    def for_size(cls, width: float, height: float) -> "SceneBounds":
        return cls(width=width, height=height, floor_y=height - C.FLOOR_OFFSET)


@dataclass(frozen=True)
class SimConfig:
    accel: float = C.ACCEL
    max_run: float = C.MAX_RUN
    gravity: float = C.GRAVITY
    jump_v: float = C.JUMP_V
    friction_ground: float = C.FRICTION_GROUND
    friction_air: float = C.FRICTION_AIR
    landing_ease_speed: float = C.LANDING_EASE_SPEED
    cloud_speed: float = C.CLOUD_SPEED
    cloud_damping: float = C.CLOUD_DAMPING
    cloud_count: int = C.CLOUD_COUNT
    cloud_size_range: Range = C.CLOUD_SIZE_RANGE
    sparkle_count: int = C.SPARKLE_COUNT
    sparkle_fade_range: Range = C.SPARKLE_FADE_RANGE
    sparkle_speed_range: Range = C.SPARKLE_SPEED_RANGE
    sparkle_size_range: Range = C.SPARKLE_SIZE_RANGE

    def __post_init__(self):
        for name in ("cloud_size_range", "sparkle_fade_range", "sparkle_speed_range", "sparkle_size_range"):
            _check_range(name, getattr(self, name))
        if self.sparkle_count < 1:
            raise ValueError(f"sparkle_count must be at least 1, got {self.sparkle_count}")
        if self.cloud_count < 0:
            raise ValueError(f"cloud_count cannot be negative, got {self.cloud_count}")
        if self.max_run <= 0:
            raise ValueError(f"max_run must be positive, got {self.max_run}")
        if self.sparkle_fade_range[0] <= 0:
            # a sparkle that never fades would never be culled
            raise ValueError(f"sparkle_fade_range must be positive, got {self.sparkle_fade_range}")
        if self.cloud_size_range[0] <= 0:
            raise ValueError(f"cloud_size_range must be positive, got {self.cloud_size_range}")
        for name in ("friction_ground", "friction_air", "cloud_damping", "landing_ease_speed"):
            value = getattr(self, name)
            if not 0 < value <= 1:
                raise ValueError(f"{name} must be in (0, 1], got {value}")

    @classmethod
    def option_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def with_overrides(self, **overrides) -> "SimConfig":
        unknown = sorted(set(overrides) - set(self.option_names()))
        if unknown:
            raise ValueError(f"unknown tuning option(s): {', '.join(unknown)}")
        return replace(self, **overrides)

    @classmethod
    def from_preset(cls, name: str) -> "SimConfig":
        try:
            overrides = PRESETS[name]
        except KeyError:
            raise ValueError(f"unknown preset {name!r}; choose from {', '.join(sorted(PRESETS))}") from None
        return cls().with_overrides(**overrides)


# Quick tuning notes, kept as named presets
PRESETS: Dict[str, Dict[str, float]] = {
    "default": {},
    "slippery": {"friction_ground": 0.95},
    "heavy": {"gravity": 0.8},
}

__all__ = ["SceneBounds", "SimConfig", "PRESETS", "Range"]

from __future__ import annotations

import math
from typing import List, Tuple

from blobworld.config import SceneBounds, SimConfig
from blobworld.constants import (
    BLOB_POINTS,
    BLOB_RADIUS,
    BLOB_T_SPEED,
    BLOB_WOBBLE,
    BLOB_WOBBLE_FREQ,
    BOB_AMOUNT,
    BOB_SPEED,
    GROUND_DAMPING,
    GROUND_REST_EPSILON,
    IDLE_EASE_AIR,
    IDLE_EASE_GROUND,
    LANDING_INTENSITY_MAX,
    LANDING_INTENSITY_MIN,
    LANDING_REBOUND,
    LANDING_SPEED_CAP,
    LANDING_STRETCH_RATIO,
    NOISE_OFFSET,
    SETTLE_DAMPING,
    SETTLE_EPSILON,
    VELOCITY_SCALE_HIGH,
    VELOCITY_SCALE_LOW,
    VELOCITY_SCALE_RANGE,
)
from blobworld.logger import get_logger
from blobworld.mathutil import PerlinNoise, clamp, lerp, remap
from blobworld.services import ServiceContainer

log = get_logger("blob")


def landing_intensity(impact_speed: float) -> float:
    """Squash intensity for a landing at ``impact_speed`` (0.3 soft .. 0.6 hard)."""
    return remap(
        clamp(impact_speed, 0, LANDING_SPEED_CAP),
        0,
        LANDING_SPEED_CAP,
        LANDING_INTENSITY_MIN,
        LANDING_INTENSITY_MAX,
    )


class Blob:
    """The player character.

    Physical state (``pos``, ``velocity``, ``on_ground``) drives every
    decision. Presentational state (``landing_squash``, ``landing_stretch``,
    ``bob_phase``, ``t``) is only written here and read by the render
    helpers at the bottom of the class.
    """

    def __init__(
        self,
        scene: SceneBounds,
        config: SimConfig | None = None,
        services: ServiceContainer | None = None,
        noise: PerlinNoise | None = None,
        x: float | None = None,
    ):
        self.scene = scene
        self.config = config or SimConfig()
        self.services = services or ServiceContainer()
        self.noise = noise

        self.radius = BLOB_RADIUS
        self.points = BLOB_POINTS
        self.wobble = BLOB_WOBBLE
        self.wobble_freq = BLOB_WOBBLE_FREQ
        self.t = 0.0

        start_x = scene.width / 2 if x is None else x
        self.pos = [clamp(start_x, self.radius, scene.width - self.radius), self.rest_y]
        self.velocity = [0.0, 0.0]
        self.on_ground = True
        self.was_on_ground = True
        self.prev_vy = 0.0

        self.bob_phase = 0.0
        self.landing_squash = 1.0
        self.landing_stretch = 1.0

    @property
    def rest_y(self) -> float:
        return self.scene.floor_y - self.radius

    # --- Input ---------------------------------------------------------------
    def jump(self) -> bool:
        """Launch upward if grounded. Airborne calls change nothing."""
        if not self.on_ground:
            return False
        self.velocity[1] = self.config.jump_v
        self.on_ground = False
        return True

    # --- Physics step phases -------------------------------------------------
    def apply_input(self, move: int) -> None:
        cfg = self.config
        move = max(-1, min(1, int(move)))
        vx = self.velocity[0] + cfg.accel * move
        if move == 0:
            vx = lerp(vx, 0.0, IDLE_EASE_GROUND if self.on_ground else IDLE_EASE_AIR)
        vx *= cfg.friction_ground if self.on_ground else cfg.friction_air
        self.velocity[0] = clamp(vx, -cfg.max_run, cfg.max_run)

    def apply_gravity(self) -> None:
        self.velocity[1] += self.config.gravity

    def detect_apex(self) -> bool:
        """Fire the sparkle burst when vy turns from rising to falling.

        Compares against last frame's recorded vy, so the burst can land one
        frame after the true zero crossing.
        """
        vy = self.velocity[1]
        peaked = self.prev_vy <= 0 < vy and not self.on_ground
        if peaked:
            self.services.emit_sparkles((self.pos[0], self.pos[1]))
        self.prev_vy = vy
        return peaked

    def integrate(self) -> None:
        self.pos[0] += self.velocity[0]
        self.pos[1] += self.velocity[1]

    def resolve_ground(self) -> bool:
        """Snap to the floor; returns True when this frame was a landing."""
        landed = False
        if self.pos[1] + self.radius >= self.scene.floor_y:
            self.pos[1] = self.rest_y
            vy = self.velocity[1]
            if not self.was_on_ground and vy > 0:
                intensity = landing_intensity(vy)
                self.landing_squash = 1.0 - intensity
                self.landing_stretch = 1.0 + intensity * LANDING_STRETCH_RATIO
                self.velocity[1] = -vy * LANDING_REBOUND
                landed = True
                log.debug(f"landed at {vy:.2f} (intensity {intensity:.2f})")
            else:
                self.velocity[1] = vy * GROUND_DAMPING
                if abs(self.velocity[1]) < GROUND_REST_EPSILON:
                    self.velocity[1] = 0.0
            self.on_ground = True
        else:
            self.on_ground = False
        return landed

    def relax(self) -> None:
        ease = self.config.landing_ease_speed
        self.landing_squash = lerp(self.landing_squash, 1.0, ease)
        self.landing_stretch = lerp(self.landing_stretch, 1.0, ease)

    def settle(self) -> None:
        if self.on_ground and self.velocity[1] != 0:
            self.velocity[1] *= SETTLE_DAMPING
            if abs(self.velocity[1]) < SETTLE_EPSILON:
                self.velocity[1] = 0.0

    def clamp_to_scene(self) -> None:
        self.pos[0] = clamp(self.pos[0], self.radius, self.scene.width - self.radius)

    def advance_animation(self) -> None:
        self.bob_phase += BOB_SPEED
        self.t += BLOB_T_SPEED

    def begin_update(self, move: int = 0) -> bool:
        """Input, gravity, apex detection and position integration.

        Returns True when this frame fired the apex sparkle burst.
        """
        self.apply_input(move)
        self.apply_gravity()
        apex = self.detect_apex()
        self.integrate()
        return apex

    def finish_update(self) -> bool:
        """Ground resolution, relaxation, settling and animation clocks.

        Returns True when this frame was a landing.
        """
        landed = self.resolve_ground()
        self.relax()
        self.settle()
        self.was_on_ground = self.on_ground
        self.advance_animation()
        self.clamp_to_scene()
        return landed

    def update(self, move: int = 0) -> None:
        """Composite step for callers with no clouds to resolve in between."""
        self.begin_update(move)
        self.finish_update()

    # --- Presentation (output only) -----------------------------------------
    @property
    def bob_offset(self) -> float:
        return math.sin(self.bob_phase) * BOB_AMOUNT

    def render_scale(self) -> Tuple[float, float]:
        """(scale_x, scale_y): landing squash combined with vy stretch."""
        vy = clamp(self.velocity[1], -VELOCITY_SCALE_RANGE, VELOCITY_SCALE_RANGE)
        velocity_stretch = remap(
            vy, -VELOCITY_SCALE_RANGE, VELOCITY_SCALE_RANGE, VELOCITY_SCALE_HIGH, VELOCITY_SCALE_LOW
        )
        velocity_squash = remap(
            vy, -VELOCITY_SCALE_RANGE, VELOCITY_SCALE_RANGE, VELOCITY_SCALE_LOW, VELOCITY_SCALE_HIGH
        )
        return self.landing_stretch * velocity_squash, self.landing_squash * velocity_stretch

    def anchor_offset(self, scale_y: float) -> float:
        # keeps the squashed bottom on the floor
        return self.radius * (1 - scale_y) if self.on_ground else 0.0

    def silhouette(self) -> List[Tuple[float, float]]:
        """Outline points around the local origin, wobbled by noise."""
        outline = []
        for i in range(self.points):
            a = i / self.points * math.tau
            if self.noise is None:
                r = self.radius
            else:
                n = self.noise(
                    math.cos(a) * self.wobble_freq + NOISE_OFFSET,
                    math.sin(a) * self.wobble_freq + NOISE_OFFSET,
                    self.t,
                )
                r = self.radius + remap(n, 0, 1, -self.wobble, self.wobble)
            outline.append((math.cos(a) * r, math.sin(a) * r))
        return outline


__all__ = ["Blob", "landing_intensity"]

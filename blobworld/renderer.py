"""Frame renderer.

Draws a ``FrameSnapshot`` with pygame primitives. The renderer reads
snapshots only, never the live simulation.

Layer order (bottom -> top):
1. Sky gradient
2. Pulsing sun
3. Rainbow anchored to the floor
4. Clouds
5. Grass floor
6. Blob
7. Sparkles
8. Help text

``capture_sequence`` records executed layers for tests (avoids pixel
sampling).
"""

from __future__ import annotations

import math
from typing import List, Optional

import pygame

from blobworld.mathutil import lerp
from blobworld.snapshot import FrameSnapshot

SKY_TOP = (135, 206, 250)
SKY_BOTTOM = (173, 216, 230)
SUN_COLOR = (255, 220, 100)
BLOB_COLOR = (255, 220, 100)
GRASS_COLOR = (100, 180, 100)
CLOUD_COLOR = (255, 255, 255, 200)
SPARKLE_COLOR = (255, 255, 200)
TEXT_COLOR = (0, 0, 0)
RAINBOW = [
    (255, 50, 50, 180),
    (255, 165, 0, 180),
    (255, 255, 0, 180),
    (50, 205, 50, 180),
    (30, 144, 255, 180),
]

SUN_MARGIN = 60
SUN_Y = 50
SUN_SIZE = 45
SUN_PULSE = 3
SUN_PULSE_SPEED = 0.05
SUN_RAYS = 8
SUN_RAY_LENGTH = 15
RAINBOW_SIZE = (400, 160)
RAINBOW_STEP = (30, 24)

# (dx, dy, diameter) as fractions of cloud size
CLOUD_PUFFS = [
    (0.0, 0.0, 1.0),
    (0.4, 0.0, 0.8),
    (-0.4, 0.0, 0.8),
    (0.2, -0.3, 0.7),
    (-0.2, -0.3, 0.7),
]


class Renderer:
    """High-level frame orchestrator.

    Usage:
        r = Renderer()
        r.render(SnapshotService.capture(sim), window_surface)
    """

    def __init__(self, help_text: str = "") -> None:
        self.help_text = help_text
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont("sans-serif", 18)
        return self._font

    def render(
        self,
        snapshot: FrameSnapshot,
        target: pygame.Surface,
        capture_sequence: Optional[List[str]] = None,
    ) -> None:
        seq = capture_sequence
        steps = [
            ("sky", self.draw_sky),
            ("sun", self.draw_sun),
            ("rainbow", self.draw_rainbow),
            ("clouds", self.draw_clouds),
            ("floor", self.draw_floor),
            ("blob", self.draw_blob),
            ("sparkles", self.draw_sparkles),
        ]
        for name, step in steps:
            step(snapshot, target)
            if seq is not None:
                seq.append(name)
        if self.help_text:
            self.draw_text(target, self.help_text)
            if seq is not None:
                seq.append("hud")

    # --- Layers --------------------------------------------------------------
    def draw_sky(self, snap: FrameSnapshot, surf: pygame.Surface) -> None:
        floor = int(snap.floor_y)
        for y in range(floor):
            inter = y / floor
            color = tuple(int(lerp(a, b, inter)) for a, b in zip(SKY_TOP, SKY_BOTTOM))
            pygame.draw.line(surf, color, (0, y), (int(snap.width), y))

    def draw_sun(self, snap: FrameSnapshot, surf: pygame.Surface) -> None:
        cx, cy = snap.width - SUN_MARGIN, SUN_Y
        size = SUN_SIZE + math.sin(snap.frame * SUN_PULSE_SPEED) * SUN_PULSE
        pygame.draw.circle(surf, SUN_COLOR, (int(cx), cy), int(size / 2))
        for i in range(SUN_RAYS):
            angle = i / SUN_RAYS * math.tau
            start = (cx + math.cos(angle) * size / 2, cy + math.sin(angle) * size / 2)
            end = (
                cx + math.cos(angle) * (size / 2 + SUN_RAY_LENGTH),
                cy + math.sin(angle) * (size / 2 + SUN_RAY_LENGTH),
            )
            pygame.draw.line(surf, SUN_COLOR, start, end, 3)

    def draw_rainbow(self, snap: FrameSnapshot, surf: pygame.Surface) -> None:
        cx, base = snap.width / 2, snap.floor_y
        for i, color in enumerate(RAINBOW):
            w = RAINBOW_SIZE[0] - i * RAINBOW_STEP[0]
            h = RAINBOW_SIZE[1] - i * RAINBOW_STEP[1]
            # upper half of the ellipse only
            band = pygame.Surface((w, h // 2), pygame.SRCALPHA)
            pygame.draw.ellipse(band, color, pygame.Rect(0, 0, w, h))
            surf.blit(band, (cx - w / 2, base - h // 2))

    def draw_clouds(self, snap: FrameSnapshot, surf: pygame.Surface) -> None:
        layer = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        for cloud in snap.clouds:
            x, y = cloud.pos
            for dx, dy, d in CLOUD_PUFFS:
                center = (int(x + cloud.size * dx), int(y + cloud.size * dy))
                pygame.draw.circle(layer, CLOUD_COLOR, center, max(1, int(cloud.size * d / 2)))
        surf.blit(layer, (0, 0))

    def draw_floor(self, snap: FrameSnapshot, surf: pygame.Surface) -> None:
        rect = pygame.Rect(0, int(snap.floor_y), int(snap.width), int(snap.height - snap.floor_y))
        pygame.draw.rect(surf, GRASS_COLOR, rect)

    def draw_blob(self, snap: FrameSnapshot, surf: pygame.Surface) -> None:
        points = snap.blob.world_outline()
        if len(points) >= 3:
            pygame.draw.polygon(surf, BLOB_COLOR, points)

    def draw_sparkles(self, snap: FrameSnapshot, surf: pygame.Surface) -> None:
        if not snap.sparkles:
            return
        layer = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        for sparkle in snap.sparkles:
            s = sparkle.size
            if s <= 0:
                continue
            x, y = sparkle.pos
            color = (*SPARKLE_COLOR, sparkle.alpha)
            # small cross
            pygame.draw.rect(layer, color, pygame.Rect(x - s / 2, y - s / 6, s, s / 3))
            pygame.draw.rect(layer, color, pygame.Rect(x - s / 6, y - s / 2, s / 3, s))
        surf.blit(layer, (0, 0))

    def draw_text(self, surf: pygame.Surface, text: str) -> None:
        img = self._get_font().render(text, True, TEXT_COLOR)
        surf.blit(img, (10, 6))


__all__ = ["Renderer"]

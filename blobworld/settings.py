import os

import pygame

from blobworld.logger import get_logger

log = get_logger("settings")


class Settings:
    """Window and key binding settings.

    Held in memory only. ``BLOB_FPS`` can lower the frame cap for slow
    machines; the physics still advances exactly one tick per frame.
    """

    DEFAULT_FPS = 60

    def __init__(self):
        self.caption = "Blob World"
        self.help_text = "Move: A/D or ←/→  •  Jump: Space/W/↑"
        self.fps = self._read_fps()
        self.key_bindings = {
            "GameState": {
                "left": [pygame.K_LEFT, pygame.K_a],
                "right": [pygame.K_RIGHT, pygame.K_d],
                "jump": [pygame.K_SPACE, pygame.K_w, pygame.K_UP],
                "quit": [pygame.K_ESCAPE],
            },
        }

    def _read_fps(self) -> int:
        raw = os.environ.get("BLOB_FPS")
        if raw is None:
            return self.DEFAULT_FPS
        try:
            fps = int(raw)
        except ValueError:
            log.warn("Ignoring non-numeric BLOB_FPS", raw)
            return self.DEFAULT_FPS
        if fps <= 0:
            log.warn("Ignoring non-positive BLOB_FPS", raw)
            return self.DEFAULT_FPS
        return fps

    def keys_for(self, action: str, state: str = "GameState"):
        return self.key_bindings.get(state, {}).get(action, [])


settings = Settings()

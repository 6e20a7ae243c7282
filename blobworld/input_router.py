"""Centralized input routing.

Turns raw pygame events into discrete *actions* (``jump``, ``quit``) and
held key state into the blob's horizontal intent. Rules are built from
``settings.key_bindings`` so rebinding only touches settings.

Jump is an edge: only ``KEYDOWN`` produces it, so holding the key does
not repeat the jump.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Sequence

import pygame

Action = str
Rule = Callable[[pygame.event.Event], Action | None]


def _key_rule(key: int, action: Action, event_type=pygame.KEYDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "key", None) == key:
            return action
        return None

    return _r


def _quit_rule(e: pygame.event.Event):
    return "quit" if e.type == pygame.QUIT else None


class InputRouter:
    """Maps pygame events to semantic actions for the active state."""

    def __init__(self) -> None:
        self._rules: Dict[str, List[Rule]] = {}
        self._register_default_rules()

    def _register_default_rules(self) -> None:
        from blobworld.settings import settings

        game_rules: List[Rule] = [_quit_rule]
        for act in ("jump", "quit"):
            for k in settings.keys_for(act):
                game_rules.append(_key_rule(k, act))
        self._rules["GameState"] = game_rules
        self._left_keys = list(settings.keys_for("left"))
        self._right_keys = list(settings.keys_for("right"))

    def process(self, events: Iterable[pygame.event.Event], state_name: str = "GameState") -> List[Action]:
        rules = self._rules.get(state_name, [])
        actions: List[Action] = []
        for e in events:
            for rule in rules:
                a = rule(e)
                if a:
                    if a not in actions:  # de-duplicate per frame
                        actions.append(a)
                    break
        return actions

    def horizontal_intent(self, pressed: Sequence[bool]) -> int:
        """Net -1/0/+1 from held left/right keys (both held cancel out)."""
        move = 0
        if any(pressed[k] for k in self._left_keys):
            move -= 1
        if any(pressed[k] for k in self._right_keys):
            move += 1
        return move


__all__ = ["InputRouter", "Action"]

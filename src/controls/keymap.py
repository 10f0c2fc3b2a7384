"""Translate raw pygame events into session inputs.

Keyboard: arrows or WASD move/jump/slide, P or Escape toggles pause.
Pointer: the four on-screen buttons behave like the arrow keys; a slide
lasts while the button is held. Mouse events that SDL synthesizes from
touches are skipped so a tap is not counted twice.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from config import HEIGHT, HUD_HEIGHT, TOUCH_BUTTONS, WIDTH
from controls.intents import Action

logger = logging.getLogger(__name__)

KEY_ACTIONS = {
    pygame.K_UP: Action.JUMP,
    pygame.K_w: Action.JUMP,
    pygame.K_DOWN: Action.SLIDE,
    pygame.K_s: Action.SLIDE,
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_a: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_d: Action.MOVE_RIGHT,
}
PAUSE_KEYS = frozenset({pygame.K_ESCAPE, pygame.K_p})

DIRECTION_ACTIONS = {
    "up": Action.JUMP,
    "down": Action.SLIDE,
    "left": Action.MOVE_LEFT,
    "right": Action.MOVE_RIGHT,
}


class InputMapper:
    def __init__(
        self,
        session,
        *,
        buttons: Optional[dict] = None,
        screen_size: tuple[int, int] = (WIDTH, HUD_HEIGHT + HEIGHT),
    ) -> None:
        self.session = session
        self.buttons = buttons if buttons is not None else TOUCH_BUTTONS
        self.screen_size = screen_size
        # pointer id -> direction currently held down
        self._held: dict[object, str] = {}

    def button_at(self, x: float, y: float) -> Optional[str]:
        for direction, (cx, cy, radius) in self.buttons.items():
            if (x - cx) ** 2 + (y - cy) ** 2 <= radius**2:
                return direction
        return None

    def press(self, direction: str, pressed: bool = True) -> bool:
        """Forward an explicit direction tag ("up", "down", "left", "right")."""
        action = DIRECTION_ACTIONS.get(direction)
        if action is None:
            logger.debug("ignoring unknown direction %r", direction)
            return False
        return self.session.submit_input(action, pressed)

    def _pointer_down(self, pointer: object, x: float, y: float) -> bool:
        direction = self.button_at(x, y)
        if direction is None:
            return False
        self._held[pointer] = direction
        self.press(direction, True)
        return True

    def _pointer_up(self, pointer: object) -> bool:
        direction = self._held.pop(pointer, None)
        if direction is None:
            return False
        self.press(direction, False)
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True if the event was consumed as a game control."""
        if event.type == pygame.KEYDOWN:
            if event.key in PAUSE_KEYS:
                self.session.pause_toggle()
                return True
            action = KEY_ACTIONS.get(event.key)
            if action is None:
                return False
            self.session.submit_input(action, True)
            return True

        if event.type == pygame.KEYUP:
            action = KEY_ACTIONS.get(event.key)
            if action is None:
                return False
            self.session.submit_input(action, False)
            return True

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if getattr(event, "touch", False):
                return False
            return self._pointer_down("mouse", *event.pos)

        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if getattr(event, "touch", False):
                return False
            return self._pointer_up("mouse")

        if event.type == pygame.FINGERDOWN:
            w, h = self.screen_size
            return self._pointer_down(("finger", event.finger_id), event.x * w, event.y * h)

        if event.type == pygame.FINGERUP:
            return self._pointer_up(("finger", event.finger_id))

        return False


__all__ = ["DIRECTION_ACTIONS", "InputMapper", "KEY_ACTIONS", "PAUSE_KEYS"]

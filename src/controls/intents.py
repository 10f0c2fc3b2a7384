"""Game commands and the queue that carries them into the tick.

Inputs may arrive at any time (event pump, another thread). They are stored
as intents and only applied at the start of the next tick, so a collision
check never sees a half-updated character.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from config import INTENT_QUEUE_SIZE
from track.entities import Character, clamp_lane
from track.physics import JumpPhysics

logger = logging.getLogger(__name__)


class Action(str, Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    JUMP = "jump"
    SLIDE = "slide"

    @classmethod
    def parse(cls, value: Union[str, "Action", None]) -> Optional["Action"]:
        """Return the matching action, or None for anything unrecognised."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip()
        try:
            return cls(key.lower())
        except ValueError:
            pass
        # also accept camelCase names such as "moveLeft"
        snake = "".join("_" + ch.lower() if ch.isupper() else ch for ch in key).lstrip("_")
        try:
            return cls(snake.lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Intent:
    action: Action
    pressed: bool = True


class IntentQueue:
    """Bounded FIFO of pending intents; the oldest entry is dropped when full."""

    def __init__(self, maxlen: int = INTENT_QUEUE_SIZE) -> None:
        self._items: deque[Intent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def put(self, intent: Intent) -> None:
        with self._lock:
            if len(self._items) == self._items.maxlen:
                logger.debug("intent queue full, dropping %s", self._items[0])
            self._items.append(intent)

    def drain(self) -> list[Intent]:
        with self._lock:
            items = list(self._items)
            self._items.clear()
        return items

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


def apply_intent(character: Character, intent: Intent, physics: JumpPhysics) -> Optional[str]:
    """Apply one intent to the character.

    Returns the name of the sound event the change produced, if any. Every
    transition is idempotent at the bounds: moving left in lane 0, jumping
    while airborne or releasing an inactive slide changes nothing.
    """
    action = intent.action
    if action is Action.SLIDE:
        character.is_sliding = intent.pressed
        return None
    if not intent.pressed:
        return None
    if action is Action.JUMP:
        return "jump" if physics.start_jump(character) else None
    if action is Action.MOVE_LEFT:
        character.lane = clamp_lane(character.lane - 1)
    elif action is Action.MOVE_RIGHT:
        character.lane = clamp_lane(character.lane + 1)
    return None


__all__ = ["Action", "Intent", "IntentQueue", "apply_intent"]

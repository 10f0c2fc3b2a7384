"""Jump integration for the character.

Physics runs in fixed steps of ``PHYSICS_STEP_MS`` regardless of the render
frame rate; the session clock decides how many steps are due per tick. With
a fixed step the arc is fully determined by ``jump_force`` and ``gravity``:
peak height ``jump_force**2 / (2 * gravity)`` and airtime
``2 * jump_force / gravity`` steps (the discrete integration lands within
one step of the analytic value and never peaks above it).
"""

from __future__ import annotations

import math

from config import GRAVITY, JUMP_FORCE
from track.entities import Character


class JumpPhysics:
    def __init__(self, *, gravity: float = GRAVITY, jump_force: float = JUMP_FORCE) -> None:
        self.gravity = gravity
        self.jump_force = jump_force

    @property
    def peak_height(self) -> float:
        return self.jump_force**2 / (2.0 * self.gravity)

    @property
    def flight_steps(self) -> int:
        """Whole physics steps after which a jump has always landed."""
        return math.ceil(2.0 * self.jump_force / self.gravity)

    def start_jump(self, character: Character) -> bool:
        """Launch the character; returns False if it is already airborne."""
        if character.is_jumping:
            return False
        character.is_jumping = True
        character.vertical_velocity = self.jump_force
        return True

    def step(self, character: Character) -> bool:
        """Advance one physics step. Returns True on the step that lands."""
        if not character.is_jumping:
            return False
        character.vertical_velocity -= self.gravity
        character.vertical_position += character.vertical_velocity
        if character.vertical_position <= 0:
            character.vertical_position = 0.0
            character.vertical_velocity = 0.0
            character.is_jumping = False
            return True
        return False

    def advance(self, character: Character, steps: int) -> None:
        for _ in range(steps):
            if not character.is_jumping:
                break
            self.step(character)


__all__ = ["JumpPhysics"]

"""Plain data types for everything that lives on the track.

The character is mutable and owned by the session. Obstacles and coins are
frozen; moving them produces a new instance, so a snapshot handed to the
renderer can never be changed behind the session's back.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from config import (
    BARRIER_SIZE,
    CHARACTER_HEIGHT,
    CHARACTER_SLIDE_HEIGHT,
    CHARACTER_WIDTH,
    COIN_VALUE,
    LANE_COUNT,
    LANE_WIDTH,
    START_LANE,
    TRAIN_SIZE,
)


def clamp_lane(lane: int) -> int:
    """Clamp any integer onto a valid lane index (no wraparound)."""
    return max(0, min(LANE_COUNT - 1, int(lane)))


def lane_center_x(lane: int) -> float:
    return lane * LANE_WIDTH + LANE_WIDTH / 2


class ObstacleKind(str, Enum):
    BARRIER = "barrier"
    TRAIN = "train"

    @property
    def shape(self) -> tuple[int, int, int]:
        """(width, height, elevation) for this kind."""
        return TRAIN_SIZE if self is ObstacleKind.TRAIN else BARRIER_SIZE


@dataclass(frozen=True)
class Hitbox:
    """Axis-aligned box; x grows to the right, y grows upward from the ground."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    def overlaps(self, other: Hitbox) -> bool:
        # Strict inequalities: touching edges do not collide
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.top
            and self.top > other.y
        )


@dataclass
class Character:
    lane: int = START_LANE
    vertical_position: float = 0.0
    vertical_velocity: float = 0.0
    is_jumping: bool = False
    is_sliding: bool = False

    @property
    def hitbox_height(self) -> int:
        return CHARACTER_SLIDE_HEIGHT if self.is_sliding else CHARACTER_HEIGHT

    def hitbox(self) -> Hitbox:
        return Hitbox(
            x=lane_center_x(self.lane) - CHARACTER_WIDTH / 2,
            y=self.vertical_position,
            width=CHARACTER_WIDTH,
            height=self.hitbox_height,
        )


@dataclass(frozen=True)
class Obstacle:
    id: int
    kind: ObstacleKind
    lane: int
    position_from_far: float
    width: float
    height: float
    elevation: float = 0.0

    @classmethod
    def create(cls, id: int, kind: ObstacleKind, lane: int, position_from_far: float) -> Obstacle:
        width, height, elevation = kind.shape
        return cls(
            id=id,
            kind=kind,
            lane=clamp_lane(lane),
            position_from_far=position_from_far,
            width=width,
            height=height,
            elevation=elevation,
        )

    def advanced(self, distance: float) -> Obstacle:
        return replace(self, position_from_far=self.position_from_far - distance)

    def hitbox(self) -> Hitbox:
        return Hitbox(
            x=lane_center_x(self.lane) - self.width / 2,
            y=self.elevation,
            width=self.width,
            height=self.height,
        )


@dataclass(frozen=True)
class Collectible:
    id: int
    lane: int
    position_from_far: float
    value: int = COIN_VALUE

    def advanced(self, distance: float) -> Collectible:
        return replace(self, position_from_far=self.position_from_far - distance)


__all__ = [
    "Character",
    "Collectible",
    "Hitbox",
    "Obstacle",
    "ObstacleKind",
    "clamp_lane",
    "lane_center_x",
]

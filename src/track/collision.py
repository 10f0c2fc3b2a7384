"""Character-vs-entity collision checks.

Obstacles: an obstacle can only touch the character while it is inside the
near field (``0 < position_from_far < NEAR_FIELD_DEPTH``). Once speed passes
the depth of that window, a single scroll can carry an entity from beyond
the window to behind the player; such a move counts as passing through it.
Inside the window the test is lane equality plus a 2-D box overlap of the
lane-projected x range and the vertical range. Barriers sit on the ground
and are cleared by jumping; trains are raised by the slide height, so only a
grounded slide passes under them.

Coins: picked up under the same near-field rule when in the character's lane
and the character is below ``COIN_JUMP_CEILING``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from config import COIN_JUMP_CEILING, NEAR_FIELD_DEPTH
from track.entities import Character, Collectible, Obstacle


def in_near_field(position_from_far: float, depth: float = NEAR_FIELD_DEPTH, moved: float = 0.0) -> bool:
    """True if the entity is in the near field, or ``moved`` just carried it across.

    ``position_from_far`` is the position after this tick's scroll of
    ``moved`` units. A move that started at ``depth`` or beyond and ended at
    the player or behind never stopped inside the window.
    """
    if 0 < position_from_far < depth:
        return True
    return position_from_far <= 0 and position_from_far + moved >= depth


def obstacle_hits(character: Character, obstacle: Obstacle, moved: float = 0.0) -> bool:
    if obstacle.lane != character.lane:
        return False
    if not in_near_field(obstacle.position_from_far, moved=moved):
        return False
    return character.hitbox().overlaps(obstacle.hitbox())


def first_obstacle_hit(
    character: Character, obstacles: Iterable[Obstacle], moved: float = 0.0
) -> Optional[Obstacle]:
    """Return the first obstacle in spawn order that hits the character."""
    for obstacle in obstacles:
        if obstacle_hits(character, obstacle, moved):
            return obstacle
    return None


def coin_reachable(character: Character, coin: Collectible, moved: float = 0.0) -> bool:
    return (
        coin.lane == character.lane
        and in_near_field(coin.position_from_far, moved=moved)
        and character.vertical_position < COIN_JUMP_CEILING
    )


@dataclass
class CollisionResult:
    crashed_into: Optional[Obstacle] = None
    collected: list[Collectible] = field(default_factory=list)

    @property
    def crashed(self) -> bool:
        return self.crashed_into is not None

    @property
    def coin_total(self) -> int:
        return sum(c.value for c in self.collected)


def resolve_collisions(state, moved: float = 0.0) -> CollisionResult:
    """Check obstacles then coins against the session's character.

    ``moved`` is how far the track scrolled this tick. A crash ends the
    check immediately: nothing else on the track changes on the tick the run
    ends. Otherwise every reachable coin is removed from the live set; the
    caller credits ``coin_total`` once.
    """
    character = state.character
    hit = first_obstacle_hit(character, state.obstacles, moved)
    if hit is not None:
        return CollisionResult(crashed_into=hit)

    result = CollisionResult()
    remaining = []
    for coin in state.collectibles:
        if coin_reachable(character, coin, moved):
            result.collected.append(coin)
        else:
            remaining.append(coin)
    if result.collected:
        state.collectibles = remaining
    return result


__all__ = [
    "CollisionResult",
    "coin_reachable",
    "first_obstacle_hit",
    "in_near_field",
    "obstacle_hits",
    "resolve_collisions",
]

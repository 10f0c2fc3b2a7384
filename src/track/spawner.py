"""Procedural obstacle/coin generation and track scrolling.

Randomness comes from an injected ``numpy.random.Generator`` so a seeded
run (or a scripted stand-in in tests) reproduces exactly. Per tick the
spawner draws, in this order:

1. obstacle trial ``random()``; on success ``integers(0, LANE_COUNT)`` for
   the lane and ``random()`` for the kind,
2. coin trial ``random()``; on success ``integers(0, LANE_COUNT)``.

The two trials are independent: one tick can produce both an obstacle and
a coin.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from config import (
    COIN_PRUNE_DEPTH,
    COIN_SPAWN_CHANCE,
    COIN_VALUE,
    LANE_COUNT,
    LANE_VIEW_DEPTH,
    OBSTACLE_PRUNE_DEPTH,
    OBSTACLE_SPAWN_CHANCE,
    TRAIN_CHANCE,
)
from track.entities import Collectible, Obstacle, ObstacleKind

logger = logging.getLogger(__name__)


class EntitySpawner:
    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        *,
        seed: Optional[int] = None,
        obstacle_chance: float = OBSTACLE_SPAWN_CHANCE,
        coin_chance: float = COIN_SPAWN_CHANCE,
        train_chance: float = TRAIN_CHANCE,
        spawn_depth: float = LANE_VIEW_DEPTH,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.obstacle_chance = obstacle_chance
        self.coin_chance = coin_chance
        self.train_chance = train_chance
        self.spawn_depth = spawn_depth

    def _random_lane(self) -> int:
        return int(self.rng.integers(0, LANE_COUNT))

    def roll_obstacle(self, entity_id: int) -> Optional[Obstacle]:
        if self.rng.random() >= self.obstacle_chance:
            return None
        lane = self._random_lane()
        kind = ObstacleKind.TRAIN if self.rng.random() < self.train_chance else ObstacleKind.BARRIER
        return Obstacle.create(entity_id, kind, lane, self.spawn_depth)

    def roll_coin(self, entity_id: int) -> Optional[Collectible]:
        if self.rng.random() >= self.coin_chance:
            return None
        return Collectible(
            id=entity_id,
            lane=self._random_lane(),
            position_from_far=self.spawn_depth,
            value=COIN_VALUE,
        )

    def spawn(self, state) -> None:
        """Run this tick's spawn trials, appending to ``state`` in spawn order."""
        obstacle = self.roll_obstacle(state.next_entity_id)
        if obstacle is not None:
            state.next_entity_id += 1
            state.obstacles.append(obstacle)
            logger.debug("spawned %s #%d in lane %d", obstacle.kind.value, obstacle.id, obstacle.lane)

        coin = self.roll_coin(state.next_entity_id)
        if coin is not None:
            state.next_entity_id += 1
            state.collectibles.append(coin)
            logger.debug("spawned coin #%d in lane %d", coin.id, coin.lane)


def advance_entities(state, distance: float, *, prune: bool = True) -> None:
    """Scroll every live entity toward the player and prune the ones behind it.

    The session scrolls with ``prune=False`` and calls ``prune_entities``
    after collisions, so an entity that scrolled far behind the player in a
    single move is still checked once.
    """
    state.obstacles = [o.advanced(distance) for o in state.obstacles]
    state.collectibles = [c.advanced(distance) for c in state.collectibles]
    if prune:
        prune_entities(state)


def prune_entities(state) -> None:
    state.obstacles = [o for o in state.obstacles if o.position_from_far >= OBSTACLE_PRUNE_DEPTH]
    state.collectibles = [c for c in state.collectibles if c.position_from_far >= COIN_PRUNE_DEPTH]


__all__ = ["EntitySpawner", "advance_entities", "prune_entities"]

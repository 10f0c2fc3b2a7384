from __future__ import annotations

import numpy as np

from config import LANE_VIEW_DEPTH
from core.session import SessionState
from track.entities import Collectible, Obstacle, ObstacleKind
from track.spawner import EntitySpawner, advance_entities, prune_entities


def test_obstacle_roll_picks_lane_and_kind(scripted_rng) -> None:
    # obstacle trial passes, kind draw < 0.5 -> train, coin trial fails
    spawner = EntitySpawner(scripted_rng(randoms=[0.01, 0.3, 0.5], ints=[2]))
    state = SessionState()

    spawner.spawn(state)

    assert state.collectibles == []
    [ob] = state.obstacles
    assert ob.kind is ObstacleKind.TRAIN
    assert ob.lane == 2
    assert (ob.width, ob.height) == (60, 100)
    assert ob.elevation > 0
    assert ob.position_from_far == LANE_VIEW_DEPTH


def test_obstacle_and_coin_can_spawn_on_the_same_tick(scripted_rng) -> None:
    spawner = EntitySpawner(scripted_rng(randoms=[0.0, 0.7, 0.0], ints=[0, 1]))
    state = SessionState()

    spawner.spawn(state)

    [ob] = state.obstacles
    [coin] = state.collectibles
    assert ob.kind is ObstacleKind.BARRIER
    assert (ob.lane, ob.width, ob.height, ob.elevation) == (0, 60, 60, 0)
    assert coin.lane == 1
    assert coin.value == 1
    assert coin.position_from_far == LANE_VIEW_DEPTH
    assert (ob.id, coin.id) == (1, 2)
    assert state.next_entity_id == 3


def test_trial_threshold_is_strict(scripted_rng) -> None:
    spawner = EntitySpawner(scripted_rng(randoms=[0.02, 0.03]))
    state = SessionState()
    spawner.spawn(state)
    assert state.obstacles == [] and state.collectibles == []


def test_seeded_spawners_agree() -> None:
    a, b = EntitySpawner(seed=7), EntitySpawner(seed=7)
    sa, sb = SessionState(), SessionState()
    for _ in range(500):
        a.spawn(sa)
        b.spawn(sb)

    assert sa.obstacles == sb.obstacles
    assert sa.collectibles == sb.collectibles
    assert sa.obstacles and sa.collectibles


def test_spawn_rates_roughly_match_chances() -> None:
    spawner = EntitySpawner(np.random.default_rng(1234))
    state = SessionState()
    ticks = 20_000
    for _ in range(ticks):
        spawner.spawn(state)

    assert 0.015 < len(state.obstacles) / ticks < 0.025
    assert 0.025 < len(state.collectibles) / ticks < 0.035
    assert {o.lane for o in state.obstacles} == {0, 1, 2}


def test_advance_moves_and_prunes_behind_player() -> None:
    state = SessionState()
    state.obstacles = [
        Obstacle.create(1, ObstacleKind.BARRIER, 0, -95.0),
        Obstacle.create(2, ObstacleKind.TRAIN, 1, 300.0),
    ]
    state.collectibles = [
        Collectible(id=3, lane=0, position_from_far=-45.0),
        Collectible(id=4, lane=2, position_from_far=-44.0),
    ]

    advance_entities(state, 5.0)
    assert [o.position_from_far for o in state.obstacles] == [-100.0, 295.0]
    assert [c.id for c in state.collectibles] == [3, 4]

    advance_entities(state, 0.5)
    assert [o.id for o in state.obstacles] == [2]
    assert [c.id for c in state.collectibles] == [4]


def test_scroll_without_prune_then_prune() -> None:
    state = SessionState()
    state.obstacles = [Obstacle.create(1, ObstacleKind.BARRIER, 1, 120.0)]
    state.collectibles = [Collectible(id=2, lane=1, position_from_far=120.0)]

    advance_entities(state, 300.0, prune=False)
    assert [o.position_from_far for o in state.obstacles] == [-180.0]
    assert [c.position_from_far for c in state.collectibles] == [-180.0]

    prune_entities(state)
    assert state.obstacles == []
    assert state.collectibles == []

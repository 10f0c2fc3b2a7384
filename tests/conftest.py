from __future__ import annotations

import pytest

from core.session import GameSession
from track.spawner import EntitySpawner


class ScriptedRng:
    """Stand-in for numpy's Generator that replays fixed draws.

    ``random()`` pops from ``randoms`` and ``integers()`` from ``ints``;
    once a list is exhausted it keeps returning a value that never spawns.
    """

    def __init__(self, randoms=(), ints=()) -> None:
        self.randoms = list(randoms)
        self.ints = list(ints)

    def random(self) -> float:
        return self.randoms.pop(0) if self.randoms else 0.999

    def integers(self, low: int, high: int) -> int:
        value = self.ints.pop(0) if self.ints else low
        assert low <= value < high
        return value


@pytest.fixture()
def quiet_spawner() -> EntitySpawner:
    """Spawner that never produces anything, so tests place entities by hand."""
    return EntitySpawner(ScriptedRng(), obstacle_chance=0.0, coin_chance=0.0)


@pytest.fixture()
def session(quiet_spawner: EntitySpawner) -> GameSession:
    s = GameSession(quiet_spawner)
    s.start()
    return s


@pytest.fixture()
def sounds(session: GameSession) -> list[str]:
    heard: list[str] = []
    session.on_sound_event(heard.append)
    return heard


@pytest.fixture()
def scripted_rng():
    """Factory for ``ScriptedRng`` instances."""
    return ScriptedRng

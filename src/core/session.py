"""Game session: the authoritative state and the lifecycle state machine.

Lifecycle::

    IDLE --start--> ACTIVE <--pause_toggle--> PAUSED
                      |
                   collision
                      v
                  GAME_OVER --restart--> ACTIVE (fresh state)

    any state --exit--> IDLE (state discarded)

Every entry point is safe to call from any state; calls that do not apply
are no-ops. One tick is an atomic unit: pending intents are applied, then
score and speed accrue, then spawn -> scroll -> physics -> collisions -> prune
run in that fixed order. Events raised during a tick (sounds, game over) are
dispatched only after the tick has finished mutating state.
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Optional, Union

from config import SCORE_RATE, SPEED_GROWTH_RATE, SPEED_INITIAL
from controls.intents import Action, Intent, IntentQueue, apply_intent
from core.clock import SessionClock
from track.collision import resolve_collisions
from track.entities import Character, Collectible, Obstacle, clamp_lane
from track.physics import JumpPhysics
from track.spawner import EntitySpawner, advance_entities, prune_entities

logger = logging.getLogger(__name__)

SoundCallback = Callable[[str], None]
GameOverCallback = Callable[[int], None]


class Status(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class SessionState:
    status: Status = Status.ACTIVE
    score: float = 0.0
    coins: int = 0
    speed: float = SPEED_INITIAL
    character: Character = field(default_factory=Character)
    obstacles: list[Obstacle] = field(default_factory=list)
    collectibles: list[Collectible] = field(default_factory=list)
    next_entity_id: int = 1

    @property
    def display_score(self) -> int:
        return math.floor(self.score)

    def invariant_violations(self) -> list[str]:
        checks = [
            (self.coins >= 0, f"coins {self.coins}"),
            (self.score >= 0, f"score {self.score}"),
            (self.speed >= SPEED_INITIAL, f"speed {self.speed}"),
            (self.character.lane == clamp_lane(self.character.lane), f"lane {self.character.lane}"),
            (self.character.vertical_position >= 0, f"height {self.character.vertical_position}"),
        ]
        return [what for ok, what in checks if not ok]


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view handed to the renderer."""

    status: Status
    score: int
    coins: int
    speed: float
    character: Character
    obstacles: tuple[Obstacle, ...]
    collectibles: tuple[Collectible, ...]


class GameSession:
    def __init__(
        self,
        spawner: Optional[EntitySpawner] = None,
        *,
        physics: Optional[JumpPhysics] = None,
        clock: Optional[SessionClock] = None,
        score_rate: float = SCORE_RATE,
        speed_growth: float = SPEED_GROWTH_RATE,
    ) -> None:
        if score_rate < 0:
            raise ValueError(f"score_rate must be >= 0, got {score_rate}")
        if speed_growth < 0:
            raise ValueError(f"speed_growth must be >= 0, got {speed_growth}")
        self.spawner = spawner or EntitySpawner()
        self.physics = physics or JumpPhysics()
        self.clock = clock or SessionClock()
        self.score_rate = score_rate
        self.speed_growth = speed_growth

        self.state: Optional[SessionState] = None
        self.generation = 0
        self._intents = IntentQueue()
        self._lock = threading.RLock()
        self._sound_callbacks: list[SoundCallback] = []
        self._game_over_callbacks: list[GameOverCallback] = []

    # ------------------------------------------------------------------
    # collaborators
    def on_sound_event(self, callback: SoundCallback) -> SoundCallback:
        self._sound_callbacks.append(callback)
        return callback

    def on_game_over(self, callback: GameOverCallback) -> GameOverCallback:
        self._game_over_callbacks.append(callback)
        return callback

    def _dispatch(self, sounds: list[str], final_score: Optional[int]) -> None:
        for name in sounds:
            for cb in list(self._sound_callbacks):
                try:
                    cb(name)
                except Exception:
                    # A broken speaker must not stop the run
                    logger.exception("sound callback failed for %r", name)
        if final_score is None:
            return
        for cb in list(self._game_over_callbacks):
            try:
                cb(final_score)
            except Exception:
                logger.exception("game over callback failed")

    # ------------------------------------------------------------------
    # lifecycle
    @property
    def status(self) -> Status:
        return self.state.status if self.state is not None else Status.IDLE

    def _new_state(self) -> None:
        self.generation += 1
        self.state = SessionState()
        self._intents.clear()
        self.clock.reset()

    def start(self) -> None:
        with self._lock:
            if self.state is not None:
                return
            self._new_state()
            logger.info("session %d started", self.generation)

    def pause_toggle(self) -> None:
        with self._lock:
            state = self.state
            if state is None or state.status is Status.GAME_OVER:
                return
            if state.status is Status.ACTIVE:
                state.status = Status.PAUSED
                logger.info("session %d paused", self.generation)
            else:
                state.status = Status.ACTIVE
                self.clock.resync()
                logger.info("session %d resumed", self.generation)

    def restart(self) -> None:
        with self._lock:
            if self.state is None:
                return
            logger.info(
                "session %d restarted (score %d, coins %d)",
                self.generation,
                self.state.display_score,
                self.state.coins,
            )
            self._new_state()

    def exit(self) -> None:
        with self._lock:
            if self.state is None:
                return
            logger.info("session %d exited", self.generation)
            self.state = None
            self.generation += 1
            self._intents.clear()
            self.clock.reset()

    # ------------------------------------------------------------------
    # input
    def submit_input(self, action: Union[Action, str], pressed: bool = True) -> bool:
        """Queue an input for the next tick. Returns False if it was dropped."""
        parsed = Action.parse(action)
        if parsed is None:
            logger.debug("ignoring unknown action %r", action)
            return False
        with self._lock:
            status = self.status
            # a slide release only restores the default stance, so it may wait out a pause
            release_while_paused = parsed is Action.SLIDE and not pressed and status is Status.PAUSED
            if status is not Status.ACTIVE and not release_while_paused:
                return False
            self._intents.put(Intent(parsed, bool(pressed)))
            return True

    # ------------------------------------------------------------------
    # simulation
    def on_frame(self, timestamp_ms: float) -> None:
        """Drive the session from absolute frame timestamps instead of deltas."""
        with self._lock:
            if self.status is not Status.ACTIVE:
                return
            elapsed = self.clock.frame_elapsed(timestamp_ms)
        self.on_tick(elapsed)

    def on_tick(self, elapsed_ms: float) -> None:
        with self._lock:
            state = self.state
            if state is None or state.status is not Status.ACTIVE:
                return
            sounds, final_score = self._tick(state, elapsed_ms)
        self._dispatch(sounds, final_score)

    def _tick(self, state: SessionState, elapsed_ms: float) -> tuple[list[str], Optional[int]]:
        sounds: list[str] = []
        character = state.character

        for intent in self._intents.drain():
            sound = apply_intent(character, intent, self.physics)
            if sound:
                sounds.append(sound)

        steps = self.clock.accumulate(elapsed_ms)
        elapsed = self.clock.sanitize(elapsed_ms)
        state.score += elapsed * self.score_rate
        state.speed += self.speed_growth

        self.spawner.spawn(state)
        advance_entities(state, state.speed, prune=False)
        self.physics.advance(character, steps)

        result = resolve_collisions(state, moved=state.speed)
        final_score = None
        if result.crashed:
            state.status = Status.GAME_OVER
            final_score = state.display_score
            sounds.append("crash")
            logger.info(
                "session %d over: hit %s in lane %d, score %d, coins %d",
                self.generation,
                result.crashed_into.kind.value,
                result.crashed_into.lane,
                final_score,
                state.coins,
            )
        elif result.collected:
            state.coins += result.coin_total
            sounds.extend("coin" for _ in result.collected)
        if not result.crashed:
            prune_entities(state)

        for violation in state.invariant_violations():
            logger.error("session %d invariant broken: %s", self.generation, violation)
        return sounds, final_score

    # ------------------------------------------------------------------
    def snapshot(self) -> Optional[SessionSnapshot]:
        with self._lock:
            state = self.state
            if state is None:
                return None
            return SessionSnapshot(
                status=state.status,
                score=state.display_score,
                coins=state.coins,
                speed=state.speed,
                character=replace(state.character),
                obstacles=tuple(state.obstacles),
                collectibles=tuple(state.collectibles),
            )


__all__ = ["GameSession", "SessionSnapshot", "SessionState", "Status"]

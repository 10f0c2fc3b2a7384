"""Runner scene: wires the game session to pygame input, sound, persistence and drawing.

The session itself knows nothing about windows or files. This scene is the
collaborator around it: it feeds events and frame deltas in, plays the
sound events that come out, stores the best score when a run ends, and
draws the snapshot each frame.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pygame

from config import HIGH_SCORE_FILE, SOUND_FILES, SOUNDS_DIR
from controls.keymap import InputMapper
from core.high_score import HighScoreStore
from core.scene import Scene
from core.session import GameSession, Status
from sound.sound_utils import Sounds
from track.spawner import EntitySpawner

logger = logging.getLogger(__name__)

START_KEYS = frozenset({pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE})


class RunnerScene(Scene):
    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        high_score_file: Path | str = HIGH_SCORE_FILE,
        session: Optional[GameSession] = None,
        load_sounds: bool = True,
    ) -> None:
        super().__init__()
        self.session = session or GameSession(EntitySpawner(seed=seed))
        self.controls = InputMapper(self.session)
        self.high_scores = HighScoreStore(high_score_file)
        self.new_best = False
        self._renderer = None
        self._hud = None

        if load_sounds:
            loaded = Sounds.load_events(SOUND_FILES, SOUNDS_DIR)
            logger.info("loaded %d/%d sound effects", loaded, len(SOUND_FILES))
        self.session.on_sound_event(Sounds.play)
        self.session.on_game_over(self._record_score)
        self.updaters.append(self.session.on_tick)

    def _record_score(self, final_score: int) -> None:
        self.new_best = self.high_scores.is_new_best(final_score)
        try:
            self.high_scores.submit(final_score)
        except OSError:
            logger.warning("could not save high score to %s", self.high_scores.path, exc_info=True)

    def handle_event(self, event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
            return
        if event.type == pygame.KEYDOWN and self._handle_host_key(event.key):
            return
        self.controls.handle_event(event)

    def _handle_host_key(self, key: int) -> bool:
        status = self.session.status
        if key == pygame.K_m:
            Sounds.toggle_mute()
            return True
        if status is Status.IDLE:
            if key in START_KEYS:
                self.new_best = False
                self.session.start()
                return True
            if key in (pygame.K_q, pygame.K_ESCAPE):
                self.running = False
                return True
            return False
        if status in (Status.PAUSED, Status.GAME_OVER):
            if key == pygame.K_r:
                self.new_best = False
                self.session.restart()
                return True
            if key == pygame.K_q:
                self.session.exit()
                return True
        return False

    def render(self) -> None:  # pragma: no cover - visual
        if self._renderer is None:
            from render.track_renderer import TrackRenderer
            from track.track_hud import TrackHUD

            self._renderer = TrackRenderer()
            self._hud = TrackHUD()
        snapshot = self.session.snapshot()
        self._renderer.begin_frame()
        self._renderer.draw(snapshot)
        if snapshot is not None and snapshot.status is not Status.ACTIVE:
            self._renderer.draw_overlay()
        self._hud.draw(
            snapshot,
            high_score=self.high_scores.best,
            new_best=self.new_best,
            muted=Sounds.muted,
        )

    def close(self) -> None:
        self.session.exit()


__all__ = ["RunnerScene"]

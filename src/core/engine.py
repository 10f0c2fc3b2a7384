"""Window, GL context and the main loop.

The engine owns nothing game specific: it opens the window, pumps events
into the active scene, hands it the frame delta in milliseconds and asks it
to render. Simulation speed comes from those deltas, not from the frame
rate, so the cap below only limits CPU use.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame
from OpenGL.GL import GL_BLEND, GL_DEPTH_TEST, glDisable

from config import FPS, HEIGHT, HUD_HEIGHT, VSYNC, WIDTH, WINDOW_TITLE
from core.scene import Scene

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, scene_factory=None) -> None:
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        size = (WIDTH, HUD_HEIGHT + HEIGHT)
        try:
            pygame.display.set_mode(size, flags, vsync=(1 if VSYNC else 0))
        except pygame.error:
            # vsync was requested but the driver refused it
            logger.info("vsync unavailable, continuing without it")
            pygame.display.set_mode(size, flags)
        self.clock = pygame.time.Clock()

        glDisable(GL_DEPTH_TEST)
        glDisable(GL_BLEND)

        if scene_factory is None:
            from track.runner_scene import RunnerScene

            scene_factory = RunnerScene
        self.scene: Scene = scene_factory()

    def handle_events(self) -> bool:
        for event in pygame.event.get():
            self.scene.handle_event(event)
        return self.scene.running

    def run(self, max_frames: Optional[int] = None) -> None:  # pragma: no cover - visual
        frames = 0
        try:
            while True:
                dt_ms = float(self.clock.tick(FPS))
                if not self.handle_events():
                    break
                self.scene.update(dt_ms)
                self.scene.render()
                pygame.display.flip()
                frames += 1
                if max_frames is not None and frames >= max_frames:
                    break
        finally:
            self.scene.close()
            pygame.quit()

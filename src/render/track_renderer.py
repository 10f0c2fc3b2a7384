"""Draws a session snapshot: lanes, character, obstacles, coins, touch pads.

Everything is flat colored quads in a top-left-origin orthographic
projection. Track coordinates measure upward from the running surface, so
``to_screen_y`` flips them into window rows. Depth on the track is drawn as
height on screen: an entity ``position_from_far`` units away sits that many
pixels above the baseline.
"""

from __future__ import annotations

import math

from OpenGL.GL import (
    GL_BLEND,
    GL_COLOR_BUFFER_BIT,
    GL_MODELVIEW,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_PROJECTION,
    GL_QUADS,
    GL_SRC_ALPHA,
    GL_TRIANGLE_FAN,
    glBegin,
    glBlendFunc,
    glClear,
    glClearColor,
    glColor3f,
    glColor4f,
    glDisable,
    glEnable,
    glEnd,
    glLoadIdentity,
    glMatrixMode,
    glOrtho,
    glVertex2f,
    glViewport,
)

from config import (
    BACKGROUND_COLOR,
    BARRIER_COLOR,
    BUTTON_COLOR,
    CHARACTER_COLOR,
    CHARACTER_HEAD_COLOR,
    CHARACTER_WIDTH,
    COIN_COLOR,
    HEIGHT,
    HUD_HEIGHT,
    LANE_COUNT,
    LANE_DIVIDER_COLOR,
    LANE_WIDTH,
    OVERLAY_COLOR,
    TOUCH_BUTTONS,
    TRACK_BASELINE,
    TRACK_COLOR,
    TRAIN_COLOR,
    WIDTH,
)
from track.entities import ObstacleKind, lane_center_x

COIN_SIZE = 40
COIN_LIFT = 50  # coins float above the running surface


def to_screen_y(track_y: float) -> float:
    return HUD_HEIGHT + HEIGHT - TRACK_BASELINE - track_y


def _quad(x: float, top: float, w: float, h: float) -> None:
    glVertex2f(x, top)
    glVertex2f(x + w, top)
    glVertex2f(x + w, top + h)
    glVertex2f(x, top + h)


class TrackRenderer:
    def __init__(self, width: int = WIDTH, height: int = HUD_HEIGHT + HEIGHT) -> None:
        self.width = width
        self.height = height

    def begin_frame(self) -> None:  # pragma: no cover - visual
        glViewport(0, 0, self.width, self.height)
        glClearColor(*BACKGROUND_COLOR, 1.0)
        glClear(GL_COLOR_BUFFER_BIT)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    def draw(self, snapshot) -> None:  # pragma: no cover - visual
        self._draw_track()
        if snapshot is None:
            return
        self._draw_coins(snapshot.collectibles)
        self._draw_obstacles(snapshot.obstacles)
        self._draw_character(snapshot.character)
        self._draw_buttons()

    def _draw_track(self) -> None:  # pragma: no cover - visual
        glColor3f(*TRACK_COLOR)
        glBegin(GL_QUADS)
        _quad(0, HUD_HEIGHT, WIDTH, HEIGHT)
        glEnd()
        glColor3f(*LANE_DIVIDER_COLOR)
        glBegin(GL_QUADS)
        for i in range(1, LANE_COUNT):
            _quad(i * LANE_WIDTH - 1, HUD_HEIGHT, 2, HEIGHT)
        glEnd()

    def _draw_character(self, character) -> None:  # pragma: no cover - visual
        x = lane_center_x(character.lane) - CHARACTER_WIDTH / 2
        h = character.hitbox_height
        top = to_screen_y(character.vertical_position + h)
        glBegin(GL_QUADS)
        glColor3f(*CHARACTER_COLOR)
        _quad(x, top, CHARACTER_WIDTH, h)
        glColor3f(*CHARACTER_HEAD_COLOR)
        _quad(x, top, CHARACTER_WIDTH, h / 3)
        glEnd()

    def _draw_obstacles(self, obstacles) -> None:  # pragma: no cover - visual
        glBegin(GL_QUADS)
        for ob in obstacles:
            glColor3f(*(TRAIN_COLOR if ob.kind is ObstacleKind.TRAIN else BARRIER_COLOR))
            x = lane_center_x(ob.lane) - ob.width / 2
            bottom = ob.position_from_far + ob.elevation
            _quad(x, to_screen_y(bottom + ob.height), ob.width, ob.height)
        glEnd()

    def _draw_coins(self, coins) -> None:  # pragma: no cover - visual
        glColor3f(*COIN_COLOR)
        glBegin(GL_QUADS)
        for coin in coins:
            x = lane_center_x(coin.lane) - COIN_SIZE / 2
            top = to_screen_y(coin.position_from_far + COIN_LIFT + COIN_SIZE)
            _quad(x, top, COIN_SIZE, COIN_SIZE)
        glEnd()

    def _draw_buttons(self) -> None:  # pragma: no cover - visual
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glColor4f(*BUTTON_COLOR)
        for cx, cy, radius in TOUCH_BUTTONS.values():
            glBegin(GL_TRIANGLE_FAN)
            glVertex2f(cx, cy)
            for i in range(25):
                a = 2.0 * math.pi * i / 24
                glVertex2f(cx + math.cos(a) * radius, cy + math.sin(a) * radius)
            glEnd()
        glDisable(GL_BLEND)

    def draw_overlay(self) -> None:  # pragma: no cover - visual
        """Dim the whole track (pause and game-over screens)."""
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glColor4f(*OVERLAY_COLOR)
        glBegin(GL_QUADS)
        _quad(0, HUD_HEIGHT, WIDTH, HEIGHT)
        glEnd()
        glDisable(GL_BLEND)


__all__ = ["TrackRenderer", "to_screen_y"]

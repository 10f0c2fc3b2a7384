"""Screen-space text for the HUD and overlays.

pygame renders each label to a surface, which is uploaded once as a GL
texture and drawn as a quad. Labels that change every frame (score, coins)
pass a ``key`` so they reuse one texture and only re-upload on change.
Must be used between ``begin()``/``end()`` with a GL context current.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame
from OpenGL.GL import (
    GL_BLEND,
    GL_LINEAR,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_QUADS,
    GL_RGBA,
    GL_SRC_ALPHA,
    GL_TEXTURE_2D,
    GL_TEXTURE_MAG_FILTER,
    GL_TEXTURE_MIN_FILTER,
    GL_UNSIGNED_BYTE,
    glBegin,
    glBindTexture,
    glBlendFunc,
    glColor4f,
    glDisable,
    glEnable,
    glEnd,
    glGenTextures,
    glTexCoord2f,
    glTexImage2D,
    glTexParameteri,
    glVertex2f,
)

Color = Tuple[int, int, int, int]


@dataclass
class _Label:
    tex_id: int
    size: Tuple[int, int] = (0, 0)
    text: Optional[str] = None


class TextRenderer:
    def __init__(self, size: int = 28, font: Optional[pygame.font.Font] = None) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = font or pygame.font.Font(None, size)
        self._static: Dict[Tuple[str, Color], _Label] = {}
        self._keyed: Dict[str, _Label] = {}

    def begin(self) -> None:  # pragma: no cover - visual
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_TEXTURE_2D)

    def end(self) -> None:  # pragma: no cover - visual
        glDisable(GL_TEXTURE_2D)
        glDisable(GL_BLEND)

    def _upload(self, label: _Label, text: str, color: Color) -> None:  # pragma: no cover - visual
        surf = self.font.render(text, True, color)
        data = pygame.image.tostring(surf, "RGBA", True)
        w, h = surf.get_width(), surf.get_height()
        glBindTexture(GL_TEXTURE_2D, label.tex_id)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        label.size = (w, h)
        label.text = text

    def _label(self, text: str, color: Color, key: Optional[str]) -> _Label:  # pragma: no cover - visual
        if key is None:
            label = self._static.get((text, color))
            if label is None:
                label = _Label(tex_id=glGenTextures(1))
                self._upload(label, text, color)
                self._static[(text, color)] = label
            return label
        label = self._keyed.get(key)
        if label is None:
            label = _Label(tex_id=glGenTextures(1))
            self._keyed[key] = label
        if label.text != text:
            self._upload(label, text, color)
        return label

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color = (255, 255, 255, 255),
        *,
        key: Optional[str] = None,
        align: str = "topleft",
    ) -> Tuple[int, int]:  # pragma: no cover - visual
        """Draw one line at screen coords; ``align`` is topleft, topright or center."""
        label = self._label(text, color, key)
        w, h = label.size
        if align == "center":
            x, y = x - w / 2, y - h / 2
        elif align == "topright":
            x = x - w

        glBindTexture(GL_TEXTURE_2D, label.tex_id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        # tostring(..., True) flips rows, so v runs bottom-up
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y + h)
        glEnd()
        return w, h

    def draw_lines(self, lines: list[str], x: float, y: float, *, spacing: float = 1.3, color: Color = (255, 255, 255, 255)) -> None:  # pragma: no cover - visual
        """Draw lines centered on ``x``, starting at ``y``."""
        line_h = self.font.get_height() * spacing
        for i, line in enumerate(lines):
            self.draw_text(line, x, y + i * line_h, color, align="center")


__all__ = ["TextRenderer"]

"""HUD strip and overlay text for the runner.

The text for each screen is built by plain functions so it can be checked
without a GL context; ``TrackHUD`` only positions and draws it.
"""

from __future__ import annotations

from typing import Optional

from config import HEIGHT, HUD_HEIGHT, WIDTH
from core.session import SessionSnapshot, Status

TITLE_LINES = [
    "VG DASH",
    "Run, jump, slide & collect coins!",
    "",
    "Press Enter to play",
    "Arrows / WASD to move, jump and slide",
    "P or Esc to pause, M to mute",
]


def title_lines(high_score: int) -> list[str]:
    lines = list(TITLE_LINES)
    lines.insert(2, f"High score: {high_score}")
    return lines


def status_lines(snapshot: SessionSnapshot, *, new_best: bool = False) -> list[str]:
    """Overlay text for the paused and game-over screens (empty while running)."""
    if snapshot.status is Status.PAUSED:
        return ["Game Paused", "", "P / Esc: resume", "R: restart", "Q: exit to menu"]
    if snapshot.status is Status.GAME_OVER:
        lines = ["Game Over!", "", f"Score: {snapshot.score}", f"Coins collected: {snapshot.coins}"]
        if new_best:
            lines.append("New High Score!")
        lines += ["", "R: play again", "Q: back to menu"]
        return lines
    return []


class TrackHUD:
    def __init__(self, text=None) -> None:
        # GL is only needed once something is drawn
        from ui.text_renderer import TextRenderer

        self.text = text or TextRenderer()
        self.big = TextRenderer(size=44)

    def draw(
        self,
        snapshot: Optional[SessionSnapshot],
        *,
        high_score: int,
        new_best: bool = False,
        muted: bool = False,
    ) -> None:  # pragma: no cover - visual
        self.text.begin()
        if snapshot is None:
            lines = title_lines(high_score)
            self.big.draw_text(lines[0], WIDTH / 2, HUD_HEIGHT + HEIGHT / 4, align="center")
            self.text.draw_lines(lines[1:], WIDTH / 2, HUD_HEIGHT + HEIGHT / 4 + 40)
        else:
            self.text.draw_text(f"Score: {snapshot.score}", 16, 18, key="score")
            self.text.draw_text(f"Coins: {snapshot.coins}", WIDTH / 2, 30, key="coins", align="center")
            self.text.draw_text(f"Best: {high_score}", WIDTH - 16, 18, key="best", align="topright")
            lines = status_lines(snapshot, new_best=new_best)
            if lines:
                self.big.draw_text(lines[0], WIDTH / 2, HUD_HEIGHT + HEIGHT / 3, align="center")
                self.text.draw_lines(lines[1:], WIDTH / 2, HUD_HEIGHT + HEIGHT / 3 + 30)
        if muted:
            self.text.draw_text("muted", WIDTH - 16, HUD_HEIGHT - 24, key="muted", align="topright")
        self.text.end()


__all__ = ["TrackHUD", "status_lines", "title_lines"]

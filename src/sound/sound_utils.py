"""Sound effects for game events, backed by pygame.mixer.

The session only emits event names (``jump``, ``coin``, ``crash``); this
registry maps each name to a loaded Sound and plays it. Muting, a missing
file or an unavailable audio device all turn playback into a silent no-op.

Usage:

    from sound.sound_utils import Sounds

    Sounds.load_events(SOUND_FILES, SOUNDS_DIR)
    session.on_sound_event(Sounds.play)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

import pygame

from config import MUTE

logger = logging.getLogger(__name__)


class Sounds:
    _inited: bool = False
    _failed_init: bool = False
    _sounds: Dict[str, pygame.mixer.Sound] = {}
    _missing_warned: set[str] = set()
    muted: bool = MUTE

    @classmethod
    def ensure_init(cls) -> bool:
        """Initialize pygame.mixer if needed. Safe to call repeatedly."""
        if cls._inited:
            return True
        if cls._failed_init:
            return False
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=512)
            cls._inited = pygame.mixer.get_init() is not None
        except pygame.error as e:  # pragma: no cover - environment dependent
            logger.warning("audio unavailable, sounds disabled: %s", e)
            cls._failed_init = True
            return False
        return cls._inited

    @classmethod
    def is_available(cls) -> bool:
        return cls._inited and pygame.mixer.get_init() is not None

    @classmethod
    def load(cls, key: str, path: Path | str, *, volume: Optional[float] = None) -> Optional[pygame.mixer.Sound]:
        """Load a sound file under ``key``; missing files are skipped with a note."""
        path = Path(path)
        if not path.exists():
            logger.info("no sound file for %r at %s", key, path)
            return None
        if not cls.ensure_init():
            return None
        try:
            snd = pygame.mixer.Sound(str(path))
        except pygame.error as e:  # pragma: no cover - file/codec dependent
            logger.warning("failed to load sound %r from %s: %s", key, path, e)
            return None
        if volume is not None:
            snd.set_volume(max(0.0, min(1.0, float(volume))))
        cls._sounds[key] = snd
        return snd

    @classmethod
    def load_events(cls, files: Mapping[str, tuple[str, float]], directory: Path) -> int:
        """Load every ``event -> (filename, volume)`` entry. Returns how many loaded."""
        loaded = 0
        for key, (filename, volume) in files.items():
            if cls.load(key, Path(directory) / filename, volume=volume) is not None:
                loaded += 1
        return loaded

    @classmethod
    def clear(cls) -> None:
        cls._sounds.clear()
        cls._missing_warned.clear()

    @classmethod
    def is_loaded(cls, key: str) -> bool:
        return key in cls._sounds

    @classmethod
    def toggle_mute(cls) -> bool:
        cls.muted = not cls.muted
        logger.info("sound %s", "muted" if cls.muted else "unmuted")
        return cls.muted

    @classmethod
    def play(cls, key: str) -> Optional[pygame.mixer.Channel]:
        """Play the sound registered for a game event. Never raises."""
        if cls.muted or not cls.is_available():
            return None
        snd = cls._sounds.get(key)
        if snd is None:
            if key not in cls._missing_warned:
                logger.debug("sound event %r has no loaded sound", key)
                cls._missing_warned.add(key)
            return None
        ch = pygame.mixer.find_channel(True)
        if ch is None:
            return None
        ch.play(snd)
        return ch


__all__ = ["Sounds"]

"""
Background music for the game, through pygame.mixer.

Audio is optional: a missing file or an unavailable audio device is
logged and the game carries on silently.
"""

import logging
from typing import Optional

import pygame

logger = logging.getLogger(__name__)


class MusicPlayer:
    """Fire-and-forget music stream. Does nothing when no path is configured."""

    def __init__(self, music_path: Optional[str] = None):
        self.music_path = music_path
        self.enabled = False
        self.playing = False

        if not music_path:
            return
        try:
            pygame.mixer.init()
            pygame.mixer.music.load(music_path)
            self.enabled = True
        except pygame.error as e:
            logger.warning(f"Could not load music '{music_path}': {e}. Playing without sound.")

    def play(self):
        if not self.enabled or self.playing:
            return
        try:
            pygame.mixer.music.play(-1)  # -1 means loop indefinitely
            self.playing = True
        except pygame.error as e:
            logger.warning(f"Could not start music: {e}")

    def stop(self):
        if not self.playing:
            return
        pygame.mixer.music.stop()
        self.playing = False

    def close(self):
        self.stop()
        if self.enabled:
            pygame.mixer.quit()
            self.enabled = False

"""In-process player using pygame's mixer.

Plays MP3 files without spawning a process. The mixer is initialized on
first use and left running for subsequent files.
"""

import logging

import pygame

from qtts.errors import PlaybackError
from qtts.players.base import IPlayer

logger = logging.getLogger(__name__)


class PygamePlayer(IPlayer):
    """Plays audio files through pygame.mixer.music.

    Attributes:
        poll_interval_ms: How often to check whether playback finished.
    """

    def __init__(self, poll_interval_ms: int = 50) -> None:
        self.poll_interval_ms = poll_interval_ms

    def play(self, file_path: str) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.music.load(file_path)
            pygame.mixer.music.play()
        except pygame.error as e:
            logger.error("pygame could not play %s: %s", file_path, e)
            raise PlaybackError(f"pygame could not play {file_path}: {e}") from e

        # Block until done
        while pygame.mixer.music.get_busy():
            pygame.time.wait(self.poll_interval_ms)

"""Player interface.

A player renders an audio file synchronously. It returns once playback has
finished and raises PlaybackError when the file could not be played.
"""

from abc import ABC, abstractmethod


class IPlayer(ABC):
    """Abstract interface for audio players."""

    @abstractmethod
    def play(self, file_path: str) -> None:
        """Play an audio file and block until it finishes.

        Args:
            file_path: Path to the audio file.

        Raises:
            PlaybackError: If the file could not be played.
        """

    def get_name(self) -> str:
        """Get player name for logging."""
        return type(self).__name__

"""External mplayer process player.

Requires the ``mplayer`` executable on PATH.
"""

import logging
import subprocess

from qtts.errors import PlaybackError
from qtts.players.base import IPlayer

logger = logging.getLogger(__name__)


class MPlayer(IPlayer):
    """Plays audio files by running mplayer as a child process.

    The process exit status is the playback outcome: a non-zero status or a
    missing executable is raised as PlaybackError.

    Examples:
        >>> MPlayer().play("audio/en_5eb63bbbe01eeed093cb22bb8f5acdc3.mp3")
    """

    COMMAND = "mplayer"
    CACHE_KB = 8092

    def build_command(self, file_path: str) -> list[str]:
        """Get the argument vector used to play a file."""
        return [self.COMMAND, "-cache", str(self.CACHE_KB), file_path]

    def play(self, file_path: str) -> None:
        command = self.build_command(file_path)
        logger.debug("Running %s", " ".join(command))

        try:
            subprocess.run(command, capture_output=True, check=True)
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode(errors="replace")[:200]
            logger.error("mplayer failed (status %d): %s", e.returncode, stderr)
            raise PlaybackError(
                f"mplayer exited with status {e.returncode} for {file_path}"
            ) from e
        except FileNotFoundError as e:
            logger.error("mplayer not found")
            raise PlaybackError("mplayer not found - required for default playback") from e

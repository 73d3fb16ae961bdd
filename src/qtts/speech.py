"""Speak text through a cached cloud text-to-speech service.

Speech turns text into an MP3 via the synthesis backend, keeps the file in
a flat cache folder named after the language and the text digest, and
plays it with the configured player.

Typical usage:
    from qtts import Speech, SpeechSettings

    speech = Speech(SpeechSettings(folder="audio/", language="en"))
    speech.speak("hello world")  # synthesizes once, then plays from disk

Cached files are never refreshed or removed. The existence of a file at
the artifact path is what makes it a cache hit.
"""

import logging
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from pathlib import Path

from qtts.cache_key import artifact_path, generate_hash_name
from qtts.errors import (
    ArtifactCreateError,
    ArtifactWriteError,
    SpeechError,
    SynthesisConnectionError,
    SynthesisRequestError,
)
from qtts.players.mplayer import MPlayer
from qtts.settings import SpeechSettings
from qtts.synthesis.base import SpeechBackend, SynthesisRequest
from qtts.synthesis.google_cloud import GoogleCloudBackend

logger = logging.getLogger(__name__)


def _read_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


# Mode a plain open() would give new files under the process umask
ARTIFACT_MODE = 0o666 & ~_read_umask()


@dataclass
class _PathLock:
    """Lock for one artifact path and the number of threads holding or awaiting it."""

    lock: threading.Lock
    users: int = 0


class Speech:
    """Cache-keyed synthesizer and playback dispatcher.

    Thread Safety:
        Concurrent calls for the same uncached text are serialized per
        artifact path, so the backend is asked only once. Other calls run
        independently.

    Attributes:
        settings: Speech settings.
        backend: Synthesis backend used on cache misses.
    """

    def __init__(
        self,
        settings: SpeechSettings,
        backend: SpeechBackend | None = None,
    ) -> None:
        """Initialize speech.

        Args:
            settings: Speech settings.
            backend: Synthesis backend. If None, uses Google Cloud TTS.
        """
        self.settings = settings
        self.backend = backend or GoogleCloudBackend(settings.credentials_path)

        self._locks_guard = threading.Lock()
        self._artifact_locks: dict[str, _PathLock] = {}

    def speak(self, text: str) -> None:
        """Synthesize (or reuse) the audio for text and play it.

        Playback is not attempted if the artifact cannot be produced.

        Args:
            text: Text to speak.

        Raises:
            SpeechError: If synthesis, caching or playback fails.
        """
        path = self.resolve_artifact_path(text)
        self.play_speech_file(path)

    def resolve_artifact_path(self, text: str) -> str:
        """Get the path of the cached artifact for text, creating it if needed.

        Args:
            text: Text to synthesize.

        Returns:
            Artifact path ("{folder}{language}_{md5hex}.mp3").
        """
        return self.create_speech_file(text, generate_hash_name(self.settings.language, text))

    def create_speech_file(self, text: str, file_name: str) -> str:
        """Create a speech file with a given name unless it already exists.

        Args:
            text: Text to synthesize.
            file_name: File stem, without folder or extension.

        Returns:
            Path of the speech file.
        """
        path = artifact_path(self.settings.folder, file_name)
        self.ensure_artifact(path, text)
        return path

    def play_speech_file(self, path: str) -> None:
        """Play an existing audio file.

        Uses the configured player, or a new MPlayer if none is set. The
        player's errors propagate unchanged.
        """
        player = self.settings.player
        if player is None:
            player = MPlayer()

        logger.debug("Playing %s with %s", path, player.get_name())
        player.play(path)

    def ensure_artifact(self, path: str, text: str) -> None:
        """Synthesize text into path unless a file is already there.

        Args:
            path: Artifact path.
            text: Text to synthesize on a miss.

        Raises:
            SynthesisConnectionError: If the backend could not be reached.
            SynthesisRequestError: If the backend failed the request.
            ArtifactCreateError: If the artifact file could not be created.
            ArtifactWriteError: If the audio could not be written.
        """
        if os.path.exists(path):
            logger.debug("Cache hit: %s", path)
            return

        with self._artifact_lock(path):
            # Another thread may have created it while we waited
            if os.path.exists(path):
                logger.debug("Cache hit after wait: %s", path)
                return

            audio = self._synthesize(text)
            self._write_artifact(path, audio)

        logger.info("Cached %d bytes for %r -> %s", len(audio), text[:30], path)

    @contextmanager
    def _artifact_lock(self, path: str) -> Iterator[None]:
        """Hold the lock for path; the entry is dropped once nobody needs it."""
        with self._locks_guard:
            entry = self._artifact_locks.get(path)
            if entry is None:
                entry = _PathLock(threading.Lock())
                self._artifact_locks[path] = entry
            entry.users += 1

        try:
            with entry.lock:
                yield
        finally:
            with self._locks_guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._artifact_locks[path]

    def _synthesize(self, text: str) -> bytes:
        """Request audio for text over a connection scoped to this call."""
        request = SynthesisRequest(
            text=text,
            language_code=self.settings.language,
            gender=self.settings.gender,
        )

        stack = ExitStack()
        try:
            session = stack.enter_context(self.backend.connect())
        except SpeechError:
            raise
        except Exception as e:
            logger.error("Failed to connect to %s: %s", self.backend.get_name(), e)
            raise SynthesisConnectionError(f"failed to create TTS client: {e}") from e

        try:
            return session.synthesize(request)
        except SpeechError:
            raise
        except Exception as e:
            logger.error("Synthesis failed for %r: %s", text[:30], e)
            raise SynthesisRequestError(f"failed to synthesize speech: {e}") from e
        finally:
            # A failed release never masks the request outcome
            try:
                stack.close()
            except Exception as e:
                logger.warning("Failed to close %s connection: %s", self.backend.get_name(), e)

    def _write_artifact(self, path: str, audio: bytes) -> None:
        """Write audio to a temporary file and rename it to path.

        The artifact only appears once the full payload is on disk; a failed
        write leaves nothing at path.
        """
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
        except OSError as e:
            logger.error("Cannot create %s: %s", path, e)
            raise ArtifactCreateError(f"failed to create file {path}: {e}", path) from e

        try:
            with os.fdopen(fd, "wb") as output:
                output.write(audio)
            os.chmod(temp_name, ARTIFACT_MODE)
            os.replace(temp_name, path)
        except OSError as e:
            logger.error("Cannot write %s: %s", path, e)
            try:
                os.unlink(temp_name)
            except OSError:
                pass
            raise ArtifactWriteError(
                f"failed to write audio content to file {path}: {e}", path
            ) from e

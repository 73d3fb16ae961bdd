"""Synthesis backend interface.

A backend hands out short-lived sessions. Each session wraps one open
connection to the synthesis service and is closed when the ``with`` block
exits, whether or not the request succeeded.

Typical usage:
    with backend.connect() as session:
        audio = session.synthesize(request)
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from dataclasses import dataclass
from enum import Enum

from qtts.voice import VoiceGender


class AudioEncoding(Enum):
    """Audio encodings requested from the synthesis service."""

    MP3 = "MP3"


@dataclass(frozen=True)
class SynthesisRequest:
    """A single text-to-speech request.

    Attributes:
        text: Literal text to synthesize.
        language_code: Language code (e.g., "en", "en-US").
        gender: Requested voice gender.
        audio_encoding: Output encoding. Artifacts are always MP3.
    """

    text: str
    language_code: str
    gender: VoiceGender = VoiceGender.NEUTRAL
    audio_encoding: AudioEncoding = AudioEncoding.MP3


class ISynthesisSession(ABC):
    """An open connection to the synthesis service."""

    @abstractmethod
    def synthesize(self, request: SynthesisRequest) -> bytes:
        """Synthesize speech and return the complete audio payload.

        Args:
            request: Request to send.

        Returns:
            Encoded audio bytes.
        """


class SpeechBackend(ABC):
    """Factory for synthesis sessions."""

    @abstractmethod
    def connect(self) -> AbstractContextManager[ISynthesisSession]:
        """Open a session that is closed when the context exits."""

    def get_name(self) -> str:
        """Get backend name for logging."""
        return type(self).__name__

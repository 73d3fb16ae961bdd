"""Google Cloud Text-to-Speech backend.

A fresh TextToSpeechClient is created for every session and its transport
is closed when the session ends. Credentials come from the environment
(application default credentials) unless a service account file is given.

Typical usage:
    backend = GoogleCloudBackend()
    with backend.connect() as session:
        mp3 = session.synthesize(SynthesisRequest("hello", "en"))
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from google.cloud import texttospeech
from google.oauth2 import service_account

from qtts.synthesis.base import (
    AudioEncoding,
    ISynthesisSession,
    SpeechBackend,
    SynthesisRequest,
)
from qtts.voice import VoiceGender

logger = logging.getLogger(__name__)

_GENDERS = {
    VoiceGender.MALE: texttospeech.SsmlVoiceGender.MALE,
    VoiceGender.FEMALE: texttospeech.SsmlVoiceGender.FEMALE,
    VoiceGender.NEUTRAL: texttospeech.SsmlVoiceGender.NEUTRAL,
}

_ENCODINGS = {
    AudioEncoding.MP3: texttospeech.AudioEncoding.MP3,
}


class GoogleCloudSession(ISynthesisSession):
    """Session bound to one open TextToSpeechClient."""

    def __init__(self, client: texttospeech.TextToSpeechClient) -> None:
        self._client = client

    def synthesize(self, request: SynthesisRequest) -> bytes:
        """Send a blocking synthesize_speech call.

        Args:
            request: Request to send.

        Returns:
            Complete audio content from the response.
        """
        response = self._client.synthesize_speech(
            input=texttospeech.SynthesisInput(text=request.text),
            voice=texttospeech.VoiceSelectionParams(
                language_code=request.language_code,
                ssml_gender=_GENDERS[request.gender],
            ),
            audio_config=texttospeech.AudioConfig(
                audio_encoding=_ENCODINGS[request.audio_encoding],
            ),
        )
        return response.audio_content


class GoogleCloudBackend(SpeechBackend):
    """Synthesis backend backed by Google Cloud Text-to-Speech.

    Attributes:
        credentials_path: Optional service account JSON file. If None,
            application default credentials are used.
    """

    def __init__(self, credentials_path: str | None = None) -> None:
        self.credentials_path = credentials_path

    def _create_client(self) -> texttospeech.TextToSpeechClient:
        if self.credentials_path:
            credentials = service_account.Credentials.from_service_account_file(
                self.credentials_path
            )
            return texttospeech.TextToSpeechClient(credentials=credentials)
        return texttospeech.TextToSpeechClient()

    @contextmanager
    def connect(self) -> Iterator[GoogleCloudSession]:
        """Open a client for the duration of the ``with`` block."""
        client = self._create_client()
        logger.debug("Opened Google Cloud TTS client")
        try:
            yield GoogleCloudSession(client)
        finally:
            client.transport.close()
            logger.debug("Closed Google Cloud TTS client")

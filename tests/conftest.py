"""Shared fixtures for qtts tests."""

import pytest

from qtts.settings import SpeechSettings
from speech_stubs import RecordingPlayer, StubBackend


@pytest.fixture
def backend() -> StubBackend:
    """Create a stub synthesis backend."""
    return StubBackend()


@pytest.fixture
def player() -> RecordingPlayer:
    """Create a recording player."""
    return RecordingPlayer()


@pytest.fixture
def folder(tmp_path) -> str:
    """Get an artifact folder prefix inside the test's temp dir."""
    return f"{tmp_path}/audio/"


@pytest.fixture
def settings(folder: str, player: RecordingPlayer) -> SpeechSettings:
    """Create English settings that play through the recording player."""
    return SpeechSettings(folder=folder, language="en", voice="", player=player)

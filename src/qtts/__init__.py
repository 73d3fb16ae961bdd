"""qtts - cached cloud text-to-speech.

Synthesizes text with Google Cloud Text-to-Speech, caches each result as an
MP3 named after the language and text digest, and plays it with a
pluggable player.

Typical usage:
    from qtts import Speech, SpeechSettings
    from qtts.players import PygamePlayer

    speech = Speech(SpeechSettings(folder="audio/", language="en", voice="female"))
    speech.speak("hello world")

    quiet = Speech(speech.settings.with_player(PygamePlayer()))
    quiet.speak("hello again")
"""

from qtts.cache_key import generate_hash_name
from qtts.errors import (
    ArtifactCreateError,
    ArtifactError,
    ArtifactWriteError,
    PlaybackError,
    SettingsError,
    SpeechError,
    SynthesisConnectionError,
    SynthesisError,
    SynthesisRequestError,
)
from qtts.players import IPlayer, MPlayer, PygamePlayer
from qtts.settings import SpeechSettings
from qtts.speech import Speech
from qtts.version import __version__, get_version
from qtts.voice import VoiceGender, parse_gender

__all__ = [
    # Core
    "Speech",
    "SpeechSettings",
    "generate_hash_name",
    "VoiceGender",
    "parse_gender",
    # Players
    "IPlayer",
    "MPlayer",
    "PygamePlayer",
    # Errors
    "SpeechError",
    "SettingsError",
    "SynthesisError",
    "SynthesisConnectionError",
    "SynthesisRequestError",
    "ArtifactError",
    "ArtifactCreateError",
    "ArtifactWriteError",
    "PlaybackError",
    # Version
    "__version__",
    "get_version",
]

"""Exception hierarchy for qtts.

Every failure surfaced by the library is a SpeechError subclass that names
the phase that failed. The underlying cause is always chained.

Hierarchy:
    SpeechError
    ├── SettingsError
    ├── SynthesisError
    │   ├── SynthesisConnectionError
    │   └── SynthesisRequestError
    ├── ArtifactError
    │   ├── ArtifactCreateError
    │   └── ArtifactWriteError
    └── PlaybackError
"""


class SpeechError(Exception):
    """Base class for all qtts errors."""


class SettingsError(SpeechError):
    """Speech settings could not be loaded or saved."""


class SynthesisError(SpeechError):
    """Remote synthesis failed."""


class SynthesisConnectionError(SynthesisError):
    """Could not open a connection to the synthesis service."""


class SynthesisRequestError(SynthesisError):
    """The synthesis service rejected or failed the request."""


class ArtifactError(SpeechError):
    """The cached audio artifact could not be persisted.

    Attributes:
        path: Artifact path that was being written.
    """

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class ArtifactCreateError(ArtifactError):
    """The artifact file could not be created."""


class ArtifactWriteError(ArtifactError):
    """The audio payload could not be written to the artifact file."""


class PlaybackError(SpeechError):
    """The player failed to render an audio file."""

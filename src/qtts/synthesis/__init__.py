"""Remote speech synthesis.

Components:
    - base.py: SynthesisRequest and the SpeechBackend/session interfaces
    - google_cloud.py: Google Cloud Text-to-Speech backend
"""

from qtts.synthesis.base import (
    AudioEncoding,
    ISynthesisSession,
    SpeechBackend,
    SynthesisRequest,
)
from qtts.synthesis.google_cloud import GoogleCloudBackend, GoogleCloudSession

__all__ = [
    "AudioEncoding",
    "ISynthesisSession",
    "SpeechBackend",
    "SynthesisRequest",
    "GoogleCloudBackend",
    "GoogleCloudSession",
]

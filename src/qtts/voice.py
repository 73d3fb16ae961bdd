"""Voice gender selection.

Voice descriptors are free-form strings. Only "male" and "female" (any
casing) select a gendered voice; everything else is neutral.
"""

from enum import Enum


class VoiceGender(Enum):
    """SSML voice gender requested from the synthesis service."""

    NEUTRAL = "NEUTRAL"
    MALE = "MALE"
    FEMALE = "FEMALE"


def parse_gender(voice: str | None) -> VoiceGender:
    """Map a voice descriptor to a VoiceGender.

    Args:
        voice: Voice descriptor (e.g., "male", "Female", "").

    Returns:
        MALE or FEMALE on a case-insensitive match, NEUTRAL otherwise.

    Examples:
        >>> parse_gender("Male")
        <VoiceGender.MALE: 'MALE'>
        >>> parse_gender("robot")
        <VoiceGender.NEUTRAL: 'NEUTRAL'>
    """
    normalized = (voice or "").upper()
    if normalized == "MALE":
        return VoiceGender.MALE
    if normalized == "FEMALE":
        return VoiceGender.FEMALE
    return VoiceGender.NEUTRAL

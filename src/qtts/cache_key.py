"""Content-derived names for cached speech artifacts.

Artifacts live in a flat folder and are named after the language code and
the MD5 digest of the literal text:

    audio/
    ├── en_5eb63bbbe01eeed093cb22bb8f5acdc3.mp3   # "hello world"
    └── fr_5eb63bbbe01eeed093cb22bb8f5acdc3.mp3   # same text, French

The text is hashed as-is. Whitespace, casing and punctuation differences
produce different artifacts.
"""

import hashlib

ARTIFACT_EXTENSION = ".mp3"


def text_digest(text: str) -> str:
    """Get the lowercase hex MD5 digest of the UTF-8 encoded text."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def generate_hash_name(language: str, text: str) -> str:
    """Get the artifact file stem for a (language, text) pair.

    Args:
        language: Language code used for synthesis (e.g., "en", "fr-FR").
        text: Text to synthesize.

    Returns:
        File stem of the form "{language}_{md5hex}".
    """
    return f"{language}_{text_digest(text)}"


def artifact_path(folder: str, file_name: str) -> str:
    """Build the artifact path for a file stem.

    The folder is used as a plain prefix, so it should end with a path
    separator (e.g., "audio/").
    """
    return folder + file_name + ARTIFACT_EXTENSION

"""Speech settings.

Settings are fixed once a Speech instance is built. They can be created in
code or loaded from a YAML file such as:

    speech:
      folder: audio/
      language: en
      voice: female
      player: pygame

Typical usage:
    from qtts.settings import SpeechSettings

    settings = SpeechSettings.load("~/.qtts/settings.yaml")
    speech = Speech(settings)
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from qtts.errors import SettingsError
from qtts.players import PLAYERS, IPlayer, create_player
from qtts.voice import VoiceGender, parse_gender

logger = logging.getLogger(__name__)

SETTINGS_SECTION = "speech"


@dataclass(frozen=True)
class SpeechSettings:
    """Immutable speech configuration.

    Attributes:
        folder: Artifact folder, used as a plain path prefix (e.g., "audio/").
        language: Language code for synthesis and cache keys (e.g., "en").
        voice: Voice descriptor; "male"/"female" select a gender.
        player: Player to use, or None for the default mplayer process.
        credentials_path: Optional Google service account JSON file.
    """

    folder: str
    language: str
    voice: str = ""
    player: IPlayer | None = None
    credentials_path: str | None = None

    @property
    def gender(self) -> VoiceGender:
        """Get the normalized voice gender."""
        return parse_gender(self.voice)

    def with_player(self, player: IPlayer | None) -> "SpeechSettings":
        """Get a copy of these settings using another player."""
        return replace(self, player=player)

    def player_name(self) -> str | None:
        """Get the settings name of the configured player, if it has one."""
        if self.player is None:
            return None
        for name, player_cls in PLAYERS.items():
            if type(self.player) is player_cls:
                return name
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for YAML serialization."""
        data: dict[str, Any] = {
            "folder": self.folder,
            "language": self.language,
            "voice": self.voice,
        }
        name = self.player_name()
        if name:
            data["player"] = name
        if self.credentials_path:
            data["credentials_path"] = self.credentials_path
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SpeechSettings":
        """Create from dictionary.

        Raises:
            SettingsError: If folder or language is missing, or the player
                name is unknown.
        """
        missing = [key for key in ("folder", "language") if not data.get(key)]
        if missing:
            raise SettingsError(f"Missing speech settings: {', '.join(missing)}")

        credentials_path = data.get("credentials_path")
        return cls(
            folder=str(data["folder"]),
            language=str(data["language"]),
            voice=str(data.get("voice") or ""),
            player=create_player(data.get("player")),
            credentials_path=str(credentials_path) if credentials_path else None,
        )

    @classmethod
    def load(cls, path: Path | str) -> "SpeechSettings":
        """Load settings from a YAML file.

        The mapping may be at the top level or under a ``speech`` key.

        Args:
            path: Settings file path ("~" is expanded).

        Returns:
            Loaded settings.

        Raises:
            SettingsError: If the file is missing, unreadable or invalid.
        """
        settings_path = Path(path).expanduser()
        try:
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise SettingsError(f"Cannot read settings file {settings_path}: {e}") from e
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML in {settings_path}: {e}") from e

        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {settings_path} must contain a mapping")
        section = data.get(SETTINGS_SECTION, data)
        if not isinstance(section, dict):
            raise SettingsError(f"'{SETTINGS_SECTION}' in {settings_path} must be a mapping")

        settings = cls.from_dict(section)
        logger.info("Loaded speech settings from %s", settings_path)
        return settings

    def save(self, path: Path | str) -> None:
        """Save settings to a YAML file under the ``speech`` key.

        Raises:
            SettingsError: If the file cannot be written.
        """
        settings_path = Path(path).expanduser()
        try:
            settings_path.parent.mkdir(parents=True, exist_ok=True)
            with open(settings_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(
                    {SETTINGS_SECTION: self.to_dict()},
                    f,
                    default_flow_style=False,
                    allow_unicode=True,
                )
        except OSError as e:
            raise SettingsError(f"Cannot write settings file {settings_path}: {e}") from e

        logger.info("Saved speech settings to %s", settings_path)

"""Tests for SpeechSettings."""

import dataclasses
from pathlib import Path

import pytest
import yaml

from qtts.errors import SettingsError
from qtts.players import MPlayer, PygamePlayer, create_player
from qtts.settings import SpeechSettings
from qtts.voice import VoiceGender


class TestSpeechSettings:
    """Test suite for SpeechSettings."""

    def test_defaults(self) -> None:
        """Test only folder and language are required."""
        settings = SpeechSettings(folder="audio/", language="en")
        assert settings.voice == ""
        assert settings.player is None
        assert settings.gender is VoiceGender.NEUTRAL

    def test_immutable(self) -> None:
        """Test settings cannot be changed after construction."""
        settings = SpeechSettings(folder="audio/", language="en")
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.language = "fr"  # type: ignore[misc]

    def test_gender_normalized(self) -> None:
        """Test voice descriptor is normalized case-insensitively."""
        assert SpeechSettings("a/", "en", voice="FeMaLe").gender is VoiceGender.FEMALE

    def test_with_player_returns_copy(self) -> None:
        """Test with_player leaves the original untouched."""
        settings = SpeechSettings(folder="audio/", language="en")
        player = MPlayer()

        updated = settings.with_player(player)

        assert updated.player is player
        assert settings.player is None

    def test_to_dict_names_known_player(self) -> None:
        """Test known players are serialized by name."""
        settings = SpeechSettings("audio/", "en", voice="male", player=PygamePlayer())
        assert settings.to_dict() == {
            "folder": "audio/",
            "language": "en",
            "voice": "male",
            "player": "pygame",
        }

    def test_from_dict(self) -> None:
        """Test creating settings from a mapping."""
        settings = SpeechSettings.from_dict(
            {"folder": "cache/", "language": "fr", "voice": "female", "player": "mplayer"}
        )
        assert settings.folder == "cache/"
        assert settings.language == "fr"
        assert settings.gender is VoiceGender.FEMALE
        assert isinstance(settings.player, MPlayer)

    def test_credentials_path_round_trip(self) -> None:
        """Test credentials_path survives to_dict/from_dict and is coerced to str."""
        settings = SpeechSettings("audio/", "en", credentials_path="/secrets/tts.json")

        assert SpeechSettings.from_dict(settings.to_dict()) == settings
        assert SpeechSettings.from_dict(
            {"folder": "a/", "language": "en", "credentials_path": Path("/secrets/tts.json")}
        ).credentials_path == "/secrets/tts.json"

    def test_from_dict_requires_folder_and_language(self) -> None:
        """Test missing required keys raise SettingsError."""
        with pytest.raises(SettingsError, match="folder, language"):
            SpeechSettings.from_dict({"voice": "male"})

    def test_from_dict_unknown_player(self) -> None:
        """Test an unknown player name raises SettingsError."""
        with pytest.raises(SettingsError, match="vlc"):
            SpeechSettings.from_dict({"folder": "a/", "language": "en", "player": "vlc"})


class TestSpeechSettingsYaml:
    """Tests for YAML persistence."""

    def test_save_and_load(self, tmp_path) -> None:
        """Test settings survive a save/load cycle."""
        path = tmp_path / "nested" / "settings.yaml"
        original = SpeechSettings("audio/", "de", voice="male", player=PygamePlayer())

        original.save(path)
        loaded = SpeechSettings.load(path)

        assert loaded.to_dict() == original.to_dict()
        assert yaml.safe_load(path.read_text(encoding="utf-8"))["speech"]["language"] == "de"

    def test_save_and_load_credentials_path(self, tmp_path) -> None:
        """Test credentials_path is persisted in the YAML file."""
        path = tmp_path / "settings.yaml"
        SpeechSettings("audio/", "en", credentials_path="/secrets/tts.json").save(path)

        assert SpeechSettings.load(path).credentials_path == "/secrets/tts.json"

    def test_load_top_level_mapping(self, tmp_path) -> None:
        """Test settings may sit at the top level of the file."""
        path = tmp_path / "settings.yaml"
        path.write_text("folder: audio/\nlanguage: en\n", encoding="utf-8")

        settings = SpeechSettings.load(path)

        assert settings.folder == "audio/"
        assert settings.player is None

    def test_load_missing_file(self, tmp_path) -> None:
        """Test a missing file raises SettingsError."""
        with pytest.raises(SettingsError):
            SpeechSettings.load(tmp_path / "missing.yaml")

    def test_load_invalid_yaml(self, tmp_path) -> None:
        """Test malformed YAML raises SettingsError."""
        path = tmp_path / "settings.yaml"
        path.write_text("speech: [unclosed\n", encoding="utf-8")

        with pytest.raises(SettingsError, match="Invalid YAML"):
            SpeechSettings.load(path)

    def test_load_non_mapping(self, tmp_path) -> None:
        """Test a YAML list is rejected."""
        path = tmp_path / "settings.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(SettingsError, match="mapping"):
            SpeechSettings.load(path)


class TestCreatePlayer:
    """Tests for create_player."""

    @pytest.mark.parametrize("name", [None, ""])
    def test_default(self, name: str | None) -> None:
        """Test no name means the default player."""
        assert create_player(name) is None

    def test_case_insensitive(self) -> None:
        """Test player names ignore case."""
        assert isinstance(create_player("PyGame"), PygamePlayer)

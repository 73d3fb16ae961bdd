"""Audio players.

Components:
    - base.py: IPlayer interface
    - mplayer.py: default player, runs the external mplayer process
    - pygame_player.py: in-process player using pygame.mixer
"""

from qtts.errors import SettingsError
from qtts.players.base import IPlayer
from qtts.players.mplayer import MPlayer
from qtts.players.pygame_player import PygamePlayer

PLAYERS: dict[str, type[IPlayer]] = {
    "mplayer": MPlayer,
    "pygame": PygamePlayer,
}


def create_player(name: str | None) -> IPlayer | None:
    """Create a player from its settings name.

    Args:
        name: Player name ("mplayer", "pygame") or None/"" for the default.

    Returns:
        New player instance, or None when the default should be used.

    Raises:
        SettingsError: If the name is unknown.
    """
    if not name:
        return None
    try:
        return PLAYERS[name.lower()]()
    except KeyError:
        raise SettingsError(
            f"Unknown player {name!r} (expected one of: {', '.join(PLAYERS)})"
        ) from None


__all__ = ["IPlayer", "MPlayer", "PygamePlayer", "PLAYERS", "create_player"]

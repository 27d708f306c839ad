from typing import Dict, Any, Optional

from mediamenu.domain import PlayerChoice
from mediamenu.interfaces import IPlayerDriver
from mediamenu.drivers.ffplay_driver import FfplayDriver
from mediamenu.drivers.mplayer_driver import MplayerDriver
from mediamenu.drivers.mpv_driver import MpvDriver
from mediamenu.drivers.process_backend import PsutilProcessBackend
from mediamenu.drivers.vlc_driver import VlcDriver

# Mapping of detected players to their respective driver classes
PLAYER_DRIVERS_MAP = {
    PlayerChoice.MPV: MpvDriver,
    PlayerChoice.MPLAYER: MplayerDriver,
    PlayerChoice.VLC: VlcDriver,
    PlayerChoice.FFPLAY: FfplayDriver,
}


def get_driver(player: PlayerChoice, app_settings: Optional[Dict[str, Any]] = None) -> IPlayerDriver:
    """
    Returns the driver that builds launch commands for the given player.

    Args:
        player (PlayerChoice): The player chosen by the locator.
        app_settings (Optional[Dict[str, Any]]): Application settings; only
            mpv reads from them (the IPC socket path).
    """
    app_settings = app_settings or {}
    if player is PlayerChoice.MPV:
        return MpvDriver(ipc_socket=app_settings.get("mpv_ipc_socket", "/tmp/mpv-socket"))
    return PLAYER_DRIVERS_MAP[player]()


__all__ = [
    "PLAYER_DRIVERS_MAP",
    "get_driver",
    "FfplayDriver",
    "MplayerDriver",
    "MpvDriver",
    "VlcDriver",
    "PsutilProcessBackend",
]

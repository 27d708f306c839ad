from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import shutil

from mediamenu.catalog import MediaCatalog, MEDIA_EXTENSIONS
from mediamenu.domain import LaunchSpec, MediaEntry, PlaybackStatus, PlayerChoice, PlayMode, SupervisorState
from mediamenu.drivers import PsutilProcessBackend, get_driver
from mediamenu.interfaces import IProcessBackend, IStateSlot
from mediamenu.locator import Resolver, locate
from mediamenu.repository import PidFileSlot
from mediamenu.services import PlaybackSupervisor
from mediamenu import settings as settings_mgr


def build_supervisor(app_settings: Optional[Dict[str, Any]] = None,
                     resolver: Optional[Resolver] = None,
                     backend: Optional[IProcessBackend] = None,
                     state_slot: Optional[IStateSlot] = None) -> Tuple[PlayerChoice, PlaybackSupervisor]:
    """
    Detects the player and assembles a supervisor around it.

    Raises NoPlayerAvailable if no supported player is installed.
    """
    if app_settings is None:
        app_settings = settings_mgr.load_settings()
    player = locate(resolver or shutil.which, preferred=app_settings.get("preferred_player"))
    supervisor = PlaybackSupervisor(
        driver=get_driver(player, app_settings),
        backend=backend or PsutilProcessBackend(),
        state_slot=state_slot or PidFileSlot(Path(app_settings["state_file"]).expanduser()),
        settle_delay=float(app_settings.get("settle_delay", 0.2)),
        stop_grace=float(app_settings.get("stop_grace", 0.2)),
    )
    return player, supervisor


__all__ = [
    "build_supervisor",
    "MediaCatalog",
    "MEDIA_EXTENSIONS",
    "LaunchSpec",
    "MediaEntry",
    "PlaybackStatus",
    "PlayerChoice",
    "PlayMode",
    "SupervisorState",
    "PidFileSlot",
    "PlaybackSupervisor",
    "locate",
]

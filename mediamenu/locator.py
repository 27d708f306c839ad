"""Detection of the first available playback executable."""
import logging
import shutil
from typing import Callable, Optional

from mediamenu.domain import PlayerChoice
from mediamenu.errors import NoPlayerAvailable

logger = logging.getLogger(__name__)

Resolver = Callable[[str], Optional[str]]

PLAYER_PRIORITY = (
    PlayerChoice.MPV,
    PlayerChoice.MPLAYER,
    PlayerChoice.VLC,
    PlayerChoice.FFPLAY,
)


def _candidates(preferred: Optional[str]):
    if not preferred:
        return PLAYER_PRIORITY
    try:
        first = PlayerChoice(preferred.lower())
    except ValueError:
        logger.warning("Unknown preferred player %r, using default order", preferred)
        return PLAYER_PRIORITY
    return (first,) + tuple(p for p in PLAYER_PRIORITY if p is not first)


def locate(resolver: Optional[Resolver] = None, preferred: Optional[str] = None) -> PlayerChoice:
    """
    Returns the first player whose executable the resolver can find.

    Raises NoPlayerAvailable when no candidate resolves.
    """
    resolver = resolver or shutil.which
    candidates = _candidates(preferred)
    for player in candidates:
        path = resolver(player.executable)
        if path:
            logger.info("Using %s at %s", player.value, path)
            return player
        logger.debug("%s not found", player.executable)
    raise NoPlayerAvailable(p.executable for p in PLAYER_PRIORITY)

import logging
from typing import List

from mediamenu.domain import LaunchSpec, PlayerChoice, PlayMode
from mediamenu.errors import UnsupportedModeForPlayer
from mediamenu.interfaces import IPlayerDriver

logger = logging.getLogger(__name__)


class FfplayDriver(IPlayerDriver):
    """
    ffplay accepts a single input. "Play all" degrades to the first file in
    catalog order; shuffle is refused.
    """
    player = PlayerChoice.FFPLAY

    def __init__(self, player_executable_path: str = "ffplay"):
        self.player_executable_path = player_executable_path

    def build_command(self, launch_spec: LaunchSpec) -> List[str]:
        if launch_spec.mode is PlayMode.SHUFFLE:
            raise UnsupportedModeForPlayer(self.player, launch_spec.mode)

        paths = launch_spec.paths[:1]
        if launch_spec.mode is PlayMode.ALL and len(launch_spec.paths) > 1:
            logger.warning(
                "ffplay plays one file at a time; playing only %s", paths[0]
            )
        return [self.player_executable_path, "-nodisp", "-autoexit", *paths]

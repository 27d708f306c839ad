from typing import List

from mediamenu.domain import LaunchSpec, PlayerChoice
from mediamenu.interfaces import IPlayerDriver


class MplayerDriver(IPlayerDriver):
    player = PlayerChoice.MPLAYER

    def __init__(self, player_executable_path: str = "mplayer"):
        self.player_executable_path = player_executable_path

    def build_command(self, launch_spec: LaunchSpec) -> List[str]:
        return [self.player_executable_path, *launch_spec.paths]

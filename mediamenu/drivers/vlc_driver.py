from typing import List

from mediamenu.domain import LaunchSpec, PlayerChoice
from mediamenu.interfaces import IPlayerDriver


class VlcDriver(IPlayerDriver):
    """
    Runs VLC headless: dummy interface, exiting once the playlist is done.
    """
    player = PlayerChoice.VLC

    def __init__(self, player_executable_path: str = "vlc"):
        self.player_executable_path = player_executable_path

    def build_command(self, launch_spec: LaunchSpec) -> List[str]:
        return [
            self.player_executable_path,
            "--intf", "dummy",
            "--play-and-exit",
            *launch_spec.paths,
        ]

from typing import List

from mediamenu.domain import LaunchSpec, PlayerChoice, PlayMode
from mediamenu.interfaces import IPlayerDriver

DEFAULT_IPC_SOCKET = "/tmp/mpv-socket"


class MpvDriver(IPlayerDriver):
    player = PlayerChoice.MPV

    def __init__(self, player_executable_path: str = "mpv", ipc_socket: str = DEFAULT_IPC_SOCKET):
        self.player_executable_path = player_executable_path
        self.ipc_socket = ipc_socket

    def build_command(self, launch_spec: LaunchSpec) -> List[str]:
        command = [self.player_executable_path, "--no-terminal"]
        # Only single-file playback exposes the IPC server
        if launch_spec.mode is PlayMode.SINGLE and self.ipc_socket:
            command.append(f"--input-ipc-server={self.ipc_socket}")
        command.append("--really-quiet")
        command.append("--")
        command.extend(launch_spec.paths)
        return command

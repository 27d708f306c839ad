import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class PlayerChoice(Enum):
    """Supported external players, in detection priority order."""
    MPV = "mpv"
    MPLAYER = "mplayer"
    VLC = "vlc"
    FFPLAY = "ffplay"

    @property
    def executable(self) -> str:
        return self.value


class PlayMode(Enum):
    SINGLE = "single"
    ALL = "all"
    SHUFFLE = "shuffle"


class SupervisorState(Enum):
    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class MediaEntry:
    """A playable file found in the top level of the media directory."""
    name: str
    path: str

    @property
    def display_name(self) -> str:
        """The name with undecodable bytes replaced, safe to print. Spawn with path."""
        return os.fsencode(self.name).decode("utf-8", "replace")


@dataclass(frozen=True)
class LaunchSpec:
    """Player, mode and concrete file arguments for a single spawn."""
    player: PlayerChoice
    mode: PlayMode
    paths: Tuple[str, ...] = ()


@dataclass
class PlaybackStatus:
    """Snapshot returned by the supervisor when asked what is playing."""
    state: SupervisorState = SupervisorState.IDLE
    pid: Optional[int] = None
    description: Optional[str] = None  # best-effort command line
    launch_spec: Optional[LaunchSpec] = field(default=None, compare=False)

    @property
    def is_running(self) -> bool:
        return self.state is SupervisorState.RUNNING

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from mediamenu.domain import LaunchSpec, PlayerChoice


class IPlayerDriver(ABC):
    """Abstract Base Class for media player drivers."""

    player: PlayerChoice

    @abstractmethod
    def build_command(self, launch_spec: LaunchSpec) -> List[str]:
        """
        Builds the argument vector used to launch the player.

        Args:
            launch_spec (LaunchSpec): Mode and file paths to play.

        Returns:
            List[str]: The command, executable first.

        Raises:
            UnsupportedModeForPlayer: If the player cannot handle the mode.
        """
        pass


class IProcessBackend(ABC):
    """Abstract Base Class for the operating system process operations."""

    @abstractmethod
    def spawn_detached(self, command: Sequence[str]) -> int:
        """
        Starts a command in its own session and returns its process id.

        Raises:
            OSError: If the executable cannot be started.
        """
        pass

    @abstractmethod
    def terminate(self, pid: int) -> bool:
        """
        Sends a termination signal to a process.

        Returns:
            bool: True if the signal was delivered, False if the process was already gone.
        """
        pass

    @abstractmethod
    def is_alive(self, pid: int) -> bool:
        """Non-destructive existence check; exited or zombie processes are not alive."""
        pass

    @abstractmethod
    def list_children(self, pid: int) -> List[int]:
        """Returns the ids of the direct children of a process, or an empty list."""
        pass

    @abstractmethod
    def describe(self, pid: int) -> Optional[str]:
        """Returns the command line of a process for display, or None."""
        pass

    @abstractmethod
    def exit_code(self, pid: int) -> Optional[int]:
        """Returns the exit status of a process spawned by this backend, or None while it runs."""
        pass


class IStateSlot(ABC):
    """Abstract Base Class for the persisted record of the active player process."""

    @abstractmethod
    def read(self) -> Optional[int]:
        """
        Reads the recorded process id.

        Returns:
            Optional[int]: The process id, or None if nothing usable is recorded.
        """
        pass

    @abstractmethod
    def write(self, pid: int) -> None:
        """
        Records a process id, replacing any previous value.

        Args:
            pid (int): The process id to persist.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Removes the recorded process id."""
        pass

import logging
import os
import random
import time
from typing import Callable, Iterable, List, Optional, Set, Tuple

from mediamenu.domain import LaunchSpec, PlaybackStatus, PlayerChoice, PlayMode, SupervisorState
from mediamenu.errors import LaunchFailure
from mediamenu.interfaces import IPlayerDriver, IProcessBackend, IStateSlot

logger = logging.getLogger(__name__)


class PlaybackSupervisor:
    """
    Owns the lifecycle of at most one background player process.

    The state slot is the only record of what is playing. Nothing kept in
    memory is needed to query or stop a player, so a new supervisor can take
    over a player started by an earlier run.
    """

    def __init__(self, driver: IPlayerDriver, backend: IProcessBackend, state_slot: IStateSlot,
                 settle_delay: float = 0.2, stop_grace: float = 0.2,
                 sleep: Callable[[float], None] = time.sleep,
                 rng: Optional[random.Random] = None):
        self.driver = driver
        self.backend = backend
        self.state_slot = state_slot
        self.settle_delay = settle_delay
        self.stop_grace = stop_grace
        self._sleep = sleep
        self._rng = rng or random.Random()
        # (pid, launch spec) of the player started by this instance, for display only
        self._session = None

    @property
    def player(self) -> PlayerChoice:
        return self.driver.player

    def build_launch_spec(self, mode: PlayMode, paths: Iterable[str]) -> LaunchSpec:
        """
        Resolves a play mode and candidate files into a launch spec.
        Shuffle draws a new random order on every call.
        """
        paths = list(paths)
        if not paths:
            raise LaunchFailure("No media files found.")
        if mode is PlayMode.SINGLE:
            paths = paths[:1]
        elif mode is PlayMode.SHUFFLE:
            self._rng.shuffle(paths)
        return LaunchSpec(player=self.player, mode=mode, paths=tuple(paths))

    def play(self, mode: PlayMode, paths: Iterable[str]) -> PlaybackStatus:
        return self.start(self.build_launch_spec(mode, paths))

    def start(self, launch_spec: LaunchSpec) -> PlaybackStatus:
        """
        Stops any current player, then spawns a detached one for the launch spec.

        Raises:
            UnsupportedModeForPlayer: The player cannot handle the mode; current playback is left alone.
            LaunchFailure: The player could not be spawned or exited during the settle delay.
        """
        command = self.driver.build_command(launch_spec)
        self.stop()

        try:
            pid = self.backend.spawn_detached(command)
        except OSError as e:
            raise LaunchFailure(f"Could not start {command[0]}: {e}") from e

        try:
            self.state_slot.write(pid)
        except OSError as e:
            self.backend.terminate(pid)
            raise LaunchFailure(f"Could not record player process {pid}: {e}") from e
        self._session = (pid, launch_spec)

        self._sleep(self.settle_delay)
        code = self.backend.exit_code(pid)
        if code is not None and code != 0:
            self.state_slot.clear()
            self._session = None
            raise LaunchFailure(f"{command[0]} exited immediately with status {code}.")

        logger.info("Started %s (pid %d) in %s mode", self.player.value, pid, launch_spec.mode.value)
        return PlaybackStatus(
            state=SupervisorState.RUNNING,
            pid=pid,
            description=" ".join(command),
            launch_spec=launch_spec,
        )

    def stop(self) -> bool:
        """
        Terminates the recorded player and its direct children, then clears the slot.

        Returns:
            bool: True if a live player was stopped, False if nothing was running.
        """
        recorded = self._recorded_player()
        if recorded is None:
            self.state_slot.clear()
            self._session = None
            return False
        pid = recorded[0]

        # Collected up front: once the parent exits its children are reparented
        children: List[int] = self.backend.list_children(pid)
        self.backend.terminate(pid)
        self._sleep(self.stop_grace)
        for child in self.backend.list_children(pid):
            if child not in children:
                children.append(child)
        for child in children:
            if self.backend.is_alive(child):
                logger.debug("Terminating leftover child %d of %d", child, pid)
                self.backend.terminate(child)
        if self.backend.is_alive(pid):
            logger.warning("Player pid %d is still running after SIGTERM", pid)

        self.state_slot.clear()
        self._session = None
        logger.info("Stopped player pid %d", pid)
        return True

    def query(self) -> PlaybackStatus:
        """Reports whether the recorded player is alive. A stale slot is left for stop/start to clear."""
        recorded = self._recorded_player()
        if recorded is None:
            return PlaybackStatus()
        pid, description = recorded
        launch_spec = None
        if self._session and self._session[0] == pid:
            launch_spec = self._session[1]
        return PlaybackStatus(
            state=SupervisorState.RUNNING,
            pid=pid,
            description=description,
            launch_spec=launch_spec,
        )

    def shutdown(self) -> bool:
        return self.stop()

    def _player_executables(self) -> Set[str]:
        names = {player.executable for player in PlayerChoice}
        executable = getattr(self.driver, "player_executable_path", None)
        if executable:
            names.add(os.path.basename(executable))
        return names

    def _is_player_command(self, description: Optional[str]) -> bool:
        # An unreadable command line cannot rule the process out
        argv = description.split() if description else []
        if not argv:
            return True
        return os.path.basename(argv[0]) in self._player_executables()

    def _recorded_player(self) -> Optional[Tuple[int, Optional[str]]]:
        """
        Returns (pid, command line) of the recorded process if it is alive and
        still looks like a media player; a reused pid is treated as stale.
        """
        pid = self.state_slot.read()
        if pid is None:
            return None
        if not self.backend.is_alive(pid):
            logger.info("Recorded player pid %d is no longer running", pid)
            return None
        description = self.backend.describe(pid)
        if not self._is_player_command(description):
            logger.warning("Pid %d now belongs to %r, not a media player; ignoring it", pid, description)
            return None
        return pid, description

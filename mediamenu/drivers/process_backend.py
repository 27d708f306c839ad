import logging
import subprocess
from typing import Dict, List, Optional, Sequence

import psutil

from mediamenu.interfaces import IProcessBackend

logger = logging.getLogger(__name__)


class PsutilProcessBackend(IProcessBackend):
    """
    Spawns players with subprocess in a new session and inspects or signals
    them through psutil. Processes started here are kept as Popen handles
    until they exit, then reaped so no zombie is left behind.
    """

    def __init__(self, reap_timeout: float = 0.5):
        self.reap_timeout = reap_timeout
        self._spawned: Dict[int, subprocess.Popen] = {}

    def _reap_finished(self) -> None:
        for pid, process in list(self._spawned.items()):
            if process.poll() is not None:
                del self._spawned[pid]

    def spawn_detached(self, command: Sequence[str]) -> int:
        self._reap_finished()
        logger.info("Launching: %s", " ".join(command))
        process = subprocess.Popen(
            list(command),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
        self._spawned[process.pid] = process
        return process.pid

    def exit_code(self, pid: int) -> Optional[int]:
        process = self._spawned.get(pid)
        if process is None:
            return None
        code = process.poll()
        if code is not None:
            del self._spawned[pid]
        return code

    def is_alive(self, pid: int) -> bool:
        if pid <= 0:
            return False
        self._reap_finished()
        try:
            proc = psutil.Process(pid)
            return proc.is_running() and proc.status() != psutil.STATUS_ZOMBIE
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            return False

    def terminate(self, pid: int) -> bool:
        try:
            psutil.Process(pid).terminate()
        except psutil.NoSuchProcess:
            return False
        except psutil.AccessDenied:
            logger.warning("Not permitted to signal process %d", pid)
            return False
        logger.debug("Sent SIGTERM to %d", pid)
        process = self._spawned.get(pid)
        if process is not None:
            try:
                process.wait(timeout=self.reap_timeout)
            except subprocess.TimeoutExpired:
                logger.debug("Process %d still exiting, reaping later", pid)
            else:
                del self._spawned[pid]
        return True

    def list_children(self, pid: int) -> List[int]:
        try:
            return [child.pid for child in psutil.Process(pid).children()]
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            return []

    def describe(self, pid: int) -> Optional[str]:
        try:
            proc = psutil.Process(pid)
            cmdline = proc.cmdline()
            return " ".join(cmdline) if cmdline else proc.name()
        except psutil.Error:
            return None

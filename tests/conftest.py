import pytest

from mediamenu.drivers import MpvDriver
from mediamenu.interfaces import IProcessBackend
from mediamenu.repository import PidFileSlot
from mediamenu.services import PlaybackSupervisor


class FakeProcessBackend(IProcessBackend):
    """In-memory process table that records every call made to it."""

    def __init__(self, first_pid=1000):
        self.calls = []
        self.alive = set()
        self.children = {}
        self.exit_codes = {}
        self.commands = {}
        self.spawn_error = None
        self._next_pid = first_pid

    def spawn_detached(self, command):
        self.calls.append(("spawn", list(command)))
        if self.spawn_error is not None:
            raise self.spawn_error
        pid = self._next_pid
        self._next_pid += 1
        self.alive.add(pid)
        self.commands[pid] = list(command)
        return pid

    def terminate(self, pid):
        self.calls.append(("terminate", pid))
        if pid not in self.alive:
            return False
        self.alive.discard(pid)
        return True

    def is_alive(self, pid):
        return pid in self.alive

    def list_children(self, pid):
        if pid not in self.alive:
            return []
        return list(self.children.get(pid, []))

    def describe(self, pid):
        if pid not in self.commands:
            return None
        return " ".join(self.commands[pid])

    def exit_code(self, pid):
        return self.exit_codes.get(pid)


@pytest.fixture
def backend():
    return FakeProcessBackend()


@pytest.fixture
def slot(tmp_path):
    return PidFileSlot(tmp_path / "player.pid")


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def supervisor(backend, slot, sleeps):
    return PlaybackSupervisor(
        driver=MpvDriver(),
        backend=backend,
        state_slot=slot,
        sleep=sleeps.append,
    )


@pytest.fixture
def media_dir(tmp_path):
    d = tmp_path / "media"
    d.mkdir()
    for name in ["b.mp4", "a.mp3", "c.txt", "D.FLAC", "notes.md"]:
        (d / name).write_bytes(b"")
    (d / "sub.mkv").mkdir()
    return d

import os

import pytest

from mediamenu import repository
from mediamenu.repository import PidFileSlot


def test_empty_slot_reads_none(tmp_path):
    assert PidFileSlot(tmp_path / "p.pid").read() is None


def test_write_then_read(tmp_path):
    slot = PidFileSlot(tmp_path / "p.pid")
    slot.write(4242)
    assert slot.read() == 4242
    assert (tmp_path / "p.pid").read_text() == "4242\n"


def test_write_overwrites_previous_value(tmp_path):
    slot = PidFileSlot(tmp_path / "p.pid")
    slot.write(1)
    slot.write(2)
    assert slot.read() == 2


def test_write_leaves_no_temp_files(tmp_path):
    PidFileSlot(tmp_path / "p.pid").write(7)
    assert [p.name for p in tmp_path.iterdir()] == ["p.pid"]


def test_write_creates_parent_directory(tmp_path):
    slot = PidFileSlot(tmp_path / "state" / "p.pid")
    slot.write(9)
    assert slot.read() == 9


def test_clear_is_idempotent(tmp_path):
    slot = PidFileSlot(tmp_path / "p.pid")
    slot.write(5)
    slot.clear()
    slot.clear()
    assert slot.read() is None


def test_garbage_content_reads_none(tmp_path):
    path = tmp_path / "p.pid"
    for content in ["", "abc", "-3", "0"]:
        path.write_text(content)
        assert PidFileSlot(path).read() is None


def test_separate_instances_share_the_file(tmp_path):
    PidFileSlot(tmp_path / "p.pid").write(31337)
    assert PidFileSlot(tmp_path / "p.pid").read() == 31337


def test_failed_open_closes_descriptor_and_removes_temp_file(tmp_path, monkeypatch):
    created = []
    real_mkstemp = repository.tempfile.mkstemp

    def recording_mkstemp(*args, **kwargs):
        fd, path = real_mkstemp(*args, **kwargs)
        created.append(fd)
        return fd, path

    def failing_fdopen(*args, **kwargs):
        raise OSError("fdopen failed")

    monkeypatch.setattr(repository.tempfile, "mkstemp", recording_mkstemp)
    monkeypatch.setattr(repository.os, "fdopen", failing_fdopen)
    with pytest.raises(OSError):
        PidFileSlot(tmp_path / "p.pid").write(11)

    with pytest.raises(OSError):
        os.fstat(created[0])
    assert list(tmp_path.iterdir()) == []

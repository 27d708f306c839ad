import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from mediamenu.interfaces import IStateSlot

logger = logging.getLogger(__name__)


class PidFileSlot(IStateSlot):
    """
    Concrete implementation of IStateSlot that keeps the player's process id
    as plain text in a single file.

    Writes go to a temporary file in the same directory which is then renamed
    over the slot, so a concurrent reader sees either the old or the new id.
    """
    def __init__(self, storage_file: Path):
        self.storage_file = Path(storage_file)

    def read(self) -> Optional[int]:
        try:
            raw = self.storage_file.read_text(encoding='utf-8').strip()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning("Could not read %s: %s", self.storage_file, e)
            return None
        try:
            pid = int(raw)
        except ValueError:
            logger.warning("Ignoring malformed state file %s: %r", self.storage_file, raw)
            return None
        return pid if pid > 0 else None

    def write(self, pid: int) -> None:
        self.storage_file.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.storage_file.parent, prefix=f".{self.storage_file.name}."
        )
        try:
            f = os.fdopen(fd, 'w', encoding='utf-8')
        except BaseException:
            os.close(fd)
            os.unlink(tmp_path)
            raise
        try:
            with f:
                f.write(f"{pid}\n")
            os.replace(tmp_path, self.storage_file)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def clear(self) -> None:
        try:
            self.storage_file.unlink()
        except FileNotFoundError:
            pass

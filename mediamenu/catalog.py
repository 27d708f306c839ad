import logging
import os
from typing import Iterator, List, Optional

from mediamenu.domain import MediaEntry
from mediamenu.errors import DirectoryUnreadable, InvalidSelection, OutOfRange

logger = logging.getLogger(__name__)

MEDIA_EXTENSIONS = frozenset({
    "mp3", "wav", "flac", "aac", "ogg", "m4a",
    "mp4", "mkv", "webm", "avi",
})


def has_media_extension(name: str, extensions=MEDIA_EXTENSIONS) -> bool:
    _, ext = os.path.splitext(name)
    return ext[1:].lower() in extensions


class MediaCatalog:
    """
    Lists the playable files in the top level of a directory.

    Nothing is cached: every call rescans the directory so the listing
    always reflects what is on disk.
    """

    def __init__(self, directory: str, extensions=MEDIA_EXTENSIONS):
        self.directory = os.path.abspath(directory)
        self.extensions = frozenset(e.lower().lstrip(".") for e in extensions)
        self.last_error: Optional[DirectoryUnreadable] = None

    def iter_entries(self) -> Iterator[MediaEntry]:
        """Yields media entries sorted by name. Each call starts a fresh scan."""
        self.last_error = None
        try:
            with os.scandir(self.directory) as it:
                names = [
                    e.name for e in it
                    if e.is_file(follow_symlinks=False) and has_media_extension(e.name, self.extensions)
                ]
        except OSError as e:
            self.last_error = DirectoryUnreadable(self.directory, e.strerror)
            logger.warning("%s", self.last_error)
            return
        for name in sorted(names):
            yield MediaEntry(name=name, path=os.path.join(self.directory, name))

    def list(self) -> List[MediaEntry]:
        return list(self.iter_entries())

    def paths(self) -> List[str]:
        return [entry.path for entry in self.iter_entries()]

    def resolve(self, index: int) -> MediaEntry:
        """Returns the entry at a 1-based index, raising OutOfRange outside [1, count]."""
        entries = self.list()
        if not 1 <= index <= len(entries):
            raise OutOfRange(index, len(entries))
        return entries[index - 1]

    @staticmethod
    def parse_selection(text: str) -> int:
        """Converts user input into an index; non-numeric input is an InvalidSelection."""
        try:
            return int(text.strip())
        except (AttributeError, ValueError):
            raise InvalidSelection(f"Invalid selection: {text!r} is not a number.")

import os
from typing import List, Sequence

from mediamenu.domain import MediaEntry, PlaybackStatus


def display_text(text: str) -> str:
    """
    Replaces surrogate-escaped bytes (undecodable file names) so the text
    can be written to a strict UTF-8 terminal.
    """
    return os.fsencode(text).decode("utf-8", "replace")


def format_numbered_list(entries: Sequence[MediaEntry]) -> List[str]:
    """
    Returns one line per entry, numbered from 1 (e.g. " 1. song.mp3").
    """
    return [f"{i:>2}. {entry.display_name}" for i, entry in enumerate(entries, start=1)]


def format_status(status: PlaybackStatus) -> List[str]:
    """Human-readable lines describing what is playing."""
    if not status.is_running:
        return ["Nothing is playing right now."]
    lines = [f"Player running (PID {status.pid})."]
    if status.launch_spec is not None:
        spec = status.launch_spec
        count = len(spec.paths)
        noun = "file" if count == 1 else "files"
        lines.append(f"Mode: {spec.mode.value}, {count} {noun}")
    if status.description:
        lines.append(display_text(status.description))
    return lines

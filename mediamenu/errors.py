"""Exceptions raised by the media menu core."""


class MediaMenuError(Exception):
    """Base class for all recoverable and fatal media menu errors."""


class NoPlayerAvailable(MediaMenuError):
    """None of the supported player executables could be found."""

    def __init__(self, candidates):
        self.candidates = list(candidates)
        names = ", ".join(self.candidates)
        super().__init__(f"No supported media player found. Install one of: {names}.")


class DirectoryUnreadable(MediaMenuError):
    """The media directory is missing or cannot be listed."""

    def __init__(self, directory, reason=None):
        self.directory = directory
        self.reason = reason
        message = f"Cannot read media directory: {directory}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidSelection(MediaMenuError):
    """A menu selection could not be interpreted."""


class OutOfRange(InvalidSelection):
    """A 1-based index fell outside the catalog."""

    def __init__(self, index, count):
        self.index = index
        self.count = count
        if count == 0:
            message = f"Invalid index {index}: no media files available."
        else:
            message = f"Invalid index {index}: choose a number between 1 and {count}."
        super().__init__(message)


class LaunchFailure(MediaMenuError):
    """The player could not be started, or exited immediately."""


class UnsupportedModeForPlayer(LaunchFailure):
    """The detected player cannot handle the requested play mode."""

    def __init__(self, player, mode):
        self.player = player
        self.mode = mode
        super().__init__(f"{player.value} does not support {mode.value} playback.")

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

# Local application imports
from mediamenu import build_supervisor
from mediamenu.catalog import MediaCatalog
from mediamenu.domain import PlayerChoice, PlayMode
from mediamenu.errors import MediaMenuError, NoPlayerAvailable
from mediamenu.services import PlaybackSupervisor
from mediamenu.settings import DEFAULT_SETTINGS_PATH, load_settings
from mediamenu.utils import display_text, format_numbered_list, format_status

# === CONSTANTS & CONFIGURATION ===
SEPARATOR = "-" * 40
MENU_OPTIONS = [
    ("1", "List media files"),
    ("2", "Play file by number"),
    ("3", "Play all files"),
    ("4", "Shuffle and play"),
    ("5", "Stop playback"),
    ("6", "Show now playing"),
    ("7", "Refresh / Show file list with numbers"),
    ("0", "Exit"),
]

logger = logging.getLogger("mediamenu")


# === MENU CONTROLLER ===
class MenuController:
    """
    Binds numbered menu choices to catalog and supervisor operations.
    Every recoverable error is reported and the loop carries on.
    """

    def __init__(self, catalog: MediaCatalog, supervisor: PlaybackSupervisor, player: PlayerChoice,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self.catalog = catalog
        self.supervisor = supervisor
        self.player = player
        self._input = input_func
        self._write = output_func
        self.actions = {
            "1": self.list_files,
            "2": self.play_by_number,
            "3": self.play_all,
            "4": self.shuffle_and_play,
            "5": self.stop,
            "6": self.show_now_playing,
            "7": self.refresh,
        }

    def _out(self, text: str):
        # Paths and process command lines may carry undecodable bytes
        self._write(display_text(text))

    def print_menu(self):
        self._out(SEPARATOR)
        self._out(f" Media Player Menu (dir: {self.catalog.directory})")
        self._out(f" Player detected: {self.player.value}")
        for key, label in MENU_OPTIONS:
            self._out(f" {key}) {label}")
        self._out(SEPARATOR)

    def _show_listing(self, heading: str) -> List[str]:
        entries = self.catalog.list()
        if self.catalog.last_error is not None:
            self._out(str(self.catalog.last_error))
            return []
        self._out(heading)
        if not entries:
            self._out(f"No media files found in {self.catalog.directory}")
        for line in format_numbered_list(entries):
            self._out(line)
        return [e.path for e in entries]

    def list_files(self):
        self._show_listing("Media files:")

    def refresh(self):
        self._show_listing("Files:")

    def play_by_number(self):
        self._out("Select file number to play (use option 1 to see numbers):")
        if not self._show_listing("Media files:"):
            return
        index = self.catalog.parse_selection(self._input("Enter number: "))
        entry = self.catalog.resolve(index)
        self._out(f"Playing: {entry.display_name}")
        self.supervisor.play(PlayMode.SINGLE, [entry.path])

    def play_all(self):
        self._out(f"Playing all files in {self.catalog.directory}...")
        self.supervisor.play(PlayMode.ALL, self.catalog.paths())

    def shuffle_and_play(self):
        self._out("Playing shuffled playlist...")
        self.supervisor.play(PlayMode.SHUFFLE, self.catalog.paths())

    def stop(self):
        if self.supervisor.stop():
            self._out("Stopped.")
        else:
            self._out("No player is running.")

    def show_now_playing(self):
        for line in format_status(self.supervisor.query()):
            self._out(line)

    def handle(self, choice: str) -> bool:
        """Runs one menu action. Returns False when the user asked to exit."""
        choice = choice.strip()
        if choice == "0":
            return False
        action = self.actions.get(choice)
        if action is None:
            self._out("Invalid option.")
            return True
        try:
            action()
        except MediaMenuError as e:
            self._out(str(e))
        return True

    def run(self):
        try:
            while True:
                self.print_menu()
                try:
                    choice = self._input("Choose an option: ")
                except EOFError:
                    self._out("")
                    break
                if not self.handle(choice):
                    break
        except KeyboardInterrupt:
            self._out("")
        finally:
            self.supervisor.shutdown()
            self._out("Goodbye.")


# === HELPER FUNCTIONS ===
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="media-menu",
        description="Menu-based media player for a directory (mpv, mplayer, vlc or ffplay).",
    )
    parser.add_argument("directory", nargs="?", default=".",
                        help="directory to scan for media files (default: current directory)")
    parser.add_argument("--state-file", help="where the running player's PID is recorded")
    parser.add_argument("--settings", type=Path, default=DEFAULT_SETTINGS_PATH,
                        help="path to the JSON settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return parser.parse_args(argv)


def configure_logging(level_name: str, verbose: bool = False):
    level = logging.DEBUG if verbose else getattr(logging, str(level_name).upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


# === MAIN ENTRY POINT ===
def run(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = load_settings(args.settings)
    if args.state_file:
        settings["state_file"] = args.state_file
    configure_logging(settings.get("log_level", "WARNING"), args.verbose)

    try:
        player, supervisor = build_supervisor(settings)
    except NoPlayerAvailable as e:
        print(f"Error: {e}")
        return 1

    if not os.path.isdir(args.directory):
        logger.warning("%s is not a directory", args.directory)
    catalog = MediaCatalog(args.directory)
    MenuController(catalog, supervisor, player).run()
    return 0


if __name__ == "__main__":
    sys.exit(run())

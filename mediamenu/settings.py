import json
import logging
import os
from pathlib import Path
from typing import Dict, Any

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path("~/.mediamenu/settings.json").expanduser()

DEFAULT_SETTINGS: Dict[str, Any] = {
    "state_file": "/tmp/media_menu_player.pid",
    "preferred_player": None,  # mpv, mplayer, vlc, ffplay
    "settle_delay": 0.2,
    "stop_grace": 0.2,
    "mpv_ipc_socket": "/tmp/mpv-socket",
    "log_level": "WARNING",
}

# Environment variable -> (settings key, converter)
ENV_OVERRIDES = {
    "MEDIA_MENU_STATE_FILE": ("state_file", str),
    "MEDIA_MENU_PLAYER": ("preferred_player", str),
    "MEDIA_MENU_SETTLE_DELAY": ("settle_delay", float),
}


def _apply_env_overrides(settings: Dict[str, Any]) -> Dict[str, Any]:
    for env_name, (key, convert) in ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if not raw:
            continue
        try:
            settings[key] = convert(raw)
        except ValueError:
            logger.warning("Ignoring %s=%r: not a valid %s", env_name, raw, convert.__name__)
    return settings


def load_settings(settings_path: Path = DEFAULT_SETTINGS_PATH) -> Dict[str, Any]:
    """Loads application settings from a JSON file, falling back to defaults."""
    settings = dict(DEFAULT_SETTINGS)
    if settings_path.exists():
        try:
            with open(settings_path, 'r', encoding='utf-8') as f:
                stored = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read settings from %s: %s", settings_path, e)
        else:
            if isinstance(stored, dict):
                settings.update(stored)
            else:
                logger.warning("Ignoring settings file %s: expected a JSON object", settings_path)
    return _apply_env_overrides(settings)


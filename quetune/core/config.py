"""
Configuration and Keybindings

Holds runtime settings assembled from defaults, environment variables and
command-line flags. Nothing here is ever written to disk.
"""

import logging
import os
from typing import Any, Dict, List, Optional

logger = logging.getLogger("Config")

# Environment variable -> (dot key, converter)
ENV_OVERRIDES = {
    "QUETUNE_LOG_LEVEL": ("logging.level", str.upper),
    "QUETUNE_LOG_DIR": ("logging.dir", str),
    "QUETUNE_POLL_INTERVAL": ("player.poll_interval", float),
}


class ConfigManager:
    """Manages application configuration and keybindings."""

    def __init__(
        self,
        overrides: Optional[Dict[str, Any]] = None,
        environ: Optional[Dict[str, str]] = None,
    ):
        self.config = self._get_default_config()
        self.keybindings = self._get_default_keybindings()

        self._apply_environment(os.environ if environ is None else environ)
        for key, value in (overrides or {}).items():
            self.set(key, value)

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "ui": {
                "min_width": 35,
                "min_height": 15,
                "explorer_weight": 2,
                "playlist_weight": 3,
                "ascii_borders": False,
            },
            "player": {
                "poll_interval": 1.0,
                "pump_interval": 0.1,
                "extensions": ["mp3", "wav", "ogg", "flac"],
            },
            "logging": {
                "level": "INFO",
                "dir": None,
            },
        }

    def _get_default_keybindings(self) -> Dict[str, Dict[str, List[str]]]:
        """Get default keybindings, grouped by context."""
        return {
            "global": {
                "quit": ["q", "ctrl c"],
                "switch_mode": ["tab"],
                "play_pause": [" "],
                "save_playlist": ["s"],
                "next": ["n"],
                "previous": ["N"],
            },
            "list": {
                "down": ["j", "down"],
                "up": ["k", "up"],
                "first": ["g", "home"],
                "last": ["G", "end"],
            },
            "explorer": {
                "descend": ["l", "right", "enter"],
                "add": ["a"],
                "load_playlist": ["r"],
            },
            "playlist": {
                "play_selected": ["l", "right", "enter"],
                "move_up": ["K"],
                "move_down": ["J"],
                "shuffle": ["R"],
            },
        }

    def _apply_environment(self, environ) -> None:
        for var, (key, convert) in ENV_OVERRIDES.items():
            raw = environ.get(var)
            if not raw:
                continue
            try:
                self.set(key, convert(raw))
            except ValueError:
                logger.warning(f"Ignoring invalid {var}={raw!r}")

    # Configuration getters
    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key (e.g., 'ui.min_width')."""
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """Set config value by dot-notation key (in memory only)."""
        keys = key.split(".")
        config = self.config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
        logger.debug(f"Config updated: {key} = {value!r}")

    # Keybinding helpers
    def get_action_for_key(self, context: str, key: str) -> Optional[str]:
        """Get the action bound to a key within a context."""
        for action, keys in self.keybindings.get(context, {}).items():
            if key in keys:
                return action
        return None

    @property
    def min_size(self) -> tuple:
        return (int(self.get("ui.min_width")), int(self.get("ui.min_height")))

    @property
    def extensions(self) -> frozenset:
        return frozenset(self.get("player.extensions") or ())

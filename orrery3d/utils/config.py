"""
JSON configuration loader/saver.
If the file does not exist it is created with the default settings.
"""

import copy
import json
from pathlib import Path
from orrery3d.utils.logger import logger

DEFAULT_CONFIG = {
    "window": {"width": 1280, "height": 720, "title": "Orrery3D"},
    "v_sync": True,
    "show_fps": True,
    "camera": {
        "fov": 75.0,
        "near": 0.1,
        "far": 1000.0,
        "position": [0.0, 30.0, 60.0],
        "damping_factor": 0.05,
        "min_distance": 2.0,
        "max_distance": 150.0,
    },
}


class Config:
    """Settings stored in a JSON file, with per-section defaults."""

    def __init__(self, path: str = "config.json"):
        self.path = Path(path)
        self.data = {}
        self._load()

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                if not isinstance(self.data, dict):
                    raise ValueError("top level must be a JSON object")
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file - creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        """Section lookup; dict sections are merged over their defaults."""
        default = DEFAULT_CONFIG.get(key)
        value = self.data.get(key, default)
        if isinstance(default, dict):
            merged = copy.deepcopy(default)
            if isinstance(value, dict):
                merged.update(value)
            else:
                logger.warning(f"[Config] Section '{key}' is not an object, using defaults")
            return merged
        return value

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, DEFAULT_CONFIG.get(key, default))

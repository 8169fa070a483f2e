import json
from pathlib import Path
from typing import Optional


DEFAULTS = {
    "new_window_timeout": 0,
    "poll_frequency": 0.5,
    "log_level": "WARNING",
}


class SupportConfig:
    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else None
        self._config = self._load_config()

    def _load_config(self) -> dict:
        config = dict(DEFAULTS)
        if self.config_path is None:
            return config

        with open(self.config_path, 'r', encoding='utf-8') as f:
            loaded = json.load(f)

        # unknown keys are ignored
        config.update({key: value for key, value in loaded.items() if key in DEFAULTS})
        self._validate(config)
        return config

    @staticmethod
    def _validate(config: dict) -> None:
        for key in ("new_window_timeout", "poll_frequency"):
            value = config[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{key} must be a number of seconds, got {value!r}")
            if value < 0:
                raise ValueError(f"{key} can't be negative, got {value!r}")
        if config["poll_frequency"] == 0:
            raise ValueError("poll_frequency must be greater than 0")
        if not isinstance(config["log_level"], str):
            raise ValueError(f"log_level must be a level name, got {config['log_level']!r}")

    @property
    def new_window_timeout(self) -> float:
        """Seconds to wait for a new window when no timeout is passed"""
        return float(self._config['new_window_timeout'])

    @property
    def poll_frequency(self) -> float:
        return float(self._config['poll_frequency'])

    @property
    def log_level(self) -> str:
        return str(self._config['log_level']).upper()

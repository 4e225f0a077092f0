"""
Простой загрузчик/сохранитель конфигурации загрузчика в формате JSON.
Если файл не найден – используются настройки по‑умолчанию.
"""

import json
from pathlib import Path
from objmesh.utils.logger import logger

DEFAULT_CONFIG = {
    "shared": False,          # StorageMode.SHARED вместо EXCLUSIVE
    "encoding": "utf-8",      # кодировка .obj‑файлов
    "log_level": "INFO",
}

class Config:
    """Объект конфигурации, читаемый из JSON‑файла."""

    def __init__(self, path: str = "objmesh.json"):
        self.path = Path(path)
        self._load()

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("top-level JSON value must be an object")
                self.data = data
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = DEFAULT_CONFIG.copy()
        else:
            logger.debug(f"[Config] No config file at {self.path} – using defaults.")
            self.data = DEFAULT_CONFIG.copy()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)

"""Модуль для сохранения и загрузки настроек конвертера."""
import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class Settings:
    """Класс для управления настройками конвертера."""

    DEFAULT_SETTINGS = {
        "icon": {
            "sizes": [16, 32, 64, 128, 256],
            "resample_filter": "lanczos"
        },
        "performance": {
            "thread_count": 1  # 0 = auto (CPU - 1)
        }
    }

    def __init__(self, config_path: Optional[str] = None):
        """Инициализация настроек."""
        if config_path is None:
            self.config_path = self.default_config_path()
        else:
            self.config_path = Path(config_path)

        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        self.load()

    @staticmethod
    def default_config_path() -> Path:
        """Путь к настройкам по умолчанию."""
        app_data = os.getenv('APPDATA', os.path.expanduser('~'))
        return Path(app_data) / "png2ico" / "settings.json"

    def _deep_merge(self, base: Dict, updates: Dict) -> Dict:
        """Глубокое слияние словарей."""
        result = copy.deepcopy(base)
        for key, value in updates.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)
        return result

    def load(self) -> bool:
        """Загрузка настроек из файла."""
        try:
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)
                self.settings = self._deep_merge(self.DEFAULT_SETTINGS, loaded)
                return True
        except (OSError, ValueError) as e:
            logger.warning("Ошибка загрузки настроек %s: %s", self.config_path, e)
        return False

    def save(self) -> bool:
        """Сохранение настроек в файл."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, ensure_ascii=False, indent=2)
            return True
        except OSError as e:
            logger.warning("Ошибка сохранения настроек %s: %s", self.config_path, e)
            return False

    def get(self, *keys: str, default: Any = None) -> Any:
        """Получение значения по ключам."""
        result = self.settings
        for key in keys:
            if isinstance(result, dict) and key in result:
                result = result[key]
            else:
                return default
        return result

    def set(self, *keys_and_value) -> None:
        """Установка значения по ключам."""
        if len(keys_and_value) < 2:
            return

        keys = keys_and_value[:-1]
        value = keys_and_value[-1]

        current = self.settings
        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def converter_settings(self) -> Dict:
        """Плоский словарь параметров для IconConverter."""
        return {
            "resample_filter": self.get("icon", "resample_filter", default="lanczos"),
            "thread_count": self.get("performance", "thread_count", default=1),
        }

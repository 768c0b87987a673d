# ⚙️ price_preview/config/config_service.py
"""
⚙️ config_service.py: Сервіс для доступу до статичної конфігурації.

🔹 Клас `ConfigService`:
- Завантажує конфігурацію з вбудованого config.yaml, користувацького YAML, ENV (.env) та overrides.
- Надає єдиний метод .get() для доступу до будь-якого параметра (з опційним cast).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import copy                                 # 🧬 Глибокі копії секцій
import logging                              # 🧾 Логування
import os                                   # 📁 Доступ до змінних середовища
from pathlib import Path                    # 📁 Побудова шляху до файлів
from typing import Any, Callable, Dict, Mapping, Optional, Union

# 🧩 Внутрішні модулі проєкту
from price_preview.errors.custom_errors import ConfigurationError
from price_preview.shared.utils.logger import LOG_NAME


# ============================
# 🧾 ЛОГЕР ТА КОНСТАНТИ
# ============================
logger = logging.getLogger(f"{LOG_NAME}.config")

BUNDLED_CONFIG_PATH = Path(__file__).parent / "config.yaml"     # 📘 Вбудований конфіг

ENV_KEYS: Dict[str, str] = {
    "PRICE_PREVIEW_STOREFRONT_URL": "catalog.page_url_template",
    "PRICE_PREVIEW_RATES_URL": "rates.url_template",
    "PRICE_PREVIEW_TIMEOUT_SEC": "http.request_timeout_sec",
    "PRICE_PREVIEW_USER_AGENT": "http.user_agent",
    "PRICE_PREVIEW_MAX_CONCURRENCY": "http.max_concurrency",
    "PRICE_PREVIEW_LOG_LEVEL": "logging.level",
    "PRICE_PREVIEW_LOG_FILE": "logging.file",
}                                           # 🌱 ENV-змінна → крапковий ключ


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх конфігураційних параметрів проєкту.
    Джерела обʼєднуються один раз у конструкторі.
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        *,
        overrides: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
        load_env_file: bool = True,
    ) -> None:
        self._config: Dict[str, Any] = {}          # 📦 Обʼєднана конфігурація зі всіх джерел
        self._load_all_configs(config_path, overrides, environ, load_env_file)

    def _load_all_configs(
        self,
        config_path: Optional[Union[str, Path]],
        overrides: Optional[Mapping[str, Any]],
        environ: Optional[Mapping[str, str]],
        load_env_file: bool,
    ) -> None:
        """
        📥 Завантажує всі джерела конфігурації в один словник.
        Пріоритет: config.yaml → користувацький YAML → ENV → overrides
        """
        # --- 1. Вбудований YAML ---
        logger.debug("📘 Завантаження вбудованого config.yaml")
        self._deep_update(self._config, self._read_yaml(BUNDLED_CONFIG_PATH, required=True))

        # --- 2. Користувацький YAML ---
        if config_path:
            logger.debug("📘 Завантаження користувацького конфігу %s", config_path)
            self._deep_update(self._config, self._read_yaml(Path(config_path), required=True))

        # --- 3. ENV змінні ---
        if environ is None:
            if load_env_file:
                logger.debug("🔐 Завантаження змінних з .env")
                load_dotenv()                    # 🔐 Ініціалізує змінні середовища з файлу .env
            environ = os.environ
        env_vars = {
            dotted: environ[name]
            for name, dotted in ENV_KEYS.items()
            if environ.get(name) not in (None, "")
        }
        # 🔁 Перетворюємо крапкові ключі в словник та обʼєднуємо з config
        self._deep_update(self._config, self._unflatten_dict(env_vars))

        # --- 4. Явні overrides ---
        if overrides:
            self._deep_update(self._config, self._unflatten_dict(dict(overrides)))

        logger.info("✅ Конфігурацію успішно завантажено.", extra={"env_keys": sorted(env_vars)})

    @staticmethod
    def _read_yaml(path: Path, *, required: bool) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError as exc:
            if not required:
                return {}
            raise ConfigurationError(f"Config file not found: {path}") from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}", details=str(exc)) from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config root must be a mapping: {path}")
        return data

    def get(self, key: str, default: Any = None, cast: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'http.request_timeout_sec').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.
            cast (Callable | None): Перетворення знайденого значення (int, float, dict…).

        Returns:
            Any: Значення параметра або default.
        """
        value: Any = self._config
        for k in key.split("."):                  # ⛓️ Розбиваємо ключ за крапкою
            if isinstance(value, dict) and k in value:
                value = value[k]                 # 🔎 Переходимо глибше в структуру
            else:
                logger.debug("❓ Ключ '%s' не знайдено, повертаємо значення за замовчуванням", key)
                return default
        if value is None or cast is None:
            return value
        try:
            return cast(value)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid value for {key!r}: {value!r}") from exc

    def section(self, key: str) -> Dict[str, Any]:
        """📦 Повертає копію розділу конфігурації (порожній dict, якщо відсутній)."""
        node = self.get(key, {})
        return copy.deepcopy(node) if isinstance(node, dict) else {}

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================
    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'http.user_agent' → {'http': {'user_agent': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split(".")                   # 🧩 Розбиваємо ключ на частини
            d_ref = result
            for part in parts[:-1]:                  # 🔁 Ітеруємось по вкладеності
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value                 # 🧷 Вставляємо значення у найглибший рівень
        return result

    @classmethod
    def _deep_update(cls, source: Dict[str, Any], overrides: Mapping[str, Any]) -> None:
        """
        🔁 Рекурсивно обʼєднує два словника (оновлення значень).
        Якщо значення словник, обʼєднує його глибоко.
        """
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                cls._deep_update(source[key], value)  # 🔁 Глибоке обʼєднання
            else:
                source[key] = value                    # 🧩 Перезапис простого значення


__all__ = ["ConfigService", "ENV_KEYS", "BUNDLED_CONFIG_PATH"]

# 🧾 price_preview/infrastructure/catalog/_infra_options.py
"""
🧾 Налаштування транспортного шару вітрини та збирача регіонів.

🔹 Визначає іммутабельні опції (HTML-парсер, таймаут, User-Agent, шаблони URL, ліміти паралельності).
🔹 Підтримує складання з розділів ConfigService та мердж overrides.
🔹 Рядкові значення з ENV приводяться до потрібних типів з fallback на дефолт.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging	# 🧾 Логування ініціалізації та валідації
from dataclasses import dataclass	# 🧱 Dataclass для опцій
from typing import TYPE_CHECKING, Any, Dict, Literal, Mapping, Optional	# 🧰 Типи для статичного аналізу

# 🧩 Внутрішні модулі проєкту
from price_preview.errors.custom_errors import ConfigurationError	# ⚙️ Помилка некоректних опцій
from price_preview.shared.utils.logger import LOG_NAME	# 🏷️ Базове імʼя логера

if TYPE_CHECKING:	# pragma: no cover
    from price_preview.config.config_service import ConfigService

# ================================
# 🧾 ЛОГЕР ТА КОНСТАНТИ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.catalog.infra_options")	# 🧾 Модульний логер

_BOOL_TRUE = {"1", "true", "yes", "on", "y", "t"}	# ✅ Булеві true-представлення
_BOOL_FALSE = {"0", "false", "no", "off", "n", "f"}	# ❌ Булеві false-представлення
_UNLIMITED = {"", "none", "null", "0", "unlimited"}	# ♾️ Токени «без обмеження»

DEFAULT_PAGE_URL_TEMPLATE = "https://apps.apple.com/{region}/app/id{product_id}"
DEFAULT_RATES_URL_TEMPLATE = "https://open.er-api.com/v6/latest/{base}"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


# ================================
# 🛠️ ХЕЛПЕРИ КОНВЕРСІЙ
# ================================
def _parse_bool(val: Any, default: bool) -> bool:
    """🔀 Перетворює значення (bool або ENV-рядок) у bool з fallback."""
    if val is None:	# 🪣 Немає значення → дефолт
        return default
    if isinstance(val, bool):
        return val
    cleaned = str(val).strip().lower()	# 🧼 Нормалізуємо кейс/пробіли
    if cleaned in _BOOL_TRUE:
        return True
    if cleaned in _BOOL_FALSE:
        return False
    logger.warning("⚠️ Некоректне булеве значення '%s' → fallback=%s.", val, default)
    return default


def _to_float(val: Any, default_val: float) -> float:
    """🔢 Конвертує значення у float із fallback."""
    if val is None:
        return default_val
    try:
        return float(val)
    except (TypeError, ValueError):
        logger.warning("⚠️ Неможливо перетворити '%s' у float → fallback=%s.", val, default_val)
        return default_val


def _to_optional_limit(val: Any) -> Optional[int]:
    """♾️ None/0/"null" → без обмеження; інакше додатне ціле."""
    if val is None:
        return None
    if isinstance(val, str) and val.strip().lower() in _UNLIMITED:
        return None
    try:
        limit = int(val)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Expected a positive integer or null, got: {val!r}") from exc
    return limit or None


# ================================
# 🧱 МОДЕЛЬ ОПЦІЙ
# ================================
@dataclass(frozen=True, slots=True)
class CatalogInfraOptions:
    """🧱 Іммутабельні параметри транспорту вітрини, джерела курсів та збирача."""

    html_parser: Literal["lxml", "html.parser", "html5lib"] = "lxml"	# 🥣 Дефолтний парсер DOM
    request_timeout_sec: float = 30.0	# ⏱️ Таймаут запитів
    user_agent: str = DEFAULT_USER_AGENT	# 🕵️ Фіксований User-Agent
    follow_redirects: bool = True	# ↪️ Слідувати редиректам
    max_concurrency: Optional[int] = None	# 🚦 None → одна задача на регіон без семафора
    max_connections: Optional[int] = None	# 🔌 None → пул httpx без ліміту
    page_url_template: str = DEFAULT_PAGE_URL_TEMPLATE	# 🔗 Сторінка продукту
    rates_url_template: str = DEFAULT_RATES_URL_TEMPLATE	# 💱 Джерело курсів

    def __post_init__(self) -> None:
        """🛡️ Валідує інваріанти одразу після створення."""
        allowed_parsers = {"lxml", "html.parser", "html5lib"}	# ✅ Дозволені значення
        if self.html_parser not in allowed_parsers:
            raise ConfigurationError(f"html_parser must be one of {sorted(allowed_parsers)}, got: {self.html_parser!r}")
        if self.request_timeout_sec <= 0:
            raise ConfigurationError("request_timeout_sec must be > 0")
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ConfigurationError("max_concurrency must be >= 1 or null")
        if self.max_connections is not None and self.max_connections < 1:
            raise ConfigurationError("max_connections must be >= 1 or null")
        if "{region}" not in self.page_url_template or "{product_id}" not in self.page_url_template:
            raise ConfigurationError("page_url_template must contain {region} and {product_id}")
        if "{base}" not in self.rates_url_template:
            raise ConfigurationError("rates_url_template must contain {base}")
        logger.debug("🛡️ CatalogInfraOptions ініціалізовано з валідними значеннями.")

    # ================================
    # 🧱 КОНСТРУКТОРИ
    # ================================
    @classmethod
    def default(cls) -> "CatalogInfraOptions":
        """🧾 Повертає дефолтний набір опцій."""
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "CatalogInfraOptions":
        """🧾 Складання опцій із словника (зайві ключі ігноруються, рядки приводяться до типів)."""
        if not data:	# 🪣 Порожній dict → дефолт
            return cls.default()
        defaults = cls.default()
        kwargs: Dict[str, Any] = {}
        if data.get("html_parser"):
            kwargs["html_parser"] = str(data["html_parser"])
        if "request_timeout_sec" in data:
            kwargs["request_timeout_sec"] = _to_float(data["request_timeout_sec"], defaults.request_timeout_sec)
        if data.get("user_agent"):
            kwargs["user_agent"] = str(data["user_agent"])
        if "follow_redirects" in data:
            kwargs["follow_redirects"] = _parse_bool(data["follow_redirects"], defaults.follow_redirects)
        if "max_concurrency" in data:
            kwargs["max_concurrency"] = _to_optional_limit(data["max_concurrency"])
        if "max_connections" in data:
            kwargs["max_connections"] = _to_optional_limit(data["max_connections"])
        if data.get("page_url_template"):
            kwargs["page_url_template"] = str(data["page_url_template"])
        if data.get("rates_url_template"):
            kwargs["rates_url_template"] = str(data["rates_url_template"])
        logger.debug("🧾 CatalogInfraOptions.from_dict з ключами: %s", list(kwargs.keys()))
        return cls(**kwargs)

    @classmethod
    def from_config(cls, config: "ConfigService") -> "CatalogInfraOptions":
        """⚙️ Збирає опції з розділів `http`, `catalog`, `rates` ConfigService."""
        data: Dict[str, Any] = dict(config.section("http"))
        data["page_url_template"] = config.get("catalog.page_url_template")
        data["rates_url_template"] = config.get("rates.url_template")
        return cls.from_dict(data)


# ================================
# 📦 ГЛОБАЛЬНИЙ ДЕФОЛТ
# ================================
DEFAULT_CATALOG_INFRA_OPTIONS = CatalogInfraOptions.default()	# 📦 Базовий екземпляр

__all__ = ["CatalogInfraOptions", "DEFAULT_CATALOG_INFRA_OPTIONS"]	# 📦 Публічний експорт

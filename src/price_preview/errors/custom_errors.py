# 🚨 price_preview/errors/custom_errors.py
"""
🚨 Ієрархія винятків застосунку.

🔹 `AppError`: база з `message`/`details` та `to_log_extra()` для структурованих логів.
🔹 `UserVisibleError`: помилки, текст яких можна показати користувачу без стектрейсу.
🔹 Регіональні збої (`NetworkRequestError`, `ParsingError`, `PriceUnavailableError`) не виходять за межі свого регіону.
🔹 `RatesUnavailableError`: єдиний фатальний збій конвеєра.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування створення помилок
from typing import Dict, Optional									# 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from price_preview.shared.utils.logger import LOG_NAME				# 🏷️ Єдине імʼя логера


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors")					# 🧾 Локальний логер


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Стабільні коди категорій для поля `error_code` у логах."""

    APP = "app_error"												# 🧠 Загальна помилка застосунку
    PARSING = "parsing_error"										# 📄 Помилки парсингу
    NETWORK = "network_error"										# 🌐 Мережеві збої
    PRICE_UNAVAILABLE = "price_unavailable"						# 💸 Жодна стратегія не дала ціну
    ITEM_NOT_FOUND = "item_not_found"								# 🔍 Покупку не знайдено
    RATES_UNAVAILABLE = "rates_unavailable"						# 💱 Курси недоступні (фатально)
    CONFIGURATION = "configuration_error"							# ⚙️ Некоректна конфігурація


# ================================
# 🧠 БАЗОВІ КЛАСИ
# ================================
class AppError(Exception):
    """🧠 Базовий виняток застосунку з коротким повідомленням та деталями."""

    error_code: str = ErrorCode.APP

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message										# 💬 Текст для користувача/логів
        self.details = details										# 🧾 Технічні подробиці

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для `logger.extra`."""
        extra: Dict[str, object] = {"error_code": self.error_code}
        if self.details:
            extra["details"] = self.details
        return extra

    def __str__(self) -> str:
        return self.message


class UserVisibleError(AppError):
    """👀 Помилка, текст якої безпечно показати користувачу."""


# ================================
# 🌍 РЕГІОНАЛЬНІ ЗБОЇ
# ================================
class NetworkRequestError(UserVisibleError):
    """🌐 Збій транспорту під час завантаження сторінки вітрини."""

    error_code = ErrorCode.NETWORK

    def __init__(
        self,
        message: str,
        *,
        details: Optional[str] = None,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, details=details)					# 🧠 Виклик базового конструктора
        self.url = url												# 🔗 URL, що викликав помилку
        self.status_code = status_code								# 🔢 HTTP-код відповіді
        logger.debug(
            "🌐 NetworkRequestError created",
            extra={"url": url, "status_code": status_code},
        )

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.url:													# 🔗 Може додаватися URL
            extra["url"] = self.url
        if self.status_code is not None:								# 🔢 HTTP-код, якщо є
            extra["status_code"] = self.status_code
        return extra


class ParsingError(UserVisibleError):
    """📄 Вміст сторінки неможливо розібрати."""

    error_code = ErrorCode.PARSING

    def __init__(self, message: str, *, details: Optional[str] = None, url: Optional[str] = None) -> None:
        super().__init__(message, details=details)
        self.url = url												# 🔗 URL, де сталася помилка

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.url:
            extra["url"] = self.url
        return extra


class PriceUnavailableError(UserVisibleError):
    """💸 Жодна стратегія витягування не знайшла ціну на сторінці."""

    error_code = ErrorCode.PRICE_UNAVAILABLE

    def __init__(
        self,
        message: str = "No price available",
        *,
        details: Optional[str] = None,
        region_code: Optional[str] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.region_code = region_code								# 🌍 Регіон (якщо відомий)

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.region_code:
            extra["region"] = self.region_code
        return extra


class ItemNotFoundError(UserVisibleError):
    """🔍 Обрану внутрішню покупку не знайдено у каталозі продукту."""

    error_code = ErrorCode.ITEM_NOT_FOUND

    def __init__(self, query: str, *, details: Optional[str] = None) -> None:
        super().__init__(f"In-app item not found: {query!r}", details=details)
        self.query = query											# 🔎 Рядок пошуку користувача

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["query"] = self.query
        return extra


# ================================
# 💥 ФАТАЛЬНІ ЗБОЇ
# ================================
class RatesUnavailableError(AppError):
    """💱 Джерело курсів недоступне або не повернуло придатних курсів."""

    error_code = ErrorCode.RATES_UNAVAILABLE

    def __init__(
        self,
        message: str,
        *,
        details: Optional[str] = None,
        base_currency: Optional[str] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.base_currency = base_currency							# 🎯 Базова валюта запиту
        logger.debug("💱 RatesUnavailableError created", extra={"base_currency": base_currency})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.base_currency:
            extra["base_currency"] = self.base_currency
        return extra


class ConfigurationError(AppError):
    """⚙️ Некоректні довідкові дані або налаштування."""

    error_code = ErrorCode.CONFIGURATION


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "ErrorCode",
    "AppError",
    "UserVisibleError",
    "NetworkRequestError",
    "ParsingError",
    "PriceUnavailableError",
    "ItemNotFoundError",
    "RatesUnavailableError",
    "ConfigurationError",
]

# 🧭 price_preview/errors/reason_mapper.py
"""
🧭 Мапить винятки → `ReasonCode` + контекст для тексту помилки.

🔹 Розрізняє «видимі» помилки користувача (`UserVisibleError`) і технічні.
🔹 Інкапсулює специфіку httpx (таймаути, зʼєднання, статуси).
🔹 Повертає словник параметрів (`ctx`), який підставляється в повідомлення та логи.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx															# 🌐 HTTP-клієнт (винятки)

# 🔠 Системні імпорти
import logging															# 🧾 Логування процесу мапінгу
from typing import Any, Dict, Optional, Tuple							# 📐 Типи для повернення

# 🧩 Внутрішні модулі проєкту
from price_preview.shared.utils.logger import LOG_NAME
from .custom_errors import (
    ItemNotFoundError,
    NetworkRequestError,
    ParsingError,
    PriceUnavailableError,
    RatesUnavailableError,
    UserVisibleError,
)
from .reason_codes import ReasonCode									# 🧮 Перелік причин


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors.reason_mapper")		# 🧾 Локальний логер


# ================================
# 🧭 ОСНОВНИЙ МАПЕР
# ================================
def map_error_to_reason(exc: BaseException) -> Tuple[ReasonCode, Dict[str, Any]]:
    """
    Повертає (reason_code, ctx); ctx підставляється у текст (наприклад, {status_code}).
    """
    logger.debug("🔎 map_error_to_reason start", extra={"exc_type": type(exc).__name__})

    # ===== UserVisibleError =====
    if isinstance(exc, UserVisibleError):
        return _map_user_visible(exc)

    # ===== Курси =====
    if isinstance(exc, RatesUnavailableError):
        return ReasonCode.RATES_UNAVAILABLE, {"base_currency": exc.base_currency}

    # ===== httpx =====
    httpx_result = _map_httpx_errors(exc)
    if httpx_result:
        return httpx_result

    # ===== Fallback =====
    logger.warning("❓ Unknown error mapped to INTERNAL", extra={"exc_type": type(exc).__name__})
    return ReasonCode.INTERNAL, {"exc_type": type(exc).__name__}


# ================================
# 🧩 ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _map_user_visible(exc: UserVisibleError) -> Tuple[ReasonCode, Dict[str, Any]]:
    """Розбирає наші `UserVisibleError` по кодах."""
    if isinstance(exc, PriceUnavailableError):
        return ReasonCode.PRICE_UNAVAILABLE, {"region": exc.region_code}
    if isinstance(exc, ItemNotFoundError):
        return ReasonCode.ITEM_NOT_FOUND, {"query": exc.query}
    if isinstance(exc, ParsingError):
        url = exc.url or ""												# 🔗 Можемо підставити URL
        logger.debug("📄 ParsingError mapped", extra={"url": url})
        return ReasonCode.PARSE_FAILED, {"url": url}
    if isinstance(exc, NetworkRequestError):
        cause = exc.__cause__
        if isinstance(cause, httpx.TimeoutException):				# ⏳ Таймаут під обгорткою
            return ReasonCode.HTTP_TIMEOUT, {"url": exc.url}
        if exc.status_code:
            logger.debug("🌐 Network HTTP status", extra={"status_code": exc.status_code})
            return ReasonCode.HTTP_STATUS, {"status_code": exc.status_code, "url": exc.url}
        logger.debug("🌐 Network connection issue")
        return ReasonCode.HTTP_CONNECTION, {"url": exc.url}
    logger.debug("ℹ️ Generic UserVisibleError mapped to INTERNAL")
    return ReasonCode.INTERNAL, {}


def _map_httpx_errors(exc: BaseException) -> Optional[Tuple[ReasonCode, Dict[str, Any]]]:
    """Повертає ReasonCode для httpx-винятків або None."""
    if isinstance(exc, httpx.TimeoutException):
        logger.debug("🌐 HTTP timeout")
        return ReasonCode.HTTP_TIMEOUT, {}
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code
        logger.debug("🌐 HTTP status error", extra={"status_code": status_code})
        return ReasonCode.HTTP_STATUS, {"status_code": status_code}
    if isinstance(exc, httpx.TransportError):
        logger.debug("🌐 HTTP connection error")
        return ReasonCode.HTTP_CONNECTION, {}
    return None


__all__ = ["map_error_to_reason"]										# 📤 Публічний API

# 💱 price_preview/infrastructure/currency/rates_provider.py
"""
💱 Провайдер курсів валют на базі `httpx` (одне звернення на запуск).

🔹 GET `{rates_url_template}` для базової валюти; відповідь: `{"rates": {"EUR": 0.92, ...}}`.
🔹 Лишає лише числові, скінченні та додатні курси; базова валюта гарантовано має курс 1.
🔹 Будь-яка неможливість отримати придатні курси → `RatesUnavailableError` (фатально).
🔹 Без кешу та без повторних спроб.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 HTTP-клієнт для джерела курсів

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування запиту
import math                                                         # ♾️ Перевірка скінченності
from types import MappingProxyType                                  # 🔒 Незмінна обгортка над dict
from typing import Any, Dict                                        # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from price_preview.domain.pricing.entities import RateTable
from price_preview.errors.custom_errors import RatesUnavailableError
from price_preview.infrastructure.catalog._infra_options import DEFAULT_RATES_URL_TEMPLATE
from price_preview.shared.utils.logger import LOG_NAME

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.currency.rates")


def _usable_rate(value: Any) -> bool:
    """✅ Лише справжні числа (не bool), скінченні та більші за нуль."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


class ExchangeRateProvider:
    """💱 Отримує таблицю «1 базова = rate одиниць валюти»."""

    def __init__(self, client: httpx.AsyncClient, *, url_template: str = DEFAULT_RATES_URL_TEMPLATE) -> None:
        self._client = client                                       # 🌐 Спільний клієнт (закриває власник)
        self._url_template = url_template

    def rates_url(self, base_currency: str) -> str:
        return self._url_template.format(base=base_currency.strip().upper())

    async def rates(self, base_currency: str) -> RateTable:
        base = (base_currency or "").strip().upper()
        url = self.rates_url(base)
        logger.info("💱 rates.fetch.start", extra={"base_currency": base, "url": url})

        try:
            response = await self._client.get(url)
            response.raise_for_status()                             # ❗ Підіймає виключення при не-2xx статусах
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.error("❌ rates.fetch.http_status", extra={"base_currency": base, "status_code": status_code})
            raise RatesUnavailableError(
                f"Rate source returned HTTP {status_code}",
                base_currency=base,
            ) from exc
        except httpx.RequestError as exc:
            # ❌ Проблеми рівня мережі / таймаут і т.д.
            logger.error("❌ rates.fetch.request_error", extra={"base_currency": base, "error": type(exc).__name__})
            raise RatesUnavailableError(
                "Rate source is unreachable",
                details=str(exc) or type(exc).__name__,
                base_currency=base,
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise RatesUnavailableError("Rate source returned non-JSON body", base_currency=base) from exc

        raw_rates = payload.get("rates") if isinstance(payload, dict) else None
        if not isinstance(raw_rates, dict):
            logger.error("❌ rates.fetch.no_rates", extra={"base_currency": base})
            raise RatesUnavailableError("Rate source returned no rate mapping", base_currency=base)

        table: Dict[str, float] = {}
        skipped = 0
        for code, value in raw_rates.items():
            if not isinstance(code, str) or not code.strip() or not _usable_rate(value):
                skipped += 1
                continue
            table[code.strip().upper()] = float(value)

        if not table:
            raise RatesUnavailableError("Rate source returned no usable rates", base_currency=base)
        table.setdefault(base, 1.0)                                 # 🎯 Гарантуємо наявність базової валюти

        logger.info(
            "✅ rates.fetch.done",
            extra={"base_currency": base, "currencies": len(table), "skipped": skipped},
        )
        return MappingProxyType(table)                              # 🧊 Незмінна таблиця курсів


__all__ = ["ExchangeRateProvider"]

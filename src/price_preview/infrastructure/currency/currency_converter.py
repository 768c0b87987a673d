# 💱 price_preview/infrastructure/currency/currency_converter.py
"""
💱 Stateless-конвертер записів цін у базову валюту за «знімком» курсів.

🔹 `converted_amount = amount / rate`, квантоване до 2 знаків (ROUND_HALF_UP) незалежно від точності валюти.
🔹 Записи без відомого курсу лишаються з `converted_amount = None`.
🔹 Результат відсортовано повним порядком (див. `domain.pricing.services.conversion_sort_key`).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging															# 🧾 Логування всіх операцій
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation			# 💰 Точна арифметика та округлення
from typing import Iterable, List, Optional								# 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from price_preview.domain.pricing.entities import PriceRecord, RateTable
from price_preview.domain.pricing.services import sort_records		# 🔢 Повний порядок
from price_preview.shared.utils.logger import LOG_NAME				# 🏷️ Єдине імʼя логера


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.currency.converter")


# ================================
# 📏 НАЛАШТУВАННЯ КВАНТУВАННЯ
# ================================
CONVERSION_QUANTUM = Decimal("0.01")									# 📐 Завжди 2 знаки


# ================================
# 🧰 ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _to_decimal(value: object) -> Decimal:
    """🧮 Безпечно приводить значення до Decimal через рядкове представлення."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value).strip())								# 🧼 Позбавляємося артефактів float
    except (InvalidOperation, AttributeError, ValueError) as exc:
        logger.error("❌ Неможливо привести до Decimal: %r", value)
        raise ValueError(f"Невалідне числове значення: {value!r}") from exc


def _quantize(amount: Decimal) -> Decimal:
    """📐 Квантоване значення з округленням half-up."""
    return amount.quantize(CONVERSION_QUANTUM, rounding=ROUND_HALF_UP)


# ================================
# 💱 КОНВЕРТЕР
# ================================
class CurrencyConverter:
    """💱 Переводить суми у базову валюту за таблицею «1 базова = rate одиниць валюти»."""

    def convert_amount(self, amount: object, currency: str, rates: RateTable) -> Optional[Decimal]:
        """🧮 Сума у базовій валюті або None, якщо курс невідомий/непридатний."""
        rate = rates.get((currency or "").strip().upper())
        if rate is None:
            return None
        rate_dec = _to_decimal(rate)
        if not rate_dec.is_finite() or rate_dec <= 0:
            logger.warning("⚠️ Непридатний курс для %s: %r", currency, rate)
            return None
        return _quantize(_to_decimal(amount) / rate_dec)

    def convert(self, records: Iterable[PriceRecord], rates: RateTable) -> List[PriceRecord]:
        """
        💵 Повертає нові записи з конвертованими сумами, відсортовані повним порядком.

        Raises:
            ValueError: якщо запис уже має `converted_amount`.
        """
        converted: List[PriceRecord] = []
        missing = 0
        for record in records:
            value = self.convert_amount(record.amount, record.currency, rates)
            if value is None:
                if record.converted_amount is not None:
                    raise ValueError(f"converted_amount already set for {record.region_name}")
                missing += 1
                converted.append(record)
                continue
            converted.append(record.with_conversion(value))

        result = sort_records(converted)
        logger.info(
            "💵 converter.done",
            extra={"records": len(result), "without_rate": missing},
        )
        return result


__all__ = ["CurrencyConverter", "CONVERSION_QUANTUM"]

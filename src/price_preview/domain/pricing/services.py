# 🧠 price_preview/domain/pricing/services.py
"""
🧠 Чисті доменні правила порівняння цін.

🔹 Повний порядок записів: спершу конвертовані за зростанням суми (нічия → назва регіону),
   потім записи без конвертації за назвою регіону.
🔹 Вибір базового регіону за перших двох літер базової валюти.
🔹 Пошук внутрішньої покупки та побудова рядків таблиці.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from decimal import Decimal
from typing import Iterable, List, Sequence, Tuple

# 🧩 Внутрішні модулі проєкту
from price_preview.domain.currency.formatter import PriceFormatter
from price_preview.errors.custom_errors import ConfigurationError, ItemNotFoundError
from price_preview.shared.utils.logger import LOG_NAME
from .entities import CatalogItem, ComparisonRow, PriceRecord, Region

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.domain.pricing")


# ================================
# 🔢 СОРТУВАННЯ
# ================================
def conversion_sort_key(record: PriceRecord) -> Tuple[int, Decimal, str]:
    """🔢 Ключ повного порядку: (без конвертації?, сума, назва регіону)."""
    if record.converted_amount is None:
        return (1, Decimal(0), record.region_name)
    return (0, record.converted_amount, record.region_name)


def sort_records(records: Iterable[PriceRecord]) -> List[PriceRecord]:
    return sorted(records, key=conversion_sort_key)


# ================================
# 🌍 БАЗОВИЙ РЕГІОН
# ================================
def resolve_base_region(regions: Sequence[Region], base_currency: str) -> Region:
    """
    🌍 Регіон, код якого збігається з першими двома літерами базової валюти
    (USD → US, GBP → GB); інакше перший регіон каталогу.
    """
    if not regions:
        raise ConfigurationError("Region catalog is empty")
    prefix = (base_currency or "").strip().upper()[:2]
    for region in regions:
        if region.code == prefix:
            return region
    logger.debug(
        "🌍 pricing.base_region_fallback",
        extra={"base_currency": base_currency, "region": regions[0].code},
    )
    return regions[0]


# ================================
# 🛍️ ВИБІР ПОКУПКИ
# ================================
def select_item(items: Sequence[CatalogItem], query: str) -> CatalogItem:
    """🛍️ Нечутливий до регістру збіг за `offer_name`, потім за `name`."""
    needle = (query or "").strip().casefold()
    if needle:
        for item in items:
            if item.offer_name.casefold() == needle:
                return item
        for item in items:
            if item.name.casefold() == needle:
                return item
    raise ItemNotFoundError(query)


# ================================
# 📊 РЯДКИ ТАБЛИЦІ
# ================================
def build_rows(
    records: Iterable[PriceRecord],
    formatter: PriceFormatter,
    base_currency: str,
    *,
    not_available_label: str = "N/A",
) -> Tuple[ComparisonRow, ...]:
    """📊 Форматує вже відсортовані записи у рядки для рендерера (порядок зберігається)."""
    rows = []
    for record in records:
        converted = (
            formatter.format(record.converted_amount, base_currency)
            if record.converted_amount is not None
            else not_available_label
        )
        rows.append(
            ComparisonRow(
                region_name=record.region_name,
                native_price=formatter.format(record.amount, record.currency),
                currency=record.currency,
                converted_price=converted,
            )
        )
    return tuple(rows)


__all__ = [
    "conversion_sort_key",
    "sort_records",
    "resolve_base_region",
    "select_item",
    "build_rows",
]

# 🗃️ price_preview/infrastructure/parsers/extractors/catalog_cache.py
"""
🗃️ Стратегія №1: вбудований кеш каталогу (`<script id="shoebox-media-api-cache-apps">`).

🔹 Зовнішній JSON-обʼєкт містить рядки з JSON-документами вигляду `{"d": [ {...} ]}`.
🔹 Перевага документу з `relationships.top-in-apps.data`, інакше перший придатний.
🔹 Базовий продукт: `attributes.price` + `attributes.currencyCode`.
🔹 Внутрішня покупка: збіг `attributes.offerName`, ціна з `attributes.offers[0]`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Any, Dict, List, Optional, Tuple	# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from price_preview.domain.pricing.entities import CatalogItem, PriceExtraction, to_amount
from .base import (	# 🔗 Спільні утиліти екстракторів
    BeautifulSoup,
    PriceStrategy,
    Tag,
    _dig,
    _norm_ws,
    _script_text,
    _try_json_loads,
    logger,
)

CATALOG_CACHE_SCRIPT_ID = "shoebox-media-api-cache-apps"	# 🆔 id скрипта з кешем


class CatalogCacheStrategy(PriceStrategy):
    """🗃️ Читає ціну з кешу каталогу; єдина стратегія, що знає про внутрішні покупки."""

    name = "catalog_cache"
    supports_items = True

    # ================================
    # 📄 ДОКУМЕНТ ПРОДУКТУ
    # ================================
    def product_document(self, soup: BeautifulSoup) -> Optional[Dict[str, Any]]:
        """📄 Повертає `d[0]` обраного запису кешу або None."""
        script = soup.find("script", attrs={"id": CATALOG_CACHE_SCRIPT_ID})
        if not isinstance(script, Tag):	# 🚫 Кешу немає на сторінці
            return None
        outer = _try_json_loads(_script_text(script))
        if not isinstance(outer, dict):
            logger.debug("🗃️ catalog_cache: зовнішній JSON не є обʼєктом.")
            return None

        documents: List[Dict[str, Any]] = []
        for value in outer.values():	# 🔁 Кожне значення є JSON-рядком
            head = _dig(_try_json_loads(value), "d", 0)
            if isinstance(head, dict):
                documents.append(head)

        for document in documents:	# ✅ Спершу документ з переліком покупок
            if isinstance(_dig(document, "relationships", "top-in-apps", "data"), list):
                return document
        return documents[0] if documents else None

    @staticmethod
    def in_app_entries(document: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
        data = _dig(document, "relationships", "top-in-apps", "data")
        if not isinstance(data, list):
            return []
        return [entry for entry in data if isinstance(entry, dict)]

    def catalog_items(self, soup: BeautifulSoup) -> Tuple[CatalogItem, ...]:
        """🛍️ Перелік внутрішніх покупок базової сторінки."""
        items: List[CatalogItem] = []
        for entry in self.in_app_entries(self.product_document(soup)):
            attributes = _dig(entry, "attributes") or {}
            offer_name = _norm_ws(str(attributes.get("offerName") or ""))
            if not offer_name:	# 🚫 Без ключа зіставлення покупка непридатна
                continue
            items.append(
                CatalogItem(
                    name=_norm_ws(str(attributes.get("name") or "")) or offer_name,
                    offer_name=offer_name,
                    formatted_price=_norm_ws(str(_dig(attributes, "offers", 0, "priceFormatted") or "")),
                )
            )
        logger.debug("🛍️ catalog_cache: знайдено %d покупок.", len(items))
        return tuple(items)

    # ================================
    # 💰 ЦІНА
    # ================================
    def extract(self, soup: BeautifulSoup, item: Optional[CatalogItem] = None) -> Optional[PriceExtraction]:
        document = self.product_document(soup)
        if document is None:
            return None
        if item is not None:
            return self._item_price(document, item)

        attributes = _dig(document, "attributes")
        amount = to_amount(_dig(attributes, "price"))
        currency = _dig(attributes, "currencyCode")
        if amount is None or not isinstance(currency, str) or not currency.strip():
            return None
        return PriceExtraction.full(self.name, amount, currency)

    def _item_price(self, document: Dict[str, Any], item: CatalogItem) -> Optional[PriceExtraction]:
        for entry in self.in_app_entries(document):
            attributes = _dig(entry, "attributes") or {}
            if _norm_ws(str(attributes.get("offerName") or "")) != item.offer_name:
                continue
            amount = to_amount(_dig(attributes, "offers", 0, "price"))
            currency = _dig(attributes, "offers", 0, "currencyCode")
            if amount is None or not isinstance(currency, str) or not currency.strip():
                return None	# 🚫 Покупку знайдено, але ціна непридатна
            return PriceExtraction.full(self.name, amount, currency)
        logger.debug("🛍️ catalog_cache: покупку %r не знайдено у регіоні.", item.offer_name)
        return None


__all__ = ["CatalogCacheStrategy", "CATALOG_CACHE_SCRIPT_ID"]

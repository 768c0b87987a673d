# 🧾 price_preview/infrastructure/parsers/extractors/json_ld.py
"""
🧾 Стратегія №3: структуровані дані JSON-LD (`<script type="application/ld+json">`).

🔹 Збирає усі JSON-LD скрипти сторінки (одиничні обʼєкти, масиви, `@graph`).
🔹 Шукає блок `offers` (обʼєкт, список або `AggregateOffer`) з `price` + `priceCurrency`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Any, Dict, List, Optional	# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from price_preview.domain.pricing.entities import CatalogItem, PriceExtraction, to_amount
from .base import (	# 🔗 Спільні утиліти екстракторів
    BeautifulSoup,
    PriceStrategy,
    Tag,
    _as_list,
    _script_text,
    _try_json_loads,
    logger,
)

JSON_LD_SELECTOR = 'script[type="application/ld+json"]'	# 🔍 CSS-селектор блоків


class JsonLdStrategy(PriceStrategy):
    """📦 Ціна з offers першого JSON-LD обʼєкта, що її містить."""

    name = "json_ld"

    # ================================
    # 📄 БЛОКИ JSON-LD
    # ================================
    def _json_ld_blocks(self, soup: BeautifulSoup) -> List[Dict[str, Any]]:
        """📄 Збирає всі JSON-LD обʼєкти сторінки у плаский список."""
        blocks: List[Dict[str, Any]] = []
        for script in soup.select(JSON_LD_SELECTOR):	# 🔍 Проходимо по всіх <script type="application/ld+json">
            if not isinstance(script, Tag):
                continue
            obj = _try_json_loads(_script_text(script))	# 🧮 Парсимо JSON
            for entry in _as_list(obj):	# ♻️ Навіть якщо це одиничний блок
                if not isinstance(entry, dict):
                    continue
                blocks.append(entry)
                blocks.extend(g for g in _as_list(entry.get("@graph")) if isinstance(g, dict))
        logger.debug("📄 JSON-LD: знайдено %d блоків.", len(blocks))
        return blocks

    def _extract_offers(self, offers_obj: Any) -> List[Any]:
        """🧰 Приводить offers/aggregateOffer до списку пропозицій (сам aggregate теж кандидат)."""
        if isinstance(offers_obj, dict) and str(offers_obj.get("@type", "")).lower() == "aggregateoffer":
            return [offers_obj, *_as_list(offers_obj.get("offers"))]
        return _as_list(offers_obj)

    # ================================
    # 💰 ЦІНА
    # ================================
    def extract(self, soup: BeautifulSoup, item: Optional[CatalogItem] = None) -> Optional[PriceExtraction]:
        for block in self._json_ld_blocks(soup):
            for offer in self._extract_offers(block.get("offers")):
                if not isinstance(offer, dict):
                    continue
                amount = to_amount(offer.get("price", offer.get("lowPrice")))
                currency = offer.get("priceCurrency")
                if amount is None or not isinstance(currency, str) or not currency.strip():
                    continue
                return PriceExtraction.full(self.name, amount, currency)
        return None


__all__ = ["JsonLdStrategy", "JSON_LD_SELECTOR"]

# 🪧 price_preview/infrastructure/parsers/extractors/legacy_label.py
"""
🪧 Стратегія №4: застаріла мітка ціни у шапці сторінки.

🔹 `<li class="inline-list__item … app-header__list__item--price">Free</li>`.
🔹 Дає лише текст для показу (DISPLAY_ONLY): без суми та валюти, без конвертації.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from price_preview.domain.pricing.entities import CatalogItem, PriceExtraction
from .base import BeautifulSoup, PriceStrategy, Tag, _norm_ws

LEGACY_PRICE_SELECTOR = "li.inline-list__item.app-header__list__item--price"


class LegacyLabelStrategy(PriceStrategy):
    name = "legacy_label"

    def extract(self, soup: BeautifulSoup, item: Optional[CatalogItem] = None) -> Optional[PriceExtraction]:
        for tag in soup.select(LEGACY_PRICE_SELECTOR):
            if not isinstance(tag, Tag):
                continue
            label = _norm_ws(tag.get_text(" "))	# 🧼 &nbsp; → пробіл
            if label:
                return PriceExtraction.display_only(self.name, label)
        return None


__all__ = ["LegacyLabelStrategy", "LEGACY_PRICE_SELECTOR"]

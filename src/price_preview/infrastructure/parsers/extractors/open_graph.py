# 🏷️ price_preview/infrastructure/parsers/extractors/open_graph.py
"""🏷️ Стратегія №2: Open Graph мета-теги `og:price:amount` + `og:price:currency`."""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from price_preview.domain.pricing.entities import CatalogItem, PriceExtraction, to_amount
from .base import BeautifulSoup, PriceStrategy, _meta_content


class OpenGraphStrategy(PriceStrategy):
    name = "open_graph"

    def extract(self, soup: BeautifulSoup, item: Optional[CatalogItem] = None) -> Optional[PriceExtraction]:
        amount = to_amount(_meta_content(soup, "og:price:amount"))
        currency = _meta_content(soup, "og:price:currency")
        if amount is None or not currency:
            return None
        return PriceExtraction.full(self.name, amount, currency)

    @staticmethod
    def title(soup: BeautifulSoup) -> Optional[str]:
        """🏷️ Назва продукту з `og:title` (None, якщо тег відсутній або порожній)."""
        return _meta_content(soup, "og:title") or None


__all__ = ["OpenGraphStrategy"]

# 🔎 price_preview/infrastructure/parsers/price_extractor.py
"""
🔎 Упорядкований ланцюг стратегій витягування ціни зі сторінки вітрини.

🔹 Сторінка парситься один раз; стратегії пробуються по черзі, перша успішна перериває ланцюг.
🔹 Порядок: кеш каталогу → Open Graph → JSON-LD → застаріла мітка (лише текст).
🔹 Для обраної внутрішньої покупки застосовуються лише стратегії, що її підтримують.
🔹 Якщо жодна стратегія не спрацювала → `PriceUnavailableError` (регіональний, відновлюваний збій).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4 import BeautifulSoup	# 🥣 DOM-дерево

# 🔠 Системні імпорти
import logging	# 🧾 Логування ланцюга
from typing import Optional, Sequence, Tuple	# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from price_preview.domain.pricing.entities import CatalogItem, PriceExtraction
from price_preview.errors.custom_errors import PriceUnavailableError
from price_preview.shared.utils.logger import LOG_NAME
from .extractors import (
    CatalogCacheStrategy,
    JsonLdStrategy,
    LegacyLabelStrategy,
    OpenGraphStrategy,
    PriceStrategy,
)

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.parser.price_extractor")


def default_strategies() -> Tuple[PriceStrategy, ...]:
    """📋 Стратегії у порядку пріоритету."""
    return (CatalogCacheStrategy(), OpenGraphStrategy(), JsonLdStrategy(), LegacyLabelStrategy())


class PriceExtractor:
    """🔎 Фасад над ланцюгом стратегій; також дає назву продукту та перелік покупок."""

    def __init__(
        self,
        *,
        html_parser: str = "lxml",
        strategies: Optional[Sequence[PriceStrategy]] = None,
    ) -> None:
        self._html_parser = html_parser	# 🥣 lxml | html.parser | html5lib
        self._strategies: Tuple[PriceStrategy, ...] = tuple(strategies) if strategies else default_strategies()
        self._catalog = next(
            (s for s in self._strategies if isinstance(s, CatalogCacheStrategy)),
            CatalogCacheStrategy(),
        )

    @property
    def strategies(self) -> Tuple[PriceStrategy, ...]:
        return self._strategies

    def _soup(self, html: Optional[str]) -> Optional[BeautifulSoup]:
        if not html or not html.strip():
            return None
        return BeautifulSoup(html, self._html_parser)

    # ================================
    # 💰 ЦІНА
    # ================================
    def extract(self, html: Optional[str], *, item: Optional[CatalogItem] = None) -> PriceExtraction:
        """
        💰 Запускає ланцюг стратегій.

        Raises:
            PriceUnavailableError: порожня сторінка або жодна стратегія не дала результату.
        """
        soup = self._soup(html)
        if soup is None:
            raise PriceUnavailableError(details="empty page")

        applicable = [s for s in self._strategies if item is None or s.supports_items]
        for strategy in applicable:
            result = strategy.extract(soup, item)
            if result is not None:
                logger.debug(
                    "✅ extractor.strategy_hit",
                    extra={"strategy": strategy.name, "kind": result.kind.value},
                )
                return result
            logger.debug("↪️ extractor.strategy_miss", extra={"strategy": strategy.name})

        raise PriceUnavailableError(
            details=f"tried: {', '.join(s.name for s in applicable) or '-'}",
        )

    # ================================
    # 🛍️ ДОДАТКОВІ ДАНІ СТОРІНКИ
    # ================================
    def product_name(self, html: Optional[str]) -> Optional[str]:
        soup = self._soup(html)
        return OpenGraphStrategy.title(soup) if soup is not None else None

    def catalog_items(self, html: Optional[str]) -> Tuple[CatalogItem, ...]:
        soup = self._soup(html)
        return self._catalog.catalog_items(soup) if soup is not None else ()


__all__ = ["PriceExtractor", "default_strategies"]

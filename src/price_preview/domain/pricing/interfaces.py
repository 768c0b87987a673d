# 🧩 price_preview/domain/pricing/interfaces.py
"""
🧩 Контракти інфраструктури, на які спирається конвеєр цін.

🔹 `IPageFetcher`: транспорт сторінок вітрини (зовнішній співпрацівник, інʼєктується).
🔹 `IPriceExtractor`: багатострокова стратегія витягування ціни з тексту сторінки.
🔹 `IRatesProvider`: одноразове отримання таблиці курсів для базової валюти.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Callable, Optional, Protocol, Tuple, runtime_checkable

# 🧩 Внутрішні модулі проєкту
from .entities import CatalogItem, PriceExtraction, RateTable, RegionOutcome


@runtime_checkable
class IPageFetcher(Protocol):
    """🌐 Завантажує сторінку продукту для регіону."""

    async def fetch_page(self, product_id: str, region_code: str) -> str: ...


@runtime_checkable
class IPriceExtractor(Protocol):
    """🔎 Витягує ціну зі сторінки; кидає `PriceUnavailableError`, якщо жодна стратегія не спрацювала."""

    def extract(self, html: Optional[str], *, item: Optional[CatalogItem] = None) -> PriceExtraction: ...

    def product_name(self, html: Optional[str]) -> Optional[str]: ...

    def catalog_items(self, html: Optional[str]) -> Tuple[CatalogItem, ...]: ...


@runtime_checkable
class IRatesProvider(Protocol):
    """💱 Повертає таблицю курсів «1 базова = rate одиниць валюти»."""

    async def rates(self, base_currency: str) -> RateTable: ...


OutcomeCallback = Callable[[RegionOutcome], None]                   # 📣 Живий прогрес по регіонах


__all__ = ["IPageFetcher", "IPriceExtractor", "IRatesProvider", "OutcomeCallback"]

# 🧾 price_preview/infrastructure/parsers/extractors/__init__.py
"""🧾 Стратегії витягування ціни у порядку пріоритету."""

from .base import PriceStrategy
from .catalog_cache import CATALOG_CACHE_SCRIPT_ID, CatalogCacheStrategy
from .json_ld import JsonLdStrategy
from .legacy_label import LegacyLabelStrategy
from .open_graph import OpenGraphStrategy

__all__ = [
    "CATALOG_CACHE_SCRIPT_ID",
    "CatalogCacheStrategy",
    "JsonLdStrategy",
    "LegacyLabelStrategy",
    "OpenGraphStrategy",
    "PriceStrategy",
]

# 💰 price_preview/domain/pricing/__init__.py
"""💰 Доменний шар цін: сутності, контракти та чисті правила."""

from .entities import (
    CatalogItem,
    CollectionResult,
    ComparisonReport,
    ComparisonRow,
    DisplayOnlyPrice,
    ExtractionKind,
    PriceExtraction,
    PriceRecord,
    ProductOverview,
    RateTable,
    Region,
    RegionFailure,
    RegionOutcome,
    ReportStatus,
)
from .interfaces import IPageFetcher, IPriceExtractor, IRatesProvider, OutcomeCallback
from .services import build_rows, conversion_sort_key, resolve_base_region, select_item, sort_records

__all__ = [
    "CatalogItem",
    "CollectionResult",
    "ComparisonReport",
    "ComparisonRow",
    "DisplayOnlyPrice",
    "ExtractionKind",
    "PriceExtraction",
    "PriceRecord",
    "ProductOverview",
    "RateTable",
    "Region",
    "RegionFailure",
    "RegionOutcome",
    "ReportStatus",
    "IPageFetcher",
    "IPriceExtractor",
    "IRatesProvider",
    "OutcomeCallback",
    "build_rows",
    "conversion_sort_key",
    "resolve_base_region",
    "select_item",
    "sort_records",
]

# 🌐 price_preview/infrastructure/catalog/__init__.py
"""🌐 Транспорт регіональних вітрин та його налаштування."""

from ._infra_options import DEFAULT_CATALOG_INFRA_OPTIONS, CatalogInfraOptions
from .page_fetcher import StorefrontPageFetcher, build_http_client

__all__ = [
    "CatalogInfraOptions",
    "DEFAULT_CATALOG_INFRA_OPTIONS",
    "StorefrontPageFetcher",
    "build_http_client",
]

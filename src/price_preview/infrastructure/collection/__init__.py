# 📦 price_preview/infrastructure/collection/__init__.py
"""📦 Паралельний збір регіональних цін та його метрики."""

from .metrics import COLLECTION_LATENCY, REGION_OUTCOMES
from .region_collector import RegionCollector

__all__ = ["COLLECTION_LATENCY", "REGION_OUTCOMES", "RegionCollector"]

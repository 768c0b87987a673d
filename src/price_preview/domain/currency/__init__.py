# 💱 price_preview/domain/currency/__init__.py
"""💱 Доменний шар валют: метадані та форматування цін."""

from .formatter import PriceFormatter
from .metadata import CurrencyMetadata

__all__ = ["CurrencyMetadata", "PriceFormatter"]

# 📊 price_preview/infrastructure/comparison/__init__.py
"""📊 Оркестрація порівняння цін."""

from .comparison_manager import PriceComparisonManager

__all__ = ["PriceComparisonManager"]

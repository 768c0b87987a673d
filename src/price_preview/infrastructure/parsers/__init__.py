# 🔎 price_preview/infrastructure/parsers/__init__.py
"""🔎 Парсинг сторінок вітрини: ланцюг стратегій витягування ціни."""

from .price_extractor import PriceExtractor, default_strategies

__all__ = ["PriceExtractor", "default_strategies"]

# 💱 price_preview/infrastructure/currency/__init__.py
"""💱 Курси валют та конвертація записів у базову валюту."""

from .currency_converter import CONVERSION_QUANTUM, CurrencyConverter
from .rates_provider import ExchangeRateProvider

__all__ = ["CONVERSION_QUANTUM", "CurrencyConverter", "ExchangeRateProvider"]

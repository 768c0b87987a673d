# 💱 price_preview/__init__.py
"""
💱 price_preview: порівняння ціни продукту по регіональних вітринах в одній базовій валюті.

🔹 `domain`: сутності, метадані валют, правила сортування.
🔹 `infrastructure`: транспорт, ланцюг стратегій, паралельний збір, курси, оркестрація.
🔹 `cli`: точка входу `price-preview`.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

# 🧠 price_preview/domain/__init__.py
"""🧠 Доменний шар без залежностей від транспорту та рендерингу."""

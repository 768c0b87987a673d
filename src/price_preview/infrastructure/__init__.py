# 🏗️ price_preview/infrastructure/__init__.py
"""🏗️ Інфраструктурний шар: транспорт, парсинг, збір регіонів, курси, оркестрація."""

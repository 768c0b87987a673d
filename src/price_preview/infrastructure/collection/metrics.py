# 📈 price_preview/infrastructure/collection/metrics.py
"""
📈 Prometheus-метрики для збору регіональних цін.

🔹 `REGION_OUTCOMES`: лічильник результатів регіонів за типом (`record` / `display_only` / `failure`).
🔹 `COLLECTION_LATENCY`: гістограма часу повного fan-out / fan-in.
🔹 Метрики експортуються як константи й можуть використовуватися в будь-якому сервісі.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import Counter, Histogram                      # 📊 Prometheus-метрики

# ================================
# 📊 ЛІЧИЛЬНИКИ РЕЗУЛЬТАТІВ
# ================================
REGION_OUTCOMES = Counter(
    "price_preview_region_outcomes_total",                           # 🏷️ Імʼя метрики
    "Region outcomes produced by the price collector",               # 📝 Опис у Prometheus
    ["outcome"],                                                     # 🏷️ record | display_only | failure
)

# ================================
# ⏱️ ГІСТОГРАМА ЛАТЕНТНОСТІ
# ================================
COLLECTION_LATENCY = Histogram(
    "price_preview_collection_seconds",                              # 🏷️ Базова назва гістограми
    "Time to collect prices from all regions",                       # 📝 Опис
)


__all__ = [
    "REGION_OUTCOMES",
    "COLLECTION_LATENCY",
]

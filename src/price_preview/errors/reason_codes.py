# 🧮 price_preview/errors/reason_codes.py
"""🧮 Перелік причин регіональних збоїв (для `RegionFailure` та логів)."""

from __future__ import annotations

# 🔠 Системні імпорти
from enum import Enum


class ReasonCode(str, Enum):
    """🧮 Стабільні коди причин, що не залежать від тексту винятку."""

    HTTP_TIMEOUT = "http_timeout"				# ⏳ Таймаут запиту
    HTTP_CONNECTION = "http_connection"		# 🔌 Не вдалося зʼєднатися
    HTTP_STATUS = "http_status"				# 🔢 Не-2xx відповідь
    PARSE_FAILED = "parse_failed"				# 📄 Вміст не розібрано
    PRICE_UNAVAILABLE = "price_unavailable"	# 💸 Жодна стратегія не спрацювала
    ITEM_NOT_FOUND = "item_not_found"			# 🔍 Покупку не знайдено
    RATES_UNAVAILABLE = "rates_unavailable"	# 💱 Курси недоступні
    INTERNAL = "internal"						# ❓ Непередбачений збій


__all__ = ["ReasonCode"]

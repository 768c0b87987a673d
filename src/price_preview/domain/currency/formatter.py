# 🖋️ price_preview/domain/currency/formatter.py
"""
🖋️ Рендер суми + валюти у рядок за правилами `CurrencyMetadata`.

🔹 Квантує суму до точності валюти (ROUND_HALF_UP), інших округлень немає.
🔹 Префікс із символом → `"$9.99"`; префікс без символу → `"CHF 9.99"`; суфікс → `"1000 Fr"`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation        # 💰 Точна арифметика
from typing import Union                                            # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from .metadata import CurrencyMetadata

Amount = Union[Decimal, int, float]


def _to_decimal(value: Amount) -> Decimal:
    """🧮 Приводить значення до Decimal через рядкове представлення (без артефактів float)."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValueError(f"Невалідне числове значення: {value!r}") from exc


class PriceFormatter:
    """🖋️ Чиста функція від метаданих валют."""

    def __init__(self, metadata: CurrencyMetadata) -> None:
        self._metadata = metadata

    @property
    def metadata(self) -> CurrencyMetadata:
        return self._metadata

    def format(self, amount: Amount, currency: str) -> str:
        code = (currency or "").strip().upper()
        places = self._metadata.decimal_places(code)
        quantum = Decimal(1).scaleb(-places)                        # 📐 10^-places
        rendered = f"{_to_decimal(amount).quantize(quantum, rounding=ROUND_HALF_UP):f}"

        symbol = self._metadata.symbol(code)
        if self._metadata.is_suffix_currency(code):
            return f"{rendered} {symbol or code}"
        if symbol:
            return f"{symbol}{rendered}"
        return f"{code} {rendered}"


__all__ = ["PriceFormatter", "Amount"]

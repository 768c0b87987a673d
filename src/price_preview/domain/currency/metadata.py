# 💱 price_preview/domain/currency/metadata.py
"""
💱 Довідкові метадані валют: символ, розміщення символу та точність.

🔹 `CurrencyMetadata`: незмінний value-object; будується з мапи (`from_mapping`).
🔹 Пошук нечутливий до регістру коду; невідомі коди деградують до «без символу, 2 знаки, префікс».
🔹 Власне таблиця зберігається у `config/currencies.yaml` і завантажується `config.reference_data`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування побудови таблиці
from dataclasses import dataclass, field                            # 🧱 Value-object
from types import MappingProxyType                                  # 🧊 Незмінні мапи
from typing import Any, FrozenSet, Iterable, Mapping                # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from price_preview.errors.custom_errors import ConfigurationError
from price_preview.shared.utils.logger import LOG_NAME

# ================================
# 🪵 ЛОГЕР МОДУЛЯ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.domain.currency")

# ================================
# 📏 КОНСТАНТИ
# ================================
DEFAULT_DECIMALS = 2                                                # 🔢 Точність для більшості валют
ALLOWED_DECIMALS = frozenset({0, 2, 3})                             # ✅ Підтримувані точності


def _normalize_code(code: Any) -> str:
    return str(code or "").strip().upper()


# ================================
# 💱 VALUE OBJECT
# ================================
@dataclass(frozen=True, slots=True)
class CurrencyMetadata:
    """💱 Незмінна таблиця символів, суфіксних валют і точностей."""

    symbols: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    suffix_codes: FrozenSet[str] = frozenset()
    decimals: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        symbols = {_normalize_code(k): str(v or "") for k, v in dict(self.symbols).items()}
        suffix = frozenset(_normalize_code(c) for c in self.suffix_codes)
        decimals: dict[str, int] = {}
        for code, places in dict(self.decimals).items():
            if places not in ALLOWED_DECIMALS:                      # 🚫 Лише 0 | 2 | 3
                raise ConfigurationError(
                    f"Unsupported decimal precision {places!r} for currency {code!r}"
                )
            decimals[_normalize_code(code)] = int(places)
        object.__setattr__(self, "symbols", MappingProxyType(symbols))
        object.__setattr__(self, "suffix_codes", suffix)
        object.__setattr__(self, "decimals", MappingProxyType(decimals))

    # ================================
    # 🏗️ КОНСТРУКТОРИ
    # ================================
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CurrencyMetadata":
        """
        🏗️ Будує таблицю з мапи вигляду YAML-файлу:

            symbols:  {CODE: symbol}
            suffix:   [CODE, ...]
            decimals: {0: [CODE, ...], 3: [CODE, ...]}
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("Currency metadata must be a mapping")

        symbols = data.get("symbols") or {}
        suffix = data.get("suffix") or []
        groups = data.get("decimals") or {}
        if not isinstance(symbols, Mapping) or not isinstance(groups, Mapping):
            raise ConfigurationError("Currency metadata: 'symbols' and 'decimals' must be mappings")
        if not isinstance(suffix, Iterable) or isinstance(suffix, (str, bytes)):
            raise ConfigurationError("Currency metadata: 'suffix' must be a list of codes")

        decimals: dict[str, int] = {}
        for places, codes in groups.items():
            try:
                places_int = int(places)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"Invalid precision key: {places!r}") from exc
            for code in codes or ():
                decimals[_normalize_code(code)] = places_int

        metadata = cls(symbols=symbols, suffix_codes=frozenset(suffix), decimals=decimals)
        logger.debug(
            "💱 currency.metadata_built",
            extra={
                "symbols": len(metadata.symbols),
                "suffix": len(metadata.suffix_codes),
                "decimals": len(metadata.decimals),
            },
        )
        return metadata

    # ================================
    # 🔍 ПОШУК
    # ================================
    def symbol(self, code: str) -> str:
        """Символ валюти або порожній рядок для невідомого коду."""
        return self.symbols.get(_normalize_code(code), "")

    def is_suffix_currency(self, code: str) -> bool:
        """True, якщо символ/код ставиться після суми."""
        return _normalize_code(code) in self.suffix_codes

    def decimal_places(self, code: str) -> int:
        """0 | 2 | 3 знаки після коми."""
        return self.decimals.get(_normalize_code(code), DEFAULT_DECIMALS)


__all__ = ["CurrencyMetadata", "DEFAULT_DECIMALS", "ALLOWED_DECIMALS"]

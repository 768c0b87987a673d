# 📦 price_preview/domain/pricing/entities.py
"""
📦 Доменно-чисті сутності конвеєра регіональних цін.

🔹 `Region`, `PriceRecord`, `RateTable`: ядро моделі даних.
🔹 `PriceExtraction` / `DisplayOnlyPrice` / `RegionFailure` / `RegionOutcome`: результати одного регіону.
🔹 `CollectionResult`, `ComparisonRow`, `ComparisonReport`: агреговані результати запуску.
🔹 Усі сутності іммʼютабельні (frozen dataclass + tuple/mapping proxy).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування валідації
import math                                                         # ♾️ Перевірка скінченності
from dataclasses import dataclass, replace                          # 🧱 Опис сутностей
from decimal import Decimal, InvalidOperation                       # 💰 Робота з фінансовими даними
from enum import Enum                                               # 🔖 Переліки
from typing import Any, Iterable, Mapping, Optional, Tuple          # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from price_preview.errors.reason_codes import ReasonCode
from price_preview.shared.utils.logger import LOG_NAME

# ================================
# 🪵 ЛОГЕР МОДУЛЯ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.domain.pricing")

RateTable = Mapping[str, float]                                     # 💱 1 базова = rate одиниць валюти


# ================================
# 🧮 ХЕЛПЕРИ
# ================================
def to_amount(value: Any) -> Optional[Decimal]:
    """
    🧮 Приводить сире значення ціни до Decimal.

    Повертає None для порожніх, нечислових, нескінченних або відʼємних значень.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite() or amount < 0:
        return None
    return amount


def _normalize_currency(code: Any) -> str:
    return str(code or "").strip().upper()


# ================================
# 🌍 РЕГІОН
# ================================
@dataclass(frozen=True, slots=True)
class Region:
    """🌍 Регіональна вітрина: двобуквений код + назва для відображення."""

    code: str                                                       # 🏷️ ISO-3166 alpha-2 (верхній регістр)
    name: str                                                       # 🗺️ Назва для таблиці

    def __post_init__(self) -> None:
        code = (self.code or "").strip().upper()
        if len(code) != 2 or not code.isalpha():
            logger.error("❌ Region: некоректний код %r", self.code)
            raise ValueError(f"Region code must be two letters: {self.code!r}")
        name = (self.name or "").strip()
        if not name:
            raise ValueError(f"Region {code} must have a name")
        object.__setattr__(self, "code", code)
        object.__setattr__(self, "name", name)


# ================================
# 💰 ЗАПИС ЦІНИ
# ================================
@dataclass(frozen=True, slots=True)
class PriceRecord:
    """
    💰 Ціна одного регіону у власній валюті регіону.

    `converted_amount` додається рівно один раз через `with_conversion()`.
    """

    region_name: str
    amount: Decimal                                                 # 💵 Ціна вендора, ніколи не переконвертована
    currency: str
    converted_amount: Optional[Decimal] = None                      # 🎯 Сума у базовій валюті (2 знаки)

    def __post_init__(self) -> None:
        amount = to_amount(self.amount)
        if amount is None:
            raise ValueError(f"PriceRecord amount must be a finite non-negative number: {self.amount!r}")
        currency = _normalize_currency(self.currency)
        if not currency:
            raise ValueError("PriceRecord currency must not be empty")
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "currency", currency)

    @property
    def is_converted(self) -> bool:
        return self.converted_amount is not None

    def with_conversion(self, converted_amount: Decimal) -> "PriceRecord":
        """🎯 Повертає новий запис із конвертованою сумою; повторне призначення заборонене."""
        if self.converted_amount is not None:
            raise ValueError(f"converted_amount already set for {self.region_name}")
        return replace(self, converted_amount=converted_amount)


# ================================
# 🔎 РЕЗУЛЬТАТ ЕКСТРАКТОРА
# ================================
class ExtractionKind(str, Enum):
    """🔎 Повна ціна (сума + валюта) чи лише текстова мітка."""

    FULL = "full"
    DISPLAY_ONLY = "display_only"


@dataclass(frozen=True, slots=True)
class PriceExtraction:
    """🔎 Результат однієї успішної стратегії витягування."""

    kind: ExtractionKind
    strategy: str                                                   # 🏷️ Імʼя стратегії, що спрацювала
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    label: Optional[str] = None                                     # 🏷️ Лише для DISPLAY_ONLY

    @classmethod
    def full(cls, strategy: str, amount: Decimal, currency: str) -> "PriceExtraction":
        return cls(
            kind=ExtractionKind.FULL,
            strategy=strategy,
            amount=amount,
            currency=_normalize_currency(currency),
        )

    @classmethod
    def display_only(cls, strategy: str, label: str) -> "PriceExtraction":
        return cls(kind=ExtractionKind.DISPLAY_ONLY, strategy=strategy, label=label)

    @property
    def is_full(self) -> bool:
        return self.kind is ExtractionKind.FULL


@dataclass(frozen=True, slots=True)
class DisplayOnlyPrice:
    """🏷️ Ціна, відома лише як текст; показується, але не конвертується і не сортується."""

    region_name: str
    label: str


@dataclass(frozen=True, slots=True)
class RegionFailure:
    """🚫 Регіональний збій: регіон, код причини та короткий опис."""

    region: Region
    reason: ReasonCode
    detail: str = ""


@dataclass(frozen=True, slots=True)
class RegionOutcome:
    """📨 Рівно одне повідомлення на кожну видану одиницю роботи."""

    region: Region
    record: Optional[PriceRecord] = None
    display_only: Optional[DisplayOnlyPrice] = None
    failure: Optional[RegionFailure] = None

    def __post_init__(self) -> None:
        filled = sum(x is not None for x in (self.record, self.display_only, self.failure))
        if filled != 1:
            raise ValueError("RegionOutcome must carry exactly one of record/display_only/failure")

    @property
    def succeeded(self) -> bool:
        return self.failure is None


@dataclass(frozen=True, slots=True)
class CollectionResult:
    """📦 Агрегат після бар'єра fan-in."""

    records: Tuple[PriceRecord, ...] = ()
    display_only: Tuple[DisplayOnlyPrice, ...] = ()
    failures: Tuple[RegionFailure, ...] = ()

    @property
    def issued(self) -> int:
        return len(self.records) + len(self.display_only) + len(self.failures)

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[RegionOutcome]) -> "CollectionResult":
        outcomes = tuple(outcomes)
        records = tuple(o.record for o in outcomes if o.record is not None)
        display_only = tuple(o.display_only for o in outcomes if o.display_only is not None)
        failures = tuple(o.failure for o in outcomes if o.failure is not None)
        return cls(records=records, display_only=display_only, failures=failures)


# ================================
# 🛍️ КАТАЛОГ ПРОДУКТУ
# ================================
@dataclass(frozen=True, slots=True)
class CatalogItem:
    """🛍️ Внутрішня покупка, перелічена на базовій вітрині."""

    name: str
    offer_name: str                                                 # 🔑 Ключ зіставлення у кеші каталогу
    formatted_price: str = ""


@dataclass(frozen=True, slots=True)
class ProductOverview:
    """🛍️ Назва продукту та перелік його внутрішніх покупок."""

    product_id: str
    name: str
    items: Tuple[CatalogItem, ...] = ()


# ================================
# 📊 ЗВІТ ПОРІВНЯННЯ
# ================================
class ReportStatus(str, Enum):
    OK = "ok"
    NO_DATA = "no_data"


@dataclass(frozen=True, slots=True)
class ComparisonRow:
    """📊 Рядок таблиці: регіон, нативна ціна, код валюти, конвертована ціна або мітка N/A."""

    region_name: str
    native_price: str
    currency: str
    converted_price: str


@dataclass(frozen=True, slots=True)
class ComparisonReport:
    """📊 Результат запуску для зовнішнього рендерера."""

    product_id: str
    product_name: str
    base_currency: str
    status: ReportStatus
    rows: Tuple[ComparisonRow, ...] = ()
    display_only: Tuple[DisplayOnlyPrice, ...] = ()
    failures: Tuple[RegionFailure, ...] = ()
    records: Tuple[PriceRecord, ...] = ()                           # 💰 Відсортовані записи з конвертацією
    item: Optional[CatalogItem] = None

    @property
    def has_data(self) -> bool:
        return self.status is ReportStatus.OK


__all__ = [
    "RateTable",
    "to_amount",
    "Region",
    "PriceRecord",
    "ExtractionKind",
    "PriceExtraction",
    "DisplayOnlyPrice",
    "RegionFailure",
    "RegionOutcome",
    "CollectionResult",
    "CatalogItem",
    "ProductOverview",
    "ReportStatus",
    "ComparisonRow",
    "ComparisonReport",
]

# 📚 price_preview/config/reference_data.py
"""
📚 Завантаження довідкових даних: каталог регіонів та метадані валют.

🔹 Дані пакету лежать у `regions.yaml` / `currencies.yaml` поруч із модулем.
🔹 Результат незмінний: `tuple[Region, ...]` та `CurrencyMetadata`.
🔹 Дублікати або некоректні коди регіонів → `ConfigurationError`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                                         # 📄 Зчитуємо YAML-файли

# 🔠 Системні імпорти
import importlib.resources as pkg_resources                         # 📦 Доступ до ресурсів пакету
from functools import lru_cache                                     # ♻️ Одне читання на процес
from typing import Any, Iterable, Mapping, Tuple

# 🧩 Внутрішні модулі проєкту
from price_preview.domain.currency.metadata import CurrencyMetadata
from price_preview.domain.pricing.entities import Region
from price_preview.errors.custom_errors import ConfigurationError
from price_preview.shared.utils.logger import get_logger

# ================================
# 🧾 ЛОГЕР
# ================================
logger = get_logger("config.reference_data")

_PACKAGE = "price_preview.config"
REGIONS_FILE = "regions.yaml"
CURRENCIES_FILE = "currencies.yaml"


def _read_package_yaml(filename: str) -> Any:
    try:
        raw = pkg_resources.files(_PACKAGE).joinpath(filename).read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Reference data file is missing: {filename}") from exc
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {filename}", details=str(exc)) from exc


# ================================
# 🌍 РЕГІОНИ
# ================================
def build_regions(entries: Iterable[Mapping[str, Any]]) -> Tuple[Region, ...]:
    """🌍 Перетворює сирі записи `{code, name}` на кортеж регіонів з перевіркою унікальності."""
    regions = []
    seen = set()
    for entry in entries or ():
        if not isinstance(entry, Mapping):
            raise ConfigurationError(f"Region entry must be a mapping: {entry!r}")
        try:
            region = Region(code=str(entry.get("code") or ""), name=str(entry.get("name") or ""))
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        if region.code in seen:
            raise ConfigurationError(f"Duplicate region code: {region.code}")
        seen.add(region.code)
        regions.append(region)
    if not regions:
        raise ConfigurationError("Region catalog is empty")
    return tuple(regions)


@lru_cache(maxsize=1)
def load_regions() -> Tuple[Region, ...]:
    """🌍 Вбудований каталог регіонів у порядку файлу."""
    data = _read_package_yaml(REGIONS_FILE) or {}
    regions = build_regions(data.get("regions") or ())
    logger.debug("🌍 reference.regions_loaded", extra={"count": len(regions)})
    return regions


# ================================
# 💱 ВАЛЮТИ
# ================================
@lru_cache(maxsize=1)
def load_currency_metadata() -> CurrencyMetadata:
    """💱 Вбудована таблиця символів, суфіксних валют і точностей."""
    data = _read_package_yaml(CURRENCIES_FILE) or {}
    return CurrencyMetadata.from_mapping(data)


__all__ = ["build_regions", "load_regions", "load_currency_metadata"]

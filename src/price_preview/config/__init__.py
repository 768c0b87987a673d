# ⚙️ price_preview/config/__init__.py
"""
⚙️ Конфігурація та довідкові дані застосунку.

🔹 `ConfigService`: злиття YAML / ENV / overrides з доступом за крапковим ключем.
🔹 `load_regions()` / `load_currency_metadata()`: незмінні довідники з ресурсів пакету.
"""

from .config_service import ConfigService
from .reference_data import build_regions, load_currency_metadata, load_regions

__all__ = ["ConfigService", "build_regions", "load_currency_metadata", "load_regions"]

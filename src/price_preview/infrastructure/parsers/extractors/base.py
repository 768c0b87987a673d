# 🧾 price_preview/infrastructure/parsers/extractors/base.py
"""
🧾 Спільна база для стратегій витягування ціни.

🔹 `PriceStrategy`: контракт однієї стратегії: `extract(soup, item) -> PriceExtraction | None`.
🔹 Нормалізує текстові дані та безпечно декодує JSON для стратегій.
🔹 Експортує утиліти для дочірніх модулів (`_norm_ws`, `_as_list`, `_try_json_loads`, `_attr_to_str`).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4 import BeautifulSoup	# 🥣 Парсимо HTML-документи
from bs4.element import Tag	# 🧱 Типи DOM-вузлів

# 🔠 Системні імпорти
import json	# 🧾 Десеріалізація JSON
import logging	# 🧾 Логування подій
import re	# 🧵 Робота з регулярними виразами
from abc import ABC, abstractmethod	# 🧩 Абстрактна стратегія
from typing import Any, List, Optional	# 🧰 Типи для статичного аналізу

# 🧩 Внутрішні модулі проєкту
from price_preview.domain.pricing.entities import CatalogItem, PriceExtraction	# 📦 Доменні результати
from price_preview.shared.utils.logger import LOG_NAME	# 🏷️ Базова назва логера

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.parser.extractor")	# 🧾 Логер для екстракторів парсера


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _norm_ws(text: str) -> str:
    """Нормалізує пробіли (включно з нерозривними) у переданому рядку."""
    if not text:	# 🚫 Порожній або None рядок
        return ""
    return re.sub(r"\s+", " ", text.replace("\xa0", " ")).strip()	# 🧹 Стискаємо та обрізаємо пробіли


def _attr_to_str(value: Any) -> str:
    """Повертає перше непорожнє текстове значення атрибута."""
    if value is None:	# 🚫 Атрибут відсутній
        return ""
    if isinstance(value, (list, tuple)):	# 📚 Атрибут представлено колекцією
        for candidate in value:
            if candidate:
                return str(candidate)
        return ""
    return str(value)


def _as_list(x: Any) -> List[Any]:
    """Гарантує отримання списку елементів."""
    if x is None:
        return []
    if isinstance(x, list):
        return x
    return [x]


def _try_json_loads(raw: Any) -> Optional[Any]:
    """Безпечно десеріалізує JSON, повертаючи None у разі помилок."""
    if not isinstance(raw, str):
        return None
    raw_clean = raw.strip()	# 🧼 Прибираємо зайві пробіли
    if not raw_clean:
        return None
    try:
        return json.loads(raw_clean)	# 📥 Десеріалізуємо у Python-структуру
    except ValueError as exc:	# ⚠️ Некоректний формат JSON
        logger.debug("🐛 Помилка декодування JSON: %s", exc)
        return None


def _dig(obj: Any, *path: Any) -> Any:
    """Безпечний прохід вкладеними dict/list (`_dig(doc, "d", 0, "attributes")`)."""
    current = obj
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not (-len(current) <= key < len(current)):
                return None
        elif not isinstance(current, dict):
            return None
        current = current[key] if isinstance(key, int) else current.get(key)
    return current


def _script_text(tag: Tag) -> str:
    """Сирий вміст `<script>` (string або text)."""
    return (tag.string or tag.get_text() or "").strip()


def _meta_content(soup: BeautifulSoup, prop: str) -> str:
    """Значення `content` першого `<meta property=...>`."""
    tag = soup.find("meta", attrs={"property": prop})
    if not isinstance(tag, Tag):
        return ""
    return _norm_ws(_attr_to_str(tag.get("content")))


# ================================
# 🧩 КОНТРАКТ СТРАТЕГІЇ
# ================================
class PriceStrategy(ABC):
    """🧩 Одна стратегія ланцюга; `None` означає «не спрацювала, пробуй наступну»."""

    name: str = "base"
    supports_items: bool = False	# 🛍️ Чи вміє стратегія шукати ціну внутрішньої покупки

    @abstractmethod
    def extract(self, soup: BeautifulSoup, item: Optional[CatalogItem] = None) -> Optional[PriceExtraction]:
        """Повертає результат або None."""


__all__ = [
    "BeautifulSoup",
    "Tag",
    "PriceStrategy",
    "logger",
    "_as_list",
    "_attr_to_str",
    "_dig",
    "_meta_content",
    "_norm_ws",
    "_script_text",
    "_try_json_loads",
]

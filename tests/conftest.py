# tests/conftest.py
import json
import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

# Добавляем src в sys.path, чтобы работал импорт "price_preview.…"
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


# ──────────────────────────────────────────────────────────────────────────────
#                      🧪 Синтетические страницы витрины
# ──────────────────────────────────────────────────────────────────────────────

def _html(head: str = "", body: str = "") -> str:
    return f"<!DOCTYPE html><html><head>{head}</head><body>{body}</body></html>"


def in_app_entry(name: str, offer_name: str, price: Any, currency: str, formatted: str = "") -> Dict[str, Any]:
    """Одна внутренняя покупка в формате кеша каталога."""
    return {
        "id": offer_name,
        "type": "in-apps",
        "attributes": {
            "name": name,
            "offerName": offer_name,
            "offers": [{"price": price, "currencyCode": currency, "priceFormatted": formatted}],
        },
    }


def catalog_cache_page(
    price: Any = 4.99,
    currency: str = "USD",
    *,
    in_apps: Optional[List[Dict[str, Any]]] = None,
    title: str = "Sample App",
    extra_head: str = "",
    decoy_first: bool = False,
) -> str:
    """Страница с <script id="shoebox-media-api-cache-apps"> (стратегия №1)."""
    attributes: Dict[str, Any] = {"name": title}
    if price is not None:
        attributes["price"] = price
    if currency is not None:
        attributes["currencyCode"] = currency
    document: Dict[str, Any] = {"id": "1", "type": "apps", "attributes": attributes}
    if in_apps is not None:
        document["relationships"] = {"top-in-apps": {"data": in_apps}}

    outer: Dict[str, str] = {}
    if decoy_first:
        # первый ключ: документ без списка покупок и с другой ценой
        decoy = {"id": "2", "type": "apps", "attributes": {"price": 100, "currencyCode": "EUR"}}
        outer["decoy"] = json.dumps({"d": [decoy]})
    outer["main"] = json.dumps({"d": [document]})
    script = f'<script type="fastboot/shoebox" id="shoebox-media-api-cache-apps">{json.dumps(outer)}</script>'
    head = f'<meta property="og:title" content="{title}">{extra_head}'
    return _html(head=head, body=script)


def open_graph_page(amount: str = "9.99", currency: str = "EUR", title: str = "Sample App") -> str:
    """Страница с og:price:* (стратегия №2)."""
    head = (
        f'<meta property="og:title" content="{title}">'
        f'<meta property="og:price:amount" content="{amount}">'
        f'<meta property="og:price:currency" content="{currency}">'
    )
    return _html(head=head)


def json_ld_page(offers: Any, title: str = "Sample App") -> str:
    """Страница с application/ld+json (стратегия №3)."""
    block = {"@context": "https://schema.org", "@type": "SoftwareApplication", "name": title, "offers": offers}
    body = f'<script type="application/ld+json">{json.dumps(block)}</script>'
    return _html(head=f'<meta property="og:title" content="{title}">', body=body)


def legacy_label_page(label_html: str = "Free&nbsp;Trial") -> str:
    """Страница только с текстовой меткой цены (стратегия №4)."""
    body = (
        '<ul class="inline-list">'
        '<li class="inline-list__item inline-list__item--bulleted">4+</li>'
        f'<li class="inline-list__item inline-list__item--bulleted app-header__list__item--price">{label_html}</li>'
        "</ul>"
    )
    return _html(body=body)


def empty_page() -> str:
    return _html(head='<meta property="og:title" content="Nothing here">', body="<p>no price</p>")


@pytest.fixture
def pages() -> SimpleNamespace:
    """Набор генераторов HTML-страниц для тестов стратегий и сборщика."""
    return SimpleNamespace(
        catalog_cache=catalog_cache_page,
        open_graph=open_graph_page,
        json_ld=json_ld_page,
        legacy_label=legacy_label_page,
        empty=empty_page,
        in_app=in_app_entry,
    )

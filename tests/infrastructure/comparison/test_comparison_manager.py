# tests/infrastructure/comparison/test_comparison_manager.py
from decimal import Decimal
from typing import Dict, List

import httpx
import pytest

from price_preview.config import ConfigService, load_currency_metadata
from price_preview.domain.currency import PriceFormatter
from price_preview.domain.pricing import CatalogItem, Region, ReportStatus
from price_preview.errors import NetworkRequestError, RatesUnavailableError
from price_preview.infrastructure.collection import RegionCollector
from price_preview.infrastructure.comparison import PriceComparisonManager
from price_preview.infrastructure.currency import CurrencyConverter
from price_preview.infrastructure.parsers import PriceExtractor

REGIONS = (
    Region("AE", "United Arab Emirates"),
    Region("GB", "United Kingdom"),
    Region("JP", "Japan"),
    Region("US", "United States"),
)


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Фейковые зависимости
# ──────────────────────────────────────────────────────────────────────────────

class _FakeFetcher:
    def __init__(self, pages: Dict[str, str]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch_page(self, product_id: str, region_code: str) -> str:
        self.calls.append(region_code)
        page = self.pages.get(region_code)
        if page is None:
            raise NetworkRequestError(f"HTTP 404 for {region_code}", status_code=404)
        return page


class _FakeRates:
    def __init__(self, table=None, *, error: Exception = None) -> None:
        self.table = table or {}
        self.error = error
        self.calls: List[str] = []

    async def rates(self, base_currency: str):
        self.calls.append(base_currency)
        if self.error is not None:
            raise self.error
        return self.table


def _manager(fetcher, rates) -> PriceComparisonManager:
    extractor = PriceExtractor()
    return PriceComparisonManager(
        fetcher=fetcher,
        extractor=extractor,
        collector=RegionCollector(fetcher, extractor, REGIONS),
        rates_provider=rates,
        converter=CurrencyConverter(),
        formatter=PriceFormatter(load_currency_metadata()),
    )


@pytest.fixture
def store(pages) -> Dict[str, str]:
    return {
        "US": pages.catalog_cache(9.99, "USD", title="Sample App"),
        "GB": pages.catalog_cache(7.99, "GBP", title="Sample App"),
        "JP": pages.catalog_cache(1200, "JPY", title="Sample App"),
        "AE": pages.legacy_label("Free"),
    }


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Полный сценарий
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_compare_builds_sorted_formatted_report(store):
    rates = _FakeRates({"USD": 1.0, "GBP": 0.8, "JPY": 150.0})
    manager = _manager(_FakeFetcher(store), rates)

    seen = []
    report = await manager.compare("284882215", "usd", product_name="Sample App", on_outcome=seen.append)

    assert report.status is ReportStatus.OK
    assert report.has_data
    assert report.base_currency == "USD"
    assert rates.calls == ["USD"]
    assert len(seen) == len(REGIONS)

    assert [(r.region_name, r.native_price, r.currency, r.converted_price) for r in report.rows] == [
        ("Japan", "¥1200", "JPY", "$8.00"),
        ("United Kingdom", "£7.99", "GBP", "$9.99"),
        ("United States", "$9.99", "USD", "$9.99"),
    ]
    assert [d.label for d in report.display_only] == ["Free"]
    assert report.failures == ()
    assert report.records[0].amount == Decimal("1200")


@pytest.mark.asyncio
async def test_records_without_rate_are_listed_last_as_not_available(store, pages):
    store["GB"] = pages.catalog_cache(5, "QQQ")
    manager = _manager(_FakeFetcher(store), _FakeRates({"JPY": 150.0}))

    report = await manager.compare("1", "USD")
    assert [r.region_name for r in report.rows] == ["Japan", "United Kingdom", "United States"]
    assert report.rows[1].native_price == "QQQ 5.00"
    assert [r.converted_price for r in report.rows[1:]] == ["N/A", "N/A"]


@pytest.mark.asyncio
async def test_no_records_gives_no_data_without_rates_call(pages):
    fetcher = _FakeFetcher({"US": pages.legacy_label("Free"), "JP": pages.empty()})
    rates = _FakeRates({"USD": 1.0})

    report = await _manager(fetcher, rates).compare("1", "USD")

    assert report.status is ReportStatus.NO_DATA
    assert not report.has_data
    assert report.rows == ()
    assert rates.calls == []
    assert len(report.failures) == len(REGIONS) - 1


@pytest.mark.asyncio
async def test_rates_failure_is_fatal(store):
    manager = _manager(_FakeFetcher(store), _FakeRates(error=RatesUnavailableError("down", base_currency="USD")))
    with pytest.raises(RatesUnavailableError):
        await manager.compare("1", "USD")


@pytest.mark.asyncio
async def test_regional_failures_do_not_abort_the_run(store):
    del store["JP"]
    report = await _manager(_FakeFetcher(store), _FakeRates({"USD": 1.0, "GBP": 0.8})).compare("1", "USD")

    assert [f.region.code for f in report.failures] == ["JP"]
    assert [r.region_name for r in report.rows] == ["United Kingdom", "United States"]


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Инспекция и покупки
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_inspect_product_reads_name_and_items(pages):
    in_apps = [pages.in_app("Gold", "com.sample.gold", 4.99, "USD", "$4.99")]
    fetcher = _FakeFetcher({"US": pages.catalog_cache(title="Sample App", in_apps=in_apps)})
    manager = _manager(fetcher, _FakeRates())

    overview = await manager.inspect_product("42", manager.resolve_base_region("USD"))
    assert overview.name == "Sample App"
    assert overview.items == (CatalogItem("Gold", "com.sample.gold", "$4.99"),)
    assert fetcher.calls == ["US"]


@pytest.mark.asyncio
async def test_inspect_product_name_falls_back_to_id(pages):
    manager = _manager(_FakeFetcher({"US": pages.legacy_label("Free")}), _FakeRates())
    overview = await manager.inspect_product("42", REGIONS[3])
    assert overview.name == "42"
    assert overview.items == ()


@pytest.mark.asyncio
async def test_item_comparison(pages):
    def page(price, currency):
        return pages.catalog_cache(0, currency, in_apps=[pages.in_app("Gold", "com.sample.gold", price, currency)])

    fetcher = _FakeFetcher({"US": page(4.99, "USD"), "JP": page(750, "JPY"), "GB": page(3.99, "GBP"), "AE": page(18.99, "AED")})
    manager = _manager(fetcher, _FakeRates({"USD": 1.0, "JPY": 150.0, "GBP": 0.8, "AED": 3.67}))
    item = manager.select_item((CatalogItem("Gold", "com.sample.gold"),), "gold")

    report = await manager.compare("1", "USD", item=item)
    assert report.item == item
    assert [r.converted_price for r in report.rows] == ["$4.99", "$4.99", "$5.00", "$5.17"]


def test_from_config_wires_components():
    config = ConfigService(overrides={"http.max_concurrency": 2, "presentation.not_available_label": "-"}, environ={})
    client = httpx.AsyncClient()
    manager = PriceComparisonManager.from_config(config, client, REGIONS, load_currency_metadata())

    assert manager.regions == REGIONS
    assert manager.resolve_base_region("JPY").code == "JP"
    assert manager.resolve_base_region("EUR").code == "AE"

# tests/cli/test_cli_main.py
from typing import List

import httpx
import pytest
from rich.console import Console

from price_preview.cli.main import build_parser, main, parse_product_id, run
from price_preview.cli.table_renderer import NO_DATA_MESSAGE
from price_preview.config import ConfigService, load_regions
from price_preview.domain.pricing import Region
from price_preview.errors import ItemNotFoundError, RatesUnavailableError

REGIONS = (
    Region("GB", "United Kingdom"),
    Region("JP", "Japan"),
    Region("US", "United States"),
)


@pytest.fixture
def config() -> ConfigService:
    return ConfigService(
        overrides={
            "catalog.page_url_template": "https://store.test/{region}/app/id{product_id}",
            "rates.url_template": "https://rates.test/latest/{base}",
            "logging.file": "",
        },
        environ={},
    )


def _transport(pages, *, rates_status: int = 200, requested: List[str] = None) -> httpx.MockTransport:
    gold = lambda price, cur, fmt="": pages.in_app("Gold Pack", "com.sample.gold", price, cur, fmt)  # noqa: E731
    storefront = {
        "us": pages.catalog_cache(9.99, "USD", title="Sample [App]", in_apps=[gold(4.99, "USD", "$4.99")]),
        "gb": pages.catalog_cache(7.99, "GBP", title="Sample [App]", in_apps=[gold(3.99, "GBP")]),
        "jp": pages.catalog_cache(1200, "JPY", title="Sample [App]", in_apps=[gold(750, "JPY")]),
    }

    def handler(request: httpx.Request) -> httpx.Response:
        if requested is not None:
            requested.append(str(request.url))
        if request.url.host == "rates.test":
            return httpx.Response(rates_status, json={"rates": {"USD": 1, "GBP": 0.8, "JPY": 150}})
        region = request.url.path.split("/")[1]
        return httpx.Response(200, text=storefront[region])

    return httpx.MockTransport(handler)


def _console() -> Console:
    return Console(record=True, width=120, color_system=None)


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Аргументы
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "value, expected",
    [
        ("284882215", "284882215"),
        ("https://apps.apple.com/us/app/some-app/id284882215?mt=8", "284882215"),
        (" 42 ", "42"),
    ],
)
def test_parse_product_id(value, expected):
    assert parse_product_id(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "https://apps.apple.com/us/app/name"])
def test_parse_product_id_rejects(value):
    with pytest.raises(ValueError):
        parse_product_id(value)


def test_parser_defaults():
    args = build_parser().parse_args(["42"])
    assert args.currency is None
    assert args.item is None
    assert args.list_items is False


def test_main_rejects_bad_product_id():
    with pytest.raises(SystemExit) as ei:
        main(["not-a-product"])
    assert ei.value.code == 2


def test_main_rejects_bad_currency():
    with pytest.raises(SystemExit) as ei:
        main(["42", "--currency", "DOLLARS"])
    assert ei.value.code == 2


def test_main_missing_config_file(tmp_path):
    assert main(["42", "--config", str(tmp_path / "absent.yaml")]) == 2


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Полный запуск
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_run_prints_progress_and_table(config, pages):
    console = _console()
    requested: List[str] = []
    args = build_parser().parse_args(["42", "-c", "usd"])
    args.currency = "USD"

    code = await run(args, config=config, console=console, regions=REGIONS, transport=_transport(pages, requested=requested))
    out = console.export_text()

    assert code == 0
    assert "Product: Sample [App]" in out
    assert "Base currency: USD" in out
    assert "Japan → ¥1200 (JPY)" in out
    assert "United Kingdom → £7.99 (GBP)" in out
    assert "Converted (USD)" in out
    assert out.index("$8.00") < out.rindex("$9.99")
    assert requested.count("https://rates.test/latest/USD") == 1
    assert requested[0] == "https://store.test/us/app/id42"


@pytest.mark.asyncio
async def test_run_list_items(config, pages):
    console = _console()
    args = build_parser().parse_args(["42", "--list-items"])
    args.currency = "USD"

    assert await run(args, config=config, console=console, regions=REGIONS, transport=_transport(pages)) == 0
    out = console.export_text()
    assert "Gold Pack: $4.99" in out
    assert "Converted" not in out


@pytest.mark.asyncio
async def test_run_item_mode(config, pages):
    console = _console()
    args = build_parser().parse_args(["42", "--item", "com.sample.gold"])
    args.currency = "USD"

    assert await run(args, config=config, console=console, regions=REGIONS, transport=_transport(pages)) == 0
    out = console.export_text()
    assert "Item: Gold Pack" in out
    assert "Sample [App] / Gold Pack" in out
    assert "$5.00" in out


@pytest.mark.asyncio
async def test_run_unknown_item(config, pages):
    args = build_parser().parse_args(["42", "--item", "bronze"])
    args.currency = "USD"
    with pytest.raises(ItemNotFoundError):
        await run(args, config=config, console=_console(), regions=REGIONS, transport=_transport(pages))


@pytest.mark.asyncio
async def test_run_rates_failure_propagates(config, pages):
    args = build_parser().parse_args(["42"])
    args.currency = "USD"
    with pytest.raises(RatesUnavailableError):
        await run(args, config=config, console=_console(), regions=REGIONS, transport=_transport(pages, rates_status=503))


@pytest.mark.asyncio
async def test_run_without_any_price_reports_no_data_and_exits_zero(config, pages):
    console = _console()
    requested: List[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, text=pages.legacy_label("Free"))

    args = build_parser().parse_args(["42"])
    args.currency = "USD"
    code = await run(args, config=config, console=console, regions=REGIONS, transport=httpx.MockTransport(handler))
    out = console.export_text()

    assert code == 0
    assert NO_DATA_MESSAGE in out
    assert "Converted" not in out
    assert "Japan → Free" in out
    assert not any("rates.test" in url for url in requested)


@pytest.mark.asyncio
async def test_run_with_bundled_region_catalog(config, pages):
    console = _console()
    requested: List[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        if request.url.host == "rates.test":
            return httpx.Response(200, json={"rates": {"USD": 1}})
        return httpx.Response(200, text=pages.catalog_cache(1.99, "USD", title="Sample App"))

    args = build_parser().parse_args(["42"])
    args.currency = "USD"
    code = await run(args, config=config, console=console, transport=httpx.MockTransport(handler))

    catalog = load_regions()
    storefront = [path for path in requested if path.endswith("/app/id42")]
    assert code == 0
    assert len(storefront) == len(catalog) + 1
    assert storefront.count("/us/app/id42") == 2
    assert storefront.count("/fj/app/id42") == 1
    assert storefront.count("/nz/app/id42") == 1
    assert "Converted (USD)" in console.export_text()

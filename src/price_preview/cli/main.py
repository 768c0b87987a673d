# 🚀 price_preview/cli/main.py
"""
🚀 Точка входу командного рядка `price-preview`.

🔹 Розбирає аргументи (ідентифікатор або URL продукту, базова валюта, покупка).
🔹 Завантажує конфігурацію та довідники, ініціалізує логування і спільний HTTP-клієнт.
🔹 Друкує живі рядки по регіонах та фінальну таблицю.
🔹 Коди виходу: 0 (успіх або немає даних), 1 (фатальний збій запуску), 2 (некоректні аргументи).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 Транспорт (для тестового MockTransport)
from rich.console import Console                                    # 🖥️ Вивід у термінал
from rich.markup import escape                                      # 🧼 Екрануємо назви у розмітці

# 🔠 Системні імпорти
import argparse                                                     # 🧾 Розбір аргументів
import asyncio                                                      # ⏱️ Цикл подій
import logging
import re
from typing import Optional, Sequence

# 🧩 Внутрішні модулі проєкту
from price_preview.config.config_service import ConfigService
from price_preview.config.reference_data import load_currency_metadata, load_regions
from price_preview.domain.currency.formatter import PriceFormatter
from price_preview.domain.pricing.entities import Region
from price_preview.errors.custom_errors import AppError
from price_preview.infrastructure.catalog import CatalogInfraOptions, build_http_client
from price_preview.infrastructure.comparison import PriceComparisonManager
from price_preview.shared.utils.logger import LOG_NAME, init_logging_from_config
from .table_renderer import TableRenderer

# ================================
# 🧾 ЛОГЕР ТА КОНСТАНТИ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

_ID_IN_URL = re.compile(r"/id(\d+)")                                # 🔗 .../app/name/id284882215
_CURRENCY = re.compile(r"^[A-Za-z]{3}$")


# ================================
# 🧾 АРГУМЕНТИ
# ================================
def parse_product_id(value: str) -> str:
    """🔢 Числовий ідентифікатор або URL вітрини з `id<цифри>`."""
    raw = (value or "").strip()
    if raw.isdigit():
        return raw
    match = _ID_IN_URL.search(raw)
    if match:
        return match.group(1)
    raise ValueError(f"Not a product id or storefront URL: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="price-preview",
        description="Compare a product's price across regional storefronts in one base currency.",
    )
    parser.add_argument("product", help="numeric product id or storefront URL containing id<digits>")
    parser.add_argument("-c", "--currency", help="base currency code (default from config, USD)")
    parser.add_argument("-i", "--item", help="compare an in-app item by offer name or display name")
    parser.add_argument("--list-items", action="store_true", help="list in-app items and exit")
    parser.add_argument("--config", help="path to a YAML file overriding the bundled config")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="override logging.level",
    )
    return parser


# ================================
# 🚀 СЦЕНАРІЙ
# ================================
async def run(
    args: argparse.Namespace,
    *,
    config: ConfigService,
    console: Optional[Console] = None,
    regions: Optional[Sequence[Region]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    """🚀 Виконує один запуск; повертає код виходу."""
    console = console or Console()
    product_id = str(args.product)
    currency = str(args.currency).upper()
    catalog = tuple(regions) if regions is not None else load_regions()
    formatter = PriceFormatter(load_currency_metadata())
    renderer = TableRenderer(console, formatter)
    options = CatalogInfraOptions.from_config(config)

    async with build_http_client(options, transport=transport) as client:
        manager = PriceComparisonManager.from_config(
            config, client, catalog, formatter.metadata, options=options,
        )
        base_region = manager.resolve_base_region(currency)
        overview = await manager.inspect_product(product_id, base_region)

        if args.list_items:
            renderer.print_items(overview)
            return EXIT_OK

        item = manager.select_item(overview.items, args.item) if args.item else None
        console.print(
            f"Product: [bold green]{escape(overview.name)}[/] | Region: [bold green]{base_region.name}[/]"
            f" | Base currency: [bold green]{currency}[/]"
            + (f" | Item: [bold green]{escape(item.name)}[/]" if item else "")
        )
        report = await manager.compare(
            product_id,
            currency,
            base_region=base_region,
            item=item,
            product_name=overview.name,
            on_outcome=renderer.print_outcome,
        )

    renderer.print_report(report)
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)                                  # ❗ Некоректні аргументи → SystemExit(2)
    try:
        args.product = parse_product_id(args.product)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        overrides = {"logging.level": args.log_level} if args.log_level else None
        config = ConfigService(args.config, overrides=overrides)
    except AppError as exc:
        Console(stderr=True).print(f"[bold red]Configuration error:[/] {escape(str(exc))}")
        return EXIT_USAGE

    args.currency = args.currency or str(config.get("catalog.default_currency", "USD"))
    if not _CURRENCY.match(args.currency):
        parser.error(f"Invalid currency code: {args.currency!r}")

    init_logging_from_config(config.section("logging"))
    try:
        return asyncio.run(run(args, config=config))
    except AppError as exc:
        logger.error("💥 cli.run_failed", extra={**exc.to_log_extra(), "error": exc.message})
        Console(stderr=True).print(f"[bold red]Error:[/] {escape(str(exc))}")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.info("🛑 cli.interrupted")
        return EXIT_FAILURE


__all__ = ["build_parser", "main", "parse_product_id", "run"]

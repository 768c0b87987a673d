# 📊 price_preview/infrastructure/comparison/comparison_manager.py
"""
📊 Оркестрація одного порівняння цін продукту по регіонах.

🔹 Інспектує базову вітрину: назва продукту (`og:title`) та перелік внутрішніх покупок.
🔹 Запускає збір по регіонах; порожній результат → звіт `NO_DATA` без запиту курсів.
🔹 Отримує курси (фатальний збій пробрасується, зібрані дані відкидаються), конвертує, сортує, форматує.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx														# 🌐 Спільний HTTP-клієнт

# 🔠 Системні імпорти
import logging														# 🧾 Логування кроків сценарію
from typing import Optional, Sequence, Tuple						# 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from price_preview.config.config_service import ConfigService		# ⚙️ Конфігураційні значення
from price_preview.domain.currency.formatter import PriceFormatter
from price_preview.domain.currency.metadata import CurrencyMetadata
from price_preview.domain.pricing.entities import (
    CatalogItem,
    ComparisonReport,
    ProductOverview,
    Region,
    ReportStatus,
)
from price_preview.domain.pricing.interfaces import (
    IPageFetcher,
    IPriceExtractor,
    IRatesProvider,
    OutcomeCallback,
)
from price_preview.domain.pricing.services import build_rows, resolve_base_region, select_item
from price_preview.infrastructure.catalog import CatalogInfraOptions, StorefrontPageFetcher
from price_preview.infrastructure.collection.region_collector import RegionCollector
from price_preview.infrastructure.currency import CurrencyConverter, ExchangeRateProvider
from price_preview.infrastructure.parsers.price_extractor import PriceExtractor
from price_preview.shared.utils.logger import LOG_NAME				# 🏷️ Спільний неймспейс логів


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.comparison")


# ================================
# 🧠 МЕНЕДЖЕР ПОРІВНЯННЯ
# ================================
class PriceComparisonManager:
    """🧠 Оркеструє інспекцію продукту, збір по регіонах, курси та побудову звіту."""

    # ================================
    # 🧱 ІНІЦІАЛІЗАЦІЯ
    # ================================
    def __init__(
        self,
        *,
        fetcher: IPageFetcher,
        extractor: IPriceExtractor,
        collector: RegionCollector,
        rates_provider: IRatesProvider,
        converter: CurrencyConverter,
        formatter: PriceFormatter,
        not_available_label: str = "N/A",
    ) -> None:
        self._fetcher = fetcher										# 🌐 Транспорт сторінок
        self._extractor = extractor									# 🔎 Ланцюг стратегій
        self._collector = collector									# 📦 Fan-out / fan-in
        self._rates_provider = rates_provider						# 💱 Джерело курсів
        self._converter = converter									# 🧮 Конвертація + сортування
        self._formatter = formatter									# 🖋️ Рендер сум
        self._not_available_label = not_available_label				# 🏷️ Текст для записів без курсу

    @classmethod
    def from_config(
        cls,
        config: ConfigService,
        client: httpx.AsyncClient,
        regions: Sequence[Region],
        metadata: CurrencyMetadata,
        *,
        options: Optional[CatalogInfraOptions] = None,
    ) -> "PriceComparisonManager":
        """🏗️ Збирає менеджер з конфігурації та спільного HTTP-клієнта."""
        opts = options or CatalogInfraOptions.from_config(config)
        fetcher = StorefrontPageFetcher(client, opts)
        extractor = PriceExtractor(html_parser=opts.html_parser)
        return cls(
            fetcher=fetcher,
            extractor=extractor,
            collector=RegionCollector(fetcher, extractor, regions, max_concurrency=opts.max_concurrency),
            rates_provider=ExchangeRateProvider(client, url_template=opts.rates_url_template),
            converter=CurrencyConverter(),
            formatter=PriceFormatter(metadata),
            not_available_label=str(config.get("presentation.not_available_label", "N/A")),
        )

    @property
    def regions(self) -> Tuple[Region, ...]:
        return self._collector.regions

    # ================================
    # 🌍 БАЗОВИЙ РЕГІОН ТА ПОКУПКИ
    # ================================
    def resolve_base_region(self, base_currency: str) -> Region:
        return resolve_base_region(self.regions, base_currency)

    @staticmethod
    def select_item(items: Sequence[CatalogItem], query: str) -> CatalogItem:
        return select_item(items, query)

    async def inspect_product(self, product_id: str, base_region: Region) -> ProductOverview:
        """🛍️ Одне завантаження базової сторінки: назва продукту + внутрішні покупки."""
        html = await self._fetcher.fetch_page(product_id, base_region.code)	# ❗ Збій транспорту пробрасується
        name = self._extractor.product_name(html) or str(product_id)
        items = self._extractor.catalog_items(html)
        logger.info(
            "🛍️ comparison.product_inspected",
            extra={"product_id": product_id, "region": base_region.code, "items": len(items)},
        )
        return ProductOverview(product_id=str(product_id), name=name, items=items)

    # ================================
    # 📣 ПУБЛІЧНИЙ МЕТОД
    # ================================
    async def compare(
        self,
        product_id: str,
        base_currency: str,
        *,
        base_region: Optional[Region] = None,
        item: Optional[CatalogItem] = None,
        product_name: Optional[str] = None,
        on_outcome: Optional[OutcomeCallback] = None,
    ) -> ComparisonReport:
        """
        📣 Формує повний звіт порівняння.

        Raises:
            RatesUnavailableError: курси недоступні (зібрані дані відкидаються).
        """
        base = (base_currency or "").strip().upper()
        region = base_region or self.resolve_base_region(base)
        name = product_name or str(product_id)
        logger.info(
            "🧾 comparison.start",
            extra={"product_id": product_id, "base_currency": base, "base_region": region.code},
        )

        collected = await self._collector.collect(product_id, region, item=item, on_outcome=on_outcome)

        if not collected.records:										# 📭 Нічого конвертувати
            logger.info("📭 comparison.no_data", extra={"product_id": product_id})
            return ComparisonReport(
                product_id=str(product_id),
                product_name=name,
                base_currency=base,
                status=ReportStatus.NO_DATA,
                display_only=collected.display_only,
                failures=collected.failures,
                item=item,
            )

        rates = await self._rates_provider.rates(base)					# 💥 Фатально при збої
        records = self._converter.convert(collected.records, rates)
        rows = build_rows(
            records,
            self._formatter,
            base,
            not_available_label=self._not_available_label,
        )
        logger.info(
            "✅ comparison.report_built",
            extra={"product_id": product_id, "rows": len(rows), "failures": len(collected.failures)},
        )
        return ComparisonReport(
            product_id=str(product_id),
            product_name=name,
            base_currency=base,
            status=ReportStatus.OK,
            rows=rows,
            display_only=collected.display_only,
            failures=collected.failures,
            records=tuple(records),
            item=item,
        )


__all__ = ["PriceComparisonManager"]

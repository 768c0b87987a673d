# 📦 price_preview/infrastructure/collection/region_collector.py
"""
📦 Паралельний збір цін по всіх регіонах каталогу.

🔹 Одна задача на регіон; задача базового регіону створюється першою і лише один раз.
🔹 Кожна задача: завантажити сторінку → витягнути ціну (парсинг у робочому потоці) → рівно одне
   повідомлення `RegionOutcome` у `asyncio.Queue`.
🔹 Єдина збиральна корутина читає стільки повідомлень, скільки видано задач (бар'єр fan-in).
🔹 Будь-який збій регіону стає `RegionFailure` і не впливає на інші регіони.
🔹 Опційний семафор (`max_concurrency`) обмежує кількість одночасних запитів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio														# ⏱️ Паралельні виклики транспорту
import logging														# 🧾 Логування кроків сценарію
from typing import List, Optional, Sequence							# 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from price_preview.domain.pricing.entities import (					# 📦 Доменні результати
    CatalogItem,
    CollectionResult,
    DisplayOnlyPrice,
    PriceExtraction,
    PriceRecord,
    Region,
    RegionFailure,
    RegionOutcome,
)
from price_preview.domain.pricing.interfaces import (				# 🧩 Контракти співпрацівників
    IPageFetcher,
    IPriceExtractor,
    OutcomeCallback,
)
from price_preview.errors.custom_errors import PriceUnavailableError, UserVisibleError
from price_preview.errors.reason_mapper import map_error_to_reason	# 🧭 Винятки → ReasonCode
from price_preview.shared.utils.logger import LOG_NAME				# 🏷️ Спільний неймспейс логів
from .metrics import COLLECTION_LATENCY, REGION_OUTCOMES			# 📈 Prometheus-метрики


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.collection")				# 🧾 Іменований логер


def _outcome_label(outcome: RegionOutcome) -> str:
    if outcome.record is not None:
        return "record"
    if outcome.display_only is not None:
        return "display_only"
    return "failure"


# ================================
# 🧠 ЗБИРАЧ РЕГІОНІВ
# ================================
class RegionCollector:
    """🧠 Fan-out по регіонах і fan-in через чергу повідомлень."""

    def __init__(
        self,
        fetcher: IPageFetcher,
        extractor: IPriceExtractor,
        regions: Sequence[Region],
        *,
        max_concurrency: Optional[int] = None,
    ) -> None:
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1 or None")
        self._fetcher = fetcher										# 🌐 Транспорт сторінок
        self._extractor = extractor									# 🔎 Ланцюг стратегій
        self._regions = tuple(regions)								# 🌍 Незмінний каталог
        self._max_concurrency = max_concurrency						# 🚦 None → без обмеження

        logger.info(
            "🧠 collection.collector_init",
            extra={"regions": len(self._regions), "max_concurrency": max_concurrency},
        )

    @property
    def regions(self) -> tuple[Region, ...]:
        return self._regions

    def issuance_order(self, base_region: Region) -> List[Region]:
        """🌍 Базовий регіон першим, далі каталог без повтору базового."""
        return [base_region, *(r for r in self._regions if r.code != base_region.code)]

    # ================================
    # 📣 ПУБЛІЧНИЙ МЕТОД
    # ================================
    async def collect(
        self,
        product_id: str,
        base_region: Region,
        *,
        item: Optional[CatalogItem] = None,
        on_outcome: Optional[OutcomeCallback] = None,
    ) -> CollectionResult:
        """
        📣 Збирає ціни з усіх регіонів.

        `on_outcome` викликається лише зі збиральної корутини, по одному разу на регіон,
        у порядку надходження результатів.
        """
        order = self.issuance_order(base_region)
        queue: "asyncio.Queue[RegionOutcome]" = asyncio.Queue()		# 📨 Канал результатів
        semaphore = asyncio.Semaphore(self._max_concurrency) if self._max_concurrency else None

        logger.info(
            "🧾 collection.start",
            extra={
                "product_id": product_id,
                "base_region": base_region.code,
                "units": len(order),
                "item": item.offer_name if item else None,
            },
        )

        outcomes: List[RegionOutcome] = []
        with COLLECTION_LATENCY.time():								# ⏱️ Вимірюємо латентність збору
            tasks = [
                asyncio.create_task(
                    self._run_unit(product_id, region, item, queue, semaphore),
                    name=f"price-region-{region.code}",
                )
                for region in order
            ]															# 👥 Порядок створення = порядок видачі
            try:
                for _ in range(len(tasks)):								# 🚧 Бар'єр: стільки ж повідомлень, скільки задач
                    outcome = await queue.get()
                    outcomes.append(outcome)
                    REGION_OUTCOMES.labels(outcome=_outcome_label(outcome)).inc()
                    if on_outcome is not None:
                        self._notify(on_outcome, outcome)
                await asyncio.gather(*tasks)
            finally:
                pending = [task for task in tasks if not task.done()]
                for task in pending:									# 🛑 Скасовуємо незавершені одиниці
                    task.cancel()
                if pending:
                    await asyncio.gather(*pending, return_exceptions=True)

        result = CollectionResult.from_outcomes(outcomes)
        logger.info(
            "✅ collection.done",
            extra={
                "product_id": product_id,
                "records": len(result.records),
                "display_only": len(result.display_only),
                "failures": len(result.failures),
            },
        )
        return result

    # ================================
    # 🔒 ВНУТРІШНІ МЕТОДИ
    # ================================
    async def _run_unit(
        self,
        product_id: str,
        region: Region,
        item: Optional[CatalogItem],
        queue: "asyncio.Queue[RegionOutcome]",
        semaphore: Optional[asyncio.Semaphore],
    ) -> None:
        """📨 Одна одиниця роботи: рівно одне повідомлення у чергу."""
        if semaphore is None:
            outcome = await self._process_region(product_id, region, item)
        else:
            async with semaphore:
                outcome = await self._process_region(product_id, region, item)
        queue.put_nowait(outcome)

    async def _process_region(
        self,
        product_id: str,
        region: Region,
        item: Optional[CatalogItem],
    ) -> RegionOutcome:
        """📥 Завантажує сторінку регіону та перетворює результат на `RegionOutcome`."""
        logger.debug(
            "🌐 collection.region.start",
            extra={"product_id": product_id, "region": region.code},
        )
        try:
            html = await self._fetcher.fetch_page(product_id, region.code)
            extraction: PriceExtraction = await asyncio.to_thread(self._extractor.extract, html, item=item)
            return self._to_outcome(region, extraction)
        except asyncio.CancelledError:
            logger.info(
                "🛑 collection.region.cancelled",
                extra={"product_id": product_id, "region": region.code},
            )
            raise														# 🔁 Не ковтаємо cancellation
        except Exception as exc:										# noqa: BLE001 # 🚨 Будь-який інший збій лишається в регіоні
            if isinstance(exc, PriceUnavailableError) and exc.region_code is None:
                exc.region_code = region.code							# 🌍 Екстрактор не знає регіону
            reason, ctx = map_error_to_reason(exc)
            extra = {**ctx, "product_id": product_id, "region": region.code, "reason": reason.value}
            if isinstance(exc, UserVisibleError):
                logger.info("⚠️ collection.region.failed", extra={**exc.to_log_extra(), **extra})
            else:
                logger.exception("🔥 collection.region.crashed", extra=extra)
            failure = RegionFailure(region=region, reason=reason, detail=str(exc) or type(exc).__name__)
            return RegionOutcome(region=region, failure=failure)

    @staticmethod
    def _notify(on_outcome: OutcomeCallback, outcome: RegionOutcome) -> None:
        """📣 Збій колбека відображення логуємо; збір триває."""
        try:
            on_outcome(outcome)
        except Exception:										# noqa: BLE001
            logger.exception("⚠️ collection.on_outcome_failed", extra={"region": outcome.region.code})

    @staticmethod
    def _to_outcome(region: Region, extraction: PriceExtraction) -> RegionOutcome:
        if extraction.is_full and extraction.amount is not None and extraction.currency:
            record = PriceRecord(
                region_name=region.name,
                amount=extraction.amount,
                currency=extraction.currency,
            )
            logger.debug(
                "🟢 collection.region.record",
                extra={"region": region.code, "currency": record.currency, "strategy": extraction.strategy},
            )
            return RegionOutcome(region=region, record=record)
        label = extraction.label or ""
        logger.debug("🪧 collection.region.display_only", extra={"region": region.code, "label": label})
        return RegionOutcome(region=region, display_only=DisplayOnlyPrice(region_name=region.name, label=label))


__all__ = ["RegionCollector"]

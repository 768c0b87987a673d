# 🌐 price_preview/infrastructure/catalog/page_fetcher.py
"""
🌐 HTTP-транспорт сторінок вітрини на базі `httpx.AsyncClient`.

🔹 `build_http_client()`: спільний клієнт (таймаут, User-Agent, ліміти пулу).
🔹 `StorefrontPageFetcher.fetch_page()`: GET сторінки продукту для регіону.
🔹 Збої httpx перетворюються на `NetworkRequestError` з URL та HTTP-кодом.
🔹 Не-текстова або недекодовна відповідь → `ParsingError`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 Асинхронний HTTP-клієнт

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування запитів
from typing import Optional                                         # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from price_preview.errors.custom_errors import NetworkRequestError, ParsingError
from price_preview.shared.utils.logger import LOG_NAME
from ._infra_options import DEFAULT_CATALOG_INFRA_OPTIONS, CatalogInfraOptions

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.catalog.fetcher")


# ================================
# 🏗️ ФАБРИКА КЛІЄНТА
# ================================
def build_http_client(
    options: CatalogInfraOptions = DEFAULT_CATALOG_INFRA_OPTIONS,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """🏗️ Створює спільний `AsyncClient`; `max_connections=None` означає пул без ліміту."""
    limits = httpx.Limits(
        max_connections=options.max_connections,
        max_keepalive_connections=options.max_connections,
    )
    client = httpx.AsyncClient(
        timeout=options.request_timeout_sec,
        headers={"User-Agent": options.user_agent, "Accept-Language": "en-US,en;q=0.9"},
        follow_redirects=options.follow_redirects,
        limits=limits,
        transport=transport,
    )
    logger.debug(
        "🔧 catalog.http_client_built",
        extra={"timeout": options.request_timeout_sec, "max_connections": options.max_connections},
    )
    return client


# ================================
# 🌐 ТРАНСПОРТ СТОРІНОК
# ================================
class StorefrontPageFetcher:
    """🌐 Завантажує сторінки продукту з регіональних вітрин."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        options: CatalogInfraOptions = DEFAULT_CATALOG_INFRA_OPTIONS,
    ) -> None:
        self._client = client                                       # 🌐 Спільний клієнт (закриває власник)
        self._options = options

    def page_url(self, product_id: str, region_code: str) -> str:
        """🔗 URL сторінки: регіон у нижньому регістрі, як у вітрині."""
        return self._options.page_url_template.format(
            region=(region_code or "").strip().lower(),
            product_id=str(product_id).strip(),
        )

    async def fetch_page(self, product_id: str, region_code: str) -> str:
        url = self.page_url(product_id, region_code)
        logger.debug("🌐 catalog.fetch.start", extra={"url": url, "region": region_code})
        try:
            response = await self._client.get(url)
            response.raise_for_status()                             # ❗ Підіймає виключення при не-2xx статусах
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.info(
                "🚫 catalog.fetch.http_status",
                extra={"url": url, "region": region_code, "status_code": status_code},
            )
            raise NetworkRequestError(
                f"HTTP {status_code} for {url}",
                url=url,
                status_code=status_code,
            ) from exc
        except httpx.RequestError as exc:
            logger.info(
                "🔌 catalog.fetch.request_error",
                extra={"url": url, "region": region_code, "error": type(exc).__name__},
            )
            raise NetworkRequestError(
                f"Request failed for {url}",
                details=str(exc) or type(exc).__name__,
                url=url,
            ) from exc

        logger.debug(
            "✅ catalog.fetch.done",
            extra={"url": url, "region": region_code, "bytes": len(response.content)},
        )
        return self._decode(response, url)

    @staticmethod
    def _decode(response: httpx.Response, url: str) -> str:
        """📄 Текст сторінки; бінарний вміст чи збійне кодування не є сторінкою вітрини."""
        media_type = response.headers.get("Content-Type", "").split(";")[0].strip().lower()
        if media_type and not (media_type.startswith("text/") or "html" in media_type or "xml" in media_type):
            logger.info("📄 catalog.fetch.not_text", extra={"url": url, "content_type": media_type})
            raise ParsingError(f"Unexpected content type {media_type} for {url}", url=url)
        try:
            return response.content.decode(response.encoding or "utf-8")
        except (LookupError, UnicodeDecodeError) as exc:
            logger.info("📄 catalog.fetch.undecodable", extra={"url": url, "encoding": response.encoding})
            raise ParsingError(f"Undecodable page for {url}", details=str(exc), url=url) from exc


__all__ = ["StorefrontPageFetcher", "build_http_client"]

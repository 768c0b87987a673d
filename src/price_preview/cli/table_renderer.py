# 🖥️ price_preview/cli/table_renderer.py
"""
🖥️ Термінальний вивід на базі `rich`.

🔹 Живі рядки прогресу по регіонах (по одному на результат).
🔹 Перелік внутрішніх покупок продукту.
🔹 Фінальна таблиця порівняння: Region / Price / Currency / Converted (BASE).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from rich.console import Console                                    # 🖥️ Вивід у термінал
from rich.table import Table                                        # 📊 Таблиця порівняння
from rich.text import Text                                          # 🎨 Стилізовані рядки

# 🧩 Внутрішні модулі проєкту
from price_preview.domain.currency.formatter import PriceFormatter
from price_preview.domain.pricing.entities import ComparisonReport, ProductOverview, RegionOutcome

NO_DATA_MESSAGE = "No pricing data available."
REGION_NO_DATA_MESSAGE = "No price data available for this region."


class TableRenderer:
    """🖥️ Друкує прогрес, покупки та звіт у переданий `Console`."""

    def __init__(self, console: Console, formatter: PriceFormatter) -> None:
        self._console = console
        self._formatter = formatter

    @property
    def console(self) -> Console:
        return self._console

    def outcome_line(self, outcome: RegionOutcome) -> Text:
        """📣 `Region → $9.99 (USD)`; текстова мітка; або повідомлення про відсутність ціни."""
        line = Text(outcome.region.name)
        if outcome.record is not None:
            record = outcome.record
            line.append(" → ")
            line.append(self._formatter.format(record.amount, record.currency), style="green")
            line.append(f" ({record.currency})")
        elif outcome.display_only is not None:
            line.append(" → ")
            line.append(outcome.display_only.label, style="green")
        else:
            line.append(": ")
            line.append(REGION_NO_DATA_MESSAGE, style="bright_red")
        return line

    def print_outcome(self, outcome: RegionOutcome) -> None:
        self._console.print(self.outcome_line(outcome))

    def print_items(self, overview: ProductOverview) -> None:
        if not overview.items:
            self._console.print(Text(f"{overview.name}: no in-app purchases listed."))
            return
        self._console.print(Text(overview.name, style="bold green"))
        for item in overview.items:
            self._console.print(Text(f"{item.name}: {item.formatted_price}", style="green"))

    def build_table(self, report: ComparisonReport) -> Table:
        title = report.product_name if report.item is None else f"{report.product_name} / {report.item.name}"
        table = Table(title=Text(title))
        table.add_column("Region")
        table.add_column("Price", justify="right")
        table.add_column("Currency")
        table.add_column(f"Converted ({report.base_currency})", justify="right")
        for row in report.rows:
            table.add_row(row.region_name, row.native_price, row.currency, row.converted_price)
        return table

    def print_report(self, report: ComparisonReport) -> None:
        if not report.has_data:
            self._console.print(NO_DATA_MESSAGE, style="yellow")
            return
        self._console.print()
        self._console.print(self.build_table(report))


__all__ = ["TableRenderer", "NO_DATA_MESSAGE", "REGION_NO_DATA_MESSAGE"]

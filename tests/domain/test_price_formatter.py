# tests/domain/test_price_formatter.py
from decimal import Decimal

import pytest

from price_preview.config.reference_data import load_currency_metadata
from price_preview.domain.currency import CurrencyMetadata, PriceFormatter


@pytest.fixture(scope="module")
def formatter() -> PriceFormatter:
    return PriceFormatter(load_currency_metadata())


# ──────────────────────────────────────────────────────────────────────────────
#                        🧪 Правила размещения и точности
# ──────────────────────────────────────────────────────────────────────────────

def test_zero_precision_suffix_currency_has_no_decimal_point(formatter):
    assert formatter.format(1000, "XOF") == "1000 Fr"
    assert "." not in formatter.format(Decimal("1234.4"), "XOF")


def test_zero_precision_prefix_currency(formatter):
    assert formatter.format(1200.4, "JPY") == "¥1200"


def test_three_decimal_group(formatter):
    assert formatter.format(1.5, "KWD") == "KD1.500"


def test_prefix_symbol_has_no_space(formatter):
    assert formatter.format(Decimal("9.99"), "USD") == "$9.99"
    assert formatter.format(4, "GBP") == "£4.00"


def test_suffix_symbol_is_separated_by_one_space(formatter):
    assert formatter.format(Decimal("149.99"), "UAH") == "149.99 ₴"


def test_unknown_currency_uses_code_prefix(formatter):
    assert formatter.format(5, "QQQ") == "QQQ 5.00"


def test_suffix_currency_without_symbol_falls_back_to_code():
    md = CurrencyMetadata.from_mapping({"symbols": {}, "suffix": ["ZZZ"], "decimals": {}})
    assert PriceFormatter(md).format(3, "ZZZ") == "3.00 ZZZ"


def test_float_artifacts_do_not_leak(formatter):
    assert formatter.format(0.1 + 0.2, "USD") == "$0.30"


def test_half_up_rounding_at_precision(formatter):
    assert formatter.format(Decimal("2.345"), "USD") == "$2.35"
    assert formatter.format(Decimal("0.5"), "JPY") == "¥1"

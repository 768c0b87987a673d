# tests/infrastructure/currency/test_currency_converter.py
from decimal import Decimal
from types import MappingProxyType

import pytest

from price_preview.domain.pricing import PriceRecord
from price_preview.infrastructure.currency import CurrencyConverter

RATES = MappingProxyType({"USD": 1.0, "JPY": 150.0, "EUR": 0.9, "GBP": 0.8, "KWD": 0.3})


@pytest.fixture
def converter() -> CurrencyConverter:
    return CurrencyConverter()


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Конвертация суммы
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "amount, currency, expected",
    [
        (Decimal("1200"), "JPY", Decimal("8.00")),
        (Decimal("9.99"), "USD", Decimal("9.99")),
        (Decimal("1"), "eur", Decimal("1.11")),
        (Decimal("1.5"), "KWD", Decimal("5.00")),
        (Decimal("0.005"), "USD", Decimal("0.01")),   # half-up
    ],
)
def test_convert_amount(converter, amount, currency, expected):
    assert converter.convert_amount(amount, currency, RATES) == expected


def test_converted_amount_always_has_two_places(converter):
    value = converter.convert_amount(Decimal("100"), "JPY", RATES)
    assert value.as_tuple().exponent == -2


@pytest.mark.parametrize("rates", [{}, {"JPY": 0}, {"JPY": -1.0}, {"JPY": float("nan")}])
def test_missing_or_unusable_rate_gives_none(converter, rates):
    assert converter.convert_amount(Decimal("1"), "JPY", rates) is None


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Конвертация записей
# ──────────────────────────────────────────────────────────────────────────────

def test_convert_records_sorts_and_keeps_native_amounts(converter):
    records = [
        PriceRecord("United States", Decimal("9.99"), "USD"),
        PriceRecord("Japan", Decimal("1200"), "JPY"),
        PriceRecord("Mars", Decimal("7"), "XXX"),
        PriceRecord("Germany", Decimal("7.20"), "EUR"),
        PriceRecord("Atlantis", Decimal("1"), "YYY"),
    ]
    result = converter.convert(records, RATES)

    assert [r.region_name for r in result] == ["Germany", "Japan", "United States", "Atlantis", "Mars"]
    assert [r.converted_amount for r in result] == [Decimal("8.00"), Decimal("8.00"), Decimal("9.99"), None, None]
    assert result[1].amount == Decimal("1200")
    assert result[1].currency == "JPY"


def test_convert_empty_list(converter):
    assert converter.convert([], RATES) == []


def test_converting_twice_is_rejected(converter):
    once = converter.convert([PriceRecord("Japan", Decimal("1200"), "JPY")], RATES)
    with pytest.raises(ValueError):
        converter.convert(once, RATES)


def test_reconverting_a_base_amount_at_rate_one_is_stable(converter):
    converted = converter.convert_amount(Decimal("1200"), "JPY", RATES)
    assert converter.convert_amount(converted, "USD", RATES) == converted


def test_adjacent_converted_amounts_are_non_decreasing(converter):
    records = [PriceRecord(f"R{i}", Decimal(a), c) for i, (a, c) in enumerate(
        [("3", "EUR"), ("450", "JPY"), ("2.5", "GBP"), ("1", "USD"), ("0.5", "KWD")]
    )]
    amounts = [r.converted_amount for r in converter.convert(records, RATES)]
    assert all(a <= b for a, b in zip(amounts, amounts[1:]))

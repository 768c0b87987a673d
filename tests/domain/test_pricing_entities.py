# tests/domain/test_pricing_entities.py
from decimal import Decimal
import dataclasses

import pytest

from price_preview.domain.pricing.entities import (
    CollectionResult,
    DisplayOnlyPrice,
    PriceExtraction,
    PriceRecord,
    Region,
    RegionFailure,
    RegionOutcome,
    to_amount,
)
from price_preview.errors import ReasonCode


# ──────────────────────────────────────────────────────────────────────────────
#                               🧪 to_amount
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "raw, expected",
    [
        (4.99, Decimal("4.99")),
        ("9.99", Decimal("9.99")),
        (" 12 ", Decimal("12")),
        (0, Decimal("0")),
        (Decimal("1.5"), Decimal("1.5")),
    ],
)
def test_to_amount_accepts_finite_non_negative(raw, expected):
    assert to_amount(raw) == expected


@pytest.mark.parametrize("raw", [None, True, False, "", "abc", -1, float("nan"), float("inf"), "NaN", "Infinity"])
def test_to_amount_rejects_garbage(raw):
    assert to_amount(raw) is None


# ──────────────────────────────────────────────────────────────────────────────
#                               🧪 Region
# ──────────────────────────────────────────────────────────────────────────────

def test_region_code_is_upper_cased():
    region = Region(" us ", "United States")
    assert region.code == "US"
    assert region.name == "United States"


@pytest.mark.parametrize("code", ["", "U", "USA", "1A"])
def test_region_rejects_bad_code(code):
    with pytest.raises(ValueError):
        Region(code, "Somewhere")


def test_region_requires_name():
    with pytest.raises(ValueError):
        Region("US", "  ")


def test_region_is_frozen():
    region = Region("US", "United States")
    with pytest.raises(dataclasses.FrozenInstanceError):
        region.code = "GB"  # type: ignore[misc]


# ──────────────────────────────────────────────────────────────────────────────
#                               🧪 PriceRecord
# ──────────────────────────────────────────────────────────────────────────────

def test_price_record_normalizes_amount_and_currency():
    record = PriceRecord("Japan", 1200, "jpy")
    assert record.amount == Decimal("1200")
    assert record.currency == "JPY"
    assert record.converted_amount is None
    assert not record.is_converted


@pytest.mark.parametrize("amount", [-1, float("nan"), "x", None])
def test_price_record_rejects_invalid_amount(amount):
    with pytest.raises(ValueError):
        PriceRecord("Japan", amount, "JPY")


def test_price_record_requires_currency():
    with pytest.raises(ValueError):
        PriceRecord("Japan", 1, "  ")


def test_conversion_is_assigned_once():
    record = PriceRecord("Japan", 1200, "JPY")
    converted = record.with_conversion(Decimal("8.00"))

    assert converted.converted_amount == Decimal("8.00")
    assert converted.is_converted
    assert record.converted_amount is None  # исходная запись не меняется
    assert converted.amount == record.amount

    with pytest.raises(ValueError):
        converted.with_conversion(Decimal("9.00"))


# ──────────────────────────────────────────────────────────────────────────────
#                      🧪 Извлечение и исходы регионов
# ──────────────────────────────────────────────────────────────────────────────

def test_price_extraction_constructors():
    full = PriceExtraction.full("catalog_cache", Decimal("4.99"), "usd")
    assert full.is_full
    assert full.currency == "USD"

    label = PriceExtraction.display_only("legacy_label", "Free")
    assert not label.is_full
    assert label.amount is None
    assert label.label == "Free"


def test_region_outcome_requires_exactly_one_payload():
    region = Region("US", "United States")
    record = PriceRecord("United States", 1, "USD")
    failure = RegionFailure(region, ReasonCode.HTTP_STATUS, "404")

    with pytest.raises(ValueError):
        RegionOutcome(region)
    with pytest.raises(ValueError):
        RegionOutcome(region, record=record, failure=failure)

    assert RegionOutcome(region, record=record).succeeded
    assert not RegionOutcome(region, failure=failure).succeeded


def test_collection_result_partitions_outcomes():
    us, gb, jp = Region("US", "United States"), Region("GB", "United Kingdom"), Region("JP", "Japan")
    outcomes = [
        RegionOutcome(us, record=PriceRecord(us.name, 1, "USD")),
        RegionOutcome(gb, display_only=DisplayOnlyPrice(gb.name, "Free")),
        RegionOutcome(jp, failure=RegionFailure(jp, ReasonCode.PRICE_UNAVAILABLE)),
    ]
    result = CollectionResult.from_outcomes(outcomes)

    assert result.issued == 3
    assert [r.region_name for r in result.records] == ["United States"]
    assert [d.label for d in result.display_only] == ["Free"]
    assert [f.region.code for f in result.failures] == ["JP"]

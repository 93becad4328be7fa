import pytest
from datetime import datetime, timezone
from decimal import Decimal

from common.clients.translate import Translation
from common.norm import price_intel
from common.norm.price_intel import extract_price_intelligence, extract_price_intelligence_sync

FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def fixed_clock(monkeypatch):
    monkeypatch.setattr(price_intel, "_now", lambda: FIXED_NOW)


def test_coffee_with_dollar_symbol():
    record = extract_price_intelligence_sync("Coffee costs about $4 here", "Unknown")
    assert record.product == "Coffee"
    assert record.price == 4
    assert record.currency == "USD"
    assert record.incentive_earned == Decimal("0.10")
    assert record.location == "Unknown"
    assert record.verified is False
    assert record.shopkeeper == "Anonymous Local Source"
    assert record.timestamp == FIXED_NOW


def test_rice_currency_from_location():
    record = extract_price_intelligence_sync("The price of rice is 50 rupees", "India")
    assert record.product == "rice"
    assert record.price == 50
    assert record.currency == "INR"
    assert record.incentive_earned == Decimal("37.50")


def test_explicit_code_beats_symbol():
    record = extract_price_intelligence_sync("coffee costs $4 USD", "Tokyo, Japan")
    assert record.currency == "USD"


def test_symbol_beats_location():
    record = extract_price_intelligence_sync("Coffee costs €3", "Tokyo, Japan")
    assert record.currency == "EUR"


@pytest.mark.parametrize("text", ["", "   ", "No prices here at all", "coffee is great"])
def test_no_match_returns_none(text):
    assert extract_price_intelligence_sync(text, "India") is None


def test_extraction_is_deterministic():
    first = extract_price_intelligence_sync("Tea costs 300 RSD", "Belgrade")
    second = extract_price_intelligence_sync("Tea costs 300 RSD", "Belgrade")
    assert first == second
    assert first.model_dump(mode="json") == second.model_dump(mode="json")


@pytest.mark.anyio
async def test_english_text_skips_translation():
    async def translator(text, source, target):
        raise AssertionError("translator should not be called")

    record = await extract_price_intelligence("Coffee costs about $4 here", "Unknown", "en", translator=translator)
    assert record.product == "Coffee"


@pytest.mark.anyio
async def test_foreign_text_is_translated_first():
    calls = []

    async def translator(text, source, target):
        calls.append((text, source, target))
        return Translation(text="Bread costs 2 EUR", confidence=0.9, source_language=source, target_language=target)

    record = await extract_price_intelligence("Le pain coûte 2 euros", "Paris", "fr", translator=translator)
    assert calls == [("Le pain coûte 2 euros", "fr", "en")]
    assert record.product == "Bread"
    assert record.currency == "EUR"


@pytest.mark.anyio
async def test_translation_failure_falls_back_to_original_text():
    async def translator(text, source, target):
        return None

    record = await extract_price_intelligence("Coffee costs ₩4500", "Seoul", "ko", translator=translator)
    assert record.product == "Coffee"
    assert record.currency == "KRW"
    assert record.incentive_earned == Decimal("1200.00")


@pytest.mark.anyio
async def test_sandbox_phrasebook_translation():
    record = await extract_price_intelligence("苹果的价格是5元", "Shanghai", "zh")
    assert record.product == "apples"
    assert record.price == 5
    assert record.currency == "CNY"
    assert record.incentive_earned == Decimal("0.65")


@pytest.mark.anyio
async def test_blank_text_returns_none():
    assert await extract_price_intelligence("  ", "India", "hi") is None


@pytest.mark.anyio
@pytest.mark.parametrize("language", ["EN", " en ", "En"])
async def test_processing_language_match_ignores_case(language):
    async def translator(text, source, target):
        raise AssertionError("translator should not be called")

    record = await extract_price_intelligence("Tea costs 4.5 EUR", "Unknown", language, translator=translator)
    assert record.price == Decimal("4.5")
    assert record.currency == "EUR"

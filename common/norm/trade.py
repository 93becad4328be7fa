import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Mapping, Optional

from .amounts import DEFAULT_CURRENCY, format_number, normalize_currency, parse_number
from . import TradeExtraction, TradeRecord

LOG = logging.getLogger(__name__)

DEFAULT_UNIT = "units"
CONFIRMATION_PREFIX = "Trade information extracted:"
ECHO_FIELDS = ("quantity", "unit_price", "currency", "total_value")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _text(raw: Any) -> Optional[str]:
    if not isinstance(raw, str):
        return None
    return raw.strip() or None


def build_confirmation(
    quantity: Optional[Decimal],
    unit: Optional[str],
    unit_price: Optional[Decimal],
    currency: Optional[str],
    total_value: Optional[Decimal],
) -> str:
    parts = [CONFIRMATION_PREFIX]
    if quantity is not None:
        parts.append(f"{format_number(quantity)} {unit or DEFAULT_UNIT}")
    if unit_price is not None and currency:
        parts.append(f"at {format_number(unit_price)} {currency} each")
    if total_value is not None:
        parts.append(f"(Total: {format_number(total_value)} {currency or DEFAULT_CURRENCY})")
    return " ".join(parts)


def extract_trade(args: Mapping[str, Any]) -> TradeExtraction:
    """Normalize trade arguments coming from the assistant's function call.

    Numeric fields may be numbers or numeric strings; anything unparseable
    is treated as missing. When no total is supplied it is derived from
    quantity and unit price. Missing values are defaulted in the record but
    left out of the confirmation sentence.
    """
    quantity = parse_number(args.get("quantity"))
    unit_price = parse_number(args.get("unit_price"))
    total_value = parse_number(args.get("total_value"))
    unit = _text(args.get("unit"))
    currency = normalize_currency(_text(args.get("currency")))

    if total_value is None and quantity is not None and unit_price is not None:
        total_value = quantity * unit_price

    confirmation = build_confirmation(quantity, unit, unit_price, currency, total_value)

    record = TradeRecord(
        quantity=quantity if quantity is not None else Decimal(0),
        unit=unit or DEFAULT_UNIT,
        unit_price=unit_price if unit_price is not None else Decimal(0),
        currency=currency or DEFAULT_CURRENCY,
        total_value=total_value if total_value is not None else Decimal(0),
        timestamp=_now(),
    )
    LOG.info("Trade extracted: %s", confirmation)

    return TradeExtraction(
        record=record,
        confirmation=confirmation,
        raw_echo={field: args.get(field) for field in ECHO_FIELDS},
    )

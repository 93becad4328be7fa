from pydantic import BaseModel, PlainSerializer
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Literal, Optional


def _plain_number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


Number = Annotated[Decimal, PlainSerializer(_plain_number, when_used="json")]


class TradeRecord(BaseModel):
    quantity: Number = Decimal(0)
    unit: str = "units"
    unit_price: Number = Decimal(0)
    currency: str = "USD"
    total_value: Number = Decimal(0)
    status: Literal["extracted"] = "extracted"
    timestamp: datetime


class TradeExtraction(BaseModel):
    record: TradeRecord
    confirmation: str
    raw_echo: dict[str, Any] = {}


class PriceMention(BaseModel):
    product: str
    price: Decimal
    symbol: Optional[str] = None
    code: Optional[str] = None


class PriceRecord(BaseModel):
    product: str
    price: Number
    currency: str
    location: str
    shopkeeper: str = "Anonymous Local Source"
    timestamp: datetime
    verified: bool = False
    incentive_earned: Number

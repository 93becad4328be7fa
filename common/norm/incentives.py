from decimal import ROUND_HALF_UP, Decimal

from .amounts import EXCHANGE_RATES

MIN_INCENTIVE_USD = Decimal("0.10")
MAX_INCENTIVE_USD = Decimal("1.00")
INCENTIVE_RATE = Decimal("0.01")


def base_incentive(price: Decimal) -> Decimal:
    """USD-equivalent reward for one price report, 1% of the price clamped to [0.10, 1.00]."""
    return min(max(price * INCENTIVE_RATE, MIN_INCENTIVE_USD), MAX_INCENTIVE_USD)


def calculate_incentive(price: Decimal, currency: str) -> Decimal:
    rate = EXCHANGE_RATES.get(currency, Decimal("1.0"))
    return (base_incentive(price) * rate).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

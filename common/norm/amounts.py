import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

DEFAULT_CURRENCY = "USD"

CURRENCY_SYMBOL_MAP = {
    "$": "USD",
    "€": "EUR",
    "£": "GBP",
    "¥": "JPY",
    "₹": "INR",
    "₩": "KRW",
}

# Short upper-case keys match as whole words, the rest as substrings.
LOCATION_CURRENCY_MAP = {
    "US": "USD",
    "USA": "USD",
    "United States": "USD",
    "EU": "EUR",
    "Europe": "EUR",
    "Germany": "EUR",
    "France": "EUR",
    "UK": "GBP",
    "Britain": "GBP",
    "England": "GBP",
    "JP": "JPY",
    "Japan": "JPY",
    "IN": "INR",
    "India": "INR",
    "KR": "KRW",
    "Korea": "KRW",
    "South Korea": "KRW",
    "CN": "CNY",
    "China": "CNY",
}

# Units of local currency per 1 USD.
EXCHANGE_RATES = {
    "USD": Decimal("1.00"),
    "EUR": Decimal("0.85"),
    "GBP": Decimal("0.73"),
    "JPY": Decimal("110.0"),
    "INR": Decimal("75.0"),
    "CNY": Decimal("6.5"),
    "KRW": Decimal("1200.0"),
    "BRL": Decimal("5.2"),
    "RUB": Decimal("70.0"),
}

KNOWN_CURRENCY_CODES = frozenset(
    set(CURRENCY_SYMBOL_MAP.values())
    | set(LOCATION_CURRENCY_MAP.values())
    | set(EXCHANGE_RATES)
    | {"RSD", "PLN", "CZK", "VND", "UAH", "CHF", "CAD", "AUD", "MXN"}
)

_TRAILING_WORDS = ("dollars", "dollar", "usd", "eur", "gbp", "inr", "jpy")
_THOUSANDS_COMMA_RE = re.compile(r"^\d{1,3}(?:,\d{3})+$")


def parse_number(raw: Any) -> Optional[Decimal]:
    """Coerce a loosely typed numeric value into a non-negative Decimal.

    Anything that is not a finite, non-negative number comes back as None.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, (int, float)):
        value = Decimal(str(raw))
    elif isinstance(raw, str):
        s = raw.strip()
        if s[:1] in CURRENCY_SYMBOL_MAP:
            s = s[1:].strip()
        lower = s.lower()
        for word in _TRAILING_WORDS:
            if lower.endswith(word):
                s = s[: -len(word)].strip()
                lower = s.lower()
        s = s.replace(" ", "")
        if not s:
            return None
        if s.count(",") == 1 and "." not in s and not _THOUSANDS_COMMA_RE.match(s):
            s = s.replace(",", ".")
        else:
            s = s.replace(",", "")
        try:
            value = Decimal(s)
        except InvalidOperation:
            return None
    else:
        return None

    if not value.is_finite() or value < 0:
        return None
    return value


def format_number(value: Decimal) -> str:
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")


def normalize_currency(curr: str | None) -> Optional[str]:
    if not curr:
        return None
    c = curr.strip().upper()
    return c or None


def currency_for_location(location: str | None) -> Optional[str]:
    if not location:
        return None
    lowered = location.lower()
    for place, code in LOCATION_CURRENCY_MAP.items():
        if len(place) <= 3 and place.isupper():
            if re.search(rf"\b{place}\b", location):
                return code
        elif place.lower() in lowered:
            return code
    return None


def resolve_currency(
    symbol: str | None,
    code: str | None,
    location: str | None,
) -> str:
    explicit = normalize_currency(code)
    if explicit:
        return explicit
    if symbol and symbol in CURRENCY_SYMBOL_MAP:
        return CURRENCY_SYMBOL_MAP[symbol]
    return currency_for_location(location) or DEFAULT_CURRENCY

import re
from decimal import Decimal
from typing import Optional

from .amounts import CURRENCY_SYMBOL_MAP, KNOWN_CURRENCY_CODES
from . import PriceMention


_SYMBOLS = "".join(re.escape(s) for s in CURRENCY_SYMBOL_MAP)

_PRICE_TAIL = rf"""
    \s*
    (?P<symbol>[{_SYMBOLS}])?
    \s*
    (?P<price>\d+(?:\.\d{{1,2}})?)
    (?:\s*(?P<code>[A-Za-z]{{3}})\b)?
"""

PRICE_PATTERNS = [
    re.compile(
        r"(?P<product>\w+.*?)\s*\b(?:costs?|is|price)\b\s*(?:(?:about|around)\b)?" + _PRICE_TAIL,
        re.IGNORECASE | re.VERBOSE,
    ),
    re.compile(
        r"(?P<product>\w+.*?)\s*\b(?:selling|available)\s*\b(?:for|at)\b" + _PRICE_TAIL,
        re.IGNORECASE | re.VERBOSE,
    ),
    re.compile(
        r"\b(?:price|cost)\s+of\s*(?P<product>\w+.*?)\s*\b(?:is|costs)\b" + _PRICE_TAIL,
        re.IGNORECASE | re.VERBOSE,
    ),
]

# One phrasing per entry of PRICE_PATTERNS, in the same order.
PHRASE_EXAMPLES = [
    "Coffee costs $4 here",
    "Fresh bread available for 2.50 EUR",
    "The price of rice is 50 rupees",
]

_PRODUCT_PREFIX_RE = re.compile(
    r"^(?:the\s+)?(?:(?:price|cost)\s+of\s+)?(?:the\s+)?",
    re.IGNORECASE,
)
_PRODUCT_SUFFIX_RE = re.compile(r"\s+(?:is|are)$", re.IGNORECASE)


def clean_product(raw: str) -> str:
    product = raw.strip(" \t\n,.;:")
    product = _PRODUCT_PREFIX_RE.sub("", product)
    product = _PRODUCT_SUFFIX_RE.sub("", product)
    return product.strip()


def _currency_code(raw: str | None) -> Optional[str]:
    if not raw:
        return None
    if raw.isupper() or raw.upper() in KNOWN_CURRENCY_CODES:
        return raw.upper()
    return None


def match_price_mention(text: str) -> Optional[PriceMention]:
    """Run the price patterns in order and return the first usable hit.

    A hit is usable when it yields a non-empty product and a positive
    price; otherwise the next pattern is tried.
    """
    if not text or not text.strip():
        return None

    for pattern in PRICE_PATTERNS:
        m = pattern.search(text)
        if not m:
            continue
        product = clean_product(m.group("product"))
        price = Decimal(m.group("price"))
        if not product or price <= 0:
            continue
        return PriceMention(
            product=product,
            price=price,
            symbol=m.group("symbol"),
            code=_currency_code(m.group("code")),
        )
    return None

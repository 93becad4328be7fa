import re
from typing import Optional

from .amounts import CURRENCY_SYMBOL_MAP, parse_number

MASK = "<num>"

NUMBER_RE = re.compile(r"\d+(?:[.,]\d+)*")

CURRENCY_TOKEN_RE = re.compile(
    "[" + "".join(re.escape(s) for s in CURRENCY_SYMBOL_MAP) + r"]|\b(?:USD|EUR|GBP|CNY|INR|JPY|KRW|RSD)\b",
    re.IGNORECASE,
)


def find_numbers(text: str) -> list[str]:
    return NUMBER_RE.findall(text or "")


def find_currencies(text: str) -> list[str]:
    return CURRENCY_TOKEN_RE.findall(text or "")


def mask_numbers(text: str) -> str:
    return NUMBER_RE.sub(MASK, text)


def fill_numbers(template: str, numbers: list[str]) -> Optional[str]:
    parts = template.split(MASK)
    if len(parts) - 1 != len(numbers):
        return None
    out = [parts[0]]
    for num, tail in zip(numbers, parts[1:]):
        out.append(num)
        out.append(tail)
    return "".join(out)


def preserve_numbers(source: str, translated: str) -> str:
    """Make sure every number of ``source`` appears in ``translated``, in order.

    Numbers are paired positionally. A translated token that denotes the
    same value (``4,50`` vs ``4.50``) is kept as written; any other token is
    replaced by the source number. Source numbers the translation dropped
    are appended at the end.
    """
    expected = find_numbers(source)
    if not expected:
        return translated

    pending = iter(expected)
    used = 0

    def _swap(m: re.Match) -> str:
        nonlocal used
        src = next(pending, None)
        if src is None:
            return m.group(0)
        used += 1
        if parse_number(src) == parse_number(m.group(0)):
            return m.group(0)
        return src

    result = NUMBER_RE.sub(_swap, translated)
    missing = expected[used:]
    if missing:
        result = f"{result} ({', '.join(missing)})"
    return result

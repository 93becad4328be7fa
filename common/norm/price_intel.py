import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional

from api.app.config import settings
from common.clients.translate import Translation, translate
from .amounts import resolve_currency
from .incentives import calculate_incentive
from .regexes import match_price_mention
from . import PriceRecord

LOG = logging.getLogger(__name__)

Translator = Callable[[str, str, str], Awaitable[Optional[Translation]]]


def _now() -> datetime:
    return datetime.now(timezone.utc)


def extract_price_intelligence_sync(text: str, location: str | None) -> Optional[PriceRecord]:
    mention = match_price_mention(text)
    if mention is None:
        return None

    currency = resolve_currency(mention.symbol, mention.code, location)
    return PriceRecord(
        product=mention.product,
        price=mention.price,
        currency=currency,
        location=location or "",
        timestamp=_now(),
        incentive_earned=calculate_incentive(mention.price, currency),
    )


async def extract_price_intelligence(
    text: str,
    location: str | None,
    language: str | None,
    translator: Translator | None = None,
) -> Optional[PriceRecord]:
    """Find a price report in ``text`` spoken in ``language``.

    Text in another language is translated to the processing language
    first. If translation is unavailable the original text is used as is.
    """
    if not text or not text.strip():
        return None

    process_text = text
    target = settings.processing_language
    language = (language or "").strip().lower()
    if language and language != target:
        translation = await (translator or translate)(text, language, target)
        if translation is None:
            LOG.warning("Translation %s->%s unavailable, extracting from original text", language, target)
        else:
            process_text = translation.text

    record = extract_price_intelligence_sync(process_text, location)
    if record is None:
        LOG.info("No price mention found in %r", process_text)
    else:
        LOG.info(
            "Price intelligence: %s at %s %s (incentive %s)",
            record.product,
            record.price,
            record.currency,
            record.incentive_earned,
        )
    return record

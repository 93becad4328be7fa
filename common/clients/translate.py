import logging
import os
import re
from typing import Optional

import httpx
from pydantic import BaseModel

from common.norm.numbers import fill_numbers, find_numbers, mask_numbers, preserve_numbers

LOG = logging.getLogger(__name__)

GOOGLE_TRANSLATE_URL = "https://translation.googleapis.com/language/translate/v2"

SANDBOX_CONFIDENCE = 0.85
API_CONFIDENCE = 0.95


class Translation(BaseModel):
    text: str
    confidence: float
    source_language: str
    target_language: str


# Keys are casefolded with numbers masked; see _phrase_key.
PHRASEBOOK: dict[tuple[str, str], dict[str, str]] = {
    ("en", "sr"): {
        "can you do <num> units at $<num> each": "Možete li <num> komada po <num> dolara svaki?",
        "what is your best price for raspberries": "Koja je vaša najbolja cena za maline?",
        "we need <num> tons delivered by friday": "Potrebno nam je <num> tona isporučeno do petka",
        "that sounds very competitive": "To zvuči veoma konkurentno",
        "what about quality certifications": "Šta je sa sertifikatima kvaliteta?",
        "what are your payment terms": "Koji su vaši uslovi plaćanja?",
    },
    ("en", "zh"): {
        "can you do <num> units at $<num> each": "你们能做<num>个单位，每个<num>美元吗？",
        "what is your best price": "你们的最好价格是多少？",
        "we need <num> tons delivered": "我们需要交付<num>吨",
        "that sounds competitive": "这听起来很有竞争力",
    },
    ("en", "hi"): {
        "can you do <num> units at $<num> each": "क्या आप <num> यूनिट <num> डॉलर प्रति यूनिट कर सकते हैं?",
        "what is your best price": "आपकी सबसे अच्छी कीमत क्या है?",
    },
    ("sr", "en"): {
        "možemo <num> komada po <num> dolara": "We can do <num> units at $<num> each",
        "cena za maline je <num> evra po kilogramu": "The price for raspberries is <num> euros per kilogram",
        "isporuka u ponedeljak, bez problema": "Delivery on Monday, no problem",
        "možemo organizovati redovne isporuke": "We can organize regular deliveries",
        "plaćanje <num> dana od fakture": "Payment <num> days from invoice",
    },
    ("es", "en"): {
        "el precio del arroz es <num> euros": "The price of rice is <num> euros",
        "el café cuesta <num> euros": "Coffee costs <num> EUR",
    },
    ("zh", "en"): {
        "苹果的价格是<num>元": "The price of apples is <num> CNY",
        "价格是<num>元每公斤": "The price is <num> yuan per kilogram",
        "我们可以提供<num>吨": "We can provide <num> tons",
        "质量很好": "Quality is very good",
    },
}

_WS_RE = re.compile(r"\s+")


def _sandbox_enabled() -> bool:
    return os.getenv("TRANSLATE_SANDBOX", "1").lower() in ("1", "true", "yes", "y")


def _timeout() -> float:
    try:
        return float(os.getenv("TRANSLATE_TIMEOUT", "10"))
    except ValueError:
        return 10.0


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=_timeout())


def _phrase_key(text: str) -> str:
    key = _WS_RE.sub(" ", mask_numbers(text)).strip().rstrip(".!?。？！")
    return key.casefold()


def phrasebook_lookup(text: str, source_language: str, target_language: str) -> Optional[str]:
    entries = PHRASEBOOK.get((source_language, target_language))
    if not entries:
        return None
    template = entries.get(_phrase_key(text))
    if template is None:
        return None
    return fill_numbers(template, find_numbers(text))


async def _google_translate(text: str, source_language: str, target_language: str) -> Optional[Translation]:
    api_key = os.getenv("GOOGLE_TRANSLATE_API_KEY")
    if not api_key:
        LOG.warning("GOOGLE_TRANSLATE_API_KEY is not set, skipping translation")
        return None

    payload = {"q": text, "target": target_language, "format": "text"}
    if source_language and source_language != "auto":
        payload["source"] = source_language

    try:
        async with _client() as client:
            resp = await client.post(GOOGLE_TRANSLATE_URL, params={"key": api_key}, json=payload)
            resp.raise_for_status()
            item = resp.json()["data"]["translations"][0]
            translated = item["translatedText"]
    except (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError) as exc:
        LOG.warning("Google Translate %s->%s failed: %s", source_language, target_language, exc)
        return None

    return Translation(
        text=preserve_numbers(text, translated),
        confidence=API_CONFIDENCE,
        source_language=item.get("detectedSourceLanguage") or source_language,
        target_language=target_language,
    )


async def translate(text: str, source_language: str, target_language: str) -> Optional[Translation]:
    """Translate ``text``; None means the caller should keep the original."""
    if not text or not text.strip():
        return None
    if source_language == target_language:
        return Translation(
            text=text,
            confidence=1.0,
            source_language=source_language,
            target_language=target_language,
        )

    if _sandbox_enabled():
        translated = phrasebook_lookup(text, source_language, target_language)
        if translated is None:
            LOG.info("No sandbox phrase for %s->%s: %r", source_language, target_language, text)
            return None
        return Translation(
            text=translated,
            confidence=SANDBOX_CONFIDENCE,
            source_language=source_language,
            target_language=target_language,
        )

    return await _google_translate(text, source_language, target_language)

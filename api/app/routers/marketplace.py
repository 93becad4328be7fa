import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from api.app.config import settings
from common.clients.translate import translate
from common.norm.price_intel import extract_price_intelligence
from common.norm.regexes import PHRASE_EXAMPLES

LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/marketplace", tags=["marketplace"])


class PriceIntelPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    voice_text: Optional[str] = Field(None, alias="voiceText")
    user_location: Optional[str] = Field(None, alias="userLocation")
    user_language: Optional[str] = Field(None, alias="userLanguage")
    user_id: Optional[str] = Field(None, alias="userId")


class TranslatePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    source_language: Optional[str] = Field(None, alias="sourceLanguage")
    target_language: Optional[str] = Field(None, alias="targetLanguage")
    region: Optional[str] = None


DEMO_PRICES = [
    {"location": None, "price": 3.50, "currency": "USD", "contributor": "Community Average", "confidence": 0.92},
    {"location": "Tokyo, Japan", "price": 420, "currency": "JPY", "contributor": "Yuki S.", "confidence": 0.95},
    {"location": "Mumbai, India", "price": 150, "currency": "INR", "contributor": "Raj P.", "confidence": 0.88},
]


def rephrase_hint() -> str:
    quoted = [f'"{p}"' for p in PHRASE_EXAMPLES]
    return (
        "No price information detected in your message. "
        f"Try saying something like {', '.join(quoted[:-1])} or {quoted[-1]}"
    )


@router.post("/price-intel")
async def report_price(payload: PriceIntelPayload):
    LOG.info("Price report from %s in %s", payload.user_id or "anonymous", payload.user_location)
    try:
        record = await extract_price_intelligence(
            payload.voice_text or "",
            payload.user_location or "",
            payload.user_language or settings.processing_language,
        )
    except Exception:
        LOG.exception("price intelligence extraction failed")
        raise HTTPException(status_code=500, detail="Price extraction failed")

    if record is None:
        return {
            "success": False,
            "message": rephrase_hint(),
            "suggestions": [
                "Share specific product prices",
                "Include currency or location context",
                "Speak clearly about local prices",
            ],
        }

    return {
        "success": True,
        "price_intelligence": record.model_dump(mode="json"),
        "message": (
            "Thank you for sharing! "
            f"You've earned {record.incentive_earned} {record.currency} for this price report."
        ),
        "verification_status": "pending",
        "estimated_verification_time": "2-5 minutes",
    }


@router.get("/price-intel")
def lookup_prices(product: Optional[str] = None, location: Optional[str] = None):
    if not product or not product.strip():
        raise HTTPException(status_code=400, detail="Missing required query parameter: product")

    prices = [
        {
            "product": product,
            "location": entry["location"] or location or "Global Average",
            "price": entry["price"],
            "currency": entry["currency"],
            "contributor": entry["contributor"],
            "confidence": entry["confidence"],
        }
        for entry in DEMO_PRICES
    ]
    return {
        "success": True,
        "prices": prices,
        "total_results": len(prices),
        "search_query": {"product": product, "location": location},
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/translate")
async def translate_text(payload: TranslatePayload):
    source_language = payload.source_language or "auto"
    target_language = payload.target_language or settings.processing_language
    try:
        translation = await translate(payload.text, source_language, target_language)
    except Exception:
        LOG.exception("translation failed")
        raise HTTPException(status_code=500, detail="Translation failed")

    if translation is None:
        translated, confidence = payload.text, 0.0
    else:
        translated, confidence = translation.text, translation.confidence

    return {
        "success": True,
        "translation": {
            "original_text": payload.text,
            "translated_text": translated,
            "confidence": confidence,
            "source_language": translation.source_language if translation else source_language,
            "target_language": target_language,
            "region": payload.region or "US",
        },
        "fallback": translation is None,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

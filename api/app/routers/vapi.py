import logging

from fastapi import APIRouter, HTTPException

from api.app.config import settings
from api.app.toolcalls import ToolCallEnvelope, str_arg, tool_result
from common.clients.translate import translate
from common.norm.numbers import find_currencies, find_numbers, preserve_numbers
from common.norm.trade import extract_trade
from common.voice.profiles import select_voice

LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/vapi", tags=["vapi"])


@router.post("/parse-trade")
def parse_trade(envelope: ToolCallEnvelope):
    LOG.info("parse-trade call %s: %s", envelope.tool_call_id, envelope.arguments)
    try:
        extraction = extract_trade(envelope.arguments)
    except Exception:
        LOG.exception("parse-trade failed")
        raise HTTPException(status_code=500, detail="Failed to parse trade information")

    return tool_result(
        envelope.tool_call_id,
        {
            "success": True,
            "extracted_info": extraction.record.model_dump(mode="json"),
            "confirmation": extraction.confirmation,
            "next_action": "proceed_with_translation",
            "preserved_numbers": extraction.raw_echo,
        },
    )


@router.post("/translate-trade")
async def translate_trade(envelope: ToolCallEnvelope):
    args = envelope.arguments
    original_text = str_arg(args, "original_text") or ""
    source_language = str_arg(args, "source_language") or "auto"
    target_language = str_arg(args, "target_language") or settings.processing_language
    speaker_role = str_arg(args, "speaker_role")

    try:
        translation = await translate(original_text, source_language, target_language)
    except Exception:
        LOG.exception("translate-trade failed")
        raise HTTPException(status_code=500, detail="Translation failed")

    if translation is None:
        translated_text = original_text
        confidence = 0.0
    else:
        translated_text = preserve_numbers(original_text, translation.text)
        confidence = translation.confidence

    return tool_result(
        envelope.tool_call_id,
        {
            "success": True,
            "original_text": original_text,
            "translated_text": translated_text,
            "source_language": source_language,
            "target_language": target_language,
            "preserved_numbers": find_numbers(original_text),
            "preserved_currencies": find_currencies(original_text),
            "cultural_context": f"Speaker role: {speaker_role}" if speaker_role else "Business context preserved",
            "confidence": confidence,
            "fallback": translation is None,
        },
    )


@router.post("/switch-voice")
def switch_voice(envelope: ToolCallEnvelope):
    args = envelope.arguments
    try:
        voice = select_voice(str_arg(args, "target_language"), str_arg(args, "voice_gender"))
    except Exception:
        LOG.exception("switch-voice failed")
        raise HTTPException(status_code=500, detail="Voice switching failed")

    LOG.info("Switching voice to %s (%s)", voice.voice_id, voice.gender)
    return tool_result(
        envelope.tool_call_id,
        {
            "success": True,
            "voice_config": {"provider": voice.provider, "voiceId": voice.voice_id},
            "target_language": voice.language,
            "voice_gender": voice.gender,
            "cultural_note": voice.cultural_note,
            "message": f"Voice switched to {voice.language} for natural pronunciation and cultural context.",
            "technical_details": {
                "provider": voice.provider,
                "voiceId": voice.voice_id,
                "language_code": voice.language,
                "quality": "neural_premium",
            },
        },
    )

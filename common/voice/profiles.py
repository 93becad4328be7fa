from typing import Optional

from pydantic import BaseModel

DEFAULT_LANGUAGE = "en"
DEFAULT_GENDER = "female"

AZURE_VOICES: dict[str, dict[str, str]] = {
    "en": {"male": "en-US-DavisNeural", "female": "en-US-AriaNeural"},
    "sr": {"male": "sr-RS-NicholasNeural", "female": "sr-RS-SophieNeural"},
    "zh": {"male": "zh-CN-YunxiNeural", "female": "zh-CN-XiaoxiaoNeural"},
    "hi": {"male": "hi-IN-MadhurNeural", "female": "hi-IN-SwaraNeural"},
    "vi": {"male": "vi-VN-NamMinhNeural", "female": "vi-VN-HoaiMyNeural"},
    "pl": {"male": "pl-PL-MarekNeural", "female": "pl-PL-ZofiaNeural"},
    "cs": {"male": "cs-CZ-AntoninNeural", "female": "cs-CZ-VlastaNeural"},
}

CULTURAL_NOTES = {
    "en": "Switched to clear, professional English voice for US business communication",
    "sr": "Prebačeno na srpski glas za prirodnu komunikaciju na srpskom jeziku",
    "zh": "切换到中文语音，便于中文商务交流",
    "hi": "हिंदी आवाज़ में बदल गया है व्यापारिक बातचीत के लिए",
    "vi": "Chuyển sang giọng tiếng Việt để giao tiếp kinh doanh tự nhiên",
    "pl": "Przełączono na polski głos dla naturalnej komunikacji biznesowej",
    "cs": "Přepnuto na český hlas pro přirozenou obchodní komunikaci",
}
FALLBACK_NOTE = "Voice switched for natural communication"


class VoiceSelection(BaseModel):
    provider: str = "azure"
    voice_id: str
    language: str
    gender: str
    cultural_note: str


def select_voice(language: Optional[str], gender: Optional[str] = None) -> VoiceSelection:
    """Pick the neural voice for a language, falling back to female, then English."""
    gender = (gender or DEFAULT_GENDER).lower()
    voices = AZURE_VOICES.get((language or "").lower())
    if voices is None:
        voices = AZURE_VOICES[DEFAULT_LANGUAGE]
        gender = DEFAULT_GENDER
    elif gender not in voices:
        gender = DEFAULT_GENDER

    return VoiceSelection(
        voice_id=voices[gender],
        language=language or DEFAULT_LANGUAGE,
        gender=gender,
        cultural_note=CULTURAL_NOTES.get((language or "").lower(), FALLBACK_NOTE),
    )

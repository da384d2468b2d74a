"""User-facing strings emitted by the detection controller.

Only the messages the controller itself produces live here; page copy belongs
to the UI layer. Unknown locales and missing keys fall back to English.
"""

from __future__ import annotations

from typing import Callable, Dict

Translator = Callable[[str, str], str]

FALLBACK_LOCALE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "ai_status_success": "AI service is ready",
        "ai_status_generic_error": "AI service reported a problem",
        "ai_status_failed": "Could not connect to the AI service",
        "no_image_selected": "Please select an image first",
        "analysis_in_progress": "An analysis is already running",
        "prediction_error": "Failed to analyze the image. Please try again.",
        "treatment_error": "No treatment recommendation was returned",
    },
    "hi": {
        "ai_status_success": "एआई सेवा तैयार है",
        "ai_status_generic_error": "एआई सेवा में समस्या है",
        "ai_status_failed": "एआई सेवा से कनेक्ट नहीं हो सका",
        "no_image_selected": "कृपया पहले एक छवि चुनें",
        "analysis_in_progress": "विश्लेषण पहले से चल रहा है",
        "prediction_error": "छवि का विश्लेषण नहीं हो सका। कृपया फिर से प्रयास करें।",
        "treatment_error": "कोई उपचार सुझाव नहीं मिला",
    },
    "te": {
        "ai_status_success": "AI సేవ సిద్ధంగా ఉంది",
        "ai_status_generic_error": "AI సేవలో సమస్య ఉంది",
        "ai_status_failed": "AI సేవకు కనెక్ట్ కాలేకపోయింది",
        "no_image_selected": "దయచేసి ముందుగా ఒక చిత్రాన్ని ఎంచుకోండి",
        "analysis_in_progress": "విశ్లేషణ ఇప్పటికే జరుగుతోంది",
        "prediction_error": "చిత్రాన్ని విశ్లేషించలేకపోయాము. దయచేసి మళ్లీ ప్రయత్నించండి.",
        "treatment_error": "చికిత్స సూచన అందలేదు",
    },
}


def translate(key: str, locale: str) -> str:
    catalogue = MESSAGES.get(locale, MESSAGES[FALLBACK_LOCALE])
    if key in catalogue:
        return catalogue[key]
    return MESSAGES[FALLBACK_LOCALE].get(key, key)

"""
Voice Sentiment - Built-in Language Profiles.

Static lexicons for the languages shipped with the analyzer.
Adding a language is a pure data addition: a new entry here (or
in a JSON profiles file) with lexicon, negations, intensifiers,
labels, messages and a speech locale.

Lexicons are deliberately small; expand them for better coverage.
"""

from typing import Any


DEFAULT_LANGUAGE = "en"


# ============================================================
# PROFILE DEFINITIONS
# ============================================================

BUILTIN_PROFILES: dict[str, dict[str, Any]] = {
    "en": {
        "locale": "en-US",
        "lexicon": {
            "love": 3, "excellent": 3, "fantastic": 3, "amazing": 3,
            "great": 2, "good": 1, "happy": 2, "awesome": 2,
            "bad": -1, "poor": -1, "sad": -2,
            "terrible": -3, "awful": -3, "hate": -3, "horrible": -3, "worst": -3,
        },
        "negation_words": ["not", "never", "no", "hardly", "barely"],
        "intensifiers": {
            "very": 1.6, "extremely": 2, "super": 1.5, "slightly": 0.6, "somewhat": 0.8,
        },
        "labels": {"positive": "Positive", "negative": "Negative", "neutral": "Neutral"},
        "messages": {
            "empty_input": "⚠️ Please enter or speak some text!",
            "nothing_to_speak": "Please enter or speak some text first.",
            "placeholder": "Type or speak your text here...",
            "speak_template": "I think this is {label} with {confidence} percent confidence.",
        },
    },

    "ta": {
        "locale": "ta-IN",
        "lexicon": {
            "அருமையாக": 3, "அழகான": 2, "சந்தோஷம்": 2, "நன்று": 2, "கூடுதல்": 1,
            "கேடு": -2, "கெட்டது": -2, "துன்பம்": -2, "சோகம": -2, "போடு": -1,
        },
        "negation_words": ["இல்லை", "போலவே இல்லை", "போதாத"],
        "intensifiers": {"மிக": 1.6, "அதிகமாய்": 1.8, "சிறிது": 0.6},
        "labels": {"positive": "நன்னிலை", "negative": "கெட்டநிலை", "neutral": "நியூட்ரல்"},
        "messages": {
            "empty_input": "⚠️ தயவுசெய்து உரையை அளிக்கவும்!",
            "nothing_to_speak": "முன்னதாக ஒரு உரையை விவாதிக்கவும்.",
            "placeholder": "உரையை உள்ளிடவும் அல்லது பேசுங்கள்...",
            "speak_template": "{label} என்று நினைக்கிறேன் {confidence} சதவீத நம்பிக்கையோடு.",
        },
    },

    "hi": {
        "locale": "hi-IN",
        "lexicon": {
            "प्यार": 3, "शानदार": 3, "बहुत अच्छा": 2, "अच्छा": 1, "खुश": 2,
            "बुरा": -1, "खराब": -2, "दुखी": -2, "नफ़रत": -3, "भयावह": -3,
        },
        "negation_words": ["नहीं", "कभी नहीं", "न"],
        "intensifiers": {"बहुत": 1.6, "बिलकुल": 2, "थोड़ा": 0.6},
        "labels": {"positive": "सकारात्मक", "negative": "नकारात्मक", "neutral": "तटस्थ"},
        "messages": {
            "empty_input": "⚠️ कृपया कुछ लिखें या बोलें!",
            "nothing_to_speak": "पहले कुछ बोलें या लिखें।",
            "placeholder": "किसी टेक्स्ट को टाइप करें या बोलें...",
            "speak_template": "मुझे लगता है यह {label} है, लगभग {confidence} प्रतिशत आत्मविश्वास के साथ।",
        },
    },

    "te": {
        "locale": "te-IN",
        "lexicon": {"మంచి": 2, "చెడు": -2, "ప్రేమ": 3, "ద్వేషం": -3},
        "negation_words": ["కాదు"],
        "intensifiers": {"చాలా": 1.5},
        "labels": {"positive": "సానుకూలం", "negative": "ప్రతికూలం", "neutral": "తటస్థం"},
    },

    "ml": {
        "locale": "ml-IN",
        "lexicon": {"നല്ല": 2, "മോശം": -2, "സ്നേഹം": 3, "വെറുപ്പ്": -3},
        "negation_words": ["ഇല്ല"],
        "intensifiers": {"വളരെ": 1.5},
        "labels": {"positive": "നല്ലത്", "negative": "മോശം", "neutral": "നിഷ്പക്ഷം"},
    },

    "fr": {
        "locale": "fr-FR",
        "lexicon": {"bon": 2, "mauvais": -2, "amour": 3, "haine": -3},
        "negation_words": ["ne", "pas"],
        "intensifiers": {"très": 1.5},
        "labels": {"positive": "Positif", "negative": "Négatif", "neutral": "Neutre"},
        "messages": {
            "empty_input": "⚠️ Veuillez saisir ou dicter un texte !",
            "nothing_to_speak": "Veuillez d'abord saisir ou dicter un texte.",
            "placeholder": "Tapez ou dictez votre texte ici...",
            "speak_template": "Je pense que c'est {label} avec {confidence} pour cent de confiance.",
        },
    },

    "es": {
        "locale": "es-ES",
        "lexicon": {"bueno": 2, "malo": -2, "amor": 3, "odio": -3},
        "negation_words": ["no", "nunca"],
        "intensifiers": {"muy": 1.5},
        "labels": {"positive": "Positivo", "negative": "Negativo", "neutral": "Neutral"},
        "messages": {
            "empty_input": "⚠️ ¡Por favor, escribe o di algún texto!",
            "nothing_to_speak": "Por favor, escribe o di algún texto primero.",
            "placeholder": "Escribe o habla tu texto aquí...",
            "speak_template": "Creo que esto es {label} con un {confidence} por ciento de confianza.",
        },
    },

    "de": {
        "locale": "de-DE",
        "lexicon": {"gut": 2, "schlecht": -2, "liebe": 3, "hass": -3},
        "negation_words": ["nicht", "nie"],
        "intensifiers": {"sehr": 1.5},
        "labels": {"positive": "Positiv", "negative": "Negativ", "neutral": "Neutral"},
        "messages": {
            "empty_input": "⚠️ Bitte geben Sie einen Text ein oder sprechen Sie!",
            "nothing_to_speak": "Bitte geben Sie zuerst einen Text ein oder sprechen Sie.",
            "placeholder": "Text hier eingeben oder sprechen...",
            "speak_template": "Ich denke, das ist {label} mit {confidence} Prozent Sicherheit.",
        },
    },

    "ar": {
        "locale": "ar-SA",
        "lexicon": {"جيد": 2, "سيء": -2, "حب": 3, "كراهية": -3},
        "negation_words": ["لا", "أبدا"],
        "intensifiers": {"جداً": 1.5},
        "labels": {"positive": "إيجابي", "negative": "سلبي", "neutral": "محايد"},
        "messages": {
            "empty_input": "⚠️ يرجى إدخال نص أو التحدث!",
            "nothing_to_speak": "يرجى إدخال نص أو التحدث أولاً.",
            "placeholder": "اكتب أو تحدث هنا...",
            "speak_template": "أعتقد أن هذا {label} بثقة {confidence} بالمئة.",
        },
    },
}

"""Language code to display-name table used when rendering prompts."""

from types import MappingProxyType
from typing import Mapping

LANGUAGE_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "en": "English",
        "es": "Spanish",
        "fr": "French",
        "fr-ca": "French (Canada)",
        "de": "German",
        "it": "Italian",
        "pt": "Portuguese",
        "ru": "Russian",
        "ja": "Japanese",
        "ko": "Korean",
        "zh-CN": "Chinese (Simplified)",
        "zh-TW": "Chinese (Traditional)",
        "ar": "Arabic",
        "hi": "Hindi",
        "nl": "Dutch",
        "sv": "Swedish",
        "no": "Norwegian",
        "da": "Danish",
        "fi": "Finnish",
        "pl": "Polish",
        "cs": "Czech",
        "hu": "Hungarian",
        "ro": "Romanian",
        "bg": "Bulgarian",
        "hr": "Croatian",
        "sk": "Slovak",
        "sl": "Slovenian",
        "et": "Estonian",
        "lv": "Latvian",
        "lt": "Lithuanian",
        "he": "Hebrew",
        "th": "Thai",
        "vi": "Vietnamese",
        "tr": "Turkish",
        "uk": "Ukrainian",
        "el": "Greek",
        "ca": "Catalan",
        "eu": "Basque",
        "gl": "Galician",
        "cy": "Welsh",
        "ga": "Irish",
        "mt": "Maltese",
        "is": "Icelandic",
        "sq": "Albanian",
        "mk": "Macedonian",
        "sr": "Serbian",
        "bs": "Bosnian",
        "be": "Belarusian",
        "hy": "Armenian",
        "ka": "Georgian",
        "az": "Azerbaijani",
        "kk": "Kazakh",
        "ky": "Kyrgyz",
        "uz": "Uzbek",
        "tk": "Turkmen",
        "tg": "Tajik",
        "mn": "Mongolian",
        "ur": "Urdu",
        "fa": "Persian",
        "ps": "Pashto",
        "ku": "Kurdish",
        "am": "Amharic",
        "sw": "Swahili",
        "ha": "Hausa",
        "yo": "Yoruba",
        "ig": "Igbo",
        "zu": "Zulu",
        "xh": "Xhosa",
        "af": "Afrikaans",
        "so": "Somali",
        "rw": "Kinyarwanda",
        "mg": "Malagasy",
        "bn": "Bengali",
        "gu": "Gujarati",
        "kn": "Kannada",
        "ml": "Malayalam",
        "mr": "Marathi",
        "ne": "Nepali",
        "or": "Odia",
        "pa": "Punjabi",
        "sd": "Sindhi",
        "si": "Sinhala",
        "ta": "Tamil",
        "te": "Telugu",
        "my": "Myanmar",
        "km": "Khmer",
        "lo": "Lao",
        "ms": "Malay",
        "id": "Indonesian",
        "tl": "Filipino",
        "haw": "Hawaiian",
        "mi": "Maori",
        "ceb": "Cebuano",
        "eo": "Esperanto",
        "la": "Latin",
        "co": "Corsican",
        "fy": "Frisian",
        "lb": "Luxembourgish",
        "gd": "Scots Gaelic",
        "st": "Sesotho",
        "sn": "Shona",
        "tt": "Tatar",
        "ug": "Uyghur",
        "yi": "Yiddish",
    }
)


def display_name(code: str) -> str:
    """Human-readable name for ``code``; unknown codes are returned as-is."""
    return LANGUAGE_NAMES.get(code, code)

"""Language catalogue and locale detection."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

__all__ = ["Lang", "auto_detect", "query"]


@dataclass(frozen=True)
class Lang:
    """A language known to the translators."""

    code: str = ""
    name: str = ""
    locale_name: str = ""

    def code_639_1(self) -> str:
        """Return the code without any region or script suffix."""
        return self.code.partition("-")[0]


_DATA: dict[str, Lang] = {
    "af": Lang("af", "Afrikaans", "Afrikaans"),
    "am": Lang("am", "Amharic", "አማርኛ"),
    "ar": Lang("ar", "Arabic", "العربية"),
    "as": Lang("as", "Assamese", "অসমীয়া"),
    "ay": Lang("ay", "Aymara", "Aymar aru"),
    "az": Lang("az", "Azerbaijani", "Azərbaycanca"),
    "ba": Lang("ba", "Bashkir", "Башҡортса"),
    "be": Lang("be", "Belarusian", "беларуская"),
    "bg": Lang("bg", "Bulgarian", "български"),
    "bho": Lang("bho", "Bhojpuri", "भोजपुरी"),
    "bm": Lang("bm", "Bambara", "Bamanankan"),
    "bn": Lang("bn", "Bengali", "বাংলা"),
    "bo": Lang("bo", "Tibetan", "བོད་ཡིག"),
    "br": Lang("br", "Breton", "Brezhoneg"),
    "bs": Lang("bs", "Bosnian", "Bosanski"),
    "ca": Lang("ca", "Catalan", "Català"),
    "ceb": Lang("ceb", "Cebuano", "Cebuano"),
    "chr": Lang("chr", "Cherokee", "ᏣᎳᎩ"),
    "ckb": Lang("ckb", "Kurdish (Central)", "سۆرانی"),
    "co": Lang("co", "Corsican", "Corsu"),
    "cs": Lang("cs", "Czech", "Čeština"),
    "cv": Lang("cv", "Chuvash", "Чӑвашла"),
    "cy": Lang("cy", "Welsh", "Cymraeg"),
    "da": Lang("da", "Danish", "Dansk"),
    "de": Lang("de", "German", "Deutsch"),
    "doi": Lang("doi", "Dogri", "डोगरी"),
    "dv": Lang("dv", "Dhivehi", "ދިވެހި"),
    "dz": Lang("dz", "Dzongkha", "རྫོང་ཁ"),
    "ee": Lang("ee", "Ewe", "Eʋegbe"),
    "el": Lang("el", "Greek", "Ελληνικά"),
    "en": Lang("en", "English", "English"),
    "en-GB": Lang("en-GB", "English (British)", "English (British)"),
    "en-US": Lang("en-US", "English (American)", "English (American)"),
    "eo": Lang("eo", "Esperanto", "Esperanto"),
    "es": Lang("es", "Spanish", "Español"),
    "et": Lang("et", "Estonian", "Eesti"),
    "eu": Lang("eu", "Basque", "Euskara"),
    "fa": Lang("fa", "Persian", "فارسی"),
    "fi": Lang("fi", "Finnish", "Suomi"),
    "fj": Lang("fj", "Fijian", "Vosa Vakaviti"),
    "fo": Lang("fo", "Faroese", "Føroyskt"),
    "fr": Lang("fr", "French", "Français"),
    "fr-CA": Lang("fr-CA", "French (Canadian)", "Français canadien"),
    "fy": Lang("fy", "Frisian", "Frysk"),
    "ga": Lang("ga", "Irish", "Gaeilge"),
    "gd": Lang("gd", "Scots Gaelic", "Gàidhlig"),
    "gl": Lang("gl", "Galician", "Galego"),
    "gn": Lang("gn", "Guarani", "Avañe'ẽ"),
    "gom": Lang("gom", "Konkani", "कोंकणी"),
    "gu": Lang("gu", "Gujarati", "ગુજરાતી"),
    "ha": Lang("ha", "Hausa", "Hausa"),
    "haw": Lang("haw", "Hawaiian", "ʻŌlelo Hawaiʻi"),
    "he": Lang("he", "Hebrew", "עִבְרִית"),
    "hi": Lang("hi", "Hindi", "हिन्दी"),
    "hmn": Lang("hmn", "Hmong", "Hmoob"),
    "hr": Lang("hr", "Croatian", "Hrvatski"),
    "hsb": Lang("hsb", "Upper Sorbian", "Hornjoserbšćina"),
    "ht": Lang("ht", "Haitian Creole", "Kreyòl Ayisyen"),
    "hu": Lang("hu", "Hungarian", "Magyar"),
    "hy": Lang("hy", "Armenian", "Հայերեն"),
    "id": Lang("id", "Indonesian", "Bahasa Indonesia"),
    "ie": Lang("ie", "Interlingue", "Interlingue"),
    "ig": Lang("ig", "Igbo", "Igbo"),
    "ikt": Lang("ikt", "Inuinnaqtun", "Inuinnaqtun"),
    "ilo": Lang("ilo", "Ilocano", "Ilokano"),
    "is": Lang("is", "Icelandic", "Íslenska"),
    "it": Lang("it", "Italian", "Italiano"),
    "iu": Lang("iu", "Inuktitut", "ᐃᓄᒃᑎᑐᑦ"),
    "iu-Latn": Lang("iu-Latn", "Inuktitut (Latin)", "Inuktitut"),
    "ja": Lang("ja", "Japanese", "日本語"),
    "jv": Lang("jv", "Javanese", "Basa Jawa"),
    "ka": Lang("ka", "Georgian", "ქართული"),
    "kk": Lang("kk", "Kazakh", "Қазақ тілі"),
    "kl": Lang("kl", "Greenlandic", "Kalaallisut"),
    "km": Lang("km", "Khmer", "ភាសាខ្មែរ"),
    "kn": Lang("kn", "Kannada", "ಕನ್ನಡ"),
    "ko": Lang("ko", "Korean", "한국어"),
    "kri": Lang("kri", "Krio", "Krio"),
    "ku": Lang("ku", "Kurdish (Northern)", "Kurmancî"),
    "ky": Lang("ky", "Kyrgyz", "Кыргызча"),
    "la": Lang("la", "Latin", "Latina"),
    "lb": Lang("lb", "Luxembourgish", "Lëtzebuergesch"),
    "lg": Lang("lg", "Luganda", "Luganda"),
    "ln": Lang("ln", "Lingala", "Lingála"),
    "lo": Lang("lo", "Lao", "ລາວ"),
    "lt": Lang("lt", "Lithuanian", "Lietuvių"),
    "lus": Lang("lus", "Mizo", "Mizo ṭawng"),
    "lv": Lang("lv", "Latvian", "Latviešu"),
    "lzh": Lang("lzh", "Chinese (Literary)", "文言"),
    "mai": Lang("mai", "Maithili", "मैथिली"),
    "mg": Lang("mg", "Malagasy", "Malagasy"),
    "mhr": Lang("mhr", "Eastern Mari", "Олык марий"),
    "mi": Lang("mi", "Maori", "Māori"),
    "mk": Lang("mk", "Macedonian", "Македонски"),
    "ml": Lang("ml", "Malayalam", "മലയാളം"),
    "mn": Lang("mn", "Mongolian", "Монгол"),
    "mn-Mong": Lang("mn-Mong", "Mongolian (Traditional)", "ᠮᠣᠩᠭᠣᠯ"),
    "mni-Mtei": Lang("mni-Mtei", "Meiteilon", "ꯃꯤꯇꯩꯂꯣꯟ"),
    "mr": Lang("mr", "Marathi", "मराठी"),
    "mrj": Lang("mrj", "Hill Mari", "Кырык мары"),
    "ms": Lang("ms", "Malay", "Bahasa Melayu"),
    "mt": Lang("mt", "Maltese", "Malti"),
    "my": Lang("my", "Myanmar", "မြန်မာစာ"),
    "ne": Lang("ne", "Nepali", "नेपाली"),
    "nl": Lang("nl", "Dutch", "Nederlands"),
    "no": Lang("no", "Norwegian", "Norwegian"),
    "nso": Lang("nso", "Sepedi", "Sepedi"),
    "ny": Lang("ny", "Chichewa", "Nyanja"),
    "oc": Lang("oc", "Occitan", "Occitan"),
    "om": Lang("om", "Oromo", "Afaan Oromoo"),
    "or": Lang("or", "Odia", "ଓଡ଼ିଆ"),
    "otq": Lang("otg", "Querétaro Otomi", "Hñąñho"),
    "pa": Lang("pa", "Punjabi", "ਪੰਜਾਬੀ"),
    "pap": Lang("pap", "Papiamento", "Papiamentu"),
    "pl": Lang("pl", "Polish", "Polski"),
    "prs": Lang("prs", "Dari", "دری"),
    "ps": Lang("ps", "Pashto", "پښتو"),
    "pt": Lang("pt", "Portuguese", "Português"),
    "pt-BR": Lang("pt-BR", "Portuguese (Brazilian)", "Português Brasileiro"),
    "pt-PT": Lang("pt-PT", "Portuguese (European)", "Português Europeu"),
    "qu": Lang("qu", "Quechua", "Runasimi"),
    "rm": Lang("rm", "Romansh", "Rumantsch"),
    "ro": Lang("ro", "Romanian", "Română"),
    "ru": Lang("ru", "Russian", "Русский"),
    "rw": Lang("rw", "Ikinyarwanda", "Ikinyarwanda"),
    "sa": Lang("sa", "Sanskrit", "संस्कृतम्"),
    "sah": Lang("sah", "Yakut", "Sakha"),
    "sd": Lang("sd", "Sindhi", "سنڌي"),
    "si": Lang("si", "Sinhala", "සිංහල"),
    "sk": Lang("sk", "Slovak", "Slovenčina"),
    "sl": Lang("sl", "Slovenian", "Slovenščina"),
    "sm": Lang("sm", "Samoan", "Gagana Sāmoa"),
    "sn": Lang("sn", "Shona", "chiShona"),
    "so": Lang("so", "Somali", "Soomaali"),
    "sq": Lang("sq", "Albanian", "Shqip"),
    "sr": Lang("sr", "Serbian", "Српски"),
    "sr-Cyrl": Lang("sr-Cyrl", "Serbian (Cyrillic)", "Српски"),
    "sr-Latn": Lang("sr-Latn", "Serbian (Latin)", "Srpski"),
    "st": Lang("st", "Sesotho", "Sesotho"),
    "su": Lang("su", "Sundanese ", "Basa Sunda"),
    "sv": Lang("sv", "Swedish", "Svenska"),
    "sw": Lang("sw", "Swahili", "Kiswahili"),
    "ta": Lang("ta", "Tamil", "தமிழ்"),
    "te": Lang("te", "Telugu", "తెలుగు"),
    "tg": Lang("tg", "Tajik", "Тоҷикӣ"),
    "th": Lang("th", "Thai", "ไทย"),
    "ti": Lang("ti", "Tigrinya", "ትግርኛ"),
    "tk": Lang("tk", "Turkmen", "Türkmen"),
    "tl": Lang("tl", "Filipino", "Filipino"),
    "tlh-Latn": Lang("tlh-Latn", "Klingon", "tlhIngan Hol"),
    "tn": Lang("tn", "Setswana", "Setswana"),
    "to": Lang("to", "Tongan", "Lea faka-Tonga"),
    "tr": Lang("tr", "Turkish", "Türkçe"),
    "ts": Lang("ts", "Tsonga", "Xitsonga"),
    "tt": Lang("tt", "Tatar", "татарча"),
    "tw": Lang("tw", "Twi", "Twi"),
    "ty": Lang("ty", "Tahitian", "Reo Tahiti"),
    "udm": Lang("udm", "Udmurt", "Удмурт"),
    "ug": Lang("ug", "Uyghur", "ئۇيغۇر تىلى"),
    "uk": Lang("uk", "Ukrainian", "Українська"),
    "ur": Lang("ur", "Urdu", "اُردُو"),
    "uz": Lang("uz", "Uzbek", "Oʻzbek tili"),
    "vi": Lang("vi", "Vietnamese", "Tiếng Việt"),
    "vo": Lang("vo", "Volapük", "Volapük"),
    "wo": Lang("wo", "Wolof", "Wollof"),
    "xh": Lang("xh", "Xhosa", "isiXhosa"),
    "yi": Lang("yi", "Yiddish", "ייִדיש"),
    "yo": Lang("yo", "Yoruba", "Yorùbá"),
    "yua": Lang("yua", "Yucatec Maya", "Màaya T'àan"),
    "yue": Lang("yue", "Cantonese", "粵語"),
    "zh": Lang("zh", "Chinese", "中文"),
    "zh-CN": Lang("zh-CN", "Chinese (Simplified)", "简体中文"),
    "zh-TW": Lang("zh-TW", "Chinese (Traditional)", "繁體中文"),
    "zu": Lang("zu", "Zulu", "isiZulu"),
}

_EMPTY = Lang()
_LOCALE_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")
_SUBTAG = re.compile(r"[A-Za-z0-9]+")


def query(code: str) -> Lang:
    """Return the language for ``code``, or an empty ``Lang`` if unknown."""
    return _DATA.get(code, _EMPTY)


def _normalize_locale(value: str) -> str | None:
    """Turn a POSIX locale such as ``en_US.UTF-8`` into a tag like ``en-US``."""
    value = re.split(r"[.@]", value.strip(), maxsplit=1)[0]
    if value in ("", "C", "POSIX"):
        return None
    parts = re.split(r"[-_]", value)
    if not all(_SUBTAG.fullmatch(part) for part in parts):
        return None
    language, *rest = parts
    subtags = [language.lower()]
    for part in rest:
        if len(part) == 4 and part.isalpha():
            subtags.append(part.title())
        elif len(part) == 2 and part.isalpha():
            subtags.append(part.upper())
        else:
            subtags.append(part.lower())
    return "-".join(subtags)


def _detect_tag() -> str | None:
    for variable in _LOCALE_VARIABLES:
        value = os.environ.get(variable, "")
        for candidate in value.split(":"):
            tag = _normalize_locale(candidate)
            if tag:
                return tag
    return None


def auto_detect() -> str:
    """Guess the user's language from the locale environment.

    Returns a known language code, or an empty string.
    """
    tag = _detect_tag()
    if tag is None:
        return ""
    if tag in _DATA:
        return tag
    base, sep, _ = tag.partition("-")
    if sep and base in _DATA:
        return base
    return ""
"""Run a text through the configured translation services."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from .conf import Conf, TranslatorConf, TranslatorsConf
from .formatters import format_json, format_plain
from .lang import auto_detect
from .res import Res, TranslatorResult, res_success, translator_failure
from .translators import bing, deepl, google, libretranslate

__all__ = [
    "TRANSLATOR_BING",
    "TRANSLATOR_DEEPL_API",
    "TRANSLATOR_GOOGLE",
    "TRANSLATOR_LIBRETRANSLATE_API",
    "Translator",
    "available_translators",
    "format_result",
    "translate",
]

TRANSLATOR_BING = "bing"
TRANSLATOR_GOOGLE = "google"
TRANSLATOR_DEEPL_API = "deepl-api"
TRANSLATOR_LIBRETRANSLATE_API = "libretranslate-api"

_NAMES = {
    TRANSLATOR_BING: "Bing Translator",
    TRANSLATOR_GOOGLE: "Google Translate",
    TRANSLATOR_DEEPL_API: "DeepL Translate",
    TRANSLATOR_LIBRETRANSLATE_API: "LibreTranslate",
}

_BACKENDS: dict[str, Callable[[str, str, str, TranslatorConf], TranslatorResult]] = {
    TRANSLATOR_BING: bing.translate_text,
    TRANSLATOR_GOOGLE: google.translate_text,
    TRANSLATOR_DEEPL_API: deepl.translate_text,
    TRANSLATOR_LIBRETRANSLATE_API: libretranslate.translate_text,
}

_FORMATTERS: dict[str, Callable[[Res], str]] = {
    "json": format_json,
    "plain": format_plain,
}


@dataclass
class Translator:
    """One translation service together with its settings."""

    code: str
    conf: TranslatorConf = field(default_factory=TranslatorConf)

    def name(self) -> str:
        """Return the service's display name."""
        return _NAMES.get(self.code, self.code)

    def translate_text(self, text: str, source: str, target: str) -> TranslatorResult:
        """Translate ``text`` and label the result with this service."""
        backend = _BACKENDS.get(self.code)
        if backend is None:
            result = translator_failure(f"Unsupported translator `{self.code}'")
        else:
            result = backend(text, source, target, self.conf)
        result.translator_code = self.code
        result.translator_name = self.name()
        return result


def available_translators(
    translators_conf: TranslatorsConf, specified: list[str]
) -> list[Translator]:
    """Return the services to use, in a fixed order.

    When ``specified`` is non-empty it selects services by code, regardless
    of whether they are enabled; otherwise the enabled ones are used.
    """
    candidates = [
        (TRANSLATOR_BING, translators_conf.bing),
        (TRANSLATOR_GOOGLE, translators_conf.google),
        (TRANSLATOR_DEEPL_API, translators_conf.deepl_api),
        (TRANSLATOR_LIBRETRANSLATE_API, translators_conf.libretranslate_api),
    ]
    if specified:
        return [Translator(code, conf) for code, conf in candidates if code in specified]
    return [Translator(code, conf) for code, conf in candidates if conf.enabled]


def translate(
    text: str, source: str, target: str, specified: list[str], conf: Conf
) -> Res:
    """Translate ``text`` with every selected service concurrently."""
    source = source or conf.translate.source
    target = target or conf.translate.target or auto_detect()

    res = res_success(text)
    translators = available_translators(conf.translators, specified)
    if translators:
        with ThreadPoolExecutor(max_workers=len(translators)) as pool:
            res.translators.extend(
                pool.map(lambda t: t.translate_text(text, source, target), translators)
            )
    return res


def format_result(res: Res, fmt: str) -> str:
    """Render ``res`` with the named formatter."""
    formatter = _FORMATTERS.get(fmt)
    if formatter is None:
        return f"Unsupported formatter `{fmt}'\n"
    return formatter(res)
"""DeepL API."""

from __future__ import annotations

from typing import Any

import requests

from ..conf import TranslatorConf
from ..lang import query
from ..res import TranslatorResult, translator_failure, translator_success
from .http import _json_object, _status_line
from .http import build_session as _base_session

__all__ = [
    "body_source",
    "body_target",
    "build_req_body",
    "build_req_url",
    "build_result",
    "build_session",
    "make_request",
    "translate_text",
]

_CODES = {
    "zh-CN": "ZH",
    "zh-TW": "ZH",
}


def build_req_url(conf: TranslatorConf) -> str:
    """Return the endpoint URL, honouring a configured base URI."""
    if not conf.uri:
        return "https://api-free.deepl.com/v2/translate"
    return conf.uri + "/v2/translate"


def body_source(source: str) -> str:
    """Return the ``source_lang`` field; empty means auto-detection."""
    lang = query(source)
    if not lang.code:
        return ""
    return _CODES.get(source) or lang.code_639_1().upper()


def body_target(target: str) -> str:
    """Return the ``target_lang`` field."""
    return _CODES.get(target) or query(target).code.upper()


def build_req_body(text: str, source: str, target: str) -> dict[str, Any]:
    """Return the JSON body of a translation request."""
    return {
        "text": [text],
        "source_lang": body_source(source),
        "target_lang": body_target(target),
    }


def build_result(response: requests.Response) -> TranslatorResult:
    """Turn the service's response into a translator result."""
    if response.status_code != 200:
        return translator_failure("ApiError: " + _status_line(response))

    try:
        payload = _json_object(response)
    except ValueError as exc:
        return translator_failure(f"ApiError: {exc}")

    translations = payload.get("translations") or []
    if not isinstance(translations, list) or not translations:
        return translator_failure("ApiError: No result")

    first = translations[0]
    text = first.get("text") if isinstance(first, dict) else None
    return translator_success(text or "")


def build_session(conf: TranslatorConf) -> requests.Session:
    """Create a session, adding the DeepL authorisation when a key is set."""
    session = _base_session(conf)
    if conf.api_key:
        session.headers["Authorization"] = f"DeepL-Auth-Key {conf.api_key}"
    return session


def make_request(
    session: requests.Session, text: str, source: str, target: str, conf: TranslatorConf
) -> TranslatorResult:
    """Send a translation request through ``session``."""
    try:
        response = session.post(build_req_url(conf), json=build_req_body(text, source, target))
    except requests.RequestException as exc:
        return translator_failure(f"HTTPError: {exc}")
    return build_result(response)


def translate_text(text: str, source: str, target: str, conf: TranslatorConf) -> TranslatorResult:
    """Translate ``text`` with DeepL."""
    with build_session(conf) as session:
        return make_request(session, text, source, target, conf)
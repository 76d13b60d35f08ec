"""LibreTranslate API."""

from __future__ import annotations

import requests

from ..conf import TranslatorConf
from ..lang import query
from ..res import TranslatorResult, translator_failure, translator_success
from .http import _json_object, _status_line, build_session

__all__ = [
    "body_source",
    "body_target",
    "build_req_body",
    "build_req_url",
    "build_result",
    "make_request",
    "translate_text",
]


def build_req_url(conf: TranslatorConf) -> str:
    """Return the endpoint URL, honouring a configured base URI."""
    if not conf.uri:
        return "https://libretranslate.com/translate"
    return conf.uri + "/translate"


def body_source(source: str) -> str:
    """Return the ``source`` field; unknown languages mean auto-detection."""
    lang = query(source)
    return lang.code_639_1() if lang.code else "auto"


def body_target(target: str) -> str:
    """Return the ``target`` field."""
    return query(target).code_639_1()


def build_req_body(text: str, source: str, target: str, conf: TranslatorConf) -> dict[str, str]:
    """Return the form fields of a translation request."""
    return {
        "q": text,
        "source": body_source(source),
        "target": body_target(target),
        "format": "text",
        "api_key": conf.api_key,
    }


def _error_message(payload: dict) -> str:
    error = payload.get("error")
    return error if isinstance(error, str) else ""


def build_result(response: requests.Response) -> TranslatorResult:
    """Turn the service's response into a translator result."""
    if response.status_code != 200:
        try:
            error = _error_message(_json_object(response))
        except ValueError:
            error = ""
        return translator_failure("ApiError: " + (error or _status_line(response)))

    try:
        payload = _json_object(response)
    except ValueError as exc:
        return translator_failure(f"ApiError: {exc}")

    error = _error_message(payload)
    if error:
        return translator_failure("ApiError: " + error)
    return translator_success(payload.get("translatedText") or "")


def make_request(
    session: requests.Session, text: str, source: str, target: str, conf: TranslatorConf
) -> TranslatorResult:
    """Send a translation request through ``session``."""
    try:
        response = session.post(
            build_req_url(conf), data=build_req_body(text, source, target, conf)
        )
    except requests.RequestException as exc:
        return translator_failure(f"HTTPError: {exc}")
    return build_result(response)


def translate_text(text: str, source: str, target: str, conf: TranslatorConf) -> TranslatorResult:
    """Translate ``text`` with LibreTranslate."""
    with build_session(conf) as session:
        return make_request(session, text, source, target, conf)
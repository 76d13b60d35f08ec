"""Google Translate web endpoint."""

from __future__ import annotations

import requests

from ..conf import TranslatorConf
from ..lang import query
from ..res import TranslatorResult, translator_failure, translator_success
from .http import _json_object, _status_line, build_session

__all__ = [
    "build_query_params",
    "build_req_url",
    "build_result",
    "make_request",
    "query_param_source",
    "query_param_target",
    "translate_text",
]


def build_req_url(conf: TranslatorConf) -> str:
    """Return the endpoint URL, honouring a configured base URI."""
    if not conf.uri:
        return "https://translate.google.com/translate_a/single"
    return conf.uri + "/translate_a/single"


def query_param_source(source: str) -> str:
    """Return the ``sl`` parameter; unknown languages mean auto-detection."""
    lang = query(source)
    return lang.code_639_1() if lang.code else "auto"


def query_param_target(target: str) -> str:
    """Return the ``tl`` parameter."""
    return query(target).code_639_1()


def build_query_params(text: str, source: str, target: str) -> dict[str, str]:
    """Return the query string parameters of a translation request."""
    return {
        "client": "gtx",
        "dt": "t",
        "dj": "1",
        "q": text,
        "sl": query_param_source(source),
        "tl": query_param_target(target),
    }


def build_result(response: requests.Response) -> TranslatorResult:
    """Turn the service's response into a translator result."""
    if response.status_code != 200:
        return translator_failure("ApiError: " + _status_line(response))

    try:
        payload = _json_object(response)
    except ValueError as exc:
        return translator_failure(f"ApiError: {exc}")

    sentences = payload.get("sentences") or []
    if not isinstance(sentences, list):
        return translator_failure("ApiError: unexpected `sentences' value")
    if not sentences:
        return translator_failure("ApiError: No result")

    text = "".join(
        f"{sentence.get('trans') or ''}\n" for sentence in sentences if isinstance(sentence, dict)
    )
    return translator_success(text)


def make_request(
    session: requests.Session, text: str, source: str, target: str, conf: TranslatorConf
) -> TranslatorResult:
    """Send a translation request through ``session``."""
    try:
        response = session.get(
            build_req_url(conf), params=build_query_params(text, source, target)
        )
    except requests.RequestException as exc:
        return translator_failure(f"HTTPError: {exc}")
    return build_result(response)


def translate_text(text: str, source: str, target: str, conf: TranslatorConf) -> TranslatorResult:
    """Translate ``text`` with Google Translate."""
    with build_session(conf) as session:
        return make_request(session, text, source, target, conf)
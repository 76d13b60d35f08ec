"""Bing Translator web endpoint."""

from __future__ import annotations

import json
import re
from typing import Any

import requests

from ..conf import TranslatorConf
from ..lang import query
from ..res import TranslatorResult, translator_failure, translator_success
from .http import _status_line, build_session

__all__ = [
    "PreflightError",
    "build_form_data",
    "build_req_url",
    "build_result",
    "form_data_source",
    "form_data_target",
    "make_request",
    "preflight",
    "preflight_uri",
    "translate_text",
]

_CODES = {
    "en-GB": "en",
    "en-US": "en",
    "zh-CN": "zh-Hans",
    "zh-TW": "zh-Hant",
}

_IG = re.compile(r'IG:"([^"]+)"')
_IID = re.compile(r'data-iid="([^"]+)"')
_TOKEN_PAYLOAD = re.compile(r"params_AbusePreventionHelper\s?=\s?([^\]]+\])")


class PreflightError(Exception):
    """The translator page could not be fetched or its tokens extracted."""


def preflight_uri(conf: TranslatorConf) -> str:
    """Return the page that hands out the request tokens."""
    if not conf.uri:
        return "https://www.bing.com/translator"
    return conf.uri + "/translator"


def _extract(pattern: re.Pattern[str], html: str, message: str) -> str:
    match = pattern.search(html)
    if match is None or not match.group(1):
        raise PreflightError(message)
    return match.group(1)


def _number(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        value = 0
    return f"{value:.0f}"


def preflight(session: requests.Session, conf: TranslatorConf) -> dict[str, str]:
    """Fetch the translator page and extract the tokens a request needs.

    The session keeps the page's cookies and gains a Referer header.
    """
    uri = preflight_uri(conf)
    try:
        response = session.get(uri)
    except requests.RequestException as exc:
        raise PreflightError(str(exc)) from exc
    html = response.text

    ig = _extract(_IG, html, "Failed to extract IG")
    iid = _extract(_IID, html, "Failed to extract IID")
    payload = _extract(
        _TOKEN_PAYLOAD, html, "Failed to extract params_AbusePreventionHelper"
    )

    try:
        tokens = json.loads(payload)
    except ValueError as exc:
        raise PreflightError("Failed to extract key/token") from exc
    if not isinstance(tokens, list) or len(tokens) != 3:
        raise PreflightError("Token is missing")
    key, token, token_exp = tokens

    session.headers["Referer"] = uri
    return {
        "ig": ig,
        "iid": iid,
        "key": _number(key),
        "token": token if isinstance(token, str) else "",
        "tokenExp": _number(token_exp),
    }


def build_req_url(conf: TranslatorConf) -> str:
    """Return the endpoint URL, honouring a configured base URI."""
    if not conf.uri:
        return "https://www.bing.com/ttranslatev3"
    return conf.uri + "/ttranslatev3"


def form_data_source(source: str) -> str:
    """Return the ``fromLang`` field; unknown languages mean auto-detection."""
    lang = query(source)
    if not lang.code:
        return "auto-detect"
    return _CODES.get(source) or lang.code


def form_data_target(target: str) -> str:
    """Return the ``to`` field."""
    return _CODES.get(target) or query(target).code


def build_form_data(
    text: str, source: str, target: str, pdata: dict[str, str]
) -> dict[str, str]:
    """Return the form fields of a translation request."""
    return {
        "text": text,
        "fromLang": form_data_source(source),
        "to": form_data_target(target),
        "token": pdata.get("token", ""),
        "key": pdata.get("key", ""),
    }


def build_result(response: requests.Response) -> TranslatorResult:
    """Turn the service's response into a translator result."""
    if response.status_code != 200:
        return translator_failure("ApiError: " + _status_line(response))

    body = response.content
    if not body:
        return translator_failure("ApiError: No result")
    if not body.startswith(b"["):
        return translator_failure("ApiError: " + response.text)

    try:
        payload = json.loads(body)
    except ValueError as exc:
        return translator_failure(f"ApiError: {exc}")

    first = payload[0] if isinstance(payload, list) and payload else None
    translations = first.get("translations") if isinstance(first, dict) else None
    if not isinstance(translations, list) or not translations:
        return translator_failure("ApiError: No result")

    text = "".join(
        f"{item.get('text') or ''}\n" for item in translations if isinstance(item, dict)
    )
    return translator_success(text)


def make_request(
    session: requests.Session,
    text: str,
    source: str,
    target: str,
    conf: TranslatorConf,
    pdata: dict[str, str],
) -> TranslatorResult:
    """Send a translation request through a session that passed preflight."""
    try:
        response = session.post(
            build_req_url(conf),
            params={"IG": pdata.get("ig", ""), "IID": pdata.get("iid", "")},
            data=build_form_data(text, source, target, pdata),
        )
    except requests.RequestException as exc:
        return translator_failure(f"HTTPError: {exc}")
    return build_result(response)


def translate_text(text: str, source: str, target: str, conf: TranslatorConf) -> TranslatorResult:
    """Translate ``text`` with Bing Translator."""
    with build_session(conf) as session:
        try:
            pdata = preflight(session, conf)
        except PreflightError as exc:
            return translator_failure(f"PreflightError: {exc}")
        return make_request(session, text, source, target, conf, pdata)
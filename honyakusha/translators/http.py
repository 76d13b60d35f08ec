"""HTTP session setup shared by the translation services."""

from __future__ import annotations

import sys
from http import HTTPStatus
from typing import Any

import requests

from ..conf import TranslatorConf
from ..debug import is_debug_mode

__all__ = ["USER_AGENT", "build_session"]

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/104.0.0.0 Safari/537.36 Edg/104.0.1293.54"
)


def _status_line(response: requests.Response) -> str:
    """Return the status code and reason, e.g. ``400 Bad Request``."""
    reason = response.reason
    if not reason:
        try:
            reason = HTTPStatus(response.status_code).phrase
        except ValueError:
            reason = ""
    return f"{response.status_code} {reason}".rstrip()


def _json_object(response: requests.Response) -> dict[str, Any]:
    """Decode the body as a JSON object, raising ValueError otherwise."""
    payload = response.json()
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    return payload


def _as_text(body: Any) -> str:
    if body is None:
        return ""
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return str(body)


def _dump_exchange(response: requests.Response, *args: Any, **kwargs: Any) -> None:
    request = response.request
    lines = [f"{request.method} {request.url}"]
    lines.extend(f"{name}: {value}" for name, value in request.headers.items())
    lines.extend(["", _as_text(request.body), "", f"HTTP {_status_line(response)}"])
    lines.extend(f"{name}: {value}" for name, value in response.headers.items())
    lines.extend(["", response.text, ""])
    print("\n".join(lines), file=sys.stderr)


def build_session(conf: TranslatorConf) -> requests.Session:
    """Create a session with the browser user agent, proxy and debug dump."""
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT

    if is_debug_mode():
        session.hooks["response"].append(_dump_exchange)

    if conf.proxy:
        session.proxies.update({"http": conf.proxy, "https": conf.proxy})

    return session
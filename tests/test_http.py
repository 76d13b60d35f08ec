import pytest
import requests
import responses

from honyakusha import debug
from honyakusha.conf import TranslatorConf
from honyakusha.translators import http
from honyakusha.translators.http import USER_AGENT, build_session


@pytest.fixture(autouse=True)
def _no_debug(monkeypatch):
    monkeypatch.setattr(debug, "_debug_mode", False)


def test_user_agent_header():
    session = build_session(TranslatorConf())
    assert session.headers["User-Agent"] == USER_AGENT
    assert USER_AGENT.startswith("Mozilla/5.0 (Windows NT 10.0; Win64; x64)")


def test_proxy_applies_to_both_schemes():
    proxy = "http://localhost:8080"
    session = build_session(TranslatorConf(proxy=proxy))
    assert session.proxies == {"http": proxy, "https": proxy}


def test_no_proxy_by_default():
    assert build_session(TranslatorConf()).proxies == {}


def test_no_hook_without_debug():
    assert build_session(TranslatorConf()).hooks["response"] == []


def test_debug_mode_dumps_exchange(monkeypatch, capsys):
    monkeypatch.setattr(debug, "_debug_mode", True)
    session = build_session(TranslatorConf())
    assert len(session.hooks["response"]) == 1
    with responses.RequestsMock() as mocked:
        mocked.add(responses.GET, "http://localhost/ping", body="pong", status=200)
        session.get("http://localhost/ping")
    err = capsys.readouterr().err
    assert "GET http://localhost/ping" in err
    assert "pong" in err


def test_status_line_falls_back_to_standard_phrase():
    response = requests.Response()
    response.status_code = 404
    response.reason = ""
    assert http._status_line(response) == "404 Not Found"
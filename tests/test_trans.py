import json
from urllib.parse import parse_qs, urlparse

import pytest
import responses

from honyakusha import trans
from honyakusha.conf import Conf, TranslateConf, TranslatorConf, TranslatorsConf
from honyakusha.formatters import format_plain
from honyakusha.res import res_success, translator_success

GOOGLE_URL = "https://translate.google.com/translate_a/single"


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def _google_params(mocked):
    return parse_qs(urlparse(mocked.calls[-1].request.url).query)


def test_translator_names():
    assert trans.Translator("bing").name() == "Bing Translator"
    assert trans.Translator("google").name() == "Google Translate"
    assert trans.Translator("deepl-api").name() == "DeepL Translate"
    assert trans.Translator("libretranslate-api").name() == "LibreTranslate"
    assert trans.Translator("other").name() == "other"


def test_unsupported_translator():
    result = trans.Translator("other").translate_text("hi", "", "ja")
    assert result.code == 1
    assert result.error == "Unsupported translator `other'"
    assert result.translator_code == "other"


def test_available_translators_enabled_only():
    conf = TranslatorsConf(
        google=TranslatorConf(enabled=True),
        libretranslate_api=TranslatorConf(enabled=True),
    )
    codes = [t.code for t in trans.available_translators(conf, [])]
    assert codes == ["google", "libretranslate-api"]


def test_available_translators_specified_overrides_enabled():
    conf = TranslatorsConf(google=TranslatorConf(enabled=True))
    codes = [t.code for t in trans.available_translators(conf, ["deepl-api", "bing"])]
    assert codes == ["bing", "deepl-api"]


def test_translate_without_translators():
    res = trans.translate("hello", "", "ja", [], Conf())
    assert res.code == 0
    assert res.text == "hello"
    assert res.translators == []


def test_translate_uses_configured_languages(mocked):
    mocked.add(responses.GET, GOOGLE_URL, json={"sentences": [{"trans": "hola"}]})
    conf = Conf(translate=TranslateConf(source="en-US", target="ja"))
    res = trans.translate("hello", "", "", ["google"], conf)
    assert res.text == "hello"
    [result] = res.translators
    assert result.code == 0
    assert "hola" in result.translated_text
    assert result.translator_name == "Google Translate"
    params = _google_params(mocked)
    assert params["sl"] == ["en"]
    assert params["tl"] == ["ja"]
    assert params["q"] == ["hello"]


def test_translate_arguments_win_over_conf(mocked):
    mocked.add(responses.GET, GOOGLE_URL, json={"sentences": [{"trans": "bonjour"}]})
    conf = Conf(translate=TranslateConf(source="en-US", target="ja"))
    res = trans.translate("hello", "fr", "de", ["google"], conf)
    [result] = res.translators
    assert result.code == 0
    assert result.translated_text == "bonjour\n"
    params = _google_params(mocked)
    assert params["sl"] == ["fr"]
    assert params["tl"] == ["de"]


def test_translate_falls_back_to_locale(mocked, monkeypatch):
    for name in ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LANGUAGE", "zh_CN")
    mocked.add(responses.GET, GOOGLE_URL, json={"sentences": [{"trans": "你好"}]})
    res = trans.translate("hello", "", "", ["google"], Conf())
    [result] = res.translators
    assert result.code == 0
    assert result.translated_text == "你好\n"
    assert result.translator_code == "google"
    assert _google_params(mocked)["tl"] == ["zh"]


def test_format_result_dispatch():
    res = res_success("hello")
    res.translators.append(translator_success("hola"))
    assert trans.format_result(res, "plain") == format_plain(res)
    assert json.loads(trans.format_result(res, "json")) == res.to_dict()
    assert trans.format_result(res, "yaml") == "Unsupported formatter `yaml'\n"
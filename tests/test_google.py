import pytest
import requests
import responses
from responses import matchers

from honyakusha.conf import TranslatorConf
from honyakusha.translators import google

URL = "https://translate.google.com/translate_a/single"

TEXT = (
    "Google Translate is a multilingual neural machine translation service developed by Google"
    "to translate text, documents and websites from one language into another."
)


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_query_param_source():
    assert google.query_param_source("") == "auto"
    assert google.query_param_source("en-US") == "en"
    assert google.query_param_source("ja") == "ja"


def test_query_param_target():
    assert google.query_param_target("en-US") == "en"
    assert google.query_param_source("ja") == "ja"
    assert google.query_param_target("ja") == "ja"


def test_build_req_url():
    assert google.build_req_url(TranslatorConf()) == URL
    conf = TranslatorConf(uri="http://localhost:5000")
    assert google.build_req_url(conf) == "http://localhost:5000/translate_a/single"


def test_build_query_params():
    assert google.build_query_params("hi", "", "zh-CN") == {
        "client": "gtx",
        "dt": "t",
        "dj": "1",
        "q": "hi",
        "sl": "auto",
        "tl": "zh",
    }


def test_translate_success(mocked):
    mocked.add(
        responses.GET,
        URL,
        json={
            "sentences": [
                {
                    "trans": "谷歌翻译是谷歌开发的多语言神经机器翻译服务，用于将文本、文档和网站从一种语言翻译成另一种语言。",
                    "orig": TEXT,
                    "backend": 1,
                }
            ],
            "src": "en",
        },
        match=[matchers.query_param_matcher(google.build_query_params(TEXT, "", "zh-CN"))],
    )
    conf = TranslatorConf()
    with google.build_session(conf) as session:
        res = google.make_request(session, TEXT, "", "zh-CN", conf)
    assert res.code == 0
    assert "谷歌翻译是谷歌开发的多语言神经机器翻译服务" in res.translated_text


def test_translate_multiple_lines(mocked):
    lines = [
        "在您的计算机上，打开 Chrome。",
        "转到用另一种语言编写的网页。",
        "在地址栏右侧，单击翻译。",
        "单击您的首选语言。",
        "Chrome 将翻译您当前的网页。",
    ]
    mocked.add(
        responses.GET,
        URL,
        json={"sentences": [{"trans": line, "orig": "", "backend": 1} for line in lines], "src": "en"},
    )
    text = (
        "On your computer, open Chrome.\n"
        "Go to a webpage written in another language.\n"
        "On the right of the address bar, click Translate.\n"
        "Click on your preferred language.\n"
        "Chrome will translate your current webpage.\n"
    )
    conf = TranslatorConf()
    with google.build_session(conf) as session:
        res = google.make_request(session, text, "", "zh-CN", conf)
    assert res.code == 0
    for line in lines:
        assert line in res.translated_text
    assert res.translated_text == "".join(line + "\n" for line in lines)


def test_translate_source_unsupported(mocked):
    mocked.add(responses.GET, URL, body="<html>Error 400</html>", status=400)
    conf = TranslatorConf()
    with google.build_session(conf) as session:
        res = google.make_request(session, "馬之千里者，一食或盡粟一石", "lzh", "zh-CN", conf)
    assert res.code == 1
    assert "400 Bad Request" in res.error


def test_translate_target_unsupported(mocked):
    mocked.add(responses.GET, URL, body="<html>Error 400</html>", status=400)
    conf = TranslatorConf()
    with google.build_session(conf) as session:
        res = google.make_request(session, TEXT, "", "lzh", conf)
    assert res.code == 1
    assert "400 Bad Request" in res.error


def test_no_sentences_is_no_result(mocked):
    mocked.add(responses.GET, URL, json={"sentences": [], "src": "en"})
    res = google.translate_text("hi", "", "ja", TranslatorConf())
    assert res.code == 1
    assert res.error == "ApiError: No result"


def test_invalid_json(mocked):
    mocked.add(responses.GET, URL, body="not json")
    res = google.translate_text("hi", "", "ja", TranslatorConf())
    assert res.code == 1
    assert res.error.startswith("ApiError: ")


def test_connection_error(mocked):
    mocked.add(responses.GET, URL, body=requests.ConnectionError("connection refused"))
    res = google.translate_text("hi", "", "ja", TranslatorConf())
    assert res.code == 1
    assert res.error == "HTTPError: connection refused"
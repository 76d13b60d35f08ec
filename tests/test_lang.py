import pytest

from honyakusha.lang import Lang, auto_detect, query


@pytest.fixture
def clean_locale(monkeypatch):
    for name in ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.parametrize(
    "code, expected",
    [
        ("fr", "fr"),
        ("fr-CA", "fr"),
        ("mhr", "mhr"),
        ("mni-Mtei", "mni"),
        ("", ""),
    ],
)
def test_code_639_1(code, expected):
    assert query(code).code_639_1() == expected


@pytest.mark.parametrize(
    "value, expected",
    [("en_US", "en-US"), ("zh_CN", "zh-CN"), ("ja_JP", "ja")],
)
def test_auto_detect(clean_locale, value, expected):
    clean_locale.setenv("LANGUAGE", value)
    assert auto_detect() == expected


def test_auto_detect_strips_encoding(clean_locale):
    clean_locale.setenv("LANG", "zh_TW.UTF-8")
    assert auto_detect() == "zh-TW"


def test_auto_detect_language_takes_precedence(clean_locale):
    clean_locale.setenv("LANG", "fr_FR.UTF-8")
    clean_locale.setenv("LANGUAGE", "de_DE")
    assert auto_detect() == "de"


def test_auto_detect_without_locale(clean_locale):
    assert auto_detect() == ""


def test_auto_detect_posix_locale(clean_locale):
    clean_locale.setenv("LANG", "C")
    assert auto_detect() == ""


def test_query_known():
    r = query("en-US")
    assert r.code == "en-US"
    assert r.name == "English (American)"
    assert r.locale_name == "English (American)"


def test_query_empty():
    r = query("")
    assert r.code == ""
    assert r.name == ""
    assert r.locale_name == ""
    assert r == Lang()


def test_query_unknown_is_empty():
    assert query("ii") == Lang()
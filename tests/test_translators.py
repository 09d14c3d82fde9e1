"""
Unit tests for the translation client. No network: urlopen is replaced.
"""

import http.client
import io
import json
import urllib.error
import urllib.request

import pytest

from persian_i18n.translators import StaticTranslator, Translator


class _FakeOpener:
    def __init__(self, body=None, exc=None):
        self.body = body
        self.exc = exc
        self.requests = []

    def __call__(self, req, timeout=None, context=None):
        self.requests.append((req, timeout))
        if self.exc is not None:
            raise self.exc
        return io.BytesIO(self.body)


@pytest.fixture
def opener(monkeypatch):
    fake = _FakeOpener(body=json.dumps({"translatedTexts": ["Hello World", "ignored"]}).encode("utf-8"))
    monkeypatch.setattr(urllib.request, "urlopen", fake)
    return fake


def _translator(log, **kw):
    kw.setdefault("api_key", "test-key")
    return Translator(log=log, timeout=5, **kw)


def test_translate_sends_bulk_request(opener, log):
    out = _translator(log).translate("سلام دنیا")
    assert out == "Hello World"

    req, timeout = opener.requests[0]
    assert timeout == 5
    assert req.get_method() == "POST"
    assert req.full_url == "https://openl-translate.p.rapidapi.com/translate/bulk"
    assert req.get_header("X-rapidapi-key") == "test-key"
    assert req.get_header("X-rapidapi-host") == "openl-translate.p.rapidapi.com"
    assert req.get_header("Content-type") == "application/json"
    assert json.loads(req.data.decode("utf-8")) == {"target_lang": "en", "text": ["سلام دنیا"]}


def test_gloss_is_stripped(opener, log):
    opener.body = json.dumps({"translatedTexts": ["  Welcome \n"]}).encode("utf-8")
    assert _translator(log).translate("خوش آمدید") == "Welcome"


@pytest.mark.parametrize("exc", [
    urllib.error.HTTPError("https://x", 429, "Too Many Requests", hdrs=None, fp=None),
    urllib.error.URLError("no route"),
    TimeoutError("timed out"),
    http.client.IncompleteRead(b'{"transl'),
    http.client.BadStatusLine("garbage"),
])
def test_network_failure_returns_empty_gloss(opener, logs, log, exc):
    opener.exc = exc
    assert _translator(log).translate("سلام") == ""
    assert any(line.startswith("[TranslateError]") for line in logs)


@pytest.mark.parametrize("body", [
    b"<html>oops</html>",
    b'{"translatedTexts": []}',
    b'{"something": "else"}',
    b'["Hello"]',
    b'{"translatedTexts": [null]}',
])
def test_malformed_body_returns_empty_gloss(opener, logs, log, body):
    opener.body = body
    assert _translator(log).translate("سلام") == ""
    assert logs


def test_missing_key_skips_request(opener, logs, log):
    assert _translator(log, api_key="").translate("سلام") == ""
    assert opener.requests == []
    assert "RAPID_API_KEY" in logs[0]


def test_empty_text_skips_request(opener, log):
    assert _translator(log).translate("") == ""
    assert opener.requests == []


def test_static_translator():
    tr = StaticTranslator({"سلام": "Hi"})
    assert tr.translate("سلام") == "Hi"
    assert tr.translate("خداحافظ") == ""
    assert tr.calls == ["سلام", "خداحافظ"]

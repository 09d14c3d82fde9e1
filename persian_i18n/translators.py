from __future__ import annotations

import json
import ssl
import http.client
from typing import Callable, Dict, Optional

import urllib.request
import urllib.error
import certifi

from . import config


class TranslationError(RuntimeError):
    """Ответ сервиса перевода пустой или не того формата."""


def _first_translated(data) -> str:
    """Из ответа bulk-эндпоинта берём только первый перевод."""
    if not isinstance(data, dict):
        raise TranslationError("response body is not an object")
    arr = data.get("translatedTexts")
    if not isinstance(arr, list) or not arr:
        raise TranslationError("translatedTexts missing or empty")
    out = arr[0]
    if not isinstance(out, str):
        raise TranslationError(f"translatedTexts[0] is {type(out).__name__}, not str")
    return out


class Translator:
    """
    Персидский → английский через OpenL (RapidAPI), по одной строке за запрос.
    Ошибки не роняют обработку: пишем в лог и возвращаем пустую строку.
    Ретраев нет.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        target_lang: str = config.TARGET_LANG,
        url: str = config.TRANSLATE_URL,
        host: str = config.RAPIDAPI_HOST,
        timeout: float = config.TRANSLATE_TIMEOUT,
        log: Callable[[str], None] = print,
    ):
        self.api_key = api_key if api_key is not None else config.RAPID_API_KEY
        self.target_lang = target_lang
        self.url = url
        self.host = host
        self.timeout = timeout
        self.log = log
        self._ssl_ctx = ssl.create_default_context(cafile=certifi.where())

    def translate(self, text: str) -> str:
        if not text:
            return ""
        if not self.api_key:
            self.log(f"[TranslateError] RAPID_API_KEY не задан, пропускаю: {text}")
            return ""
        try:
            return self._request_single(text).strip()
        except (OSError, ValueError, http.client.HTTPException, TranslationError) as e:
            # URLError/HTTPError/таймаут — OSError, битый JSON — ValueError,
            # оборванный ответ (IncompleteRead, BadStatusLine) — HTTPException
            self.log(f"[TranslateError] {text}: {e}")
            return ""

    # ---------- HTTP: одиночный запрос ----------
    def _request_single(self, text: str) -> str:
        payload = {
            "target_lang": self.target_lang,
            "text": [text],
        }
        req = urllib.request.Request(
            self.url,
            data=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
            headers={
                "x-rapidapi-key": self.api_key,
                "x-rapidapi-host": self.host,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            method="POST",
        )
        with urllib.request.urlopen(req, timeout=self.timeout, context=self._ssl_ctx) as resp:
            data = json.loads(resp.read().decode("utf-8"))
        return _first_translated(data)


class StaticTranslator:
    """Перевод без сети: по заранее известной таблице, иначе пустая строка."""

    def __init__(self, table: Optional[Dict[str, str]] = None):
        self.table = dict(table or {})
        self.calls = []

    def translate(self, text: str) -> str:
        self.calls.append(text)
        return self.table.get(text, "")

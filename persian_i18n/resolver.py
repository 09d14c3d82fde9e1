from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from . import config
from .dictionary import DictionaryIndex
from .utils.store import TranslationRecord, TranslationStore

RE_NOT_KEY_CHAR = re.compile(r"[^a-z0-9\s]")

SOURCE_DICTIONARY = "dictionary"
SOURCE_STORE = "store"
SOURCE_TRANSLATED = "translated"


def generate_key(english: str) -> str:
    """'Hello, World!' → 'helloWorld'."""
    words = RE_NOT_KEY_CHAR.sub("", english.lower()).split()
    return "".join(w if i == 0 else w[:1].upper() + w[1:] for i, w in enumerate(words))


def fallback_key(persian: str) -> str:
    """Ключ для строки, которую не удалось перевести: стабилен между запусками."""
    return "text" + hashlib.sha1(persian.encode("utf-8")).hexdigest()[:8]


def literal_key(namespace: str, fragment: str) -> str:
    return f"{namespace}.{config.LITERAL_SEGMENT}.{fragment}"


@dataclass
class Resolution:
    text: str
    key: str
    source: str
    # для store — найденная запись, для translated — новая
    record: Optional[TranslationRecord] = None

    @property
    def is_new(self) -> bool:
        return self.source == SOURCE_TRANSLATED


# ---------- стратегии: по порядку, первая непустая выигрывает ----------
class DictionaryStrategy:
    def __init__(self, dictionary: DictionaryIndex):
        self.dictionary = dictionary

    def __call__(self, text: str) -> Optional[Resolution]:
        key = self.dictionary.lookup(text)
        if key is None:
            return None
        return Resolution(text, key, SOURCE_DICTIONARY)


class StoreStrategy:
    def __init__(self, store: TranslationStore, namespace: str):
        self.store = store
        self.namespace = namespace

    def __call__(self, text: str) -> Optional[Resolution]:
        rec = self.store.find_by_text(self.namespace, text)
        if rec is None:
            return None
        return Resolution(text, literal_key(self.namespace, rec.key), SOURCE_STORE, rec)


class TranslateStrategy:
    def __init__(self, translator, namespace: str, log: Callable[[str], None] = print):
        self.translator = translator
        self.namespace = namespace
        self.log = log

    def __call__(self, text: str) -> Optional[Resolution]:
        english = self.translator.translate(text)
        fragment = generate_key(english)
        if not fragment:
            fragment = fallback_key(text)
            self.log(f"[WARN][key] нет пригодного перевода для «{text}» ({english!r}) → {fragment}")
        rec = TranslationRecord(key=fragment, native_text=text, english_gloss=english)
        return Resolution(text, literal_key(self.namespace, fragment), SOURCE_TRANSLATED, rec)


class KeyResolver:
    """
    Ключ для каждой персидской строки:
      1) готовый словарь (ключ как есть, без пространства имён);
      2) ранее сгенерированные записи этого пространства имён;
      3) перевод и новый ключ <ns>.literal.<camelCase>.
    """

    def __init__(
        self,
        dictionary: DictionaryIndex,
        store: TranslationStore,
        namespace: str,
        translator,
        log: Callable[[str], None] = print,
    ):
        self.namespace = namespace
        self.store = store
        self.log = log
        self.strategies = [
            DictionaryStrategy(dictionary),
            StoreStrategy(store, namespace),
            TranslateStrategy(translator, namespace, log=log),
        ]

    def resolve(self, text: str) -> Resolution:
        for strategy in self.strategies:
            res = strategy(text)
            if res is not None:
                return res
        # последняя стратегия всегда что-то возвращает
        raise RuntimeError(f"no strategy resolved {text!r}")

    def resolve_all(self, texts: Iterable[str]) -> Dict[str, Resolution]:
        """Последовательно, в стабильном порядке; о совпавших ключах предупреждаем."""
        out: Dict[str, Resolution] = {}
        minted: Dict[str, str] = {}
        for text in sorted(texts):
            res = self.resolve(text)
            out[text] = res
            if not res.is_new:
                continue
            fragment = res.record.key
            other = minted.get(fragment)
            if other is None:
                existing = self._existing_with_key(fragment)
                other = existing.native_text if existing else None
            if other is not None:
                self.log(f"[WARN][collision] {res.key}: «{other}» и «{text}» получили один ключ")
            minted.setdefault(fragment, text)
        return out

    def _existing_with_key(self, fragment: str) -> Optional[TranslationRecord]:
        for rec in self.store.records_for_namespace(self.namespace):
            if rec.key == fragment:
                return rec
        return None

    @staticmethod
    def new_records(resolutions: Iterable[Resolution]) -> List[TranslationRecord]:
        return [r.record for r in resolutions if r.is_new]

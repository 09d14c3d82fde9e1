from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional

from .helpers import namespace_for, read_json, write_json


class StoreParseError(ValueError):
    """Файл хранилища прочитан, но это не список записей."""


@dataclass
class TranslationRecord:
    key: str
    native_text: str
    english_gloss: str = ""
    type: str = "literal"

    def to_json(self) -> Dict[str, str]:
        return {
            "key": self.key,
            "persian": self.native_text,
            "english": self.english_gloss,
            "type": self.type,
        }

    @classmethod
    def from_json(cls, obj: Dict[str, Any]) -> "TranslationRecord":
        return cls(
            key=str(obj["key"]),
            native_text=str(obj["persian"]),
            english_gloss=str(obj.get("english") or ""),
            type=str(obj.get("type") or "literal"),
        )


@dataclass
class FileTranslationEntry:
    file_path: str
    namespace: str
    records: List[TranslationRecord] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        return {
            "filepath": self.file_path,
            "appName": self.namespace,
            "translation": [r.to_json() for r in self.records],
        }


class TranslationStore:
    """
    Память сгенерированных ключей: упорядоченный список записей по файлам.
    На один filepath — не больше одной записи.
    """

    def __init__(self, entries: Optional[List[FileTranslationEntry]] = None):
        self.entries: List[FileTranslationEntry] = []
        for e in entries or []:
            self.upsert(e)

    # ---- (де)сериализация ----
    @classmethod
    def from_json(cls, data: Any, log: Callable[[str], None] = print) -> "TranslationStore":
        if not isinstance(data, list):
            raise StoreParseError(f"expected a list of entries, got {type(data).__name__}")

        entries: List[FileTranslationEntry] = []
        for raw in data:
            if not isinstance(raw, dict) or not raw.get("filepath"):
                log(f"[WARN][store] пропускаю запись без filepath: {raw!r}"[:200])
                continue
            fp = str(raw["filepath"])
            records: List[TranslationRecord] = []
            raw_records = raw.get("translation")
            if not isinstance(raw_records, list):
                raw_records = []
            for r in raw_records:
                try:
                    records.append(TranslationRecord.from_json(r))
                except (KeyError, TypeError, AttributeError):
                    log(f"[WARN][store] {fp}: битая строка перевода {r!r}"[:200])
            entries.append(FileTranslationEntry(
                file_path=fp,
                namespace=str(raw.get("appName") or namespace_for(fp)),
                records=records,
            ))
        return cls(entries)

    def to_json(self) -> List[Dict[str, Any]]:
        return [e.to_json() for e in self.entries]

    # ---- по файлу ----
    def get(self, file_path: str) -> Optional[FileTranslationEntry]:
        for e in self.entries:
            if e.file_path == file_path:
                return e
        return None

    def upsert(self, entry: FileTranslationEntry) -> None:
        """Заменить запись файла на месте; новый файл — в конец списка."""
        for i, e in enumerate(self.entries):
            if e.file_path == entry.file_path:
                self.entries[i] = entry
                return
        self.entries.append(entry)

    def remove(self, file_path: str) -> None:
        self.entries = [e for e in self.entries if e.file_path != file_path]

    # ---- по пространству имён / тексту ----
    def records_for_namespace(self, namespace: str) -> Iterator[TranslationRecord]:
        for e in self.entries:
            if e.namespace == namespace:
                yield from e.records

    def find_by_text(self, namespace: str, text: str) -> Optional[TranslationRecord]:
        for r in self.records_for_namespace(namespace):
            if r.native_text == text:
                return r
        return None

    def __len__(self) -> int:
        return len(self.entries)


class JsonStoreFile:
    """Чтение/запись хранилища целиком (persian.json)."""

    def __init__(self, path: str, log: Callable[[str], None] = print):
        self.path = path
        self.log = log

    def load(self) -> TranslationStore:
        """Битый или чужой файл не фатален: начинаем с пустого хранилища."""
        if not self.path or not os.path.exists(self.path):
            return TranslationStore()
        try:
            return TranslationStore.from_json(read_json(self.path), log=self.log)
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError и StoreParseError — всё ValueError
            self.log(f"[WARN][store] не удалось разобрать {self.path} ({e}), начинаю с пустого")
            return TranslationStore()

    def save(self, store: TranslationStore) -> None:
        write_json(self.path, store.to_json())

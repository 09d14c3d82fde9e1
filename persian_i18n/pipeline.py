from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .dictionary import DictionaryIndex
from .processors.jsx_source import rewrite_source_text
from .resolver import KeyResolver, Resolution, SOURCE_STORE, literal_key
from .scanner import scan_text
from .utils.helpers import namespace_for, rel_posix, write_text_atomic
from .utils.store import FileTranslationEntry, TranslationRecord, TranslationStore


@dataclass
class FileResult:
    rel_path: str
    namespace: str
    content: str
    store: TranslationStore
    resolutions: Dict[str, Resolution] = field(default_factory=dict)
    new_records: List[TranslationRecord] = field(default_factory=list)
    replacements: Dict[str, int] = field(default_factory=dict)
    changed: bool = False
    store_changed: bool = False


def _entry_records(
    prev: Optional[FileTranslationEntry],
    resolutions: Dict[str, Resolution],
    new_records: List[TranslationRecord],
    content: str,
) -> List[TranslationRecord]:
    """
    Что остаётся в записи файла: прежние записи, которые снова понадобились
    в этом прогоне или на чьи ключи файл уже ссылается, плюс новые.
    """
    kept: List[TranslationRecord] = []
    if prev is not None:
        reused = {id(r.record) for r in resolutions.values() if r.source == SOURCE_STORE}
        kept = [
            r for r in prev.records
            if id(r) in reused or f"'{literal_key(prev.namespace, r.key)}'" in content
        ]
    return kept + new_records


def process_content(
    content: str,
    rel_path: str,
    dictionary: DictionaryIndex,
    store: TranslationStore,
    translator,
    log: Callable[[str], None] = print,
) -> FileResult:
    """
    Вся логика без файлов: скан → ключи → замены → обновлённое хранилище.
    Переданное хранилище не меняется, возвращается новое.
    """
    namespace = namespace_for(rel_path)
    texts = scan_text(content)

    resolver = KeyResolver(dictionary, store, namespace, translator, log=log)
    resolutions = resolver.resolve_all(texts)
    for res in resolutions.values():
        if res.is_new:
            log(f"✔ {res.key}: {res.text} → {res.record.english_gloss}")

    new_content, counts = rewrite_source_text(
        content, {t: r.key for t, r in resolutions.items()}
    )
    for text, n in counts.items():
        if n == 0:
            log(f"[SKIP][context] «{text}» не в JSX и не в кавычках, оставлено как есть")

    new_records = KeyResolver.new_records(resolutions.values())
    records = _entry_records(store.get(rel_path), resolutions, new_records, new_content)

    out_store = TranslationStore(list(store.entries))
    if records:
        out_store.upsert(FileTranslationEntry(rel_path, namespace, records))
    else:
        out_store.remove(rel_path)

    return FileResult(
        rel_path=rel_path,
        namespace=namespace,
        content=new_content,
        store=out_store,
        resolutions=resolutions,
        new_records=new_records,
        replacements=counts,
        changed=new_content != content,
        store_changed=out_store.to_json() != store.to_json(),
    )


def process_file(
    file_path: str,
    dictionary: DictionaryIndex,
    translator,
    load_store: Callable[[], TranslationStore],
    save_store: Callable[[TranslationStore], None],
    write: bool = True,
    cwd: Optional[str] = None,
    log: Callable[[str], None] = print,
) -> FileResult:
    """
    Один файл за вызов. Сначала пишется хранилище, потом исходник: если
    упадём между ними, ключи уже сохранены и повторный запуск их подхватит.
    Одновременные запуски на одном хранилище не согласуются (последний
    перезапишет файл целиком).
    """
    src = os.path.abspath(file_path)
    rel = rel_posix(src, start=cwd)

    with open(src, "r", encoding="utf-8", newline="") as f:
        content = f.read()

    result = process_content(content, rel, dictionary, load_store(), translator, log=log)

    if not write:
        log(f"[DRY] {rel}: строк {len(result.resolutions)}, новых {len(result.new_records)}")
        return result

    if result.store_changed:
        save_store(result.store)
        log(f"[OK][store] {rel}: новых переводов {len(result.new_records)}")
    if result.changed:
        write_text_atomic(src, result.content)
        log(f"[OK][rewrite] {rel}")
    return result

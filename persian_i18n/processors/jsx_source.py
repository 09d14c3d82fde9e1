from __future__ import annotations
import re
from typing import Dict, Iterable, Tuple

from .. import config


def reference(key: str, func: str = None) -> str:
    """t('ключ')"""
    func = func or config.REFERENCE_FUNC
    k = key.replace("\\", r"\\").replace("'", r"\'")
    return f"{func}('{k}')"


def _jsx_child_re(text: str) -> re.Pattern:
    # >  текст  <  — текстовый узел JSX
    return re.compile(r">(\s*" + re.escape(text) + r"\s*)<")


def _quoted_re(text: str) -> re.Pattern:
    # "текст" | 'текст' | `текст`
    return re.compile(r"([\"'`])" + re.escape(text) + r"\1")


def replace_text(content: str, text: str, key: str, func: str = None) -> Tuple[str, int]:
    """
    Заменяет все вхождения одной строки на обращение к переводу.
    Возвращает (новый_текст, число_замен).
    """
    ref = reference(key, func)

    content, n_jsx = _jsx_child_re(text).subn(lambda m: ">{" + ref + "}<", content)

    # атрибут: placeholder="..." → placeholder={t('...')}
    before = content

    def repl_quoted(m: re.Match) -> str:
        start = m.start()
        if start > 0 and before[start - 1] == "=":
            return "{" + ref + "}"
        return ref

    content, n_quoted = _quoted_re(text).subn(repl_quoted, content)
    return content, n_jsx + n_quoted


def ordered(texts: Iterable[str]):
    """Длинные строки раньше коротких, чтобы короткая не съела часть длинной."""
    return sorted(texts, key=lambda t: (-len(t), t))


def rewrite_source_text(content: str, keys: Dict[str, str], func: str = None) -> Tuple[str, Dict[str, int]]:
    """
    keys: персидский текст → ключ. Возвращает переписанный текст и
    число замен по каждой строке (0 — строка не в JSX и не в кавычках).
    """
    counts: Dict[str, int] = {}
    for text in ordered(keys):
        content, n = replace_text(content, text, keys[text], func)
        counts[text] = n
    return content, counts

from __future__ import annotations
import re
from typing import Iterator, Set, Tuple

from . import config

# Персидская «фраза»: начинается с буквы арабского блока и тянется дальше
# по буквам, пробелам, ZWNJ и знакам ، . ! ؟
RE_PERSIAN_RUN = re.compile(r"[\u0600-\u06FF][\u0600-\u06FF\u200c\s،.!؟]*")

RE_LINE_BREAK = re.compile(r"\r\n|\r|\n")

_COMMENT_PREFIXES = ("//", "/*", "*")
_COMMENT_SUFFIX = "*/"


def is_comment_line(line: str) -> bool:
    """Строка целиком комментарий (//, /*, * или заканчивается на */)."""
    t = line.strip()
    return t.startswith(_COMMENT_PREFIXES) or t.endswith(_COMMENT_SUFFIX)


def scan_lines(content: str) -> Iterator[Tuple[int, str]]:
    """
    Отдаёт (номер_строки, текст) для каждого вхождения персидского текста.
    Строки-комментарии пропускаются целиком; хвостовые комментарии
    в конце строки кода НЕ отрезаются.
    """
    for lineno, line in enumerate(RE_LINE_BREAK.split(content), start=1):
        if is_comment_line(line):
            continue
        for m in RE_PERSIAN_RUN.finditer(line):
            cleaned = m.group(0).strip()
            if len(cleaned) >= config.MIN_CANDIDATE_LEN:
                yield lineno, cleaned


def scan_text(content: str) -> Set[str]:
    """Множество уникальных кандидатов в содержимом файла."""
    return {text for _, text in scan_lines(content)}

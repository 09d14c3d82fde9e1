from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Tuple, Union

from .utils.helpers import read_json


# ---------- дерево словаря: лист | узел ----------
@dataclass(frozen=True)
class Leaf:
    text: str


@dataclass(frozen=True)
class Node:
    children: Tuple[Tuple[str, "Tree"], ...]


Tree = Union[Leaf, Node]


def build_tree(obj: Dict[str, Any]) -> Node:
    """
    JSON-объект → дерево. Строки становятся листьями, объекты — узлами,
    всё остальное (числа, массивы, null) в словаре переводов не нужно.
    """
    children = []
    for k, v in obj.items():
        if isinstance(v, str):
            children.append((str(k), Leaf(v)))
        elif isinstance(v, dict):
            children.append((str(k), build_tree(v)))
    return Node(tuple(children))


def _walk(node: Node, prefix: str) -> Iterator[Tuple[str, str]]:
    for k, child in node.children:
        path = f"{prefix}.{k}" if prefix else k
        if isinstance(child, Leaf):
            yield child.text, path
        else:
            yield from _walk(child, path)


class DictionaryIndex:
    """
    Обратный индекс готового словаря (fa): текст → ключ вида "a.b.c".
    Если одна строка встречается по двум путям — выигрывает последний.
    """

    def __init__(self, tree: Optional[Node] = None):
        self._map: Dict[str, str] = {}
        if tree is not None:
            for text, path in _walk(tree, ""):
                self._map[text] = path

    @classmethod
    def from_mapping(cls, obj: Dict[str, Any]) -> "DictionaryIndex":
        # export default {...} → берём содержимое default
        if isinstance(obj.get("default"), dict):
            obj = obj["default"]
        return cls(build_tree(obj))

    def lookup(self, text: str) -> Optional[str]:
        return self._map.get(text)

    def __contains__(self, text: object) -> bool:
        return text in self._map

    def __len__(self) -> int:
        return len(self._map)

    @property
    def data(self) -> Dict[str, str]:
        return dict(self._map)


def load_dictionary(path: Optional[str], log: Callable[[str], None] = print) -> DictionaryIndex:
    """
    Загружает словарь из JSON. Нет файла — пустой индекс; битый файл — ошибка
    (это ресурс сборки, чинить его надо руками).
    """
    if not path or not os.path.exists(path):
        log(f"[INFO][dictionary] словарь не найден ({path}), работаем без него")
        return DictionaryIndex()
    data = read_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Dictionary root must be an object: {path}")
    index = DictionaryIndex.from_mapping(data)
    log(f"[OK][dictionary] {path}: {len(index)} строк")
    return index

import os
import re
import json
import tempfile

from .. import config


# --- Путь файла относительно рабочей папки, всегда с "/" ---
def rel_posix(path: str, start: str = None) -> str:
    start = start or os.getcwd()
    return os.path.relpath(os.path.abspath(path), start=start).replace("\\", "/")


# --- packages/<app>/... → <app>, иначе "unknown" ---
def namespace_for(rel_path: str, root: str = None) -> str:
    root = root if root is not None else config.SOURCE_ROOT
    m = re.match(r"^" + re.escape(root) + r"/([^/]+)/", rel_path)
    return m.group(1) if m else config.UNKNOWN_NAMESPACE


# --- Безопасное создание директорий для файла ---
def ensure_dir_for_file(path: str):
    """Создаёт директории для указанного пути, если их ещё нет."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)


# --- Запись через временный файл: либо старое содержимое, либо новое ---
def _target_mode(path: str) -> int:
    """Права существующего файла; для нового — обычные 0666 минус umask."""
    try:
        return os.stat(path).st_mode & 0o777
    except FileNotFoundError:
        mask = os.umask(0)
        os.umask(mask)
        return 0o666 & ~mask


def write_text_atomic(path: str, text: str):
    ensure_dir_for_file(path)
    mode = _target_mode(path)
    fd, tmp = tempfile.mkstemp(dir=os.path.dirname(os.path.abspath(path)), suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp создаёт файл с 0600 — возвращаем права цели
        os.chmod(tmp, mode)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise


# --- Работа с JSON ---
def read_json(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: str, data):
    """Запись JSON (UTF-8 как есть, отступ 2) с авто-созданием директорий."""
    write_text_atomic(path, json.dumps(data, ensure_ascii=False, indent=2))

from __future__ import annotations
import os
import json
import sys

# ========== Сканер ==========
# Минимальная длина кандидата (одиночные буквы/знаки не считаем текстом)
MIN_CANDIDATE_LEN = 2

# ========== Ключи и пространства имён ==========
# packages/<app>/... → пространство имён <app>
SOURCE_ROOT = os.environ.get("PERSIAN_SOURCE_ROOT", "packages")
UNKNOWN_NAMESPACE = "unknown"
LITERAL_SEGMENT = "literal"

# функция, через которую код получает перевод: t('ключ')
REFERENCE_FUNC = os.environ.get("PERSIAN_REFERENCE_FUNC", "t")

# ========== Файлы ==========
DEFAULT_STORE_PATH = os.environ.get("PERSIAN_STORE", "persian.json")
DEFAULT_DICTIONARY_PATH = os.environ.get(
    "PERSIAN_DICTIONARY", "packages/logic/src/locales/fa.json"
)

# ========== Провайдер перевода (RapidAPI / OpenL) ==========
TARGET_LANG = os.environ.get("TARGET_LANG", "en")
TRANSLATE_URL = os.environ.get(
    "TRANSLATE_URL", "https://openl-translate.p.rapidapi.com/translate/bulk"
)
RAPIDAPI_HOST = os.environ.get("RAPIDAPI_HOST", "openl-translate.p.rapidapi.com")
TRANSLATE_TIMEOUT = float(os.environ.get("TRANSLATE_TIMEOUT", "30"))

RAPID_API_KEY = os.environ.get("RAPID_API_KEY", "")


# ===== Загрузка ключа из secrets.json (если есть) =====
def _base_dir_for_user_files() -> str:
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


BASE_DIR = _base_dir_for_user_files()
SECRETS_PATH = os.path.join(BASE_DIR, "secrets.json")

try:
    if os.path.exists(SECRETS_PATH):
        with open(SECRETS_PATH, "r", encoding="utf-8") as _sf:
            _secrets = json.load(_sf)
            if not RAPID_API_KEY:
                RAPID_API_KEY = _secrets.get("RAPID_API_KEY", RAPID_API_KEY)
except (OSError, ValueError, AttributeError):
    # битый secrets.json не мешает работе — ключ можно задать через окружение
    pass

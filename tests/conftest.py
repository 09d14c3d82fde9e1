"""
pytest configuration for persian_i18n test suite
"""

import pytest

from persian_i18n.dictionary import DictionaryIndex
from persian_i18n.translators import StaticTranslator


@pytest.fixture
def logs():
    """Список строк лога вместо print."""
    return []


@pytest.fixture
def log(logs):
    return logs.append


@pytest.fixture
def fa_dictionary():
    return DictionaryIndex.from_mapping({
        "common": {
            "save": "ذخیره",
            "cancel": "لغو",
        },
        "auth": {
            "login": {
                "title": "ورود به حساب",
            },
        },
    })


@pytest.fixture
def translator():
    return StaticTranslator({
        "سلام دنیا": "Hello World",
        "خوش آمدید": "Welcome!",
        "نام کاربری": "User name",
    })

# persian_i18n/processors/__init__.py
"""Обработчики исходников по типу содержимого.

Сейчас один: JSX/TS/JS — замена персидского текста на t('ключ').
"""

__all__ = [
    "jsx_source",
]

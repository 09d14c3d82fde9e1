"""persian-i18n: персидский текст в исходниках → ключи t('...') + persian.json."""

__version__ = "0.3.0"

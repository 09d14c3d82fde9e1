# persian_i18n/main.py
from __future__ import annotations
import argparse
import os
import sys
import json

from . import config
from .dictionary import load_dictionary
from .pipeline import process_file
from .scanner import scan_lines
from .translators import StaticTranslator, Translator
from .utils.store import JsonStoreFile


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="persian-i18n",
        description="Находит персидский текст в исходнике, выдаёт ключи и заменяет текст на t('ключ').",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Путь к файлу (.tsx/.jsx/.ts/.js), который нужно обработать",
    )
    parser.add_argument(
        "--store",
        default=config.DEFAULT_STORE_PATH,
        help="JSON-файл с сгенерированными переводами (по умолчанию ./persian.json)",
    )
    parser.add_argument(
        "--dictionary",
        default=config.DEFAULT_DICTIONARY_PATH,
        help="Готовый словарь fa в JSON",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help=(
            "Только показать найденные строки и ключи, ничего не записывать. "
            "Сервис перевода всё равно вызывается для новых строк — добавьте --offline, чтобы без сети"
        ),
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Не ходить в сервис перевода (новые ключи получат хэш-суффикс)",
    )
    parser.add_argument(
        "--set-key",
        help="Сохранить RapidAPI ключ в secrets.json и выйти",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # --- режим записи ключа и выход ---
    if args.set_key:
        os.makedirs(config.BASE_DIR, exist_ok=True)
        with open(config.SECRETS_PATH, "w", encoding="utf-8") as f:
            json.dump({"RAPID_API_KEY": args.set_key}, f, ensure_ascii=False, indent=2)
        print("🔑 Ключ сохранён в", config.SECRETS_PATH)
        return 0

    if not args.file:
        parser.print_usage(sys.stderr)
        print("persian-i18n: error: не указан файл", file=sys.stderr)
        return 1

    dictionary = load_dictionary(args.dictionary)
    translator = StaticTranslator() if args.offline else Translator()
    store_file = JsonStoreFile(args.store)

    if args.dry_run:
        if not args.offline:
            print("[DRY] новые строки будут отправлены в сервис перевода (--offline, чтобы без сети)")
        with open(args.file, "r", encoding="utf-8") as f:
            for lineno, text in scan_lines(f.read()):
                print(f"[DRY] {args.file}:{lineno}: {text}")

    result = process_file(
        args.file,
        dictionary=dictionary,
        translator=translator,
        load_store=store_file.load,
        save_store=store_file.save,
        write=not args.dry_run,
    )

    by_source = {}
    for res in result.resolutions.values():
        by_source[res.source] = by_source.get(res.source, 0) + 1
    summary = ", ".join(f"{k}: {v}" for k, v in sorted(by_source.items())) or "нет персидского текста"
    print(f"\n✅ {result.rel_path} [{result.namespace}] — {summary}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

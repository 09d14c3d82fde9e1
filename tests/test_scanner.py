"""
Unit tests for Persian text scanning.
"""

from persian_i18n.scanner import is_comment_line, scan_lines, scan_text


class TestCommentLines:

    def test_line_comment(self):
        assert is_comment_line("   // سلام دنیا")

    def test_block_comment_open(self):
        assert is_comment_line("/* سلام */")

    def test_block_continuation(self):
        assert is_comment_line("  * توضیح تابع")

    def test_block_comment_close(self):
        assert is_comment_line("پایان توضیح */")

    def test_code_line(self):
        assert not is_comment_line("const a = 'سلام';")

    def test_comment_lines_never_contribute(self):
        content = "\n".join([
            "// سلام دنیا",
            "/* خوش آمدید",
            " * نام کاربری",
            " پایان */",
        ])
        assert scan_text(content) == set()


class TestScanText:

    def test_quoted_and_jsx_text(self):
        content = "const a = 'سلام دنیا';\n<p>خوش آمدید</p>\n"
        assert scan_text(content) == {"سلام دنیا", "خوش آمدید"}

    def test_multiple_runs_on_one_line(self):
        content = "<b>سلام</b><i>خداحافظ!</i>"
        assert scan_text(content) == {"سلام", "خداحافظ!"}

    def test_duplicates_collapse(self):
        content = "<p>سلام دنیا</p>\n<span>سلام دنیا</span>\n"
        assert scan_text(content) == {"سلام دنیا"}

    def test_runs_are_trimmed(self):
        assert scan_text("x = 'سلام دنیا  ';") == {"سلام دنیا"}

    def test_single_character_discarded(self):
        assert scan_text("const and = 'و';") == set()

    def test_persian_punctuation_stays_in_run(self):
        assert scan_text("msg('آیا مطمئن هستید؟')") == {"آیا مطمئن هستید؟"}
        assert scan_text("<p>سلام، دنیا.</p>") == {"سلام، دنیا."}

    def test_zwnj_keeps_word_together(self):
        text = "ذخیره می‌شود"
        assert scan_text(f"'{text}'") == {text}

    def test_latin_and_digits_split_runs(self):
        assert scan_text("<p>ساعت 5 عصر</p>") == {"ساعت", "عصر"}

    def test_crlf_line_endings(self):
        content = "a = 1;\r\nb = 'سلام';\r\n// نظر\r\n"
        assert scan_text(content) == {"سلام"}

    def test_inline_trailing_comment_is_captured(self):
        # известное ограничение: комментарий в конце строки кода не отрезается
        assert scan_text("const x = 1; // سلام دنیا") == {"سلام دنیا"}

    def test_no_persian(self):
        assert scan_text("export const a = 'hello';") == set()


def test_scan_lines_reports_line_numbers():
    content = "import x;\n<p>سلام دنیا</p>\n// نه\n'خوش آمدید'\n"
    assert list(scan_lines(content)) == [(2, "سلام دنیا"), (4, "خوش آمدید")]


def test_only_line_endings_split_lines():
    # \x0c и \u2028 — не конец строки: вся строка остаётся одним комментарием
    content = "// سلام\x0cدنیا خوب\n// نظر\u2028متن دیگر\n"
    assert scan_text(content) == set()
    assert list(scan_lines("a\x0c'سلام'\r\n'دنیا'")) == [(1, "سلام"), (2, "دنیا")]

"""Tests for directive value extraction and value grammars."""

import pytest

from modeline_bridge.parsers.directive import (
    DIGITS,
    FLAG,
    MODE_NAME,
    WORD,
    UnboundedGrammarError,
    ValueGrammar,
    directive_names,
    extract,
)


class TestExtract:
    """Unit tests for extract()."""

    def test_mode_value(self):
        assert extract("mode: C++; tab-width: 4", "mode", MODE_NAME) == "C++"

    def test_second_directive(self):
        assert extract("mode: C++; tab-width: 4", "tab-width", DIGITS) == "4"

    def test_option_name_case_insensitive(self):
        assert extract("Tab-Width: 8", "tab-width", DIGITS) == "8"

    def test_surrounding_whitespace(self):
        assert extract("  mode:   python  ", "mode", MODE_NAME) == "python"

    def test_no_space_after_colon(self):
        assert extract("fill-column:80", "fill-column", DIGITS) == "80"

    def test_missing_option_is_absent(self):
        assert extract("mode: c", "tab-width", DIGITS) is None

    def test_value_failing_grammar_is_absent(self):
        assert extract("tab-width: four", "tab-width", DIGITS) is None

    def test_empty_value_is_absent(self):
        assert extract("tab-width: ; mode: c", "tab-width", DIGITS) is None

    def test_name_must_start_a_directive(self):
        """``c-mode: x`` does not contain a ``mode`` directive."""
        assert extract("c-mode: x", "mode", MODE_NAME) is None

    def test_value_returned_verbatim(self):
        assert extract("coding: UTF-8", "coding", WORD) == "UTF-8"

    def test_flag_value(self):
        assert extract("buffer-read-only: t", "buffer-read-only", FLAG) == "t"


class TestInjection:
    """The captured value never carries text past the grammar."""

    def test_trailing_command_not_captured(self):
        assert extract("tab-width: 4; rm -rf /", "tab-width", DIGITS) == "4"

    @pytest.mark.parametrize(
        "modeline",
        [
            "tab-width: 4|rm -rf /",
            "tab-width: 4 && rm -rf /",
            "tab-width: 4`id`",
            "tab-width: 4$(id)",
            "tab-width: 4 rm",
        ],
    )
    def test_digits_followed_by_junk_is_absent(self, modeline):
        assert extract(modeline, "tab-width", DIGITS) is None

    @pytest.mark.parametrize(
        "modeline",
        [
            "coding: utf-8|sh",
            "coding: utf-8 ; !sh",
            "mode: c;!rm",
        ],
    )
    def test_word_values_never_contain_metacharacters(self, modeline):
        name = modeline.split(":", 1)[0]
        grammar = WORD if name == "coding" else MODE_NAME
        value = extract(modeline, name, grammar)
        if value is not None:
            assert not set(value) & set(";|&$`!() ")

    def test_flag_stops_at_separator(self):
        assert extract("buffer-read-only: t;eval: (x)", "buffer-read-only", FLAG) == "t"

    def test_raw_pattern_rejected(self):
        with pytest.raises(TypeError):
            extract("tab-width: 4", "tab-width", ".*")  # type: ignore[arg-type]


class TestValueGrammar:
    """Grammar construction enforces bounded languages."""

    def test_builtin_grammars_are_bounded(self):
        for grammar in (DIGITS, WORD, MODE_NAME):
            assert grammar.kind == "allow"
            assert ";" not in grammar.chars
        assert FLAG.kind == "deny"
        assert ";" in FLAG.chars and " " in FLAG.chars

    @pytest.mark.parametrize("chars", ["0-9;", "abc ", "a|b", "x$", "*"])
    def test_allow_rejects_unsafe_characters(self, chars):
        with pytest.raises(UnboundedGrammarError):
            ValueGrammar.allow("bad", chars)

    def test_allow_rejects_empty_class(self):
        with pytest.raises(UnboundedGrammarError):
            ValueGrammar.allow("bad", "")

    def test_deny_must_exclude_separators(self):
        with pytest.raises(UnboundedGrammarError):
            ValueGrammar(name="wildcard", kind="deny", chars=frozenset())
        with pytest.raises(UnboundedGrammarError):
            ValueGrammar(name="no-space", kind="deny", chars=frozenset(";"))

    def test_unknown_kind_rejected(self):
        with pytest.raises(UnboundedGrammarError):
            ValueGrammar(name="regex", kind="regex")

    def test_choice_grammar(self):
        yes_no = ValueGrammar.choice("yes-no", "t", "nil")
        assert extract("indent-tabs-mode: nil", "indent-tabs-mode", yes_no) == "nil"
        assert extract("indent-tabs-mode: maybe", "indent-tabs-mode", yes_no) is None

    def test_choice_rejects_unsafe_words(self):
        with pytest.raises(UnboundedGrammarError):
            ValueGrammar.choice("bad", "t", "rm -rf")
        with pytest.raises(UnboundedGrammarError):
            ValueGrammar.choice("empty")

    def test_pattern_for_allow_class(self):
        assert DIGITS.pattern.startswith("[") and DIGITS.pattern.endswith("]{1,9}")

    def test_digit_run_longer_than_limit_is_absent(self):
        assert extract("fill-column: 123456789", "fill-column", DIGITS) == "123456789"
        assert extract("fill-column: 1234567890", "fill-column", DIGITS) is None

    def test_flag_run_is_length_capped(self):
        assert extract("buffer-read-only: " + "t" * 64, "buffer-read-only", FLAG) is not None
        assert extract("buffer-read-only: " + "t" * 65, "buffer-read-only", FLAG) is None

    def test_max_len_must_be_positive(self):
        with pytest.raises(UnboundedGrammarError):
            ValueGrammar.allow("digits", "0123456789", max_len=0)


class TestDirectiveNames:
    def test_lists_names_in_order(self):
        assert directive_names("mode: c; compile-command: make; Tab-Width: 4") == [
            "mode",
            "compile-command",
            "tab-width",
        ]

    def test_no_names(self):
        assert directive_names("Makefile") == []

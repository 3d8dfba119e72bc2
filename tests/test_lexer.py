# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the breakpoint-delimited tokenizer.
#
# Test coverage includes:
#   - Splitting on space and newline only
#   - Empty tokens from consecutive or trailing breakpoints
#   - Line/column tracking
#   - The has_next()/next() cursor over tokens
#   - Input types accepted by the Lexer (stream, bytes, str)
# =============================================================================

import io

import pytest
from stackasm.assembler.lexer import BREAKPOINTS, Lexer, Token, TokenSource, iter_tokens
from stackasm.assembler.reader import CodePointSource
from stackasm.errors import DecodeError, SourceLocation


# =============================================================================
# Helper Function
# =============================================================================

def words(source) -> list[str]:
    """Helper to tokenize and keep only the token texts."""
    return [t.text for t in Lexer(source, "<test>").tokenize()]


# =============================================================================
# Splitting Tests
# =============================================================================

class TestSplitting:
    """Test how code points are grouped into words."""

    def test_breakpoints(self):
        assert BREAKPOINTS == frozenset({" ", "\n"})

    def test_single_word(self):
        assert words("nop") == ["nop"]

    def test_space_separated(self):
        assert words("add In jMp NOP") == ["add", "In", "jMp", "NOP"]

    def test_newline_separated(self):
        assert words("push\n1\nout") == ["push", "1", "out"]

    def test_breakpoint_is_discarded(self):
        """Breakpoints never appear inside a token."""
        for text in words("a b\nc"):
            assert " " not in text
            assert "\n" not in text

    def test_consecutive_breakpoints_make_empty_token(self):
        assert words("a  b") == ["a", "", "b"]

    def test_trailing_newline_makes_empty_token(self):
        assert words("a\n") == ["a", ""]

    def test_leading_space_makes_empty_token(self):
        assert words(" a") == ["", "a"]

    def test_empty_input_is_one_empty_token(self):
        assert words("") == [""]

    def test_tab_is_not_a_breakpoint(self):
        assert words("a\tb") == ["a\tb"]

    def test_carriage_return_is_not_a_breakpoint(self):
        assert words("a\r\nb") == ["a\r", "b"]

    def test_unicode_word(self):
        assert words("héllo wörld") == ["héllo", "wörld"]


# =============================================================================
# Position Tests
# =============================================================================

class TestPositions:
    """Test line and column tracking."""

    def test_columns_on_one_line(self):
        tokens = list(Lexer("add nop", "<test>").tokenize())
        assert (tokens[0].line, tokens[0].column) == (1, 1)
        assert (tokens[1].line, tokens[1].column) == (1, 5)

    def test_lines(self):
        tokens = list(Lexer("a:\n  push", "<test>").tokenize())
        assert [(t.text, t.line, t.column) for t in tokens] == [
            ("a:", 1, 1),
            ("", 2, 1),
            ("", 2, 2),
            ("push", 2, 3),
        ]

    def test_location(self):
        token = Token("jmp", 3, 7, "prog.sm")
        assert token.location == SourceLocation("prog.sm", 3, 7)
        assert str(token.location) == "prog.sm:3:7"

    def test_filename_propagates(self):
        tokens = list(Lexer("nop", "prog.sm").tokenize())
        assert tokens[0].filename == "prog.sm"

    def test_repr(self):
        assert repr(Token("jmp", 1, 2)) == "Token('jmp', 1:2)"


# =============================================================================
# Input Type Tests
# =============================================================================

class TestInputs:
    """Test the input types the Lexer accepts."""

    def test_bytes(self):
        assert words(b"add sub") == ["add", "sub"]

    def test_binary_stream(self):
        assert words(io.BytesIO(b"add sub")) == ["add", "sub"]

    def test_str_is_encoded(self):
        lexer = Lexer("é", encoding="latin-1")
        assert [t.text for t in lexer.tokenize()] == ["é"]

    def test_invalid_bytes(self):
        with pytest.raises(DecodeError):
            words(b"add \xff")

    def test_invalid_bytes_report_line_and_column(self):
        with pytest.raises(DecodeError) as exc_info:
            words(b"nop\n\xff")
        error = exc_info.value
        assert error.location == SourceLocation("<test>", 2, 1)
        assert "byte offset 4" in error.hint
        assert str(error).startswith("<test>:2:1: error: could not read code point")

    def test_truncated_sequence_reports_position(self):
        data = b"ab " + "€".encode("utf-8")[:2]
        with pytest.raises(DecodeError) as exc_info:
            words(data)
        assert exc_info.value.location == SourceLocation("<test>", 1, 4)

    def test_iter_tokens_over_plain_iterable(self):
        assert [t.text for t in iter_tokens("1 2")] == ["1", "2"]


# =============================================================================
# Cursor Tests
# =============================================================================

class TestTokenSource:
    """Test the has_next()/next() cursor over tokens."""

    def make(self, data: bytes) -> TokenSource:
        return TokenSource(CodePointSource(io.BytesIO(data)))

    def test_walks_tokens(self):
        tokens = self.make(b"bc ddd")
        assert tokens.has_next()
        assert tokens.next().text == "bc"
        assert tokens.has_next()
        assert tokens.next().text == "ddd"
        assert not tokens.has_next()

    def test_last_empty_token_delivered_once(self):
        tokens = self.make(b"nop\n")
        assert tokens.next().text == "nop"
        assert tokens.has_next()
        assert tokens.next().text == ""
        assert not tokens.has_next()
        with pytest.raises(StopIteration):
            tokens.next()

    def test_empty_input(self):
        tokens = self.make(b"")
        assert tokens.has_next()
        assert tokens.next().text == ""
        assert not tokens.has_next()

    def test_iterable(self):
        assert [t.text for t in self.make(b"a: &a")] == ["a:", "&a"]

# =============================================================================
# test_classifier.py - Token Classifier Unit Tests
# =============================================================================
# Tests for the word -> TokenKind rules and their priority order.
# =============================================================================

import pytest
from stackasm.assembler.classifier import (
    Lexeme,
    TokenKind,
    classify,
    decode,
    is_instruction,
    is_integer,
    is_label_def,
    is_label_ref,
)
from stackasm.assembler.lexer import Token
from stackasm.errors import DecodeError, SourceLocation
from stackasm.isa import MNEMONICS


# =============================================================================
# Rule Tests
# =============================================================================

class TestIntegerRule:

    @pytest.mark.parametrize("word", ["0", "7", "123", "007", "2147483648"])
    def test_digits(self, word):
        assert decode(word) is TokenKind.INTEGER

    def test_empty_word_is_integer(self):
        """No character fails the digit check, so the empty word matches."""
        assert is_integer("")
        assert decode("") is TokenKind.INTEGER

    @pytest.mark.parametrize("word", ["-1", "+1", "1_000", "0x10", "١٢"])
    def test_non_ascii_digits_rejected(self, word):
        assert not is_integer(word)


class TestInstructionRule:

    @pytest.mark.parametrize("mnemonic", sorted(MNEMONICS))
    def test_every_mnemonic(self, mnemonic):
        assert decode(mnemonic) is TokenKind.INSTRUCTION

    @pytest.mark.parametrize("word", ["ADD", "Add", "aDd", "OUTNUM", "Rol3"])
    def test_case_insensitive(self, word):
        assert is_instruction(word)

    def test_unknown_mnemonic(self):
        assert not is_instruction("halt")


class TestLabelDefRule:

    @pytest.mark.parametrize("word", ["a:", "loop:", "_start:", "end_of_loop:"])
    def test_valid(self, word):
        assert decode(word) is TokenKind.LABEL_DEF

    @pytest.mark.parametrize("word", [":", "Loop:", "a1:", "a:b:", "a-b:", "loop"])
    def test_invalid(self, word):
        assert not is_label_def(word)

    def test_mnemonic_shaped_label(self):
        """A label may share its name with a mnemonic."""
        assert decode("jmp:") is TokenKind.LABEL_DEF


class TestLabelRefRule:

    @pytest.mark.parametrize("word", ["&a", "&loop", "&_start"])
    def test_valid(self, word):
        assert decode(word) is TokenKind.LABEL_REF

    @pytest.mark.parametrize("word", ["&", "&Loop", "&a1", "&&a", "a&", "&a:"])
    def test_invalid(self, word):
        assert not is_label_ref(word)


# =============================================================================
# Priority and Failure Tests
# =============================================================================

class TestDecode:

    def test_rules_are_exclusive_for_labels(self):
        for word in ("a:", "&a"):
            assert not (is_label_def(word) and is_label_ref(word))

    @pytest.mark.parametrize("word", ["Xyz", "foo", "1a", "&1", "a1:", "é", "\t", "nop\r"])
    def test_unrecognized(self, word):
        with pytest.raises(DecodeError) as exc_info:
            decode(word)
        assert exc_info.value.token == word
        assert "unrecognized token shape" in str(exc_info.value)

    def test_error_location(self):
        location = SourceLocation("prog.sm", 2, 4)
        with pytest.raises(DecodeError) as exc_info:
            decode("Xyz", location)
        assert exc_info.value.location == location
        assert str(exc_info.value).startswith("prog.sm:2:4: error:")


class TestClassify:

    def test_classify_token(self):
        lexeme = classify(Token("&loop", 1, 9, "prog.sm"))
        assert lexeme == Lexeme("&loop", TokenKind.LABEL_REF, SourceLocation("prog.sm", 1, 9))

    def test_lexeme_is_immutable(self):
        lexeme = Lexeme("nop", TokenKind.INSTRUCTION)
        with pytest.raises(AttributeError):
            lexeme.text = "add"

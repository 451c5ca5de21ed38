"""Tests for the 27-letter Spanish alphabet."""

import pytest

from vigenere_es.core.exceptions import InvalidSymbolError, SymbolIndexOutOfRangeError
from vigenere_es.services.alphabet import (
    ALPHABET,
    ALPHABET_SIZE,
    SPANISH_FREQ,
    SPANISH_IOC,
    index_of,
    is_symbol,
    symbol_of,
)


class TestAlphabet:
    """Test suite for index/symbol mappings."""

    def test_alphabet_order(self):
        """Ñ sits between N and O."""
        assert ALPHABET_SIZE == 27
        assert ALPHABET[13:16] == "NÑO"

    def test_known_indices(self):
        assert index_of("A") == 0
        assert index_of("N") == 13
        assert index_of("Ñ") == 14
        assert index_of("O") == 15
        assert index_of("Z") == 26

    def test_known_symbols(self):
        assert symbol_of(0) == "A"
        assert symbol_of(13) == "N"
        assert symbol_of(14) == "Ñ"
        assert symbol_of(15) == "O"
        assert symbol_of(26) == "Z"

    def test_bijection(self):
        """index_of and symbol_of are inverses of each other."""
        for i in range(ALPHABET_SIZE):
            assert index_of(symbol_of(i)) == i

        for symbol in ALPHABET:
            assert symbol_of(index_of(symbol)) == symbol

    def test_matches_alphabet_string(self):
        for i, symbol in enumerate(ALPHABET):
            assert index_of(symbol) == i

    @pytest.mark.parametrize("char", ["a", "ñ", "É", " ", "1", "Ç", ""])
    def test_index_of_rejects_non_symbols(self, char):
        with pytest.raises(InvalidSymbolError):
            index_of(char)

    @pytest.mark.parametrize("index", [-1, 27, 100])
    def test_symbol_of_rejects_out_of_range(self, index):
        with pytest.raises(SymbolIndexOutOfRangeError) as exc_info:
            symbol_of(index)

        assert exc_info.value.details["index"] == index

    def test_is_symbol(self):
        assert is_symbol("Ñ")
        assert is_symbol("K")
        assert not is_symbol("ñ")
        assert not is_symbol("-")


class TestSpanishDistribution:
    """Test suite for the Spanish frequency table."""

    def test_one_probability_per_symbol(self):
        assert len(SPANISH_FREQ) == ALPHABET_SIZE

    def test_sums_to_one(self):
        assert sum(SPANISH_FREQ) == pytest.approx(1.0, abs=1e-3)

    def test_most_frequent_letters(self):
        assert SPANISH_FREQ[index_of("E")] == 0.12614
        assert SPANISH_FREQ[index_of("A")] == 0.12027
        assert SPANISH_FREQ[index_of("Ñ")] == 0.00311

    def test_ioc_matches_table(self):
        """The Spanish IC is the sum of the squared letter probabilities."""
        assert sum(p * p for p in SPANISH_FREQ) == pytest.approx(SPANISH_IOC, abs=1e-4)

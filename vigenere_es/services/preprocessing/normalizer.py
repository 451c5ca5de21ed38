import re
import unicodedata
from dataclasses import dataclass
from enum import Enum

from vigenere_es.services.alphabet import ALPHABET, is_symbol


class NormalizationMode(str, Enum):
    """Text normalization modes."""

    ALPHABET_ONLY = "alphabet_only"  # Alphabet symbols only, case untouched
    UPPERCASE = "uppercase"  # Uppercased, everything else kept


@dataclass
class NormalizedText:
    """Result of text normalization."""

    text: str
    original: str
    alphabet: str
    removed_chars: dict[str, int]
    mode: NormalizationMode


class TextNormalizer:
    """
    Normalizes text for the 27-letter Spanish alphabet.

    Handles:
    - Unicode normalization (NFKC), so a decomposed N + U+0303 becomes Ñ
    - Case conversion
    - Removal of characters outside the alphabet
    """

    def __init__(self, unicode_form: str | None = "NFKC"):
        """Initialize normalizer; `unicode_form=None` disables Unicode normalization."""
        self.alphabet = ALPHABET
        self.unicode_form = unicode_form

    def normalize(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.ALPHABET_ONLY,
    ) -> str:
        """Return only the normalized string of normalize_full()."""
        return self.normalize_full(text, mode).text

    def normalize_full(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.ALPHABET_ONLY,
    ) -> NormalizedText:
        """
        Normalize `text` according to `mode`.

        ALPHABET_ONLY counts every dropped character in `removed_chars`;
        UPPERCASE drops nothing.
        """
        original = text
        removed_chars: dict[str, int] = {}

        if self.unicode_form:
            text = unicodedata.normalize(self.unicode_form, text)

        if mode == NormalizationMode.UPPERCASE:
            normalized = text.upper()
        else:
            normalized = self._filter_symbols(text, removed_chars)

        return NormalizedText(
            text=normalized,
            original=original,
            alphabet=self.alphabet,
            removed_chars=removed_chars,
            mode=mode,
        )

    def _filter_symbols(self, text: str, removed_chars: dict[str, int]) -> str:
        """Keep only alphabet symbols, tracking removed ones."""
        result = []

        for char in text:
            if is_symbol(char):
                result.append(char)
            else:
                removed_chars[char] = removed_chars.get(char, 0) + 1

        return "".join(result)

    def collapse_whitespace(self, text: str) -> str:
        """Collapse multiple whitespace characters to single space."""
        return re.sub(r"\s+", " ", text).strip()

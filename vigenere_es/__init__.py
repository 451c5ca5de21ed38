"""
Vigenère cipher over the 27-letter Spanish alphabet (A-Z plus Ñ) and a
ciphertext-only attack based on the Index of Coincidence.

    >>> from vigenere_es import encrypt, decrypt
    >>> encrypt("NÑO", "B")
    'ÑOP'
    >>> decrypt("ÑOP", "B")
    'NÑO'
"""

from vigenere_es.models.schemas import KeyLengthStrategy
from vigenere_es.services.alphabet import ALPHABET, SPANISH_FREQ, SPANISH_IOC, index_of, symbol_of
from vigenere_es.services.analysis.cryptanalysis import (
    CrackResult,
    VigenereAnalyzer,
    crack,
    crack_full,
)
from vigenere_es.services.cipher import VigenereCipher, decrypt, encrypt

__all__ = [
    "ALPHABET",
    "SPANISH_FREQ",
    "SPANISH_IOC",
    "CrackResult",
    "KeyLengthStrategy",
    "VigenereAnalyzer",
    "VigenereCipher",
    "crack",
    "crack_full",
    "decrypt",
    "encrypt",
    "index_of",
    "symbol_of",
]

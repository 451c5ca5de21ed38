"""Cipher engines."""

from vigenere_es.services.engines.base import CipherEngine, DecryptionResult
from vigenere_es.services.engines.vigenere import AttackReport, VigenereEngine

__all__ = [
    "AttackReport",
    "CipherEngine",
    "DecryptionResult",
    "VigenereEngine",
]

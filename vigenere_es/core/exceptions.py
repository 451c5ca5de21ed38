from typing import Any


class CryptanalysisError(Exception):
    """Base exception for all cipher and cryptanalysis errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class AlphabetError(CryptanalysisError):
    """Base exception for alphabet mapping errors."""

    pass


class InvalidSymbolError(AlphabetError):
    """Raised when a symbol outside the 27-letter alphabet is mapped to an index."""

    def __init__(self, symbol: str):
        super().__init__(
            f"Symbol {symbol!r} is not part of the Spanish alphabet",
            {"symbol": symbol},
        )


class SymbolIndexOutOfRangeError(AlphabetError):
    """Raised when an index outside [0, 26] is mapped to a symbol."""

    def __init__(self, index: int, size: int):
        super().__init__(
            f"Alphabet index {index} is out of range [0, {size - 1}]",
            {"index": index, "size": size},
        )


class ValidationError(CryptanalysisError):
    """Raised when input validation fails."""

    pass


class InvalidKeyError(ValidationError):
    """Raised when a key contains symbols outside the alphabet."""

    def __init__(self, key: str, invalid: list[str] | None = None):
        invalid = invalid or []
        super().__init__(
            f"Invalid key {key!r}: keys must only contain the letters A-Z and Ñ",
            {"key": key, "invalid_symbols": invalid},
        )


class EmptyKeyError(InvalidKeyError):
    """Raised when a cipher is constructed with a zero-length key."""

    def __init__(self) -> None:
        ValidationError.__init__(self, "Key must contain at least one symbol")


class CiphertextTooLongError(ValidationError):
    """Raised when ciphertext exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Ciphertext length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class InvalidCiphertextError(ValidationError):
    """Raised when ciphertext format is invalid."""

    pass


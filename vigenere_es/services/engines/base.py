from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class DecryptionResult:
    """Result of a decryption operation."""

    plaintext: str
    key: str
    confidence: float
    explanation: str
    key_length: int


class CipherEngine(ABC):
    """
    Abstract base class for cipher engines.

    Each cipher implementation must provide:
    - encrypt(): Encrypt plaintext
    - decrypt_with_key(): Decrypt with a known key
    - find_key_and_decrypt(): Decrypt without a known key
    - generate_random_key(): Produce a key
    - explain(): Generate human-readable explanation
    """

    # Cipher metadata
    name: str
    description: str

    @abstractmethod
    def encrypt(self, plaintext: str, key: str) -> str:
        """
        Encrypt plaintext with the given key.

        Args:
            plaintext: The plaintext to encrypt
            key: The encryption key

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decrypt_with_key(
        self,
        ciphertext: str,
        key: str,
    ) -> DecryptionResult:
        """
        Decrypt with a known key.

        Args:
            ciphertext: The ciphertext to decrypt
            key: The decryption key

        Returns:
            DecryptionResult with plaintext and metadata
        """
        pass

    @abstractmethod
    def find_key_and_decrypt(
        self,
        ciphertext: str,
        options: dict[str, Any],
    ) -> DecryptionResult:
        """
        Find the best key and decrypt.

        Args:
            ciphertext: The ciphertext to decrypt
            options: Additional options

        Returns:
            Best decryption result
        """
        pass

    @abstractmethod
    def generate_random_key(self) -> str:
        """Generate a random valid key for this cipher."""
        pass

    @abstractmethod
    def explain(self, ciphertext: str, plaintext: str, key: str) -> str:
        """
        Generate human-readable explanation of the decryption.

        Args:
            ciphertext: The original ciphertext
            plaintext: The decrypted plaintext
            key: The key used

        Returns:
            Explanation string
        """
        pass

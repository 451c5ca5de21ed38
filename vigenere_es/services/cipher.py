from vigenere_es.core.exceptions import EmptyKeyError, InvalidKeyError
from vigenere_es.services.alphabet import ALPHABET_SIZE, index_of, is_symbol, symbol_of


class VigenereCipher:
    """
    Vigenère cipher over the 27-letter Spanish alphabet.

    Each alphabet symbol of the input is shifted by the index of the
    current key symbol. Any other character (spaces, punctuation, digits,
    lowercase letters) is copied through unchanged and does not advance
    the key. Instances are immutable, so encrypt/decrypt are pure.
    """

    def __init__(self, key: str):
        """
        Bind the cipher to `key`.

        Raises:
            EmptyKeyError: If the key has no symbols.
            InvalidKeyError: If the key contains symbols outside the alphabet.
        """
        if not key:
            raise EmptyKeyError()

        invalid = sorted({c for c in key if not is_symbol(c)})
        if invalid:
            raise InvalidKeyError(key, invalid)

        self._key = key
        self._shifts = tuple(index_of(c) for c in key)

    @property
    def key(self) -> str:
        return self._key

    def __len__(self) -> int:
        return len(self._key)

    def __repr__(self) -> str:
        return f"VigenereCipher(key={self._key!r})"

    def encrypt(self, message: str | None) -> str | None:
        """Encrypt `message`. Returns None when given None."""
        return self._iter_text(message, encrypt=True)

    def decrypt(self, ciphertext: str | None) -> str | None:
        """Decrypt `ciphertext`. Returns None when given None."""
        return self._iter_text(ciphertext, encrypt=False)

    def _iter_text(self, text: str | None, encrypt: bool) -> str | None:
        if text is None:
            return None

        result = []
        key_length = len(self._shifts)
        j = 0

        for char in text:
            if is_symbol(char):
                d = index_of(char)
                k = self._shifts[j]
                if encrypt:
                    o = (d + k) % ALPHABET_SIZE
                else:
                    o = (d - k + ALPHABET_SIZE) % ALPHABET_SIZE
                result.append(symbol_of(o))
                j = (j + 1) % key_length
            else:
                result.append(char)

        return "".join(result)


def encrypt(plaintext: str | None, key: str) -> str | None:
    """Encrypt `plaintext` with `key`."""
    return VigenereCipher(key).encrypt(plaintext)


def decrypt(ciphertext: str | None, key: str) -> str | None:
    """Decrypt `ciphertext` with `key`."""
    return VigenereCipher(key).decrypt(ciphertext)

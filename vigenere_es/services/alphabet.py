from typing import Final

from vigenere_es.core.exceptions import InvalidSymbolError, SymbolIndexOutOfRangeError

# Latin ordering with Ñ inserted between N and O
ALPHABET: Final[str] = "ABCDEFGHIJKLMNÑOPQRSTUVWXYZ"
ALPHABET_SIZE: Final[int] = len(ALPHABET)

ENYE: Final[str] = "Ñ"
ENYE_INDEX: Final[int] = 14

# Letter frequencies in the Spanish language (as probabilities), alphabet order
SPANISH_FREQ: Final[tuple[float, ...]] = (
    0.12027, 0.02215, 0.04019, 0.05010, 0.12614, 0.00692, 0.01768,  # A - G
    0.00703, 0.06972, 0.00493, 0.00011, 0.04967, 0.03157, 0.06712,  # H - N
    0.00311, 0.09510, 0.02510, 0.00877, 0.06871, 0.07977, 0.04632,  # Ñ - T
    0.03107, 0.01138, 0.00017, 0.00215, 0.01008, 0.00467,           # U - Z
)

# Index of Coincidence of monoalphabetic Spanish text
SPANISH_IOC: Final[float] = 0.07247

# Index of Coincidence of uniformly distributed symbols
UNIFORM_IOC: Final[float] = 1 / ALPHABET_SIZE

_SYMBOLS: Final[frozenset[str]] = frozenset(ALPHABET)


def is_symbol(char: str) -> bool:
    """Return True if `char` is one of the 27 uppercase alphabet symbols."""
    return char in _SYMBOLS


def index_of(char: str) -> int:
    """
    Map an alphabet symbol to its index.

    'A'..'N' map to 0..13, 'Ñ' to 14 and 'O'..'Z' to 15..26.

    Raises:
        InvalidSymbolError: If `char` is not an uppercase alphabet symbol.
    """
    if char not in _SYMBOLS:
        raise InvalidSymbolError(char)
    if char == ENYE:
        return ENYE_INDEX
    if char <= "N":
        return ord(char) - ord("A")
    return ord(char) - ord("A") + 1


def symbol_of(index: int) -> str:
    """
    Map an index in [0, 26] to its alphabet symbol.

    Raises:
        SymbolIndexOutOfRangeError: If `index` is outside the alphabet.
    """
    if not 0 <= index < ALPHABET_SIZE:
        raise SymbolIndexOutOfRangeError(index, ALPHABET_SIZE)
    if index == ENYE_INDEX:
        return ENYE
    if index < ENYE_INDEX:
        return chr(ord("A") + index)
    return chr(ord("A") + index - 1)

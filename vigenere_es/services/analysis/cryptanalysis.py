import logging
import random
from dataclasses import dataclass
from typing import Protocol

from vigenere_es.models.schemas import KeyLengthStrategy
from vigenere_es.services.alphabet import (
    ALPHABET_SIZE,
    SPANISH_FREQ,
    SPANISH_IOC,
    symbol_of,
)
from vigenere_es.services.analysis.statistics import (
    frequencies,
    index_of_coincidence,
    shift_correlation,
    unbiased_index_of_coincidence,
)
from vigenere_es.services.cipher import VigenereCipher
from vigenere_es.services.preprocessing.normalizer import NormalizationMode, TextNormalizer

logger = logging.getLogger(__name__)

# Tolerance when comparing an IC against the Spanish IC
IC_EPSILON = 0.001

# Averaged IC a period must reach to be accepted by the averaged strategy.
# Two interleaved Spanish alphabets stay below it (about 0.059).
AVERAGED_IC_TOLERANCE = 0.01
AVERAGED_IC_THRESHOLD = SPANISH_IOC - AVERAGED_IC_TOLERANCE

# Largest period tried by crack() unless told otherwise
DEFAULT_MAX_KEY_LENGTH = 64

# Strips only: analyzed letters match the letters of the raw ciphertext one to one
_STRIPPER = TextNormalizer(unicode_form=None)


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class CrackResult:
    """Outcome of a ciphertext-only attack."""

    key_length: int
    key: str
    plaintext: str


class VigenereAnalyzer:
    """
    Ciphertext-only attack on the Spanish Vigenère cipher.

    Breaking involves:
    1. Estimating the key length: the column of a ciphertext transposed by
       the right period is a Caesar shift of Spanish, so its IC approaches
       the Spanish IC, while wrong periods flatten it towards 1/27.
    2. Recovering each key symbol: the column distribution rotated by the
       right shift correlates with the Spanish distribution as well as
       Spanish correlates with itself.

    The attack is heuristic and never raises on a wrong answer; callers
    validate by decrypting. Frequency vectors are computed per call, but
    the random source is shared, so one instance should not be used from
    several threads at once.
    """

    def __init__(
        self,
        ciphertext: str,
        *,
        seed: int | None = None,
        rng: RandomSource | None = None,
        epsilon: float = IC_EPSILON,
        max_key_length: int | None = None,
        strategy: KeyLengthStrategy = KeyLengthStrategy.SAMPLED,
    ):
        """
        Args:
            ciphertext: Raw ciphertext; every code point outside the uppercase
                alphabet is stripped without Unicode normalization, so callers
                must uppercase and compose first
            seed: Seed for a private random.Random when `rng` is not given
            rng: Random source used to pick the sampled column per period
            epsilon: Accepted distance between a column IC and the Spanish IC
            max_key_length: Largest period tried, or None to try up to the
                ciphertext length
            strategy: How key_length() scores each trial period
        """
        self.ciphertext = _STRIPPER.normalize(ciphertext, NormalizationMode.ALPHABET_ONLY)
        self.epsilon = epsilon
        self.max_key_length = max_key_length
        self.strategy = KeyLengthStrategy(strategy)
        self._rng = rng if rng is not None else random.Random(seed)

    def __len__(self) -> int:
        return len(self.ciphertext)

    def block(self, period: int, column: int) -> str:
        """
        Symbols at positions column, period + column, 2 * period + column, ...

        This is the ciphertext split into batches of `period` symbols,
        keeping the symbol at offset `column` of each batch.
        """
        return self.ciphertext[column::period]

    def key_length(self) -> int:
        """
        Guess the length of the key used to produce the ciphertext.

        Tries periods from 1 upwards and returns the first one accepted by
        the configured strategy. Falls back to the ciphertext length when
        no period is accepted.
        """
        n = len(self.ciphertext)
        limit = n if self.max_key_length is None else min(n, self.max_key_length)

        if self.strategy == KeyLengthStrategy.AVERAGED:
            accept = self._accept_averaged
        else:
            accept = self._accept_sampled

        for period in range(1, limit + 1):
            if accept(period):
                logger.debug("Accepted key length %d (%s strategy)", period, self.strategy.value)
                return period

        logger.warning(
            "No period up to %d matched the Spanish IC; falling back to ciphertext length %d",
            limit,
            n,
        )
        return n

    def _accept_sampled(self, period: int) -> bool:
        """Check one random column of `period` against the Spanish IC."""
        column = self._rng.randrange(period)
        ic = index_of_coincidence(frequencies(self.block(period, column)))
        return abs(ic - SPANISH_IOC) < self.epsilon

    def _accept_averaged(self, period: int) -> bool:
        """Check the averaged IC of every column of `period`."""
        return self.average_ic(period) >= AVERAGED_IC_THRESHOLD

    def average_ic(self, period: int) -> float:
        """Mean unbiased IC over all columns of `period`."""
        total = sum(
            unbiased_index_of_coincidence(self.block(period, column))
            for column in range(period)
        )
        return total / period

    def ic_profile(self, max_period: int) -> list[tuple[int, float]]:
        """Averaged IC for each period from 1 to `max_period`."""
        limit = min(max_period, len(self.ciphertext))
        return [(period, self.average_ic(period)) for period in range(1, limit + 1)]

    def offset(self, block: str) -> int:
        """
        Guess the shift applied to the symbols of `block`.

        Returns the shift whose correlation with the Spanish distribution
        is closest to the Spanish IC; the earliest shift wins ties.
        """
        q = frequencies(block)
        best_shift = 0
        best_diff = 1.0

        for shift in range(ALPHABET_SIZE):
            diff = abs(shift_correlation(q, shift, SPANISH_FREQ) - SPANISH_IOC)
            if diff < best_diff:
                best_shift = shift
                best_diff = diff

        return best_shift

    def generate_key(self, length: int) -> str:
        """Generate a candidate key of exactly `length` symbols."""
        return "".join(
            symbol_of(self.offset(self.block(length, column)))
            for column in range(length)
        )


def crack_full(
    ciphertext: str,
    *,
    seed: int | None = None,
    rng: RandomSource | None = None,
    strategy: KeyLengthStrategy = KeyLengthStrategy.AVERAGED,
    max_key_length: int | None = DEFAULT_MAX_KEY_LENGTH,
    epsilon: float = IC_EPSILON,
) -> CrackResult:
    """
    Estimate the key length, recover a candidate key and decrypt with it.

    The candidate may be wrong; inspect the plaintext to validate it.
    """
    analyzer = VigenereAnalyzer(
        ciphertext,
        seed=seed,
        rng=rng,
        epsilon=epsilon,
        max_key_length=max_key_length,
        strategy=strategy,
    )
    key_length = analyzer.key_length()
    key = analyzer.generate_key(key_length)
    plaintext = VigenereCipher(key).decrypt(ciphertext) if key else ciphertext

    return CrackResult(key_length=key_length, key=key, plaintext=plaintext)


def crack(ciphertext: str, **options) -> str:
    """Return a candidate key for `ciphertext` (may be wrong)."""
    return crack_full(ciphertext, **options).key

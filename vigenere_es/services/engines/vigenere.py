import logging
import random
from dataclasses import dataclass
from typing import Any

from vigenere_es.core.config import Settings
from vigenere_es.core.exceptions import InvalidCiphertextError
from vigenere_es.models.schemas import KeyLengthStrategy, PeriodScore, StatisticsProfile
from vigenere_es.services.alphabet import ALPHABET, SPANISH_IOC, UNIFORM_IOC, index_of, is_symbol
from vigenere_es.services.analysis.cryptanalysis import (
    DEFAULT_MAX_KEY_LENGTH,
    IC_EPSILON,
    CrackResult,
    VigenereAnalyzer,
)
from vigenere_es.services.analysis.statistics import (
    StatisticalAnalyzer,
    frequencies,
    index_of_coincidence,
)
from vigenere_es.services.cipher import VigenereCipher
from vigenere_es.services.engines.base import CipherEngine, DecryptionResult
from vigenere_es.services.explanation.generator import ExplanationGenerator
from vigenere_es.services.preprocessing.normalizer import NormalizationMode, TextNormalizer

logger = logging.getLogger(__name__)


@dataclass
class AttackReport:
    """Everything a ciphertext-only attack produced."""

    statistics: StatisticsProfile
    ic_profile: list[PeriodScore]
    result: CrackResult
    confidence: float
    explanations: list[str]
    parameters: dict[str, Any]


class VigenereEngine(CipherEngine):
    """
    Vigenère cipher engine over the 27-letter Spanish alphabet.

    Input text is uppercased before use, so lowercase letters are
    enciphered rather than passed through. Breaking involves:
    1. Estimating the key length from the Index of Coincidence of columns
    2. Recovering each key letter by matching shifted column frequencies
       against Spanish letter frequencies
    """

    name = "Vigenère Cipher (Spanish)"
    description = (
        "A polyalphabetic cipher where each letter is shifted by a different amount "
        "based on a repeating keyword, over the alphabet A-N, Ñ, O-Z. Vulnerable to "
        "Index of Coincidence analysis and frequency analysis per key position."
    )

    MIN_RANDOM_KEY_LENGTH = 4
    MAX_RANDOM_KEY_LENGTH = 10

    def __init__(
        self,
        *,
        strategy: KeyLengthStrategy = KeyLengthStrategy.AVERAGED,
        max_key_length: int | None = DEFAULT_MAX_KEY_LENGTH,
        epsilon: float = IC_EPSILON,
        seed: int | None = None,
    ):
        self.strategy = KeyLengthStrategy(strategy)
        self.max_key_length = max_key_length
        self.epsilon = epsilon
        self.seed = seed
        self._normalizer = TextNormalizer()

    @classmethod
    def from_settings(cls, settings: Settings) -> "VigenereEngine":
        """Build an engine tuned by the application settings."""
        return cls(
            strategy=settings.key_length_strategy,
            max_key_length=settings.max_key_length,
            epsilon=settings.ic_epsilon,
            seed=settings.rng_seed,
        )

    def encrypt(self, plaintext: str, key: str) -> str:
        """Encrypt using the keyword."""
        cipher = VigenereCipher(self.parse_key(key))
        return cipher.encrypt(self._uppercase(plaintext))

    def decrypt_with_key(
        self,
        ciphertext: str,
        key: str,
    ) -> DecryptionResult:
        """Decrypt with a known keyword."""
        key_str = self.parse_key(key)
        plaintext = VigenereCipher(key_str).decrypt(self._uppercase(ciphertext))

        return DecryptionResult(
            plaintext=plaintext,
            key=key_str,
            confidence=1.0,
            explanation=self.explain(ciphertext, plaintext, key_str),
            key_length=len(key_str),
        )

    def find_key_and_decrypt(
        self,
        ciphertext: str,
        options: dict[str, Any],
    ) -> DecryptionResult:
        """Recover a key from the ciphertext alone and decrypt with it."""
        result = self._crack(self._uppercase(ciphertext), options)

        return DecryptionResult(
            plaintext=result.plaintext,
            key=result.key,
            confidence=self.confidence(result.plaintext),
            explanation=self.explain(ciphertext, result.plaintext, result.key),
            key_length=result.key_length,
        )

    def attack(self, ciphertext: str, options: dict[str, Any]) -> AttackReport:
        """
        Run a full ciphertext-only attack with statistics and explanations.

        Args:
            ciphertext: The ciphertext to break
            options: strategy, seed, max_key_length, epsilon or key_length

        Returns:
            AttackReport with the profile of every trial period
        """
        text = self._uppercase(ciphertext)
        parameters = self._resolve_options(options)

        statistics = StatisticalAnalyzer().analyze(text)
        removed_chars = self._normalizer.normalize_full(text).removed_chars
        result = self._crack(text, options)
        analyzer = VigenereAnalyzer(text)
        profile_length = parameters["max_key_length"] or DEFAULT_MAX_KEY_LENGTH
        ic_profile = [
            PeriodScore(period=period, index_of_coincidence=ic)
            for period, ic in analyzer.ic_profile(profile_length)
        ]

        confidence = self.confidence(result.plaintext)
        explanations = ExplanationGenerator().generate(
            statistics=statistics,
            ic_profile=ic_profile,
            result=result,
            confidence=confidence,
            removed_chars=removed_chars,
        )

        return AttackReport(
            statistics=statistics,
            ic_profile=ic_profile,
            result=result,
            confidence=confidence,
            explanations=explanations,
            parameters=parameters,
        )

    def generate_random_key(self) -> str:
        """Generate a random keyword."""
        length = random.randint(self.MIN_RANDOM_KEY_LENGTH, self.MAX_RANDOM_KEY_LENGTH)
        return "".join(random.choice(ALPHABET) for _ in range(length))

    def explain(
        self,
        ciphertext: str,
        plaintext: str,
        key: str,
    ) -> str:
        """Generate human-readable explanation."""
        key_str = self.parse_key(key)
        shift_desc = ", ".join(f"{c}={index_of(c)}" for c in key_str)

        return (
            f"Vigenère cipher with keyword '{key_str}' (length {len(key_str)}). "
            f"Letter shifts: {shift_desc}. "
            f"Each letter of the ciphertext is shifted back by the corresponding "
            f"key letter's position in the 27-letter alphabet."
        )

    def confidence(self, plaintext: str) -> float:
        """
        How Spanish-like the plaintext looks, from 0 (uniform) to 1.

        Based on where its IC falls between 1/27 and the Spanish IC.
        """
        letters = "".join(c for c in plaintext if is_symbol(c))
        if not letters:
            return 0.0

        ic = index_of_coincidence(frequencies(letters))
        return max(0.0, min(1.0, (ic - UNIFORM_IOC) / (SPANISH_IOC - UNIFORM_IOC)))

    def _crack(self, text: str, options: dict[str, Any]) -> CrackResult:
        """Estimate the key length unless given, then recover the key."""
        parameters = self._resolve_options(options)
        analyzer = VigenereAnalyzer(
            text,
            seed=parameters["seed"],
            epsilon=parameters["epsilon"],
            max_key_length=parameters["max_key_length"],
            strategy=parameters["strategy"],
        )

        if not len(analyzer):
            raise InvalidCiphertextError("Ciphertext contains no letters of the Spanish alphabet")

        key_length = parameters["key_length"] or analyzer.key_length()
        key = analyzer.generate_key(key_length)
        plaintext = VigenereCipher(key).decrypt(text)

        logger.info("Recovered key of length %d from %d letters", key_length, len(analyzer))
        return CrackResult(key_length=key_length, key=key, plaintext=plaintext)

    def _resolve_options(self, options: dict[str, Any]) -> dict[str, Any]:
        """Merge per-call options over the engine defaults."""
        strategy = options.get("strategy") or self.strategy
        max_key_length = options.get("max_key_length") or self.max_key_length
        seed = options.get("seed")

        return {
            "strategy": KeyLengthStrategy(strategy).value,
            "max_key_length": max_key_length,
            "epsilon": options.get("epsilon") or self.epsilon,
            "seed": self.seed if seed is None else seed,
            "key_length": options.get("key_length"),
        }

    def parse_key(self, key: str) -> str:
        """Uppercase `key` and check it only uses alphabet symbols."""
        key_str = self._uppercase(key)

        # Raises EmptyKeyError / InvalidKeyError
        VigenereCipher(key_str)
        return key_str

    def _uppercase(self, text: str) -> str:
        return self._normalizer.normalize(text, NormalizationMode.UPPERCASE)

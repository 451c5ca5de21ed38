from vigenere_es.models.schemas import PeriodScore, StatisticsProfile
from vigenere_es.services.alphabet import SPANISH_IOC, UNIFORM_IOC
from vigenere_es.services.analysis.cryptanalysis import AVERAGED_IC_THRESHOLD, CrackResult


class ExplanationGenerator:
    """
    Generates human-readable explanations for cryptanalysis results.

    Every claim references a computed statistic.
    """

    SPANISH_ENTROPY = 4.1
    PREVIEW_LENGTH = 100

    def generate(
        self,
        statistics: StatisticsProfile,
        ic_profile: list[PeriodScore],
        result: CrackResult,
        confidence: float,
        removed_chars: dict[str, int] | None = None,
    ) -> list[str]:
        """
        Generate explanations for an attack.

        Args:
            statistics: Statistical profile of the ciphertext
            ic_profile: Averaged IC per trial period
            result: Outcome of the attack
            confidence: Confidence in the recovered plaintext
            removed_chars: Characters ignored by the attack, with their counts

        Returns:
            List of explanation strings
        """
        explanations = []

        explanations.extend(self._explain_statistics(statistics))
        explanations.extend(self._explain_removed(removed_chars or {}))
        explanations.extend(self._explain_periods(ic_profile, result.key_length))
        explanations.extend(self._explain_result(result, confidence))

        return explanations

    def _explain_statistics(self, statistics: StatisticsProfile) -> list[str]:
        """Explain the statistical analysis results."""
        explanations = [
            f"The ciphertext contains {statistics.length} letters "
            f"using {statistics.unique_chars} of the 27 symbols."
        ]

        ioc = statistics.index_of_coincidence
        explanations.append(f"Index of Coincidence: {ioc:.4f}. {self._interpret_ioc(ioc)}")

        explanations.append(
            f"Entropy: {statistics.entropy:.2f} bits. "
            f"{self._interpret_entropy(statistics.entropy)}"
        )

        if statistics.character_frequencies:
            top_chars = statistics.character_frequencies[:5]
            freq_str = ", ".join(
                f"{f.character} ({f.frequency * 100:.1f}%)" for f in top_chars
            )
            explanations.append(f"Most frequent letters: {freq_str}.")

        return explanations

    def _explain_removed(self, removed_chars: dict[str, int]) -> list[str]:
        """Report what the attack skipped; skipped characters do not advance the key."""
        if not removed_chars:
            return []

        total = sum(removed_chars.values())
        top = sorted(removed_chars.items(), key=lambda item: item[1], reverse=True)[:5]
        listed = ", ".join(f"{char!r} ({count})" for char, count in top)

        return [
            f"{total} characters outside the alphabet were ignored and did not "
            f"advance the key, most often: {listed}."
        ]

    def _interpret_ioc(self, ioc: float) -> str:
        """Interpret the Index of Coincidence value."""
        if ioc >= 0.065:
            return (
                f"This is close to Spanish ({SPANISH_IOC:.4f}), "
                "suggesting a key of length 1 or unencrypted text."
            )
        elif ioc >= 0.050:
            return "This is between Spanish and random, suggesting a short key."
        elif ioc >= 0.040:
            return (
                f"This is closer to random ({UNIFORM_IOC:.4f}), "
                "suggesting a longer key."
            )
        else:
            return "This is near random, suggesting a very long key."

    def _interpret_entropy(self, entropy: float) -> str:
        """Interpret the entropy value."""
        if entropy < 3.5:
            return "Low entropy indicates highly structured text."
        elif entropy < self.SPANISH_ENTROPY + 0.1:
            return "Moderate entropy, consistent with natural language."
        elif entropy < 4.6:
            return "Higher entropy suggests polyalphabetic substitution."
        else:
            return "Near-maximum entropy (4.75 bits) suggests high randomness."

    def _explain_periods(self, ic_profile: list[PeriodScore], key_length: int) -> list[str]:
        """Explain how the key length was chosen."""
        if not ic_profile:
            return ["The ciphertext is too short to profile trial periods."]

        above = [s.period for s in ic_profile if s.index_of_coincidence >= AVERAGED_IC_THRESHOLD]
        explanations = [
            f"Estimated key length: {key_length}. Columns taken every {key_length} "
            "letters are Caesar shifts of Spanish when the period is right."
        ]
        if above:
            periods = ", ".join(str(p) for p in above[:5])
            explanations.append(
                f"Periods whose averaged IC reaches {AVERAGED_IC_THRESHOLD:.4f}: {periods}."
            )
        else:
            explanations.append(
                f"No profiled period reaches an averaged IC of {AVERAGED_IC_THRESHOLD:.4f}; "
                "the estimate is unreliable."
            )

        return explanations

    def _explain_result(self, result: CrackResult, confidence: float) -> list[str]:
        """Explain the recovered key and plaintext."""
        if not result.key:
            return ["No key could be recovered."]

        preview = result.plaintext[: self.PREVIEW_LENGTH]
        if len(result.plaintext) > self.PREVIEW_LENGTH:
            preview += "..."

        return [
            f"Recovered key '{result.key}' ({confidence * 100:.0f}% confidence). "
            "Each key letter is the shift whose rotated column frequencies best "
            "match Spanish letter frequencies.",
            f'Plaintext preview: "{preview}"',
        ]

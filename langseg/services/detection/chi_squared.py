"""
Chi-squared language classifier.

Scores a FrequencyData against the English and French reference profiles:
1. Monograph chi-squared over the 40 letter bins
2. Bigram chi-squared over each profile's 20 reference bigrams, weighted
3. The language with the lower combined score wins
"""

from typing import ClassVar

from scipy import stats

from langseg.core.exceptions import InsufficientDataError
from langseg.models.schemas import ChiSquaredScores, Verdict
from langseg.services.analysis.counting import BigramCountMap
from langseg.services.analysis.frequency import FrequencyData, FrequencyExtractor
from langseg.services.analysis.profiles import (
    ENGLISH_PROFILE,
    EPSILON,
    FRENCH_PROFILE,
    TOTAL_BINS,
    ReferenceProfile,
)


class ChiSquaredClassifier:
    """
    Decides between English and French for one analyzed span.

    The bigram test only looks at the reference bigrams of each profile,
    so it measures how well the span matches that language's most
    distinctive pairs rather than the full bigram distribution.
    """

    MIN_LETTERS: ClassVar[int] = FrequencyExtractor.MIN_LETTERS

    # Bigram evidence corroborates the monograph score
    BIGRAM_WEIGHT: ClassVar[float] = 0.20

    # Used instead of a bigram score when the span has no bigrams at all
    NO_BIGRAM_SCORE: ClassVar[float] = 99999.0

    DEGREES_OF_FREEDOM: ClassVar[int] = TOTAL_BINS - 1

    def __init__(
        self,
        english: ReferenceProfile = ENGLISH_PROFILE,
        french: ReferenceProfile = FRENCH_PROFILE,
    ):
        self.english = english
        self.french = french

    def classify(self, data: FrequencyData) -> Verdict:
        """
        Classify a span.

        Returns:
            Verdict.INSUFFICIENT_DATA for spans with fewer than MIN_LETTERS
            letters, otherwise the better fitting language
        """
        if data.total_letters < self.MIN_LETTERS:
            return Verdict.INSUFFICIENT_DATA
        return self.score(data).verdict

    def score(self, data: FrequencyData) -> ChiSquaredScores:
        """
        Compute all chi-squared components for a span.

        Raises:
            InsufficientDataError: If the span has fewer than MIN_LETTERS letters
        """
        if data.total_letters < self.MIN_LETTERS:
            raise InsufficientDataError(data.total_letters, self.MIN_LETTERS)

        english_mono = self.monograph_chi_squared(data, self.english)
        french_mono = self.monograph_chi_squared(data, self.french)

        return ChiSquaredScores(
            english_monograph=english_mono,
            french_monograph=french_mono,
            english_bigram=self.bigram_chi_squared(data.bigram_map, self.english),
            french_bigram=self.bigram_chi_squared(data.bigram_map, self.french),
            english_monograph_p_value=self._p_value(english_mono),
            french_monograph_p_value=self._p_value(french_mono),
        )

    def monograph_chi_squared(self, data: FrequencyData, profile: ReferenceProfile) -> float:
        """Chi-squared of the letter histogram against a profile."""
        scale = data.total_letters / 100.0
        chi_squared = 0.0

        for observed, percentage in zip(data.letter_histogram, profile.letter_frequencies):
            expected = percentage * scale
            diff = observed - expected
            chi_squared += (diff * diff) / (expected + EPSILON)

        return chi_squared

    def bigram_chi_squared(self, bigrams: BigramCountMap, profile: ReferenceProfile) -> float:
        """
        Weighted chi-squared of the profile's reference bigrams.

        Returns NO_BIGRAM_SCORE, unweighted, when no bigram was observed.
        """
        total = bigrams.total
        if total < EPSILON:
            return self.NO_BIGRAM_SCORE

        chi_squared = 0.0
        for key, percentage in profile.bigram_frequencies:
            observed = bigrams.get(key)
            expected = (percentage / 100.0) * total
            diff = observed - expected
            chi_squared += (diff * diff) / (expected + EPSILON)

        return chi_squared * self.BIGRAM_WEIGHT

    def _p_value(self, chi_squared: float) -> float:
        return float(stats.chi2.sf(chi_squared, self.DEGREES_OF_FREEDOM))

from dataclasses import dataclass, field
from typing import ClassVar

from langseg.services.analysis.counting import BigramCountMap, CharCountMap
from langseg.services.analysis.profiles import (
    ACCENTED_LETTERS,
    BASE_LETTERS,
    TOTAL_BINS,
)

ERROR_NONE = 0
ERROR_INSUFFICIENT_DATA = 1

WORD_PUNCTUATION = frozenset("'-")

_ACCENTED_INDEX = {letter: BASE_LETTERS + i for i, letter in enumerate(ACCENTED_LETTERS)}


def fold_case(char: str) -> str:
    """Lowercase a single code point, keeping it if lowering would expand it."""
    lower = char.lower()
    return lower if len(lower) == 1 else char


def letter_bin(char: str) -> int | None:
    """
    Map a letter to its histogram bin.

    Returns:
        0-25 for a-z, 26-39 for the tracked accented letters, None otherwise
    """
    lower = fold_case(char)
    if "a" <= lower <= "z":
        return ord(lower) - ord("a")
    return _ACCENTED_INDEX.get(lower)


@dataclass
class FrequencyData:
    """Counts gathered from a single analyzed span."""

    letter_histogram: list[int] = field(default_factory=lambda: [0] * TOTAL_BINS)
    total_letters: int = 0
    total_words: int = 0
    all_char_map: CharCountMap = field(default_factory=CharCountMap)
    bigram_map: BigramCountMap = field(default_factory=BigramCountMap)
    error_code: int = ERROR_NONE

    @property
    def total_bigrams(self) -> int:
        return self.bigram_map.total

    @property
    def dropped_observations(self) -> int:
        return self.all_char_map.dropped + self.bigram_map.dropped

    @property
    def is_usable(self) -> bool:
        return self.error_code == ERROR_NONE


class FrequencyExtractor:
    """
    Single-pass frequency extraction over a span of code points.

    For every code point the extractor updates:
    - the word counter (runs of letters, apostrophes and hyphens)
    - the 40-bin letter histogram
    - the bigram map (pairs of adjacent letters)
    - the all-character map (everything but whitespace)
    """

    MIN_LETTERS: ClassVar[int] = 5

    def extract(self, text: str, start: int = 0, stop: int | None = None) -> FrequencyData:
        """
        Extract frequencies from ``text[start:stop]``.

        Args:
            text: Decoded text
            start: First index of the span
            stop: End of the span (exclusive), defaults to the end of text

        Returns:
            FrequencyData for the span, with error_code set to 1 when the
            span holds fewer than MIN_LETTERS letters
        """
        if stop is None:
            stop = len(text)

        data = FrequencyData()
        histogram = data.letter_histogram
        in_word = False
        previous: str | None = None

        for index in range(start, stop):
            char = text[index]
            is_alpha = char.isalpha()

            if is_alpha or char in WORD_PUNCTUATION:
                if not in_word:
                    data.total_words += 1
                    in_word = True
            else:
                in_word = False

            if is_alpha:
                folded = fold_case(char)
                bin_index = letter_bin(folded)
                if bin_index is not None:
                    histogram[bin_index] += 1
                    data.total_letters += 1

                if previous is not None:
                    data.bigram_map.add(previous, folded)
                previous = folded
            else:
                previous = None

            if not char.isspace():
                data.all_char_map.add(fold_case(char) if is_alpha else char)

        if data.total_letters < self.MIN_LETTERS:
            data.error_code = ERROR_INSUFFICIENT_DATA

        return data

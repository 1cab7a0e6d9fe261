import math

from langseg.models.schemas import Histogram, HistogramEntry
from langseg.services.analysis.frequency import FrequencyData
from langseg.services.analysis.profiles import letter_for_bin


class HistogramBuilder:
    """
    Prepares histogram data from a FrequencyData.

    Entries are sorted by count, highest first, and carry a bar length
    scaled so the most frequent entry fills ``bar_length`` cells.
    """

    LETTER_TITLE = "Top Letter Frequencies (A-Z + 14 Accents)"
    CHARACTER_TITLE = "Full Character Frequencies (Letters, Punctuation, Symbols)"

    def __init__(self, bar_length: int = 50):
        self.bar_length = bar_length

    def letters(self, data: FrequencyData, top_n: int = 5) -> Histogram:
        """Top ``top_n`` bins of the 40-bin letter histogram."""
        counts = [
            (ord(letter_for_bin(index)), count)
            for index, count in enumerate(data.letter_histogram)
        ]
        counts.sort(key=lambda item: item[1], reverse=True)
        max_count = counts[0][1] if counts else 0

        if max_count == 0:
            return Histogram(title=self.LETTER_TITLE, entries=[], max_count=0)

        return Histogram(
            title=self.LETTER_TITLE,
            entries=[self._entry(cp, count, max_count) for cp, count in counts[:top_n]],
            max_count=max_count,
        )

    def characters(self, data: FrequencyData) -> Histogram:
        """Every entry of the all-character map."""
        counts = data.all_char_map.most_common()
        max_count = counts[0][1] if counts else 0

        return Histogram(
            title=self.CHARACTER_TITLE,
            entries=[self._entry(cp, count, max_count) for cp, count in counts],
            max_count=max_count,
        )

    def render(self, histogram: Histogram) -> list[str]:
        """Plain text lines, one bar per entry."""
        lines = [histogram.title]
        for entry in histogram.entries:
            lines.append(f"{entry.label:>6} | {entry.count:6d} | {'*' * entry.bar}")
        return lines

    def _entry(self, code_point: int, count: int, max_count: int) -> HistogramEntry:
        return HistogramEntry(
            code_point=code_point,
            label=self.label(code_point),
            count=count,
            bar=math.ceil(count * self.bar_length / max_count),
        )

    @staticmethod
    def label(code_point: int) -> str:
        char = chr(code_point)
        if char == " ":
            return "[SPC]"
        if not char.isprintable():
            return f"0x{code_point:04X}"
        return char

"""
Insert-or-increment counters used by the frequency extractor.

Both maps are keyed by integers: a code point for the character map, a
packed pair of code points for the bigram map. Entries are created on
first occurrence and only ever incremented afterwards.
"""

import logging
from collections.abc import Iterator

from langseg.services.analysis.profiles import pack_bigram

logger = logging.getLogger(__name__)


class CountingMap:
    """Integer-keyed occurrence counter with lookup-or-zero semantics."""

    kind = "character"

    def __init__(self) -> None:
        self._counts: dict[int, int] = {}
        self.dropped = 0

    def increment(self, key: int) -> bool:
        """
        Add one occurrence of ``key``.

        Creating a new entry can fail under memory pressure. In that case
        the observation is dropped and logged, and counting continues.

        Returns:
            True if the occurrence was recorded
        """
        if key in self._counts:
            self._counts[key] += 1
            return True

        try:
            self._counts[key] = 1
        except MemoryError:
            self.dropped += 1
            logger.warning("Failed to allocate %s map entry for key %#x", self.kind, key)
            return False
        return True

    def get(self, key: int) -> int:
        return self._counts.get(key, 0)

    def most_common(self, n: int | None = None) -> list[tuple[int, int]]:
        """Entries sorted by count descending, ties by key ascending."""
        entries = sorted(self._counts.items(), key=lambda item: (-item[1], item[0]))
        return entries if n is None else entries[:n]

    def max_count(self) -> int:
        return max(self._counts.values(), default=0)

    def clear(self) -> None:
        self._counts.clear()

    @property
    def unique(self) -> int:
        return len(self._counts)

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __iter__(self) -> Iterator[int]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def items(self):
        return self._counts.items()


class CharCountMap(CountingMap):
    """Counts every non-whitespace code point of a span."""

    def add(self, char: str) -> bool:
        return self.increment(ord(char))

    def count_of(self, char: str) -> int:
        return self.get(ord(char))


class BigramCountMap(CountingMap):
    """Counts ordered pairs of adjacent letters."""

    kind = "bigram"

    def __init__(self) -> None:
        super().__init__()
        self.total = 0

    def add(self, first: str, second: str) -> bool:
        recorded = self.increment(pack_bigram(first, second))
        if recorded:
            self.total += 1
        return recorded

    def count_of(self, bigram: str) -> int:
        return self.get(pack_bigram(bigram[0], bigram[1]))

    def clear(self) -> None:
        super().clear()
        self.total = 0

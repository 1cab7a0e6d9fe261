from dataclasses import dataclass

# 26 unaccented letters followed by the tracked accented letters
BASE_LETTERS = 26
ACCENTED_LETTERS: tuple[str, ...] = (
    "â", "à", "ç", "ê", "é", "è", "ë", "ï", "î", "ô", "œ", "ü", "û", "ù",
)
TOTAL_BINS = BASE_LETTERS + len(ACCENTED_LETTERS)

EPSILON = 1e-6

BIGRAM_SHIFT = 16


def pack_bigram(first: str, second: str) -> int:
    """Pack two code points into a single bigram key (first in the high bits)."""
    return (ord(first) << BIGRAM_SHIFT) | ord(second)


def unpack_bigram(key: int) -> str:
    """Inverse of pack_bigram for keys built from BMP code points."""
    return chr(key >> BIGRAM_SHIFT) + chr(key & 0xFFFF)


def letter_for_bin(index: int) -> str:
    """Return the lowercase letter tracked by a histogram bin."""
    if index < BASE_LETTERS:
        return chr(ord("a") + index)
    return ACCENTED_LETTERS[index - BASE_LETTERS]


@dataclass(frozen=True)
class ReferenceProfile:
    """Reference monograph and bigram frequencies for a language."""

    name: str
    code: str
    letter_frequencies: tuple[float, ...]
    bigram_frequencies: tuple[tuple[int, float], ...]

    def __post_init__(self) -> None:
        if len(self.letter_frequencies) != TOTAL_BINS:
            raise ValueError(
                f"{self.name} profile needs {TOTAL_BINS} letter frequencies, "
                f"got {len(self.letter_frequencies)}"
            )

    @property
    def bigrams(self) -> list[str]:
        return [unpack_bigram(key) for key, _ in self.bigram_frequencies]


def _bigrams(*pairs: tuple[str, float]) -> tuple[tuple[int, float], ...]:
    return tuple((pack_bigram(pair[0], pair[1]), pct) for pair, pct in pairs)


ENGLISH_PROFILE = ReferenceProfile(
    name="English",
    code="en",
    letter_frequencies=(
        # a-z
        8.167, 1.492, 2.782, 4.253, 12.702, 2.228, 2.015, 6.094, 6.966, 0.153,
        0.772, 4.025, 2.406, 6.749, 7.507, 1.929, 0.095, 5.987, 6.327, 9.056,
        2.758, 0.978, 2.360, 0.150, 1.974, 0.074,
        # accented letters do not occur in English: statistical floor
        *([EPSILON] * len(ACCENTED_LETTERS)),
    ),
    bigram_frequencies=_bigrams(
        ("th", 3.49), ("he", 3.09), ("in", 2.43), ("er", 2.10), ("an", 2.01),
        ("re", 1.85), ("on", 1.71), ("at", 1.49), ("nd", 1.34), ("ti", 1.25),
        ("es", 1.20), ("of", 1.18), ("en", 1.17), ("ed", 1.16), ("is", 1.13),
        ("to", 1.09), ("ou", 1.05), ("al", 1.04), ("ce", 1.03), ("st", 1.01),
    ),
)

FRENCH_PROFILE = ReferenceProfile(
    name="French",
    code="fr",
    letter_frequencies=(
        # a-z
        7.636, 0.901, 3.260, 3.669, 14.715, 1.066, 0.866, 0.737, 7.529, 0.545,
        0.049, 5.456, 2.804, 7.095, 5.378, 3.021, 1.362, 6.692, 8.140, 7.244,
        5.484, 1.087, 0.063, 0.417, 0.230, 0.121,
        # â à ç ê é è ë ï î ô œ ü û ù
        0.057, 0.536, 0.854, 0.165, 1.955, 0.271, 0.125, 0.203, 0.053, 0.051,
        0.007, 0.063, 0.080, 0.060,
    ),
    # "on" is listed twice in the reference table; both entries are scored.
    bigram_frequencies=_bigrams(
        ("es", 3.65), ("le", 2.62), ("de", 2.58), ("en", 2.37), ("la", 2.32),
        ("nt", 2.29), ("er", 2.13), ("on", 1.83), ("ai", 1.79), ("te", 1.77),
        ("qu", 1.73), ("as", 1.69), ("on", 1.57), ("el", 1.55), ("ns", 1.51),
        ("pa", 1.48), ("re", 1.47), ("io", 1.45), ("et", 1.44), ("vo", 1.41),
    ),
)

PROFILES: dict[str, ReferenceProfile] = {
    "english": ENGLISH_PROFILE,
    "french": FRENCH_PROFILE,
}

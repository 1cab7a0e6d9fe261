"""Frequency extraction: reference profiles, counting maps and the extractor."""

from langseg.services.analysis.counting import BigramCountMap, CharCountMap
from langseg.services.analysis.frequency import FrequencyData, FrequencyExtractor
from langseg.services.analysis.profiles import ENGLISH_PROFILE, FRENCH_PROFILE, ReferenceProfile

__all__ = [
    "BigramCountMap",
    "CharCountMap",
    "FrequencyData",
    "FrequencyExtractor",
    "ENGLISH_PROFILE",
    "FRENCH_PROFILE",
    "ReferenceProfile",
]

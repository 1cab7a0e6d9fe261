"""
Sliding-window language segmentation.

Windows of ``window_size`` characters advance by ``step = window - overlap``.
Each window is classified on its full length, but only the first ``step``
characters (the part not shared with the next window) are credited to the
winning language, so the tallies cover every character at most once.
"""

import logging
from dataclasses import dataclass, field
from typing import ClassVar

from langseg.core.config import get_settings
from langseg.core.exceptions import InputTooShortError, ValidationError
from langseg.models.schemas import (
    ChiSquaredScores,
    DocumentReport,
    Segment,
    Verdict,
    WindowParameters,
)
from langseg.services.analysis.frequency import FrequencyData, FrequencyExtractor
from langseg.services.detection.chi_squared import ChiSquaredClassifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Window:
    """Position of one window in the input."""

    start: int
    length: int
    attributed: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass
class SegmentationResult:
    """Outcome of a full segmentation run."""

    report: DocumentReport
    document: FrequencyData
    segments: list[Segment] = field(default_factory=list)

    @property
    def dominant_language(self) -> Verdict:
        return self.report.dominant_language


class WindowSegmenter:
    """
    Drives extraction and classification over overlapping windows.

    Per-window verdicts are turned into English/French character tallies;
    the whole document is then classified once more for the final verdict.
    """

    DEFAULT_WINDOW_SIZE: ClassVar[int] = 500
    DEFAULT_OVERLAP_SIZE: ClassVar[int] = 400
    DEFAULT_MIN_WINDOW_SIZE: ClassVar[int] = 100

    def __init__(
        self,
        window_size: int = DEFAULT_WINDOW_SIZE,
        overlap_size: int = DEFAULT_OVERLAP_SIZE,
        min_window_size: int = DEFAULT_MIN_WINDOW_SIZE,
        extractor: FrequencyExtractor | None = None,
        classifier: ChiSquaredClassifier | None = None,
    ):
        if overlap_size < 0:
            raise ValidationError(
                "Overlap size must not be negative",
                {"overlap_size": overlap_size},
            )
        if window_size - overlap_size < 1:
            raise ValidationError(
                "Overlap must be smaller than the window size",
                {"window_size": window_size, "overlap_size": overlap_size},
            )
        if min_window_size < 1:
            raise ValidationError(
                "Minimum window size must be positive",
                {"min_window_size": min_window_size},
            )

        self.window_size = window_size
        self.overlap_size = overlap_size
        self.step_size = window_size - overlap_size
        self.min_window_size = min_window_size
        self.extractor = extractor or FrequencyExtractor()
        self.classifier = classifier or ChiSquaredClassifier()

    @classmethod
    def from_settings(cls) -> "WindowSegmenter":
        settings = get_settings()
        return cls(
            window_size=settings.window_size,
            overlap_size=settings.overlap_size,
            min_window_size=settings.min_window_size,
        )

    @property
    def parameters(self) -> WindowParameters:
        return WindowParameters(
            window_size=self.window_size,
            overlap_size=self.overlap_size,
            step_size=self.step_size,
            min_window_size=self.min_window_size,
        )

    def plan(self, length: int) -> list[Window]:
        """
        Compute the windows a run over ``length`` characters would analyze.

        The tail is dropped once fewer than ``min_window_size`` characters
        remain.
        """
        windows = []
        i = 0

        while True:
            window_length = min(self.window_size, length - i)
            if window_length < self.min_window_size:
                break

            attributed = min(self.step_size, length - i)
            if attributed < 1:
                break

            windows.append(Window(start=i, length=window_length, attributed=attributed))
            i += self.step_size

        return windows

    def run(self, text: str) -> SegmentationResult:
        """
        Segment a decoded text and classify the whole document.

        Args:
            text: Decoded text to analyze

        Returns:
            SegmentationResult with the document report and window verdicts

        Raises:
            InputTooShortError: If text is shorter than min_window_size
        """
        length = len(text)
        if length < self.min_window_size:
            raise InputTooShortError(length, self.min_window_size)

        logger.info(
            "Analyzing %d characters (window=%d overlap=%d step=%d)",
            length,
            self.window_size,
            self.overlap_size,
            self.step_size,
        )

        segments = []
        english_chars = 0
        french_chars = 0

        for window in self.plan(length):
            data = self.extractor.extract(text, window.start, window.end)
            if data.is_usable:
                verdict = self.classifier.classify(data)
            else:
                verdict = Verdict.INSUFFICIENT_DATA

            if data.dropped_observations:
                logger.warning(
                    "Window %d-%d dropped %d observations",
                    window.start,
                    window.end - 1,
                    data.dropped_observations,
                )

            if verdict is Verdict.ENGLISH:
                english_chars += window.attributed
            elif verdict is Verdict.FRENCH:
                french_chars += window.attributed

            logger.debug(
                "Chars %05d-%05d: %s (%d chars attributed)",
                window.start,
                window.end - 1,
                verdict.value,
                window.attributed if verdict.is_language else 0,
            )
            segments.append(
                Segment(
                    start=window.start,
                    end=window.end,
                    window_length=window.length,
                    attributed=window.attributed,
                    verdict=verdict,
                )
            )

        document = self.extractor.extract(text)
        scores = self._score_document(document)
        dominant = scores.verdict if scores is not None else Verdict.INSUFFICIENT_DATA
        english_proportion, french_proportion = self.proportions(english_chars, french_chars)

        logger.info(
            "Segmentation complete: %d windows, english=%d french=%d, dominant=%s",
            len(segments),
            english_chars,
            french_chars,
            dominant.value,
        )

        report = DocumentReport(
            length=length,
            total_words=document.total_words,
            total_letters=document.total_letters,
            scores=scores,
            dominant_language=dominant,
            english_chars=english_chars,
            french_chars=french_chars,
            english_proportion=english_proportion,
            french_proportion=french_proportion,
            windows=self.parameters,
            segments=segments,
        )
        return SegmentationResult(report=report, document=document, segments=segments)

    @staticmethod
    def proportions(english_chars: int, french_chars: int) -> tuple[float, float]:
        """Percentages of the attributed characters per language."""
        total = english_chars + french_chars
        if total == 0:
            return 0.0, 0.0
        return english_chars / total * 100.0, french_chars / total * 100.0

    def _score_document(self, document: FrequencyData) -> ChiSquaredScores | None:
        if not document.is_usable:
            logger.info(
                "Document has %d letters, no document-level verdict",
                document.total_letters,
            )
            return None
        return self.classifier.score(document)

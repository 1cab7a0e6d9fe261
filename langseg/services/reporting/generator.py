from langseg.models.schemas import DocumentReport, Verdict


class ReportGenerator:
    """
    Generates human-readable explanations for a segmentation run.

    Every line is derived from the report values.
    """

    LANGUAGE_NAMES = {
        Verdict.ENGLISH: "ENGLISH",
        Verdict.FRENCH: "FRENCH",
    }

    def generate(self, report: DocumentReport) -> list[str]:
        """
        Generate explanations for a document report.

        Args:
            report: Result of a WindowSegmenter run

        Returns:
            List of explanation strings
        """
        explanations = [
            f"Total words counted: {report.total_words}",
            f"Total letters counted: {report.total_letters}",
        ]

        explanations.extend(self._explain_scores(report))
        explanations.extend(self._explain_proportions(report))

        if report.dominant_language.is_language:
            name = self.LANGUAGE_NAMES[report.dominant_language]
            explanations.append(
                f"Dominant language of text: {name} (best fit by combined score)"
            )
        else:
            explanations.append(
                "Dominant language of text: undetermined (too few letters to score)"
            )

        return explanations

    def _explain_scores(self, report: DocumentReport) -> list[str]:
        scores = report.scores
        if scores is None:
            return []

        return [
            f"English monograph score: {scores.english_monograph:.4f}",
            f"French monograph score: {scores.french_monograph:.4f}",
            f"English bigram score: {scores.english_bigram:.4f}",
            f"French bigram score: {scores.french_bigram:.4f}",
            f"English combined score: {scores.english_combined:.4f}",
            f"French combined score: {scores.french_combined:.4f}",
        ]

    def _explain_proportions(self, report: DocumentReport) -> list[str]:
        """Explain the segment-derived proportions."""
        return [
            f"Proportion of ENGLISH: {report.english_proportion:.2f}% "
            f"(total {report.english_chars} segment characters)",
            f"Proportion of FRENCH: {report.french_proportion:.2f}% "
            f"(total {report.french_chars} segment characters)",
        ]

    def summarize_segments(self, report: DocumentReport) -> list[str]:
        """One line per analyzed window."""
        lines = []
        for segment in report.segments:
            prefix = f"Chars {segment.start:05d}-{segment.end - 1:05d}: "
            if segment.verdict.is_language:
                name = self.LANGUAGE_NAMES[segment.verdict]
                lines.append(f"{prefix}=> {name} (adding {segment.attributed} chars)")
            else:
                lines.append(f"{prefix}=> SKIPPED (too few letters in segment)")
        return lines

from typing import Any


class LanguageAnalysisError(Exception):
    """Base exception for all language analysis errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(LanguageAnalysisError):
    """Raised when input validation fails."""

    pass


class InputTooShortError(ValidationError):
    """Raised when the input is shorter than the minimum window."""

    def __init__(self, length: int, minimum: int):
        super().__init__(
            f"Input length {length} is below the minimum window size {minimum}",
            {"length": length, "minimum": minimum},
        )


class TextTooLongError(ValidationError):
    """Raised when text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class InsufficientDataError(LanguageAnalysisError):
    """Raised when a span holds too few letters to be scored."""

    def __init__(self, total_letters: int, minimum: int):
        super().__init__(
            f"Span has {total_letters} letters, at least {minimum} are required",
            {"total_letters": total_letters, "minimum": minimum},
        )


class DecodingError(LanguageAnalysisError):
    """Raised when raw input cannot be turned into text."""

    pass

"""Error types raised by catalog infrastructure."""

from classical_quiz.core.errors import QuizError


class CatalogLoadError(QuizError):
    """Raised when the catalog asset cannot be found, read, or parsed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to load catalog: {reason}")

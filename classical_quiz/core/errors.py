"""Base exception class for all classical-quiz errors."""


class QuizError(Exception):
    """Base class for all classical-quiz errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)

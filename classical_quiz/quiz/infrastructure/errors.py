"""Error types raised by quiz infrastructure."""

from pathlib import Path

from classical_quiz.core.errors import QuizError


class ScoreStoreError(QuizError):
    """Raised when the persisted score file exists but cannot be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to access score store {path}: {reason}")

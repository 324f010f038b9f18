"""Error types raised by the catalog domain."""

from classical_quiz.core.errors import QuizError


class SampleNotFoundError(QuizError):
    """Raised when a sample id is not present in the catalog."""

    def __init__(self, sample_id: int) -> None:
        self.sample_id = sample_id
        super().__init__(f"Failed to find sample: unknown id {sample_id}")

"""Error and signal types raised by the quiz domain."""

from classical_quiz.core.errors import QuizError


class GameOver(Exception):
    """Signals that no further question can be asked in the current game.

    This is the normal end of a game, not a failure, so it sits outside the
    QuizError hierarchy.
    """

    def __init__(self, remaining: int) -> None:
        self.remaining = remaining
        super().__init__(f"Game over: {remaining} sample(s) remaining")


class InvalidQuestionError(QuizError):
    """Raised when answer checking receives a malformed question."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to check answer: {reason}")

"""Observer port for the quiz domain — defines events in domain language."""

from typing import Protocol


class QuizObserver(Protocol):
    """Observer port emitting structured events during a game.

    Implementations may log to structlog or record for tests.
    """

    def game_started(
        self, total_samples: int, remaining: int, high_score: int, resumed: bool
    ) -> None: ...

    def question_generated(
        self, answer_id: int, option_ids: list[int], remaining: int
    ) -> None: ...

    def round_answered(
        self,
        answer_id: int,
        chosen_id: int,
        correct: bool,
        current_score: int,
        remaining: int,
    ) -> None: ...

    def high_score_beaten(self, high_score: int) -> None: ...

    def round_skipped(self, reason: str) -> None: ...

    def game_finished(
        self, final_score: int, high_score: int, max_score: int, rounds_played: int
    ) -> None: ...

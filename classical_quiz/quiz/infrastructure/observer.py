"""StructlogQuizObserver — production observer that delegates to structlog."""

import structlog


class StructlogQuizObserver:
    """Logs quiz domain events to structlog.

    Does NOT inherit from QuizObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def game_started(
        self, total_samples: int, remaining: int, high_score: int, resumed: bool
    ) -> None:
        self._log.info(
            "quiz.game_started",
            total_samples=total_samples,
            remaining=remaining,
            high_score=high_score,
            resumed=resumed,
        )

    def question_generated(
        self, answer_id: int, option_ids: list[int], remaining: int
    ) -> None:
        self._log.debug(
            "quiz.question_generated",
            answer_id=answer_id,
            option_ids=option_ids,
            remaining=remaining,
        )

    def round_answered(
        self,
        answer_id: int,
        chosen_id: int,
        correct: bool,
        current_score: int,
        remaining: int,
    ) -> None:
        self._log.info(
            "quiz.round_answered",
            answer_id=answer_id,
            chosen_id=chosen_id,
            correct=correct,
            current_score=current_score,
            remaining=remaining,
        )

    def high_score_beaten(self, high_score: int) -> None:
        self._log.info("quiz.high_score_beaten", high_score=high_score)

    def round_skipped(self, reason: str) -> None:
        self._log.error("quiz.round_skipped", reason=reason)

    def game_finished(
        self, final_score: int, high_score: int, max_score: int, rounds_played: int
    ) -> None:
        self._log.info(
            "quiz.game_finished",
            final_score=final_score,
            high_score=high_score,
            max_score=max_score,
            rounds_played=rounds_played,
        )

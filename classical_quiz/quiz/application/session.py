"""QuizSession — drives one game over a loaded catalog, round by round."""

import random
from collections.abc import Iterable

from classical_quiz.catalog.domain.catalog import Catalog
from classical_quiz.config.domain.rules import RulesConfig
from classical_quiz.quiz.domain import rules
from classical_quiz.quiz.domain.errors import GameOver, InvalidQuestionError
from classical_quiz.quiz.domain.observer import QuizObserver
from classical_quiz.quiz.domain.question import GameSummary, Question, RoundResult
from classical_quiz.quiz.domain.score_store import ScoreStore
from classical_quiz.quiz.domain.state import GamePhase, GameState


class QuizSession:
    """Runs a game: hands out questions, checks answers, keeps the score.

    The session holds no game state of its own. Every call takes the current
    GameState and returns the next one, so a front end can keep, persist, or
    discard states as it likes. Score persistence goes through the injected
    ScoreStore.
    """

    def __init__(
        self,
        catalog: Catalog,
        score_store: ScoreStore,
        rules_config: RulesConfig,
        observer: QuizObserver,
        rng: random.Random | None = None,
    ) -> None:
        self._catalog = catalog
        self._score_store = score_store
        self._rules = rules_config
        self._observer = observer
        self._rng = rng or random.Random()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def start(self) -> GameState:
        """Begin a new game with every catalog sample in the remaining pool."""
        self._score_store.set_current_score(0)
        remaining = self._catalog.sample_ids
        state = GameState(
            phase=_phase_for(remaining),
            remaining_ids=remaining,
            current_score=0,
            high_score=self._score_store.get_high_score(),
        )
        self._observer.game_started(
            total_samples=len(self._catalog),
            remaining=len(remaining),
            high_score=state.high_score,
            resumed=False,
        )
        return state

    def resume(self, remaining_ids: Iterable[int]) -> GameState:
        """Continue a game from a saved remaining pool; unknown ids are dropped."""
        remaining = frozenset(remaining_ids) & self._catalog.sample_ids
        current_score = self._score_store.get_current_score()
        state = GameState(
            phase=_phase_for(remaining),
            remaining_ids=remaining,
            current_score=current_score,
            high_score=rules.update_high_score(
                current_score, self._score_store.get_high_score()
            ),
            rounds_played=len(self._catalog) - len(remaining),
        )
        self._observer.game_started(
            total_samples=len(self._catalog),
            remaining=len(remaining),
            high_score=state.high_score,
            resumed=True,
        )
        return state

    def next_question(self, state: GameState) -> Question:
        """
        Draw the next question for state.

        Raises:
            GameOver: if the game is not in progress or too few samples remain.
            SampleNotFoundError: if a drawn id is missing from the catalog.
        """
        if state.phase is not GamePhase.IN_PROGRESS:
            raise GameOver(remaining=len(state.remaining_ids))

        catalog_ids = (
            self._catalog.sample_ids
            if self._rules.distractor_source == "catalog"
            else None
        )
        sample_ids = rules.generate_question(
            remaining_ids=state.remaining_ids,
            catalog_ids=catalog_ids,
            pool_size=self._rules.pool_size,
            rng=self._rng,
        )
        question = Question(
            sample_ids=tuple(sample_ids),
            options=tuple(self._catalog.lookup(i) for i in sample_ids),
        )
        self._observer.question_generated(
            answer_id=sample_ids[0],
            option_ids=sample_ids,
            remaining=len(state.remaining_ids),
        )
        return question

    def answer(self, state: GameState, question: Question, chosen_id: int) -> RoundResult:
        """
        Score the player's choice and advance to the next round.

        The answer id leaves the remaining pool whether or not the choice was
        right. A malformed question is raised when strict_questions is set and
        otherwise reported and skipped with the state unchanged.

        Raises:
            GameOver: if the game is already finished.
            InvalidQuestionError: in strict mode, for an empty question, a question
                whose answer already left the pool, or a chosen id that is not
                one of its options.
        """
        if state.phase is not GamePhase.IN_PROGRESS:
            raise GameOver(remaining=len(state.remaining_ids))

        try:
            answer_id = _checked_answer_id(
                state=state, question=question, chosen_id=chosen_id
            )
        except InvalidQuestionError as exc:
            if self._rules.strict_questions:
                raise
            self._observer.round_skipped(reason=exc.reason)
            return RoundResult(
                question=question,
                chosen_id=chosen_id,
                correct=False,
                state=state,
                skipped=True,
            )

        correct = rules.is_correct(answer_id, chosen_id)
        current_score = rules.record_score(state.current_score, correct)
        high_score = rules.update_high_score(current_score, state.high_score)
        remaining = rules.advance_round(state.remaining_ids, answer_id)

        if correct:
            self._score_store.set_current_score(current_score)
        new_high_score = high_score > state.high_score
        if new_high_score:
            self._score_store.set_high_score(high_score)
            self._observer.high_score_beaten(high_score=high_score)

        new_state = GameState(
            phase=_phase_for(remaining),
            remaining_ids=remaining,
            current_score=current_score,
            high_score=high_score,
            rounds_played=state.rounds_played + 1,
        )
        self._observer.round_answered(
            answer_id=answer_id,
            chosen_id=chosen_id,
            correct=correct,
            current_score=current_score,
            remaining=len(remaining),
        )
        return RoundResult(
            question=question,
            chosen_id=chosen_id,
            correct=correct,
            state=new_state,
            new_high_score=new_high_score,
        )

    def finish(self, state: GameState) -> GameSummary:
        summary = GameSummary(
            final_score=state.current_score,
            high_score=state.high_score,
            max_score=self._catalog.max_score,
            rounds_played=state.rounds_played,
        )
        self._observer.game_finished(
            final_score=summary.final_score,
            high_score=summary.high_score,
            max_score=summary.max_score,
            rounds_played=summary.rounds_played,
        )
        return summary


def _phase_for(remaining: frozenset[int]) -> GamePhase:
    return GamePhase.FINISHED if rules.is_finished(remaining) else GamePhase.IN_PROGRESS


def _checked_answer_id(state: GameState, question: Question, chosen_id: int) -> int:
    answer_id = rules.correct_answer_id(question.sample_ids)
    if answer_id not in state.remaining_ids:
        raise InvalidQuestionError(
            reason=f"answer id {answer_id} is not in the remaining pool"
        )
    if chosen_id not in question.sample_ids:
        raise InvalidQuestionError(
            reason=f"chosen id {chosen_id} is not one of the options {list(question.sample_ids)}"
        )
    return answer_id

"""Question and round value objects produced by a quiz session."""

from pydantic import BaseModel, Field

from classical_quiz.catalog.domain.sample import Sample
from classical_quiz.quiz.domain.state import GameState


class Question(BaseModel, frozen=True):
    """One question: the correct sample first, then the distractors.

    ``options`` holds the resolved samples in the same order as ``sample_ids``.
    """

    sample_ids: tuple[int, ...]
    options: tuple[Sample, ...] = Field(default_factory=tuple)

    @property
    def answer(self) -> Sample:
        return self.options[0]


class RoundResult(BaseModel, frozen=True):
    """Outcome of answering one question.

    A skipped round (malformed question in lenient mode) leaves ``state``
    unchanged and ``correct`` False.
    """

    question: Question
    chosen_id: int
    correct: bool
    state: GameState
    new_high_score: bool = False
    skipped: bool = False


class GameSummary(BaseModel, frozen=True):
    final_score: int = Field(ge=0)
    high_score: int = Field(ge=0)
    max_score: int = Field(ge=0)
    rounds_played: int = Field(ge=0)

"""GameState — the explicit value object threaded between quiz rounds."""

from enum import StrEnum

from pydantic import BaseModel, Field


class GamePhase(StrEnum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class GameState(BaseModel, frozen=True):
    """Immutable snapshot of one game between rounds.

    ``remaining_ids`` only ever shrinks: each round removes the id of the sample
    that was asked, whether or not the player got it right.
    """

    phase: GamePhase = GamePhase.NOT_STARTED
    remaining_ids: frozenset[int] = Field(default_factory=frozenset)
    current_score: int = Field(default=0, ge=0)
    high_score: int = Field(default=0, ge=0)
    rounds_played: int = Field(default=0, ge=0)

    @property
    def is_finished(self) -> bool:
        return self.phase is GamePhase.FINISHED

"""Quiz rule configuration model."""

from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_POOL_SIZE = 4
DEFAULT_ANSWER_REVEAL_DELAY_MS = 1000

DistractorSource: TypeAlias = Literal["catalog", "remaining"]


class RulesConfig(BaseModel, frozen=True):
    model_config = ConfigDict(extra="forbid")

    pool_size: int = Field(default=DEFAULT_POOL_SIZE, ge=2)
    distractor_source: DistractorSource = "catalog"
    answer_reveal_delay_ms: int = Field(default=DEFAULT_ANSWER_REVEAL_DELAY_MS, ge=0)
    # Debug behaviour: raise on malformed questions instead of skipping the round.
    strict_questions: bool = False

"""Top-level QuizConfig aggregate — the root configuration object."""

from pydantic import BaseModel, ConfigDict, Field

from classical_quiz.config.domain.catalog import CatalogConfig
from classical_quiz.config.domain.rules import RulesConfig
from classical_quiz.config.domain.scores import ScoresConfig


class QuizConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a classical-quiz installation."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    catalog: CatalogConfig
    rules: RulesConfig = Field(default_factory=RulesConfig)
    scores: ScoresConfig

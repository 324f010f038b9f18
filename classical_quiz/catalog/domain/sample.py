"""Sample domain value object — one trivia entry from the catalog."""

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field

SampleId: TypeAlias = int


class Sample(BaseModel, frozen=True):
    """Immutable value object representing a single audio clip and its composer."""

    model_config = ConfigDict(frozen=True)

    id: SampleId
    composer: str = Field(min_length=1)
    title: str
    audio_reference: str = Field(min_length=1)
    art_reference: str

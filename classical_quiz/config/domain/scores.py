"""Score persistence configuration model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ScoresConfig(BaseModel, frozen=True):
    model_config = ConfigDict(extra="forbid")

    path: Path

"""ScoreStore Protocol — externally owned key-value persistence for scores."""

from typing import Protocol


class ScoreStore(Protocol):
    """Persists the current and high score across process restarts."""

    def get_current_score(self) -> int: ...

    def set_current_score(self, score: int) -> None: ...

    def get_high_score(self) -> int: ...

    def set_high_score(self, score: int) -> None: ...

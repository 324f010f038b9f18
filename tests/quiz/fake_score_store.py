"""FakeScoreStore — in-memory ScoreStore implementation for use in tests."""


class FakeScoreStore:
    """Satisfies the ScoreStore protocol. Records every write for assertions."""

    def __init__(self, current_score: int = 0, high_score: int = 0) -> None:
        self.current_score = current_score
        self.high_score = high_score
        self.current_score_writes: list[int] = []
        self.high_score_writes: list[int] = []

    def get_current_score(self) -> int:
        return self.current_score

    def set_current_score(self, score: int) -> None:
        self.current_score = score
        self.current_score_writes.append(score)

    def get_high_score(self) -> int:
        return self.high_score

    def set_high_score(self, score: int) -> None:
        self.high_score = score
        self.high_score_writes.append(score)

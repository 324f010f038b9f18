"""JSON file implementation of the ScoreStore port."""

import json
import os
import tempfile
from pathlib import Path

from classical_quiz.quiz.infrastructure.errors import ScoreStoreError

CURRENT_SCORE_KEY = "current_score"
HIGH_SCORE_KEY = "high_score"


class JsonScoreStore:
    """Stores scores as a small JSON object on disk.

    A missing file reads as zero scores. Every write rewrites the whole file
    through a temporary file and an atomic replace.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def get_current_score(self) -> int:
        return self._read().get(CURRENT_SCORE_KEY, 0)

    def set_current_score(self, score: int) -> None:
        self._write(key=CURRENT_SCORE_KEY, value=score)

    def get_high_score(self) -> int:
        return self._read().get(HIGH_SCORE_KEY, 0)

    def set_high_score(self, score: int) -> None:
        self._write(key=HIGH_SCORE_KEY, value=score)

    def _read(self) -> dict[str, int]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise ScoreStoreError(path=self._path, reason=str(exc)) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ScoreStoreError(path=self._path, reason=f"invalid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise ScoreStoreError(path=self._path, reason="expected a JSON object")

        scores: dict[str, int] = {}
        for key in (CURRENT_SCORE_KEY, HIGH_SCORE_KEY):
            value = data.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ScoreStoreError(
                    path=self._path, reason=f"'{key}' must be a non-negative integer"
                )
            scores[key] = value
        return scores

    def _write(self, key: str, value: int) -> None:
        data = self._read()
        data[key] = value
        tmp_path: Path | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
                encoding="utf-8",
            ) as tmp:
                tmp_path = Path(tmp.name)
                json.dump(data, tmp, indent=2, sort_keys=True)
            os.replace(tmp_path, self._path)
        except OSError as exc:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise ScoreStoreError(path=self._path, reason=str(exc)) from exc

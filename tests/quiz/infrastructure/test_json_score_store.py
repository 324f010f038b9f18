"""Tests for the JSON file score store."""

import json
from pathlib import Path

import pytest

from classical_quiz.quiz.infrastructure.errors import ScoreStoreError
from classical_quiz.quiz.infrastructure.json_score_store import JsonScoreStore


class TestMissingFile:
    def test_missing_file_reads_as_zero(self, tmp_path: Path) -> None:
        store = JsonScoreStore(path=tmp_path / "scores.json")

        assert store.get_current_score() == 0
        assert store.get_high_score() == 0

    def test_write_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "scores.json"
        JsonScoreStore(path=path).set_high_score(4)

        assert json.loads(path.read_text(encoding="utf-8")) == {"high_score": 4}


class TestReadWrite:
    def test_scores_persist_across_instances(self, tmp_path: Path) -> None:
        path = tmp_path / "scores.json"
        JsonScoreStore(path=path).set_current_score(3)
        JsonScoreStore(path=path).set_high_score(8)

        reopened = JsonScoreStore(path=path)
        assert reopened.get_current_score() == 3
        assert reopened.get_high_score() == 8

    def test_writing_one_key_keeps_the_other(self, tmp_path: Path) -> None:
        store = JsonScoreStore(path=tmp_path / "scores.json")
        store.set_high_score(9)
        store.set_current_score(0)

        assert store.get_high_score() == 9

    def test_no_temp_files_left_behind(self, tmp_path: Path) -> None:
        store = JsonScoreStore(path=tmp_path / "scores.json")
        store.set_current_score(1)
        store.set_current_score(2)

        assert [p.name for p in tmp_path.iterdir()] == ["scores.json"]

    def test_failed_replace_removes_temp_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "scores.json"
        store = JsonScoreStore(path=path)
        store.set_high_score(4)

        def _fail_replace(src: object, dst: object) -> None:
            raise OSError("disk full")

        monkeypatch.setattr(
            "classical_quiz.quiz.infrastructure.json_score_store.os.replace",
            _fail_replace,
        )

        with pytest.raises(ScoreStoreError) as exc_info:
            store.set_high_score(7)

        assert "disk full" in str(exc_info.value)
        assert [p.name for p in tmp_path.iterdir()] == ["scores.json"]
        assert json.loads(path.read_text(encoding="utf-8")) == {"high_score": 4}


class TestCorruptFile:
    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            "[1, 2]",
            '{"high_score": "ten"}',
            '{"current_score": -1}',
            '{"high_score": true}',
        ],
    )
    def test_unreadable_contents_raise_score_store_error(
        self, tmp_path: Path, content: str
    ) -> None:
        path = tmp_path / "scores.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ScoreStoreError) as exc_info:
            JsonScoreStore(path=path).get_high_score()

        assert str(exc_info.value).startswith("Failed to ")

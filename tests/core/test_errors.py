"""Tests verifying the QuizError type hierarchy."""

from pathlib import Path

from classical_quiz.catalog.domain.errors import SampleNotFoundError
from classical_quiz.catalog.infrastructure.errors import CatalogLoadError
from classical_quiz.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from classical_quiz.core.errors import QuizError
from classical_quiz.quiz.domain.errors import GameOver, InvalidQuestionError
from classical_quiz.quiz.infrastructure.errors import ScoreStoreError


class TestQuizErrorHierarchy:
    def test_catalog_load_error_is_quiz_error(self) -> None:
        assert isinstance(CatalogLoadError(reason="file not found"), QuizError)

    def test_sample_not_found_error_is_quiz_error(self) -> None:
        assert isinstance(SampleNotFoundError(sample_id=3), QuizError)

    def test_invalid_question_error_is_quiz_error(self) -> None:
        assert isinstance(InvalidQuestionError(reason="empty"), QuizError)

    def test_score_store_error_is_quiz_error(self) -> None:
        error = ScoreStoreError(path=Path("/tmp/scores.json"), reason="bad")
        assert isinstance(error, QuizError)

    def test_config_errors_are_quiz_errors(self) -> None:
        assert isinstance(MissingEnvVarsError(missing_vars=["A"]), QuizError)
        assert isinstance(ConfigValidationError(reason="bad value"), QuizError)
        assert isinstance(ConfigLoadError(path=Path("/some/config.yaml")), QuizError)

    def test_game_over_is_not_a_quiz_error(self) -> None:
        """Running out of samples ends the game normally; it is not a failure."""
        assert not isinstance(GameOver(remaining=1), QuizError)


class TestErrorMessages:
    def test_project_error_messages_start_with_failed(self) -> None:
        errors: list[QuizError] = [
            CatalogLoadError(reason="file not found"),
            SampleNotFoundError(sample_id=3),
            InvalidQuestionError(reason="empty"),
            ScoreStoreError(path=Path("/tmp/scores.json"), reason="bad"),
            MissingEnvVarsError(missing_vars=["A"]),
            ConfigValidationError(reason="bad value"),
            ConfigLoadError(path=Path("/some/config.yaml")),
        ]
        for error in errors:
            assert str(error).startswith("Failed to ")

    def test_sample_not_found_carries_id(self) -> None:
        error = SampleNotFoundError(sample_id=42)
        assert error.sample_id == 42
        assert "42" in str(error)

    def test_missing_env_vars_are_listed_sorted(self) -> None:
        error = MissingEnvVarsError(missing_vars=["ZETA", "ALPHA"])
        assert "ALPHA, ZETA" in str(error)

    def test_game_over_carries_remaining_count(self) -> None:
        assert GameOver(remaining=1).remaining == 1

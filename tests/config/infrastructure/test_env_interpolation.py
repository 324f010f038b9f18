"""Tests for ${ENV_VAR} interpolation of raw config data."""

import pytest

from classical_quiz.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)


class TestCollectMissingVars:
    def test_walks_nested_lists_and_dicts(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("A_VAR", raising=False)
        monkeypatch.delenv("B_VAR", raising=False)
        data = {"x": ["${A_VAR}", {"y": "prefix-${B_VAR}"}], "n": 3}

        assert collect_missing_vars(data) == ["A_VAR", "B_VAR"]

    def test_each_var_reported_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("A_VAR", raising=False)

        assert collect_missing_vars(["${A_VAR}", "${A_VAR}/x"]) == ["A_VAR"]

    def test_vars_with_defaults_are_never_missing(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("A_VAR", raising=False)

        assert collect_missing_vars("${A_VAR:-fallback}") == []


class TestInterpolate:
    def test_substitutes_set_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("A_VAR", "value")

        assert interpolate({"k": ["${A_VAR}/x"]}) == {"k": ["value/x"]}

    def test_uses_default_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("A_VAR", raising=False)

        assert interpolate("${A_VAR:-/tmp}/scores.json") == "/tmp/scores.json"

    def test_empty_default_is_allowed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("A_VAR", raising=False)

        assert interpolate("a${A_VAR:-}b") == "ab"

    def test_non_string_scalars_pass_through(self) -> None:
        assert interpolate({"n": 4, "b": True, "z": None}) == {
            "n": 4,
            "b": True,
            "z": None,
        }

"""Tests for ${ENV_VAR} interpolation helpers."""

import pytest

from estate_watch.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)


class TestCollectMissingVars:
    def test_nested_references_collected_once(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("MISSING_ONE", raising=False)
        monkeypatch.setenv("PRESENT", "x")
        data = {
            "a": "${MISSING_ONE}",
            "b": ["${PRESENT}", {"c": "${MISSING_ONE}-again"}],
            "d": 3,
        }

        assert collect_missing_vars(data) == ["MISSING_ONE"]

    def test_no_references(self) -> None:
        assert collect_missing_vars({"a": [1, True, None]}) == []


class TestInterpolate:
    def test_substitutes_inside_strings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOUSE", "villa")
        data = {"name": "the-${HOUSE}", "writes": [True], "n": 2}

        assert interpolate(data) == {"name": "the-villa", "writes": [True], "n": 2}

    def test_plain_dollar_left_alone(self) -> None:
        assert interpolate("$HOUSE costs $5") == "$HOUSE costs $5"

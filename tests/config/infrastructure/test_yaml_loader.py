"""Tests for YAML scenario config loading."""

from pathlib import Path

import pytest

from estate_watch.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from estate_watch.config.infrastructure.yaml_loader import YamlConfigLoader
from tests.config.fake_reporter import ConfigLoadedEvent, FakeConfigReporter

# __file__ is tests/config/infrastructure/test_yaml_loader.py
FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


def _fixture(name: str) -> Path:
    return FIXTURES / name


def _make_loader() -> tuple[YamlConfigLoader, FakeConfigReporter]:
    reporter = FakeConfigReporter()
    return YamlConfigLoader(reporter=reporter), reporter


class TestValidConfigLoading:
    def test_loads_all_fields(self) -> None:
        loader, _ = _make_loader()
        cfg = loader.load(path=_fixture("valid_scenario.yaml"))

        assert cfg.name == "repeated-announcement"
        assert cfg.customer.withdrawal_amount == 500_000
        assert cfg.customer.purchase_threshold == 1_500_000
        assert cfg.customer.max_attempts == 5
        assert cfg.observers == ["intermediary", "customer"]
        assert cfg.finished_writes == [False, True, True]

    def test_reports_config_loaded(self) -> None:
        loader, reporter = _make_loader()
        loader.load(path=_fixture("valid_scenario.yaml"))

        assert reporter.loaded == [
            ConfigLoadedEvent(name="repeated-announcement", observer_count=2)
        ]

    def test_empty_file_yields_demo_defaults(self) -> None:
        loader, _ = _make_loader()
        cfg = loader.load(path=_fixture("empty_scenario.yaml"))

        assert cfg.name == "demo"
        assert cfg.observers == ["intermediary", "customer"]


class TestEnvInterpolation:
    def test_substitutes_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCENARIO_NAME", "from-env")
        monkeypatch.setenv("WITHDRAWAL_AMOUNT", "750000")
        loader, _ = _make_loader()

        cfg = loader.load(path=_fixture("env_scenario.yaml"))

        assert cfg.name == "from-env"
        assert cfg.customer.withdrawal_amount == 750_000

    def test_all_missing_vars_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SCENARIO_NAME", raising=False)
        monkeypatch.delenv("WITHDRAWAL_AMOUNT", raising=False)
        loader, reporter = _make_loader()

        with pytest.raises(MissingEnvVarsError) as exc_info:
            loader.load(path=_fixture("env_scenario.yaml"))

        assert sorted(exc_info.value.missing_vars) == [
            "SCENARIO_NAME",
            "WITHDRAWAL_AMOUNT",
        ]
        assert reporter.loaded == []


class TestInvalidConfig:
    def test_missing_file_raises_load_error(self, tmp_path: Path) -> None:
        loader, _ = _make_loader()
        with pytest.raises(ConfigLoadError):
            loader.load(path=tmp_path / "absent.yaml")

    def test_schema_violation_raises_validation_error(self) -> None:
        loader, _ = _make_loader()
        with pytest.raises(ConfigValidationError) as exc_info:
            loader.load(path=_fixture("invalid_scenario.yaml"))
        assert "withdrawal_amount" in str(exc_info.value)

    def test_malformed_yaml_raises_validation_error(self) -> None:
        loader, _ = _make_loader()
        with pytest.raises(ConfigValidationError):
            loader.load(path=_fixture("malformed_scenario.yaml"))

    def test_non_mapping_top_level_rejected(self) -> None:
        loader, _ = _make_loader()
        with pytest.raises(ConfigValidationError, match="mapping"):
            loader.load(path=_fixture("list_scenario.yaml"))

    def test_non_utf8_file_raises_load_error(self) -> None:
        loader, reporter = _make_loader()
        with pytest.raises(ConfigLoadError) as exc_info:
            loader.load(path=_fixture("non_utf8_scenario.yaml"))
        assert "not valid UTF-8" in str(exc_info.value)
        assert reporter.loaded == []

    def test_directory_path_raises_load_error(self, tmp_path: Path) -> None:
        loader, _ = _make_loader()
        with pytest.raises(ConfigLoadError, match="file not found"):
            loader.load(path=tmp_path)

    def test_unreadable_file_raises_load_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_path = tmp_path / "locked.yaml"
        config_path.write_text("name: locked\n", encoding="utf-8")

        def _deny(*args: object, **kwargs: object) -> None:
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "open", _deny)
        loader, _ = _make_loader()

        with pytest.raises(ConfigLoadError, match="cannot read file"):
            loader.load(path=config_path)

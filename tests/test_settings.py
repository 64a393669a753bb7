"""Tests for environment-driven settings and logging setup."""

import pytest
import structlog
from pydantic import ValidationError

from fabric_readiness_assessment.observability import (
    configure_logging,
    get_logger,
    setup_logging,
)
from fabric_readiness_assessment.settings import Settings


class TestSettings:
    """Verify Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Stock defaults match the value calculator's starting sliders."""
        for name in (
            "FABRIC_ASSESSMENT_DEFAULT_ORGANIZATION_SIZE",
            "FABRIC_ASSESSMENT_DEFAULT_COMPETITOR",
            "FABRIC_ASSESSMENT_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.service_name == "fabric-readiness-assessment"
        assert settings.default_organization_size == 500
        assert settings.default_current_annual_costs == 500_000.0
        assert settings.default_average_hourly_rate == 75.0
        assert settings.default_competitor == "aws"
        assert settings.log_level == "INFO"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """FABRIC_ASSESSMENT_ variables override defaults."""
        monkeypatch.setenv("FABRIC_ASSESSMENT_DEFAULT_ORGANIZATION_SIZE", "1200")
        monkeypatch.setenv("FABRIC_ASSESSMENT_DEFAULT_COMPETITOR", "databricks")
        monkeypatch.setenv("FABRIC_ASSESSMENT_LOG_JSON", "true")
        settings = Settings()
        assert settings.default_organization_size == 1200
        assert settings.default_competitor == "databricks"
        assert settings.log_json is True

    def test_non_positive_default_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Business parameter defaults must be positive."""
        monkeypatch.setenv("FABRIC_ASSESSMENT_DEFAULT_AVERAGE_HOURLY_RATE", "0")
        with pytest.raises(ValidationError):
            Settings()


class TestLogging:
    """Verify structlog configuration."""

    @pytest.fixture(autouse=True)
    def _reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_json_logs(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON mode renders one JSON object per event with level and timestamp."""
        configure_logging(level="INFO", json_logs=True)
        get_logger("test").info("Assessment scored", overall_score=79.0)
        line = capsys.readouterr().out.strip().splitlines()[-1]
        assert '"event": "Assessment scored"' in line
        assert '"level": "info"' in line
        assert '"timestamp"' in line

    def test_level_filtering(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Events below the configured level are dropped."""
        configure_logging(level="WARNING", json_logs=True)
        get_logger("test").info("Hidden event")
        assert "Hidden event" not in capsys.readouterr().out

    def test_unknown_level_defaults_to_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Unrecognised level names fall back to INFO."""
        configure_logging(level="CHATTY", json_logs=True)
        get_logger("test").debug("Debug event")
        get_logger("test").info("Info event")
        out = capsys.readouterr().out
        assert "Debug event" not in out
        assert "Info event" in out

    def test_setup_logging_reads_environment(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """FABRIC_ASSESSMENT_LOG_* and SERVICE_NAME shape the configured output."""
        monkeypatch.setenv("FABRIC_ASSESSMENT_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("FABRIC_ASSESSMENT_LOG_JSON", "true")
        monkeypatch.setenv("FABRIC_ASSESSMENT_SERVICE_NAME", "fabric-readiness-test")
        settings = setup_logging()
        assert settings.log_level == "WARNING"
        get_logger("test").info("Hidden event")
        get_logger("test").warning("Shown event")
        out = capsys.readouterr().out
        assert "Hidden event" not in out
        line = out.strip().splitlines()[-1]
        assert '"event": "Shown event"' in line
        assert '"service": "fabric-readiness-test"' in line

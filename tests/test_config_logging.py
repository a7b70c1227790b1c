"""Tests for config and logging."""

import json
import logging
import sys
from pathlib import Path

import pytest

from estate_matcher.config import (
    EstateMatcherConfig,
    FinancingDefaults,
    LendingPolicy,
    OutgoingRates,
    OutputConfig,
    StorageConfig,
)
from estate_matcher.exceptions import ConfigurationError
from estate_matcher.logging import JsonFormatter, get_logger, setup_logging
from estate_matcher.models import AnalysisAssumptions

ENV_VARS = [
    "LOAN_RATE",
    "LOAN_PERIOD_YEARS",
    "APPRECIATION_RATE",
    "LOAN_TO_VALUE_RATIO",
    "INTEREST_ONLY",
    "REPORTS_DIR",
    "PRETTY_JSON",
    "STORAGE_PATH",
    "SEED",
    "LOG_LEVEL",
    "GOAL_APPRECIATION",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Environment without any estate-matcher variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestFinancingDefaults:
    """Tests for FinancingDefaults."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        defaults = FinancingDefaults()

        assert defaults.loan_rate == 0.07
        assert defaults.loan_period_years == 30
        assert defaults.appreciation_rate == 0.04
        assert defaults.loan_to_value_ratio == 0.8
        assert defaults.tax_refund == 0.0
        assert defaults.interest_only is False

    def test_to_assumptions(self) -> None:
        """Test defaults convert to analyzer assumptions."""
        assert FinancingDefaults().to_assumptions() == AnalysisAssumptions()

    def test_to_assumptions_overrides(self) -> None:
        """Test overrides replace individual fields."""
        assumptions = FinancingDefaults(loan_rate=0.065).to_assumptions(loan_period_years=25)

        assert assumptions.loan_rate == 0.065
        assert assumptions.loan_period_years == 25
        assert assumptions.loan_to_value_ratio == 0.8


class TestPolicies:
    """Tests for OutgoingRates and LendingPolicy."""

    def test_outgoing_rates(self) -> None:
        """Test percentage-of-price defaults."""
        rates = OutgoingRates()

        assert rates.council_rates == 0.004
        assert rates.body_corp == 0.008
        assert rates.insurance == 0.005

    def test_lending_policy(self) -> None:
        """Test lending policy defaults."""
        policy = LendingPolicy()

        assert policy.max_lvr == 0.95
        assert policy.min_loan_period == 25
        assert policy.max_loan_period == 30
        assert policy.goal_appreciation["Capital Appreciation"] == 0.05

    def test_output_and_storage(self) -> None:
        """Test output and storage defaults."""
        assert OutputConfig().reports_dir == Path("reports")
        assert OutputConfig().pretty_json is False
        assert StorageConfig().path is None


class TestEstateMatcherConfig:
    """Tests for EstateMatcherConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = EstateMatcherConfig()

        assert isinstance(config.financing, FinancingDefaults)
        assert isinstance(config.outgoings, OutgoingRates)
        assert isinstance(config.lending, LendingPolicy)
        assert config.seed is None
        assert config.log_level == "INFO"

    def test_from_env_default(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test creating config from an empty environment."""
        config = EstateMatcherConfig.from_env()

        assert config.financing == FinancingDefaults()
        assert config.output.reports_dir == Path("reports")
        assert config.storage.path is None
        assert config.seed is None
        assert config.log_level == "INFO"

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test creating config from custom environment variables."""
        clean_env.setenv("LOAN_RATE", "0.055")
        clean_env.setenv("LOAN_PERIOD_YEARS", "25")
        clean_env.setenv("APPRECIATION_RATE", "0.03")
        clean_env.setenv("LOAN_TO_VALUE_RATIO", "0.9")
        clean_env.setenv("INTEREST_ONLY", "true")
        clean_env.setenv("REPORTS_DIR", "/data/reports")
        clean_env.setenv("PRETTY_JSON", "true")
        clean_env.setenv("STORAGE_PATH", "/data/crm.json")
        clean_env.setenv("SEED", "7")
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("GOAL_APPRECIATION", json.dumps({"Rental Yield": 0.03}))

        config = EstateMatcherConfig.from_env()

        assert config.financing.loan_rate == 0.055
        assert config.financing.loan_period_years == 25
        assert config.financing.appreciation_rate == 0.03
        assert config.financing.loan_to_value_ratio == 0.9
        assert config.financing.interest_only is True
        assert config.output.reports_dir == Path("/data/reports")
        assert config.output.pretty_json is True
        assert config.storage.path == Path("/data/crm.json")
        assert config.seed == 7
        assert config.log_level == "DEBUG"
        assert config.lending.goal_appreciation == {"Rental Yield": 0.03}

    def test_from_env_bad_number(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test malformed numbers raise ConfigurationError."""
        clean_env.setenv("LOAN_RATE", "seven percent")

        with pytest.raises(ConfigurationError, match="LOAN_RATE"):
            EstateMatcherConfig.from_env()

    def test_from_env_bad_goal_table(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test malformed goal table raises ConfigurationError."""
        clean_env.setenv("GOAL_APPRECIATION", "not json")

        with pytest.raises(ConfigurationError, match="GOAL_APPRECIATION"):
            EstateMatcherConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        """Test default logging setup."""
        setup_logging()

        logger = logging.getLogger("estate_matcher")
        assert logger.level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        """Test debug level logging setup."""
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        """Test JSON format logging."""
        setup_logging(format_type="json")

        logger = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        """Test that setup_logging replaces existing handlers."""
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_faker_logger_quieted(self) -> None:
        """Test that Faker's logger stays at WARNING."""
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs: object) -> logging.LogRecord:
        defaults = {
            "name": "test.logger",
            "level": logging.INFO,
            "pathname": "/path/to/file.py",
            "lineno": 42,
            "msg": "Test message",
            "args": (),
            "exc_info": None,
        }
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        """Test basic log formatting."""
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        """Test formatting with exception info."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert "exception" in data
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        """Test extra fields are merged into the payload."""
        record = self._record()
        record.extra = {"client_id": "client-001"}

        data = json.loads(JsonFormatter().format(record))

        assert data["client_id"] == "client-001"


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        """Test getting a named logger."""
        logger = get_logger("estate_matcher.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "estate_matcher.test"

"""Configuration management for estate-matcher."""

from dataclasses import dataclass, field
from pathlib import Path

from estate_matcher.exceptions import ConfigurationError
from estate_matcher.models.analysis import AnalysisAssumptions


@dataclass
class FinancingDefaults:
    """Financing assumptions used when a caller supplies none."""

    loan_rate: float = 0.07
    loan_period_years: int = 30
    appreciation_rate: float = 0.04
    loan_to_value_ratio: float = 0.8
    tax_refund: float = 0.0
    interest_only: bool = False

    def to_assumptions(self, **overrides: object) -> AnalysisAssumptions:
        """Build analysis assumptions from these defaults.

        Parameters
        ----------
        **overrides
            Field values replacing the defaults (e.g. ``loan_rate=0.06``).

        Returns
        -------
        AnalysisAssumptions
            Frozen assumptions for the analyzer.
        """
        values = {
            "loan_rate": self.loan_rate,
            "loan_period_years": self.loan_period_years,
            "appreciation_rate": self.appreciation_rate,
            "loan_to_value_ratio": self.loan_to_value_ratio,
            "tax_refund": self.tax_refund,
            "interest_only": self.interest_only,
        }
        values.update(overrides)
        return AnalysisAssumptions(**values)


@dataclass(frozen=True)
class OutgoingRates:
    """Percentage-of-price estimates for annual outgoings."""

    council_rates: float = 0.004
    body_corp: float = 0.008
    insurance: float = 0.005


@dataclass
class LendingPolicy:
    """Rules for deriving financing assumptions from a client profile."""

    max_lvr: float = 0.95
    # (max price-to-salary ratio, LVR), checked in order
    income_lvr_tiers: tuple[tuple[float, float], ...] = (
        (4.0, 0.95),
        (6.0, 0.90),
        (8.0, 0.80),
    )
    fallback_lvr: float = 0.70
    min_loan_period: int = 25
    max_loan_period: int = 30
    goal_appreciation: dict[str, float] = field(
        default_factory=lambda: {
            "Capital Appreciation": 0.05,
            "Rental Yield": 0.035,
        }
    )
    default_appreciation: float = 0.04


@dataclass
class OutputConfig:
    """Report output configuration."""

    reports_dir: Path = field(default_factory=lambda: Path("reports"))
    pretty_json: bool = False


@dataclass
class StorageConfig:
    """Client storage configuration."""

    path: Path | None = None  # None keeps everything in memory


@dataclass
class EstateMatcherConfig:
    """Main configuration for estate-matcher."""

    financing: FinancingDefaults = field(default_factory=FinancingDefaults)
    outgoings: OutgoingRates = field(default_factory=OutgoingRates)
    lending: LendingPolicy = field(default_factory=LendingPolicy)
    output: OutputConfig = field(default_factory=OutputConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "EstateMatcherConfig":
        """Create config from environment variables."""
        import json
        import os

        financing = FinancingDefaults(
            loan_rate=_env_number("LOAN_RATE", "0.07", float),
            loan_period_years=_env_number("LOAN_PERIOD_YEARS", "30", int),
            appreciation_rate=_env_number("APPRECIATION_RATE", "0.04", float),
            loan_to_value_ratio=_env_number("LOAN_TO_VALUE_RATIO", "0.8", float),
            interest_only=os.getenv("INTEREST_ONLY", "false").lower() == "true",
        )

        lending = LendingPolicy()
        goal_appreciation_str = os.getenv("GOAL_APPRECIATION")
        if goal_appreciation_str:
            try:
                lending.goal_appreciation = {
                    str(k): float(v) for k, v in json.loads(goal_appreciation_str).items()
                }
            except (ValueError, AttributeError) as exc:
                raise ConfigurationError(
                    f"GOAL_APPRECIATION must be a JSON object of rates: {exc}"
                ) from exc

        output = OutputConfig(
            reports_dir=Path(os.getenv("REPORTS_DIR", "reports")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        storage_path = os.getenv("STORAGE_PATH")
        storage = StorageConfig(path=Path(storage_path) if storage_path else None)

        return cls(
            financing=financing,
            lending=lending,
            output=output,
            storage=storage,
            seed=_env_number("SEED", None, int),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def _env_number(name: str, default: str | None, cast: type) -> object:
    """Read a numeric environment variable, raising ConfigurationError if malformed."""
    import os

    raw = os.getenv(name, default)
    if raw is None or raw == "":
        return None
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc

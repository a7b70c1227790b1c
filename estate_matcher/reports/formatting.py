"""Display formatting and rating labels for analysis figures."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rating:
    """Human-readable label plus a display tone for dashboards."""

    label: str
    tone: str  # success, info, warning or danger


# (minimum score, rating), checked in order
INVESTMENT_RATINGS = (
    (80, Rating("Excellent", "success")),
    (65, Rating("Very Good", "success")),
    (50, Rating("Good", "info")),
    (35, Rating("Fair", "warning")),
)
POOR = Rating("Poor", "danger")

YIELD_RATINGS = (
    (6.0, "Excellent"),
    (5.0, "Very Good"),
    (4.0, "Good"),
    (3.0, "Fair"),
)


def format_currency(value: float) -> str:
    """Whole-dollar AUD amount, e.g. ``$1,234`` or ``-$1,234``."""
    rounded = round(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.0f}"


def format_percent(value: float, decimals: int = 2) -> str:
    """Percent value with a fixed number of decimals, e.g. ``4.33%``."""
    return f"{value:.{decimals}f}%"


def investment_rating(score: float) -> Rating:
    """Rating band for a 0-100 investment score."""
    for minimum, rating in INVESTMENT_RATINGS:
        if score >= minimum:
            return rating
    return POOR


def yield_rating(gross_yield: float) -> str:
    """Rating band for a gross yield in percent."""
    for minimum, label in YIELD_RATINGS:
        if gross_yield >= minimum:
            return label
    return "Below Average"

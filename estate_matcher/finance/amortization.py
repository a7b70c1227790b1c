"""Fixed-rate, level-payment loan amortization."""

from __future__ import annotations

import math
from typing import Iterator

from estate_matcher.exceptions import InvalidInputError
from estate_matcher.models.analysis import AmortizationRow


def monthly_payment(principal: float, monthly_rate: float, total_payments: int) -> float:
    """Level payment that amortizes ``principal`` over ``total_payments`` periods.

    Parameters
    ----------
    principal : float
        Amount borrowed.
    monthly_rate : float
        Periodic interest rate (annual rate / 12). Zero gives straight-line
        repayment.
    total_payments : int
        Number of monthly payments.

    Returns
    -------
    float
        Payment per period.
    """
    _validate(principal, monthly_rate, total_payments)

    growth = _growth(monthly_rate, total_payments)
    if growth == 1.0:
        return principal / total_payments
    return principal * (monthly_rate * growth) / (growth - 1)


def remaining_balance(
    principal: float,
    monthly_rate: float,
    total_payments: int,
    payments_made: int,
) -> float:
    """Loan balance still owed after ``payments_made`` level payments.

    Uses the present value of the remaining payments. A zero rate falls
    back to straight-line amortization.

    Parameters
    ----------
    principal : float
        Amount borrowed.
    monthly_rate : float
        Periodic interest rate (annual rate / 12).
    total_payments : int
        Number of monthly payments over the full term.
    payments_made : int
        Payments already made, ``0 <= payments_made <= total_payments``.

    Returns
    -------
    float
        Remaining balance, never negative.

    Raises
    ------
    InvalidInputError
        If any argument is out of range.
    """
    _validate(principal, monthly_rate, total_payments)
    if not 0 <= payments_made <= total_payments:
        raise InvalidInputError(
            f"payments_made must be between 0 and {total_payments}, got {payments_made}"
        )

    if _growth(monthly_rate, total_payments) == 1.0:
        return max(0.0, principal * (1 - payments_made / total_payments))

    payment = monthly_payment(principal, monthly_rate, total_payments)
    remaining_payments = total_payments - payments_made
    growth = _growth(monthly_rate, remaining_payments)
    balance = payment * (growth - 1) / (monthly_rate * growth)
    return max(0.0, balance)


def amortization_schedule(
    principal: float,
    monthly_rate: float,
    total_payments: int,
) -> Iterator[AmortizationRow]:
    """Yield every payment of the loan with its principal/interest split.

    Parameters
    ----------
    principal : float
        Amount borrowed.
    monthly_rate : float
        Periodic interest rate (annual rate / 12).
    total_payments : int
        Number of monthly payments.

    Yields
    ------
    AmortizationRow
        One row per month, in order.
    """
    pmt = monthly_payment(principal, monthly_rate, total_payments)

    balance = principal
    for period in range(1, total_payments + 1):
        interest = balance * monthly_rate
        principal_payment = pmt - interest
        balance -= principal_payment
        if period == total_payments:
            # Last payment clears float residue
            balance = 0.0

        yield AmortizationRow(
            period=period,
            payment=pmt,
            principal=principal_payment,
            interest=interest,
            balance=max(0.0, balance),
        )


def _validate(principal: float, monthly_rate: float, total_payments: int) -> None:
    """Reject inputs the amortization formulas cannot handle."""
    if not math.isfinite(principal) or principal < 0:
        raise InvalidInputError(f"principal must be a finite non-negative amount, got {principal}")
    if not math.isfinite(monthly_rate) or monthly_rate < 0:
        raise InvalidInputError(f"monthly_rate must be finite and >= 0, got {monthly_rate}")
    if total_payments <= 0:
        raise InvalidInputError(f"total_payments must be > 0, got {total_payments}")


def _growth(monthly_rate: float, periods: int) -> float:
    """Compound factor ``(1 + r) ** n``; exactly 1.0 when the rate is negligible."""
    try:
        growth = (1 + monthly_rate) ** periods
    except OverflowError:
        growth = math.inf
    if not math.isfinite(growth):
        raise InvalidInputError(f"monthly_rate {monthly_rate} overflows over {periods} payments")
    return growth

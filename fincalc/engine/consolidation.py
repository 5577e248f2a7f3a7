"""Debt consolidation: compare existing debts against a single consolidation loan.

Real APR folds the origination fee into the rate using scipy's Brent solver.

Pure functions. No I/O.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_CEILING, ROUND_HALF_UP

from scipy.optimize import brentq

from fincalc.engine.amortization import MAX_TERM_YEARS, payment_for_months
from fincalc.models.debt import ConsolidationLoan, ExistingDebt

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")
NEVER_PAID_OFF_MONTHS = 999
MAX_REAL_APR = 50.0  # Search ceiling, percent


@dataclass(frozen=True)
class ExistingDebtSummary:
    total_balance: Decimal
    total_monthly_payment: Decimal
    weighted_average_rate: Decimal
    total_interest: Decimal
    payoff_months: int  # Longest individual payoff


@dataclass(frozen=True)
class ConsolidationSummary:
    monthly_payment: Decimal
    total_interest: Decimal
    payoff_months: int
    total_cost: Decimal  # Interest + fee
    real_apr: Decimal
    loan_fee: Decimal


@dataclass(frozen=True)
class ConsolidationSavings:
    monthly_payment: Decimal
    total_interest: Decimal
    total_cost: Decimal
    time_months: int


@dataclass(frozen=True)
class ConsolidationResults:
    existing_debts: ExistingDebtSummary
    consolidated_loan: ConsolidationSummary
    savings: ConsolidationSavings
    is_worthwhile: bool
    recommendation: str


def total_interest(principal: Decimal, payment: Decimal, months: int) -> Decimal:
    return payment * months - principal


def payoff_months(balance: Decimal, payment: Decimal, annual_rate: Decimal) -> int:
    """Months to retire a balance at a fixed payment.

    n = -ln(1 - B*r/P) / ln(1 + r). Returns NEVER_PAID_OFF_MONTHS when the
    payment does not cover the interest.
    """
    if payment <= 0:
        return NEVER_PAID_OFF_MONTHS
    if annual_rate == 0:
        return int((balance / payment).to_integral_value(rounding=ROUND_CEILING))

    r = annual_rate / 100 / 12
    if payment <= balance * r:
        return NEVER_PAID_OFF_MONTHS

    months = -(1 - balance * r / payment).ln() / (1 + r).ln()
    return int(months.to_integral_value(rounding=ROUND_CEILING))


def weighted_average_rate(debts: list[ExistingDebt]) -> Decimal:
    total_balance = sum((d.balance for d in debts), Decimal("0"))
    if total_balance == 0:
        return Decimal("0")
    weighted = sum((d.balance * d.interest_rate for d in debts), Decimal("0"))
    return weighted / total_balance


def existing_debts_summary(debts: list[ExistingDebt]) -> ExistingDebtSummary:
    longest = 0
    interest = Decimal("0")
    for debt in debts:
        months = payoff_months(debt.balance, debt.monthly_payment, debt.interest_rate)
        longest = max(longest, months)
        interest += total_interest(debt.balance, debt.monthly_payment, months)

    return ExistingDebtSummary(
        total_balance=sum((d.balance for d in debts), Decimal("0")),
        total_monthly_payment=sum((d.monthly_payment for d in debts), Decimal("0")),
        weighted_average_rate=weighted_average_rate(debts),
        total_interest=interest,
        payoff_months=longest,
    )


def real_apr(
    loan_amount: Decimal,
    annual_rate: Decimal,
    months: int,
    loan_fee: Decimal,
) -> Decimal:
    """APR that discounts the payment stream back to the amount actually received.

    Uses Brent's method on PV(apr) - (loan - fee), searching 0% to 50%.
    """
    payment = float(payment_for_months(loan_amount, annual_rate, months))
    net_amount = float(loan_amount - loan_fee)

    def pv_gap(apr: float) -> float:
        r = apr / 100 / 12
        if r == 0:
            return payment * months - net_amount
        return payment * (1 - (1 + r) ** -months) / r - net_amount

    try:
        apr = brentq(pv_gap, 0.0, MAX_REAL_APR, xtol=1e-10, maxiter=1000)
        return Decimal(str(apr)).quantize(FOUR_PLACES, ROUND_HALF_UP)
    except ValueError:
        # No root in range (e.g. fee larger than the rate can explain)
        logger.warning(
            "Real APR not bracketed in 0-%.0f%% for rate %s, fee %s; using nominal rate",
            MAX_REAL_APR, annual_rate, loan_fee,
        )
        return annual_rate


def consolidation_summary(loan: ConsolidationLoan) -> ConsolidationSummary:
    months = loan.total_months
    fee = (loan.loan_amount * loan.loan_fee_pct / 100).quantize(TWO_PLACES, ROUND_HALF_UP)
    payment = payment_for_months(loan.loan_amount, loan.interest_rate, months)
    interest = total_interest(loan.loan_amount, payment, months)

    return ConsolidationSummary(
        monthly_payment=payment,
        total_interest=interest,
        payoff_months=months,
        total_cost=interest + fee,
        real_apr=real_apr(loan.loan_amount, loan.interest_rate, months, fee),
        loan_fee=fee,
    )


def calculate_debt_consolidation(
    debts: list[ExistingDebt],
    loan: ConsolidationLoan,
) -> ConsolidationResults:
    existing = existing_debts_summary(debts)
    consolidated = consolidation_summary(loan)

    cost_savings = existing.total_interest - consolidated.total_cost
    savings = ConsolidationSavings(
        monthly_payment=existing.total_monthly_payment - consolidated.monthly_payment,
        total_interest=cost_savings,
        total_cost=cost_savings,
        time_months=existing.payoff_months - consolidated.payoff_months,
    )

    is_worthwhile = (
        consolidated.real_apr < existing.weighted_average_rate and savings.total_cost > 0
    )

    if is_worthwhile:
        recommendation = (
            "Debt consolidation appears beneficial. You will save money on interest "
            "and potentially reduce your monthly payment."
        )
    elif consolidated.real_apr >= existing.weighted_average_rate:
        recommendation = (
            "Warning: The consolidation loan has a higher real APR than your current "
            "debts. This may not be a good financial decision."
        )
    else:
        recommendation = (
            "Debt consolidation may not save you money overall. Consider other debt "
            "repayment strategies."
        )

    return ConsolidationResults(
        existing_debts=existing,
        consolidated_loan=consolidated,
        savings=savings,
        is_worthwhile=is_worthwhile,
        recommendation=recommendation,
    )


def validate_consolidation_inputs(
    debts: list[ExistingDebt],
    loan: ConsolidationLoan,
) -> list[str]:
    errors: list[str] = []

    if not debts:
        errors.append("At least one existing debt is required")

    for i, debt in enumerate(debts, start=1):
        if not debt.name.strip():
            errors.append(f"Debt {i}: Name is required")
        if debt.balance <= 0:
            errors.append(f"Debt {i}: Balance must be greater than 0")
        if debt.monthly_payment <= 0:
            errors.append(f"Debt {i}: Monthly payment must be greater than 0")
        if debt.interest_rate < 0 or debt.interest_rate > 100:
            errors.append(f"Debt {i}: Interest rate must be between 0 and 100")

    if loan.loan_amount <= 0:
        errors.append("Consolidation loan amount must be greater than 0")
    if loan.interest_rate < 0 or loan.interest_rate > 100:
        errors.append("Consolidation loan interest rate must be between 0 and 100")
    if loan.total_months <= 0:
        errors.append("Loan term must be greater than 0")
    elif loan.total_months > MAX_TERM_YEARS * 12:
        errors.append(f"Loan term cannot exceed {MAX_TERM_YEARS} years")
    if loan.loan_fee_pct < 0:
        errors.append("Loan fee cannot be negative")

    return errors

"""Debt payoff simulation: avalanche and snowball.

Each month every open debt accrues interest and receives its minimum payment.
The extra budget, grown by the minimums of debts already paid off, goes to a
single target debt chosen by strategy. Ties keep the input order.

Pure functions: dataclasses in, dataclasses out. No I/O.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP

from fincalc.models.debt import Debt, PayoffStrategy

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
MAX_MONTHS = 600  # 50 years
PAID_OFF_THRESHOLD = Decimal("0.01")


@dataclass
class MonthlyPayoffEntry:
    month: int
    monthly_payment: Decimal = Decimal("0")
    payments: dict[str, Decimal] = field(default_factory=dict)
    remaining_balances: dict[str, Decimal] = field(default_factory=dict)
    interest_paid: dict[str, Decimal] = field(default_factory=dict)
    principal_paid: dict[str, Decimal] = field(default_factory=dict)
    debts_paid_off: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class PayoffSavings:
    months_saved: int
    interest_saved: Decimal
    total_saved: Decimal


@dataclass(frozen=True)
class SimulationResult:
    total_months: int
    total_amount_paid: Decimal
    total_interest_paid: Decimal
    monthly_payment: Decimal
    payment_schedule: list[MonthlyPayoffEntry]
    debt_payoff_order: list[str]
    hit_month_cap: bool


@dataclass(frozen=True)
class DebtPayoffResults:
    total_months: int
    total_amount_paid: Decimal
    total_interest_paid: Decimal
    monthly_payment: Decimal
    payment_schedule: list[MonthlyPayoffEntry]
    debt_payoff_order: list[str]
    savings_vs_minimum: PayoffSavings
    hit_month_cap: bool = False


@dataclass
class _OpenDebt:
    debt: Debt
    balance: Decimal
    is_paid_off: bool = False


def _target_order(debts: list[_OpenDebt], strategy: PayoffStrategy) -> list[_OpenDebt]:
    """Debts still carrying a balance, in the order extra money should go.

    ``sorted`` is stable, so equal APRs or balances stay in input order.
    """
    open_debts = [d for d in debts if not d.is_paid_off and d.balance >= PAID_OFF_THRESHOLD]
    if strategy is PayoffStrategy.AVALANCHE:
        return sorted(open_debts, key=lambda d: d.debt.apr, reverse=True)
    return sorted(open_debts, key=lambda d: d.balance)


def simulate_payoff(
    debts: list[Debt],
    extra_payment: Decimal,
    strategy: PayoffStrategy,
    roll_over_minimums: bool = True,
) -> SimulationResult:
    """Month-by-month paydown, capped at MAX_MONTHS."""
    working = [_OpenDebt(debt=d, balance=d.balance) for d in debts]
    rolling_extra = extra_payment

    total_months = 0
    total_interest = Decimal("0")
    total_paid = Decimal("0")
    schedule: list[MonthlyPayoffEntry] = []
    payoff_order: list[str] = []

    while total_months < MAX_MONTHS and any(not d.is_paid_off for d in working):
        total_months += 1
        entry = MonthlyPayoffEntry(month=total_months)

        for d in working:
            name = d.debt.name
            if d.is_paid_off:
                entry.interest_paid[name] = Decimal("0")
                entry.payments[name] = Decimal("0")
                entry.principal_paid[name] = Decimal("0")
                continue

            rate = d.debt.apr / 100 / 12
            interest = (d.balance * rate).quantize(TWO_PLACES, ROUND_HALF_UP)
            payment = min(d.debt.minimum_payment, d.balance + interest)
            principal = payment - interest

            d.balance -= principal
            total_interest += interest
            total_paid += payment

            entry.interest_paid[name] = interest
            entry.payments[name] = payment
            entry.principal_paid[name] = principal
            entry.monthly_payment += payment

        targets = _target_order(working, strategy)
        if targets and rolling_extra > 0:
            target = targets[0]
            extra = min(rolling_extra, target.balance)
            name = target.debt.name

            target.balance -= extra
            total_paid += extra
            entry.payments[name] += extra
            entry.principal_paid[name] += extra
            entry.monthly_payment += extra

        for d in working:
            if not d.is_paid_off and d.balance < PAID_OFF_THRESHOLD:
                d.balance = Decimal("0")
                d.is_paid_off = True
                entry.debts_paid_off.append(d.debt.name)
                payoff_order.append(d.debt.name)
                if roll_over_minimums:
                    rolling_extra += d.debt.minimum_payment
            entry.remaining_balances[d.debt.name] = d.balance

        schedule.append(entry)

    hit_cap = any(not d.is_paid_off for d in working)
    if hit_cap:
        logger.warning(
            "Debt payoff simulation stopped at %d months with %d debts open",
            MAX_MONTHS,
            sum(1 for d in working if not d.is_paid_off),
        )

    minimums = sum((d.minimum_payment for d in debts), Decimal("0"))
    return SimulationResult(
        total_months=total_months,
        total_amount_paid=total_paid,
        total_interest_paid=total_interest,
        monthly_payment=minimums + extra_payment,
        payment_schedule=schedule,
        debt_payoff_order=payoff_order,
        hit_month_cap=hit_cap,
    )


def calculate_minimum_payments_only(debts: list[Debt]) -> SimulationResult:
    """Baseline: minimums only, freed-up minimums are not redirected."""
    return simulate_payoff(
        debts,
        extra_payment=Decimal("0"),
        strategy=PayoffStrategy.AVALANCHE,
        roll_over_minimums=False,
    )


def calculate_debt_payoff(
    debts: list[Debt],
    extra_payment: Decimal,
    strategy: PayoffStrategy,
) -> DebtPayoffResults:
    result = simulate_payoff(debts, extra_payment, strategy)
    baseline = calculate_minimum_payments_only(debts)

    return DebtPayoffResults(
        total_months=result.total_months,
        total_amount_paid=result.total_amount_paid,
        total_interest_paid=result.total_interest_paid,
        monthly_payment=result.monthly_payment,
        payment_schedule=result.payment_schedule,
        debt_payoff_order=result.debt_payoff_order,
        savings_vs_minimum=PayoffSavings(
            months_saved=baseline.total_months - result.total_months,
            interest_saved=baseline.total_interest_paid - result.total_interest_paid,
            total_saved=baseline.total_amount_paid - result.total_amount_paid,
        ),
        hit_month_cap=result.hit_month_cap,
    )


def validate_debt_inputs(debts: list[Debt], extra_payment: Decimal) -> list[str]:
    errors: list[str] = []

    if not debts:
        errors.append("Please add at least one debt")

    names = [d.name for d in debts]
    if len(set(names)) != len(names):
        errors.append("Debt names must be unique")

    for debt in debts:
        if debt.balance <= 0:
            errors.append(f"{debt.name}: Balance must be greater than 0")
        if debt.apr < 0 or debt.apr > 100:
            errors.append(f"{debt.name}: APR must be between 0 and 100")
        if debt.minimum_payment <= 0:
            errors.append(f"{debt.name}: Minimum payment must be greater than 0")

        monthly_interest = debt.monthly_interest
        if debt.minimum_payment <= monthly_interest:
            errors.append(
                f"{debt.name}: Minimum payment (${debt.minimum_payment:,.2f}) must be "
                f"greater than monthly interest (${monthly_interest:,.2f})"
            )

    if extra_payment < 0:
        errors.append("Extra payment cannot be negative")

    return errors

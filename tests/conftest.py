"""Canonical test fixtures used across the engine and API tests.

Loan fixture: $400K home, 20% down, 6.5% rate, 30yr fixed -> $320K loan.
FHA fixture: $500K home, 3.5% down -> $482,500 base loan.
Debt fixture: two credit cards and a car loan.
"""

import pytest
from datetime import date
from decimal import Decimal

from fincalc.models.debt import Debt
from fincalc.models.loan import FHALoanInputs, LoanInputs


@pytest.fixture
def canonical_loan() -> LoanInputs:
    """$400K home, 20% down, no PMI."""
    return LoanInputs(
        home_price=Decimal("400000"),
        down_payment=Decimal("80000"),
        interest_rate=Decimal("6.5"),
        loan_term_years=30,
        property_tax=Decimal("4800"),
        home_insurance=Decimal("1200"),
        hoa_fee=Decimal("100"),
        start_date=date(2026, 1, 1),
    )


@pytest.fixture
def pmi_loan() -> LoanInputs:
    """$400K home, 10% down, $1,800/yr PMI."""
    return LoanInputs(
        home_price=Decimal("400000"),
        down_payment=Decimal("40000"),
        interest_rate=Decimal("6.5"),
        loan_term_years=30,
        property_tax=Decimal("4800"),
        home_insurance=Decimal("1200"),
        pmi=Decimal("1800"),
        start_date=date(2026, 1, 1),
    )


@pytest.fixture
def fha_inputs() -> FHALoanInputs:
    """$500K home, minimum 3.5% down, UFMIP financed."""
    return FHALoanInputs(
        home_price=Decimal("500000"),
        down_payment=Decimal("17500"),
        interest_rate=Decimal("6.5"),
        loan_term_years=30,
        property_tax=Decimal("6000"),
        home_insurance=Decimal("1800"),
        start_date=date(2026, 1, 1),
    )


@pytest.fixture
def sample_debts() -> list[Debt]:
    return [
        Debt(name="Card A", balance=Decimal("5000"), apr=Decimal("22"), minimum_payment=Decimal("150")),
        Debt(name="Card B", balance=Decimal("2000"), apr=Decimal("18"), minimum_payment=Decimal("60")),
        Debt(name="Car", balance=Decimal("10000"), apr=Decimal("6"), minimum_payment=Decimal("250")),
    ]

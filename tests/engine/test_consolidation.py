import logging
from decimal import Decimal

from fincalc.engine.consolidation import (
    NEVER_PAID_OFF_MONTHS,
    calculate_debt_consolidation,
    consolidation_summary,
    existing_debts_summary,
    payoff_months,
    real_apr,
    validate_consolidation_inputs,
    weighted_average_rate,
)
from fincalc.models.debt import ConsolidationLoan, ExistingDebt

CARDS = [
    ExistingDebt(name="Card 1", balance=Decimal("10000"), monthly_payment=Decimal("300"), interest_rate=Decimal("24")),
    ExistingDebt(name="Card 2", balance=Decimal("5000"), monthly_payment=Decimal("150"), interest_rate=Decimal("20")),
]


class TestPayoffMonths:
    def test_zero_rate(self):
        assert payoff_months(Decimal("1200"), Decimal("100"), Decimal("0")) == 12

    def test_zero_rate_rounds_up(self):
        assert payoff_months(Decimal("1250"), Decimal("100"), Decimal("0")) == 13

    def test_payment_below_interest(self):
        # 1000 * 12% / 12 = 10 interest per month
        assert payoff_months(Decimal("1000"), Decimal("5"), Decimal("12")) == NEVER_PAID_OFF_MONTHS

    def test_zero_payment(self):
        assert payoff_months(Decimal("1000"), Decimal("0"), Decimal("12")) == NEVER_PAID_OFF_MONTHS

    def test_card(self):
        # -ln(1 - 10000 * 0.02 / 300) / ln(1.02) = 55.48 -> 56
        assert payoff_months(Decimal("10000"), Decimal("300"), Decimal("24")) == 56


class TestExistingDebts:
    def test_weighted_rate(self):
        debts = [
            ExistingDebt(name="A", balance=Decimal("1000"), monthly_payment=Decimal("50"), interest_rate=Decimal("10")),
            ExistingDebt(name="B", balance=Decimal("3000"), monthly_payment=Decimal("100"), interest_rate=Decimal("20")),
        ]
        assert weighted_average_rate(debts) == Decimal("17.5")

    def test_weighted_rate_empty(self):
        assert weighted_average_rate([]) == Decimal("0")

    def test_summary(self):
        s = existing_debts_summary(CARDS)
        assert s.total_balance == Decimal("15000")
        assert s.total_monthly_payment == Decimal("450")
        assert s.payoff_months == 56
        # Card 1 alone: 300 * 56 - 10000
        assert s.total_interest > Decimal("6800")


class TestRealAPR:
    def test_no_fee_matches_nominal(self):
        apr = real_apr(Decimal("10000"), Decimal("10"), 60, Decimal("0"))
        assert abs(apr - Decimal("10")) < Decimal("0.01")

    def test_fee_raises_apr(self):
        apr = real_apr(Decimal("10000"), Decimal("10"), 60, Decimal("500"))
        assert apr > Decimal("11")

    def test_unbracketed_falls_back_to_nominal(self, caplog):
        # A fee this large needs an APR far above the search ceiling
        with caplog.at_level(logging.WARNING):
            apr = real_apr(Decimal("10000"), Decimal("10"), 12, Decimal("5000"))
        assert apr == Decimal("10")
        assert "using nominal rate" in caplog.text


class TestConsolidationSummary:
    def test_fee_and_total_cost(self):
        loan = ConsolidationLoan(
            loan_amount=Decimal("15000"),
            interest_rate=Decimal("9"),
            loan_term_years=4,
            loan_fee_pct=Decimal("2"),
        )
        s = consolidation_summary(loan)
        assert s.loan_fee == Decimal("300.00")
        assert s.payoff_months == 48
        assert s.total_interest == s.monthly_payment * 48 - Decimal("15000")
        assert s.total_cost == s.total_interest + Decimal("300.00")

    def test_term_months_added(self):
        loan = ConsolidationLoan(
            loan_amount=Decimal("5000"),
            interest_rate=Decimal("0"),
            loan_term_years=1,
            loan_term_months=6,
        )
        s = consolidation_summary(loan)
        assert s.payoff_months == 18
        assert s.total_interest == Decimal("5000.04") - Decimal("5000")


class TestCalculateDebtConsolidation:
    def test_worthwhile(self):
        loan = ConsolidationLoan(
            loan_amount=Decimal("15000"),
            interest_rate=Decimal("9"),
            loan_term_years=4,
            loan_fee_pct=Decimal("2"),
        )
        result = calculate_debt_consolidation(CARDS, loan)
        assert result.is_worthwhile
        assert result.savings.total_cost > 0
        assert result.consolidated_loan.real_apr < result.existing_debts.weighted_average_rate
        assert result.recommendation.startswith("Debt consolidation appears beneficial")

    def test_higher_rate_warns(self):
        loan = ConsolidationLoan(
            loan_amount=Decimal("15000"),
            interest_rate=Decimal("30"),
            loan_term_years=5,
        )
        result = calculate_debt_consolidation(CARDS, loan)
        assert not result.is_worthwhile
        assert result.recommendation.startswith("Warning")

    def test_savings_fields(self):
        loan = ConsolidationLoan(
            loan_amount=Decimal("15000"),
            interest_rate=Decimal("9"),
            loan_term_years=4,
        )
        result = calculate_debt_consolidation(CARDS, loan)
        assert result.savings.monthly_payment == (
            Decimal("450") - result.consolidated_loan.monthly_payment
        )
        assert result.savings.time_months == 56 - 48


class TestValidation:
    def test_valid(self):
        loan = ConsolidationLoan(loan_amount=Decimal("15000"), interest_rate=Decimal("9"), loan_term_years=4)
        assert validate_consolidation_inputs(CARDS, loan) == []

    def test_no_debts(self):
        loan = ConsolidationLoan(loan_amount=Decimal("15000"), interest_rate=Decimal("9"), loan_term_years=4)
        assert "At least one existing debt is required" in validate_consolidation_inputs([], loan)

    def test_bad_debt_and_loan(self):
        debt = ExistingDebt(name="", balance=Decimal("0"), monthly_payment=Decimal("0"), interest_rate=Decimal("150"))
        loan = ConsolidationLoan(
            loan_amount=Decimal("0"),
            interest_rate=Decimal("9"),
            loan_term_years=0,
            loan_fee_pct=Decimal("-1"),
        )
        errors = validate_consolidation_inputs([debt], loan)
        assert "Debt 1: Name is required" in errors
        assert "Debt 1: Balance must be greater than 0" in errors
        assert "Debt 1: Interest rate must be between 0 and 100" in errors
        assert "Consolidation loan amount must be greater than 0" in errors
        assert "Loan term must be greater than 0" in errors
        assert "Loan fee cannot be negative" in errors

    def test_term_too_long(self):
        loan = ConsolidationLoan(
            loan_amount=Decimal("15000"),
            interest_rate=Decimal("9"),
            loan_term_years=50,
            loan_term_months=1,
        )
        assert validate_consolidation_inputs(CARDS, loan) == ["Loan term cannot exceed 50 years"]

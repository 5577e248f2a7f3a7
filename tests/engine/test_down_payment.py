from decimal import Decimal

from fincalc.engine.down_payment import (
    SCENARIO_PERCENTAGES,
    calculate_down_payment_savings,
    calculate_down_payment_scenarios,
    calculate_loan_details,
    down_payment_from_pct,
    validate_down_payment_inputs,
)


class TestLoanDetails:
    def test_twenty_percent(self):
        d = calculate_loan_details(Decimal("400000"), Decimal("20"), Decimal("3"), Decimal("6.5"), 30)
        assert d.down_payment == Decimal("80000.00")
        assert d.loan_amount == Decimal("320000.00")
        assert d.closing_costs == Decimal("12000.00")
        assert d.total_cash_needed == Decimal("92000.00")
        assert d.monthly_payment == Decimal("2022.62")
        assert not d.requires_pmi

    def test_low_down_requires_pmi(self):
        d = calculate_loan_details(Decimal("400000"), Decimal("3.5"), Decimal("3"), Decimal("6.5"), 30)
        assert d.down_payment == Decimal("14000.00")
        assert d.requires_pmi

    def test_down_payment_from_pct(self):
        assert down_payment_from_pct(Decimal("333333"), Decimal("10")) == Decimal("33333.30")


class TestScenarios:
    def test_standard_levels(self):
        scenarios = calculate_down_payment_scenarios(Decimal("400000"), Decimal("3"), Decimal("6.5"), 30)
        assert [s.down_payment_pct for s in scenarios] == list(SCENARIO_PERCENTAGES)
        assert len(scenarios) == 7

    def test_payment_falls_as_down_rises(self):
        scenarios = calculate_down_payment_scenarios(Decimal("400000"), Decimal("3"), Decimal("6.5"), 30)
        payments = [s.monthly_payment for s in scenarios]
        assert payments == sorted(payments, reverse=True)

    def test_pmi_flags(self):
        scenarios = calculate_down_payment_scenarios(Decimal("400000"), Decimal("3"), Decimal("6.5"), 30)
        assert [s.requires_pmi for s in scenarios] == [True, True, True, True, False, False, False]


class TestSavings:
    def test_ten_vs_twenty(self):
        ten = calculate_loan_details(Decimal("400000"), Decimal("10"), Decimal("3"), Decimal("6.5"), 30)
        twenty = calculate_loan_details(Decimal("400000"), Decimal("20"), Decimal("3"), Decimal("6.5"), 30)
        s = calculate_down_payment_savings(ten, twenty)
        assert s.monthly_savings == ten.monthly_payment - twenty.monthly_payment
        assert s.total_loan_savings == s.monthly_savings * 360
        assert s.additional_down_payment == Decimal("40000.00")
        assert s.pmi_avoided

    def test_no_pmi_avoided_above_twenty(self):
        twenty = calculate_loan_details(Decimal("400000"), Decimal("20"), Decimal("3"), Decimal("6.5"), 30)
        thirty = calculate_loan_details(Decimal("400000"), Decimal("30"), Decimal("3"), Decimal("6.5"), 30)
        assert not calculate_down_payment_savings(twenty, thirty).pmi_avoided


class TestValidation:
    def test_valid(self):
        assert validate_down_payment_inputs(Decimal("400000"), Decimal("20"), Decimal("3"), Decimal("6.5"), 30) == []

    def test_invalid(self):
        errors = validate_down_payment_inputs(Decimal("0"), Decimal("100"), Decimal("-1"), Decimal("101"), 0)
        assert "Home price must be greater than 0" in errors
        assert "Down payment must be at least 0% and less than 100%" in errors
        assert "Closing costs must be between 0% and 100%" in errors
        assert "Interest rate must be between 0 and 100" in errors
        assert "Loan term must be greater than 0" in errors

    def test_term_too_long(self):
        errors = validate_down_payment_inputs(Decimal("400000"), Decimal("20"), Decimal("3"), Decimal("6.5"), 60)
        assert errors == ["Loan term cannot exceed 50 years"]

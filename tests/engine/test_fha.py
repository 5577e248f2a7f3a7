from dataclasses import replace
from datetime import date
from decimal import Decimal

from fincalc.engine.fha import (
    calculate_conventional_loan,
    calculate_fha_loan,
    fha_loan_details,
    validate_fha_inputs,
)
from fincalc.models.loan import ExtraPaymentPlan


class TestFHALoanDetails:
    def test_minimum_down(self, fha_inputs):
        d = fha_loan_details(fha_inputs)
        assert d.base_loan_amount == Decimal("482500")
        assert d.ufmip_amount == Decimal("8443.75")
        assert d.total_loan_amount == Decimal("490943.75")
        assert d.ltv == Decimal("96.5")
        assert d.annual_mip_rate == Decimal("0.55")
        assert d.monthly_mip_amount == Decimal("221.15")
        assert d.mip_duration is None

    def test_ten_percent_down(self, fha_inputs):
        d = fha_loan_details(replace(fha_inputs, down_payment=Decimal("50000")))
        assert d.ltv == Decimal("90")
        assert d.annual_mip_rate == Decimal("0.50")
        assert d.monthly_mip_amount == Decimal("187.50")
        assert d.mip_duration == 132

    def test_ufmip_paid_in_cash(self, fha_inputs):
        d = fha_loan_details(replace(fha_inputs, finance_ufmip=False))
        assert d.total_loan_amount == Decimal("482500")


class TestCalculateFHALoan:
    def test_mip_for_life_of_loan(self, fha_inputs):
        result = calculate_fha_loan(fha_inputs)
        assert result.schedule.months == 360
        assert all(r.insurance == Decimal("221.15") for r in result.schedule.rows)
        assert result.totals.total_mip == Decimal("221.15") * 360

    def test_mip_stops_after_eleven_years(self, fha_inputs):
        result = calculate_fha_loan(replace(fha_inputs, down_payment=Decimal("50000")))
        rows = result.schedule.rows
        assert rows[131].insurance == Decimal("187.50")
        assert rows[132].insurance == Decimal("0")
        assert result.totals.total_mip == Decimal("187.50") * 132

    def test_amortizes_total_loan(self, fha_inputs):
        result = calculate_fha_loan(fha_inputs)
        principal = sum(r.principal + r.extra_payment for r in result.schedule.rows)
        assert principal == Decimal("490943.75")
        assert result.schedule.rows[-1].balance == Decimal("0")

    def test_unfinanced_ufmip_counted_in_total_mip(self, fha_inputs):
        result = calculate_fha_loan(replace(fha_inputs, finance_ufmip=False))
        assert result.totals.total_mip == Decimal("221.15") * 360 + Decimal("8443.75")

    def test_monthly_breakdown(self, fha_inputs):
        b = calculate_fha_loan(fha_inputs).monthly_payment
        assert b.monthly_mip == Decimal("221.15")
        assert b.property_tax == Decimal("500.00")
        assert b.home_insurance == Decimal("150.00")
        assert b.total_monthly == (
            b.principal_and_interest + Decimal("221.15") + Decimal("500.00") + Decimal("150.00")
        )

    def test_payoff_date(self, fha_inputs):
        assert calculate_fha_loan(fha_inputs).payoff_date == date(2056, 1, 1)

    def test_extra_payments(self, fha_inputs):
        base = calculate_fha_loan(fha_inputs)
        faster = calculate_fha_loan(
            replace(fha_inputs, extra_payments=ExtraPaymentPlan(monthly_extra=Decimal("300")))
        )
        assert faster.schedule.months < base.schedule.months
        assert faster.totals.total_interest < base.totals.total_interest
        assert faster.totals.total_mip < base.totals.total_mip

    def test_totals_add_up(self, fha_inputs):
        t = calculate_fha_loan(fha_inputs).totals
        assert t.total_principal_and_interest == Decimal("490943.75") + t.total_interest
        assert t.total_of_all_payments == (
            t.total_principal_and_interest
            + t.total_mip
            + t.total_property_tax
            + t.total_home_insurance
            + t.total_hoa
            + t.total_other_costs
        )


class TestConventionalComparison:
    def test_twenty_percent_down(self):
        c = calculate_conventional_loan(Decimal("400000"), Decimal("20"), 30, Decimal("6.5"))
        assert c.loan_amount == Decimal("320000")
        assert c.monthly_payment == Decimal("2022.62")
        assert c.total_payment == Decimal("2022.62") * 360
        assert c.total_interest == c.total_payment - Decimal("320000")


class TestValidation:
    def test_valid(self, fha_inputs):
        assert validate_fha_inputs(fha_inputs) == []

    def test_below_minimum_down(self, fha_inputs):
        errors = validate_fha_inputs(replace(fha_inputs, down_payment=Decimal("15000")))
        assert any("3.5" in e for e in errors)

    def test_zero_term(self, fha_inputs):
        errors = validate_fha_inputs(replace(fha_inputs, loan_term_years=0))
        assert "Loan term must be greater than 0" in errors

    def test_term_too_long(self, fha_inputs):
        errors = validate_fha_inputs(replace(fha_inputs, loan_term_years=51))
        assert "Loan term cannot exceed 50 years" in errors

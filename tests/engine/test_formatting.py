from decimal import Decimal

from fincalc.formatting import (
    format_currency,
    format_months,
    format_percentage,
    format_period,
    format_period_label,
)
from fincalc.models.roi import PeriodType
from fincalc.models.tvm import PaymentFrequency


class TestCurrency:
    def test_thousands_separator(self):
        assert format_currency(Decimal("1234567.891")) == "$1,234,567.89"

    def test_negative(self):
        assert format_currency(Decimal("-1234.5")) == "-$1,234.50"

    def test_whole_dollars(self):
        assert format_currency(Decimal("9525.50"), decimals=0) == "$9,526"


class TestPercentage:
    def test_rounding(self):
        assert format_percentage(Decimal("6.7961")) == "6.80%"

    def test_undefined(self):
        assert format_percentage(None) == "N/A"


class TestMonths:
    def test_months_only(self):
        assert format_months(5) == "5 months"
        assert format_months(1) == "1 month"
        assert format_months(0) == "0 months"

    def test_whole_years(self):
        assert format_months(24) == "2 years"

    def test_mixed(self):
        assert format_months(13) == "1 year, 1 month"
        assert format_months(38) == "3 years, 2 months"


class TestPeriods:
    def test_period_label(self):
        assert format_period_label(3, PaymentFrequency.QUARTERLY) == "Quarter 3"
        assert format_period_label(1, PaymentFrequency.SEMI_ANNUAL) == "Period 1"

    def test_period(self):
        assert format_period(Decimal("1"), PeriodType.YEARS) == "1 year"
        assert format_period(Decimal("18"), PeriodType.MONTHS) == "18 months"

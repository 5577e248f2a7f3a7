"""Display strings for money, percentages and durations."""

from decimal import Decimal, ROUND_HALF_UP

from fincalc.models.roi import PeriodType
from fincalc.models.tvm import PaymentFrequency

_PERIOD_LABELS = {
    PaymentFrequency.ANNUAL: "Year",
    PaymentFrequency.SEMI_ANNUAL: "Period",
    PaymentFrequency.QUARTERLY: "Quarter",
    PaymentFrequency.MONTHLY: "Month",
    PaymentFrequency.WEEKLY: "Week",
    PaymentFrequency.DAILY: "Day",
}

_PERIOD_UNITS = {
    PeriodType.YEARS: ("year", "years"),
    PeriodType.MONTHS: ("month", "months"),
    PeriodType.DAYS: ("day", "days"),
}


def format_currency(value: Decimal, decimals: int = 2) -> str:
    """US dollars: -1234.5 -> "-$1,234.50"."""
    exponent = Decimal(1).scaleb(-decimals)
    rounded = Decimal(value).quantize(exponent, ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.{decimals}f}"


def format_percentage(value: Decimal | None, decimals: int = 2) -> str:
    if value is None:
        return "N/A"
    rounded = Decimal(value).quantize(Decimal(1).scaleb(-decimals), ROUND_HALF_UP)
    return f"{rounded:.{decimals}f}%"


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def format_months(months: int) -> str:
    """13 -> "1 year, 1 month"; 24 -> "2 years"; 5 -> "5 months"."""
    years, remaining = divmod(months, 12)
    if years == 0:
        return _plural(remaining, "month", "months")
    if remaining == 0:
        return _plural(years, "year", "years")
    return f"{_plural(years, 'year', 'years')}, {_plural(remaining, 'month', 'months')}"


def format_period_label(period: int, frequency: PaymentFrequency) -> str:
    """Row label for a payment period, e.g. "Quarter 3"."""
    return f"{_PERIOD_LABELS[frequency]} {period}"


def format_period(period: Decimal, period_type: PeriodType) -> str:
    singular, plural = _PERIOD_UNITS[period_type]
    return f"{period} {singular if period == 1 else plural}"

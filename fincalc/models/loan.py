from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class OneTimePayment:
    amount: Decimal
    month: int  # 1-based payment number


@dataclass(frozen=True)
class ExtraPaymentPlan:
    """Extra principal payments layered on top of the scheduled payment."""
    monthly_extra: Decimal = Decimal("0")
    monthly_extra_start_month: int = 1
    yearly_extra: Decimal = Decimal("0")
    yearly_extra_start_month: int = 1
    one_time_payments: tuple[OneTimePayment, ...] = ()

    def extra_for_month(self, month: int) -> Decimal:
        """Total extra principal scheduled for a 1-based payment number."""
        extra = Decimal("0")
        if self.monthly_extra > 0 and month >= self.monthly_extra_start_month:
            extra += self.monthly_extra
        if (
            self.yearly_extra > 0
            and month >= self.yearly_extra_start_month
            and (month - self.yearly_extra_start_month) % 12 == 0
        ):
            extra += self.yearly_extra
        for payment in self.one_time_payments:
            if payment.month == month:
                extra += payment.amount
        return extra

    @property
    def is_empty(self) -> bool:
        return (
            self.monthly_extra <= 0
            and self.yearly_extra <= 0
            and all(p.amount <= 0 for p in self.one_time_payments)
        )


@dataclass(frozen=True)
class LoanInputs:
    """Conventional mortgage inputs. Rates are annual percentages (6.5 = 6.5%)."""
    home_price: Decimal
    down_payment: Decimal
    interest_rate: Decimal
    loan_term_years: int = 30

    # Escrow and recurring costs
    property_tax: Decimal = Decimal("0")  # Annual
    home_insurance: Decimal = Decimal("0")  # Annual
    pmi: Decimal = Decimal("0")  # Annual, only charged below 20% down
    hoa_fee: Decimal = Decimal("0")  # Monthly
    other_costs: Decimal = Decimal("0")  # Monthly

    start_date: date | None = None

    @property
    def down_payment_pct(self) -> Decimal:
        if self.home_price <= 0:
            return Decimal("0")
        return self.down_payment / self.home_price * 100


@dataclass(frozen=True)
class FHALoanInputs:
    """FHA loan inputs. MIP is derived from the loan, not supplied."""
    home_price: Decimal
    down_payment: Decimal
    interest_rate: Decimal
    loan_term_years: int = 30
    finance_ufmip: bool = True

    property_tax: Decimal = Decimal("0")  # Annual
    home_insurance: Decimal = Decimal("0")  # Annual
    hoa_fee: Decimal = Decimal("0")  # Monthly
    other_costs: Decimal = Decimal("0")  # Monthly

    start_date: date | None = None
    extra_payments: ExtraPaymentPlan = field(default_factory=ExtraPaymentPlan)

    @property
    def down_payment_pct(self) -> Decimal:
        if self.home_price <= 0:
            return Decimal("0")
        return self.down_payment / self.home_price * 100

"""Debt payoff (avalanche / snowball) route."""

from fastapi import APIRouter

from fincalc.api.errors import raise_for_errors
from fincalc.api.schemas import (
    DebtPayoffRequest,
    DebtPayoffResponse,
    MonthlyPayoffEntryResponse,
    PayoffSavingsResponse,
)
from fincalc.engine.debt_payoff import calculate_debt_payoff, validate_debt_inputs
from fincalc.formatting import format_months
from fincalc.models.debt import Debt

router = APIRouter(prefix="/api/v1", tags=["debt"])


@router.post("/debt-payoff", response_model=DebtPayoffResponse)
async def debt_payoff(req: DebtPayoffRequest):
    debts = [
        Debt(name=d.name, balance=d.balance, apr=d.apr, minimum_payment=d.minimum_payment)
        for d in req.debts
    ]
    raise_for_errors("debt-payoff", validate_debt_inputs(debts, req.extra_payment))

    result = calculate_debt_payoff(debts, req.extra_payment, req.strategy)
    return DebtPayoffResponse(
        strategy=req.strategy,
        total_months=result.total_months,
        payoff_time=format_months(result.total_months),
        total_amount_paid=result.total_amount_paid,
        total_interest_paid=result.total_interest_paid,
        monthly_payment=result.monthly_payment,
        debt_payoff_order=result.debt_payoff_order,
        savings_vs_minimum=PayoffSavingsResponse.model_validate(result.savings_vs_minimum),
        hit_month_cap=result.hit_month_cap,
        payment_schedule=[
            MonthlyPayoffEntryResponse.model_validate(entry)
            for entry in result.payment_schedule
        ],
    )

"""Down payment scenarios route."""

from fastapi import APIRouter

from fincalc.api.errors import raise_for_errors
from fincalc.api.schemas import (
    DownPaymentCalculationResponse,
    DownPaymentRequest,
    DownPaymentResponse,
    DownPaymentSavingsResponse,
)
from fincalc.engine.down_payment import (
    calculate_down_payment_savings,
    calculate_down_payment_scenarios,
    calculate_loan_details,
    validate_down_payment_inputs,
)
from fincalc.engine.insurance import PMI_REQUIRED_BELOW_DOWN_PCT

router = APIRouter(prefix="/api/v1", tags=["down-payment"])


@router.post("/down-payment", response_model=DownPaymentResponse)
async def down_payment(req: DownPaymentRequest):
    """Selected down payment, the standard scenarios, and the cost of staying under 20%."""
    raise_for_errors("down-payment", validate_down_payment_inputs(
        req.home_price,
        req.down_payment_pct,
        req.closing_cost_pct,
        req.interest_rate,
        req.loan_term_years,
    ))

    selected = calculate_loan_details(
        req.home_price,
        req.down_payment_pct,
        req.closing_cost_pct,
        req.interest_rate,
        req.loan_term_years,
    )
    scenarios = calculate_down_payment_scenarios(
        req.home_price, req.closing_cost_pct, req.interest_rate, req.loan_term_years
    )

    savings = None
    if selected.down_payment_pct < PMI_REQUIRED_BELOW_DOWN_PCT:
        twenty = calculate_loan_details(
            req.home_price,
            PMI_REQUIRED_BELOW_DOWN_PCT,
            req.closing_cost_pct,
            req.interest_rate,
            req.loan_term_years,
        )
        savings = DownPaymentSavingsResponse.model_validate(
            calculate_down_payment_savings(selected, twenty)
        )

    return DownPaymentResponse(
        selected=DownPaymentCalculationResponse.model_validate(selected),
        scenarios=[DownPaymentCalculationResponse.model_validate(s) for s in scenarios],
        savings_at_twenty_percent=savings,
    )

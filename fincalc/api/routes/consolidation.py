"""Debt consolidation route."""

from fastapi import APIRouter

from fincalc.api.errors import raise_for_errors
from fincalc.api.schemas import ConsolidationRequest, ConsolidationResponse
from fincalc.engine.consolidation import (
    calculate_debt_consolidation,
    validate_consolidation_inputs,
)
from fincalc.models.debt import ConsolidationLoan, ExistingDebt

router = APIRouter(prefix="/api/v1", tags=["debt"])


@router.post("/debt-consolidation", response_model=ConsolidationResponse)
async def debt_consolidation(req: ConsolidationRequest):
    debts = [
        ExistingDebt(
            name=d.name,
            balance=d.balance,
            monthly_payment=d.monthly_payment,
            interest_rate=d.interest_rate,
        )
        for d in req.debts
    ]
    loan = ConsolidationLoan(
        loan_amount=req.loan.loan_amount,
        interest_rate=req.loan.interest_rate,
        loan_term_years=req.loan.loan_term_years,
        loan_term_months=req.loan.loan_term_months,
        loan_fee_pct=req.loan.loan_fee_pct,
    )
    raise_for_errors("debt-consolidation", validate_consolidation_inputs(debts, loan))

    return ConsolidationResponse.model_validate(calculate_debt_consolidation(debts, loan))

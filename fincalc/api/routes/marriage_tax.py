"""Marriage tax penalty / bonus route."""

from fastapi import APIRouter

from fincalc.api.errors import raise_for_errors
from fincalc.api.schemas import MarriageTaxRequest, MarriageTaxResponse, PersonIncomeRequest
from fincalc.engine.marriage_tax import calculate_marriage_tax, validate_marriage_tax_inputs
from fincalc.models.tax import ItemizedDeductions, MarriageTaxInputs, PersonIncome

router = APIRouter(prefix="/api/v1", tags=["tax"])


def _build_person(req: PersonIncomeRequest) -> PersonIncome:
    itemized = None
    if req.itemized_deductions is not None:
        itemized = ItemizedDeductions(**req.itemized_deductions.model_dump())
    return PersonIncome(
        salary=req.salary,
        interest_dividends=req.interest_dividends,
        capital_gains_short_term=req.capital_gains_short_term,
        capital_gains_long_term=req.capital_gains_long_term,
        retirement_401k=req.retirement_401k,
        health_insurance=req.health_insurance,
        other_pre_tax_deductions=req.other_pre_tax_deductions,
        filing_status=req.filing_status,
        itemized_deductions=itemized,
    )


@router.post("/marriage-tax", response_model=MarriageTaxResponse)
async def marriage_tax(req: MarriageTaxRequest):
    inputs = MarriageTaxInputs(
        person1=_build_person(req.person1),
        person2=_build_person(req.person2),
        dependents=req.dependents,
        use_standard_deduction=req.use_standard_deduction,
        state_local_tax_rate=req.state_local_tax_rate,
    )
    raise_for_errors("marriage-tax", validate_marriage_tax_inputs(inputs))

    return MarriageTaxResponse.model_validate(calculate_marriage_tax(inputs))

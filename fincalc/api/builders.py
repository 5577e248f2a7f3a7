"""Request -> engine conversions shared by the loan routes."""

from fincalc.api.schemas import ExtraPaymentsRequest, ScheduleRowResponse, YearlySummaryResponse
from fincalc.engine.amortization import AmortizationSchedule, yearly_summary
from fincalc.models.loan import ExtraPaymentPlan, OneTimePayment


def build_extra_payments(req: ExtraPaymentsRequest | None) -> ExtraPaymentPlan | None:
    if req is None:
        return None
    return ExtraPaymentPlan(
        monthly_extra=req.monthly_extra,
        monthly_extra_start_month=req.monthly_extra_start_month,
        yearly_extra=req.yearly_extra,
        yearly_extra_start_month=req.yearly_extra_start_month,
        one_time_payments=tuple(
            OneTimePayment(amount=p.amount, month=p.month) for p in req.one_time_payments
        ),
    )


def schedule_rows(schedule: AmortizationSchedule) -> list[ScheduleRowResponse]:
    return [ScheduleRowResponse.model_validate(row) for row in schedule.rows]


def yearly_rows(schedule: AmortizationSchedule) -> list[YearlySummaryResponse]:
    return [
        YearlySummaryResponse(
            year=int(y["year"]),
            principal=y["principal"],
            interest=y["interest"],
            extra=y["extra"],
            insurance=y["insurance"],
            debt_service=y["debt_service"],
            ending_balance=y["ending_balance"],
        )
        for y in yearly_summary(schedule)
    ]

"""POST /v1/loan/decision - loan offer decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from loan_gateway.api.v1.schemas import DecisionRequest, DecisionResponse
from loan_gateway.api.dependencies import get_decision_engine, get_request_id
from loan_gateway.domain.engine import DecisionEngine
from loan_gateway.domain.models import DecisionErrorKind
from loan_gateway.infrastructure.observability.metrics import record_decision
from loan_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()

ERROR_STATUS_CODES = {
    DecisionErrorKind.INVALID_IDENTITY_CODE: 400,
    DecisionErrorKind.INVALID_LOAN_AMOUNT: 400,
    DecisionErrorKind.INVALID_LOAN_PERIOD: 400,
    DecisionErrorKind.NO_VALID_LOAN: 404,
}


@router.post("/loan/decision", response_model=DecisionResponse)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Decide the best loan offer for an applicant.

    Flow:
    1. Validate personal code, amount and period
    2. Derive credit modifier and search for the best offer
    3. Record metrics and logs
    4. Return the offer, or the rejection reason with a 400/404 status
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = engine.decide(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
        )
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content=DecisionResponse(error_message="An unexpected error occurred").model_dump(),
        )

    duration_ms = (time.time() - start_time) * 1000

    if not result:
        outcome = result.error.kind.value
        record_decision(outcome, request_body.loan_period)
        log_decision(
            request_id,
            request_body.personal_code,
            outcome,
            request_body.loan_amount,
            request_body.loan_period,
            None,
            None,
            duration_ms,
        )
        return JSONResponse(
            status_code=ERROR_STATUS_CODES[result.error.kind],
            content=DecisionResponse(error_message=result.error.message).model_dump(),
        )

    decision = result.decision
    record_decision("approved", request_body.loan_period, decision.approved_amount, decision.approved_period)
    log_decision(
        request_id,
        request_body.personal_code,
        "approved",
        request_body.loan_amount,
        request_body.loan_period,
        decision.approved_amount,
        decision.approved_period,
        duration_ms,
    )

    return DecisionResponse(
        loan_amount=decision.approved_amount,
        loan_period=decision.approved_period,
    )

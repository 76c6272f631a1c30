"""POST/GET /v1/applications - loan application decision endpoints"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from lending_platform.api.dependencies import get_application_repository, get_lending_criteria, get_request_id
from lending_platform.api.v1.schemas import ApplicationListResponse, ApplicationRequest, ApplicationResponse
from lending_platform.domain.exceptions import ApplicationNotFoundError
from lending_platform.domain.models import DecisionStatus, LendingCriteria
from lending_platform.domain.underwriting import decide
from lending_platform.infrastructure.observability.logging import log_decision
from lending_platform.infrastructure.observability.metrics import record_decision
from lending_platform.infrastructure.repositories import ApplicationRepository

router = APIRouter()


@router.post("/applications", response_model=ApplicationResponse)
def create_application(
    request_body: ApplicationRequest,
    request: Request,
    repository: ApplicationRepository = Depends(get_application_repository),
    criteria: LendingCriteria = Depends(get_lending_criteria),
):
    """
    Decide a loan application against the lending criteria.

    Flow:
    1. Evaluate amount range, LTV tier and credit score
    2. Record the decided application in the session store
    3. Record metrics and log the outcome
    4. Return the decision, including Rejected and Error outcomes
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        record = decide(request_body.to_domain(), criteria)
        repository.add(record)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    if record.decision == DecisionStatus.ERROR:
        logging.warning(
            f"Application could not be assessed: {record.decision_text}",
            extra={"request_id": request_id, "application_id": record.application_id},
        )

    duration_ms = (time.time() - start_time) * 1000
    record_decision(record)
    log_decision(request_id, record, duration_ms)

    return ApplicationResponse.from_record(record)


@router.get("/applications", response_model=ApplicationListResponse)
def list_applications(
    limit: int = Query(20, ge=1, le=500, description="Maximum number of applications"),
    repository: ApplicationRepository = Depends(get_application_repository),
):
    """Recent applications, newest first"""
    return ApplicationListResponse(
        applications=[ApplicationResponse.from_record(r) for r in repository.list(limit=limit)]
    )


@router.get("/applications/{application_id}", response_model=ApplicationResponse)
def get_application(
    application_id: str,
    repository: ApplicationRepository = Depends(get_application_repository),
):
    try:
        record = repository.get(application_id)
    except ApplicationNotFoundError:
        raise HTTPException(status_code=404, detail="Application not found")

    return ApplicationResponse.from_record(record)

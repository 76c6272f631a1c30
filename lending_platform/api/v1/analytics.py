"""GET /v1/analytics/summary - aggregate statistics over decided applications"""

from fastapi import APIRouter, Depends

from lending_platform.api.dependencies import get_application_repository
from lending_platform.api.v1.schemas import SummaryResponse
from lending_platform.infrastructure.repositories import ApplicationRepository

router = APIRouter()


@router.get("/analytics/summary", response_model=SummaryResponse)
def get_summary(repository: ApplicationRepository = Depends(get_application_repository)):
    """
    Summarize every complete application received by this service instance.

    Returns:
        Counts by outcome, total value of accepted loans and mean LTV
    """
    return SummaryResponse.from_summary(repository.summary())

"""Pydantic schemas for API request/response validation"""

from typing import List, Optional

from pydantic import BaseModel, Field

from lending_platform.domain.models import ApplicationRecord, ApplicationSummary, DecisionStatus, LoanApplication
from lending_platform.utils.date_utils import isoformat_or_none


class ApplicationRequest(BaseModel):
    """Request body for POST /v1/applications"""

    borrowing_amount: float = Field(..., gt=0, allow_inf_nan=False, description="Requested loan principal")
    asset_value: float = Field(..., gt=0, allow_inf_nan=False, description="Value of the secured asset")
    credit_score: int = Field(..., ge=1, description="Applicant credit score")

    def to_domain(self) -> LoanApplication:
        return LoanApplication(
            borrowing_amount=self.borrowing_amount,
            asset_value=self.asset_value,
            credit_score=self.credit_score,
        )


class ApplicationResponse(BaseModel):
    """A decided loan application"""

    application_id: str
    borrowing_amount: float
    asset_value: float
    credit_score: int
    ltv_percentage: float
    decision: DecisionStatus
    decision_text: str
    submitted_at: Optional[str] = None

    @classmethod
    def from_record(cls, record: ApplicationRecord) -> "ApplicationResponse":
        return cls(
            application_id=record.application_id,
            borrowing_amount=record.borrowing_amount,
            asset_value=record.asset_value,
            credit_score=record.credit_score,
            ltv_percentage=record.ltv_percentage,
            decision=record.decision,
            decision_text=record.decision_text,
            submitted_at=isoformat_or_none(record.submitted_at),
        )


class ApplicationListResponse(BaseModel):
    """Response for GET /v1/applications"""

    applications: List[ApplicationResponse]


class SummaryResponse(BaseModel):
    """Response for GET /v1/analytics/summary"""

    total_applications: int
    successful_applications: int
    rejected_applications: int
    errored_applications: int
    total_value_of_loans: float
    mean_ltv: float

    @classmethod
    def from_summary(cls, summary: ApplicationSummary) -> "SummaryResponse":
        return cls(
            total_applications=summary.total_applications,
            successful_applications=summary.successful_applications,
            rejected_applications=summary.rejected_applications,
            errored_applications=summary.errored_applications,
            total_value_of_loans=summary.total_value_of_loans,
            mean_ltv=summary.mean_ltv,
        )

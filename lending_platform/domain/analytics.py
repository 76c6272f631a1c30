"""Aggregate statistics over decided loan applications"""

from typing import Iterable

from lending_platform.domain.models import ApplicationRecord, ApplicationSummary, DecisionStatus


def summarize(records: Iterable[ApplicationRecord]) -> ApplicationSummary:
    """
    Summarize complete applications.

    Only records with a submission time and a decision count. Loan value sums
    accepted applications; mean LTV covers every complete application
    regardless of outcome, and is 0 when there are none.
    """
    complete = [r for r in records if r.is_complete]

    accepted = [r for r in complete if r.decision == DecisionStatus.ACCEPTED]
    rejected_count = sum(1 for r in complete if r.decision == DecisionStatus.REJECTED)
    errored_count = sum(1 for r in complete if r.decision == DecisionStatus.ERROR)

    total_value = float(sum(r.borrowing_amount for r in accepted))
    mean_ltv = sum(r.ltv_percentage for r in complete) / len(complete) if complete else 0.0

    return ApplicationSummary(
        total_applications=len(complete),
        successful_applications=len(accepted),
        rejected_applications=rejected_count,
        errored_applications=errored_count,
        total_value_of_loans=total_value,
        mean_ltv=mean_ltv,
    )

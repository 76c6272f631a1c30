"""Underwriting decision engine - core business logic for loan decisions"""

import math
from datetime import datetime
from typing import Callable, List, Optional

from lending_platform.domain.exceptions import InvalidApplicationError
from lending_platform.domain.models import (
    ApplicationRecord,
    DecisionStatus,
    LendingCriteria,
    LoanApplication,
)
from lending_platform.utils.date_utils import utc_now

DEFAULT_CRITERIA = LendingCriteria()

ACCEPTED_TEXT = "Congratulations, your application has been accepted."


def is_within_lending_range(borrowing_amount: float, criteria: LendingCriteria = DEFAULT_CRITERIA) -> bool:
    """Borrowing amount lies in the closed interval [min, max] of the lending criteria"""
    return criteria.min_borrowing_amount <= borrowing_amount <= criteria.max_borrowing_amount


def required_credit_score(ltv: float, criteria: LendingCriteria = DEFAULT_CRITERIA) -> Optional[int]:
    """
    Minimum credit score for a standard (non high-value) loan at this LTV.

    Tiers are walked in ascending order and the first whose exclusive upper
    bound exceeds the LTV wins, so an LTV of exactly 60 lands in the <80 tier.

    Returns:
        Required score, or None when the LTV is above every tier and no
        credit score can compensate
    """
    for tier in criteria.ltv_tiers:
        if ltv < tier.max_ltv_exclusive:
            return tier.min_credit_score
    return None


def meets_lending_criteria(application: LoanApplication, criteria: LendingCriteria = DEFAULT_CRITERIA) -> bool:
    """
    Check credit score against borrowing amount and LTV.

    High-value loans (>= high_value_threshold) use a single strict tier:
    credit score >= 950 and LTV <= 60. Everything else goes through the LTV
    ladder.
    """
    ltv = application.ltv_percentage

    if application.borrowing_amount >= criteria.high_value_threshold:
        return (
            application.credit_score >= criteria.high_value_min_credit_score
            and ltv <= criteria.high_value_max_ltv
        )

    min_score = required_credit_score(ltv, criteria)
    if min_score is None:
        return False
    return application.credit_score >= min_score


def validate_application(application: LoanApplication) -> None:
    """
    Ensure the inputs can produce a meaningful LTV and score comparison.

    Raises:
        InvalidApplicationError: Listing every problem found
    """
    problems: List[str] = []

    if not math.isfinite(application.borrowing_amount) or application.borrowing_amount <= 0:
        problems.append(f"borrowing amount must be a positive number, got {application.borrowing_amount}")
    if not math.isfinite(application.asset_value) or application.asset_value <= 0:
        problems.append(f"asset value must be a positive number, got {application.asset_value}")
    if isinstance(application.credit_score, bool) or not isinstance(application.credit_score, int):
        problems.append(f"credit score must be a whole number, got {application.credit_score!r}")
    elif application.credit_score < 1:
        problems.append(f"credit score must be at least 1, got {application.credit_score}")

    if problems:
        raise InvalidApplicationError(problems)


def decide(
    application: LoanApplication,
    criteria: LendingCriteria = DEFAULT_CRITERIA,
    clock: Callable[[], datetime] = utc_now,
) -> ApplicationRecord:
    """
    Main entry point: evaluate an application and return the decided record.

    Flow (first match wins):
    1. Stamp the submission time
    2. Amount outside the lending range -> Rejected
    3. Inputs that cannot be assessed -> Error
    4. Credit score vs LTV/amount criteria -> Accepted or Rejected

    Never raises for bad inputs; they come back as an Error record so a batch
    keeps going.
    """
    submitted_at = clock()
    record = ApplicationRecord(application=application)

    if not math.isfinite(application.borrowing_amount):
        return record.with_decision(
            DecisionStatus.REJECTED,
            "The borrowing amount must be a finite number and does not fall within "
            "range of the business lending criteria.",
            submitted_at,
        )

    if not is_within_lending_range(application.borrowing_amount, criteria):
        return record.with_decision(
            DecisionStatus.REJECTED,
            f"The borrowing amount of {application.borrowing_amount:,.2f} does not fall "
            f"within range of the business lending criteria.",
            submitted_at,
        )

    try:
        validate_application(application)
    except InvalidApplicationError as e:
        return record.with_decision(
            DecisionStatus.ERROR,
            f"Application could not be assessed: {e}",
            submitted_at,
        )

    if meets_lending_criteria(application, criteria):
        return record.with_decision(DecisionStatus.ACCEPTED, ACCEPTED_TEXT, submitted_at)

    return record.with_decision(
        DecisionStatus.REJECTED,
        f"Application has been rejected because an LTV of {application.ltv_percentage:.2f}% "
        f"when borrowing {application.borrowing_amount:,.2f} with a credit score of "
        f"{application.credit_score} does not meet the lending criteria.",
        submitted_at,
    )

"""Unit tests for application records and LTV calculation"""

import pytest
from lending_platform.domain.exceptions import DecisionAlreadyMadeError
from lending_platform.domain.models import (
    ApplicationRecord,
    DecisionStatus,
    LoanApplication,
    calculate_ltv_percentage,
)


def test_ltv_percentage():
    """Test LTV is borrowing over asset value as a percentage"""
    assert calculate_ltv_percentage(500_000, 1_000_000) == 50
    assert calculate_ltv_percentage(500_000, 550_000) == pytest.approx(90.909, abs=1e-3)
    assert calculate_ltv_percentage(500_000, 833_333) > 60
    assert calculate_ltv_percentage(500_000, 833_334) < 60


@pytest.mark.parametrize(
    "borrowing_amount,asset_value",
    [
        (0, 1_000_000),
        (500_000, 0),
        (0, 0),
        (500_000, -1_000_000),
        (-500_000, 1_000_000),
        (500_000, float("nan")),
        (float("nan"), 1_000_000),
        (500_000, float("inf")),
        (float("-inf"), 1_000_000),
    ],
)
def test_ltv_percentage_unusable_values(borrowing_amount, asset_value):
    """Test LTV is 0 for zero, negative or non-finite inputs"""
    application = LoanApplication(borrowing_amount=borrowing_amount, asset_value=asset_value, credit_score=800)
    assert application.ltv_percentage == 0


def test_new_record_is_undecided():
    record = ApplicationRecord(application=LoanApplication(500_000, 1_000_000, 800))

    assert record.decision == DecisionStatus.UNDEFINED
    assert record.submitted_at is None
    assert record.is_complete is False
    assert record.ltv_percentage == 50


def test_with_decision_returns_new_record(fixed_clock):
    """Test deciding leaves the original record untouched"""
    record = ApplicationRecord(application=LoanApplication(500_000, 1_000_000, 800))
    decided = record.with_decision(DecisionStatus.ACCEPTED, "ok", fixed_clock())

    assert decided is not record
    assert decided.application_id == record.application_id
    assert decided.is_complete is True
    assert record.is_complete is False


def test_decision_cannot_be_made_twice(fixed_clock):
    """Test a decided record cannot move to another outcome"""
    record = ApplicationRecord(application=LoanApplication(500_000, 1_000_000, 800))
    decided = record.with_decision(DecisionStatus.REJECTED, "no", fixed_clock())

    with pytest.raises(DecisionAlreadyMadeError):
        decided.with_decision(DecisionStatus.ACCEPTED, "changed our minds", fixed_clock())


def test_decision_cannot_be_undefined(fixed_clock):
    record = ApplicationRecord(application=LoanApplication(500_000, 1_000_000, 800))

    with pytest.raises(ValueError):
        record.with_decision(DecisionStatus.UNDEFINED, "", fixed_clock())


def test_error_is_a_valid_outcome(fixed_clock):
    """Test Error can be assigned for failures outside the business rules"""
    record = ApplicationRecord(application=LoanApplication(500_000, 1_000_000, 800))
    failed = record.with_decision(DecisionStatus.ERROR, "downstream service unavailable", fixed_clock())

    assert failed.decision == DecisionStatus.ERROR
    assert failed.is_complete is True

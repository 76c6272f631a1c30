"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timezone
from typing import Callable
from fastapi.testclient import TestClient
from lending_platform.api.main import create_app
from lending_platform.domain.models import ApplicationRecord, DecisionStatus, LoanApplication


FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns the same instant"""
    return lambda: FIXED_NOW


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with a fresh application store"""
    return TestClient(create_app())


@pytest.fixture
def make_record() -> Callable[..., ApplicationRecord]:
    """Build a decided record with a chosen LTV and outcome"""

    def _make(
        borrowing_amount: float,
        asset_value: float,
        decision: DecisionStatus,
        credit_score: int = 800,
    ) -> ApplicationRecord:
        record = ApplicationRecord(
            application=LoanApplication(
                borrowing_amount=borrowing_amount,
                asset_value=asset_value,
                credit_score=credit_score,
            )
        )
        return record.with_decision(decision, "test decision", FIXED_NOW)

    return _make

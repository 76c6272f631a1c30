"""Unit tests for settings"""

from lending_platform.config import Settings
from lending_platform.domain.models import DEFAULT_LTV_TIERS


def test_default_lending_criteria():
    criteria = Settings().lending_criteria()

    assert criteria.min_borrowing_amount == 100_000
    assert criteria.max_borrowing_amount == 1_500_000
    assert criteria.high_value_threshold == 1_000_000
    assert criteria.high_value_min_credit_score == 950
    assert criteria.high_value_max_ltv == 60
    assert criteria.ltv_tiers == DEFAULT_LTV_TIERS


def test_lending_criteria_from_environment(monkeypatch):
    """Test thresholds can be overridden through environment variables"""
    monkeypatch.setenv("MAX_BORROWING_AMOUNT", "2000000")
    monkeypatch.setenv("HIGH_VALUE_MIN_CREDIT_SCORE", "975")

    criteria = Settings().lending_criteria()

    assert criteria.max_borrowing_amount == 2_000_000
    assert criteria.high_value_min_credit_score == 975

"""Domain models - pure Python dataclasses representing lending entities"""

import math
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from lending_platform.domain.exceptions import DecisionAlreadyMadeError


class DecisionStatus(str, Enum):
    """Outcome of a loan application"""

    UNDEFINED = "Undefined"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    ERROR = "Error"  # validation or infrastructure failure, not a business rejection


def calculate_ltv_percentage(borrowing_amount: float, asset_value: float) -> float:
    """
    Loan-to-value as a percentage.

    Defined as 0 when either value is zero, negative or not finite, so that
    unusable inputs never divide by zero or skew aggregate statistics.
    """
    if not (math.isfinite(borrowing_amount) and math.isfinite(asset_value)):
        return 0.0
    if borrowing_amount <= 0 or asset_value <= 0:
        return 0.0
    return borrowing_amount * 100 / asset_value


@dataclass(frozen=True)
class LoanApplication:
    """Financial attributes submitted for a loan"""

    borrowing_amount: float
    asset_value: float
    credit_score: int

    @property
    def ltv_percentage(self) -> float:
        return calculate_ltv_percentage(self.borrowing_amount, self.asset_value)


@dataclass(frozen=True)
class ApplicationRecord:
    """A loan application together with its decision outcome"""

    application: LoanApplication
    decision: DecisionStatus = DecisionStatus.UNDEFINED
    decision_text: str = ""
    submitted_at: Optional[datetime] = None
    application_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def borrowing_amount(self) -> float:
        return self.application.borrowing_amount

    @property
    def asset_value(self) -> float:
        return self.application.asset_value

    @property
    def credit_score(self) -> int:
        return self.application.credit_score

    @property
    def ltv_percentage(self) -> float:
        return self.application.ltv_percentage

    @property
    def is_complete(self) -> bool:
        return self.submitted_at is not None and self.decision != DecisionStatus.UNDEFINED

    def with_decision(
        self,
        decision: DecisionStatus,
        decision_text: str,
        submitted_at: datetime,
    ) -> "ApplicationRecord":
        """
        Return a copy of this record carrying a decision.

        A record is decided once: Undefined may move to Accepted, Rejected or
        Error, and nothing moves back.

        Raises:
            DecisionAlreadyMadeError: If this record already has a decision
            ValueError: If the requested decision is Undefined
        """
        if self.decision != DecisionStatus.UNDEFINED:
            raise DecisionAlreadyMadeError(
                f"Application {self.application_id} was already decided as {self.decision.value}"
            )
        if decision == DecisionStatus.UNDEFINED:
            raise ValueError("A decision cannot be reset to Undefined")

        return replace(
            self,
            decision=decision,
            decision_text=decision_text,
            submitted_at=submitted_at,
        )


@dataclass(frozen=True)
class LtvTier:
    """Credit score required while LTV stays strictly below max_ltv_exclusive"""

    max_ltv_exclusive: float
    min_credit_score: int


DEFAULT_LTV_TIERS: Tuple[LtvTier, ...] = (
    LtvTier(max_ltv_exclusive=60, min_credit_score=750),
    LtvTier(max_ltv_exclusive=80, min_credit_score=800),
    LtvTier(max_ltv_exclusive=90, min_credit_score=900),
)


@dataclass(frozen=True)
class LendingCriteria:
    """Underwriting thresholds applied by the decision engine"""

    min_borrowing_amount: float = 100_000
    max_borrowing_amount: float = 1_500_000
    high_value_threshold: float = 1_000_000
    high_value_min_credit_score: int = 950
    high_value_max_ltv: float = 60  # inclusive
    ltv_tiers: Tuple[LtvTier, ...] = DEFAULT_LTV_TIERS  # ascending, first match wins


@dataclass(frozen=True)
class ApplicationSummary:
    """Aggregate statistics over decided applications"""

    total_applications: int
    successful_applications: int
    rejected_applications: int
    errored_applications: int
    total_value_of_loans: float
    mean_ltv: float

"""Prometheus metrics for monitoring decision outcomes, loan value and LTV distribution"""

from prometheus_client import Counter, Histogram

from lending_platform.domain.models import ApplicationRecord, DecisionStatus

# Decision metrics
decision_counter = Counter(
    "lending_decision_total",
    "Total loan decisions made",
    ["outcome"],  # Accepted | Rejected | Error
)

accepted_loan_value_counter = Counter(
    "lending_accepted_loan_value_total",
    "Sum of borrowing amounts for accepted applications",
)

ltv_histogram = Histogram(
    "lending_application_ltv_percentage",
    "Loan-to-value percentage of decided applications",
    buckets=[40, 60, 80, 90, 100, 150],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(record: ApplicationRecord) -> None:
    """Record decision metrics for monitoring acceptance rates and written loan value"""
    decision_counter.labels(outcome=record.decision.value).inc()

    # Error outcomes carry unusable inputs, keep them out of the LTV distribution
    if record.decision == DecisionStatus.ERROR:
        return

    ltv_histogram.observe(record.ltv_percentage)
    if record.decision == DecisionStatus.ACCEPTED:
        accepted_loan_value_counter.inc(record.borrowing_amount)

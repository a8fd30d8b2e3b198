"""Prometheus metrics for monitoring risk computations and API latency"""

from prometheus_client import Counter, Histogram

# Risk engine metrics
risk_profile_counter = Counter(
    "credit_sentinel_risk_profile_total",
    "Risk profiles computed by the loan store",
    ["operation", "level"],  # create | update | seed ; Low | Medium | High | Critical
)

risk_score_histogram = Histogram(
    "credit_sentinel_risk_score",
    "Distribution of computed risk scores",
    buckets=[0, 25, 50, 70, 85, 100],
)

rule_hit_counter = Counter(
    "credit_sentinel_rule_hits_total",
    "Risk factors emitted by rule id",
    ["rule_id"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_risk_profile(operation: str, level: str, score: int, rule_ids: list[str]) -> None:
    """Record a risk computation for monitoring level distribution and rule hit rates"""
    risk_profile_counter.labels(operation=operation, level=level).inc()
    risk_score_histogram.observe(score)
    for rule_id in rule_ids:
        rule_hit_counter.labels(rule_id=rule_id).inc()

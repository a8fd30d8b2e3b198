"""Portfolio-level KPI aggregation over already-scored loans"""

from typing import Iterable
from credit_sentinel.domain.models import Loan, LoanStatus, PortfolioKPI, RiskLevel

WATCHLIST_STATUSES = frozenset({LoanStatus.WATCHLIST, LoanStatus.DISTRESSED})
AT_RISK_LEVELS = frozenset({RiskLevel.HIGH, RiskLevel.CRITICAL})


def calculate_portfolio_kpis(loans: Iterable[Loan]) -> PortfolioKPI:
    """
    Summarize the loan book for the dashboard.

    Risk figures are read from each loan's stored profile, never recomputed.
    Loans without a profile count toward exposure only.
    """
    loans = list(loans)
    scored = [loan for loan in loans if loan.risk_profile is not None]

    total_exposure = sum(loan.amount for loan in loans)
    avg_risk_score = (
        sum(loan.risk_profile.score for loan in scored) / len(scored) if scored else 0.0
    )
    watchlist_count = sum(1 for loan in loans if loan.status in WATCHLIST_STATUSES)
    loans_at_risk_value = sum(
        loan.amount for loan in scored if loan.risk_profile.level in AT_RISK_LEVELS
    )

    return PortfolioKPI(
        total_exposure=total_exposure,
        avg_risk_score=avg_risk_score,
        watchlist_count=watchlist_count,
        loans_at_risk_value=loans_at_risk_value,
    )

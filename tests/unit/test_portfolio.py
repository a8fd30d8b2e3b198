"""Unit tests for portfolio KPI aggregation"""

from dataclasses import replace
from credit_sentinel.domain.models import CovenantStatus, LoanStatus
from credit_sentinel.domain.portfolio import calculate_portfolio_kpis
from credit_sentinel.domain.risk_engine import compute_risk_profile


def scored(loan, now):
    return replace(loan, risk_profile=compute_risk_profile(loan, now=now))


def test_empty_portfolio():
    kpi = calculate_portfolio_kpis([])

    assert kpi.total_exposure == 0
    assert kpi.avg_risk_score == 0
    assert kpi.watchlist_count == 0
    assert kpi.loans_at_risk_value == 0


def test_portfolio_kpis(make_loan, now):
    safe = scored(make_loan("LN-1", amount=1_000_000), now)  # 100, Low
    critical = scored(
        make_loan(
            "LN-2",
            industry="Retail",
            credit_rating="BBB",
            covenant_status=CovenantStatus.BREACH,
            status=LoanStatus.WATCHLIST,
            days_to_maturity=30,
            amount=2_000_000,
        ),
        now,
    )  # 35, Critical
    high = scored(
        make_loan(
            "LN-3",
            industry="Hospitality",
            credit_rating="CCC",
            covenant_status=CovenantStatus.WAIVER,
            status=LoanStatus.DISTRESSED,
            days_to_maturity=400,
            amount=500_000,
        ),
        now,
    )  # 50, High

    kpi = calculate_portfolio_kpis([safe, critical, high])

    assert kpi.total_exposure == 3_500_000
    assert kpi.avg_risk_score == (100 + 35 + 50) / 3
    assert kpi.watchlist_count == 2
    assert kpi.loans_at_risk_value == 2_500_000


def test_unscored_loans_count_toward_exposure_only(make_loan, now):
    unscored = make_loan("LN-1", amount=750_000, status=LoanStatus.WATCHLIST)
    safe = scored(make_loan("LN-2", amount=250_000), now)

    kpi = calculate_portfolio_kpis([unscored, safe])

    assert kpi.total_exposure == 1_000_000
    assert kpi.avg_risk_score == 100
    assert kpi.watchlist_count == 1
    assert kpi.loans_at_risk_value == 0


def test_kpis_read_stored_profiles_without_rescoring(make_loan, now):
    """A stale profile is reported as stored"""
    loan = scored(make_loan("LN-1", amount=100), now)
    stale = replace(loan, borrower=replace(loan.borrower, credit_rating="CCC"))

    kpi = calculate_portfolio_kpis([stale])

    assert kpi.avg_risk_score == 100
    assert kpi.loans_at_risk_value == 0

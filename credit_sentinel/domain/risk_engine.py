"""Risk scoring engine - deterministic, explainable loan risk profiles"""

from datetime import datetime
from typing import Callable, List, Optional, Tuple
from credit_sentinel.domain.models import (
    CovenantStatus,
    FactorImpact,
    Loan,
    LoanStatus,
    RiskFactor,
    RiskLevel,
    RiskProfile,
)
from credit_sentinel.utils.date_utils import days_until, utc_now

BASE_SCORE = 100
MIN_SCORE = 0
MAX_SCORE = 100

HIGH_RISK_INDUSTRIES = frozenset({"Retail", "Hospitality", "Construction"})
STRONG_RATINGS = frozenset({"AAA", "AA", "A"})
MODERATE_RATINGS = frozenset({"BBB", "BB"})
MATURITY_WARNING_DAYS = 90

Rule = Callable[[Loan, datetime], Optional[RiskFactor]]


def industry_rule(loan: Loan, now: datetime) -> Optional[RiskFactor]:
    """Every loan gets exactly one industry factor"""
    industry = loan.borrower.industry
    if industry in HIGH_RISK_INDUSTRIES:
        return RiskFactor("IND-01", f"High-risk industry sector: {industry}", FactorImpact.NEGATIVE, -15)
    return RiskFactor("IND-02", f"Stable industry sector: {industry}", FactorImpact.POSITIVE, 0)


def covenant_rule(loan: Loan, now: datetime) -> Optional[RiskFactor]:
    status = loan.covenant_status
    if status == CovenantStatus.BREACH:
        return RiskFactor("COV-01", "Active Covenant Breach detected", FactorImpact.NEGATIVE, -30)
    if status == CovenantStatus.WAIVER:
        return RiskFactor("COV-02", "Operating under Covenant Waiver", FactorImpact.NEGATIVE, -10)
    # Compliant, and any unrecognized status, contributes nothing
    return None


def credit_rating_rule(loan: Loan, now: datetime) -> Optional[RiskFactor]:
    """
    Map the borrower's agency grade to a factor.

    Only exact grades in the strong/moderate sets are recognized; everything
    else (notched grades like "A-", junk grades, typos) falls to the poor arm.
    """
    rating = loan.borrower.credit_rating
    if rating in STRONG_RATINGS:
        return RiskFactor("CR-01", f"Strong Credit Rating ({rating})", FactorImpact.POSITIVE, 0)
    if rating in MODERATE_RATINGS:
        return RiskFactor("CR-02", f"Moderate Credit Rating ({rating})", FactorImpact.NEGATIVE, -10)
    return RiskFactor("CR-03", f"Poor Credit Rating ({rating})", FactorImpact.NEGATIVE, -25)


def maturity_rule(loan: Loan, now: datetime) -> Optional[RiskFactor]:
    """
    Flag facilities approaching maturity that have not been repaid.

    Past-due maturities count as within the window. A maturity date that
    cannot be read as a date is treated as outside it.
    """
    if loan.status == LoanStatus.REPAID:
        return None
    remaining = days_until(loan.maturity_date, now)
    if remaining is None or remaining >= MATURITY_WARNING_DAYS:
        return None
    return RiskFactor("MAT-01", f"Maturity within {MATURITY_WARNING_DAYS} days", FactorImpact.NEGATIVE, -10)


# Evaluation order determines the order of factors in the profile
RULES: Tuple[Rule, ...] = (industry_rule, covenant_rule, credit_rating_rule, maturity_rule)


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def classify_score(score: int) -> RiskLevel:
    """
    Map a clamped score to its risk band.

    Bands are inclusive on their lower bound:
    - 85+:   Low
    - 70-84: Medium
    - 50-69: High
    - <50:   Critical
    """
    if score < 50:
        return RiskLevel.CRITICAL
    elif score < 70:
        return RiskLevel.HIGH
    elif score < 85:
        return RiskLevel.MEDIUM
    else:
        return RiskLevel.LOW


def evaluate_rules(loan: Loan, now: datetime) -> List[RiskFactor]:
    """Run every rule once, in order, keeping the factors that fired"""
    factors: List[RiskFactor] = []
    for rule in RULES:
        factor = rule(loan, now)
        if factor is not None:
            factors.append(factor)
    return factors


def compute_risk_profile(loan: Loan, now: Optional[datetime] = None) -> RiskProfile:
    """
    Main entry point: derive a fresh risk profile for a loan.

    Pure and total: the loan is not modified and no input raises. The score
    is the base score plus every factor's score impact, clamped to 0-100.
    `now` overrides the clock used for maturity proximity and the timestamp.
    """
    if now is None:
        now = utc_now()

    factors = evaluate_rules(loan, now)
    score = clamp_score(BASE_SCORE + sum(f.score_impact for f in factors))

    return RiskProfile(
        score=score,
        level=classify_score(score),
        factors=tuple(factors),
        last_updated=now,
    )

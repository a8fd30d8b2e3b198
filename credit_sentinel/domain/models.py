"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Tuple


class LoanStatus(str, Enum):
    """Lifecycle state of a credit facility"""

    DRAFT = "Draft"
    ACTIVE = "Active"
    WATCHLIST = "Watchlist"
    DISTRESSED = "Distressed"
    REPAID = "Repaid"


class CovenantStatus(str, Enum):
    """Covenant compliance state reported for a loan"""

    COMPLIANT = "Compliant"
    BREACH = "Breach"
    WAIVER = "Waiver"


class RiskLevel(str, Enum):
    """Risk band derived from a score"""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class FactorImpact(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


@dataclass(frozen=True)
class Borrower:
    """Borrower snapshot embedded in a loan"""

    id: str
    name: str
    industry: str
    credit_rating: str  # agency-style grade, e.g. "AAA".."CCC"
    annual_revenue: float


@dataclass(frozen=True)
class RiskFactor:
    """Verdict of a single scoring rule"""

    rule_id: str
    description: str
    impact: FactorImpact
    score_impact: int


@dataclass(frozen=True)
class RiskProfile:
    """Output of the risk engine, owned by exactly one loan"""

    score: int  # 0-100, 100 is safest
    level: RiskLevel
    factors: Tuple[RiskFactor, ...]
    last_updated: datetime


@dataclass
class Loan:
    """Credit facility with its borrower and latest risk profile"""

    id: str
    borrower: Borrower
    amount: float
    currency: str
    interest_rate: float
    start_date: date
    maturity_date: date
    status: LoanStatus
    covenant_status: CovenantStatus
    risk_profile: Optional[RiskProfile] = None
    notes: str = ""
    documents: List[str] = field(default_factory=list)


@dataclass
class PortfolioKPI:
    """Aggregate figures for the loan book"""

    total_exposure: float
    avg_risk_score: float
    watchlist_count: int
    loans_at_risk_value: float

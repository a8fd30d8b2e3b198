"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import List, Optional

from credit_sentinel.domain.models import (
    Borrower,
    CovenantStatus,
    FactorImpact,
    Loan,
    LoanStatus,
    PortfolioKPI,
    RiskLevel,
    RiskProfile,
)


class BorrowerSchema(BaseModel):
    """Borrower snapshot embedded in a loan"""

    id: str = Field(..., min_length=1, description="Borrower identifier")
    name: str = Field(..., min_length=1)
    industry: str = Field(..., min_length=1, description="Free-form sector label")
    credit_rating: str = Field(..., min_length=1, description="Agency-style grade, e.g. AAA..CCC")
    annual_revenue: float = Field(..., ge=0)


class LoanRequest(BaseModel):
    """Request body for POST /v1/loans and PUT /v1/loans/{loan_id}"""

    id: str = Field(..., min_length=1, description="Loan identifier")
    borrower: BorrowerSchema
    amount: float = Field(..., gt=0)
    currency: str = Field(..., min_length=3, max_length=3)
    interest_rate: float = Field(..., ge=0)
    start_date: date
    maturity_date: date
    status: LoanStatus = LoanStatus.ACTIVE
    covenant_status: CovenantStatus = CovenantStatus.COMPLIANT
    notes: str = ""
    documents: List[str] = Field(default_factory=list)

    def to_domain(self) -> Loan:
        """Build a domain loan; any client-supplied risk profile is never accepted"""
        return Loan(
            id=self.id,
            borrower=Borrower(**self.borrower.model_dump()),
            amount=self.amount,
            currency=self.currency,
            interest_rate=self.interest_rate,
            start_date=self.start_date,
            maturity_date=self.maturity_date,
            status=self.status,
            covenant_status=self.covenant_status,
            notes=self.notes,
            documents=list(self.documents),
        )


class RiskFactorSchema(BaseModel):
    """One rule's verdict"""

    rule_id: str
    description: str
    impact: FactorImpact
    score_impact: int


class RiskProfileSchema(BaseModel):
    """Response for GET /v1/loans/{loan_id}/risk"""

    score: int
    level: RiskLevel
    factors: List[RiskFactorSchema]
    last_updated: datetime

    @classmethod
    def from_domain(cls, profile: RiskProfile) -> "RiskProfileSchema":
        return cls(
            score=profile.score,
            level=profile.level,
            factors=[
                RiskFactorSchema(
                    rule_id=f.rule_id,
                    description=f.description,
                    impact=f.impact,
                    score_impact=f.score_impact,
                )
                for f in profile.factors
            ],
            last_updated=profile.last_updated,
        )


class LoanResponse(BaseModel):
    """Stored loan with its risk profile"""

    id: str
    borrower: BorrowerSchema
    amount: float
    currency: str
    interest_rate: float
    start_date: date
    maturity_date: date
    status: LoanStatus
    covenant_status: CovenantStatus
    risk_profile: Optional[RiskProfileSchema] = None
    notes: str
    documents: List[str]

    @classmethod
    def from_domain(cls, loan: Loan) -> "LoanResponse":
        return cls(
            id=loan.id,
            borrower=BorrowerSchema(
                id=loan.borrower.id,
                name=loan.borrower.name,
                industry=loan.borrower.industry,
                credit_rating=loan.borrower.credit_rating,
                annual_revenue=loan.borrower.annual_revenue,
            ),
            amount=loan.amount,
            currency=loan.currency,
            interest_rate=loan.interest_rate,
            start_date=loan.start_date,
            maturity_date=loan.maturity_date,
            status=loan.status,
            covenant_status=loan.covenant_status,
            risk_profile=RiskProfileSchema.from_domain(loan.risk_profile) if loan.risk_profile else None,
            notes=loan.notes,
            documents=loan.documents,
        )


class LoanListResponse(BaseModel):
    """Response for GET /v1/loans"""

    loans: List[LoanResponse]
    count: int


class PortfolioKPIResponse(BaseModel):
    """Response for GET /v1/portfolio/kpis"""

    total_exposure: float
    avg_risk_score: float
    watchlist_count: int
    loans_at_risk_value: float
    loan_count: int

    @classmethod
    def from_domain(cls, kpi: PortfolioKPI, loan_count: int) -> "PortfolioKPIResponse":
        return cls(
            total_exposure=kpi.total_exposure,
            avg_risk_score=kpi.avg_risk_score,
            watchlist_count=kpi.watchlist_count,
            loans_at_risk_value=kpi.loans_at_risk_value,
            loan_count=loan_count,
        )

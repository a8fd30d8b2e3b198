"""GET /v1/portfolio/kpis - Portfolio-level risk summary"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from credit_sentinel.api.v1.schemas import PortfolioKPIResponse
from credit_sentinel.infrastructure.database.session import get_db
from credit_sentinel.infrastructure.database.repositories import LoanRepository
from credit_sentinel.domain.portfolio import calculate_portfolio_kpis

router = APIRouter()


@router.get("/portfolio/kpis", response_model=PortfolioKPIResponse)
def get_portfolio_kpis(db: Session = Depends(get_db)):
    """
    Aggregate exposure and risk across every stored loan.

    Returns:
        Total exposure, average score, watchlist count and value at risk
    """
    loans = LoanRepository(db).list_loans()
    kpi = calculate_portfolio_kpis(loans)
    return PortfolioKPIResponse.from_domain(kpi, loan_count=len(loans))

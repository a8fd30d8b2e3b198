"""Demo portfolio loaded into an empty store on first start"""

from datetime import date
from typing import List
from sqlalchemy.orm import Session
from credit_sentinel.domain.models import Borrower, CovenantStatus, Loan, LoanStatus
from credit_sentinel.infrastructure.database.repositories import LoanRepository

DEMO_LOANS: List[Loan] = [
    Loan(
        id="LN-2024-001",
        borrower=Borrower("BR-101", "Acme Logistics", "Transportation", "BBB", 50_000_000),
        amount=1_500_000,
        currency="USD",
        interest_rate=5.5,
        start_date=date(2023, 1, 15),
        maturity_date=date(2026, 1, 15),
        status=LoanStatus.ACTIVE,
        covenant_status=CovenantStatus.COMPLIANT,
        notes="Borrower showing steady growth.",
        documents=["LoanAgreement.pdf", "Q3_Financials.xlsx"],
    ),
    Loan(
        id="LN-2023-882",
        borrower=Borrower("BR-105", "Summit Retail Group", "Retail", "B-", 12_000_000),
        amount=5_000_000,
        currency="GBP",
        interest_rate=7.2,
        start_date=date(2022, 6, 1),
        maturity_date=date(2025, 6, 1),
        status=LoanStatus.WATCHLIST,
        covenant_status=CovenantStatus.BREACH,
        notes="Missed EBITDA target for Q2. Watchlist triggered.",
        documents=["Covenant_Compliance_Cert.pdf"],
    ),
    Loan(
        id="LN-2024-112",
        borrower=Borrower("BR-109", "TechNova Solutions", "Technology", "A-", 85_000_000),
        amount=10_000_000,
        currency="USD",
        interest_rate=4.8,
        start_date=date(2024, 2, 10),
        maturity_date=date(2027, 2, 10),
        status=LoanStatus.ACTIVE,
        covenant_status=CovenantStatus.COMPLIANT,
        notes="High growth potential.",
        documents=["Term_Sheet.pdf", "IP_Valuation.pdf"],
    ),
    Loan(
        id="LN-2021-055",
        borrower=Borrower("BR-202", "BlueWater Hospitality", "Hospitality", "CCC", 5_000_000),
        amount=2_500_000,
        currency="EUR",
        interest_rate=8.5,
        start_date=date(2021, 3, 20),
        maturity_date=date(2024, 3, 20),
        status=LoanStatus.DISTRESSED,
        covenant_status=CovenantStatus.BREACH,
        notes="Severe cash flow issues.",
        documents=["Restructuring_Plan.pdf"],
    ),
]


def seed_portfolio(db: Session) -> int:
    """
    Score and insert the demo loans if the store is empty.

    Returns the number of loans created (0 when the store already had data).
    """
    repo = LoanRepository(db)
    if repo.count_loans() > 0:
        return 0

    for loan in DEMO_LOANS:
        repo.create_loan(loan, operation="seed")
    return len(DEMO_LOANS)

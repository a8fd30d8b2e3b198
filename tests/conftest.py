"""Pytest fixtures for testing"""

import pytest
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from credit_sentinel.api.main import create_app
from credit_sentinel.infrastructure.database.models import Base
from credit_sentinel.infrastructure.database.session import get_db
from credit_sentinel.domain.models import Borrower, CovenantStatus, Loan, LoanStatus


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Fixed clock for engine tests
NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_loan() -> Callable[..., Loan]:
    """Factory for loans with safe defaults; override any field by keyword"""

    def _make_loan(
        loan_id: str = "LN-TEST-001",
        industry: str = "Technology",
        credit_rating: str = "AAA",
        covenant_status=CovenantStatus.COMPLIANT,
        status=LoanStatus.ACTIVE,
        maturity_date=None,
        days_to_maturity: int = 365,
        amount: float = 1_000_000,
        borrower_name: str = "Test Borrower",
    ) -> Loan:
        if maturity_date is None:
            maturity_date = NOW.date() + timedelta(days=days_to_maturity)
        return Loan(
            id=loan_id,
            borrower=Borrower(
                id=f"BR-{loan_id}",
                name=borrower_name,
                industry=industry,
                credit_rating=credit_rating,
                annual_revenue=25_000_000,
            ),
            amount=amount,
            currency="USD",
            interest_rate=5.0,
            start_date=date(2023, 1, 1),
            maturity_date=maturity_date,
            status=status,
            covenant_status=covenant_status,
            notes="",
            documents=["LoanAgreement.pdf"],
        )

    return _make_loan

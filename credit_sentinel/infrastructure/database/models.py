"""SQLAlchemy ORM models for the loan book"""

from sqlalchemy import Column, String, Float, DateTime, Date, Integer, Text, JSON
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class LoanRecord(Base):
    """Loan with embedded borrower snapshot and its latest risk profile"""

    __tablename__ = "loan"

    id = Column(String(64), primary_key=True)

    # Borrower snapshot
    borrower_id = Column(String(64), nullable=False, index=True)
    borrower_name = Column(Text, nullable=False)
    industry = Column(Text, nullable=False)
    credit_rating = Column(String(16), nullable=False)
    annual_revenue = Column(Float, nullable=False)

    # Facility terms
    amount = Column(Float, nullable=False)
    currency = Column(String(3), nullable=False)
    interest_rate = Column(Float, nullable=False)
    start_date = Column(Date, nullable=False)
    maturity_date = Column(Date, nullable=False)
    status = Column(String(16), nullable=False, index=True)
    covenant_status = Column(String(16), nullable=False)
    notes = Column(Text, nullable=False, default="")
    documents = Column(JSON, nullable=False)

    # Risk profile, replaced wholesale on every create/update
    risk_score = Column(Integer, nullable=True, index=True)
    risk_level = Column(String(16), nullable=True)
    risk_factors = Column(JSON, nullable=True)
    risk_last_updated = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

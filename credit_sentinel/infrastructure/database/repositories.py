"""Data access layer for loans; recomputes risk on every write"""

import time
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session
from credit_sentinel.infrastructure.database.models import LoanRecord
from credit_sentinel.infrastructure.observability.logging import log_risk_profile
from credit_sentinel.infrastructure.observability.metrics import record_risk_profile
from credit_sentinel.domain.exceptions import DuplicateLoanError, LoanNotFoundError
from credit_sentinel.domain.models import (
    Borrower,
    CovenantStatus,
    FactorImpact,
    Loan,
    LoanStatus,
    RiskFactor,
    RiskLevel,
    RiskProfile,
)
from credit_sentinel.domain.risk_engine import compute_risk_profile


LIKE_ESCAPE = "\\"


def _escape_like(value: str) -> str:
    """Make LIKE wildcards in user input match literally"""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def _factors_to_json(profile: RiskProfile) -> list:
    return [
        {
            "rule_id": f.rule_id,
            "description": f.description,
            "impact": f.impact.value,
            "score_impact": f.score_impact,
        }
        for f in profile.factors
    ]


def _record_to_profile(record: LoanRecord) -> Optional[RiskProfile]:
    if record.risk_score is None:
        return None

    last_updated = record.risk_last_updated
    # SQLite drops tzinfo on the way back
    if last_updated is not None and last_updated.tzinfo is None:
        last_updated = last_updated.replace(tzinfo=timezone.utc)

    return RiskProfile(
        score=record.risk_score,
        level=RiskLevel(record.risk_level),
        factors=tuple(
            RiskFactor(
                rule_id=f["rule_id"],
                description=f["description"],
                impact=FactorImpact(f["impact"]),
                score_impact=f["score_impact"],
            )
            for f in (record.risk_factors or [])
        ),
        last_updated=last_updated,
    )


def record_to_loan(record: LoanRecord) -> Loan:
    """Map a stored row back to the domain model"""
    return Loan(
        id=record.id,
        borrower=Borrower(
            id=record.borrower_id,
            name=record.borrower_name,
            industry=record.industry,
            credit_rating=record.credit_rating,
            annual_revenue=record.annual_revenue,
        ),
        amount=record.amount,
        currency=record.currency,
        interest_rate=record.interest_rate,
        start_date=record.start_date,
        maturity_date=record.maturity_date,
        status=LoanStatus(record.status),
        covenant_status=CovenantStatus(record.covenant_status),
        risk_profile=_record_to_profile(record),
        notes=record.notes or "",
        documents=list(record.documents or []),
    )


def _apply_loan(record: LoanRecord, loan: Loan) -> None:
    """Copy every loan field, including its risk profile, onto a row"""
    record.borrower_id = loan.borrower.id
    record.borrower_name = loan.borrower.name
    record.industry = loan.borrower.industry
    record.credit_rating = loan.borrower.credit_rating
    record.annual_revenue = loan.borrower.annual_revenue
    record.amount = loan.amount
    record.currency = loan.currency
    record.interest_rate = loan.interest_rate
    record.start_date = loan.start_date
    record.maturity_date = loan.maturity_date
    record.status = LoanStatus(loan.status).value
    record.covenant_status = CovenantStatus(loan.covenant_status).value
    record.notes = loan.notes
    record.documents = list(loan.documents)

    profile = loan.risk_profile
    record.risk_score = profile.score
    record.risk_level = profile.level.value
    record.risk_factors = _factors_to_json(profile)
    record.risk_last_updated = profile.last_updated


class LoanRepository:
    """Repository for loans; the only writer of stored risk profiles"""

    def __init__(self, db: Session):
        self.db = db

    def _score(self, loan: Loan, operation: str, now: Optional[datetime]) -> Loan:
        """Return a copy of the loan carrying a freshly computed risk profile"""
        start_time = time.time()
        profile = compute_risk_profile(loan, now=now)
        duration_ms = (time.time() - start_time) * 1000

        rule_ids = [f.rule_id for f in profile.factors]
        record_risk_profile(operation, profile.level.value, profile.score, rule_ids)
        log_risk_profile(loan.id, operation, profile.score, profile.level.value, rule_ids, duration_ms)

        return replace(loan, risk_profile=profile)

    def create_loan(self, loan: Loan, now: Optional[datetime] = None, operation: str = "create") -> Loan:
        """Score and persist a new loan"""
        if self.db.get(LoanRecord, loan.id) is not None:
            raise DuplicateLoanError(loan.id)

        scored = self._score(loan, operation, now)
        record = LoanRecord(id=scored.id)
        _apply_loan(record, scored)
        self.db.add(record)
        self.db.flush()  # Surface constraint errors without committing
        return scored

    def update_loan(self, loan: Loan, now: Optional[datetime] = None) -> Loan:
        """Rescore and overwrite an existing loan"""
        record = self.db.get(LoanRecord, loan.id)
        if record is None:
            raise LoanNotFoundError(loan.id)

        scored = self._score(loan, "update", now)
        _apply_loan(record, scored)
        self.db.flush()
        return scored

    def get_loan(self, loan_id: str) -> Optional[Loan]:
        """Fetch a single loan"""
        record = self.db.get(LoanRecord, loan_id)
        return record_to_loan(record) if record is not None else None

    def list_loans(self, status: Optional[LoanStatus] = None, search: Optional[str] = None) -> List[Loan]:
        """Fetch loans, optionally filtered by status and borrower name / id substring"""
        query = self.db.query(LoanRecord)
        if status is not None:
            query = query.filter(LoanRecord.status == LoanStatus(status).value)
        if search:
            pattern = f"%{_escape_like(search.lower())}%"
            query = query.filter(
                or_(
                    func.lower(LoanRecord.borrower_name).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(LoanRecord.id).like(pattern, escape=LIKE_ESCAPE),
                )
            )
        return [record_to_loan(r) for r in query.order_by(LoanRecord.id).all()]

    def count_loans(self) -> int:
        return self.db.query(LoanRecord).count()

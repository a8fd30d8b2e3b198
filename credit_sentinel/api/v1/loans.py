"""/v1/loans - loan origination, update and retrieval"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from credit_sentinel.api.v1.schemas import LoanListResponse, LoanRequest, LoanResponse, RiskProfileSchema
from credit_sentinel.api.dependencies import get_request_id
from credit_sentinel.infrastructure.database.session import get_db
from credit_sentinel.infrastructure.database.repositories import LoanRepository
from credit_sentinel.domain.exceptions import DuplicateLoanError, LoanNotFoundError
from credit_sentinel.domain.models import LoanStatus

router = APIRouter()


@router.post("/loans", response_model=LoanResponse, status_code=201)
def create_loan(request_body: LoanRequest, request: Request, db: Session = Depends(get_db)):
    """
    Originate a loan.

    The risk profile is computed from the submitted fields and stored with
    the loan in the same transaction.
    """
    request_id = get_request_id(request)

    try:
        loan = LoanRepository(db).create_loan(request_body.to_domain())
        db.commit()
        return LoanResponse.from_domain(loan)

    except DuplicateLoanError as e:
        db.rollback()
        logging.warning(f"Duplicate loan: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.put("/loans/{loan_id}", response_model=LoanResponse)
def update_loan(loan_id: str, request_body: LoanRequest, request: Request, db: Session = Depends(get_db)):
    """
    Replace a loan's fields and recompute its risk profile.

    The previous risk profile is discarded, never patched.
    """
    request_id = get_request_id(request)

    if request_body.id != loan_id:
        raise HTTPException(status_code=400, detail="Loan ID in body does not match path")

    try:
        loan = LoanRepository(db).update_loan(request_body.to_domain())
        db.commit()
        return LoanResponse.from_domain(loan)

    except LoanNotFoundError as e:
        db.rollback()
        logging.warning(f"Loan not found: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/loans", response_model=LoanListResponse)
def list_loans(
    status: Optional[LoanStatus] = Query(None, description="Only loans in this status"),
    search: Optional[str] = Query(None, description="Substring of borrower name or loan ID"),
    db: Session = Depends(get_db),
):
    """Retrieve the loan book, ordered by loan ID"""
    loans = LoanRepository(db).list_loans(status=status, search=search)
    return LoanListResponse(loans=[LoanResponse.from_domain(loan) for loan in loans], count=len(loans))


@router.get("/loans/{loan_id}", response_model=LoanResponse)
def get_loan(loan_id: str, db: Session = Depends(get_db)):
    loan = LoanRepository(db).get_loan(loan_id)
    if loan is None:
        raise HTTPException(status_code=404, detail="Loan not found")
    return LoanResponse.from_domain(loan)


@router.get("/loans/{loan_id}/risk", response_model=RiskProfileSchema)
def get_loan_risk(loan_id: str, db: Session = Depends(get_db)):
    """
    Retrieve the stored risk profile of a loan.

    Returns:
        Score, level and the ordered factors explaining the score
    """
    loan = LoanRepository(db).get_loan(loan_id)
    if loan is None or loan.risk_profile is None:
        raise HTTPException(status_code=404, detail="Loan not found")
    return RiskProfileSchema.from_domain(loan.risk_profile)

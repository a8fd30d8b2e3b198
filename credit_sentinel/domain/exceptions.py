"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class LoanNotFoundError(DomainException):
    """No loan is stored under the requested id"""

    def __init__(self, loan_id: str):
        super().__init__(f"Loan {loan_id} not found")
        self.loan_id = loan_id


class DuplicateLoanError(DomainException):
    """A loan with the same id already exists"""

    def __init__(self, loan_id: str):
        super().__init__(f"Loan {loan_id} already exists")
        self.loan_id = loan_id

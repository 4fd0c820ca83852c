"""Domain-specific exceptions"""

from typing import Optional


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class AccountConflictError(DomainException):
    """Account number is already bound to a different customer name"""

    def __init__(self, account_number: str):
        self.account_number = account_number
        super().__init__("Account number already exists with a different customer name")


class DuplicateDepositError(DomainException):
    """Identical deposit was already registered today for the account"""

    def __init__(self, account_number: Optional[str] = None):
        self.account_number = account_number
        super().__init__(
            "A deposit with identical parameters has already been registered today for this account"
        )


class CustomerAlreadyExistsError(DomainException):
    """Another transaction inserted a customer with the same account number first"""

    def __init__(self, account_number: str):
        self.account_number = account_number
        super().__init__(f"Customer with account number {account_number} was created concurrently")

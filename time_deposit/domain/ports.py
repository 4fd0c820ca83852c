"""Persistence contracts the domain layer depends on"""

from typing import List, Optional, Protocol
from time_deposit.domain.models import Customer, DepositDetail, TimeDeposit


class CustomerStore(Protocol):
    def find_customer_by_account_number(self, account_number: str, for_update: bool = False) -> Optional[Customer]: ...

    def save_customer(self, customer: Customer) -> Customer:
        """Persist a new customer and return it with its id assigned.

        Raises CustomerAlreadyExistsError if the account number is already taken.
        """
        ...


class DepositStore(Protocol):
    def find_deposits_by_account_number(self, account_number: str) -> List[TimeDeposit]: ...

    def save_deposit(self, deposit: TimeDeposit) -> TimeDeposit:
        """Persist a deposit and return it with its id assigned.

        Raises DuplicateDepositError if an identical deposit for the same day exists.
        """
        ...

    def find_all_deposits(self) -> List[DepositDetail]: ...


class UnitOfWork(Protocol):
    """One transaction scope spanning both stores"""

    customers: CustomerStore
    deposits: DepositStore

    def commit(self) -> None: ...

    def rollback(self) -> None: ...

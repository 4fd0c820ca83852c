"""Data access layer for customers and time deposits"""

from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from time_deposit.infrastructure.database.models import CustomerRecord, TimeDepositRecord
from time_deposit.domain.exceptions import CustomerAlreadyExistsError, DuplicateDepositError
from time_deposit.domain.models import Customer, DepositDetail, TimeDeposit


def _to_customer(row: CustomerRecord) -> Customer:
    return Customer(id=row.id, account_number=row.account_number, customer_name=row.customer_name)


def _to_deposit(row: TimeDepositRecord) -> TimeDeposit:
    return TimeDeposit(
        id=row.id,
        customer_id=row.customer_id,
        amount=row.amount,
        interest_rate=row.interest_rate,
        term_days=row.term_days,
        application_date=row.application_date,
        maturity_date=row.maturity_date,
        interest_earned=row.interest_earned,
        status=row.status,
    )


class CustomerRepository:
    """Repository for customers"""

    def __init__(self, db: Session):
        self.db = db

    def find_customer_by_account_number(self, account_number: str, for_update: bool = False) -> Optional[Customer]:
        """Fetch customer by its unique account number, optionally locking the row"""
        query = self.db.query(CustomerRecord).filter(CustomerRecord.account_number == account_number)
        if for_update:
            query = query.with_for_update()
        row = query.first()
        return _to_customer(row) if row else None

    def save_customer(self, customer: Customer) -> Customer:
        """Insert a new customer; raises CustomerAlreadyExistsError on account number collision"""
        db_customer = CustomerRecord(
            account_number=customer.account_number,
            customer_name=customer.customer_name,
        )
        self.db.add(db_customer)
        try:
            self.db.flush()  # Get ID without committing
        except IntegrityError as e:
            raise CustomerAlreadyExistsError(customer.account_number) from e
        return _to_customer(db_customer)


class DepositRepository:
    """Repository for time deposits"""

    def __init__(self, db: Session):
        self.db = db

    def find_deposits_by_account_number(self, account_number: str) -> List[TimeDeposit]:
        """Fetch every deposit owned by the customer with this account number"""
        rows = (
            self.db.query(TimeDepositRecord)
            .join(CustomerRecord, TimeDepositRecord.customer_id == CustomerRecord.id)
            .filter(CustomerRecord.account_number == account_number)
            .order_by(TimeDepositRecord.id)
            .all()
        )
        return [_to_deposit(row) for row in rows]

    def save_deposit(self, deposit: TimeDeposit) -> TimeDeposit:
        """Persist a deposit whose derived fields are already computed.

        The same-day terms constraint turns a lost race between two identical
        registrations into DuplicateDepositError.
        """
        db_deposit = TimeDepositRecord(
            customer_id=deposit.customer_id,
            amount=deposit.amount,
            interest_rate=deposit.interest_rate,
            term_days=deposit.term_days,
            application_date=deposit.application_date,
            maturity_date=deposit.maturity_date,
            interest_earned=deposit.interest_earned,
            status=deposit.status,
        )
        self.db.add(db_deposit)
        try:
            self.db.flush()
        except IntegrityError as e:
            if "unique" not in str(e.orig).lower():
                raise
            raise DuplicateDepositError() from e
        return _to_deposit(db_deposit)

    def find_all_deposits(self) -> List[DepositDetail]:
        """Fetch all deposits joined with their owning customer"""
        rows = (
            self.db.query(TimeDepositRecord, CustomerRecord)
            .join(CustomerRecord, TimeDepositRecord.customer_id == CustomerRecord.id)
            .order_by(TimeDepositRecord.id)
            .all()
        )
        return [
            DepositDetail(
                id=deposit.id,
                account_number=customer.account_number,
                customer_name=customer.customer_name,
                amount=deposit.amount,
                interest_rate=deposit.interest_rate,
                term_days=deposit.term_days,
                application_date=deposit.application_date,
                maturity_date=deposit.maturity_date,
                interest_earned=deposit.interest_earned,
                status=deposit.status,
            )
            for deposit, customer in rows
        ]

"""Pytest fixtures for testing"""

import os

# Point settings at SQLite before the application modules build their engine
TEST_DATABASE_URL = "sqlite:///./test_time_deposits.db"
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)

import pytest
from datetime import date
from decimal import Decimal
from typing import Generator, List, Optional
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from time_deposit.api.main import create_app
from time_deposit.domain.exceptions import CustomerAlreadyExistsError
from time_deposit.domain.models import Customer, DepositDetail, DepositRequest, TimeDeposit
from time_deposit.infrastructure.database.models import Base
from time_deposit.infrastructure.database.session import build_engine, get_db

# Test database
engine = build_engine(TEST_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


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
def session_factory(db: Session) -> sessionmaker:
    """Factory for extra sessions on the test database, e.g. a competing transaction"""
    return TestingSessionLocal


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


class InMemoryUnitOfWork:
    """
    In-memory stand-in for SqlAlchemyUnitOfWork.

    Writes are staged until commit() and discarded by rollback(), so tests can
    assert that rejected registrations leave nothing behind.
    """

    def __init__(self):
        self.committed_customers: List[Customer] = []
        self.committed_deposits: List[TimeDeposit] = []
        self.pending_customers: List[Customer] = []
        self.pending_deposits: List[TimeDeposit] = []
        self.commits = 0
        self.rollbacks = 0
        self._next_id = 1
        # Customer another transaction inserts right before our next save_customer
        self.concurrent_customer: Optional[Customer] = None
        self.customers = _InMemoryCustomers(self)
        self.deposits = _InMemoryDeposits(self)

    def next_id(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    def all_customers(self) -> List[Customer]:
        return self.committed_customers + self.pending_customers

    def all_deposits(self) -> List[TimeDeposit]:
        return self.committed_deposits + self.pending_deposits

    def seed_deposit(self, customer: Customer, amount: str, rate: str, term_days: int, application_date: date) -> None:
        """Insert an already committed deposit"""
        self.committed_deposits.append(
            TimeDeposit(
                id=self.next_id(),
                customer_id=customer.id,
                amount=Decimal(amount),
                interest_rate=Decimal(rate),
                term_days=term_days,
                application_date=application_date,
                maturity_date=application_date,
                interest_earned=Decimal("0.00"),
            )
        )

    def seed_customer(self, account_number: str, customer_name: str) -> Customer:
        """Insert an already committed customer"""
        customer = Customer(id=self.next_id(), account_number=account_number, customer_name=customer_name)
        self.committed_customers.append(customer)
        return customer

    def commit(self) -> None:
        self.committed_customers.extend(self.pending_customers)
        self.committed_deposits.extend(self.pending_deposits)
        self.pending_customers = []
        self.pending_deposits = []
        self.commits += 1

    def rollback(self) -> None:
        self.pending_customers = []
        self.pending_deposits = []
        self.rollbacks += 1


class _InMemoryCustomers:
    def __init__(self, uow: InMemoryUnitOfWork):
        self.uow = uow
        self.saves = 0
        self.locked: List[str] = []

    def find_customer_by_account_number(self, account_number: str, for_update: bool = False) -> Optional[Customer]:
        if for_update:
            self.locked.append(account_number)
        return next((c for c in self.uow.all_customers() if c.account_number == account_number), None)

    def save_customer(self, customer: Customer) -> Customer:
        self.saves += 1
        if self.uow.concurrent_customer is not None:
            winner, self.uow.concurrent_customer = self.uow.concurrent_customer, None
            self.uow.seed_customer(winner.account_number, winner.customer_name)
        if self.find_customer_by_account_number(customer.account_number):
            raise CustomerAlreadyExistsError(customer.account_number)
        saved = Customer(id=self.uow.next_id(), account_number=customer.account_number, customer_name=customer.customer_name)
        self.uow.pending_customers.append(saved)
        return saved


class _InMemoryDeposits:
    def __init__(self, uow: InMemoryUnitOfWork):
        self.uow = uow
        self.lookups = 0

    def _owner(self, deposit: TimeDeposit) -> Customer:
        return next(c for c in self.uow.all_customers() if c.id == deposit.customer_id)

    def find_deposits_by_account_number(self, account_number: str) -> List[TimeDeposit]:
        self.lookups += 1
        return [d for d in self.uow.all_deposits() if self._owner(d).account_number == account_number]

    def save_deposit(self, deposit: TimeDeposit) -> TimeDeposit:
        deposit.id = self.uow.next_id()
        self.uow.pending_deposits.append(deposit)
        return deposit

    def find_all_deposits(self) -> List[DepositDetail]:
        details = []
        for d in self.uow.committed_deposits:
            owner = self._owner(d)
            details.append(
                DepositDetail(
                    id=d.id,
                    account_number=owner.account_number,
                    customer_name=owner.customer_name,
                    amount=d.amount,
                    interest_rate=d.interest_rate,
                    term_days=d.term_days,
                    application_date=d.application_date,
                    maturity_date=d.maturity_date,
                    interest_earned=d.interest_earned,
                    status=d.status,
                )
            )
        return details


@pytest.fixture
def uow() -> InMemoryUnitOfWork:
    """Empty in-memory unit of work"""
    return InMemoryUnitOfWork()


@pytest.fixture
def registration_date() -> date:
    """Fixed 'today' for registrations"""
    return date(2024, 3, 1)


@pytest.fixture
def deposit_request() -> DepositRequest:
    """Standard registration request"""
    return DepositRequest(
        account_number="12345678",
        customer_name="John Doe",
        amount=Decimal("1000.00"),
        interest_rate=Decimal("5.00"),
        term_days=90,
    )

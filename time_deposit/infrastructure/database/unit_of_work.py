"""Transaction scope shared by the customer and deposit repositories"""

from sqlalchemy.orm import Session
from time_deposit.infrastructure.database.repositories import CustomerRepository, DepositRepository


class SqlAlchemyUnitOfWork:
    """Binds both repositories to one session so their writes commit together"""

    def __init__(self, db: Session):
        self.db = db
        self.customers = CustomerRepository(db)
        self.deposits = DepositRepository(db)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

"""SQLAlchemy ORM models for customers and their time deposits"""

from sqlalchemy import Column, String, Integer, Numeric, DateTime, Date, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class CustomerRecord(Base):
    """Customer identity, unique by account number"""

    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_number = Column(String(20), nullable=False, unique=True, index=True)
    customer_name = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class TimeDepositRecord(Base):
    """Fixed-term deposit; rows are removed with their customer"""

    __tablename__ = "time_deposits"
    __table_args__ = (
        # At most one deposit per customer with the same terms on the same day
        UniqueConstraint(
            "customer_id",
            "amount",
            "interest_rate",
            "term_days",
            "application_date",
            name="uq_time_deposit_same_day_terms",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    interest_rate = Column(Numeric(4, 2), nullable=False)
    term_days = Column(Integer, nullable=False)
    application_date = Column(Date, nullable=False)
    maturity_date = Column(Date, nullable=False)
    interest_earned = Column(Numeric(12, 2), nullable=False)
    status = Column(Text, nullable=False, default="active")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

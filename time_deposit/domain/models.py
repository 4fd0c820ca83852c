"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from time_deposit.utils.date_utils import to_iso_date

ACTIVE_STATUS = "active"


@dataclass
class DepositRequest:
    """Pre-validated registration request"""

    account_number: str
    customer_name: str
    amount: Decimal
    interest_rate: Decimal  # annual percentage, e.g. 5.00 for 5%
    term_days: int


@dataclass
class Customer:
    """Owner of one or more time deposits, keyed by account number"""

    account_number: str
    customer_name: str
    id: Optional[int] = None


@dataclass
class MaturityQuote:
    """Output of the interest calculator"""

    maturity_date: date
    interest_earned: Decimal


@dataclass
class TimeDeposit:
    """Fixed-term deposit; references its owner by id only"""

    customer_id: int
    amount: Decimal
    interest_rate: Decimal
    term_days: int
    application_date: date
    maturity_date: date
    interest_earned: Decimal
    status: str = ACTIVE_STATUS
    id: Optional[int] = None

    @property
    def formatted_application_date(self) -> Optional[str]:
        return to_iso_date(self.application_date)

    @property
    def formatted_maturity_date(self) -> Optional[str]:
        return to_iso_date(self.maturity_date)


@dataclass
class CustomerDeposits:
    """Registration result: the owner and every deposit it holds"""

    customer: Customer
    deposits: List[TimeDeposit] = field(default_factory=list)


@dataclass
class DepositDetail:
    """Deposit joined with its owner's identity, for reporting"""

    id: int
    account_number: str
    customer_name: str
    amount: Decimal
    interest_rate: Decimal
    term_days: int
    application_date: date
    maturity_date: date
    interest_earned: Decimal
    status: str

    @property
    def formatted_application_date(self) -> Optional[str]:
        return to_iso_date(self.application_date)

    @property
    def formatted_maturity_date(self) -> Optional[str]:
        return to_iso_date(self.maturity_date)

"""Pydantic schemas for API request/response validation"""

from datetime import date
from decimal import Decimal
from typing import Annotated, List, Optional
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel
from time_deposit.domain.models import Customer, CustomerDeposits, DepositDetail, DepositRequest, TimeDeposit

# Money and rates go out as JSON numbers; Python-side dumps keep the Decimal
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Serializes fields as camelCase while accepting snake_case too"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimeDepositRequest(CamelModel):
    """Request body for POST /api/time-deposits"""

    account_number: str = Field(..., min_length=8, max_length=20, pattern=r"^[0-9]+$", description="Digits only")
    customer_name: str = Field(..., min_length=2, max_length=100, pattern=r".*\S.*", description="Not blank")
    amount: Decimal = Field(..., ge=Decimal("100.00"), max_digits=12, decimal_places=2)
    interest_rate: Decimal = Field(..., ge=Decimal("0.01"), le=Decimal("20.00"), max_digits=4, decimal_places=2)
    term_days: int = Field(..., ge=30, le=3650)

    def to_domain(self) -> DepositRequest:
        return DepositRequest(
            account_number=self.account_number,
            customer_name=self.customer_name,
            amount=self.amount,
            interest_rate=self.interest_rate,
            term_days=self.term_days,
        )


class CustomerSchema(CamelModel):
    """Customer identity fields"""

    id: int
    account_number: str
    customer_name: str

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerSchema":
        return cls(id=customer.id, account_number=customer.account_number, customer_name=customer.customer_name)


class TimeDepositSchema(CamelModel):
    """Single deposit in a registration response"""

    id: int
    amount: JsonDecimal
    interest_rate: JsonDecimal
    term_days: int
    application_date: date
    maturity_date: date
    interest_earned: JsonDecimal
    status: str
    formatted_application_date: Optional[str] = None
    formatted_maturity_date: Optional[str] = None

    @classmethod
    def from_domain(cls, deposit: TimeDeposit) -> "TimeDepositSchema":
        return cls(
            id=deposit.id,
            amount=deposit.amount,
            interest_rate=deposit.interest_rate,
            term_days=deposit.term_days,
            application_date=deposit.application_date,
            maturity_date=deposit.maturity_date,
            interest_earned=deposit.interest_earned,
            status=deposit.status,
            formatted_application_date=deposit.formatted_application_date,
            formatted_maturity_date=deposit.formatted_maturity_date,
        )


class CustomerDepositResponse(CamelModel):
    """Response for POST /api/time-deposits"""

    customer: CustomerSchema
    deposits: List[TimeDepositSchema]

    @classmethod
    def from_domain(cls, result: CustomerDeposits) -> "CustomerDepositResponse":
        return cls(
            customer=CustomerSchema.from_domain(result.customer),
            deposits=[TimeDepositSchema.from_domain(d) for d in result.deposits],
        )


class TimeDepositDetailResponse(CamelModel):
    """Single item of GET /api/time-deposits"""

    id: int
    account_number: str
    customer_name: str
    amount: JsonDecimal
    interest_rate: JsonDecimal
    term_days: int
    application_date: date
    maturity_date: date
    interest_earned: JsonDecimal
    status: str
    formatted_application_date: Optional[str] = None
    formatted_maturity_date: Optional[str] = None

    @classmethod
    def from_domain(cls, detail: DepositDetail) -> "TimeDepositDetailResponse":
        return cls(
            id=detail.id,
            account_number=detail.account_number,
            customer_name=detail.customer_name,
            amount=detail.amount,
            interest_rate=detail.interest_rate,
            term_days=detail.term_days,
            application_date=detail.application_date,
            maturity_date=detail.maturity_date,
            interest_earned=detail.interest_earned,
            status=detail.status,
            formatted_application_date=detail.formatted_application_date,
            formatted_maturity_date=detail.formatted_maturity_date,
        )
